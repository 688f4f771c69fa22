"""
Knative serving object models for kn service export.
"""

from .models import (
    ObjectMeta, TrafficTarget, RevisionTemplateSpec, ServiceSpec,
    ServiceStatus, Service, Revision, RevisionList, ServiceList,
    Export, ExportSpec, parse_service, parse_revision_list
)

__all__ = [
    'ObjectMeta', 'TrafficTarget', 'RevisionTemplateSpec', 'ServiceSpec',
    'ServiceStatus', 'Service', 'Revision', 'RevisionList', 'ServiceList',
    'Export', 'ExportSpec', 'parse_service', 'parse_revision_list'
]
