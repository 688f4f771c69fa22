"""
kn service export

Turns a live Knative service and its routed revision history into portable
export artifacts.

Components:
- sanitize: strips server-managed annotations and labels
- revisions: picks and orders the revisions to export
- reconstruct: builds latest and historical service shapes
- assemble: kn import envelope and replay list
- client: read-only serving API client
- printer: YAML/JSON rendering
"""

from .errors import ExportError, UsageError, NotFoundError, UpstreamError
from .config import Settings, load_settings
from .client import ServingClient, with_service
from .revisions import get_routed_revisions, sort_revisions, get_revisions_to_export
from .reconstruct import export_latest_service, export_revision, construct_service_from_revision
from .assemble import ExportMode, export_service, export_for_kn_import, export_service_list_for_replay
from .printer import render, OUTPUT_FORMATS

__version__ = "1.0.0"

__all__ = [
    "ExportError",
    "UsageError",
    "NotFoundError",
    "UpstreamError",
    "Settings",
    "load_settings",
    "ServingClient",
    "with_service",
    "get_routed_revisions",
    "sort_revisions",
    "get_revisions_to_export",
    "export_latest_service",
    "export_revision",
    "construct_service_from_revision",
    "ExportMode",
    "export_service",
    "export_for_kn_import",
    "export_service_list_for_replay",
    "render",
    "OUTPUT_FORMATS",
]
