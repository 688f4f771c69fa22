"""
Builders for the service and revision shapes written to an export.
Every builder works on deep copies, so one live service can feed any number
of reconstructions.
"""

import copy
import logging

from serving_spec.models import (
    ObjectMeta, Revision, RevisionTemplateSpec, Service, ServiceSpec
)
from .sanitize import (
    sanitize_service,
    sanitize_revision,
    sanitize_revision_template,
    sanitized_revision_annotations,
    strip_ignored_labels_from_revision_template,
)

logger = logging.getLogger(__name__)

def _service_shell(latest_svc: Service) -> Service:
    """New service carrying only the identity metadata of the live one."""
    return Service(
        apiVersion=latest_svc.apiVersion,
        kind=latest_svc.kind,
        metadata=ObjectMeta(
            name=latest_svc.metadata.name,
            labels=copy.deepcopy(latest_svc.metadata.labels),
            annotations=copy.deepcopy(latest_svc.metadata.annotations),
        ),
    )

def export_latest_service(latest_svc: Service, with_routes: bool) -> Service:
    """
    Build the current state of a service for export.

    With routes, the traffic block is copied and every target following the
    latest revision is pinned to the current latest ready revision so the
    export does not depend on the cluster it came from.
    """
    exported = _service_shell(latest_svc)
    exported.spec = ServiceSpec(
        template=RevisionTemplateSpec(
            metadata=latest_svc.spec.template.metadata.model_copy(deep=True),
            spec=copy.deepcopy(latest_svc.spec.template.spec),
        )
    )

    if with_routes and latest_svc.spec.traffic is not None:
        traffic = [target.model_copy(deep=True) for target in latest_svc.spec.traffic]
        for target in traffic:
            if target.latestRevision:
                target.revisionName = latest_svc.latest_ready_revision_name
        exported.spec.traffic = traffic

    sanitize_service(exported)
    sanitize_revision_template(exported.spec.template)
    return exported

def export_revision(revision: Revision) -> Revision:
    """Bare revision shape: name, labels, annotations and spec only."""
    exported = Revision(
        apiVersion=revision.apiVersion,
        kind=revision.kind,
        metadata=ObjectMeta(
            name=revision.metadata.name,
            labels=copy.deepcopy(revision.metadata.labels),
            annotations=copy.deepcopy(revision.metadata.annotations),
        ),
        spec=copy.deepcopy(revision.spec),
    )
    sanitize_revision(exported)
    return exported

def construct_service_from_revision(latest_svc: Service, revision: Revision) -> Service:
    """
    Build the service as it looked when the given revision was stamped.

    The template spec comes from the revision. The template metadata comes
    from the live template, with its annotations replaced by the revision's
    (stripped) annotations, its name set to the revision name and its
    server-managed labels removed.
    """
    template_meta = latest_svc.spec.template.metadata.model_copy(deep=True)
    template_meta.annotations = sanitized_revision_annotations(revision)
    template_meta.name = revision.metadata.name

    exported = _service_shell(latest_svc)
    exported.spec = ServiceSpec(
        template=RevisionTemplateSpec(
            metadata=template_meta,
            spec=copy.deepcopy(revision.spec),
        )
    )
    sanitize_service(exported)
    strip_ignored_labels_from_revision_template(exported.spec.template)
    logger.debug(f"Reconstructed service {exported.name} at revision {revision.name}")
    return exported
