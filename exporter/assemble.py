"""
Assembly of the two export artifacts: the kn import envelope and the
replay list of services.
"""

import logging
from enum import Enum
from typing import List, Union

from serving_spec.models import Export, ExportSpec, Revision, Service, ServiceList
from .reconstruct import (
    export_latest_service,
    export_revision,
    construct_service_from_revision,
)
from .revisions import get_revisions_to_export

logger = logging.getLogger(__name__)

class ExportMode(str, Enum):
    """Shape of the exported history."""
    REPLAY = "replay"
    EXPORT = "export"

def _is_historical(revision: Revision, routed: set, latest_svc: Service) -> bool:
    """Routed, and not the revision the live template already describes."""
    name = revision.name
    if name not in routed:
        return False
    return name != latest_svc.spec.template.metadata.name

def export_service_list_for_replay(latest_svc: Service, client, with_revisions: bool) -> Union[ServiceList, Service]:
    """
    Build one service per routed historical revision, followed by the latest service.

    Without revisions the latest service is returned on its own, not wrapped
    in a list.
    """
    if not with_revisions:
        return export_latest_service(latest_svc, False)

    revisions, routed = get_revisions_to_export(latest_svc, client)

    items: List[Service] = []
    for revision in revisions:
        if _is_historical(revision, routed, latest_svc):
            items.append(construct_service_from_revision(latest_svc, revision))
        else:
            logger.debug(f"Skipping revision {revision.name}: not routed or current")

    # Traffic only makes sense when there is more than one revision
    items.append(export_latest_service(latest_svc, len(revisions) > 1))

    logger.info(f"Exported {len(items)} service(s) for replay of {latest_svc.name}")
    return ServiceList(items=items)

def export_for_kn_import(latest_svc: Service, client, with_revisions: bool) -> Export:
    """Build the kn import envelope for a service and, optionally, its routed history."""
    exported_revisions: List[Revision] = []
    revision_history_count = 0
    if with_revisions:
        revisions, routed = get_revisions_to_export(latest_svc, client)
        for revision in revisions:
            if _is_historical(revision, routed, latest_svc):
                exported_revisions.append(export_revision(revision))
            else:
                logger.debug(f"Skipping revision {revision.name}: not routed or current")
        revision_history_count = len(revisions)

    logger.info(f"Exported {latest_svc.name} with {len(exported_revisions)} historical revision(s)")
    return Export(
        spec=ExportSpec(
            service=export_latest_service(latest_svc, revision_history_count > 1),
            revisions=exported_revisions,
        )
    )

def export_service(latest_svc: Service, client, with_revisions: bool, mode=ExportMode.EXPORT):
    """Export a service in the requested mode; anything but replay is import mode."""
    svc = latest_svc.model_copy(deep=True)
    if mode == ExportMode.REPLAY:
        return export_service_list_for_replay(svc, client, with_revisions)
    return export_for_kn_import(svc, client, with_revisions)
