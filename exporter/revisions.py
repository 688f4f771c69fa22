"""
Selection and ordering of the revisions to export.
Only revisions named by the service's traffic block are exported, in the
order they were created.
"""

import re
import logging
from functools import cmp_to_key
from typing import Dict, List, Optional, Set, Tuple

from serving_spec.constants import CONFIGURATION_GENERATION_LABEL_KEY
from serving_spec.models import Service, Revision
from .client import with_service
from .errors import NotFoundError

logger = logging.getLogger(__name__)

_GENERATION_RE = re.compile(r"[+-]?[0-9]+")

def get_routed_revisions(latest_svc: Service) -> Set[str]:
    """Names of the revisions pinned by the traffic block.

    Targets that only follow the latest revision contribute nothing here.
    """
    routed = set()
    for traffic in latest_svc.spec.traffic or []:
        if traffic.revisionName:
            routed.add(traffic.revisionName)
    return routed

def parse_generation(revision: Revision) -> Optional[int]:
    """Configuration generation of a revision, or None when missing or not numeric."""
    labels: Dict[str, str] = revision.metadata.labels or {}
    value = labels.get(CONFIGURATION_GENERATION_LABEL_KEY)
    if value is None or not _GENERATION_RE.fullmatch(value):
        return None
    return int(value)

def _revision_less(a: Revision, b: Revision) -> bool:
    a_name = a.name or ""
    b_name = b.name or ""

    # Falls back to descending names when either generation is unusable
    a_gen = parse_generation(a)
    if a_gen is None:
        return a_name > b_name
    b_gen = parse_generation(b)
    if b_gen is None:
        return a_name > b_name

    if a_gen != b_gen:
        return a_gen < b_gen
    return a_name > b_name

def _compare_revisions(a: Revision, b: Revision) -> int:
    if _revision_less(a, b):
        return -1
    if _revision_less(b, a):
        return 1
    return 0

def sort_revisions(revisions: List[Revision]):
    """Sort revisions in place by generation, then by name (descending)."""
    revisions.sort(key=cmp_to_key(_compare_revisions))

def get_revisions_to_export(latest_svc: Service, client) -> Tuple[List[Revision], Set[str]]:
    """
    Fetch the revision history of a service and work out which revisions are routed.

    Args:
        latest_svc: The live service
        client: Anything with a ``list_revisions(*filters)`` method

    Returns:
        The sorted revision list and the set of routed revision names

    Raises:
        NotFoundError: If the service has no revisions at all
    """
    routed = get_routed_revisions(latest_svc)

    revision_list = client.list_revisions(with_service(latest_svc.name))
    revisions = list(revision_list.items)
    if not revisions:
        raise NotFoundError(f"no revisions found for the service {latest_svc.name}")

    sort_revisions(revisions)
    logger.debug(
        f"Revisions of {latest_svc.name} in export order: "
        f"{[r.name for r in revisions]}, routed: {sorted(routed)}"
    )
    return revisions, routed
