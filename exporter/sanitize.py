"""
Removal of server-managed annotations and labels from exported objects.
Exported objects must not carry identity or timestamp metadata that would
clash when they are re-applied to another cluster.
"""

from typing import Dict, List, Optional

from serving_spec.constants import (
    CREATOR_ANNOTATION_KEY,
    LAST_MODIFIER_ANNOTATION_KEY,
    LAST_APPLIED_CONFIGURATION_ANNOTATION_KEY,
    LAST_PINNED_ANNOTATION_KEY,
    ROUTING_STATE_MODIFIED_ANNOTATION_KEY,
    UPDATE_TIMESTAMP_ANNOTATION_KEY,
    CONFIGURATION_UID_LABEL_KEY,
    SERVICE_UID_LABEL_KEY,
)
from serving_spec.models import Service, Revision, RevisionTemplateSpec

IGNORED_SERVICE_ANNOTATIONS = [
    CREATOR_ANNOTATION_KEY,
    LAST_MODIFIER_ANNOTATION_KEY,
    LAST_APPLIED_CONFIGURATION_ANNOTATION_KEY,
]

IGNORED_REVISION_ANNOTATIONS = [
    LAST_PINNED_ANNOTATION_KEY,
    CREATOR_ANNOTATION_KEY,
    ROUTING_STATE_MODIFIED_ANNOTATION_KEY,
    UPDATE_TIMESTAMP_ANNOTATION_KEY,
]

IGNORED_SERVICE_LABELS = [
    CONFIGURATION_UID_LABEL_KEY,
    SERVICE_UID_LABEL_KEY,
]

IGNORED_REVISION_LABELS = [
    CONFIGURATION_UID_LABEL_KEY,
    SERVICE_UID_LABEL_KEY,
]

def _delete_keys(values: Optional[Dict[str, str]], keys: List[str]):
    if not values:
        return
    for key in keys:
        values.pop(key, None)

def strip_ignored_annotations_from_service(svc: Service):
    _delete_keys(svc.metadata.annotations, IGNORED_SERVICE_ANNOTATIONS)

def strip_ignored_labels_from_service(svc: Service):
    _delete_keys(svc.metadata.labels, IGNORED_SERVICE_LABELS)

def strip_ignored_annotations_from_revision(revision: Revision):
    _delete_keys(revision.metadata.annotations, IGNORED_REVISION_ANNOTATIONS)

def strip_ignored_labels_from_revision(revision: Revision):
    _delete_keys(revision.metadata.labels, IGNORED_REVISION_LABELS)

def strip_ignored_annotations_from_revision_template(template: RevisionTemplateSpec):
    _delete_keys(template.metadata.annotations, IGNORED_REVISION_ANNOTATIONS)

def strip_ignored_labels_from_revision_template(template: RevisionTemplateSpec):
    _delete_keys(template.metadata.labels, IGNORED_REVISION_LABELS)

def sanitize_service(svc: Service):
    """Strip service-level annotations and labels in place."""
    strip_ignored_annotations_from_service(svc)
    strip_ignored_labels_from_service(svc)

def sanitize_revision(revision: Revision):
    """Strip revision-level annotations and labels in place."""
    strip_ignored_annotations_from_revision(revision)
    strip_ignored_labels_from_revision(revision)

def sanitize_revision_template(template: RevisionTemplateSpec):
    """Strip a service template with the revision deny-lists, in place."""
    strip_ignored_annotations_from_revision_template(template)
    strip_ignored_labels_from_revision_template(template)

def sanitized_revision_annotations(revision: Revision) -> Optional[Dict[str, str]]:
    """Return a stripped copy of a revision's annotations, leaving the revision as is."""
    if revision.metadata.annotations is None:
        return None
    annotations = dict(revision.metadata.annotations)
    _delete_keys(annotations, IGNORED_REVISION_ANNOTATIONS)
    return annotations
