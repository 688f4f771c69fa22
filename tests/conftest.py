"""
Shared fixtures for the export tests: factories for services and revisions
and a mock serving client.
"""

from unittest.mock import MagicMock

import pytest

from serving_spec.constants import CONFIGURATION_GENERATION_LABEL_KEY, SERVICE_LABEL_KEY
from serving_spec.models import Revision, RevisionList, Service

def _revision(name, generation=None, image=None, annotations=None, labels=None):
    revision_labels = {SERVICE_LABEL_KEY: "foo"}
    if generation is not None:
        revision_labels[CONFIGURATION_GENERATION_LABEL_KEY] = str(generation)
    revision_labels.update(labels or {})
    return Revision.from_dict({
        "apiVersion": "serving.knative.dev/v1",
        "kind": "Revision",
        "metadata": {
            "name": name,
            "namespace": "default",
            "uid": f"uid-{name}",
            "labels": revision_labels,
            "annotations": dict(annotations or {}),
        },
        "spec": {
            "containerConcurrency": 0,
            "containers": [{"image": image or f"gcr.io/foo/{name}"}],
        },
        "status": {"observedGeneration": 1},
    })

def _service(name="foo", template_name="foo-00002", image="gcr.io/foo/foo-00002",
             traffic=None, latest_ready="foo-00002", labels=None, annotations=None,
             template_annotations=None, template_labels=None):
    data = {
        "apiVersion": "serving.knative.dev/v1",
        "kind": "Service",
        "metadata": {
            "name": name,
            "namespace": "default",
            "uid": "8a5d9c3e",
            "resourceVersion": "1234",
            "generation": 2,
            "labels": dict(labels or {}),
            "annotations": dict(annotations or {}),
        },
        "spec": {
            "template": {
                "metadata": {
                    "name": template_name,
                    "labels": dict(template_labels or {}),
                    "annotations": dict(template_annotations or {}),
                },
                "spec": {
                    "containerConcurrency": 0,
                    "containers": [{"image": image}],
                },
            },
        },
        "status": {
            "latestReadyRevisionName": latest_ready,
            "latestCreatedRevisionName": latest_ready,
            "url": f"http://{name}.default.example.com",
        },
    }
    if traffic is not None:
        data["spec"]["traffic"] = traffic
    return Service.from_dict(data)

@pytest.fixture
def make_revision():
    """Factory for revisions: make_revision(name, generation=None, ...)."""
    return _revision

@pytest.fixture
def make_service():
    """Factory for live services."""
    return _service

@pytest.fixture
def two_revision_service():
    """Service foo splitting traffic between foo-00001 and the current foo-00002."""
    return _service(traffic=[
        {"revisionName": "foo-00001", "percent": 50},
        {"revisionName": "foo-00002", "percent": 50},
    ])

@pytest.fixture
def two_revisions():
    return [
        _revision("foo-00002", generation=2),
        _revision("foo-00001", generation=1),
    ]

@pytest.fixture
def mock_client():
    """Mock serving client; set list_revisions.return_value per test."""
    client = MagicMock()
    client.list_revisions.return_value = RevisionList(items=[])
    return client

def revision_list(revisions):
    return RevisionList(items=revisions)

@pytest.fixture
def client_with():
    """Build a mock client whose revision listing returns the given revisions."""
    def _build(revisions):
        client = MagicMock()
        client.list_revisions.return_value = revision_list(revisions)
        return client
    return _build
