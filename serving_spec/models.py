"""
Pydantic models for the Knative serving objects handled by the exporter.
Mirrors the Kubernetes JSON shape of services, revisions and the kn export
envelope. Unknown fields are kept so that pod specs and server-populated
metadata pass through unchanged.
"""

from typing import Dict, List, Optional, Any
from pydantic import BaseModel, ConfigDict, Field

from .constants import (
    SERVING_API_VERSION,
    EXPORT_API_VERSION,
    EXPORT_KIND,
    LIST_API_VERSION,
    LIST_KIND,
)

class KubeModel(BaseModel):
    """Base for every object; keeps fields the schema does not name."""
    model_config = ConfigDict(extra="allow")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)

# Base models

class ObjectMeta(KubeModel):
    """Standard object metadata."""
    name: Optional[str] = Field(None, description="Object name")
    namespace: Optional[str] = Field(None, description="Object namespace")
    labels: Optional[Dict[str, str]] = Field(None, description="Key-value labels")
    annotations: Optional[Dict[str, str]] = Field(None, description="Key-value annotations")

class TrafficTarget(KubeModel):
    """A single entry of a service's traffic block."""
    tag: Optional[str] = Field(None, description="Route tag")
    revisionName: Optional[str] = Field(None, description="Pinned revision")
    configurationName: Optional[str] = Field(None, description="Configuration to follow")
    latestRevision: Optional[bool] = Field(None, description="Follow the latest ready revision")
    percent: Optional[int] = Field(None, ge=0, le=100, description="Share of traffic")
    url: Optional[str] = Field(None, description="Tag URL, set by the server")

class RevisionTemplateSpec(KubeModel):
    """Template from which revisions are stamped."""
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: Dict[str, Any] = Field(default_factory=dict, description="Pod/runtime spec")

class ServiceSpec(KubeModel):
    """Service template plus its route spec."""
    template: RevisionTemplateSpec = Field(default_factory=RevisionTemplateSpec)
    traffic: Optional[List[TrafficTarget]] = Field(None, description="Traffic targets")

class ServiceStatus(KubeModel):
    latestReadyRevisionName: Optional[str] = None
    latestCreatedRevisionName: Optional[str] = None
    url: Optional[str] = None
    observedGeneration: Optional[int] = None

class Service(KubeModel):
    """Knative service."""
    apiVersion: str = Field(SERVING_API_VERSION, description="API version")
    kind: str = Field("Service", description="Object kind")
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: ServiceSpec = Field(default_factory=ServiceSpec)
    status: Optional[ServiceStatus] = None

    @property
    def name(self) -> Optional[str]:
        return self.metadata.name

    @property
    def latest_ready_revision_name(self) -> Optional[str]:
        if self.status is None:
            return None
        return self.status.latestReadyRevisionName

class Revision(KubeModel):
    """Immutable snapshot of a service template."""
    apiVersion: str = Field(SERVING_API_VERSION, description="API version")
    kind: str = Field("Revision", description="Object kind")
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: Dict[str, Any] = Field(default_factory=dict, description="Pod/runtime spec")
    status: Optional[Dict[str, Any]] = None

    @property
    def name(self) -> Optional[str]:
        return self.metadata.name

class RevisionList(KubeModel):
    apiVersion: str = SERVING_API_VERSION
    kind: str = "RevisionList"
    metadata: Optional[Dict[str, Any]] = None
    items: List[Revision] = Field(default_factory=list)

# Export envelopes

class ServiceList(KubeModel):
    """Generic list wrapping one service per replay step."""
    apiVersion: str = LIST_API_VERSION
    kind: str = LIST_KIND
    items: List[Service] = Field(default_factory=list)

class ExportSpec(KubeModel):
    service: Service = Field(..., description="Latest state of the service")
    revisions: List[Revision] = Field(default_factory=list, description="Routed historical revisions, oldest first")

class Export(KubeModel):
    """kn import envelope."""
    apiVersion: str = EXPORT_API_VERSION
    kind: str = EXPORT_KIND
    spec: ExportSpec

def parse_service(data: Dict[str, Any]) -> Service:
    """
    Validate and parse a service object.

    Raises:
        ValueError: If the payload is not a valid service
    """
    try:
        return Service.from_dict(data)
    except Exception as e:
        raise ValueError(f"Invalid service object: {e}")

def parse_revision_list(data: Dict[str, Any]) -> RevisionList:
    """
    Validate and parse a revision list.

    Raises:
        ValueError: If the payload is not a valid revision list
    """
    try:
        return RevisionList.from_dict(data)
    except Exception as e:
        raise ValueError(f"Invalid revision list: {e}")
