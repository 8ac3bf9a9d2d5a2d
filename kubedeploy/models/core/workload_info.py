"""Workload models: create requests and observed summaries."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from kubedeploy.constants.defaults import DEFAULT_NAMESPACE
from kubedeploy.constants.enums import Protocol


class ResourceQuantities(BaseModel):
    """CPU and memory quantities, opaque to the client (e.g. ``100m``, ``128Mi``)."""

    cpu: str = ""
    memory: str = ""


class ResourceRequirements(BaseModel):
    """Resource requests and limits for the workload container."""

    requests: ResourceQuantities = Field(default_factory=ResourceQuantities)
    limits: ResourceQuantities = Field(default_factory=ResourceQuantities)


class ContainerPort(BaseModel):
    """A named container port."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    container_port: int = Field(alias="containerPort")
    protocol: Protocol = Protocol.TCP


class EnvVar(BaseModel):
    """An environment variable pair."""

    name: str = ""
    value: str = ""


class WorkloadSpec(BaseModel):
    """Create request for the workload collection."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    namespace: str = DEFAULT_NAMESPACE
    image: str
    replicas: int = Field(default=1, ge=0)
    resources: ResourceRequirements = Field(default_factory=ResourceRequirements)
    ports: list[ContainerPort] = Field(default_factory=list)
    env: list[EnvVar] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the backend's JSON shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class WorkloadSummary(BaseModel):
    """Workload row as reported by the backend."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    namespace: str = DEFAULT_NAMESPACE
    replicas: int = 0
    available_replicas: int = Field(default=0, alias="availableReplicas")
    ready_replicas: int = Field(default=0, alias="readyReplicas")
    created_at: str = ""
    image: str = ""
    labels: dict[str, str] = Field(default_factory=dict)

    @property
    def is_healthy(self) -> bool:
        """Ready count matches the desired count and at least one replica is desired."""
        return self.ready_replicas == self.replicas and self.replicas > 0
