"""Pod models."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from kubedeploy.constants.defaults import DEFAULT_NAMESPACE
from kubedeploy.constants.enums import PodPhase
from kubedeploy.models.core.workload_info import EnvVar, ResourceQuantities


class Pod(BaseModel):
    """Observed runtime unit, read-only from the console's perspective."""

    name: str
    namespace: str = DEFAULT_NAMESPACE
    status: str = ""
    phase: PodPhase = PodPhase.UNKNOWN
    image: str = ""
    restarts: int = 0
    created_at: str = ""
    labels: dict[str, str] | None = None

    @field_validator("phase", mode="before")
    @classmethod
    def _coerce_phase(cls, value: Any) -> Any:
        if isinstance(value, PodPhase):
            return value
        try:
            return PodPhase(value)
        except ValueError:
            return PodPhase.UNKNOWN


class PodCreateRequest(BaseModel):
    """Quick single-pod create request."""

    name: str
    namespace: str = DEFAULT_NAMESPACE
    image: str
    replicas: int = 1
    resources: ResourceQuantities = Field(default_factory=ResourceQuantities)
    ports: list[int] = Field(default_factory=list)
    env: list[EnvVar] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the backend's JSON shape."""
        return self.model_dump(mode="json", exclude_none=True)
