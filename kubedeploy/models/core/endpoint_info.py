"""Network endpoint models: create requests and observed summaries."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from kubedeploy.constants.defaults import DEFAULT_NAMESPACE
from kubedeploy.constants.enums import ExposureType, Protocol


class EndpointPort(BaseModel):
    """Endpoint port mapping; ``node_port`` only matters for NodePort endpoints."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    port: int
    target_port: int = Field(alias="targetPort")
    protocol: Protocol = Protocol.TCP
    node_port: int | None = Field(default=None, alias="nodePort")


class EndpointSpec(BaseModel):
    """Create request for the endpoint collection."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    namespace: str = DEFAULT_NAMESPACE
    type: ExposureType = ExposureType.CLUSTER_IP
    selector: dict[str, str] = Field(default_factory=dict)
    ports: list[EndpointPort] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the backend's JSON shape, omitting unset node ports."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class EndpointSummary(BaseModel):
    """Endpoint row as reported by the backend."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    namespace: str = DEFAULT_NAMESPACE
    type: str = ExposureType.CLUSTER_IP.value
    cluster_ip: str = Field(default="", alias="clusterIP")
    external_ip: str = Field(default="", alias="externalIP")
    ports: list[EndpointPort] = Field(default_factory=list)
    created_at: str = ""
    labels: dict[str, str] = Field(default_factory=dict)
