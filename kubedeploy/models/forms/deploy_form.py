"""Editable form state for the deploy screens."""

from pydantic import BaseModel, Field

from kubedeploy.constants.defaults import (
    CONTAINER_PORT_DEFAULT,
    CPU_LIMIT_DEFAULT,
    CPU_REQUEST_DEFAULT,
    DEFAULT_NAMESPACE,
    MEMORY_LIMIT_DEFAULT,
    MEMORY_REQUEST_DEFAULT,
    QUICK_POD_CPU_DEFAULT,
    QUICK_POD_MEMORY_DEFAULT,
)
from kubedeploy.constants.enums import DeploymentMode, ExposureType
from kubedeploy.models.core.endpoint_info import EndpointPort
from kubedeploy.models.core.workload_info import ContainerPort, EnvVar


def _default_container_ports() -> list[ContainerPort]:
    return [ContainerPort(name="http", container_port=CONTAINER_PORT_DEFAULT)]


def _default_endpoint_ports() -> list[EndpointPort]:
    return [
        EndpointPort(
            name="http",
            port=CONTAINER_PORT_DEFAULT,
            target_port=CONTAINER_PORT_DEFAULT,
        )
    ]


class DeploymentForm(BaseModel):
    """Advanced deployment form: workload fields plus optional endpoint exposure."""

    deployment_mode: DeploymentMode = DeploymentMode.DEPLOYMENT
    name: str = ""
    namespace: str = DEFAULT_NAMESPACE
    image: str = ""
    replicas: int = 1

    cpu_request: str = CPU_REQUEST_DEFAULT
    memory_request: str = MEMORY_REQUEST_DEFAULT
    cpu_limit: str = CPU_LIMIT_DEFAULT
    memory_limit: str = MEMORY_LIMIT_DEFAULT

    ports: list[ContainerPort] = Field(default_factory=_default_container_ports)
    env: list[EnvVar] = Field(default_factory=list)

    create_endpoint: bool = True
    exposure_type: ExposureType = ExposureType.LOAD_BALANCER
    endpoint_ports: list[EndpointPort] = Field(default_factory=_default_endpoint_ports)

    def missing_fields(self) -> list[str]:
        """Names of required fields that are still blank."""
        return [
            field_name
            for field_name in ("name", "namespace", "image")
            if not getattr(self, field_name).strip()
        ]


class QuickPodForm(BaseModel):
    """Quick single-pod deploy form."""

    name: str = ""
    namespace: str = DEFAULT_NAMESPACE
    image: str = ""
    replicas: int = 1
    cpu: str = QUICK_POD_CPU_DEFAULT
    memory: str = QUICK_POD_MEMORY_DEFAULT
    ports: list[int] = Field(default_factory=list)
    env: list[EnvVar] = Field(default_factory=list)

    def missing_fields(self) -> list[str]:
        return [
            field_name
            for field_name in ("name", "namespace", "image")
            if not getattr(self, field_name).strip()
        ]
