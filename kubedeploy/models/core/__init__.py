"""Core resource models."""

from kubedeploy.models.core.endpoint_info import (
    EndpointPort,
    EndpointSpec,
    EndpointSummary,
)
from kubedeploy.models.core.envelope import APIEnvelope
from kubedeploy.models.core.pod_info import Pod, PodCreateRequest
from kubedeploy.models.core.user_info import Session, User
from kubedeploy.models.core.workload_info import (
    ContainerPort,
    EnvVar,
    ResourceQuantities,
    ResourceRequirements,
    WorkloadSpec,
    WorkloadSummary,
)

__all__ = [
    "APIEnvelope",
    "ContainerPort",
    "EndpointPort",
    "EndpointSpec",
    "EndpointSummary",
    "EnvVar",
    "Pod",
    "PodCreateRequest",
    "ResourceQuantities",
    "ResourceRequirements",
    "Session",
    "User",
    "WorkloadSpec",
    "WorkloadSummary",
]
