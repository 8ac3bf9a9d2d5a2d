"""Remote resource client for the cluster-management backend."""

from kubedeploy.controllers.api.client import ApiClient, category_for_status
from kubedeploy.controllers.api.resources import (
    AuthResource,
    BaseResource,
    EndpointResource,
    NamespaceResource,
    PodResource,
    WorkloadResource,
)

__all__ = [
    "ApiClient",
    "AuthResource",
    "BaseResource",
    "EndpointResource",
    "NamespaceResource",
    "PodResource",
    "WorkloadResource",
    "category_for_status",
]
