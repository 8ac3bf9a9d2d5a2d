"""Controllers module for KubeDeploy TUI.

This module provides the remote resource client, the deployment
orchestration workflow and the base result types.
"""

from __future__ import annotations

# Base classes
from kubedeploy.controllers.base import ApiResult

# Remote resource client
from kubedeploy.controllers.api import (
    ApiClient,
    AuthResource,
    EndpointResource,
    NamespaceResource,
    PodResource,
    WorkloadResource,
)

# Deployment workflow
from kubedeploy.controllers.deploy import DeploymentWorkflow, WorkflowResult

__all__ = [
    # Base
    "ApiResult",
    # API
    "ApiClient",
    "AuthResource",
    "EndpointResource",
    "NamespaceResource",
    "PodResource",
    "WorkloadResource",
    # Workflow
    "DeploymentWorkflow",
    "WorkflowResult",
]
