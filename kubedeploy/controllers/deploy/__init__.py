"""Deployment transformer and orchestration workflow."""

from kubedeploy.controllers.deploy.transformer import (
    build_endpoint_request,
    build_quick_pod_request,
    build_workload_request,
    endpoint_name_for,
    filter_env,
    selector_for,
)
from kubedeploy.controllers.deploy.workflow import (
    DeploymentWorkflow,
    WorkflowResult,
    scale_target,
)

__all__ = [
    "DeploymentWorkflow",
    "WorkflowResult",
    "build_endpoint_request",
    "build_quick_pod_request",
    "build_workload_request",
    "endpoint_name_for",
    "filter_env",
    "scale_target",
    "selector_for",
]
