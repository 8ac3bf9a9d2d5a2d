"""Deploy screens configuration - select options and widget IDs."""

from __future__ import annotations

from kubedeploy.constants.enums import DeploymentMode, ExposureType

MODE_OPTIONS: list[tuple[str, DeploymentMode]] = [
    ("Deployment (replicated)", DeploymentMode.DEPLOYMENT),
    ("Pod (single replica)", DeploymentMode.POD),
]

EXPOSURE_OPTIONS: list[tuple[str, ExposureType]] = [
    ("LoadBalancer", ExposureType.LOAD_BALANCER),
    ("NodePort", ExposureType.NODE_PORT),
    ("ClusterIP", ExposureType.CLUSTER_IP),
]

DEPLOY_ERRORS_ID = "deploy-errors"
DEPLOY_SUBMIT_ID = "deploy-submit"
QUICK_POD_ERRORS_ID = "quick-pod-errors"
QUICK_POD_SUBMIT_ID = "quick-pod-submit"

__all__ = [
    "DEPLOY_ERRORS_ID",
    "DEPLOY_SUBMIT_ID",
    "EXPOSURE_OPTIONS",
    "MODE_OPTIONS",
    "QUICK_POD_ERRORS_ID",
    "QUICK_POD_SUBMIT_ID",
]
