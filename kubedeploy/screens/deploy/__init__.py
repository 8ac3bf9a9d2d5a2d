"""Deploy screens - advanced deployment form and quick pod form."""

from kubedeploy.screens.deploy.deploy_screen import DeployScreen
from kubedeploy.screens.deploy.quick_pod_screen import QuickPodScreen

__all__ = ["DeployScreen", "QuickPodScreen"]
