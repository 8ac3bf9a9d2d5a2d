"""Form state models."""

from kubedeploy.models.forms.deploy_form import DeploymentForm, QuickPodForm

__all__ = ["DeploymentForm", "QuickPodForm"]
