"""Pods screen module exports."""

from kubedeploy.screens.pods.logs_modal import PodLogsModal
from kubedeploy.screens.pods.pods_screen import PodsScreen
from kubedeploy.screens.pods.presenter import PodsPresenter

__all__ = ["PodLogsModal", "PodsPresenter", "PodsScreen"]
