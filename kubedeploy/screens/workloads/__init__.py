"""Workloads screen module exports."""

from kubedeploy.screens.workloads.presenter import (
    WorkloadsPresenter,
    health_markup,
    ready_text,
)
from kubedeploy.screens.workloads.workloads_screen import WorkloadsScreen

__all__ = [
    "WorkloadsPresenter",
    "WorkloadsScreen",
    "health_markup",
    "ready_text",
]
