"""Dashboard screen module exports."""

from kubedeploy.screens.dashboard.dashboard_screen import DashboardScreen
from kubedeploy.screens.dashboard.presenter import (
    DashboardSummary,
    summarize,
    summary_lines,
)

__all__ = [
    "DashboardScreen",
    "DashboardSummary",
    "summarize",
    "summary_lines",
]
