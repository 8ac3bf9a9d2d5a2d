"""App-level keyboard bindings.

This module contains Textual Binding objects for app-level bindings
that work from any screen.
"""

from textual.binding import Binding

# ============================================================================
# Textual Binding objects for app-level bindings
# ============================================================================

APP_BINDINGS: list[Binding] = [
    Binding("escape", "back", "Back"),
    Binding("h", "nav_dashboard", "Dashboard"),
    Binding("w", "nav_workloads", "Deployments"),
    Binding("s", "nav_endpoints", "Services"),
    Binding("p", "nav_pods", "Pods"),
    Binding("n", "nav_deploy", "Deploy"),
    Binding("ctrl+l", "logout", "Logout"),
    Binding("?", "show_help", "Help"),
    Binding("ctrl+q", "app.quit", "Quit", priority=True),
]

__all__ = [
    "APP_BINDINGS",
]
