"""Screen-specific keyboard bindings (BASE_SCREEN_BINDINGS, *_SCREEN_BINDINGS)."""

from __future__ import annotations

from typing import Annotated

# ============================================================================
# SCREEN BINDINGS
# ============================================================================

BASE_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("r", "refresh", "Refresh"),
    ("?", "show_help", "Help"),
]

# ============================================================================
# Workloads Screen Bindings
# ============================================================================

WORKLOADS_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("r", "refresh", "Refresh"),
    ("plus", "scale_up", "Scale +1"),
    ("minus", "scale_down", "Scale -1"),
    ("d", "delete_selected", "Delete"),
    ("?", "show_help", "Help"),
]

# ============================================================================
# Endpoints Screen Bindings
# ============================================================================

ENDPOINTS_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("r", "refresh", "Refresh"),
    ("d", "delete_selected", "Delete"),
    ("?", "show_help", "Help"),
]

# ============================================================================
# Pods Screen Bindings
# ============================================================================

PODS_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("r", "refresh", "Refresh"),
    ("l", "view_logs", "Logs"),
    ("d", "delete_selected", "Delete"),
    ("c", "quick_pod", "New Pod"),
    ("?", "show_help", "Help"),
]

# ============================================================================
# Deploy Screen Bindings
# ============================================================================

DEPLOY_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("ctrl+s", "submit", "Deploy"),
    ("ctrl+r", "reset_form", "Reset"),
]

__all__ = [
    "BASE_SCREEN_BINDINGS",
    "DEPLOY_SCREEN_BINDINGS",
    "ENDPOINTS_SCREEN_BINDINGS",
    "PODS_SCREEN_BINDINGS",
    "WORKLOADS_SCREEN_BINDINGS",
]
