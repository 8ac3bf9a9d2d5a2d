"""Keyboard bindings module.

This module provides all keyboard bindings for the KubeDeploy TUI.
Bindings are organized into two categories:

- app: App-level bindings (APP_BINDINGS)
- navigation: Screen-specific bindings (*_SCREEN_BINDINGS)
"""

from kubedeploy.keyboard.app import APP_BINDINGS
from kubedeploy.keyboard.navigation import (
    BASE_SCREEN_BINDINGS,
    DEPLOY_SCREEN_BINDINGS,
    ENDPOINTS_SCREEN_BINDINGS,
    PODS_SCREEN_BINDINGS,
    WORKLOADS_SCREEN_BINDINGS,
)

__all__ = [
    "APP_BINDINGS",
    # Screen-specific bindings
    "BASE_SCREEN_BINDINGS",
    "DEPLOY_SCREEN_BINDINGS",
    "ENDPOINTS_SCREEN_BINDINGS",
    "PODS_SCREEN_BINDINGS",
    "WORKLOADS_SCREEN_BINDINGS",
]
