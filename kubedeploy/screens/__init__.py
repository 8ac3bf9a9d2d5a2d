"""KubeDeploy TUI Screens.

This package contains all screen modules for the TUI application.

Domain Structure:
    - auth/       - Login and signup
    - dashboard/  - Cluster summary counts and recent pods
    - workloads/  - Deployments list with scale and delete
    - endpoints/  - Services list with delete
    - pods/       - Pods list, namespace filter and logs
    - deploy/     - Advanced deploy form and quick pod form
    - mixins/     - Reusable screen mixins

Note: Keybinding constants live in kubedeploy.keyboard (*_SCREEN_BINDINGS).
"""

from __future__ import annotations

# Keybindings (re-export for convenience)
from kubedeploy.keyboard import BASE_SCREEN_BINDINGS

# Auth domain
from kubedeploy.screens.auth import LoginScreen, SignupScreen
from kubedeploy.screens.base_screen import BaseScreen, CollectionUpdated

# Dashboard domain
from kubedeploy.screens.dashboard import DashboardScreen

# Deploy domain
from kubedeploy.screens.deploy import DeployScreen, QuickPodScreen

# Endpoints domain
from kubedeploy.screens.endpoints import EndpointsScreen

# Pods domain
from kubedeploy.screens.pods import PodLogsModal, PodsScreen

# Workloads domain
from kubedeploy.screens.workloads import WorkloadsScreen

__all__ = [
    # Keybindings
    "BASE_SCREEN_BINDINGS",
    # Base
    "BaseScreen",
    "CollectionUpdated",
    # Auth
    "LoginScreen",
    "SignupScreen",
    # Dashboard
    "DashboardScreen",
    # Deploy
    "DeployScreen",
    "QuickPodScreen",
    # Endpoints
    "EndpointsScreen",
    # Pods
    "PodLogsModal",
    "PodsScreen",
    # Workloads
    "WorkloadsScreen",
]
