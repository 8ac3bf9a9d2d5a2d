"""Tests for keyboard binding tables."""

from __future__ import annotations

from kubedeploy.keyboard import (
    BASE_SCREEN_BINDINGS,
    DEPLOY_SCREEN_BINDINGS,
    ENDPOINTS_SCREEN_BINDINGS,
    PODS_SCREEN_BINDINGS,
    WORKLOADS_SCREEN_BINDINGS,
)
from kubedeploy.keyboard.app import APP_BINDINGS
from kubedeploy.screens.deploy import DeployScreen, QuickPodScreen
from kubedeploy.screens.endpoints import EndpointsScreen
from kubedeploy.screens.pods import PodsScreen
from kubedeploy.screens.workloads import WorkloadsScreen


def _actions(bindings) -> set[str]:
    return {binding[1] for binding in bindings}


class TestAppBindings:
    """Tests for APP_BINDINGS."""

    def test_navigation_keys(self) -> None:
        keys = {binding.key: binding.action for binding in APP_BINDINGS}
        assert keys["h"] == "nav_dashboard"
        assert keys["w"] == "nav_workloads"
        assert keys["s"] == "nav_endpoints"
        assert keys["p"] == "nav_pods"
        assert keys["n"] == "nav_deploy"

    def test_quit_does_not_steal_typing(self) -> None:
        quit_binding = next(b for b in APP_BINDINGS if b.action == "app.quit")
        assert quit_binding.key == "ctrl+q"


class TestScreenBindings:
    """Every screen binding resolves to an action on its screen."""

    def test_refresh_and_help_everywhere(self) -> None:
        for bindings in (
            BASE_SCREEN_BINDINGS,
            WORKLOADS_SCREEN_BINDINGS,
            ENDPOINTS_SCREEN_BINDINGS,
            PODS_SCREEN_BINDINGS,
        ):
            assert {"refresh", "show_help"} <= _actions(bindings)

    def test_actions_are_implemented(self) -> None:
        for screen, bindings in (
            (WorkloadsScreen, WORKLOADS_SCREEN_BINDINGS),
            (EndpointsScreen, ENDPOINTS_SCREEN_BINDINGS),
            (PodsScreen, PODS_SCREEN_BINDINGS),
            (DeployScreen, DEPLOY_SCREEN_BINDINGS),
            (QuickPodScreen, DEPLOY_SCREEN_BINDINGS),
        ):
            for action in _actions(bindings):
                assert hasattr(screen, f"action_{action}"), (screen.__name__, action)
