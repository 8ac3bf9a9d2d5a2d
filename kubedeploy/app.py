"""Main application class for KubeDeploy TUI."""

from __future__ import annotations

import logging
from collections.abc import Callable

from textual.app import App
from textual.binding import Binding
from textual.screen import ModalScreen, Screen

from kubedeploy.constants import APP_TITLE
from kubedeploy.keyboard.app import APP_BINDINGS
from kubedeploy.models.state.app_state import AppState
from kubedeploy.models.state.config_manager import (
    AppSettings,
    ConfigLoadError,
    ConfigManager,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)


class KubeDeployApp(App[None]):
    """Main TUI application for KubeDeploy."""

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: list[Binding] = APP_BINDINGS

    # Type hint for settings attribute
    settings: AppSettings
    state: AppState

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        api_url: str | None = None,
        namespace: str | None = None,
        state: AppState | None = None,
        save_settings: bool = True,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.api_url = api_url
        self.namespace = namespace
        # Settings as read from disk; None when injected or unreadable.
        self._stored_settings: AppSettings | None = None

        if state is not None:
            self.settings = state.settings
        else:
            if settings is None:
                self._stored_settings = self._load_settings()
            base = settings or self._stored_settings or AppSettings()
            self.settings = ConfigManager.with_overrides(
                base, api_url=api_url, namespace=namespace
            )
        self._save_settings = save_settings and self._stored_settings is not None
        if self.settings.theme in self.available_themes:
            self.theme = self.settings.theme

        # Initialize app state
        self.state = state or AppState(self.settings)
        self.state.set_session_lost_handler(self._on_session_lost)

    @staticmethod
    def _load_settings() -> AppSettings | None:
        """Load application settings from persistent storage."""
        try:
            return ConfigManager.load()
        except ConfigLoadError as exc:
            # Use defaults for this run and leave the broken file alone
            logger.warning("Using default settings: %s", exc)
            return None

    def on_mount(self) -> None:
        """Called when app is mounted."""
        from kubedeploy.screens.auth import LoginScreen

        self.push_screen(LoginScreen())

    # =========================================================================
    # Session
    # =========================================================================

    def _on_session_lost(self) -> None:
        """Return to login after the backend rejected the session."""
        self.notify("Session expired, please log in again", severity="warning")
        self.show_login("Your session has expired")

    def _dismiss_modals(self) -> None:
        while isinstance(self.screen, ModalScreen) and len(self.screen_stack) > 1:
            self.pop_screen()

    def _show(self, screen: Screen) -> None:
        self._dismiss_modals()
        self.switch_screen(screen)

    def show_login(self, message: str | None = None) -> None:
        from kubedeploy.screens.auth import LoginScreen

        if isinstance(self.screen, LoginScreen):
            return
        self._show(LoginScreen(message))

    def show_dashboard(self) -> None:
        from kubedeploy.screens.dashboard import DashboardScreen

        self._show(DashboardScreen())

    # =========================================================================
    # Navigation
    # =========================================================================

    def _navigate(self, factory: Callable[[], Screen], screen_type: type[Screen]) -> None:
        """Switch to a signed-in screen unless it is already showing."""
        if not self.state.is_authenticated:
            return
        if isinstance(self.screen, ModalScreen):
            return
        if isinstance(self.screen, screen_type):
            return
        self._show(factory())

    def action_nav_dashboard(self) -> None:
        from kubedeploy.screens.dashboard import DashboardScreen

        self._navigate(DashboardScreen, DashboardScreen)

    def action_nav_workloads(self) -> None:
        from kubedeploy.screens.workloads import WorkloadsScreen

        self._navigate(WorkloadsScreen, WorkloadsScreen)

    def action_nav_endpoints(self) -> None:
        from kubedeploy.screens.endpoints import EndpointsScreen

        self._navigate(EndpointsScreen, EndpointsScreen)

    def action_nav_pods(self) -> None:
        from kubedeploy.screens.pods import PodsScreen

        self._navigate(PodsScreen, PodsScreen)

    def action_nav_deploy(self) -> None:
        from kubedeploy.screens.deploy import DeployScreen

        self._navigate(DeployScreen, DeployScreen)

    def action_nav_quick_pod(self) -> None:
        from kubedeploy.screens.deploy import QuickPodScreen

        self._navigate(QuickPodScreen, QuickPodScreen)

    async def action_logout(self) -> None:
        """End the session and go back to login."""
        if not self.state.is_authenticated:
            return
        await self.state.logout()
        self.show_login()
        self.notify("Logged out")

    def action_show_help(self) -> None:
        """Show help dialog."""
        self.notify(
            "Keybindings:\n"
            "Navigation:\n"
            "  h: Dashboard\n"
            "  w: Deployments\n"
            "  s: Services\n"
            "  p: Pods\n"
            "  n: Deploy\n"
            "  Ctrl+L: Logout\n"
            "Deployments:\n"
            "  +/-: Scale up/down\n"
            "  d: Delete\n"
            "Pods:\n"
            "  l: Logs\n"
            "  c: New pod\n"
            "  d: Delete\n"
            "Deploy forms:\n"
            "  Ctrl+S: Submit\n"
            "  Ctrl+R: Reset\n"
            "Actions:\n"
            "  ?: Help\n"
            "  r: Refresh\n"
            "  Esc: Back / Close\n"
            "  Ctrl+Q: Quit",
            severity="information",
            title="Help",
        )

    def action_back(self) -> None:
        """Go back to the dashboard from any other signed-in screen."""
        from kubedeploy.screens.dashboard import DashboardScreen

        if isinstance(self.screen, DashboardScreen):
            return
        self.action_nav_dashboard()

    async def on_unmount(self) -> None:
        """Save stored settings and stop background polling when app exits."""
        if self._save_settings and self._stored_settings is not None:
            try:
                ConfigManager.save(self._stored_settings)
            except ConfigSaveError as e:
                logger.error("Failed to save settings: %s", e)
        await self.state.aclose()


__all__ = [
    "KubeDeployApp",
]
