"""Dashboard screen - cluster summary counts and recent pods."""

from __future__ import annotations

import logging

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import DataTable, Static

from kubedeploy.constants.enums import ResourceKind, ViewState
from kubedeploy.models.core.user_info import User
from kubedeploy.screens.base_screen import BaseScreen
from kubedeploy.screens.dashboard.presenter import summarize, summary_lines
from kubedeploy.screens.pods.config import POD_TABLE_COLUMNS
from kubedeploy.screens.pods.presenter import PodsPresenter
from kubedeploy.screens.status import describe_view
from kubedeploy.utils.sync_manager import CachedView

logger = logging.getLogger(__name__)

_RECENT_PODS = 10


class DashboardScreen(BaseScreen):
    """Overview of pods, deployments and services."""

    def __init__(self) -> None:
        super().__init__()
        self._views: dict[ResourceKind, CachedView] = {}
        self._pods = PodsPresenter()

    @property
    def screen_title(self) -> str:
        return "Dashboard"

    def compose_content(self) -> ComposeResult:
        with Vertical(id="base-content"):
            yield Static("Dashboard", classes="screen-title")
            yield Static("", id="dashboard-user", classes="view-status")
            yield Static("Loading...", id="dashboard-summary", classes="summary-panel")
            yield Static("", id="dashboard-status", classes="view-status")
            yield Static("Recent pods", classes="section-title")
            yield DataTable(id="dashboard-pods", cursor_type="row", zebra_stripes=True)

    def on_mount(self) -> None:
        super().on_mount()
        user = self.state.session_store.user
        if user is not None:
            self._show_user(user)
        self.start_worker(self._refresh_user(), exclusive=True, name="me", group="identity")

    async def _refresh_user(self) -> None:
        """Confirm the session with the backend and show the current identity.

        A rejected session is handled by the app, which returns to login.
        """
        result = await self.state.auth.me()
        if result.success and result.data is not None:
            self._show_user(result.data)
        elif not result.is_unauthorized:
            logger.debug("Could not refresh user: %s", result.error or result.detail)

    def _show_user(self, user: User) -> None:
        self.set_status("dashboard-user", f"Signed in as [b]{escape(user.display_name)}[/b]")

    def observed_collections(self) -> list[tuple[ResourceKind, str | None]]:
        return [
            (ResourceKind.PODS, None),
            (ResourceKind.WORKLOADS, None),
            (ResourceKind.ENDPOINTS, None),
        ]

    def render_view(self, view: CachedView) -> None:
        self._views[view.key.kind] = view
        pods = self._data(ResourceKind.PODS)
        summary = summarize(
            pods,
            self._data(ResourceKind.WORKLOADS),
            self._data(ResourceKind.ENDPOINTS),
        )
        self.set_status("dashboard-summary", "\n".join(summary_lines(summary)))

        problems = [
            describe_view(cached, cached.key.kind.value)
            for cached in self._views.values()
            if cached.state in (ViewState.ERROR, ViewState.STALE) and cached.error
        ]
        self.set_status("dashboard-status", "\n".join(problems))

        self._pods.set_pods(pods[:_RECENT_PODS])
        self.populate_data_table("dashboard-pods", POD_TABLE_COLUMNS, self._pods.get_rows())

    def _data(self, kind: ResourceKind) -> list:
        view = self._views.get(kind)
        return view.data if view is not None else []


__all__ = ["DashboardScreen"]
