"""Base screen class for KubeDeploy TUI.

This module provides BaseScreen, which encapsulates the patterns shared by
every list screen:

1. COLLECTION OBSERVATION:
   - Override observed_collections() to return (kind, namespace) pairs
   - Subscriptions open when the screen becomes active and close when it is
     suspended or removed, so polling only runs for what is on screen
   - Every cache change arrives as a CollectionUpdated message; implement
     render_view(view) to redraw

2. DATATABLE HELPERS:
   - populate_data_table(table_id, columns, rows) keeps the cursor row
   - selected_index(table_id) returns the cursor row or None

3. NAVIGATION BINDINGS (app-level, see kubedeploy.keyboard.app):
   - h: Dashboard, w: Deployments, s: Services, p: Pods, n: Deploy
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from contextlib import suppress
from typing import TYPE_CHECKING, cast

from textual.app import ComposeResult
from textual.css.query import NoMatches, WrongType
from textual.message import Message
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, Static

from kubedeploy.constants.enums import ResourceKind
from kubedeploy.constants.values import APP_TITLE
from kubedeploy.keyboard import BASE_SCREEN_BINDINGS
from kubedeploy.screens.mixins.worker_mixin import WorkerMixin
from kubedeploy.utils.sync_manager import CachedView, Subscription

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from kubedeploy.app import KubeDeployApp
    from kubedeploy.models.state.app_state import AppState


class CollectionUpdated(Message):
    """A synchronized collection observed by the screen changed."""

    def __init__(self, view: CachedView) -> None:
        super().__init__()
        self.view = view


class BaseScreen(WorkerMixin, Screen):
    """Abstract base class for screens that render synchronized collections.

    Subclasses must implement:
    - compose_content: The widgets between header and footer
    - render_view: Redraw from a collection snapshot
    """

    BINDINGS = BASE_SCREEN_BINDINGS

    def __init__(self) -> None:
        super().__init__()
        self._subscriptions: list[Subscription] = []

    @property
    def screen_title(self) -> str:
        return APP_TITLE

    @property
    def app(self) -> KubeDeployApp:
        """Get the application instance."""
        return cast("KubeDeployApp", super().app)

    @property
    def state(self) -> AppState:
        return self.app.state

    def compose(self) -> ComposeResult:
        yield Header()
        yield from self.compose_content()
        yield Footer()

    @abstractmethod
    def compose_content(self) -> ComposeResult:
        """Yield the screen body."""
        ...

    def on_mount(self) -> None:
        self.app.sub_title = self.screen_title

    # =========================================================================
    # COLLECTION OBSERVATION
    # =========================================================================

    def observed_collections(self) -> list[tuple[ResourceKind, str | None]]:
        """Collections this screen renders while it is active."""
        return []

    def on_screen_resume(self) -> None:
        self.app.sub_title = self.screen_title
        self.observe_collections()

    def on_screen_suspend(self) -> None:
        self.release_collections()

    def on_unmount(self) -> None:
        self.release_collections()
        self.cancel_workers()

    def observe_collections(self) -> None:
        """(Re)subscribe to every observed collection."""
        self.release_collections()
        for kind, namespace in self.observed_collections():
            subscription = self.state.sync.subscribe(kind, namespace)
            subscription.add_listener(self._forward_view)
            self._subscriptions.append(subscription)
            self.post_message(CollectionUpdated(subscription.view))

    def release_collections(self) -> None:
        for subscription in self._subscriptions:
            subscription.close()
        self._subscriptions.clear()

    def _forward_view(self, view: CachedView) -> None:
        self.post_message(CollectionUpdated(view))

    def on_collection_updated(self, message: CollectionUpdated) -> None:
        self.render_view(message.view)

    @abstractmethod
    def render_view(self, view: CachedView) -> None:
        """Redraw the widgets fed by ``view``."""
        ...

    # =========================================================================
    # DATATABLE HELPERS
    # =========================================================================

    def populate_data_table(
        self,
        table_id: str,
        columns: list[tuple[str, int]],
        rows: list[list[str]],
    ) -> None:
        """Replace the rows of a DataTable, keeping the cursor where it was."""
        with suppress(NoMatches, WrongType):
            table = self.query_one(f"#{table_id}", DataTable)
            cursor_row = table.cursor_row
            if not table.columns:
                for name, width in columns:
                    table.add_column(name, width=width)
            table.clear()
            for row in rows:
                table.add_row(*row)
            if rows:
                table.move_cursor(row=min(cursor_row, len(rows) - 1))

    def selected_index(self, table_id: str) -> int | None:
        with suppress(NoMatches, WrongType):
            table = self.query_one(f"#{table_id}", DataTable)
            if table.row_count:
                return table.cursor_row
        return None

    def set_status(self, status_id: str, text: str) -> None:
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{status_id}", Static).update(text)

    # =========================================================================
    # ACTIONS
    # =========================================================================

    def action_refresh(self) -> None:
        """Poll every observed collection now."""
        for subscription in list(self._subscriptions):
            if subscription.is_active:
                self.start_worker(subscription.refresh, name=f"refresh-{subscription.key.label()}")

    def action_show_help(self) -> None:
        self.app.action_show_help()


__all__ = ["BaseScreen", "CollectionUpdated"]
