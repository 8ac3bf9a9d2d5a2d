"""Endpoints screen - services with type, addresses and ports."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import DataTable, Static

from kubedeploy.constants.enums import ResourceKind
from kubedeploy.keyboard import ENDPOINTS_SCREEN_BINDINGS
from kubedeploy.screens.base_screen import BaseScreen
from kubedeploy.screens.endpoints.config import (
    ENDPOINT_TABLE_COLUMNS,
    ENDPOINTS_STATUS_ID,
    ENDPOINTS_TABLE_ID,
)
from kubedeploy.screens.endpoints.presenter import EndpointsPresenter
from kubedeploy.screens.status import describe_view
from kubedeploy.utils.sync_manager import CachedView
from kubedeploy.widgets.feedback import ConfirmDialog


class EndpointsScreen(BaseScreen):
    """List of services across all namespaces."""

    BINDINGS = ENDPOINTS_SCREEN_BINDINGS

    def __init__(self) -> None:
        super().__init__()
        self.presenter = EndpointsPresenter()

    @property
    def screen_title(self) -> str:
        return "Services"

    def compose_content(self) -> ComposeResult:
        with Vertical(id="base-content"):
            yield Static("Services", classes="screen-title")
            yield Static("", id=ENDPOINTS_STATUS_ID, classes="view-status")
            yield DataTable(id=ENDPOINTS_TABLE_ID, cursor_type="row", zebra_stripes=True)

    def observed_collections(self) -> list[tuple[ResourceKind, str | None]]:
        return [(ResourceKind.ENDPOINTS, None)]

    def render_view(self, view: CachedView) -> None:
        self.presenter.set_endpoints(view.data)
        self.set_status(ENDPOINTS_STATUS_ID, describe_view(view, "services"))
        self.populate_data_table(
            ENDPOINTS_TABLE_ID, ENDPOINT_TABLE_COLUMNS, self.presenter.get_rows()
        )

    def action_delete_selected(self) -> None:
        index = self.selected_index(ENDPOINTS_TABLE_ID)
        endpoint = None if index is None else self.presenter.endpoint_at(index)
        if endpoint is None:
            return

        def _on_answer(confirmed: bool | None) -> None:
            if confirmed:
                self.run_mutation(
                    self.state.workflow.delete_endpoint(endpoint.namespace, endpoint.name),
                    success_message=f"Deleted service {endpoint.name}",
                    name="delete-endpoint",
                )

        self.app.push_screen(
            ConfirmDialog(
                f"Delete service {endpoint.namespace}/{endpoint.name}?",
                title="Delete service",
            ),
            _on_answer,
        )


__all__ = ["EndpointsScreen"]
