"""Workloads screen - deployments with ready/desired counts, scale and delete."""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import DataTable, Static

from kubedeploy.constants.enums import ResourceKind, ScaleDirection
from kubedeploy.keyboard import WORKLOADS_SCREEN_BINDINGS
from kubedeploy.models.core.workload_info import WorkloadSummary
from kubedeploy.screens.base_screen import BaseScreen
from kubedeploy.screens.status import describe_view
from kubedeploy.screens.workloads.config import (
    WORKLOAD_TABLE_COLUMNS,
    WORKLOADS_STATUS_ID,
    WORKLOADS_TABLE_ID,
)
from kubedeploy.screens.workloads.presenter import WorkloadsPresenter
from kubedeploy.utils.sync_manager import CachedView
from kubedeploy.widgets.feedback import ConfirmDialog

logger = logging.getLogger(__name__)


class WorkloadsScreen(BaseScreen):
    """List of deployments across all namespaces."""

    BINDINGS = WORKLOADS_SCREEN_BINDINGS

    def __init__(self) -> None:
        super().__init__()
        self.presenter = WorkloadsPresenter()

    @property
    def screen_title(self) -> str:
        return "Deployments"

    def compose_content(self) -> ComposeResult:
        with Vertical(id="base-content"):
            yield Static("Deployments", classes="screen-title")
            yield Static("", id=WORKLOADS_STATUS_ID, classes="view-status")
            yield DataTable(id=WORKLOADS_TABLE_ID, cursor_type="row", zebra_stripes=True)

    def observed_collections(self) -> list[tuple[ResourceKind, str | None]]:
        return [(ResourceKind.WORKLOADS, None)]

    def render_view(self, view: CachedView) -> None:
        self.presenter.set_workloads(view.data)
        self.set_status(WORKLOADS_STATUS_ID, describe_view(view, "deployments"))
        self.populate_data_table(
            WORKLOADS_TABLE_ID, WORKLOAD_TABLE_COLUMNS, self.presenter.get_rows()
        )

    def _selected(self) -> WorkloadSummary | None:
        index = self.selected_index(WORKLOADS_TABLE_ID)
        return None if index is None else self.presenter.workload_at(index)

    def _scale(self, direction: ScaleDirection) -> None:
        workload = self._selected()
        if workload is None:
            return
        message = self.presenter.scale_preview(workload, direction)
        self.run_mutation(
            self.state.workflow.scale_workload(
                workload.namespace, workload.name, workload.replicas, direction
            ),
            success_message=message,
            name="scale-workload",
        )

    def action_scale_up(self) -> None:
        self._scale(ScaleDirection.UP)

    def action_scale_down(self) -> None:
        self._scale(ScaleDirection.DOWN)

    def action_delete_selected(self) -> None:
        workload = self._selected()
        if workload is None:
            return

        def _on_answer(confirmed: bool | None) -> None:
            if not confirmed:
                return
            self.run_mutation(
                self.state.workflow.delete_workload(workload.namespace, workload.name),
                success_message=f"Deleted deployment {workload.name}",
                name="delete-workload",
            )

        self.app.push_screen(
            ConfirmDialog(
                f"Delete deployment {workload.namespace}/{workload.name}?",
                title="Delete deployment",
            ),
            _on_answer,
        )


__all__ = ["WorkloadsScreen"]
