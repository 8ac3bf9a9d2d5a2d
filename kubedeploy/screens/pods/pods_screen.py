"""Pods screen - pods with phase and restarts, namespace filter, logs and delete."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import DataTable, Select, Static

from kubedeploy.constants.enums import ResourceKind
from kubedeploy.keyboard import PODS_SCREEN_BINDINGS
from kubedeploy.models.core.pod_info import Pod
from kubedeploy.screens.base_screen import BaseScreen
from kubedeploy.screens.pods.config import (
    POD_TABLE_COLUMNS,
    PODS_NAMESPACE_SELECT_ID,
    PODS_STATUS_ID,
    PODS_TABLE_ID,
)
from kubedeploy.screens.pods.logs_modal import PodLogsModal
from kubedeploy.screens.pods.presenter import PodsPresenter, namespace_options
from kubedeploy.screens.status import describe_view
from kubedeploy.utils.sync_manager import CachedView
from kubedeploy.widgets.feedback import ConfirmDialog


class PodsScreen(BaseScreen):
    """List of pods, optionally filtered to one namespace."""

    BINDINGS = PODS_SCREEN_BINDINGS

    def __init__(self, namespace: str | None = None) -> None:
        super().__init__()
        self.presenter = PodsPresenter()
        self._namespace = namespace or ""
        self._namespace_options: list[tuple[str, str]] = namespace_options(
            [self._namespace] if self._namespace else []
        )

    @property
    def screen_title(self) -> str:
        return "Pods"

    @property
    def namespace(self) -> str | None:
        return self._namespace or None

    def compose_content(self) -> ComposeResult:
        with Vertical(id="base-content"):
            with Horizontal(classes="screen-toolbar"):
                yield Static("Pods", classes="screen-title")
                yield Select(
                    self._namespace_options,
                    value=self._namespace,
                    allow_blank=False,
                    id=PODS_NAMESPACE_SELECT_ID,
                )
            yield Static("", id=PODS_STATUS_ID, classes="view-status")
            yield DataTable(id=PODS_TABLE_ID, cursor_type="row", zebra_stripes=True)

    def observed_collections(self) -> list[tuple[ResourceKind, str | None]]:
        return [
            (ResourceKind.PODS, self.namespace),
            (ResourceKind.NAMESPACES, None),
        ]

    def render_view(self, view: CachedView) -> None:
        if view.key.kind is ResourceKind.NAMESPACES:
            self._update_namespace_options(view.data)
            return
        if view.key.namespace != self.namespace:
            return
        self.presenter.set_pods(view.data)
        self.set_status(PODS_STATUS_ID, describe_view(view, "pods"))
        self.populate_data_table(PODS_TABLE_ID, POD_TABLE_COLUMNS, self.presenter.get_rows())

    def _update_namespace_options(self, namespaces: list[str]) -> None:
        known = list(namespaces)
        if self._namespace and self._namespace not in known:
            known.append(self._namespace)
        options = namespace_options(known)
        if options == self._namespace_options:
            return
        self._namespace_options = options
        select = self.query_one(f"#{PODS_NAMESPACE_SELECT_ID}", Select)
        select.set_options(options)
        select.value = self._namespace

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id != PODS_NAMESPACE_SELECT_ID:
            return
        value = event.value if isinstance(event.value, str) else ""
        if value == self._namespace:
            return
        self._namespace = value
        self.observe_collections()

    def _selected_pod(self) -> Pod | None:
        index = self.selected_index(PODS_TABLE_ID)
        return None if index is None else self.presenter.pod_at(index)

    def action_view_logs(self) -> None:
        pod = self._selected_pod()
        if pod is None:
            return
        self.app.push_screen(
            PodLogsModal(self.state.pods, pod, self.state.settings.pod_log_tail_lines)
        )

    def action_delete_selected(self) -> None:
        pod = self._selected_pod()
        if pod is None:
            return

        def _on_answer(confirmed: bool | None) -> None:
            if confirmed:
                self.run_mutation(
                    self.state.workflow.delete_pod(pod.namespace, pod.name),
                    success_message=f"Deleted pod {pod.name}",
                    name="delete-pod",
                )

        self.app.push_screen(
            ConfirmDialog(f"Delete pod {pod.namespace}/{pod.name}?", title="Delete pod"),
            _on_answer,
        )

    def action_quick_pod(self) -> None:
        self.app.action_nav_quick_pod()


__all__ = ["PodsScreen"]
