"""Modal that shows the tail of one pod's logs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Log, Static

from kubedeploy.controllers.base import result_error_text
from kubedeploy.models.core.pod_info import Pod
from kubedeploy.screens.pods.presenter import trim_logs

if TYPE_CHECKING:
    from kubedeploy.controllers.api import PodResource


class PodLogsModal(ModalScreen[None]):
    """Fetches logs once on open; ``r`` fetches again."""

    BINDINGS = [
        Binding("escape", "close", "Close", priority=True),
        Binding("r", "reload", "Reload"),
    ]

    def __init__(self, pods: PodResource, pod: Pod, tail_lines: int) -> None:
        super().__init__(classes="widget-dialog")
        self._pods = pods
        self._pod = pod
        self._tail_lines = tail_lines

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog-container logs-container"):
            yield Static(
                f"Logs: {self._pod.namespace}/{self._pod.name}",
                classes="dialog-title",
                markup=False,
            )
            yield Static("Loading logs...", id="logs-status", classes="view-status")
            yield Log(id="pod-logs", highlight=False)

    def on_mount(self) -> None:
        self.action_reload()

    def action_reload(self) -> None:
        self.run_worker(self._load_logs, exclusive=True, exit_on_error=False)

    async def _load_logs(self) -> None:
        result = await self._pods.get_pod_logs(
            self._pod.namespace, self._pod.name, self._tail_lines
        )
        status = self.query_one("#logs-status", Static)
        log = self.query_one("#pod-logs", Log)
        log.clear()
        if not result.success:
            status.update(
                f"[red]{escape(result_error_text(result, 'Failed to fetch logs'))}[/red]"
            )
            return
        text = trim_logs(result.data or "")
        status.update(f"Last {self._tail_lines} lines")
        log.write(text or "(no output)")

    def action_close(self) -> None:
        self.dismiss(None)


__all__ = ["PodLogsModal"]
