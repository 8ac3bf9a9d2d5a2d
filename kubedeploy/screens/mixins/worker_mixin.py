"""WorkerMixin - Worker lifecycle management for remote calls from screens.

Screens never await the backend inside message handlers; they start a
Textual worker and update widgets when it finishes. Mutations go through
:meth:`WorkerMixin.run_mutation`, which shows failures in a blocking
dialog the user has to acknowledge.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from contextlib import suppress
from typing import Any

from textual._context import NoActiveAppError
from textual.worker import Worker, WorkerState

from kubedeploy.controllers.deploy.workflow import WorkflowResult
from kubedeploy.widgets.feedback import MessageDialog

logger = logging.getLogger(__name__)


class WorkerMixin:
    """Mixin providing standardized Worker lifecycle management.

    Usage:
        ```python
        class MyScreen(WorkerMixin, Screen):
            def action_delete(self) -> None:
                self.run_mutation(
                    self.app.state.workflow.delete_pod(namespace, name),
                    success_message=f"Deleted {name}",
                )
        ```
    """

    def start_worker(
        self,
        work: Callable[..., Awaitable[Any]] | Awaitable[Any],
        *,
        exclusive: bool = False,
        name: str | None = None,
        group: str = "default",
    ) -> Worker[Any]:
        """Start an async worker bound to this screen.

        Args:
            work: Coroutine function or awaitable to run
            exclusive: If True, cancel previous workers in the same group
            name: Optional worker name for debugging
            group: Worker group used for exclusive cancellation
        """
        return self.run_worker(  # type: ignore[attr-defined]
            work,
            name=name,
            group=group,
            exclusive=exclusive,
            exit_on_error=False,
        )

    def cancel_workers(self) -> None:
        """Cancel all running workers using Textual's built-in WorkerManager."""
        with suppress(NoActiveAppError):
            self.workers.cancel_all()  # type: ignore[attr-defined]

    def run_mutation(
        self,
        mutation: Awaitable[WorkflowResult],
        *,
        success_message: str,
        on_success: Callable[[], None] | None = None,
        on_finished: Callable[[], None] | None = None,
        name: str = "mutation",
    ) -> Worker[Any]:
        """Run a workflow call and report its outcome.

        Failures open a :class:`MessageDialog` with the workflow's message.
        Authorization failures are skipped here; the app already moved to the
        login screen.
        """

        async def _run() -> None:
            try:
                result = await mutation
            finally:
                if on_finished is not None:
                    on_finished()
            if result.success:
                self.app.notify(success_message)  # type: ignore[attr-defined]
                if on_success is not None:
                    on_success()
                return
            if result.unauthorized:
                return
            self.app.push_screen(  # type: ignore[attr-defined]
                MessageDialog(result.error or "Request failed")
            )

        return self.start_worker(_run, name=name)

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Log worker failures; remote failures arrive as results, not exceptions."""
        if event.state == WorkerState.ERROR:
            logger.error(
                "Worker '%s' failed: %s", event.worker.name, event.worker.error
            )
            with suppress(NoActiveAppError):
                self.app.notify(  # type: ignore[attr-defined]
                    f"Unexpected error: {event.worker.error}",
                    severity="error",
                )
        elif event.state == WorkerState.CANCELLED:
            logger.debug("Worker '%s' was cancelled", event.worker.name)


__all__ = ["WorkerMixin"]
