"""Tests for WorkerMixin.

This module tests:
- run_mutation success path (notify, on_success, on_finished)
- Failures open a blocking MessageDialog
- Authorization failures are left to the app
"""

from __future__ import annotations

import pytest
from textual.app import App, ComposeResult
from textual.screen import Screen
from textual.widgets import Static

from kubedeploy.controllers.deploy.workflow import WorkflowResult
from kubedeploy.screens.mixins.worker_mixin import WorkerMixin
from kubedeploy.widgets.feedback import MessageDialog

# =============================================================================
# Test Fixtures
# =============================================================================


class MutationScreen(WorkerMixin, Screen):
    """Minimal screen using WorkerMixin."""

    def compose(self) -> ComposeResult:
        yield Static("mutations")


class MutationApp(App[None]):
    def __init__(self) -> None:
        super().__init__()
        self.notifications: list[str] = []

    def on_mount(self) -> None:
        self.push_screen(MutationScreen())

    def notify(self, message, *args, **kwargs) -> None:  # type: ignore[override]
        self.notifications.append(str(message))


async def _result(result: WorkflowResult) -> WorkflowResult:
    return result


async def _wait(pilot, predicate, attempts: int = 100) -> None:
    for _ in range(attempts):
        if predicate():
            return
        await pilot.pause(0.01)
    raise AssertionError("condition was not reached")


# =============================================================================
# run_mutation
# =============================================================================


class TestRunMutation:
    """Tests for WorkerMixin.run_mutation."""

    @pytest.mark.asyncio
    async def test_success(self) -> None:
        app = MutationApp()
        events: list[str] = []
        async with app.run_test() as pilot:
            await pilot.pause()
            screen = app.screen
            assert isinstance(screen, MutationScreen)

            screen.run_mutation(
                _result(WorkflowResult.ok()),
                success_message="Deployed web",
                on_success=lambda: events.append("success"),
                on_finished=lambda: events.append("finished"),
            )
            await _wait(pilot, lambda: "success" in events)

            assert events == ["finished", "success"]
            assert "Deployed web" in app.notifications
            assert isinstance(app.screen, MutationScreen)

    @pytest.mark.asyncio
    async def test_failure_opens_dialog(self) -> None:
        app = MutationApp()
        events: list[str] = []
        async with app.run_test() as pilot:
            await pilot.pause()
            app.screen.run_mutation(
                _result(WorkflowResult(success=False, error="port is already allocated")),
                success_message="unused",
                on_success=lambda: events.append("success"),
            )
            await _wait(pilot, lambda: isinstance(app.screen, MessageDialog))

            assert events == []
            assert app.screen._message == "port is already allocated"

            await pilot.press("escape")
            await _wait(pilot, lambda: isinstance(app.screen, MutationScreen))

    @pytest.mark.asyncio
    async def test_unauthorized_has_no_dialog(self) -> None:
        app = MutationApp()
        finished: list[bool] = []
        async with app.run_test() as pilot:
            await pilot.pause()
            app.screen.run_mutation(
                _result(WorkflowResult(success=False, error="expired", unauthorized=True)),
                success_message="unused",
                on_finished=lambda: finished.append(True),
            )
            await _wait(pilot, lambda: finished == [True])
            await pilot.pause()

            assert isinstance(app.screen, MutationScreen)
