"""Modal dialogs for the TUI application.

Standard Reactive Pattern:
- Dialogs are modal screens, inherit from ModalScreen
- No reactive state needed (they manage their own lifecycle)

CSS Classes: widget-dialog
"""

from __future__ import annotations

from contextlib import suppress

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.events import Resize
from textual.screen import ModalScreen
from textual.widgets import Button, Static

_DIALOG_MIN_WIDTH = 36
_DIALOG_SIDE_MARGIN = 6
_DIALOG_CONTENT_PADDING = 8


def _max_line_width(*values: str) -> int:
    width = 0
    for value in values:
        for line in value.splitlines() or [""]:
            width = max(width, len(line))
    return width


def _fit_dialog_width(dialog: ModalScreen, content_width: int) -> None:
    available_width = max(
        _DIALOG_MIN_WIDTH,
        getattr(dialog.app.size, "width", _DIALOG_MIN_WIDTH + _DIALOG_SIDE_MARGIN)
        - _DIALOG_SIDE_MARGIN,
    )
    dialog_width = max(
        _DIALOG_MIN_WIDTH,
        min(content_width + _DIALOG_CONTENT_PADDING, available_width),
    )
    with suppress(Exception):
        container = dialog.query_one(".dialog-container", Vertical)
        container.styles.width = dialog_width


class ConfirmDialog(ModalScreen[bool]):
    """Confirmation dialog with OK/Cancel buttons; dismisses with the answer."""

    BINDINGS = [Binding("escape", "cancel", "Cancel", priority=True)]

    def __init__(self, message: str, title: str = "Confirm") -> None:
        super().__init__(classes="widget-dialog")
        self._message = message
        self._title = title

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog-container"):
            yield Static(self._title, classes="dialog-title")
            yield Static(self._message, classes="dialog-message", markup=False)
            with Horizontal(classes="dialog-buttons"):
                yield Button("OK", id="confirm-btn", variant="error")
                yield Button("Cancel", id="cancel-btn")

    def on_mount(self) -> None:
        self._apply_dynamic_layout()
        with suppress(Exception):
            self.query_one("#cancel-btn", Button).focus()

    def on_resize(self, _: Resize) -> None:
        self._apply_dynamic_layout()

    def _apply_dynamic_layout(self) -> None:
        _fit_dialog_width(self, _max_line_width(self._title, self._message))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "confirm-btn")

    def action_cancel(self) -> None:
        self.dismiss(False)


class MessageDialog(ModalScreen[None]):
    """Blocking message the user has to acknowledge."""

    BINDINGS = [Binding("escape", "close", "Close", priority=True)]

    def __init__(self, message: str, title: str = "Error") -> None:
        super().__init__(classes="widget-dialog")
        self._message = message
        self._title = title

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog-container"):
            yield Static(self._title, classes="dialog-title")
            yield Static(self._message, classes="dialog-message", markup=False)
            with Horizontal(classes="dialog-buttons"):
                yield Button("OK", id="ok-btn", variant="primary")

    def on_mount(self) -> None:
        _fit_dialog_width(self, _max_line_width(self._title, self._message))
        with suppress(Exception):
            self.query_one("#ok-btn", Button).focus()

    def on_resize(self, _: Resize) -> None:
        _fit_dialog_width(self, _max_line_width(self._title, self._message))

    def on_button_pressed(self, _: Button.Pressed) -> None:
        self.dismiss(None)

    def action_close(self) -> None:
        self.dismiss(None)


__all__ = ["ConfirmDialog", "MessageDialog"]
