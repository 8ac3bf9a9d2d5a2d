"""Signup screen - creates an account and signs straight in."""

from __future__ import annotations

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Input, Label, Static

from kubedeploy.constants.values import APP_TITLE, MSG_SIGNUP_FAILED
from kubedeploy.screens.auth.presenter import AuthPresenter
from kubedeploy.screens.base_screen import BaseScreen
from kubedeploy.utils.sync_manager import CachedView

SIGNUP_ERROR_ID = "signup-error"
SIGNUP_SUBMIT_ID = "signup-submit"

_INPUT_ORDER = [
    "signup-email",
    "signup-username",
    "signup-full-name",
    "signup-password",
    "signup-confirm",
]


class SignupScreen(BaseScreen):
    """Account creation form."""

    def __init__(self) -> None:
        super().__init__()
        self.presenter = AuthPresenter()

    @property
    def screen_title(self) -> str:
        return "Sign up"

    def compose_content(self) -> ComposeResult:
        with Vertical(id="auth-panel", classes="auth-panel"):
            yield Static(f"{APP_TITLE} - Create account", classes="screen-title")
            yield Label("Email")
            yield Input(placeholder="you@example.com", id="signup-email")
            yield Label("Username")
            yield Input(id="signup-username")
            yield Label("Full name (optional)")
            yield Input(id="signup-full-name")
            yield Label("Password")
            yield Input(password=True, id="signup-password")
            yield Label("Confirm password")
            yield Input(password=True, id="signup-confirm")
            yield Static("", id=SIGNUP_ERROR_ID, classes="form-errors")
            with Horizontal(classes="form-buttons"):
                yield Button("Sign up", id=SIGNUP_SUBMIT_ID, variant="primary")
                yield Button("Back to login", id="signup-login")

    def render_view(self, view: CachedView) -> None:
        """The signup form observes no collections."""

    def _value(self, widget_id: str) -> str:
        return self.query_one(f"#{widget_id}", Input).value

    def on_input_submitted(self, event: Input.Submitted) -> None:
        position = _INPUT_ORDER.index(event.input.id or "")
        if position + 1 < len(_INPUT_ORDER):
            self.query_one(f"#{_INPUT_ORDER[position + 1]}", Input).focus()
        else:
            self.action_submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == SIGNUP_SUBMIT_ID:
            self.action_submit()
        elif event.button.id == "signup-login":
            self.app.show_login()

    def action_submit(self) -> None:
        submit = self.query_one(f"#{SIGNUP_SUBMIT_ID}", Button)
        if submit.disabled:
            return
        email = self._value("signup-email").strip()
        username = self._value("signup-username").strip()
        full_name = self._value("signup-full-name").strip()
        password = self._value("signup-password")
        problem = self.presenter.validate_signup(
            email, username, password, self._value("signup-confirm")
        )
        if problem:
            self.set_status(SIGNUP_ERROR_ID, f"[red]{escape(problem)}[/red]")
            return

        self.set_status(SIGNUP_ERROR_ID, "Creating account...")
        submit.disabled = True
        self.start_worker(
            self._signup(email, username, password, full_name or None),
            exclusive=True,
            name="signup",
            group="auth",
        )

    async def _signup(
        self, email: str, username: str, password: str, full_name: str | None
    ) -> None:
        try:
            result = await self.state.auth.signup(email, username, password, full_name)
        finally:
            self.query_one(f"#{SIGNUP_SUBMIT_ID}", Button).disabled = False
        if not result.success:
            self.set_status(
                SIGNUP_ERROR_ID,
                f"[red]{escape(result.error_text(MSG_SIGNUP_FAILED))}[/red]",
            )
            return
        self.app.show_dashboard()


__all__ = ["SignupScreen"]
