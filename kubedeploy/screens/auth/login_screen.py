"""Login screen - the entry point of every session."""

from __future__ import annotations

import logging

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Input, Label, Static

from kubedeploy.constants.values import APP_TITLE, MSG_LOGIN_FAILED, MSG_TRANSPORT_FAILED
from kubedeploy.screens.auth.presenter import AuthPresenter
from kubedeploy.screens.base_screen import BaseScreen
from kubedeploy.utils.sync_manager import CachedView

logger = logging.getLogger(__name__)

LOGIN_ERROR_ID = "login-error"
LOGIN_SUBMIT_ID = "login-submit"
LOGIN_BACKEND_ID = "login-backend"


class LoginScreen(BaseScreen):
    """Email and password form; opens the dashboard on success."""

    BINDINGS = [("ctrl+n", "open_signup", "Sign up")]

    def __init__(self, message: str | None = None) -> None:
        super().__init__()
        self._message = message
        self.presenter = AuthPresenter()

    @property
    def screen_title(self) -> str:
        return "Login"

    def compose_content(self) -> ComposeResult:
        with Vertical(id="auth-panel", classes="auth-panel"):
            yield Static(f"{APP_TITLE} - Sign in", classes="screen-title")
            yield Label("Email")
            yield Input(placeholder="you@example.com", id="login-email")
            yield Label("Password")
            yield Input(password=True, id="login-password")
            yield Static(
                escape(self._message) if self._message else "",
                id=LOGIN_ERROR_ID,
                classes="form-errors",
            )
            yield Static("", id=LOGIN_BACKEND_ID, classes="view-status")
            with Horizontal(classes="form-buttons"):
                yield Button("Login", id=LOGIN_SUBMIT_ID, variant="primary")
                yield Button("Create account", id="login-signup")

    def on_mount(self) -> None:
        super().on_mount()
        self.query_one("#login-email", Input).focus()
        self.start_worker(self._check_backend(), exclusive=True, name="health", group="health")

    async def _check_backend(self) -> None:
        """Warn up front when the cluster API does not answer its health check."""
        if await self.state.client.check_connection():
            return
        url = self.state.client.base_url
        logger.warning("Health check against %s failed", url)
        self.set_status(
            LOGIN_BACKEND_ID, f"[yellow]{escape(MSG_TRANSPORT_FAILED)} at {escape(url)}[/yellow]"
        )

    def render_view(self, view: CachedView) -> None:
        """The login form observes no collections."""

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "login-email":
            self.query_one("#login-password", Input).focus()
        else:
            self.action_submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == LOGIN_SUBMIT_ID:
            self.action_submit()
        elif event.button.id == "login-signup":
            self.action_open_signup()

    def action_open_signup(self) -> None:
        from kubedeploy.screens.auth.signup_screen import SignupScreen

        self.app.switch_screen(SignupScreen())

    def action_submit(self) -> None:
        submit = self.query_one(f"#{LOGIN_SUBMIT_ID}", Button)
        if submit.disabled:
            return
        email = self.query_one("#login-email", Input).value.strip()
        password = self.query_one("#login-password", Input).value
        problem = self.presenter.validate_login(email, password)
        if problem:
            self.set_status(LOGIN_ERROR_ID, f"[red]{escape(problem)}[/red]")
            return

        self.set_status(LOGIN_ERROR_ID, "Signing in...")
        submit.disabled = True
        self.start_worker(self._login(email, password), exclusive=True, name="login", group="auth")

    async def _login(self, email: str, password: str) -> None:
        try:
            result = await self.state.auth.login(email, password)
        finally:
            self.query_one(f"#{LOGIN_SUBMIT_ID}", Button).disabled = False
        if not result.success:
            logger.info("Login rejected for %s", email)
            self.set_status(
                LOGIN_ERROR_ID,
                f"[red]{escape(result.error_text(MSG_LOGIN_FAILED))}[/red]",
            )
            return
        self.app.show_dashboard()


__all__ = ["LoginScreen"]
