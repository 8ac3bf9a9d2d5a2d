"""Smoke tests for the session lifecycle of the running application.

This module drives KubeDeployApp through Textual's pilot against an
in-memory backend:
1. The app opens on the login screen and ignores navigation keys
2. A successful login opens the dashboard and unlocks navigation
3. A rejected login keeps the user on the login screen with the message
4. An expired session sends the user back to login
5. The login screen warns when the API health check fails
6. The dashboard confirms the session with the backend
"""

from __future__ import annotations

import httpx
import pytest
from textual.widgets import Input

from kubedeploy.app import KubeDeployApp
from kubedeploy.models.state.app_settings import AppSettings
from kubedeploy.models.state.app_state import AppState
from kubedeploy.screens import DashboardScreen, LoginScreen, WorkloadsScreen

USER = {"id": 1, "email": "dev@example.com", "username": "dev", "full_name": "Dev"}


@pytest.fixture
def cluster(backend, respond) -> dict[str, bool]:
    """Backend with empty collections; flip ``expired`` to reject every call."""
    flags = {"expired": False}

    def collection(request: httpx.Request) -> httpx.Response:
        if flags["expired"]:
            return respond(status_code=401, error="token expired")
        return respond([])

    for path in ("deployments", "services", "pods", "namespaces"):
        backend.on("GET", f"/api/{path}", collection)

    def login(request: httpx.Request) -> httpx.Response:
        if backend.body(request)["password"] != "s3cret":
            return respond(status_code=401, error="Invalid email or password")
        return respond({"token": "tok-123", "user": USER})

    def me(request: httpx.Request) -> httpx.Response:
        if flags["expired"]:
            return respond(status_code=401, error="token expired")
        return respond(USER)

    backend.on("POST", "/api/auth/login", login)
    backend.on("GET", "/api/auth/me", me)
    backend.on("GET", "/api/health", respond({"status": "ok"}))
    return flags


@pytest.fixture
def app(backend, cluster: dict[str, bool]) -> KubeDeployApp:
    settings = AppSettings(api_base_url="http://cluster.test/api")
    return KubeDeployApp(state=AppState(settings, transport=backend.transport))


async def _wait(pilot, predicate, attempts: int = 200) -> None:
    for _ in range(attempts):
        if predicate():
            return
        await pilot.pause(0.01)
    raise AssertionError("condition was not reached")


async def _wait_for_screen(pilot, app: KubeDeployApp, screen_type: type) -> None:
    """Wait until ``screen_type`` is active and its header has finished mounting."""
    await _wait(pilot, lambda: isinstance(app.screen, screen_type))
    await _wait(pilot, lambda: bool(app.screen.query("HeaderTitle")))
    await pilot.pause(0.1)


async def _submit_login(pilot, app: KubeDeployApp, password: str) -> LoginScreen:
    await _wait_for_screen(pilot, app, LoginScreen)
    screen = app.screen
    screen.query_one("#login-email", Input).value = "dev@example.com"
    screen.query_one("#login-password", Input).value = password
    screen.action_submit()
    return screen


class TestLoginFlow:
    """Login gate, navigation and session expiry."""

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_starts_on_login_and_blocks_navigation(self, app: KubeDeployApp) -> None:
        async with app.run_test() as pilot:
            await _wait_for_screen(pilot, app, LoginScreen)

            app.action_nav_workloads()
            await pilot.pause()

            assert isinstance(app.screen, LoginScreen)
            assert not app.state.is_authenticated

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_login_opens_dashboard(self, app: KubeDeployApp, backend) -> None:
        async with app.run_test() as pilot:
            await _submit_login(pilot, app, "s3cret")
            await _wait_for_screen(pilot, app, DashboardScreen)

            assert app.state.is_authenticated
            assert backend.calls("POST", "/api/auth/login")

            app.action_nav_workloads()
            await _wait_for_screen(pilot, app, WorkloadsScreen)

            app.action_back()
            await _wait_for_screen(pilot, app, DashboardScreen)

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_rejected_login_shows_error(
        self, app: KubeDeployApp, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        statuses: list[str] = []
        monkeypatch.setattr(
            LoginScreen, "set_status", lambda self, _id, text: statuses.append(text)
        )
        async with app.run_test() as pilot:
            await _submit_login(pilot, app, "wrong")
            await _wait(pilot, lambda: any("Invalid email" in text for text in statuses))

            assert isinstance(app.screen, LoginScreen)
            assert not app.state.is_authenticated

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_expired_session_returns_to_login(
        self, app: KubeDeployApp, cluster: dict[str, bool]
    ) -> None:
        async with app.run_test() as pilot:
            await _submit_login(pilot, app, "s3cret")
            await _wait_for_screen(pilot, app, DashboardScreen)

            cluster["expired"] = True
            result = await app.state.client.get("/deployments")

            assert result.is_unauthorized
            await _wait_for_screen(pilot, app, LoginScreen)
            assert not app.state.is_authenticated

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_logout(self, app: KubeDeployApp) -> None:
        async with app.run_test() as pilot:
            await _submit_login(pilot, app, "s3cret")
            await _wait_for_screen(pilot, app, DashboardScreen)

            await app.action_logout()
            await _wait_for_screen(pilot, app, LoginScreen)

            assert not app.state.is_authenticated

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_unreachable_backend_is_reported(
        self, app: KubeDeployApp, backend, respond, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        backend.on("GET", "/api/health", respond(status_code=503))
        statuses: list[str] = []
        monkeypatch.setattr(
            LoginScreen, "set_status", lambda self, _id, text: statuses.append(text)
        )
        async with app.run_test() as pilot:
            await _wait(pilot, lambda: any("Unable to reach" in text for text in statuses))

            assert "http://cluster.test/api" in statuses[-1]
            assert isinstance(app.screen, LoginScreen)

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_dashboard_confirms_session(self, app: KubeDeployApp, backend) -> None:
        async with app.run_test() as pilot:
            await _submit_login(pilot, app, "s3cret")
            await _wait_for_screen(pilot, app, DashboardScreen)
            await _wait(pilot, lambda: bool(backend.calls("GET", "/api/auth/me")))

            assert isinstance(app.screen, DashboardScreen)
            assert app.state.is_authenticated

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_session_rejected_by_backend_returns_to_login(
        self, app: KubeDeployApp, backend, cluster: dict[str, bool]
    ) -> None:
        cluster["expired"] = True
        async with app.run_test() as pilot:
            await _submit_login(pilot, app, "s3cret")
            await _wait(pilot, lambda: bool(backend.calls("GET", "/api/auth/me")))
            await _wait(pilot, lambda: not app.state.is_authenticated)
            await _wait_for_screen(pilot, app, LoginScreen)

            assert isinstance(app.screen, LoginScreen)
