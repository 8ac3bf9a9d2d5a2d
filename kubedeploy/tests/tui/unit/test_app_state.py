"""Tests for AppState wiring and the session teardown paths."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from kubedeploy.constants.enums import ResourceKind, ViewState
from kubedeploy.models.state.app_settings import AppSettings
from kubedeploy.models.state.app_state import AppState


@pytest.fixture
def state(backend, clock) -> AppState:
    return AppState(
        AppSettings(api_base_url="http://cluster.test/api"),
        clock=clock,
        transport=backend.transport,
        auto_poll=False,
    )


class TestAppState:
    """Tests for AppState."""

    def test_starts_logged_out(self, state) -> None:
        assert state.is_authenticated is False

    @pytest.mark.asyncio
    async def test_sources_are_registered(self, state, backend, respond, workload_payload) -> None:
        backend.on("GET", "/api/deployments", respond([workload_payload]))
        backend.on("GET", "/api/namespaces", respond(["default"]))

        workloads = state.sync.subscribe(ResourceKind.WORKLOADS)
        namespaces = state.sync.subscribe(ResourceKind.NAMESPACES)
        await workloads.refresh()
        await namespaces.refresh()

        assert workloads.view.data[0].name == "web"
        assert namespaces.view.data == ["default"]
        workloads.close()
        namespaces.close()
        await state.aclose()

    @pytest.mark.asyncio
    async def test_login_then_logout(self, state, backend, respond, workload_payload) -> None:
        backend.on(
            "POST",
            "/api/auth/login",
            respond({"token": "t", "user": {"email": "a@b.c", "username": "ab"}}),
        )
        backend.on("GET", "/api/deployments", respond([workload_payload]))

        await state.auth.login("a@b.c", "secret1")
        assert state.is_authenticated is True
        subscription = state.sync.subscribe(ResourceKind.WORKLOADS)
        await subscription.refresh()

        await state.logout()

        assert state.is_authenticated is False
        assert subscription.view.state is ViewState.LOADING
        subscription.close()
        await state.aclose()

    @pytest.mark.asyncio
    async def test_unauthorized_clears_caches_and_calls_handler(
        self, state, backend, respond, session, workload_payload
    ) -> None:
        state.session_store.start(session)
        handler = AsyncMock()
        state.set_session_lost_handler(handler)
        backend.on("GET", "/api/deployments", respond([workload_payload]))
        subscription = state.sync.subscribe(ResourceKind.WORKLOADS)
        await subscription.refresh()

        backend.on("GET", "/api/deployments", respond(status_code=401))
        await subscription.refresh()

        handler.assert_awaited_once()
        assert state.is_authenticated is False
        assert subscription.view.has_data is False
        subscription.close()
        await state.aclose()

    @pytest.mark.asyncio
    async def test_workflow_uses_shared_sync(
        self, state, backend, respond, session
    ) -> None:
        from kubedeploy.models.forms.deploy_form import DeploymentForm

        state.session_store.start(session)
        backend.on("POST", "/api/deployments", respond(status_code=201))
        backend.on("POST", "/api/services", respond(status_code=201))

        result = await state.workflow.submit_deployment(
            DeploymentForm(name="web", namespace="default", image="nginx:latest")
        )

        assert result.success is True
        assert backend.body(backend.calls("POST", "/api/services")[0])["name"] == "web-service"
        assert backend.requests[0].url.path == "/api/deployments"
        await state.aclose()
