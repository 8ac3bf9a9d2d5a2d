"""Shared fixtures: fake backend, fixed clock and sample payloads."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from kubedeploy.models.core.user_info import Session, User
from kubedeploy.models.state.session_store import SessionStore
from kubedeploy.utils.clock import ManualClock

Handler = Callable[[httpx.Request], httpx.Response]


def envelope(
    data: Any = None,
    *,
    status_code: int = 200,
    success: bool | None = None,
    error: str | None = None,
    message: str | None = None,
) -> httpx.Response:
    """Build a backend response in the shared ``{success, data, error}`` shape."""
    body: dict[str, Any] = {
        "success": (200 <= status_code < 300) if success is None else success
    }
    if data is not None:
        body["data"] = data
    if error is not None:
        body["error"] = error
    if message is not None:
        body["message"] = message
    return httpx.Response(status_code, json=body)


class FakeBackend:
    """Routes requests by ``(method, path)`` and records every request seen."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Handler] = {}
        self.requests: list[httpx.Request] = []

    def on(self, method: str, path: str, handler: Handler | httpx.Response) -> None:
        if isinstance(handler, httpx.Response):
            response = handler
            self.routes[(method, path)] = lambda _request: response
        else:
            self.routes[(method, path)] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return envelope(status_code=404, error="not found")
        return handler(request)

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [
            request
            for request in self.requests
            if request.method == method and request.url.path == path
        ]

    @staticmethod
    def body(request: httpx.Request) -> Any:
        return json.loads(request.content)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def session() -> Session:
    return Session(
        token="tok-123",
        user=User(id=1, email="dev@example.com", username="dev", full_name="Dev User"),
    )


@pytest.fixture
def session_store(session: Session) -> SessionStore:
    return SessionStore(session)


@pytest.fixture
def workload_payload() -> dict[str, Any]:
    return {
        "name": "web",
        "namespace": "default",
        "replicas": 3,
        "availableReplicas": 3,
        "readyReplicas": 3,
        "created_at": "2024-01-01T00:00:00Z",
        "image": "nginx:latest",
        "labels": {"app": "web"},
    }


@pytest.fixture
def pod_payload() -> dict[str, Any]:
    return {
        "name": "web-6d4cf56db6-abcde",
        "namespace": "default",
        "status": "Running",
        "phase": "Running",
        "image": "nginx:latest",
        "restarts": 0,
        "created_at": "2024-01-01T00:00:00Z",
    }


@pytest.fixture
def endpoint_payload() -> dict[str, Any]:
    return {
        "name": "web-service",
        "namespace": "default",
        "type": "LoadBalancer",
        "clusterIP": "10.0.0.12",
        "externalIP": "203.0.113.7",
        "ports": [
            {"name": "http", "port": 80, "targetPort": 80, "protocol": "TCP", "nodePort": 0}
        ],
        "created_at": "2024-01-01T00:00:00Z",
    }


@pytest.fixture
def respond() -> Callable[..., httpx.Response]:
    """The :func:`envelope` builder, for tests that script backend replies."""
    return envelope
