"""HTTP client for the cluster-management backend.

Every request goes through :meth:`ApiClient.request`, which attaches the
session token, decodes the shared response envelope and applies the global
authorization-failure policy (clear the session, notify the app).
"""

from __future__ import annotations

import inspect
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

import httpx
from pydantic import ValidationError

from kubedeploy.constants.enums import ErrorCategory
from kubedeploy.constants.timeouts import API_HEALTH_CHECK_TIMEOUT, API_REQUEST_TIMEOUT
from kubedeploy.controllers.base import ApiResult
from kubedeploy.models.core.envelope import APIEnvelope
from kubedeploy.models.state.session_store import SessionStore

logger = logging.getLogger(__name__)

UnauthorizedHandler = Callable[[], Awaitable[None] | None]


def category_for_status(status_code: int) -> ErrorCategory:
    """Map an HTTP status code of a failed response to an error category."""
    if status_code == 401:
        return ErrorCategory.UNAUTHORIZED
    if status_code == 404:
        return ErrorCategory.NOT_FOUND
    if 400 <= status_code < 500:
        return ErrorCategory.VALIDATION
    return ErrorCategory.REMOTE


class ApiClient:
    """Async JSON client with bearer-token auth and envelope decoding."""

    HEALTH_PATH = "/health"

    def __init__(
        self,
        base_url: str,
        session_store: SessionStore,
        *,
        timeout: float = API_REQUEST_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
        on_unauthorized: UnauthorizedHandler | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Backend API root, e.g. ``http://localhost:8080/api``
            session_store: Source of the bearer token; cleared on 401
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests use ``httpx.MockTransport``)
            on_unauthorized: Called after the session is cleared by a 401
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session_store = session_store
        self._transport = transport
        self._on_unauthorized = on_unauthorized
        self._client: httpx.AsyncClient | None = None

    @property
    def session_store(self) -> SessionStore:
        return self._session_store

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy initialization of the httpx client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                headers={"Content-Type": "application/json"},
            )
        return self._client

    def set_unauthorized_handler(self, handler: UnauthorizedHandler | None) -> None:
        self._on_unauthorized = handler

    async def check_connection(self) -> bool:
        """Return True when the backend health endpoint answers."""
        try:
            response = await self.client.get(
                self.HEALTH_PATH, timeout=API_HEALTH_CHECK_TIMEOUT
            )
        except httpx.RequestError as exc:
            logger.debug("Health check failed: %s", exc)
            return False
        return response.is_success

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> ApiResult[Any]:
        """Issue one request and decode the envelope.

        Empty query parameters are dropped, so an unset namespace filter is
        never sent.
        """
        headers: dict[str, str] = {}
        token = self._session_store.token
        if token:
            headers["Authorization"] = f"Bearer {token}"

        query = {
            key: value
            for key, value in (params or {}).items()
            if value is not None and value != ""
        }

        start = time.monotonic()
        try:
            response = await self.client.request(
                method,
                path,
                params=query or None,
                json=json,
                headers=headers,
            )
        except httpx.TimeoutException:
            logger.warning("%s %s timed out after %ss", method, path, self.timeout)
            return ApiResult.failure(
                ErrorCategory.TRANSPORT,
                detail=f"Request timed out after {self.timeout} seconds",
            )
        except httpx.RequestError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            return ApiResult.failure(ErrorCategory.TRANSPORT, detail=str(exc))

        result = await self._decode(method, path, response)
        result.duration_ms = (time.monotonic() - start) * 1000
        return result

    async def get(self, path: str, *, params: dict[str, Any] | None = None) -> ApiResult[Any]:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, *, json: Any = None) -> ApiResult[Any]:
        return await self.request("POST", path, json=json)

    async def put(
        self,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> ApiResult[Any]:
        return await self.request("PUT", path, params=params, json=json)

    async def delete(self, path: str) -> ApiResult[Any]:
        return await self.request("DELETE", path)

    async def _decode(
        self, method: str, path: str, response: httpx.Response
    ) -> ApiResult[Any]:
        envelope = self._parse_envelope(response)
        status = response.status_code

        if status == 401:
            logger.warning("%s %s was rejected as unauthorized", method, path)
            await self._handle_unauthorized()
            return ApiResult.failure(
                ErrorCategory.UNAUTHORIZED,
                error=envelope.error if envelope else None,
                status_code=status,
            )

        if envelope is None:
            category = (
                ErrorCategory.TRANSPORT if response.is_success else category_for_status(status)
            )
            return ApiResult.failure(
                category,
                status_code=status,
                detail=f"HTTP {status}: undecodable response body",
            )

        if response.is_success and envelope.success:
            return ApiResult.ok(envelope.data, message=envelope.message, status_code=status)

        category = category_for_status(status) if not response.is_success else ErrorCategory.REMOTE
        logger.debug("%s %s failed with %s: %s", method, path, status, envelope.error)
        return ApiResult.failure(category, error=envelope.error or None, status_code=status)

    @staticmethod
    def _parse_envelope(response: httpx.Response) -> APIEnvelope | None:
        try:
            payload = response.json()
        except ValueError:
            return None
        if not isinstance(payload, dict):
            return None
        try:
            return APIEnvelope.model_validate(payload)
        except ValidationError:
            return None

    async def _handle_unauthorized(self) -> None:
        had_session = self._session_store.is_authenticated
        self._session_store.clear()
        # A rejected login has no session to lose.
        if self._on_unauthorized is None or not had_session:
            return
        outcome = self._on_unauthorized()
        if inspect.isawaitable(outcome):
            await outcome

    async def aclose(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
