"""Application state: the process-wide context shared by every screen.

One ``AppState`` is created when the app starts. It owns the session, the
HTTP client, the per-kind resource clients, the synchronization layer and
the deployment workflow, and is handed to presenters instead of living in
module globals.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable

import httpx

from kubedeploy.constants.enums import ResourceKind
from kubedeploy.controllers.api import (
    ApiClient,
    AuthResource,
    EndpointResource,
    NamespaceResource,
    PodResource,
    WorkloadResource,
)
from kubedeploy.controllers.base import ApiResult
from kubedeploy.controllers.deploy import DeploymentWorkflow
from kubedeploy.models.state.app_settings import AppSettings
from kubedeploy.models.state.session_store import SessionStore
from kubedeploy.utils.clock import Clock
from kubedeploy.utils.sync_manager import SyncManager

logger = logging.getLogger(__name__)

SessionLostHandler = Callable[[], Awaitable[None] | None]


class AppState:
    """Wires settings, session, clients, caches and workflow together."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        clock: Clock | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        auto_poll: bool = True,
    ) -> None:
        self.settings = settings or AppSettings()
        self.session_store = SessionStore()
        self.client = ApiClient(
            self.settings.api_base_url,
            self.session_store,
            timeout=self.settings.request_timeout_seconds,
            transport=transport,
            on_unauthorized=self._on_unauthorized,
        )
        self.auth = AuthResource(self.client)
        self.workloads = WorkloadResource(self.client)
        self.endpoints = EndpointResource(self.client)
        self.pods = PodResource(self.client)
        self.namespaces = NamespaceResource(self.client)

        self.sync = SyncManager(
            clock=clock,
            retry_count=self.settings.poll_retry_count,
            auto_poll=auto_poll,
        )
        self.sync.register_source(
            ResourceKind.WORKLOADS,
            self.workloads.list_workloads,
            self.settings.workload_poll_interval,
        )
        self.sync.register_source(
            ResourceKind.ENDPOINTS,
            self.endpoints.list_endpoints,
            self.settings.endpoint_poll_interval,
        )
        self.sync.register_source(
            ResourceKind.PODS,
            self.pods.list_pods,
            self.settings.pod_poll_interval,
        )
        self.sync.register_source(
            ResourceKind.NAMESPACES,
            self._list_namespaces,
            self.settings.namespace_poll_interval,
        )

        self.workflow = DeploymentWorkflow(
            self.workloads, self.endpoints, self.pods, self.sync
        )
        self._session_lost_handler: SessionLostHandler | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.session_store.is_authenticated

    def set_session_lost_handler(self, handler: SessionLostHandler | None) -> None:
        """Called after an authorization failure has torn the session down."""
        self._session_lost_handler = handler

    async def _list_namespaces(self, _namespace: str | None) -> ApiResult[list[str]]:
        return await self.namespaces.list_namespaces()

    async def _on_unauthorized(self) -> None:
        logger.warning("Authorization rejected; clearing cached collections")
        await self.sync.clear()
        if self._session_lost_handler is None:
            return
        outcome = self._session_lost_handler()
        if inspect.isawaitable(outcome):
            await outcome

    async def logout(self) -> None:
        """End the session and drop every cached collection."""
        self.auth.logout()
        await self.sync.clear()
        logger.info("Logged out")

    async def aclose(self) -> None:
        """Stop every poll loop and close the HTTP client."""
        await self.sync.aclose()
        await self.client.aclose()


__all__ = ["AppState", "SessionLostHandler"]
