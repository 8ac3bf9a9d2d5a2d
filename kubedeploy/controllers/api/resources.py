"""Per-kind operation sets over :class:`ApiClient`.

Each operation returns an :class:`ApiResult` whose payload is already parsed
into the matching pydantic model.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar
from urllib.parse import quote

from pydantic import ValidationError

from kubedeploy.constants.enums import ErrorCategory
from kubedeploy.controllers.api.client import ApiClient
from kubedeploy.controllers.base import ApiResult
from kubedeploy.models.core.endpoint_info import EndpointSpec, EndpointSummary
from kubedeploy.models.core.pod_info import Pod, PodCreateRequest
from kubedeploy.models.core.user_info import Session, User
from kubedeploy.models.core.workload_info import WorkloadSpec, WorkloadSummary

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _item_path(collection: str, namespace: str, name: str) -> str:
    return f"/{collection}/{quote(namespace, safe='')}/{quote(name, safe='')}"


class BaseResource:
    """Shared parsing helpers for resource operation sets."""

    COLLECTION = ""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    @property
    def client(self) -> ApiClient:
        return self._client

    @staticmethod
    def _parse(result: ApiResult[Any], parser: Callable[[Any], T]) -> ApiResult[T]:
        """Parse a successful payload; a malformed payload becomes a failure."""
        if not result.success:
            return result.map(lambda _: None)  # type: ignore[return-value]
        try:
            return result.map(parser)
        except (ValidationError, TypeError, ValueError, AttributeError) as exc:
            logger.warning("Malformed payload from backend: %s", exc)
            return ApiResult.failure(
                ErrorCategory.REMOTE,
                status_code=result.status_code,
                detail=f"Malformed response: {exc}",
            )

    @staticmethod
    def _parse_list(model: type[Any]) -> Callable[[Any], list[Any]]:
        def parser(data: Any) -> list[Any]:
            return [model.model_validate(item) for item in data or []]

        return parser

    def _item(self, namespace: str, name: str) -> str:
        return _item_path(self.COLLECTION, namespace, name)


class WorkloadResource(BaseResource):
    """Workload (deployment) collection."""

    COLLECTION = "deployments"

    async def list_workloads(
        self, namespace: str | None = None
    ) -> ApiResult[list[WorkloadSummary]]:
        result = await self._client.get(f"/{self.COLLECTION}", params={"namespace": namespace})
        return self._parse(result, self._parse_list(WorkloadSummary))

    async def get_workload(self, namespace: str, name: str) -> ApiResult[WorkloadSummary]:
        result = await self._client.get(self._item(namespace, name))
        return self._parse(result, WorkloadSummary.model_validate)

    async def create_workload(self, spec: WorkloadSpec) -> ApiResult[WorkloadSummary]:
        logger.info("Creating workload %s/%s", spec.namespace, spec.name)
        result = await self._client.post(f"/{self.COLLECTION}", json=spec.to_payload())
        return self._parse(
            result, lambda data: WorkloadSummary.model_validate(data) if data else None
        )

    async def delete_workload(self, namespace: str, name: str) -> ApiResult[None]:
        logger.info("Deleting workload %s/%s", namespace, name)
        return (await self._client.delete(self._item(namespace, name))).map(lambda _: None)

    async def scale_workload(
        self, namespace: str, name: str, replicas: int
    ) -> ApiResult[None]:
        """Scale to ``replicas``.

        The backend reads the count from the query string; it is also sent in
        the body for servers that read it there.
        """
        logger.info("Scaling workload %s/%s to %d", namespace, name, replicas)
        result = await self._client.put(
            f"{self._item(namespace, name)}/scale",
            params={"replicas": replicas},
            json={"replicas": replicas},
        )
        return result.map(lambda _: None)


class EndpointResource(BaseResource):
    """Network endpoint (service) collection."""

    COLLECTION = "services"

    async def list_endpoints(
        self, namespace: str | None = None
    ) -> ApiResult[list[EndpointSummary]]:
        result = await self._client.get(f"/{self.COLLECTION}", params={"namespace": namespace})
        return self._parse(result, self._parse_list(EndpointSummary))

    async def get_endpoint(self, namespace: str, name: str) -> ApiResult[EndpointSummary]:
        result = await self._client.get(self._item(namespace, name))
        return self._parse(result, EndpointSummary.model_validate)

    async def create_endpoint(self, spec: EndpointSpec) -> ApiResult[EndpointSummary]:
        logger.info("Creating endpoint %s/%s (%s)", spec.namespace, spec.name, spec.type.value)
        result = await self._client.post(f"/{self.COLLECTION}", json=spec.to_payload())
        return self._parse(
            result, lambda data: EndpointSummary.model_validate(data) if data else None
        )

    async def delete_endpoint(self, namespace: str, name: str) -> ApiResult[None]:
        logger.info("Deleting endpoint %s/%s", namespace, name)
        return (await self._client.delete(self._item(namespace, name))).map(lambda _: None)


class PodResource(BaseResource):
    """Pod collection and pod logs."""

    COLLECTION = "pods"

    async def list_pods(self, namespace: str | None = None) -> ApiResult[list[Pod]]:
        result = await self._client.get(f"/{self.COLLECTION}", params={"namespace": namespace})
        return self._parse(result, self._parse_list(Pod))

    async def get_pod(self, namespace: str, name: str) -> ApiResult[Pod]:
        result = await self._client.get(self._item(namespace, name))
        return self._parse(result, Pod.model_validate)

    async def create_pod(self, request: PodCreateRequest) -> ApiResult[Pod]:
        logger.info("Creating pod %s/%s", request.namespace, request.name)
        result = await self._client.post(f"/{self.COLLECTION}", json=request.to_payload())
        return self._parse(result, lambda data: Pod.model_validate(data) if data else None)

    async def delete_pod(self, namespace: str, name: str) -> ApiResult[None]:
        logger.info("Deleting pod %s/%s", namespace, name)
        return (await self._client.delete(self._item(namespace, name))).map(lambda _: None)

    async def get_pod_logs(
        self, namespace: str, name: str, tail_lines: int | None = None
    ) -> ApiResult[str]:
        result = await self._client.get(
            f"{self._item(namespace, name)}/logs", params={"tail": tail_lines}
        )
        return self._parse(result, lambda data: str((data or {}).get("logs", "")))


class NamespaceResource(BaseResource):
    """Namespace names."""

    COLLECTION = "namespaces"

    async def list_namespaces(self) -> ApiResult[list[str]]:
        result = await self._client.get(f"/{self.COLLECTION}")
        return self._parse(result, lambda data: [str(item) for item in data or []])


class AuthResource(BaseResource):
    """Login, signup and identity lookup; the only caller of ``SessionStore.start``."""

    async def login(self, email: str, password: str) -> ApiResult[Session]:
        result = await self._client.post(
            "/auth/login", json={"email": email, "password": password}
        )
        return self._start_session(result)

    async def signup(
        self,
        email: str,
        username: str,
        password: str,
        full_name: str | None = None,
    ) -> ApiResult[Session]:
        payload: dict[str, str] = {
            "email": email,
            "username": username,
            "password": password,
        }
        if full_name:
            payload["full_name"] = full_name
        result = await self._client.post("/auth/signup", json=payload)
        return self._start_session(result)

    async def me(self) -> ApiResult[User]:
        result = await self._client.get("/auth/me")
        return self._parse(result, User.model_validate)

    def logout(self) -> None:
        self._client.session_store.clear()

    def _start_session(self, result: ApiResult[Any]) -> ApiResult[Session]:
        parsed = self._parse(result, Session.model_validate)
        if parsed.success and parsed.data is not None:
            self._client.session_store.start(parsed.data)
        return parsed


__all__ = [
    "AuthResource",
    "BaseResource",
    "EndpointResource",
    "NamespaceResource",
    "PodResource",
    "WorkloadResource",
]
