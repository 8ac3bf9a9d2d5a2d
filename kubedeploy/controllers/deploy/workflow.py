"""Deployment orchestration and workload mutations.

``submit_deployment`` creates the workload and then, only if requested and
only after the workload call succeeded, the endpoint that fronts it. There is
no rollback: if the endpoint call fails the workload stays in the cluster
without its exposure, and the caller gets the endpoint error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from kubedeploy.constants.enums import ResourceKind, ScaleDirection
from kubedeploy.constants.limits import REPLICAS_MIN
from kubedeploy.constants.values import (
    MSG_CREATE_POD_FAILED,
    MSG_DELETE_ENDPOINT_FAILED,
    MSG_DELETE_POD_FAILED,
    MSG_DELETE_WORKLOAD_FAILED,
    MSG_DEPLOY_FAILED,
    MSG_SCALE_FAILED,
)
from kubedeploy.controllers.api.resources import (
    EndpointResource,
    PodResource,
    WorkloadResource,
)
from kubedeploy.controllers.base import ApiResult
from kubedeploy.controllers.deploy.transformer import (
    build_endpoint_request,
    build_quick_pod_request,
    build_workload_request,
)
from kubedeploy.models.forms.deploy_form import DeploymentForm, QuickPodForm

if TYPE_CHECKING:
    from kubedeploy.utils.sync_manager import SyncManager

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkflowResult:
    """Outcome of a user-triggered mutation.

    ``error`` is the single message to show the user. ``unauthorized`` is set
    when the failure was an authorization denial, which the app handles
    globally instead of showing it as a form error.
    """

    success: bool
    error: str | None = None
    unauthorized: bool = False

    @classmethod
    def ok(cls) -> WorkflowResult:
        return cls(success=True)

    @classmethod
    def from_failure(cls, result: ApiResult[Any], fallback: str) -> WorkflowResult:
        return cls(
            success=False,
            error=result.error_text(fallback),
            unauthorized=result.is_unauthorized,
        )


def scale_target(current_replicas: int, direction: ScaleDirection) -> int:
    """Replica count one step up or down, never below zero."""
    if direction is ScaleDirection.UP:
        return current_replicas + 1
    return max(REPLICAS_MIN, current_replicas - 1)


class DeploymentWorkflow:
    """Sequences create/scale/delete calls and invalidates the affected caches."""

    def __init__(
        self,
        workloads: WorkloadResource,
        endpoints: EndpointResource,
        pods: PodResource,
        sync: SyncManager,
    ) -> None:
        self._workloads = workloads
        self._endpoints = endpoints
        self._pods = pods
        self._sync = sync

    async def submit_deployment(self, form: DeploymentForm) -> WorkflowResult:
        """Create the workload, then its endpoint when ``form.create_endpoint``."""
        workload_spec = build_workload_request(form)
        created = await self._workloads.create_workload(workload_spec)
        if not created.success:
            logger.warning(
                "Workload %s/%s was not created: %s",
                workload_spec.namespace,
                workload_spec.name,
                created.error or created.detail,
            )
            return WorkflowResult.from_failure(created, MSG_DEPLOY_FAILED)
        await self._sync.invalidate(ResourceKind.WORKLOADS)

        if form.create_endpoint:
            # Derived from the submitted name; the backend keeps requested names.
            endpoint_spec = build_endpoint_request(form, workload_spec.name)
            exposed = await self._endpoints.create_endpoint(endpoint_spec)
            if not exposed.success:
                logger.warning(
                    "Workload %s/%s created but endpoint %s failed: %s",
                    workload_spec.namespace,
                    workload_spec.name,
                    endpoint_spec.name,
                    exposed.error or exposed.detail,
                )
                return WorkflowResult.from_failure(exposed, MSG_DEPLOY_FAILED)
            await self._sync.invalidate(ResourceKind.ENDPOINTS)

        logger.info("Deployed %s/%s", workload_spec.namespace, workload_spec.name)
        return WorkflowResult.ok()

    async def submit_quick_pod(self, form: QuickPodForm) -> WorkflowResult:
        """Create a single pod through the pod collection."""
        created = await self._pods.create_pod(build_quick_pod_request(form))
        if not created.success:
            return WorkflowResult.from_failure(created, MSG_CREATE_POD_FAILED)
        await self._sync.invalidate(ResourceKind.PODS)
        return WorkflowResult.ok()

    async def scale_workload(
        self,
        namespace: str,
        name: str,
        current_replicas: int,
        direction: ScaleDirection,
    ) -> WorkflowResult:
        """Scale one step in ``direction`` from ``current_replicas``."""
        target = scale_target(current_replicas, direction)
        result = await self._workloads.scale_workload(namespace, name, target)
        if not result.success:
            return WorkflowResult.from_failure(result, MSG_SCALE_FAILED)
        await self._sync.invalidate(ResourceKind.WORKLOADS)
        await self._sync.invalidate(ResourceKind.PODS)
        return WorkflowResult.ok()

    async def delete_workload(self, namespace: str, name: str) -> WorkflowResult:
        result = await self._workloads.delete_workload(namespace, name)
        if not result.success:
            return WorkflowResult.from_failure(result, MSG_DELETE_WORKLOAD_FAILED)
        await self._sync.invalidate(ResourceKind.WORKLOADS)
        await self._sync.invalidate(ResourceKind.PODS)
        return WorkflowResult.ok()

    async def delete_endpoint(self, namespace: str, name: str) -> WorkflowResult:
        result = await self._endpoints.delete_endpoint(namespace, name)
        if not result.success:
            return WorkflowResult.from_failure(result, MSG_DELETE_ENDPOINT_FAILED)
        await self._sync.invalidate(ResourceKind.ENDPOINTS)
        return WorkflowResult.ok()

    async def delete_pod(self, namespace: str, name: str) -> WorkflowResult:
        result = await self._pods.delete_pod(namespace, name)
        if not result.success:
            return WorkflowResult.from_failure(result, MSG_DELETE_POD_FAILED)
        await self._sync.invalidate(ResourceKind.PODS)
        return WorkflowResult.ok()


__all__ = [
    "DeploymentWorkflow",
    "WorkflowResult",
    "scale_target",
]
