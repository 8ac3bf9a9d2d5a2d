"""Workloads screen presenter - row formatting and derived health."""

from __future__ import annotations

from rich.markup import escape

from kubedeploy.constants.enums import ScaleDirection
from kubedeploy.constants.values import DEGRADED, HEALTHY, UNHEALTHY
from kubedeploy.controllers.deploy.workflow import scale_target
from kubedeploy.models.core.workload_info import WorkloadSummary


def ready_text(workload: WorkloadSummary) -> str:
    """``ready/desired`` replica counts."""
    return f"{workload.ready_replicas}/{workload.replicas}"


def health_markup(workload: WorkloadSummary) -> str:
    """Health badge, recomputed from the counts on every render."""
    if workload.is_healthy:
        return HEALTHY
    if workload.ready_replicas > 0:
        return DEGRADED
    return UNHEALTHY


class WorkloadsPresenter:
    """Presenter for WorkloadsScreen row formatting."""

    def __init__(self) -> None:
        self._workloads: list[WorkloadSummary] = []

    @property
    def workloads(self) -> list[WorkloadSummary]:
        return self._workloads

    def set_workloads(self, workloads: list[WorkloadSummary]) -> None:
        self._workloads = list(workloads)

    def get_rows(self) -> list[list[str]]:
        return [
            [
                escape(workload.name),
                escape(workload.namespace),
                ready_text(workload),
                str(workload.available_replicas),
                health_markup(workload),
                escape(workload.image),
                escape(workload.created_at),
            ]
            for workload in self._workloads
        ]

    def workload_at(self, index: int) -> WorkloadSummary | None:
        if 0 <= index < len(self._workloads):
            return self._workloads[index]
        return None

    def healthy_count(self) -> int:
        return sum(1 for workload in self._workloads if workload.is_healthy)

    @staticmethod
    def scale_preview(workload: WorkloadSummary, direction: ScaleDirection) -> str:
        """Human-readable description of a one-step scale."""
        target = scale_target(workload.replicas, direction)
        return f"Scaling {workload.name}: {workload.replicas} -> {target}"


__all__ = [
    "WorkloadsPresenter",
    "health_markup",
    "ready_text",
]
