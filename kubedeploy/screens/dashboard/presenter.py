"""Dashboard presenter - cluster summary counts."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from rich.markup import escape

from kubedeploy.constants.enums import PodPhase
from kubedeploy.models.core.endpoint_info import EndpointSummary
from kubedeploy.models.core.pod_info import Pod
from kubedeploy.models.core.workload_info import WorkloadSummary


@dataclass(frozen=True)
class DashboardSummary:
    """Counts shown on the dashboard."""

    total_pods: int = 0
    running_pods: int = 0
    pending_pods: int = 0
    failed_pods: int = 0
    total_workloads: int = 0
    healthy_workloads: int = 0
    total_endpoints: int = 0
    endpoints_by_type: dict[str, int] = field(default_factory=dict)

    @property
    def attention_pods(self) -> int:
        """Pods that are pending or failed."""
        return self.pending_pods + self.failed_pods


def summarize(
    pods: list[Pod],
    workloads: list[WorkloadSummary],
    endpoints: list[EndpointSummary],
) -> DashboardSummary:
    phases = Counter(pod.phase for pod in pods)
    return DashboardSummary(
        total_pods=len(pods),
        running_pods=phases[PodPhase.RUNNING],
        pending_pods=phases[PodPhase.PENDING],
        failed_pods=phases[PodPhase.FAILED],
        total_workloads=len(workloads),
        healthy_workloads=sum(1 for workload in workloads if workload.is_healthy),
        total_endpoints=len(endpoints),
        endpoints_by_type=dict(Counter(endpoint.type for endpoint in endpoints)),
    )


def summary_lines(summary: DashboardSummary) -> list[str]:
    """Markup lines for the summary panel."""
    by_type = ", ".join(
        f"{count} {escape(endpoint_type)}"
        for endpoint_type, count in sorted(summary.endpoints_by_type.items())
    )
    return [
        f"[b]Pods[/b]         {summary.total_pods} "
        f"([green]{summary.running_pods} running[/green])",
        f"[b]Deployments[/b]  {summary.total_workloads} "
        f"([green]{summary.healthy_workloads} healthy[/green])",
        f"[b]Services[/b]     {summary.total_endpoints}"
        + (f" ({by_type})" if by_type else ""),
        f"[b]Attention[/b]    [yellow]{summary.attention_pods}[/yellow] "
        "pending or failed",
    ]


__all__ = [
    "DashboardSummary",
    "summarize",
    "summary_lines",
]
