"""Tests for the dashboard summary."""

from __future__ import annotations

from kubedeploy.constants.enums import PodPhase
from kubedeploy.models.core.endpoint_info import EndpointSummary
from kubedeploy.models.core.pod_info import Pod
from kubedeploy.models.core.workload_info import WorkloadSummary
from kubedeploy.screens.dashboard.presenter import DashboardSummary, summarize, summary_lines


def _pods(*phases: PodPhase) -> list[Pod]:
    return [Pod(name=f"pod-{n}", phase=phase) for n, phase in enumerate(phases)]


class TestSummarize:
    """Tests for summarize."""

    def test_counts(self) -> None:
        summary = summarize(
            _pods(PodPhase.RUNNING, PodPhase.RUNNING, PodPhase.PENDING, PodPhase.FAILED),
            [
                WorkloadSummary(name="a", replicas=2, ready_replicas=2),
                WorkloadSummary(name="b", replicas=2, ready_replicas=1),
                WorkloadSummary(name="c", replicas=0, ready_replicas=0),
            ],
            [
                EndpointSummary(name="a-service", type="LoadBalancer"),
                EndpointSummary(name="b-service", type="ClusterIP"),
                EndpointSummary(name="c-service", type="ClusterIP"),
            ],
        )

        assert summary.total_pods == 4
        assert summary.running_pods == 2
        assert summary.pending_pods == 1
        assert summary.failed_pods == 1
        assert summary.attention_pods == 2
        assert summary.total_workloads == 3
        assert summary.healthy_workloads == 1
        assert summary.total_endpoints == 3
        assert summary.endpoints_by_type == {"LoadBalancer": 1, "ClusterIP": 2}

    def test_empty(self) -> None:
        assert summarize([], [], []) == DashboardSummary()


class TestSummaryLines:
    """Tests for summary_lines."""

    def test_lines(self) -> None:
        lines = summary_lines(
            DashboardSummary(
                total_pods=3,
                running_pods=2,
                total_endpoints=2,
                endpoints_by_type={"NodePort": 1, "ClusterIP": 1},
            )
        )
        assert "3" in lines[0] and "2 running" in lines[0]
        assert "(1 ClusterIP, 1 NodePort)" in lines[2]

    def test_no_endpoint_breakdown_when_empty(self) -> None:
        assert "(" not in summary_lines(DashboardSummary())[2]

    def test_endpoint_type_is_escaped(self) -> None:
        lines = summary_lines(
            DashboardSummary(total_endpoints=1, endpoints_by_type={"[red]Odd": 1})
        )
        assert lines[2].endswith(r"(1 \[red]Odd)")
