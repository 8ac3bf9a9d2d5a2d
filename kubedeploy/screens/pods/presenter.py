"""Pods screen presenter - row formatting, namespace filter and log trimming."""

from __future__ import annotations

from rich.markup import escape

from kubedeploy.constants.enums import PodPhase
from kubedeploy.constants.limits import MAX_LOG_LINES_DISPLAY
from kubedeploy.models.core.pod_info import Pod
from kubedeploy.screens.pods.config import ALL_NAMESPACES_LABEL

_PHASE_COLORS: dict[PodPhase, str] = {
    PodPhase.RUNNING: "green",
    PodPhase.SUCCEEDED: "green",
    PodPhase.FAILED: "red",
    PodPhase.PENDING: "yellow",
    PodPhase.UNKNOWN: "dim",
}


def phase_markup(phase: PodPhase) -> str:
    color = _PHASE_COLORS.get(phase, "dim")
    return f"[{color}]{phase.value}[/{color}]"


def namespace_options(namespaces: list[str]) -> list[tuple[str, str]]:
    """Options for the namespace filter; the empty value means all namespaces."""
    return [(ALL_NAMESPACES_LABEL, "")] + [
        (namespace, namespace) for namespace in sorted(set(namespaces))
    ]


def trim_logs(logs: str, max_lines: int = MAX_LOG_LINES_DISPLAY) -> str:
    """Keep the last ``max_lines`` lines of a log blob."""
    lines = logs.splitlines()
    if len(lines) <= max_lines:
        return logs
    return "\n".join(lines[-max_lines:])


class PodsPresenter:
    """Presenter for PodsScreen row formatting."""

    def __init__(self) -> None:
        self._pods: list[Pod] = []

    @property
    def pods(self) -> list[Pod]:
        return self._pods

    def set_pods(self, pods: list[Pod]) -> None:
        self._pods = list(pods)

    def get_rows(self) -> list[list[str]]:
        return [
            [
                escape(pod.name),
                escape(pod.namespace),
                phase_markup(pod.phase),
                escape(pod.status or "-"),
                str(pod.restarts),
                escape(pod.image),
                escape(pod.created_at),
            ]
            for pod in self._pods
        ]

    def pod_at(self, index: int) -> Pod | None:
        if 0 <= index < len(self._pods):
            return self._pods[index]
        return None


__all__ = [
    "PodsPresenter",
    "namespace_options",
    "phase_markup",
    "trim_logs",
]
