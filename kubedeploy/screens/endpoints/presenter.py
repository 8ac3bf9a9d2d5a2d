"""Endpoints screen presenter - row formatting."""

from __future__ import annotations

from rich.markup import escape

from kubedeploy.constants.enums import ExposureType
from kubedeploy.models.core.endpoint_info import EndpointPort, EndpointSummary

_TYPE_COLORS: dict[str, str] = {
    ExposureType.LOAD_BALANCER.value: "green",
    ExposureType.NODE_PORT.value: "blue",
    ExposureType.CLUSTER_IP.value: "magenta",
}


def type_markup(endpoint_type: str) -> str:
    color = _TYPE_COLORS.get(endpoint_type, "magenta")
    return f"[{color}]{escape(endpoint_type)}[/{color}]"


def port_text(port: EndpointPort) -> str:
    """``name port->target/PROTO`` with ``:nodePort`` when one is assigned."""
    text = f"{port.port}->{port.target_port}/{port.protocol.value}"
    if port.name:
        text = f"{port.name} {text}"
    if port.node_port:
        text = f"{text}:{port.node_port}"
    return text


class EndpointsPresenter:
    """Presenter for EndpointsScreen row formatting."""

    def __init__(self) -> None:
        self._endpoints: list[EndpointSummary] = []

    @property
    def endpoints(self) -> list[EndpointSummary]:
        return self._endpoints

    def set_endpoints(self, endpoints: list[EndpointSummary]) -> None:
        self._endpoints = list(endpoints)

    def get_rows(self) -> list[list[str]]:
        return [
            [
                escape(endpoint.name),
                escape(endpoint.namespace),
                type_markup(endpoint.type),
                escape(endpoint.cluster_ip or "-"),
                escape(endpoint.external_ip or "-"),
                escape(", ".join(port_text(port) for port in endpoint.ports) or "-"),
                escape(endpoint.created_at),
            ]
            for endpoint in self._endpoints
        ]

    def endpoint_at(self, index: int) -> EndpointSummary | None:
        if 0 <= index < len(self._endpoints):
            return self._endpoints[index]
        return None


__all__ = [
    "EndpointsPresenter",
    "port_text",
    "type_markup",
]
