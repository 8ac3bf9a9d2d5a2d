"""Deploy screen presenter - turns raw form text into form models.

Port and environment fields are entered as comma-separated text:

- container ports: ``[name:]port[/PROTO]``, e.g. ``http:80/TCP``
- service ports: ``[name:]port->target[/PROTO][:nodePort]``,
  e.g. ``http:80->8080/TCP:30080``
- environment: ``KEY=value``
- quick pod ports: plain integers
"""

from __future__ import annotations

import re

from kubedeploy.constants.enums import DeploymentMode, ExposureType, Protocol
from kubedeploy.constants.limits import (
    NODE_PORT_MAX,
    NODE_PORT_MIN,
    PORT_MAX,
    PORT_MIN,
    REPLICAS_MIN,
)
from kubedeploy.errors import FormValidationError
from kubedeploy.models.core.endpoint_info import EndpointPort
from kubedeploy.models.core.workload_info import ContainerPort, EnvVar
from kubedeploy.models.forms.deploy_form import DeploymentForm, QuickPodForm

_CONTAINER_PORT_RE = re.compile(
    r"^(?:(?P<name>[A-Za-z0-9-]+):)?(?P<port>\d+)(?:/(?P<proto>[A-Za-z]+))?$"
)
_ENDPOINT_PORT_RE = re.compile(
    r"^(?:(?P<name>[A-Za-z0-9-]+):)?(?P<port>\d+)->(?P<target>\d+)"
    r"(?:/(?P<proto>[A-Za-z]+))?(?::(?P<node>\d+))?$"
)


def _entries(text: str) -> list[str]:
    return [entry.strip() for entry in text.split(",") if entry.strip()]


def _protocol(value: str | None, entry: str) -> Protocol:
    if not value:
        return Protocol.TCP
    try:
        return Protocol(value.upper())
    except ValueError:
        raise FormValidationError([f"Unknown protocol in '{entry}'"]) from None


def _port_number(value: str, entry: str) -> int:
    number = int(value)
    if not PORT_MIN <= number <= PORT_MAX:
        raise FormValidationError([f"Port out of range in '{entry}'"])
    return number


def parse_container_ports(text: str) -> list[ContainerPort]:
    """Parse ``[name:]port[/PROTO]`` entries.

    Raises:
        FormValidationError: An entry does not match the format.
    """
    ports: list[ContainerPort] = []
    for entry in _entries(text):
        match = _CONTAINER_PORT_RE.match(entry)
        if match is None:
            raise FormValidationError([f"Invalid container port '{entry}'"])
        ports.append(
            ContainerPort(
                name=match["name"] or "",
                container_port=_port_number(match["port"], entry),
                protocol=_protocol(match["proto"], entry),
            )
        )
    return ports


def parse_endpoint_ports(text: str, *, node_ports: bool = True) -> list[EndpointPort]:
    """Parse ``[name:]port->target[/PROTO][:nodePort]`` entries.

    With ``node_ports`` False a ``:nodePort`` suffix is accepted and dropped,
    since only NodePort exposure uses it.

    Raises:
        FormValidationError: An entry does not match the format or a kept
            node port is outside the cluster's node-port range.
    """
    ports: list[EndpointPort] = []
    for entry in _entries(text):
        match = _ENDPOINT_PORT_RE.match(entry)
        if match is None:
            raise FormValidationError([f"Invalid service port '{entry}'"])
        node_port: int | None = None
        if match["node"] and node_ports:
            node_port = int(match["node"])
            if not NODE_PORT_MIN <= node_port <= NODE_PORT_MAX:
                raise FormValidationError(
                    [
                        f"Node port in '{entry}' must be between "
                        f"{NODE_PORT_MIN} and {NODE_PORT_MAX}"
                    ]
                )
        ports.append(
            EndpointPort(
                name=match["name"] or "",
                port=_port_number(match["port"], entry),
                target_port=_port_number(match["target"], entry),
                protocol=_protocol(match["proto"], entry),
                node_port=node_port,
            )
        )
    return ports


def parse_env(text: str) -> list[EnvVar]:
    """Parse ``KEY=value`` entries.

    Entries without ``=`` keep an empty value; such pairs are dropped later
    when the request is built.
    """
    env: list[EnvVar] = []
    for entry in _entries(text):
        name, _, value = entry.partition("=")
        env.append(EnvVar(name=name.strip(), value=value.strip()))
    return env


def parse_int_ports(text: str) -> list[int]:
    """Parse a comma-separated list of port numbers."""
    ports: list[int] = []
    for entry in _entries(text):
        if not entry.isdigit():
            raise FormValidationError([f"Invalid port '{entry}'"])
        ports.append(_port_number(entry, entry))
    return ports


def parse_replicas(text: str) -> int:
    value = text.strip() or "1"
    if not value.isdigit() or int(value) < REPLICAS_MIN:
        raise FormValidationError(["Replicas must be a non-negative integer"])
    return int(value)


def format_container_ports(ports: list[ContainerPort]) -> str:
    """Inverse of :func:`parse_container_ports`, used to prefill the form."""
    parts = []
    for port in ports:
        text = f"{port.container_port}/{port.protocol.value}"
        if port.name:
            text = f"{port.name}:{text}"
        parts.append(text)
    return ", ".join(parts)


def format_endpoint_ports(ports: list[EndpointPort]) -> str:
    """Inverse of :func:`parse_endpoint_ports`, used to prefill the form."""
    parts = []
    for port in ports:
        text = f"{port.port}->{port.target_port}/{port.protocol.value}"
        if port.name:
            text = f"{port.name}:{text}"
        if port.node_port:
            text = f"{text}:{port.node_port}"
        parts.append(text)
    return ", ".join(parts)


def _required_message(missing: list[str]) -> list[str]:
    if not missing:
        return []
    return [f"Required: {', '.join(missing)}"]


class DeployPresenter:
    """Builds deploy forms from raw widget values, collecting every problem."""

    def build_deployment_form(
        self,
        *,
        mode: DeploymentMode,
        name: str,
        namespace: str,
        image: str,
        replicas: str,
        cpu_request: str,
        memory_request: str,
        cpu_limit: str,
        memory_limit: str,
        ports: str,
        env: str,
        create_endpoint: bool,
        exposure_type: ExposureType,
        endpoint_ports: str,
    ) -> DeploymentForm:
        """Build a :class:`DeploymentForm`.

        Raises:
            FormValidationError: With one message per invalid or missing field.
        """
        errors: list[str] = []

        replica_count = 1
        if mode is DeploymentMode.DEPLOYMENT:
            try:
                replica_count = parse_replicas(replicas)
            except FormValidationError as exc:
                errors.extend(exc.messages)

        container_ports: list[ContainerPort] = []
        try:
            container_ports = parse_container_ports(ports)
        except FormValidationError as exc:
            errors.extend(exc.messages)

        exposure_ports: list[EndpointPort] = []
        if create_endpoint:
            try:
                exposure_ports = parse_endpoint_ports(
                    endpoint_ports,
                    node_ports=exposure_type is ExposureType.NODE_PORT,
                )
                if not exposure_ports:
                    errors.append("At least one service port is required")
            except FormValidationError as exc:
                errors.extend(exc.messages)

        form = DeploymentForm(
            deployment_mode=mode,
            name=name.strip(),
            namespace=namespace.strip(),
            image=image.strip(),
            replicas=replica_count,
            cpu_request=cpu_request.strip(),
            memory_request=memory_request.strip(),
            cpu_limit=cpu_limit.strip(),
            memory_limit=memory_limit.strip(),
            ports=container_ports,
            env=parse_env(env),
            create_endpoint=create_endpoint,
            exposure_type=exposure_type,
            endpoint_ports=exposure_ports,
        )
        errors = _required_message(form.missing_fields()) + errors
        if errors:
            raise FormValidationError(errors)
        return form

    def build_quick_pod_form(
        self,
        *,
        name: str,
        namespace: str,
        image: str,
        cpu: str,
        memory: str,
        ports: str,
        env: str,
    ) -> QuickPodForm:
        """Build a :class:`QuickPodForm`.

        Raises:
            FormValidationError: With one message per invalid or missing field.
        """
        errors: list[str] = []
        pod_ports: list[int] = []
        try:
            pod_ports = parse_int_ports(ports)
        except FormValidationError as exc:
            errors.extend(exc.messages)

        form = QuickPodForm(
            name=name.strip(),
            namespace=namespace.strip(),
            image=image.strip(),
            cpu=cpu.strip(),
            memory=memory.strip(),
            ports=pod_ports,
            env=parse_env(env),
        )
        errors = _required_message(form.missing_fields()) + errors
        if errors:
            raise FormValidationError(errors)
        return form


__all__ = [
    "DeployPresenter",
    "format_container_ports",
    "format_endpoint_ports",
    "parse_container_ports",
    "parse_endpoint_ports",
    "parse_env",
    "parse_int_ports",
    "parse_replicas",
]
