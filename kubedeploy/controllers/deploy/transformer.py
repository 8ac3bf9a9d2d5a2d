"""Form state to request payload conversion.

Pure functions: no I/O, no validation of quantity strings (the backend owns
that). Two filtering policies apply silently: environment rows with an empty
name or value are dropped, and node ports are dropped unless the endpoint is
exposed as NodePort.
"""

from __future__ import annotations

from kubedeploy.constants.enums import DeploymentMode, ExposureType
from kubedeploy.constants.values import APP_SELECTOR_LABEL, ENDPOINT_NAME_SUFFIX
from kubedeploy.models.core.endpoint_info import EndpointPort, EndpointSpec
from kubedeploy.models.core.pod_info import PodCreateRequest
from kubedeploy.models.core.workload_info import (
    ContainerPort,
    EnvVar,
    ResourceQuantities,
    ResourceRequirements,
    WorkloadSpec,
)
from kubedeploy.models.forms.deploy_form import DeploymentForm, QuickPodForm


def endpoint_name_for(workload_name: str) -> str:
    """Name of the endpoint created alongside ``workload_name``."""
    return f"{workload_name}{ENDPOINT_NAME_SUFFIX}"


def selector_for(workload_name: str) -> dict[str, str]:
    """Label selector matching the pods of ``workload_name``."""
    return {APP_SELECTOR_LABEL: workload_name}


def filter_env(env: list[EnvVar]) -> list[EnvVar]:
    """Keep only pairs whose name and value are both non-empty, in order."""
    return [EnvVar(name=item.name, value=item.value) for item in env if item.name and item.value]


def build_workload_request(form: DeploymentForm) -> WorkloadSpec:
    """Build the workload create request from the deploy form."""
    replicas = 1 if form.deployment_mode is DeploymentMode.POD else form.replicas
    return WorkloadSpec(
        name=form.name,
        namespace=form.namespace,
        image=form.image,
        replicas=replicas,
        resources=ResourceRequirements(
            requests=ResourceQuantities(cpu=form.cpu_request, memory=form.memory_request),
            limits=ResourceQuantities(cpu=form.cpu_limit, memory=form.memory_limit),
        ),
        ports=[
            ContainerPort(
                name=port.name,
                container_port=port.container_port,
                protocol=port.protocol,
            )
            for port in form.ports
        ],
        env=filter_env(form.env),
    )


def build_endpoint_request(form: DeploymentForm, workload_name: str) -> EndpointSpec:
    """Build the endpoint create request that fronts ``workload_name``."""
    keep_node_port = form.exposure_type is ExposureType.NODE_PORT
    return EndpointSpec(
        name=endpoint_name_for(workload_name),
        namespace=form.namespace,
        type=form.exposure_type,
        selector=selector_for(workload_name),
        ports=[
            EndpointPort(
                name=port.name,
                port=port.port,
                target_port=port.target_port,
                protocol=port.protocol,
                node_port=port.node_port if keep_node_port else None,
            )
            for port in form.endpoint_ports
        ],
    )


def build_quick_pod_request(form: QuickPodForm) -> PodCreateRequest:
    """Build the quick single-pod create request."""
    return PodCreateRequest(
        name=form.name,
        namespace=form.namespace,
        image=form.image,
        replicas=form.replicas,
        resources=ResourceQuantities(cpu=form.cpu, memory=form.memory),
        ports=list(form.ports),
        env=filter_env(form.env),
    )


__all__ = [
    "build_endpoint_request",
    "build_quick_pod_request",
    "build_workload_request",
    "endpoint_name_for",
    "filter_env",
    "selector_for",
]
