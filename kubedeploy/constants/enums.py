"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum, auto

# =============================================================================
# Resource Enums (wire values)
# =============================================================================


class ResourceKind(str, Enum):
    """Remote resource collections the console reads and mutates."""

    WORKLOADS = "deployments"
    ENDPOINTS = "services"
    PODS = "pods"
    NAMESPACES = "namespaces"


class PodPhase(str, Enum):
    """Observed lifecycle phase of a pod."""

    PENDING = "Pending"
    RUNNING = "Running"
    FAILED = "Failed"
    SUCCEEDED = "Succeeded"
    UNKNOWN = "Unknown"


class ExposureType(str, Enum):
    """Reachability mode of a network endpoint."""

    CLUSTER_IP = "ClusterIP"
    NODE_PORT = "NodePort"
    LOAD_BALANCER = "LoadBalancer"


class Protocol(str, Enum):
    """Transport protocol of a container or endpoint port."""

    TCP = "TCP"
    UDP = "UDP"


# =============================================================================
# Form / Action Enums
# =============================================================================


class DeploymentMode(Enum):
    """Deployment mode selected in the deploy form."""

    POD = "pod"
    DEPLOYMENT = "deployment"


class ScaleDirection(Enum):
    """One-step scale direction for a workload."""

    UP = "up"
    DOWN = "down"


# =============================================================================
# State Enums
# =============================================================================


class ViewState(Enum):
    """Observable state of a synchronized collection."""

    LOADING = "loading"
    READY = "ready"
    STALE = "stale"
    ERROR = "error"


class ErrorCategory(Enum):
    """Category of a failed remote call, derived from the HTTP status."""

    VALIDATION = auto()
    NOT_FOUND = auto()
    REMOTE = auto()
    TRANSPORT = auto()
    UNAUTHORIZED = auto()


__all__ = [
    # Resources
    "ExposureType",
    "PodPhase",
    "Protocol",
    "ResourceKind",
    # Forms and actions
    "DeploymentMode",
    "ScaleDirection",
    # State
    "ErrorCategory",
    "ViewState",
]
