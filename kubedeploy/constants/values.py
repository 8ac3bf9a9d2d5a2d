"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "KubeDeploy"

# ============================================================================
# Health status (markup for rich text display)
# ============================================================================

HEALTHY: Final = "[green]HEALTHY[/green]"
DEGRADED: Final = "[yellow]DEGRADED[/yellow]"
UNHEALTHY: Final = "[red]UNHEALTHY[/red]"

# ============================================================================
# Deploy form placeholders
# ============================================================================

PLACEHOLDER_NAME: Final = "my-app"
PLACEHOLDER_IMAGE: Final = "nginx:latest"
PLACEHOLDER_CPU_REQUEST: Final = "100m"
PLACEHOLDER_MEMORY_REQUEST: Final = "128Mi"
PLACEHOLDER_CPU_LIMIT: Final = "500m"
PLACEHOLDER_MEMORY_LIMIT: Final = "512Mi"
PLACEHOLDER_PORTS: Final = "http:80/TCP, metrics:9090/TCP"
PLACEHOLDER_ENV: Final = "KEY=value, OTHER=value"
PLACEHOLDER_ENDPOINT_PORTS: Final = "http:80->80/TCP, admin:8081->8081/TCP:30081"

# ============================================================================
# Naming conventions
# ============================================================================

ENDPOINT_NAME_SUFFIX: Final = "-service"
APP_SELECTOR_LABEL: Final = "app"

# ============================================================================
# User-facing fallback messages
# ============================================================================

MSG_DEPLOY_FAILED: Final = "Failed to create deployment"
MSG_SCALE_FAILED: Final = "Failed to scale deployment"
MSG_DELETE_WORKLOAD_FAILED: Final = "Failed to delete deployment"
MSG_DELETE_ENDPOINT_FAILED: Final = "Failed to delete service"
MSG_DELETE_POD_FAILED: Final = "Failed to delete pod"
MSG_CREATE_POD_FAILED: Final = "Failed to create pod"
MSG_LOGIN_FAILED: Final = "Login failed"
MSG_SIGNUP_FAILED: Final = "Signup failed"
MSG_TRANSPORT_FAILED: Final = "Unable to reach the cluster API"

__all__ = [
    "APP_SELECTOR_LABEL",
    "APP_TITLE",
    "DEGRADED",
    "ENDPOINT_NAME_SUFFIX",
    "HEALTHY",
    "MSG_CREATE_POD_FAILED",
    "MSG_DELETE_ENDPOINT_FAILED",
    "MSG_DELETE_POD_FAILED",
    "MSG_DELETE_WORKLOAD_FAILED",
    "MSG_DEPLOY_FAILED",
    "MSG_LOGIN_FAILED",
    "MSG_SCALE_FAILED",
    "MSG_SIGNUP_FAILED",
    "MSG_TRANSPORT_FAILED",
    "PLACEHOLDER_CPU_LIMIT",
    "PLACEHOLDER_CPU_REQUEST",
    "PLACEHOLDER_ENDPOINT_PORTS",
    "PLACEHOLDER_ENV",
    "PLACEHOLDER_IMAGE",
    "PLACEHOLDER_MEMORY_LIMIT",
    "PLACEHOLDER_MEMORY_REQUEST",
    "PLACEHOLDER_NAME",
    "PLACEHOLDER_PORTS",
    "UNHEALTHY",
]
