"""Default values for settings.

All default values used in AppSettings model and deploy form fallbacks.
"""

from typing import Final

# ============================================================================
# Connection defaults
# ============================================================================

API_BASE_URL_DEFAULT: Final = "http://localhost:8080/api"
API_BASE_URL_ENV: Final = "KUBEDEPLOY_API_URL"
DEFAULT_NAMESPACE: Final = "default"

# ============================================================================
# UI defaults
# ============================================================================

THEME_DEFAULT: Final = "textual-dark"
POD_LOG_TAIL_LINES_DEFAULT: Final = 100

# ============================================================================
# Deploy form defaults
# ============================================================================

CPU_REQUEST_DEFAULT: Final = "100m"
MEMORY_REQUEST_DEFAULT: Final = "128Mi"
CPU_LIMIT_DEFAULT: Final = "500m"
MEMORY_LIMIT_DEFAULT: Final = "512Mi"
QUICK_POD_CPU_DEFAULT: Final = "500m"
QUICK_POD_MEMORY_DEFAULT: Final = "512Mi"
CONTAINER_PORT_DEFAULT: Final = 80

# ============================================================================
# Sync defaults
# ============================================================================

POLL_RETRY_COUNT_DEFAULT: Final = 1

__all__ = [
    "API_BASE_URL_DEFAULT",
    "API_BASE_URL_ENV",
    "CONTAINER_PORT_DEFAULT",
    "CPU_LIMIT_DEFAULT",
    "CPU_REQUEST_DEFAULT",
    "DEFAULT_NAMESPACE",
    "MEMORY_LIMIT_DEFAULT",
    "MEMORY_REQUEST_DEFAULT",
    "POD_LOG_TAIL_LINES_DEFAULT",
    "POLL_RETRY_COUNT_DEFAULT",
    "QUICK_POD_CPU_DEFAULT",
    "QUICK_POD_MEMORY_DEFAULT",
    "THEME_DEFAULT",
]
