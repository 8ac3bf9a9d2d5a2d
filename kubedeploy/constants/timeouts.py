"""Timeout constants for the TUI.

All timeout and interval values for API requests and polling cycles.
"""

from typing import Final

# ============================================================================
# API timeouts (float, in seconds)
# ============================================================================

API_REQUEST_TIMEOUT: Final = 30.0
API_HEALTH_CHECK_TIMEOUT: Final = 5.0

# ============================================================================
# Poll intervals (float, in seconds)
# ============================================================================

POD_POLL_INTERVAL: Final = 3.0
WORKLOAD_POLL_INTERVAL: Final = 5.0
ENDPOINT_POLL_INTERVAL: Final = 5.0
NAMESPACE_POLL_INTERVAL: Final = 30.0

__all__ = [
    "API_HEALTH_CHECK_TIMEOUT",
    "API_REQUEST_TIMEOUT",
    "ENDPOINT_POLL_INTERVAL",
    "NAMESPACE_POLL_INTERVAL",
    "POD_POLL_INTERVAL",
    "WORKLOAD_POLL_INTERVAL",
]
