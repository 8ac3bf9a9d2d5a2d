"""Limit and threshold constants for the TUI.

All limit values and validation ranges.
"""

from typing import Final

# ============================================================================
# Display limits
# ============================================================================

MAX_LOG_LINES_DISPLAY: Final = 5000

# ============================================================================
# Validation limits
# ============================================================================

POLL_INTERVAL_MIN: Final = 1.0
POLL_RETRY_COUNT_MAX: Final = 3
PORT_MIN: Final = 1
PORT_MAX: Final = 65535
NODE_PORT_MIN: Final = 30000
NODE_PORT_MAX: Final = 32767
REPLICAS_MIN: Final = 0
PASSWORD_MIN_LENGTH: Final = 6

# ============================================================================
# Cache limits
# ============================================================================

MAX_CACHE_ENTRIES: Final = 256

__all__ = [
    "MAX_CACHE_ENTRIES",
    "MAX_LOG_LINES_DISPLAY",
    "NODE_PORT_MAX",
    "NODE_PORT_MIN",
    "PASSWORD_MIN_LENGTH",
    "POLL_INTERVAL_MIN",
    "POLL_RETRY_COUNT_MAX",
    "PORT_MAX",
    "PORT_MIN",
    "REPLICAS_MIN",
]
