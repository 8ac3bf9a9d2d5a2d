"""Constants module for KubeDeploy TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, numbers with Final)
- timeouts.py: Timeout and poll interval values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings and forms

Note: Keyboard bindings are defined in kubedeploy.keyboard module.
"""

from kubedeploy.constants.defaults import (
    API_BASE_URL_DEFAULT,
    API_BASE_URL_ENV,
    DEFAULT_NAMESPACE,
    POD_LOG_TAIL_LINES_DEFAULT,
    POLL_RETRY_COUNT_DEFAULT,
    THEME_DEFAULT,
)
from kubedeploy.constants.enums import (
    DeploymentMode,
    ErrorCategory,
    ExposureType,
    PodPhase,
    Protocol,
    ResourceKind,
    ScaleDirection,
    ViewState,
)
from kubedeploy.constants.limits import (
    MAX_CACHE_ENTRIES,
    POLL_INTERVAL_MIN,
    REPLICAS_MIN,
)
from kubedeploy.constants.timeouts import (
    API_REQUEST_TIMEOUT,
    ENDPOINT_POLL_INTERVAL,
    NAMESPACE_POLL_INTERVAL,
    POD_POLL_INTERVAL,
    WORKLOAD_POLL_INTERVAL,
)
from kubedeploy.constants.values import (
    APP_SELECTOR_LABEL,
    APP_TITLE,
    ENDPOINT_NAME_SUFFIX,
    MSG_DEPLOY_FAILED,
    MSG_TRANSPORT_FAILED,
)

__all__ = [
    # Defaults
    "API_BASE_URL_DEFAULT",
    "API_BASE_URL_ENV",
    "DEFAULT_NAMESPACE",
    "POD_LOG_TAIL_LINES_DEFAULT",
    "POLL_RETRY_COUNT_DEFAULT",
    "THEME_DEFAULT",
    # Enums
    "DeploymentMode",
    "ErrorCategory",
    "ExposureType",
    "PodPhase",
    "Protocol",
    "ResourceKind",
    "ScaleDirection",
    "ViewState",
    # Limits
    "MAX_CACHE_ENTRIES",
    "POLL_INTERVAL_MIN",
    "REPLICAS_MIN",
    # Timeouts
    "API_REQUEST_TIMEOUT",
    "ENDPOINT_POLL_INTERVAL",
    "NAMESPACE_POLL_INTERVAL",
    "POD_POLL_INTERVAL",
    "WORKLOAD_POLL_INTERVAL",
    # Values
    "APP_SELECTOR_LABEL",
    "APP_TITLE",
    "ENDPOINT_NAME_SUFFIX",
    "MSG_DEPLOY_FAILED",
    "MSG_TRANSPORT_FAILED",
]
