"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field

from kubedeploy.constants.defaults import (
    API_BASE_URL_DEFAULT,
    DEFAULT_NAMESPACE,
    POD_LOG_TAIL_LINES_DEFAULT,
    POLL_RETRY_COUNT_DEFAULT,
    THEME_DEFAULT,
)
from kubedeploy.constants.limits import POLL_INTERVAL_MIN, POLL_RETRY_COUNT_MAX
from kubedeploy.constants.timeouts import (
    API_REQUEST_TIMEOUT,
    ENDPOINT_POLL_INTERVAL,
    NAMESPACE_POLL_INTERVAL,
    POD_POLL_INTERVAL,
    WORKLOAD_POLL_INTERVAL,
)
from kubedeploy.errors import KubeDeployError


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # Connection
    api_base_url: str = API_BASE_URL_DEFAULT
    request_timeout_seconds: float = Field(default=API_REQUEST_TIMEOUT, gt=0)
    default_namespace: str = DEFAULT_NAMESPACE

    # Polling (seconds)
    pod_poll_interval: float = Field(default=POD_POLL_INTERVAL, ge=POLL_INTERVAL_MIN)
    workload_poll_interval: float = Field(
        default=WORKLOAD_POLL_INTERVAL, ge=POLL_INTERVAL_MIN
    )
    endpoint_poll_interval: float = Field(
        default=ENDPOINT_POLL_INTERVAL, ge=POLL_INTERVAL_MIN
    )
    namespace_poll_interval: float = Field(
        default=NAMESPACE_POLL_INTERVAL, ge=POLL_INTERVAL_MIN
    )
    poll_retry_count: int = Field(
        default=POLL_RETRY_COUNT_DEFAULT, ge=0, le=POLL_RETRY_COUNT_MAX
    )

    # UI preferences
    theme: str = THEME_DEFAULT
    pod_log_tail_lines: int = Field(default=POD_LOG_TAIL_LINES_DEFAULT, ge=1)


class ConfigError(KubeDeployError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
