"""Application settings and session models.

``AppState`` lives in :mod:`kubedeploy.models.state.app_state` and is not
re-exported here, since it depends on the controllers package.
"""

from kubedeploy.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)
from kubedeploy.models.state.config_manager import ConfigManager
from kubedeploy.models.state.session_store import SessionStore

__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
    "SessionStore",
]
