"""Settings persistence backed by a YAML file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from kubedeploy.constants.defaults import API_BASE_URL_ENV
from kubedeploy.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Load and save :class:`AppSettings` as YAML."""

    DEFAULT_PATH = Path.home() / ".config" / "kubedeploy" / "settings.yaml"

    @classmethod
    def load(cls, path: Path | None = None) -> AppSettings:
        """Load the stored settings, falling back to defaults when no file exists.

        Raises:
            ConfigLoadError: The file exists but cannot be read or validated.
        """
        settings_path = path or cls.DEFAULT_PATH
        raw: dict = {}
        if settings_path.exists():
            try:
                with open(settings_path, encoding="utf-8") as handle:
                    raw = yaml.safe_load(handle) or {}
            except (OSError, yaml.YAMLError) as exc:
                raise ConfigLoadError(f"Cannot read {settings_path}: {exc}") from exc
            if not isinstance(raw, dict):
                raise ConfigLoadError(f"{settings_path} does not contain a mapping")

        try:
            settings = AppSettings.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {settings_path}: {exc}") from exc

        logger.debug("Loaded settings from %s", settings_path)
        return settings

    @staticmethod
    def with_overrides(
        settings: AppSettings,
        *,
        api_url: str | None = None,
        namespace: str | None = None,
    ) -> AppSettings:
        """Return a copy of ``settings`` with per-run overrides applied.

        ``KUBEDEPLOY_API_URL`` replaces the stored API base URL; ``api_url``
        takes precedence over the environment. The stored settings are left
        untouched so overrides never reach the settings file.
        """
        update: dict[str, str] = {}
        env_url = os.environ.get(API_BASE_URL_ENV)
        if env_url:
            update["api_base_url"] = env_url
        if api_url:
            update["api_base_url"] = api_url
        if namespace:
            update["default_namespace"] = namespace
        return settings.model_copy(update=update)

    @classmethod
    def save(cls, settings: AppSettings, path: Path | None = None) -> Path:
        """Persist settings and return the path written.

        Raises:
            ConfigSaveError: The file cannot be written.
        """
        settings_path = path or cls.DEFAULT_PATH
        try:
            settings_path.parent.mkdir(parents=True, exist_ok=True)
            with open(settings_path, "w", encoding="utf-8") as handle:
                yaml.safe_dump(settings.model_dump(mode="json"), handle, sort_keys=False)
        except OSError as exc:
            raise ConfigSaveError(f"Cannot write {settings_path}: {exc}") from exc
        logger.info("Saved settings to %s", settings_path)
        return settings_path


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
