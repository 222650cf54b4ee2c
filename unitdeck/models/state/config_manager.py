"""Settings loading from an optional YAML file and the environment."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from unitdeck.constants.defaults import API_URL_ENV_VAR
from unitdeck.models.state.app_settings import AppSettings, ConfigError, ConfigLoadError

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads AppSettings.

    Precedence, lowest first: model defaults, YAML file, the
    ``UNITDECK_API_URL`` environment variable, explicit overrides.
    """

    DEFAULT_PATH = Path.home() / ".config" / "unitdeck" / "config.yaml"

    @classmethod
    def load(
        cls,
        path: Path | None = None,
        *,
        overrides: Mapping[str, Any] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> AppSettings:
        """Load settings.

        Args:
            path: YAML file to read. A missing default file is not an error;
                a missing explicitly given file is.
            overrides: Values that win over every other source (CLI flags).
                ``None`` values are ignored.
            environ: Environment mapping, defaults to ``os.environ``.

        Returns:
            Validated AppSettings.

        Raises:
            ConfigLoadError: If the file is unreadable, not a mapping, or the
                merged values fail validation.
        """
        config_path = path or cls.DEFAULT_PATH
        values: dict[str, Any] = {}

        if config_path.exists():
            values.update(cls._read_yaml(config_path))
        elif path is not None:
            raise ConfigLoadError(f"Config file not found: {config_path}")

        env = os.environ if environ is None else environ
        api_url = env.get(API_URL_ENV_VAR)
        if api_url:
            values["api_url"] = api_url

        if overrides:
            values.update({key: value for key, value in overrides.items() if value is not None})

        try:
            settings = AppSettings.model_validate(values)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings: {exc}") from exc

        logger.debug("Settings loaded (api_url=%s, source=%s)", settings.api_url, config_path)
        return settings

    @staticmethod
    def _read_yaml(path: Path) -> dict[str, Any]:
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Failed to read {path}: {exc}") from exc
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise ConfigLoadError(f"Expected a mapping in {path}, got {type(raw).__name__}")
        return raw


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
]
