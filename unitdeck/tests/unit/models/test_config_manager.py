"""Tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from unitdeck.constants.defaults import (
    API_URL_DEFAULT,
    API_URL_ENV_VAR,
    LOG_LINES_DEFAULT,
    SERVICE_LIST_REFRESH_MS_DEFAULT,
)
from unitdeck.models.state.app_settings import AppSettings
from unitdeck.models.state.config_manager import ConfigLoadError, ConfigManager


@pytest.mark.unit
class TestAppSettings:
    """Tests for AppSettings defaults and validation."""

    def test_defaults(self) -> None:
        settings = AppSettings()
        assert settings.api_url == API_URL_DEFAULT
        assert settings.service_list_refresh_ms == SERVICE_LIST_REFRESH_MS_DEFAULT
        assert settings.service_detail_refresh_ms == 5000
        assert settings.container_refresh_ms == 10000
        assert settings.retry_count == 3
        assert settings.retry_delay_ms == 1000
        assert settings.log_lines == LOG_LINES_DEFAULT
        assert settings.metrics_max_points == 20
        assert settings.auto_refresh is True

    @pytest.mark.parametrize(
        "values",
        [
            {"service_list_refresh_ms": 10},
            {"retry_count": -1},
            {"log_lines": 0},
            {"metrics_max_points": 1},
            {"request_timeout_seconds": 0},
        ],
    )
    def test_rejects_out_of_range(self, values: dict) -> None:
        with pytest.raises(ValueError):
            AppSettings(**values)


@pytest.mark.unit
class TestConfigManager:
    """Tests for ConfigManager.load."""

    def test_missing_default_file_uses_defaults(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setattr(ConfigManager, "DEFAULT_PATH", tmp_path / "absent.yaml")
        settings = ConfigManager.load(environ={})
        assert settings == AppSettings()

    def test_missing_explicit_file_is_an_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError, match="not found"):
            ConfigManager.load(tmp_path / "absent.yaml", environ={})

    def test_yaml_values(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("api_url: http://box:9733/api\nlog_lines: 500\nauto_refresh: false\n")
        settings = ConfigManager.load(path, environ={})
        assert settings.api_url == "http://box:9733/api"
        assert settings.log_lines == 500
        assert settings.auto_refresh is False

    def test_precedence(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("api_url: http://file/api\nlog_lines: 200\n")

        from_env = ConfigManager.load(path, environ={API_URL_ENV_VAR: "http://env/api"})
        assert from_env.api_url == "http://env/api"
        assert from_env.log_lines == 200

        from_cli = ConfigManager.load(
            path,
            environ={API_URL_ENV_VAR: "http://env/api"},
            overrides={"api_url": "http://cli/api", "log_lines": None},
        )
        assert from_cli.api_url == "http://cli/api"
        assert from_cli.log_lines == 200

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert ConfigManager.load(path, environ={}) == AppSettings()

    def test_non_mapping_is_an_error(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigLoadError, match="mapping"):
            ConfigManager.load(path, environ={})

    def test_invalid_yaml_is_an_error(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("api_url: [unclosed\n")
        with pytest.raises(ConfigLoadError):
            ConfigManager.load(path, environ={})

    def test_invalid_value_is_an_error(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("retry_count: 99\n")
        with pytest.raises(ConfigLoadError, match="Invalid settings"):
            ConfigManager.load(path, environ={})
