"""Tests for the command-line entry point and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from unitdeck.logging_config import setup_logging
from unitdeck.main import build_parser, main


@pytest.mark.unit
class TestParser:
    """Tests for build_parser."""

    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.api_url is None
        assert args.config is None
        assert args.auto_refresh is None

    def test_flags(self) -> None:
        args = build_parser().parse_args(
            ["--api-url", "http://box/api", "--no-auto-refresh", "--log-level", "DEBUG"]
        )
        assert args.api_url == "http://box/api"
        assert args.auto_refresh is False
        assert args.log_level == "DEBUG"


@pytest.mark.unit
class TestMain:
    """Tests for main()."""

    def test_missing_config_exits_with_error(self, tmp_path: Path, capsys) -> None:
        assert main(["--config", str(tmp_path / "absent.yaml")]) == 2
        assert "not found" in capsys.readouterr().err

    def test_runs_app_with_overrides(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.delenv("UNITDECK_API_URL", raising=False)
        config = tmp_path / "config.yaml"
        config.write_text("log_lines: 200\n")
        app = MagicMock()
        with patch("unitdeck.app.UnitDeckApp", return_value=app) as app_class, patch(
            "unitdeck.main.setup_logging"
        ) as logging_setup:
            code = main(["--config", str(config), "--api-url", "http://box/api", "--no-auto-refresh"])

        assert code == 0
        settings = app_class.call_args.args[0]
        assert settings.api_url == "http://box/api"
        assert settings.log_lines == 200
        assert settings.auto_refresh is False
        logging_setup.assert_called_once_with(settings.log_level, settings.log_file)
        app.run.assert_called_once()


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging."""

    @pytest.fixture(autouse=True)
    def restore_package_logger(self):
        logger = logging.getLogger("unitdeck")
        yield
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)

    def test_file_handler(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "unitdeck.log"
        logger = setup_logging("debug", str(log_file))
        logging.getLogger("unitdeck.sync.polling").debug("polled %s", "services")
        for handler in logger.handlers:
            handler.flush()

        assert logger.level == logging.DEBUG
        assert "polled services" in log_file.read_text(encoding="utf-8")

    def test_without_file_uses_null_handler(self) -> None:
        logger = setup_logging(logging.INFO)
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.NullHandler)
        assert logger.propagate is False
