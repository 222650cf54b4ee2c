"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from unitdeck import __version__
from unitdeck.constants.defaults import API_URL_ENV_VAR
from unitdeck.logging_config import setup_logging
from unitdeck.models.state.config_manager import ConfigLoadError, ConfigManager

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unitdeck",
        description="Terminal dashboard for systemd services and containers.",
    )
    parser.add_argument(
        "--api-url",
        help=f"Backend base URL (env: {API_URL_ENV_VAR})",
    )
    parser.add_argument("--config", type=Path, help="YAML settings file")
    parser.add_argument("--log-level", help="Log level (DEBUG, INFO, ...)")
    parser.add_argument("--log-file", help="Write logs to this file")
    parser.add_argument(
        "--no-auto-refresh",
        dest="auto_refresh",
        action="store_false",
        default=None,
        help="Only refresh on demand",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    overrides = {
        "api_url": args.api_url,
        "log_level": args.log_level,
        "log_file": args.log_file,
        "auto_refresh": args.auto_refresh,
    }
    try:
        settings = ConfigManager.load(args.config, overrides=overrides)
    except ConfigLoadError as exc:
        print(f"unitdeck: {exc}", file=sys.stderr)
        return 2

    setup_logging(settings.log_level, settings.log_file)

    # Textual is imported late so --help and --version stay fast.
    from unitdeck.app import UnitDeckApp

    UnitDeckApp(settings).run()
    return 0
