"""Logging configuration for UnitDeck.

The terminal belongs to the TUI, so records go to a file (or nowhere when
no file is configured).
"""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """Configure the ``unitdeck`` logger.

    Args:
        level: Level name or number.
        log_file: File to append records to; parents are created.

    Returns:
        The package logger.
    """
    logger = logging.getLogger("unitdeck")
    logger.setLevel(level if isinstance(level, int) else level.upper())

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    else:
        handler = logging.NullHandler()
    logger.addHandler(handler)
    logger.propagate = False

    logger.info("Logging initialized (level=%s)", logging.getLevelName(logger.level))
    return logger
