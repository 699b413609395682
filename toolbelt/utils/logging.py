"""Lightweight logging setup."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _configure(logger: logging.Logger, handler: logging.Handler, level: int) -> logging.Logger:
    logger.setLevel(level)
    logger.handlers.clear()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def setup_file_logger(
    log_path: Path, level: int = logging.INFO, name: str | None = None
) -> logging.Logger:
    """Configure a file logger, named after the log file unless ``name`` is given."""

    logger = logging.getLogger(name or f"toolbelt.{log_path.stem}")
    return _configure(logger, logging.FileHandler(log_path, mode="w"), level)


def setup_console_logger(name: str = "toolbelt", level: int = logging.INFO) -> logging.Logger:
    """Configure a logger writing to stderr."""

    return _configure(logging.getLogger(name), logging.StreamHandler(sys.stderr), level)
