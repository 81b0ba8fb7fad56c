"""Module: init_logging.py.

Date: 2026-10-19

Single entry point to initialize logging for a host application.
Console output goes through the DevOnlyFilter; activity and error logs are
written to rotating files under the given directory.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from prepboard.config import (
    APP_NAME,
    LOG_CONSOLE_LEVEL,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_MAX_BYTES,
    LOG_FORMAT,
    LOG_TO_CONSOLE,
    LOG_TO_FILE,
)
from prepboard.utils.logging.logger_factory import get_cached_logger
from prepboard.utils.logging.logger_helper import DevOnlyFilter

_CONFIGURED_MARKER = "_prepboard_handler"


def _mark(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _CONFIGURED_MARKER, True)
    return handler


def add_file_handler(
    logger: logging.Logger,
    log_path: Path,
    level: int,
    max_bytes: int = LOG_FILE_MAX_BYTES,
    backup_count: int = LOG_FILE_BACKUP_COUNT,
) -> None:
    """Attach a rotating file handler writing ``level`` and above to ``log_path``."""
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_mark(handler))


def init_logging(app_name: str = APP_NAME, log_dir: str | Path = "logs") -> logging.Logger:
    """Configure the root logger once and return the logger for this module.

    Args:
        app_name: Base name for log files (e.g. 'prepboard')
        log_dir: Directory receiving the rotating log files

    Returns:
        The cached logger of this module

    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    if not any(getattr(h, _CONFIGURED_MARKER, False) for h in root.handlers):
        if LOG_TO_CONSOLE:
            console = logging.StreamHandler(sys.stdout)
            console.setLevel(getattr(logging, LOG_CONSOLE_LEVEL, logging.INFO))
            console.setFormatter(logging.Formatter(LOG_FORMAT))
            console.addFilter(DevOnlyFilter())
            root.addHandler(_mark(console))

        if LOG_TO_FILE:
            log_dir = Path(log_dir)
            add_file_handler(root, log_dir / f"{app_name}_activity.log", logging.INFO)
            add_file_handler(root, log_dir / f"{app_name}_errors.log", logging.ERROR)

    logger = get_cached_logger(__name__)
    logger.debug("[Logging] Initialized for '%s'", app_name, extra={"dev_only": True})
    return logger
