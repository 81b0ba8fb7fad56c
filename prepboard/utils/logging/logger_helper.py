"""Module: logger_helper.py.

Date: 2026-10-19

Helpers for creating loggers that are safe to write to any console.

Functions:
get_logger(name): Returns a propagating logger with Unicode-safe methods.
safe_text(text): Replaces problematic Unicode characters with ASCII equivalents.
safe_log(logger_func, message): Logs a message, falling back to ASCII if needed.

DevOnlyFilter:
A logging filter that hides dev-only debug messages from the console while
still letting them reach file logs.
"""

from __future__ import annotations

import logging
import re
from functools import partial

from prepboard.config import SHOW_DEV_ONLY_IN_CONSOLE

_REPLACEMENTS = {
    "→": "->",
    "←": "<-",
    "—": "--",
    "–": "-",
    "…": "...",
}
_REPLACEMENT_PATTERN = re.compile("|".join(map(re.escape, _REPLACEMENTS.keys())))


def safe_text(text: str) -> str:
    """Replace unsupported Unicode characters with ASCII-safe alternatives."""
    return _REPLACEMENT_PATTERN.sub(lambda m: _REPLACEMENTS[m.group(0)], text)


def safe_log(logger_func, message, *args, **kwargs):
    """Log through ``logger_func``, retrying with ASCII text on encoding errors."""
    try:
        if not isinstance(message, str):
            message = repr(message)
        logger_func(message, *args, **kwargs)
    except UnicodeEncodeError:
        logger_func(safe_text(str(message)), *args, **kwargs)


def patch_logger_safe_methods(logger: logging.Logger) -> None:
    """Wrap the level methods of ``logger`` with ``safe_log``."""
    for method_name in ("debug", "info", "warning", "error", "critical"):
        orig_func = getattr(logger, method_name)
        setattr(logger, method_name, partial(safe_log, orig_func))


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a named logger that delegates output to the root logger.

    Args:
        name: Optional logger name

    Returns:
        Configured and patched logger instance

    """
    logger = logging.getLogger(name or __name__)
    logger.setLevel(logging.DEBUG)
    logger.propagate = True

    if logger.handlers:
        logger.handlers.clear()

    if not getattr(logger, "_patched_for_safe_log", False):
        patch_logger_safe_methods(logger)
        logger._patched_for_safe_log = True  # type: ignore[attr-defined]

    return logger


class DevOnlyFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if SHOW_DEV_ONLY_IN_CONSOLE:
            return True
        return not getattr(record, "dev_only", False)
