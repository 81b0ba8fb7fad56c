"""Module: logger_factory.py.

Date: 2026-10-19

Cached logger factory.
Keeps a single logger instance per module name so that every component
shares the same configured logger, with thread-safe cache access.
"""

from __future__ import annotations

import inspect
import logging
import threading

from prepboard.utils.logging.logger_helper import get_logger


class LoggerFactory:
    """Thread-safe logger factory with caching.

    Maintains one logger per module name instead of re-running the
    logger setup on every call.
    """

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()
    _global_level: int | None = None

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        """Get or create a cached logger for the given name.

        Args:
            name: Logger name, typically ``__name__`` of the calling module

        Returns:
            Cached logger instance

        """
        if name is None:
            frame = inspect.currentframe()
            caller = frame.f_back if frame is not None else None
            name = caller.f_globals.get("__name__", "unknown") if caller else "unknown"

        with cls._lock:
            if name not in cls._loggers:
                logger = get_logger(name)
                if cls._global_level is not None:
                    logger.setLevel(cls._global_level)
                cls._loggers[name] = logger

            return cls._loggers[name]

    @classmethod
    def set_global_level(cls, level: int) -> None:
        """Set logging level for all cached loggers."""
        with cls._lock:
            cls._global_level = level
            for logger in cls._loggers.values():
                logger.setLevel(level)

    @classmethod
    def get_logger_count(cls) -> int:
        """Number of cached loggers."""
        return len(cls._loggers)

    @classmethod
    def clear_cache(cls) -> None:
        """Drop all cached loggers."""
        with cls._lock:
            cls._loggers.clear()
            cls._global_level = None


def get_cached_logger(name: str | None = None) -> logging.Logger:
    """Convenience wrapper around ``LoggerFactory.get_logger``."""
    return LoggerFactory.get_logger(name)
