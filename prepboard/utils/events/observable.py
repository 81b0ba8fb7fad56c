"""Module: observable.py.

Date: 2026-10-19

Observable - pure Python observer pattern.

Provides Qt signal-like notifications for the layout core without a Qt
dependency:
- Signal descriptor for declaring events on a class
- Per-instance SignalInstance with connect/disconnect/emit
- Callback failures are logged and never interrupt other listeners

The layout core is single-threaded; emission is synchronous and happens in
connection order.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from prepboard.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

__all__ = ["Observable", "Signal", "SignalInstance"]


class Signal:
    """Descriptor for declaring observable signals.

    Usage:
        class Registry(Observable):
            page_changed = Signal(str)

        registry.page_changed.connect(callback)
        registry.page_changed.emit("dashboard")
    """

    def __init__(self, *arg_types: type):
        self.arg_types = arg_types
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Observable | None, _objtype: type | None = None) -> SignalInstance:
        if obj is None:
            return self  # type: ignore[return-value]

        attr_name = f"_signal_{self.name}"
        instance = obj.__dict__.get(attr_name)
        if instance is None:
            instance = SignalInstance(self.name, self.arg_types)
            obj.__dict__[attr_name] = instance
        return instance


class SignalInstance:
    """Signal bound to one observable object."""

    def __init__(self, name: str, arg_types: tuple[type, ...]):
        self.name = name
        self.arg_types = arg_types
        self._callbacks: list[Callable[..., Any]] = []

    def connect(self, callback: Callable[..., Any]) -> None:
        """Connect ``callback``; connecting the same callable twice is a no-op."""
        if callback not in self._callbacks:
            self._callbacks.append(callback)
            logger.debug(
                "Signal connected: %s -> %s",
                self.name,
                getattr(callback, "__name__", repr(callback)),
                extra={"dev_only": True},
            )

    def disconnect(self, callback: Callable[..., Any] | None = None) -> None:
        """Disconnect ``callback``, or every callback when None."""
        if callback is None:
            self._callbacks.clear()
        elif callback in self._callbacks:
            self._callbacks.remove(callback)

    def receivers(self) -> int:
        return len(self._callbacks)

    def emit(self, *args: Any) -> None:
        """Call every connected callback with ``args``."""
        for callback in list(self._callbacks):
            try:
                callback(*args)
            except Exception:
                logger.exception(
                    "Error in signal callback: %s -> %s",
                    self.name,
                    getattr(callback, "__name__", repr(callback)),
                )


class Observable:
    """Base class for objects exposing ``Signal`` attributes."""

    def __init__(self) -> None:
        super().__init__()
