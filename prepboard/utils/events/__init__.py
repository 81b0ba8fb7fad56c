"""Module: __init__.py.

Date: 2026-10-19

Event system.

Pure Python signal implementation used by the layout core so that state
changes can be observed without a Qt dependency.
"""

from prepboard.utils.events.observable import Observable, Signal

__all__ = ["Observable", "Signal"]
