"""
Drag & drop for widget reordering.

- DragSession: pick-up / hover / step / drop / cancel state machine
- DragGesture: data of the gesture in progress
"""

from __future__ import annotations

from prepboard.core.drag.drag_session import (
    DragEndReason,
    DragGesture,
    DragSession,
    DragState,
    EditModeGate,
)

__all__ = [
    "DragEndReason",
    "DragGesture",
    "DragSession",
    "DragState",
    "EditModeGate",
]
