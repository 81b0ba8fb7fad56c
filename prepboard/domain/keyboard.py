"""Module: keyboard.py.

Date: 2026-10-19

Domain types for keyboard-driven widget dragging.

Pure domain layer - no UI dependencies.
"""

from __future__ import annotations

from enum import Enum


class DragKey(Enum):
    """Discrete keyboard commands understood by a drag session.

    Example:
        >>> DragKey.STEP_FORWARD.step
        1
        >>> DragKey.CANCEL.step
        0

    """

    GRAB = "grab"  # Space / Enter: pick up, or drop when already dragging
    STEP_BACK = "step_back"  # Up / Left
    STEP_FORWARD = "step_forward"  # Down / Right
    CANCEL = "cancel"  # Escape

    @property
    def step(self) -> int:
        """Index delta applied by this key (0 for non-moving keys)."""
        if self is DragKey.STEP_BACK:
            return -1
        if self is DragKey.STEP_FORWARD:
            return 1
        return 0
