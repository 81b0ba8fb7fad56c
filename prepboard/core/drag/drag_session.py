"""Module: drag_session.py.

Date: 2026-10-19

DragSession - state machine for reordering widgets by pointer or keyboard.

States::

    IDLE --pick_up--> DRAGGING --drop--------> IDLE
                               --cancel------> IDLE
                               --force_cancel> IDLE

Reorders are committed eagerly: every pointer hover over a slot and every
keyboard step calls the ReorderEngine right away, so the page already shows
the final order while the gesture is still running. Drop therefore only
tears the gesture down. Cancel (Escape, release outside any slot) and forced
cancel (edit mode switched off) do NOT revert those commits: the last hovered
position stands.

Indices are resolved by widget id against the live list on every event; the
origin index kept in the gesture is informational only.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from prepboard.config import DRAG_THRESHOLD_PX
from prepboard.core.reorder_engine import ReorderEngine
from prepboard.domain.keyboard import DragKey
from prepboard.domain.widget import InputMode
from prepboard.utils.events import Observable, Signal
from prepboard.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class EditModeGate(Protocol):
    """Anything that can tell whether layout editing is allowed."""

    @property
    def is_active(self) -> bool: ...


class DragState(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class DragEndReason(str, Enum):
    DROP = "drop"
    CANCEL = "cancel"
    FORCED = "forced"


@dataclass
class DragGesture:
    """Data of one gesture; lives from pick-up to drop or cancel."""

    page: str
    active_widget_id: str
    origin_index: int
    current_hover_index: int
    input_mode: InputMode


@dataclass
class _PendingPress:
    page: str
    widget_id: str
    position: tuple[int, int]


class DragSession(Observable):
    """Coordinates one page's drag gestures and their eager commits."""

    drag_started = Signal(str)  # widget id
    order_committed = Signal(str, int)  # widget id, new index
    drag_finished = Signal(str, str)  # widget id, DragEndReason value

    def __init__(
        self,
        engine: ReorderEngine,
        edit_mode: EditModeGate,
        drag_threshold: int = DRAG_THRESHOLD_PX,
    ):
        super().__init__()
        self._engine = engine
        self._edit_mode = edit_mode
        self._drag_threshold = drag_threshold
        self._gesture: DragGesture | None = None
        self._pending: _PendingPress | None = None

    # =====================================
    # State
    # =====================================

    @property
    def state(self) -> DragState:
        return DragState.DRAGGING if self._gesture is not None else DragState.IDLE

    @property
    def is_dragging(self) -> bool:
        return self._gesture is not None

    @property
    def gesture(self) -> DragGesture | None:
        return self._gesture

    @property
    def active_widget_id(self) -> str | None:
        return self._gesture.active_widget_id if self._gesture else None

    @property
    def origin_index(self) -> int | None:
        return self._gesture.origin_index if self._gesture else None

    @property
    def current_hover_index(self) -> int | None:
        return self._gesture.current_hover_index if self._gesture else None

    @property
    def input_mode(self) -> InputMode | None:
        return self._gesture.input_mode if self._gesture else None

    # =====================================
    # Pick-up
    # =====================================

    def pick_up(
        self, page: str, widget_id: str, input_mode: InputMode = InputMode.POINTER
    ) -> bool:
        """Enter DRAGGING with ``widget_id``.

        No-op (returns False) while edit mode is off, while another gesture
        is running, or when the widget is not live on ``page``.
        """
        if not self._edit_mode.is_active:
            logger.debug("[DragSession] Pick-up ignored: edit mode is off")
            return False
        if self._gesture is not None:
            logger.warning(
                "[DragSession] Drag already active for %s", self._gesture.active_widget_id
            )
            return False

        index = self._engine.registry.index_of(page, widget_id)
        if index is None:
            logger.debug("[DragSession] Pick-up ignored: %s is not live on %s", widget_id, page)
            return False

        self._pending = None
        self._gesture = DragGesture(
            page=page,
            active_widget_id=widget_id,
            origin_index=index,
            current_hover_index=index,
            input_mode=InputMode(input_mode),
        )
        logger.debug(
            "[DragSession] Picked up %s at %d on %s (%s)", widget_id, index, page, input_mode
        )
        self.drag_started.emit(widget_id)
        return True

    def arm(self, page: str, widget_id: str, position: tuple[int, int]) -> bool:
        """Record a pointer press; the drag starts once ``track`` crosses the threshold."""
        if not self._edit_mode.is_active or self._gesture is not None:
            return False
        self._pending = _PendingPress(page, widget_id, position)
        return True

    def track(self, position: tuple[int, int]) -> bool:
        """Feed pointer movement after ``arm``.

        Returns:
            True if this movement started the drag

        """
        pending = self._pending
        if pending is None or self._gesture is not None:
            return False

        dx = position[0] - pending.position[0]
        dy = position[1] - pending.position[1]
        distance = (dx * dx + dy * dy) ** 0.5
        if distance <= self._drag_threshold:
            return False

        logger.debug("[DragSession] Drag threshold crossed (%.1f px)", distance)
        return self.pick_up(pending.page, pending.widget_id, InputMode.POINTER)

    def release(self) -> bool:
        """Pointer released over a slot: drop a running drag or clear an armed press."""
        self._pending = None
        return self.drop()

    # =====================================
    # Eager commits
    # =====================================

    def hover(self, index: int) -> bool:
        """Pointer is over slot ``index``: move the dragged widget there now.

        Returns:
            True if the order changed

        """
        gesture = self._gesture
        if gesture is None or gesture.input_mode is not InputMode.POINTER:
            return False
        before = self._live_index(gesture)
        return self._commit(
            before, self._engine.move_widget(gesture.page, gesture.active_widget_id, index)
        )

    def step(self, direction: int) -> bool:
        """Keyboard step: swap the dragged widget with its neighbour."""
        gesture = self._gesture
        if gesture is None or gesture.input_mode is not InputMode.KEYBOARD:
            return False
        before = self._live_index(gesture)
        return self._commit(
            before, self._engine.step(gesture.page, gesture.active_widget_id, direction)
        )

    def handle_key(
        self, key: DragKey, page: str | None = None, widget_id: str | None = None
    ) -> bool:
        """Dispatch a keyboard command.

        ``page`` and ``widget_id`` name the focused widget and are only used
        by GRAB while idle.

        Returns:
            True if the key was consumed

        """
        if key is DragKey.GRAB:
            if self._gesture is None:
                if page is None or widget_id is None:
                    return False
                return self.pick_up(page, widget_id, InputMode.KEYBOARD)
            return self.drop()

        if self._gesture is None:
            return False
        if key is DragKey.CANCEL:
            return self.cancel()
        if self._gesture.input_mode is not InputMode.KEYBOARD:
            return False
        self.step(key.step)
        return True

    def _live_index(self, gesture: DragGesture) -> int | None:
        return self._engine.registry.index_of(gesture.page, gesture.active_widget_id)

    def _commit(self, before: int | None, new_index: int | None) -> bool:
        """Record the outcome of one move; ``before`` is the live index prior to it."""
        gesture = self._gesture
        if new_index is None:
            # Dragged widget left the live list (disabled mid-gesture)
            logger.warning(
                "[DragSession] %s is no longer on %s, ending drag",
                gesture.active_widget_id,
                gesture.page,
            )
            self._finish(DragEndReason.CANCEL)
            return False

        gesture.current_hover_index = new_index
        if new_index == before:
            return False
        self.order_committed.emit(gesture.active_widget_id, new_index)
        return True

    # =====================================
    # Teardown
    # =====================================

    def drop(self) -> bool:
        """End the gesture. The order was already committed while hovering."""
        return self._finish(DragEndReason.DROP)

    def cancel(self) -> bool:
        """Escape or release outside any slot. Earlier commits stay in place."""
        self._pending = None
        return self._finish(DragEndReason.CANCEL)

    def drop_outside(self) -> bool:
        return self.cancel()

    def force_cancel(self) -> bool:
        """Called when edit mode is switched off; same outcome as cancel."""
        self._pending = None
        return self._finish(DragEndReason.FORCED)

    def _finish(self, reason: DragEndReason) -> bool:
        gesture = self._gesture
        if gesture is None:
            return False
        self._gesture = None
        logger.debug(
            "[DragSession] Drag of %s ended (%s) at %d, origin %d",
            gesture.active_widget_id,
            reason.value,
            gesture.current_hover_index,
            gesture.origin_index,
        )
        self.drag_finished.emit(gesture.active_widget_id, reason.value)
        return True
