"""Module: edit_mode_controller.py.

Date: 2026-10-19

UI-agnostic controller for the dashboard edit (customize) mode.

While edit mode is off every layout-mutating affordance is inert: drag
pick-up, size controls, enable/disable toggles and nudge buttons. Switching
edit mode off while a drag is running force-cancels the drag first, so no
gesture survives a mode switch.

Entering edit mode takes a snapshot of the registry; ``discard`` restores it
and ``save`` persists the current state and takes a new snapshot.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prepboard.core.catalog_import import ImportBatch
from prepboard.core.layout_resolver import LayoutResolver
from prepboard.core.reorder_engine import ReorderEngine
from prepboard.domain.widget import ScreenClass, WidgetSize
from prepboard.utils.events import Observable, Signal
from prepboard.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from prepboard.core.drag.drag_session import DragSession
    from prepboard.core.layout_store import LayoutStore

logger = get_cached_logger(__name__)


class EditModeController(Observable):
    """Owns the edit-mode flag and the drag sessions it gates."""

    edit_mode_changed = Signal(bool)

    def __init__(self, engine: ReorderEngine, store: LayoutStore | None = None):
        super().__init__()
        self._engine = engine
        self._registry = engine.registry
        self._store = store
        self._active = False
        self._sessions: list[DragSession] = []
        self._baseline: ImportBatch | None = None
        self._screen_class = ScreenClass.DESKTOP

    # =====================================
    # Mode
    # =====================================

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def screen_class(self) -> ScreenClass:
        return self._screen_class

    def enter(self) -> bool:
        """Switch edit mode on. Refused on mobile screens."""
        if self._active:
            return False
        if self._screen_class is ScreenClass.MOBILE:
            logger.info("[EditModeController] Edit mode is not available on mobile")
            return False

        self._baseline = self._registry.snapshot()
        self._active = True
        logger.info("[EditModeController] Edit mode on")
        self.edit_mode_changed.emit(True)
        return True

    def exit(self) -> bool:
        """Switch edit mode off, force-cancelling any running drag first."""
        if not self._active:
            return False

        for session in self._sessions:
            if session.is_dragging:
                logger.info(
                    "[EditModeController] Force-cancelling drag of %s", session.active_widget_id
                )
                session.force_cancel()

        self._active = False
        logger.info("[EditModeController] Edit mode off")
        self.edit_mode_changed.emit(False)
        return True

    def set_active(self, active: bool) -> bool:
        return self.enter() if active else self.exit()

    def toggle(self) -> bool:
        return self.set_active(not self._active)

    def on_screen_class_changed(self, screen_class: ScreenClass | str) -> None:
        """Track the screen class; a switch to mobile ends edit mode."""
        self._screen_class = ScreenClass(screen_class)
        if self._screen_class is ScreenClass.MOBILE and self._active:
            logger.info("[EditModeController] Screen became mobile, leaving edit mode")
            self.exit()

    # =====================================
    # Drag sessions
    # =====================================

    def attach_session(self, session: DragSession) -> None:
        if session not in self._sessions:
            self._sessions.append(session)

    def detach_session(self, session: DragSession) -> None:
        if session in self._sessions:
            session.force_cancel()
            self._sessions.remove(session)

    # =====================================
    # Gated mutators
    # =====================================

    def set_size(self, widget_id: str, size: WidgetSize | str) -> bool:
        if not self._active:
            logger.debug("[EditModeController] Size change ignored: edit mode is off")
            return False
        if WidgetSize.from_value(size) not in self.available_sizes():
            return False
        return self._registry.set_size(widget_id, size)

    def set_enabled(self, widget_id: str, enabled: bool) -> bool:
        if not self._active:
            logger.debug("[EditModeController] Toggle ignored: edit mode is off")
            return False
        return self._registry.set_enabled(widget_id, enabled)

    def set_all_enabled(self, page: str, enabled: bool) -> int:
        if not self._active:
            return 0
        return self._registry.set_all_enabled(page, enabled)

    def nudge(self, page: str, widget_id: str, direction: int) -> int | None:
        """Side-panel arrow buttons: one step up (-1) or down (+1)."""
        if not self._active:
            return None
        return self._engine.step(page, widget_id, direction)

    def reset_to_defaults(self) -> bool:
        if not self._active:
            return False
        self._registry.reset_to_defaults()
        return True

    def available_sizes(self) -> tuple[WidgetSize, ...]:
        return LayoutResolver.available_sizes(self._screen_class)

    # =====================================
    # Edit session checkpoint
    # =====================================

    @property
    def has_unsaved_changes(self) -> bool:
        if not self._active or self._baseline is None:
            return False
        return self._registry.snapshot() != self._baseline

    def save(self) -> bool:
        """Persist the current layout and make it the new checkpoint."""
        saved = self._store.save(self._registry) if self._store is not None else True
        if saved:
            self._baseline = self._registry.snapshot()
            logger.info("[EditModeController] Layout saved")
        return saved

    def save_and_exit(self) -> bool:
        if not self._active:
            return False
        saved = self.save()
        self.exit()
        return saved

    def discard(self) -> bool:
        """Leave edit mode and restore the layout from when it was entered."""
        if not self._active:
            return False
        baseline = self._baseline
        self.exit()
        if baseline is not None:
            self._registry.apply_batch(baseline)
            logger.info("[EditModeController] Changes discarded")
        return True
