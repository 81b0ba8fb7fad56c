"""Module: page_layout_controller.py.

Date: 2026-10-19

Facade wiring the layout core together for a host UI.

Builds the registry from the widget catalog, owns the reorder engine, the
edit-mode controller and one drag session per page, tracks the current
screen class, and turns each page's ordered widgets into placement rows for
an external renderer.
"""

from __future__ import annotations

from collections.abc import Iterable

from prepboard.config import DEFAULT_CATALOG
from prepboard.controllers.edit_mode_controller import EditModeController
from prepboard.core.catalog_import import load_catalog
from prepboard.core.drag.drag_session import DragSession
from prepboard.core.layout_resolver import (
    LayoutResolver,
    ResponsiveScreenClassifier,
    SlotPlacement,
)
from prepboard.core.layout_store import LayoutStore
from prepboard.core.reorder_engine import ReorderEngine
from prepboard.core.widget_registry import WidgetRegistry
from prepboard.domain.widget import CatalogEntry, ScreenClass, WidgetSize
from prepboard.utils.events import Observable, Signal
from prepboard.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class PageLayoutController(Observable):
    """Entry point for hosts: placements out, mutations and viewport in."""

    layout_changed = Signal(str)  # page id
    screen_class_changed = Signal(str)  # ScreenClass value

    def __init__(
        self,
        catalog: Iterable[CatalogEntry] | None = None,
        store: LayoutStore | None = None,
        classifier: ResponsiveScreenClassifier | None = None,
    ):
        super().__init__()
        entries = list(catalog) if catalog is not None else load_catalog(DEFAULT_CATALOG)

        self.registry = WidgetRegistry(entries)
        self.engine = ReorderEngine(self.registry)
        self.store = store
        self.edit_mode = EditModeController(self.engine, store=store)
        self.classifier = classifier or ResponsiveScreenClassifier()
        self._screen_class = ScreenClass.DESKTOP
        self._sessions: dict[str, DragSession] = {}

        self.registry.page_changed.connect(self.layout_changed.emit)

        logger.debug(
            "[PageLayoutController] Ready with pages: %s",
            ", ".join(self.registry.pages()),
            extra={"dev_only": True},
        )

    # =====================================
    # Viewport
    # =====================================

    @property
    def screen_class(self) -> ScreenClass:
        return self._screen_class

    @property
    def columns(self) -> int:
        return LayoutResolver.columns(self._screen_class)

    def set_viewport_width(self, width: int | float | None) -> ScreenClass:
        """Feed a new viewport width; re-lays out every page on a class change."""
        screen_class = self.classifier.classify(width)
        if screen_class is not self._screen_class:
            return self.set_screen_class(screen_class)
        return screen_class

    def set_screen_class(self, screen_class: ScreenClass | str) -> ScreenClass:
        screen_class = ScreenClass(screen_class)
        if screen_class is self._screen_class:
            return screen_class

        logger.info(
            "[PageLayoutController] Screen class %s -> %s", self._screen_class, screen_class
        )
        self._screen_class = screen_class
        self.edit_mode.on_screen_class_changed(screen_class)
        self.screen_class_changed.emit(screen_class.value)
        for page in self.registry.pages():
            self.layout_changed.emit(page)
        return screen_class

    # =====================================
    # Output
    # =====================================

    def placements(self, page: str) -> list[SlotPlacement]:
        """Ordered slot placements of ``page`` for the current screen class."""
        return LayoutResolver.place(self.registry.list_widgets(page), self._screen_class)

    def available_sizes(self) -> tuple[WidgetSize, ...]:
        return LayoutResolver.available_sizes(self._screen_class)

    # =====================================
    # Drag
    # =====================================

    def drag_session(self, page: str) -> DragSession:
        """The drag session of ``page``, created and attached on first use."""
        session = self._sessions.get(page)
        if session is None:
            session = DragSession(self.engine, self.edit_mode)
            self.edit_mode.attach_session(session)
            self._sessions[page] = session
        return session

    # =====================================
    # Persistence
    # =====================================

    def load(self) -> bool:
        if self.store is None:
            return False
        return self.store.load(self.registry)

    def save(self) -> bool:
        if self.store is None:
            return False
        return self.store.save(self.registry)
