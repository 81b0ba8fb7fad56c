"""Qt adapter feeding viewport width into the layout controller.

Date: 2026-10-19

Watches a widget's resize events and, after a quiet period, classifies its
width. Bursts of resize events during a window drag produce a single
classification.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt5.QtCore import QEvent, QObject, QTimer, pyqtSignal
from PyQt5.QtWidgets import QWidget

from prepboard.config import RESIZE_DEBOUNCE_MS
from prepboard.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from prepboard.controllers.page_layout_controller import PageLayoutController

logger = get_cached_logger(__name__)


class QtViewportWatcher(QObject):
    """Debounced resize watcher bound to a PageLayoutController."""

    screen_class_changed = pyqtSignal(str)

    def __init__(
        self,
        widget: QWidget,
        controller: PageLayoutController,
        debounce_ms: int = RESIZE_DEBOUNCE_MS,
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self._widget = widget
        self._controller = controller
        self._last_class = controller.screen_class

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(debounce_ms)
        self._timer.timeout.connect(self.flush)

        widget.installEventFilter(self)
        logger.debug("[QtViewportWatcher] Watching %s", type(widget).__name__, extra={"dev_only": True})

    @property
    def is_pending(self) -> bool:
        return self._timer.isActive()

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if obj is self._widget and event.type() == QEvent.Resize:
            self._timer.start()
        return False

    def flush(self) -> None:
        """Classify the current width now, cancelling any pending timer."""
        self._timer.stop()
        screen_class = self._controller.set_viewport_width(self._widget.width())
        if screen_class is not self._last_class:
            self._last_class = screen_class
            self.screen_class_changed.emit(screen_class.value)

    def stop(self) -> None:
        self._timer.stop()
        self._widget.removeEventFilter(self)
