"""Qt adapter translating key presses into drag session commands.

Date: 2026-10-19
"""

from __future__ import annotations

from collections.abc import Callable

from PyQt5.QtCore import QEvent, QObject, Qt

from prepboard.core.drag.drag_session import DragSession
from prepboard.domain.keyboard import DragKey

_KEY_MAP = {
    Qt.Key_Space: DragKey.GRAB,
    Qt.Key_Return: DragKey.GRAB,
    Qt.Key_Enter: DragKey.GRAB,
    Qt.Key_Up: DragKey.STEP_BACK,
    Qt.Key_Left: DragKey.STEP_BACK,
    Qt.Key_Down: DragKey.STEP_FORWARD,
    Qt.Key_Right: DragKey.STEP_FORWARD,
    Qt.Key_Escape: DragKey.CANCEL,
}


def drag_key_from_qt(key: int) -> DragKey | None:
    """Map a Qt key code to a DragKey (None for unrelated keys)."""
    return _KEY_MAP.get(key)


class QtDragKeyFilter(QObject):
    """Event filter driving a DragSession from the keyboard.

    ``focused_widget`` returns the id of the widget slot that has keyboard
    focus, used when Space/Enter picks a widget up.
    """

    def __init__(
        self,
        session: DragSession,
        page: str,
        focused_widget: Callable[[], str | None],
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self._session = session
        self._page = page
        self._focused_widget = focused_widget

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if event.type() != QEvent.KeyPress:
            return False

        key = drag_key_from_qt(event.key())
        if key is None:
            return False
        if key is DragKey.GRAB and event.isAutoRepeat():
            return True

        return self._session.handle_key(key, self._page, self._focused_widget())
