"""Qt adapters.

Connect PyQt5 widgets to the UI-agnostic layout core:
- QtViewportWatcher: debounced resize -> screen class
- QtDragKeyFilter: key presses -> DragSession commands
"""

from prepboard.ui.adapters.qt_drag_keys import QtDragKeyFilter, drag_key_from_qt
from prepboard.ui.adapters.qt_viewport_watcher import QtViewportWatcher

__all__ = [
    "QtDragKeyFilter",
    "QtViewportWatcher",
    "drag_key_from_qt",
]
