"""Pure domain types for the widget layout engine."""

from prepboard.domain.keyboard import DragKey
from prepboard.domain.widget import (
    CatalogEntry,
    HeightClass,
    InputMode,
    ScreenClass,
    WidgetConfig,
    WidgetSize,
    WidgetState,
)

__all__ = [
    "CatalogEntry",
    "DragKey",
    "HeightClass",
    "InputMode",
    "ScreenClass",
    "WidgetConfig",
    "WidgetSize",
    "WidgetState",
]
