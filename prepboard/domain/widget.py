"""Module: widget.py.

Date: 2026-10-19

Domain types for dashboard widgets.

Pure domain layer - no UI dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from prepboard.config import MIN_HEIGHTS


class WidgetSize(str, Enum):
    """Size class of a widget slot."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extra-large"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_value(cls, value: str | WidgetSize) -> WidgetSize:
        """Parse a size, accepting the short aliases used by saved dashboards.

        Raises:
            ValueError: If ``value`` is not a known size or alias

        """
        if isinstance(value, WidgetSize):
            return value
        key = str(value).strip().lower()
        alias = _SIZE_ALIASES.get(key)
        if alias is not None:
            return alias
        return cls(key)


_SIZE_ALIASES = {
    "sm": WidgetSize.SMALL,
    "md": WidgetSize.MEDIUM,
    "lg": WidgetSize.LARGE,
    "xl": WidgetSize.EXTRA_LARGE,
}


class ScreenClass(str, Enum):
    """Bucketed viewport width category."""

    MOBILE = "mobile"
    TABLET = "tablet"
    DESKTOP = "desktop"

    def __str__(self) -> str:
        return self.value


class InputMode(str, Enum):
    """Input device driving a drag gesture."""

    POINTER = "pointer"
    KEYBOARD = "keyboard"

    def __str__(self) -> str:
        return self.value


class HeightClass(str, Enum):
    """Minimum height bucket of a rendered slot."""

    COMPACT = "compact"
    STANDARD = "standard"
    TALL = "tall"
    EXTRA_TALL = "extra-tall"

    def __str__(self) -> str:
        return self.value

    @property
    def min_height_px(self) -> int:
        return MIN_HEIGHTS[_HEIGHT_SIZE[self].value]


_HEIGHT_SIZE = {
    HeightClass.COMPACT: WidgetSize.SMALL,
    HeightClass.STANDARD: WidgetSize.MEDIUM,
    HeightClass.TALL: WidgetSize.LARGE,
    HeightClass.EXTRA_TALL: WidgetSize.EXTRA_LARGE,
}


@dataclass(frozen=True)
class WidgetState:
    """Persisted part of a widget: the tuple a saved layout must round-trip."""

    id: str
    size: WidgetSize
    enabled: bool
    order: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "size": self.size.value,
            "enabled": self.enabled,
            "order": self.order,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WidgetState:
        return cls(
            id=str(data["id"]),
            size=WidgetSize.from_value(data["size"]),
            enabled=bool(data["enabled"]),
            order=int(data["order"]),
        )


@dataclass(frozen=True)
class CatalogEntry:
    """Static catalog row a widget is created from."""

    id: str
    title: str
    pages: frozenset[str]
    category: str = ""
    size: WidgetSize = WidgetSize.MEDIUM
    order: int = 0
    enabled: bool = True


@dataclass(frozen=True)
class WidgetConfig:
    """A configurable widget as seen from one page.

    ``order`` is the widget's position on the page it was listed for; the
    same widget listed for another page carries that page's order.
    """

    id: str
    title: str
    size: WidgetSize
    enabled: bool
    order: int
    pages: frozenset[str] = field(default_factory=frozenset)
    category: str = ""

    def on_page(self, page: str) -> bool:
        return page in self.pages

    @property
    def state(self) -> WidgetState:
        return WidgetState(self.id, self.size, self.enabled, self.order)
