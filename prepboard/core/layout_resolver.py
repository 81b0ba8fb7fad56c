"""Module: layout_resolver.py.

Date: 2026-10-19

Responsive sizing for widget slots.

- ResponsiveScreenClassifier: viewport width -> ScreenClass
- LayoutResolver: (WidgetSize, ScreenClass) -> SlotLayout
- place(): ordered widgets -> SlotPlacement rows for an external renderer

Everything here is pure and deterministic; identical inputs always give
identical outputs.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from prepboard.config import COLUMN_SPANS, GRID_COLUMNS, MOBILE_MAX_WIDTH, TABLET_MAX_WIDTH
from prepboard.domain.widget import HeightClass, ScreenClass, WidgetConfig, WidgetSize


class ResponsiveScreenClassifier:
    """Maps a viewport width in pixels to a screen class.

    Breakpoints are exclusive upper bounds: widths below ``mobile_max`` are
    mobile, below ``tablet_max`` tablet, anything else desktop. A missing or
    non-positive width means the host could not measure the viewport and
    is treated as desktop.
    """

    def __init__(self, mobile_max: int = MOBILE_MAX_WIDTH, tablet_max: int = TABLET_MAX_WIDTH):
        if not 0 < mobile_max <= tablet_max:
            raise ValueError(
                f"Invalid breakpoints: mobile_max={mobile_max}, tablet_max={tablet_max}"
            )
        self.mobile_max = mobile_max
        self.tablet_max = tablet_max

    def classify(self, width: int | float | None) -> ScreenClass:
        if width is None or width <= 0:
            return ScreenClass.DESKTOP
        if width < self.mobile_max:
            return ScreenClass.MOBILE
        if width < self.tablet_max:
            return ScreenClass.TABLET
        return ScreenClass.DESKTOP


@dataclass(frozen=True)
class SlotLayout:
    column_span: int
    min_height_class: HeightClass


@dataclass(frozen=True)
class SlotPlacement:
    """One rendered slot: which widget, how wide, how tall at minimum."""

    widget_id: str
    column_span: int
    min_height_class: HeightClass

    def to_dict(self) -> dict[str, object]:
        return {
            "widgetId": self.widget_id,
            "columnSpan": self.column_span,
            "minHeightClass": self.min_height_class.value,
        }


_HEIGHTS = {
    WidgetSize.SMALL: HeightClass.COMPACT,
    WidgetSize.MEDIUM: HeightClass.STANDARD,
    WidgetSize.LARGE: HeightClass.TALL,
    WidgetSize.EXTRA_LARGE: HeightClass.EXTRA_TALL,
}


def _build_table() -> dict[tuple[WidgetSize, ScreenClass], SlotLayout]:
    table = {}
    for size in WidgetSize:
        height = _HEIGHTS[size]
        table[(size, ScreenClass.MOBILE)] = SlotLayout(GRID_COLUMNS["mobile"], height)
        for screen in (ScreenClass.TABLET, ScreenClass.DESKTOP):
            span = COLUMN_SPANS[screen.value][size.value]
            table[(size, screen)] = SlotLayout(span, height)
    return table


class LayoutResolver:
    """Fixed lookup from widget size and screen class to slot layout."""

    _TABLE = _build_table()

    @staticmethod
    def columns(screen_class: ScreenClass) -> int:
        """Number of grid columns for ``screen_class``."""
        return GRID_COLUMNS[ScreenClass(screen_class).value]

    @classmethod
    def resolve(cls, size: WidgetSize | str, screen_class: ScreenClass | str) -> SlotLayout:
        return cls._TABLE[(WidgetSize.from_value(size), ScreenClass(screen_class))]

    @staticmethod
    def available_sizes(screen_class: ScreenClass | str) -> tuple[WidgetSize, ...]:
        """Sizes offered by the size control on ``screen_class``.

        Mobile renders every widget as a full row, so only the standard size
        is offered there.
        """
        if ScreenClass(screen_class) is ScreenClass.MOBILE:
            return (WidgetSize.MEDIUM,)
        return tuple(WidgetSize)

    @classmethod
    def place(
        cls, widgets: Iterable[WidgetConfig], screen_class: ScreenClass | str
    ) -> list[SlotPlacement]:
        """Turn an ordered widget list into placement rows, keeping the order."""
        placements = []
        for widget in widgets:
            layout = cls.resolve(widget.size, screen_class)
            placements.append(
                SlotPlacement(widget.id, layout.column_span, layout.min_height_class)
            )
        return placements
