"""Module: reorder_engine.py.

Date: 2026-10-19

ReorderEngine - splice-based moves over a page's live widget list.

Every call reads ``WidgetRegistry.live_ids(page)`` at call time. Indices
captured earlier (e.g. at drag start) are never reused, because widgets may
have been enabled or disabled in between.
"""

from __future__ import annotations

from prepboard.core.widget_registry import WidgetRegistry
from prepboard.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def clamp_index(index: int, length: int) -> int:
    """Clamp ``index`` into [0, length - 1] (0 for an empty list)."""
    if length <= 0:
        return 0
    return max(0, min(int(index), length - 1))


class ReorderEngine:
    """Applies index moves to the ordered view of a page."""

    def __init__(self, registry: WidgetRegistry):
        self._registry = registry

    @property
    def registry(self) -> WidgetRegistry:
        return self._registry

    def move(self, page: str, from_index: int, to_index: int) -> bool:
        """Move the widget at ``from_index`` to ``to_index`` on ``page``.

        Both indices are clamped to the live list. Moving an index onto
        itself leaves every order value untouched.

        Returns:
            True if the order changed

        """
        live = self._registry.live_ids(page)
        if not live:
            return False

        source = clamp_index(from_index, len(live))
        target = clamp_index(to_index, len(live))
        if source == target:
            return False

        widget_id = live.pop(source)
        live.insert(target, widget_id)
        self._registry.commit_order(page, live)

        logger.debug(
            "[ReorderEngine] %s: moved %s %d -> %d",
            page,
            widget_id,
            source,
            target,
            extra={"dev_only": True},
        )
        return True

    def move_widget(self, page: str, widget_id: str, to_index: int) -> int | None:
        """Move ``widget_id`` to ``to_index``, resolving its index from the live list.

        Returns:
            The widget's index after the move, or None if it is not live on
            ``page``

        """
        from_index = self._registry.index_of(page, widget_id)
        if from_index is None:
            return None
        self.move(page, from_index, to_index)
        return self._registry.index_of(page, widget_id)

    def step(self, page: str, widget_id: str, direction: int) -> int | None:
        """Swap ``widget_id`` with its neighbour in ``direction`` (-1 or +1).

        At either end of the list the widget stays where it is.
        """
        from_index = self._registry.index_of(page, widget_id)
        if from_index is None:
            return None
        if direction == 0:
            return from_index
        step = 1 if direction > 0 else -1
        return self.move_widget(page, widget_id, from_index + step)
