"""Module: widget_registry.py.

Date: 2026-10-19

WidgetRegistry - single owner of widget configuration and per-page order.

Widgets are created once from the catalog and never destroyed; disabling is
the only (reversible) removal. Each page keeps its own OrderedCollection, so
a widget shown on several pages has an independent position on each.

Invariant kept by every mutator: for every page, the enabled widgets of that
page sorted by (position, id) carry the dense positions 0..n-1. Disabled
widgets keep their last position and are ignored by the invariant.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from prepboard.core.catalog_import import CatalogError, ImportBatch, build_import_batch
from prepboard.domain.widget import CatalogEntry, WidgetConfig, WidgetSize, WidgetState
from prepboard.utils.events import Observable, Signal
from prepboard.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class OrderedCollection:
    """Position map for the widgets of one page.

    Holds a position for every widget of the page, enabled or not. Which ids
    are live is decided by the caller; the collection only orders them.
    """

    def __init__(self, page: str):
        self.page = page
        self._positions: dict[str, int] = {}

    def __contains__(self, widget_id: str) -> bool:
        return widget_id in self._positions

    def __len__(self) -> int:
        return len(self._positions)

    def ids(self) -> list[str]:
        return list(self._positions)

    def position(self, widget_id: str) -> int | None:
        return self._positions.get(widget_id)

    def set_position(self, widget_id: str, position: int) -> None:
        self._positions[widget_id] = position

    def ordered(self, ids: Iterable[str] | None = None) -> list[str]:
        """Sort ``ids`` (default: all ids) by position, ties broken by id."""
        if ids is None:
            ids = self._positions
        return sorted(ids, key=lambda wid: (self._positions[wid], wid))

    def assign(self, ordered_ids: Iterable[str]) -> bool:
        """Give ``ordered_ids`` the dense positions 0..n-1 in the given order.

        Returns:
            True if any position changed

        """
        changed = False
        for index, widget_id in enumerate(ordered_ids):
            if self._positions.get(widget_id) != index:
                self._positions[widget_id] = index
                changed = True
        return changed

    def renormalize(self, live_ids: Iterable[str]) -> bool:
        """Compact the positions of ``live_ids`` to 0..n-1, keeping their order."""
        return self.assign(self.ordered(live_ids))


@dataclass
class _WidgetRecord:
    entry: CatalogEntry
    size: WidgetSize
    enabled: bool


class WidgetRegistry(Observable):
    """Owns every widget configuration and the ordered view of each page."""

    page_changed = Signal(str)  # page id whose ordered view or layout changed
    widget_changed = Signal(str)  # widget id whose attributes changed

    def __init__(self, catalog: Iterable[CatalogEntry]):
        super().__init__()
        self._catalog: tuple[CatalogEntry, ...] = tuple(catalog)
        self._records: dict[str, _WidgetRecord] = {}
        self._collections: dict[str, OrderedCollection] = {}

        for entry in self._catalog:
            if entry.id in self._records:
                raise CatalogError(f"Duplicate widget id in catalog: {entry.id!r}")
            self._records[entry.id] = _WidgetRecord(entry, entry.size, entry.enabled)
            for page in entry.pages:
                collection = self._collections.setdefault(page, OrderedCollection(page))
                collection.set_position(entry.id, entry.order)

        for page in self._collections:
            self._renormalize(page)

        logger.debug(
            "[WidgetRegistry] Initialized with %d widgets on %d pages",
            len(self._records),
            len(self._collections),
            extra={"dev_only": True},
        )

    # =====================================
    # Queries
    # =====================================

    def pages(self) -> list[str]:
        return sorted(self._collections)

    def widget_ids(self) -> list[str]:
        return list(self._records)

    def __contains__(self, widget_id: str) -> bool:
        return widget_id in self._records

    def get(self, widget_id: str, page: str | None = None) -> WidgetConfig | None:
        """Return the widget as seen from ``page``.

        Without a page, the first page of the widget (alphabetically) is used.
        Unknown ids and pages the widget is not on give None.
        """
        record = self._records.get(widget_id)
        if record is None:
            return None
        if page is None:
            page = min(record.entry.pages)
        collection = self._collections.get(page)
        if collection is None or widget_id not in collection:
            return None
        return self._config(record, collection)

    def list_widgets(self, page: str) -> list[WidgetConfig]:
        """Enabled widgets of ``page`` sorted by order then id.

        A page without catalog entries gives an empty list.
        """
        collection = self._collections.get(page)
        if collection is None:
            return []
        return [
            self._config(self._records[wid], collection)
            for wid in collection.ordered(self._live_ids(collection))
        ]

    def live_ids(self, page: str) -> list[str]:
        """Ids of ``list_widgets(page)``, in order."""
        collection = self._collections.get(page)
        if collection is None:
            return []
        return collection.ordered(self._live_ids(collection))

    def widgets_for_page(self, page: str) -> list[WidgetConfig]:
        """Every widget of ``page``, disabled ones included, by retained order."""
        collection = self._collections.get(page)
        if collection is None:
            return []
        return [self._config(self._records[wid], collection) for wid in collection.ordered()]

    def enabled_count(self, page: str) -> int:
        return len(self.live_ids(page))

    def total_count(self, page: str) -> int:
        collection = self._collections.get(page)
        return len(collection) if collection is not None else 0

    def index_of(self, page: str, widget_id: str) -> int | None:
        """Current index of ``widget_id`` in ``list_widgets(page)``, or None."""
        try:
            return self.live_ids(page).index(widget_id)
        except ValueError:
            return None

    def search(self, page: str, query: str) -> list[WidgetConfig]:
        """Case-insensitive match on title, category or id over all page widgets."""
        widgets = self.widgets_for_page(page)
        needle = query.strip().lower()
        if not needle:
            return widgets
        return [
            w
            for w in widgets
            if needle in w.title.lower() or needle in w.category.lower() or needle in w.id.lower()
        ]

    # =====================================
    # Mutators
    # =====================================

    def set_enabled(self, widget_id: str, enabled: bool) -> bool:
        """Enable or disable a widget on all of its pages.

        Returns:
            True if the widget changed; unknown ids and repeats are no-ops

        """
        record = self._records.get(widget_id)
        if record is None:
            logger.debug("[WidgetRegistry] set_enabled ignored for unknown id %r", widget_id)
            return False
        if record.enabled == bool(enabled):
            return False

        record.enabled = bool(enabled)
        for page in sorted(record.entry.pages):
            self._renormalize(page)

        logger.debug(
            "[WidgetRegistry] %s %s", "Enabled" if enabled else "Disabled", widget_id
        )
        self.widget_changed.emit(widget_id)
        for page in sorted(record.entry.pages):
            self.page_changed.emit(page)
        return True

    def set_size(self, widget_id: str, size: WidgetSize | str) -> bool:
        """Change a widget's size. Never touches order or enabled state."""
        record = self._records.get(widget_id)
        if record is None:
            logger.debug("[WidgetRegistry] set_size ignored for unknown id %r", widget_id)
            return False
        new_size = WidgetSize.from_value(size)
        if record.size is new_size:
            return False

        record.size = new_size
        logger.debug("[WidgetRegistry] Resized %s to %s", widget_id, new_size)
        self.widget_changed.emit(widget_id)
        for page in sorted(record.entry.pages):
            self.page_changed.emit(page)
        return True

    def set_all_enabled(self, page: str, enabled: bool) -> int:
        """Enable or disable every widget of ``page``.

        Returns:
            Number of widgets that changed

        """
        collection = self._collections.get(page)
        if collection is None:
            return 0

        # Flip every flag before renormalizing so retained orders survive a
        # disable-all followed by an enable-all.
        changed = [
            wid for wid in collection.ordered() if self._records[wid].enabled != bool(enabled)
        ]
        for widget_id in changed:
            self._records[widget_id].enabled = bool(enabled)

        touched_pages = sorted(
            {p for wid in changed for p in self._records[wid].entry.pages}
        )
        for touched in touched_pages:
            self._renormalize(touched)

        logger.debug(
            "[WidgetRegistry] %s %d widgets on %s",
            "Enabled" if enabled else "Disabled",
            len(changed),
            page,
        )
        for widget_id in changed:
            self.widget_changed.emit(widget_id)
        for touched in touched_pages:
            self.page_changed.emit(touched)
        return len(changed)

    def commit_order(self, page: str, ordered_ids: list[str]) -> bool:
        """Store a new order for the live widgets of ``page``.

        ``ordered_ids`` must be a permutation of ``live_ids(page)`` taken at
        call time; anything else means the caller worked from a stale view.

        Raises:
            ValueError: If ``ordered_ids`` does not match the live widgets

        """
        live = self.live_ids(page)
        if len(ordered_ids) != len(live) or set(ordered_ids) != set(live):
            raise ValueError(
                f"Order for page {page!r} does not match its live widgets: "
                f"{ordered_ids!r} vs {live!r}"
            )

        changed = self._collections[page].assign(ordered_ids)
        if changed:
            self.page_changed.emit(page)
        return changed

    # =====================================
    # Snapshots and imports
    # =====================================

    def page_states(self, page: str) -> list[WidgetState]:
        """Persistable state of every widget on ``page``, disabled included."""
        return [w.state for w in self.widgets_for_page(page)]

    def snapshot(self) -> ImportBatch:
        """Finished batch describing the whole registry; restorable later."""
        return build_import_batch({page: self.page_states(page) for page in self.pages()})

    def apply_batch(self, batch: ImportBatch) -> int:
        """Apply a finished import batch in one step.

        Unknown widget ids and widgets listed for a page they are not on are
        skipped. Every touched page is renormalized before any signal fires,
        so observers never see a partially-applied batch.

        Returns:
            Number of states applied

        Raises:
            TypeError: If ``batch`` is not an ImportBatch

        """
        if not isinstance(batch, ImportBatch):
            raise TypeError(
                f"apply_batch() needs an ImportBatch, got {type(batch).__name__}; "
                "use build_import_batch() first"
            )

        applied = 0
        touched_pages: set[str] = set()
        touched_widgets: set[str] = set()
        for page, states in batch.pages.items():
            collection = self._collections.get(page)
            if collection is None:
                logger.debug("[WidgetRegistry] Skipping unknown page %r in batch", page)
                continue
            for state in states:
                record = self._records.get(state.id)
                if record is None or state.id not in collection:
                    logger.debug(
                        "[WidgetRegistry] Skipping %r on %r (not in catalog)", state.id, page
                    )
                    continue
                record.size = state.size
                record.enabled = state.enabled
                collection.set_position(state.id, state.order)
                touched_widgets.add(state.id)
                touched_pages.update(record.entry.pages)
                applied += 1

        for page in sorted(touched_pages):
            self._renormalize(page)

        logger.info(
            "[WidgetRegistry] Applied batch: %d states across %d pages", applied, len(touched_pages)
        )
        for widget_id in sorted(touched_widgets):
            self.widget_changed.emit(widget_id)
        for page in sorted(touched_pages):
            self.page_changed.emit(page)
        return applied

    def reset_to_defaults(self) -> None:
        """Restore catalog sizes, enabled flags and orders on every page."""
        defaults = {
            page: [
                WidgetState(entry.id, entry.size, entry.enabled, entry.order)
                for entry in self._catalog
                if page in entry.pages
            ]
            for page in self.pages()
        }
        self.apply_batch(build_import_batch(defaults))
        logger.info("[WidgetRegistry] Reset to catalog defaults")

    # =====================================
    # Internals
    # =====================================

    def _live_ids(self, collection: OrderedCollection) -> list[str]:
        return [wid for wid in collection.ids() if self._records[wid].enabled]

    def _renormalize(self, page: str) -> bool:
        collection = self._collections[page]
        return collection.renormalize(self._live_ids(collection))

    def _config(self, record: _WidgetRecord, collection: OrderedCollection) -> WidgetConfig:
        entry = record.entry
        return WidgetConfig(
            id=entry.id,
            title=entry.title,
            size=record.size,
            enabled=record.enabled,
            order=collection.position(entry.id),
            pages=entry.pages,
            category=entry.category,
        )
