"""Module: catalog_import.py.

Date: 2026-10-19

Import boundary for widget data.

Two kinds of data enter the layout core from outside:
- catalog rows (static widget definitions), validated by ``load_catalog``
- per-page widget states (saved layouts, merged records), which must be
  turned into a finished ``ImportBatch`` by ``build_import_batch`` before
  the registry accepts them

``build_import_batch`` renormalizes every page, so the registry and the
reorder engine never see sparse, duplicated or partially-imported orders.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from prepboard.domain.widget import CatalogEntry, WidgetSize, WidgetState
from prepboard.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class CatalogError(ValueError):
    """Raised when a widget catalog cannot be used."""


# =====================================
# Catalog
# =====================================


def _catalog_entry(row: Mapping[str, Any], position: int) -> CatalogEntry:
    try:
        widget_id = str(row["id"]).strip()
        title = str(row.get("title", widget_id))
        pages = row["pages"]
    except KeyError as e:
        raise CatalogError(f"Catalog row {position} is missing field {e.args[0]!r}") from e

    if not widget_id:
        raise CatalogError(f"Catalog row {position} has an empty id")
    if isinstance(pages, str):
        pages = [pages]
    pages = frozenset(str(p) for p in pages)
    if not pages:
        raise CatalogError(f"Widget {widget_id!r} is not on any page")

    try:
        size = WidgetSize.from_value(row.get("size", WidgetSize.MEDIUM))
    except ValueError as e:
        raise CatalogError(f"Widget {widget_id!r} has unknown size {row.get('size')!r}") from e

    return CatalogEntry(
        id=widget_id,
        title=title,
        pages=pages,
        category=str(row.get("category", "")),
        size=size,
        order=int(row.get("order", position)),
        enabled=bool(row.get("enabled", True)),
    )


def load_catalog(rows: Iterable[Mapping[str, Any]]) -> list[CatalogEntry]:
    """Validate catalog rows into entries.

    Rows without an ``order`` get their position in ``rows``.

    Raises:
        CatalogError: On missing fields, unknown sizes, empty pages or
            duplicate ids

    """
    entries: list[CatalogEntry] = []
    seen: set[str] = set()
    for position, row in enumerate(rows):
        entry = _catalog_entry(row, position)
        if entry.id in seen:
            raise CatalogError(f"Duplicate widget id in catalog: {entry.id!r}")
        seen.add(entry.id)
        entries.append(entry)

    logger.debug("[Catalog] Loaded %d widget definitions", len(entries), extra={"dev_only": True})
    return entries


def load_catalog_file(path: str | Path) -> list[CatalogEntry]:
    """Read a JSON list of catalog rows from ``path``."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            rows = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"Cannot read widget catalog {path}: {e}") from e

    if not isinstance(rows, list):
        raise CatalogError(f"Widget catalog {path} must contain a JSON list")
    return load_catalog(rows)


# =====================================
# Import batches
# =====================================


@dataclass(frozen=True)
class ImportBatch:
    """Finished, renormalized widget states grouped by page.

    Enabled states of each page carry the dense orders 0..n-1; disabled
    states keep whatever order they were saved with.
    """

    pages: Mapping[str, tuple[WidgetState, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for page, states in self.pages.items():
            ids = [s.id for s in states]
            if len(ids) != len(set(ids)):
                raise ValueError(f"Duplicate widget ids in batch page {page!r}")
            enabled_orders = sorted(s.order for s in states if s.enabled)
            if enabled_orders != list(range(len(enabled_orders))):
                raise ValueError(
                    f"Batch page {page!r} is not renormalized: {enabled_orders!r}"
                )

    def __len__(self) -> int:
        return sum(len(states) for states in self.pages.values())

    def states(self, page: str) -> tuple[WidgetState, ...]:
        return self.pages.get(page, ())

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {page: [s.to_dict() for s in states] for page, states in self.pages.items()}


def _normalize_page(states: Iterable[WidgetState | Mapping[str, Any]]) -> tuple[WidgetState, ...]:
    by_id: dict[str, WidgetState] = {}
    for raw in states:
        state = raw if isinstance(raw, WidgetState) else WidgetState.from_dict(raw)
        by_id[state.id] = state

    enabled = sorted((s for s in by_id.values() if s.enabled), key=lambda s: (s.order, s.id))
    dense = {s.id: index for index, s in enumerate(enabled)}

    normalized = [
        WidgetState(s.id, s.size, s.enabled, dense[s.id]) if s.enabled else s
        for s in by_id.values()
    ]
    normalized.sort(key=lambda s: (s.order, s.id))
    return tuple(normalized)


def build_import_batch(
    pages: Mapping[str, Iterable[WidgetState | Mapping[str, Any]]],
) -> ImportBatch:
    """Build a finished batch from raw per-page states.

    Accepts WidgetState objects or dicts with ``id``, ``size``, ``enabled``
    and ``order``. A repeated id on a page keeps its last occurrence.
    Enabled states are renormalized to 0..n-1 by (order, id).

    Raises:
        KeyError, ValueError: On malformed state dicts

    """
    batch = ImportBatch({str(page): _normalize_page(states) for page, states in pages.items()})
    logger.debug(
        "[ImportBatch] Built batch with %d states on %d pages",
        len(batch),
        len(batch.pages),
        extra={"dev_only": True},
    )
    return batch
