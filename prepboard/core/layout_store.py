"""Module: layout_store.py

Date: 2026-10-19

Persistence of widget layouts.

- serialize_widgets / deserialize_widgets: JSON text for one widget list;
  the round trip keeps (id, size, enabled, order) for every widget
- LayoutStore: saves the whole registry (every page, disabled widgets
  included) to a JSON file with a .bak copy, and restores it through the
  import boundary
"""

from __future__ import annotations

import json
import shutil
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from prepboard.config import (
    APP_VERSION,
    DEBUG_RESET_LAYOUT,
    LAYOUT_DIR_NAME,
    LAYOUT_FILE_NAME,
    LAYOUT_FORMAT_VERSION,
    LAYOUT_STORAGE_KEY,
)
from prepboard.core.catalog_import import ImportBatch, build_import_batch
from prepboard.domain.widget import WidgetConfig, WidgetState
from prepboard.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from prepboard.core.widget_registry import WidgetRegistry

logger = get_cached_logger(__name__)


class LayoutStoreError(Exception):
    """Raised when a saved layout cannot be read or parsed."""


def serialize_widgets(widgets: Iterable[WidgetConfig | WidgetState]) -> str:
    """Serialize widgets to a JSON list of {id, size, enabled, order}."""
    states = [w.state if isinstance(w, WidgetConfig) else w for w in widgets]
    return json.dumps([s.to_dict() for s in states], ensure_ascii=False)


def deserialize_widgets(text: str) -> list[WidgetState]:
    """Inverse of ``serialize_widgets``.

    Raises:
        LayoutStoreError: If ``text`` is not a valid serialized widget list

    """
    try:
        rows = json.loads(text)
        if not isinstance(rows, list):
            raise TypeError("expected a JSON list")
        return [WidgetState.from_dict(row) for row in rows]
    except (TypeError, KeyError, ValueError) as e:
        raise LayoutStoreError(f"Invalid serialized widget list: {e}") from e


def _default_layout_dir() -> Path:
    return Path.home() / LAYOUT_DIR_NAME


class LayoutStore:
    """JSON file persistence for a WidgetRegistry."""

    def __init__(self, layout_dir: str | Path | None = None, file_name: str = LAYOUT_FILE_NAME):
        self.layout_dir = Path(layout_dir) if layout_dir is not None else _default_layout_dir()
        self.layout_file = self.layout_dir / file_name
        self.backup_file = self.layout_dir / f"{file_name}.bak"

    # =====================================
    # Encoding
    # =====================================

    @staticmethod
    def encode(batch: ImportBatch) -> dict[str, Any]:
        return {
            "key": LAYOUT_STORAGE_KEY,
            "format": LAYOUT_FORMAT_VERSION,
            "pages": batch.to_dict(),
            "_metadata": {
                "last_saved": datetime.now().isoformat(),
                "version": f"v{APP_VERSION}",
            },
        }

    @staticmethod
    def decode(data: Any) -> ImportBatch:
        """Turn parsed file contents into a finished batch.

        Raises:
            LayoutStoreError: On a foreign key, newer format or malformed pages

        """
        if not isinstance(data, dict):
            raise LayoutStoreError("Layout file must contain a JSON object")
        if data.get("key") != LAYOUT_STORAGE_KEY:
            raise LayoutStoreError(f"Unexpected layout key {data.get('key')!r}")
        try:
            layout_format = int(data.get("format", 0))
        except (TypeError, ValueError) as e:
            raise LayoutStoreError(f"Invalid layout format {data.get('format')!r}") from e
        if layout_format > LAYOUT_FORMAT_VERSION:
            raise LayoutStoreError(f"Unsupported layout format {data.get('format')!r}")

        pages = data.get("pages")
        if not isinstance(pages, dict):
            raise LayoutStoreError("Layout file has no 'pages' object")
        try:
            return build_import_batch(pages)
        except (TypeError, KeyError, ValueError) as e:
            raise LayoutStoreError(f"Malformed layout pages: {e}") from e

    def read(self, path: Path | None = None) -> ImportBatch:
        """Read and decode a layout file (default: the main file).

        Raises:
            LayoutStoreError: If the file is missing, unreadable or malformed

        """
        path = path or self.layout_file
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise LayoutStoreError(f"Cannot read layout file {path}: {e}") from e
        return self.decode(data)

    # =====================================
    # Save / load
    # =====================================

    def exists(self) -> bool:
        return self.layout_file.exists()

    def save(self, registry: WidgetRegistry, create_backup: bool = True) -> bool:
        """Write the registry state; the previous file is kept as .bak."""
        try:
            self.layout_dir.mkdir(parents=True, exist_ok=True)
            if create_backup and self.layout_file.exists():
                shutil.copy2(self.layout_file, self.backup_file)

            with open(self.layout_file, "w", encoding="utf-8") as f:
                json.dump(self.encode(registry.snapshot()), f, indent=2, ensure_ascii=False)

            logger.debug("[LayoutStore] Layout saved to %s", self.layout_file)
            return True

        except OSError as e:
            logger.error("[LayoutStore] Failed to save layout: %s", e)
            return False

    def load(self, registry: WidgetRegistry) -> bool:
        """Restore a saved layout into ``registry``.

        Falls back to the .bak copy when the main file is corrupt, and leaves
        the catalog defaults in place when neither can be used.

        Returns:
            True if a saved layout was applied

        """
        if DEBUG_RESET_LAYOUT and self.layout_file.exists():
            logger.info("[DEBUG] Deleting layout file for fresh start: %s", self.layout_file)
            self.layout_file.unlink()

        if not self.layout_file.exists() and not self.backup_file.exists():
            logger.info("[LayoutStore] No saved layout, using catalog defaults")
            return False

        for path in (self.layout_file, self.backup_file):
            if not path.exists():
                continue
            try:
                batch = self.read(path)
            except LayoutStoreError as e:
                logger.error("[LayoutStore] %s", e)
                continue
            registry.apply_batch(batch)
            logger.info("[LayoutStore] Layout restored from %s", path.name)
            return True

        logger.warning("[LayoutStore] No usable layout file, using catalog defaults")
        return False

    def clear(self) -> None:
        """Delete saved layout files."""
        for path in (self.layout_file, self.backup_file):
            if path.exists():
                path.unlink()
