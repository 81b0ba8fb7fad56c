"""Tests for layout persistence.

Date: 2026-10-19
"""

import json

import pytest

from prepboard.config import LAYOUT_STORAGE_KEY
from prepboard.core.layout_store import (
    LayoutStore,
    LayoutStoreError,
    deserialize_widgets,
    serialize_widgets,
)
from prepboard.core.widget_registry import WidgetRegistry


@pytest.fixture
def store(tmp_path):
    return LayoutStore(tmp_path / "layouts")


class TestSerialization:
    def test_round_trip_keeps_every_widget(self, mixed_catalog):
        registry = WidgetRegistry(mixed_catalog)
        registry.set_size("kpis", "small")
        widgets = registry.widgets_for_page("dashboard")

        states = deserialize_widgets(serialize_widgets(widgets))

        assert states == [w.state for w in widgets]
        assert [s.enabled for s in states] == [True, True, True, False]

    @pytest.mark.parametrize(
        "text",
        ["not json", "{}", '[{"id": "a"}]', '[{"id": "a", "size": "huge", "enabled": true, "order": 0}]'],
    )
    def test_invalid_text(self, text):
        with pytest.raises(LayoutStoreError):
            deserialize_widgets(text)


class TestLayoutStore:
    """Test saving and restoring a registry."""

    def test_save_and_load(self, mixed_catalog, store):
        registry = WidgetRegistry(mixed_catalog)
        registry.set_enabled("rankings", True)
        registry.commit_order("dashboard", ["rankings", "budget", "kpis", "deadlines"])
        registry.set_size("drafts", "large")

        assert store.save(registry) is True
        assert store.exists()

        restored = WidgetRegistry(mixed_catalog)
        assert store.load(restored) is True
        assert restored.snapshot() == registry.snapshot()

    def test_file_contents(self, registry, store):
        store.save(registry)

        data = json.loads(store.layout_file.read_text(encoding="utf-8"))

        assert data["key"] == LAYOUT_STORAGE_KEY
        assert [w["id"] for w in data["pages"]["dashboard"]] == ["A", "B", "C"]
        assert "last_saved" in data["_metadata"]

    def test_second_save_creates_backup(self, registry, store):
        store.save(registry)
        assert not store.backup_file.exists()

        store.save(registry)

        assert store.backup_file.exists()

    def test_load_without_file_keeps_defaults(self, registry, store):
        before = registry.snapshot()

        assert store.load(registry) is False
        assert registry.snapshot() == before

    def test_corrupt_file_falls_back_to_backup(self, abc_catalog, registry, engine, store):
        engine.move("dashboard", 0, 2)
        store.save(registry)
        store.save(registry)
        store.layout_file.write_text("{ broken", encoding="utf-8")

        fresh = WidgetRegistry(abc_catalog)

        assert store.load(fresh) is True
        assert fresh.live_ids("dashboard") == ["B", "C", "A"]

    @pytest.mark.parametrize("layout_format", ["x", None, [1]])
    def test_bad_format_falls_back_to_backup(
        self, abc_catalog, registry, engine, store, layout_format
    ):
        engine.move("dashboard", 2, 0)
        store.save(registry)
        store.save(registry)
        store.layout_file.write_text(
            json.dumps({"key": LAYOUT_STORAGE_KEY, "format": layout_format, "pages": {}}),
            encoding="utf-8",
        )

        with pytest.raises(LayoutStoreError):
            store.read()

        fresh = WidgetRegistry(abc_catalog)

        assert store.load(fresh) is True
        assert fresh.live_ids("dashboard") == ["C", "A", "B"]

    def test_unusable_files_keep_defaults(self, abc_catalog, registry, store):
        store.save(registry)
        store.save(registry)
        store.layout_file.write_text("[]", encoding="utf-8")
        store.backup_file.write_text("{ broken", encoding="utf-8")

        fresh = WidgetRegistry(abc_catalog)

        assert store.load(fresh) is False
        assert fresh.live_ids("dashboard") == ["A", "B", "C"]

    def test_foreign_key_rejected(self, store, tmp_path):
        path = tmp_path / "other.json"
        path.write_text(json.dumps({"key": "someone-else", "pages": {}}), encoding="utf-8")

        with pytest.raises(LayoutStoreError):
            store.read(path)

    def test_newer_format_rejected(self):
        with pytest.raises(LayoutStoreError):
            LayoutStore.decode({"key": LAYOUT_STORAGE_KEY, "format": 99, "pages": {}})

    def test_decode_renormalizes(self):
        batch = LayoutStore.decode(
            {
                "key": LAYOUT_STORAGE_KEY,
                "format": 1,
                "pages": {
                    "dashboard": [
                        {"id": "B", "size": "md", "enabled": True, "order": 9},
                        {"id": "A", "size": "sm", "enabled": True, "order": 4},
                    ]
                },
            }
        )

        assert [(s.id, s.order) for s in batch.states("dashboard")] == [("A", 0), ("B", 1)]

    def test_unwritable_directory(self, registry, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("", encoding="utf-8")
        store = LayoutStore(blocker / "sub")

        assert store.save(registry) is False

    def test_clear(self, registry, store):
        store.save(registry)
        store.save(registry)

        store.clear()

        assert not store.layout_file.exists()
        assert not store.backup_file.exists()
