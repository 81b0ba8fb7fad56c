"""
Module: conftest.py

Date: 2026-10-19

Global pytest configuration and fixtures for the prepboard test suite.
Includes CI-friendly setup for PyQt5 adapter tests and small widget catalogs.
"""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "gui: mark test as requiring GUI")
    config.addinivalue_line("markers", "local_only: mark test as local environment only")


def pytest_collection_modifyitems(session, config, items):
    """Skip GUI and local-only tests on CI."""
    _ = session
    _ = config

    if "CI" in os.environ or "GITHUB_ACTIONS" in os.environ:
        skip_gui = pytest.mark.skip(reason="GUI tests don't work on CI")
        skip_local = pytest.mark.skip(reason="Local-only tests skipped on CI")

        for item in items:
            if "gui" in item.keywords:
                item.add_marker(skip_gui)
            if "local_only" in item.keywords:
                item.add_marker(skip_local)


@pytest.fixture(scope="session")
def qapp():
    """QApplication shared by all GUI tests."""
    from PyQt5.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def abc_catalog():
    """Three enabled widgets on the dashboard: A(0), B(1), C(2)."""
    from prepboard.core.catalog_import import load_catalog

    return load_catalog(
        [
            {"id": "A", "title": "Alpha", "pages": ["dashboard"], "size": "small", "order": 0},
            {"id": "B", "title": "Bravo", "pages": ["dashboard"], "size": "medium", "order": 1},
            {"id": "C", "title": "Charlie", "pages": ["dashboard"], "size": "large", "order": 2},
        ]
    )


@pytest.fixture
def mixed_catalog():
    """Widgets spread over two pages, one shared, one disabled, sparse orders."""
    from prepboard.core.catalog_import import load_catalog

    return load_catalog(
        [
            {"id": "kpis", "title": "KPIs", "category": "analytics",
             "pages": ["dashboard"], "size": "large", "order": 10},
            {"id": "deadlines", "title": "ITT Deadlines", "category": "itt",
             "pages": ["dashboard", "itt-manager"], "size": "large", "order": 20},
            {"id": "budget", "title": "Budget vs Spend", "category": "financial",
             "pages": ["dashboard"], "size": "extra-large", "order": 30},
            {"id": "rankings", "title": "Supplier Rankings", "category": "supply",
             "pages": ["dashboard"], "size": "medium", "order": 40, "enabled": False},
            {"id": "active-itts", "title": "Active ITTs", "category": "itt",
             "pages": ["itt-manager"], "size": "extra-large", "order": 0},
            {"id": "drafts", "title": "Draft ITTs", "category": "itt",
             "pages": ["itt-manager"], "size": "small", "order": 1},
        ]
    )


@pytest.fixture
def registry(abc_catalog):
    from prepboard.core.widget_registry import WidgetRegistry

    return WidgetRegistry(abc_catalog)


@pytest.fixture
def engine(registry):
    from prepboard.core.reorder_engine import ReorderEngine

    return ReorderEngine(registry)
