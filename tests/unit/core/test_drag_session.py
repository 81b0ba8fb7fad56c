"""Tests for the DragSession state machine.

Date: 2026-10-19

Covers the edit-mode gate, eager hover commits, drop/cancel teardown,
keyboard reordering and the pointer drag threshold.
"""

from unittest.mock import Mock

import pytest

from prepboard.core.catalog_import import load_catalog
from prepboard.core.drag.drag_session import DragEndReason, DragSession, DragState
from prepboard.core.reorder_engine import ReorderEngine
from prepboard.core.widget_registry import WidgetRegistry
from prepboard.domain.keyboard import DragKey
from prepboard.domain.widget import InputMode


@pytest.fixture
def gate():
    return Mock(is_active=True)


@pytest.fixture
def session(engine, gate):
    return DragSession(engine, gate)


@pytest.fixture
def abcd_session(gate):
    """Session over a page with four enabled widgets A, B, C, D."""
    registry = WidgetRegistry(
        load_catalog([{"id": wid, "pages": ["dashboard"]} for wid in "ABCD"])
    )
    return DragSession(ReorderEngine(registry), gate), registry


def live(registry):
    return registry.live_ids("dashboard")


class TestPickUp:
    """Test entering DRAGGING."""

    def test_pick_up_starts_gesture(self, session):
        listener = Mock()
        session.drag_started.connect(listener)

        assert session.pick_up("dashboard", "B") is True

        assert session.state is DragState.DRAGGING
        assert session.active_widget_id == "B"
        assert session.origin_index == 1
        assert session.current_hover_index == 1
        assert session.input_mode is InputMode.POINTER
        listener.assert_called_once_with("B")

    def test_refused_when_edit_mode_off(self, session, gate):
        gate.is_active = False

        assert session.pick_up("dashboard", "A") is False
        assert session.state is DragState.IDLE

    def test_refused_while_dragging(self, session):
        session.pick_up("dashboard", "A")

        assert session.pick_up("dashboard", "C") is False
        assert session.active_widget_id == "A"

    def test_refused_for_disabled_widget(self, session, registry):
        registry.set_enabled("C", False)

        assert session.pick_up("dashboard", "C") is False
        assert session.pick_up("dashboard", "ghost") is False


class TestHover:
    """Test eager commits while the pointer moves."""

    def test_hover_commits_immediately(self, session, registry):
        listener = Mock()
        session.order_committed.connect(listener)
        session.pick_up("dashboard", "A")

        assert session.hover(2) is True

        assert live(registry) == ["B", "C", "A"]
        assert session.current_hover_index == 2
        assert session.origin_index == 0
        listener.assert_called_once_with("A", 2)

    def test_hover_same_slot_is_noop(self, session, registry):
        session.pick_up("dashboard", "B")
        signals = []
        registry.page_changed.connect(signals.append)

        assert session.hover(1) is False
        assert signals == []

    def test_hover_when_idle(self, session, registry):
        assert session.hover(2) is False
        assert live(registry) == ["A", "B", "C"]

    def test_drop_does_not_mutate(self, session, registry):
        session.pick_up("dashboard", "A")
        session.hover(1)
        before = registry.snapshot()
        finished = Mock()
        session.drag_finished.connect(finished)

        assert session.drop() is True

        assert registry.snapshot() == before
        assert session.state is DragState.IDLE
        finished.assert_called_once_with("A", DragEndReason.DROP.value)

    def test_cancel_keeps_last_hover(self, session, registry):
        session.pick_up("dashboard", "A")
        session.hover(2)

        assert session.cancel() is True

        assert live(registry) == ["B", "C", "A"]
        assert session.state is DragState.IDLE

    def test_drop_outside_is_cancel(self, session, registry):
        finished = Mock()
        session.drag_finished.connect(finished)
        session.pick_up("dashboard", "C")
        session.hover(0)

        session.drop_outside()

        assert live(registry) == ["C", "A", "B"]
        finished.assert_called_once_with("C", "cancel")

    def test_force_cancel_keeps_last_hover(self, session, registry):
        finished = Mock()
        session.drag_finished.connect(finished)
        session.pick_up("dashboard", "A")
        session.hover(1)

        assert session.force_cancel() is True

        assert live(registry) == ["B", "A", "C"]
        finished.assert_called_once_with("A", "forced")

    def test_teardown_when_idle(self, session):
        assert session.drop() is False
        assert session.cancel() is False
        assert session.force_cancel() is False

    def test_hover_resolves_against_live_list(self, session, registry):
        session.pick_up("dashboard", "A")
        registry.set_enabled("B", False)

        session.hover(2)

        assert live(registry) == ["C", "A"]
        assert [w.order for w in registry.list_widgets("dashboard")] == [0, 1]
        assert session.current_hover_index == 1

    def test_hover_reports_change_after_neighbour_disabled(self, abcd_session):
        session, registry = abcd_session
        commits = Mock()
        session.order_committed.connect(commits)
        session.pick_up("dashboard", "A")
        session.hover(2)
        registry.set_enabled("B", False)
        assert registry.live_ids("dashboard") == ["C", "A", "D"]

        assert session.hover(2) is True

        assert registry.live_ids("dashboard") == ["C", "D", "A"]
        assert [c.args for c in commits.call_args_list] == [("A", 2), ("A", 2)]

    def test_hover_without_change_after_neighbour_disabled(self, abcd_session):
        session, registry = abcd_session
        commits = Mock()
        session.order_committed.connect(commits)
        session.pick_up("dashboard", "A")
        session.hover(2)
        registry.set_enabled("B", False)

        assert session.hover(1) is False

        assert registry.live_ids("dashboard") == ["C", "A", "D"]
        assert session.current_hover_index == 1
        commits.assert_called_once_with("A", 2)

    def test_dragged_widget_disabled_mid_drag_ends_gesture(self, session, registry):
        finished = Mock()
        session.drag_finished.connect(finished)
        session.pick_up("dashboard", "A")
        registry.set_enabled("A", False)

        assert session.hover(2) is False

        assert session.state is DragState.IDLE
        assert live(registry) == ["B", "C"]
        finished.assert_called_once_with("A", "cancel")

    def test_pointer_ignores_keyboard_steps(self, session, registry):
        session.pick_up("dashboard", "A")

        assert session.step(1) is False
        assert live(registry) == ["A", "B", "C"]


class TestKeyboard:
    """Test keyboard pick-up, steps and drop."""

    def test_grab_step_drop(self, session, registry):
        assert session.handle_key(DragKey.GRAB, "dashboard", "A") is True
        assert session.input_mode is InputMode.KEYBOARD

        assert session.handle_key(DragKey.STEP_FORWARD) is True
        assert session.handle_key(DragKey.STEP_FORWARD) is True
        assert live(registry) == ["B", "C", "A"]

        assert session.handle_key(DragKey.GRAB) is True
        assert session.state is DragState.IDLE
        assert live(registry) == ["B", "C", "A"]

    def test_step_past_end_is_consumed_without_change(self, session, registry):
        session.handle_key(DragKey.GRAB, "dashboard", "A")

        assert session.handle_key(DragKey.STEP_BACK) is True
        assert live(registry) == ["A", "B", "C"]

    def test_escape_keeps_steps(self, session, registry):
        session.handle_key(DragKey.GRAB, "dashboard", "C")
        session.handle_key(DragKey.STEP_BACK)

        assert session.handle_key(DragKey.CANCEL) is True

        assert session.state is DragState.IDLE
        assert live(registry) == ["A", "C", "B"]

    def test_step_after_neighbour_disabled(self, abcd_session):
        session, registry = abcd_session
        commits = Mock()
        session.order_committed.connect(commits)
        session.handle_key(DragKey.GRAB, "dashboard", "C")
        registry.set_enabled("A", False)
        assert registry.live_ids("dashboard") == ["B", "C", "D"]

        assert session.step(1) is True
        assert registry.live_ids("dashboard") == ["B", "D", "C"]
        assert session.step(1) is False

        commits.assert_called_once_with("C", 2)

    def test_keys_ignored_when_idle(self, session):
        assert session.handle_key(DragKey.STEP_FORWARD) is False
        assert session.handle_key(DragKey.CANCEL) is False
        assert session.handle_key(DragKey.GRAB) is False

    def test_step_keys_not_consumed_by_pointer_drag(self, session):
        session.pick_up("dashboard", "A")

        assert session.handle_key(DragKey.STEP_FORWARD) is False

    def test_keyboard_ignores_hover(self, session, registry):
        session.handle_key(DragKey.GRAB, "dashboard", "A")

        assert session.hover(2) is False
        assert live(registry) == ["A", "B", "C"]


class TestThreshold:
    """Test the pointer press/move threshold."""

    def test_small_moves_do_not_start_drag(self, session):
        session.arm("dashboard", "B", (100, 100))

        assert session.track((103, 104)) is False
        assert session.state is DragState.IDLE

    def test_crossing_threshold_starts_drag(self, session):
        session.arm("dashboard", "B", (100, 100))

        assert session.track((106, 100)) is True
        assert session.active_widget_id == "B"
        assert session.input_mode is InputMode.POINTER

    def test_release_clears_armed_press(self, session):
        session.arm("dashboard", "B", (0, 0))

        assert session.release() is False
        assert session.track((50, 50)) is False

    def test_arm_refused_when_edit_mode_off(self, session, gate):
        gate.is_active = False

        assert session.arm("dashboard", "B", (0, 0)) is False
        assert session.track((50, 50)) is False

    def test_custom_threshold(self, engine, gate):
        session = DragSession(engine, gate, drag_threshold=20)
        session.arm("dashboard", "A", (0, 0))

        assert session.track((10, 10)) is False
        assert session.track((30, 0)) is True
