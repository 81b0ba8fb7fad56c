"""Tests for the pure Python signal system.

Date: 2026-10-19
"""

from unittest.mock import Mock

from prepboard.utils.events import Observable, Signal


class Counter(Observable):
    changed = Signal(int)


class TestSignal:
    def test_emit_calls_receivers_in_order(self):
        counter = Counter()
        calls = []
        counter.changed.connect(lambda v: calls.append(("first", v)))
        counter.changed.connect(lambda v: calls.append(("second", v)))

        counter.changed.emit(3)

        assert calls == [("first", 3), ("second", 3)]

    def test_signals_are_per_instance(self):
        a, b = Counter(), Counter()
        listener = Mock()
        a.changed.connect(listener)

        b.changed.emit(1)

        listener.assert_not_called()
        assert a.changed.receivers() == 1
        assert b.changed.receivers() == 0

    def test_connect_twice_is_noop(self):
        counter = Counter()
        listener = Mock()
        counter.changed.connect(listener)
        counter.changed.connect(listener)

        counter.changed.emit(1)

        listener.assert_called_once_with(1)

    def test_disconnect(self):
        counter = Counter()
        listener = Mock()
        other = Mock()
        counter.changed.connect(listener)
        counter.changed.connect(other)

        counter.changed.disconnect(listener)
        counter.changed.emit(1)
        counter.changed.disconnect()
        counter.changed.emit(2)

        listener.assert_not_called()
        other.assert_called_once_with(1)

    def test_failing_callback_does_not_stop_others(self):
        counter = Counter()
        broken = Mock(side_effect=RuntimeError("boom"))
        listener = Mock()
        counter.changed.connect(broken)
        counter.changed.connect(listener)

        counter.changed.emit(5)

        listener.assert_called_once_with(5)

    def test_class_access_returns_descriptor(self):
        assert isinstance(Counter.changed, Signal)

