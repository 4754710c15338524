import pytest

from subsystem1.signals import Signal


def test_emit_calls_slots_in_order_with_arguments():
    signal = Signal("event")
    calls = []
    signal.connect(lambda a, b: calls.append(("first", a, b)))
    signal.connect(lambda a, b: calls.append(("second", a, b)))
    signal.emit(1, "x")
    assert calls == [("first", 1, "x"), ("second", 1, "x")]


def test_disconnect_stops_delivery():
    signal = Signal()
    calls = []
    slot = calls.append
    signal.connect(slot)
    signal.emit("a")
    signal.disconnect(slot)
    signal.emit("b")
    assert calls == ["a"]
    assert len(signal) == 0


def test_disconnect_unknown_slot_raises():
    signal = Signal("named")
    with pytest.raises(ValueError):
        signal.disconnect(print)


def test_connect_rejects_non_callable():
    signal = Signal()
    with pytest.raises(TypeError):
        signal.connect(42)


def test_slot_may_disconnect_itself_during_emit():
    signal = Signal()
    calls = []

    def once():
        calls.append("once")
        signal.disconnect(once)

    signal.connect(once)
    signal.connect(lambda: calls.append("always"))
    signal.emit()
    signal.emit()
    assert calls == ["once", "always", "always"]