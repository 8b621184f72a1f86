import pytest

from wildfire_sim.events import Event


def test_new_event_is_unbound():
    event = Event()
    assert event.is_bound() is False
    assert len(event) == 0


def test_broadcast_calls_handlers_in_order_with_args():
    event = Event()
    calls = []
    event.subscribe(lambda *a: calls.append(("first", a)))
    event.subscribe(lambda *a: calls.append(("second", a)))
    event.broadcast(1, "x")
    assert calls == [("first", (1, "x")), ("second", (1, "x"))]


def test_duplicate_subscribe_is_ignored():
    event = Event()
    calls = []

    def handler(value):
        calls.append(value)

    event.subscribe(handler)
    event.subscribe(handler)
    event.broadcast(7)
    assert calls == [7]
    assert len(event) == 1


def test_unsubscribe_and_is_already_bound():
    event = Event()
    calls = []

    def handler():
        calls.append(True)

    event.subscribe(handler)
    assert event.is_already_bound(handler)
    event.unsubscribe(handler)
    assert not event.is_already_bound(handler)
    assert event.is_bound() is False
    event.broadcast()
    assert calls == []


def test_unsubscribe_unknown_handler_is_harmless():
    event = Event()
    event.unsubscribe(print)
    assert len(event) == 0


def test_handler_removed_during_broadcast_still_runs_this_time():
    event = Event()
    calls = []

    def first():
        calls.append("first")
        event.unsubscribe(second)

    def second():
        calls.append("second")

    event.subscribe(first)
    event.subscribe(second)
    event.broadcast()
    assert event.is_already_bound(second) is False
    assert event.is_already_bound(first) is True
    assert len(event) == 1
    event.broadcast()
    assert calls == ["first", "second", "first"]


def test_non_callable_rejected():
    with pytest.raises(TypeError):
        Event().subscribe(42)