# tests/test_observers.py

from __future__ import annotations

import gc
import logging

import pytest

from dayplan.schedule.observers import ObserverChannel

from .fakes import FailingObserver, RecordingObserver, SlottedObserver


def test_notify_in_registration_order() -> None:
    channel = ObserverChannel()
    order: list[str] = []

    class Tagged:
        def __init__(self, tag: str) -> None:
            self.tag = tag

        def update(self, message: str) -> None:
            order.append(f"{self.tag}:{message}")

    first, second = Tagged("1"), Tagged("2")
    channel.register(first)
    channel.register(second)

    channel.notify("a")
    channel.notify("b")

    assert order == ["1:a", "2:a", "1:b", "2:b"]


def test_duplicate_registration_delivers_once_per_registration() -> None:
    channel = ObserverChannel()
    rec = RecordingObserver()
    channel.register(rec)
    channel.register(rec)

    channel.notify("hello")
    assert rec.messages == ["hello", "hello"]

    channel.unregister(rec)
    channel.notify("again")
    assert rec.messages == ["hello", "hello", "again"]
    assert len(channel) == 1


def test_unregister_absent_is_noop() -> None:
    channel = ObserverChannel()
    rec = RecordingObserver()
    channel.unregister(rec)
    assert len(channel) == 0


def test_unregister_matches_identity_not_equality() -> None:
    class AlwaysEqual(RecordingObserver):
        def __eq__(self, other: object) -> bool:
            return True

        __hash__ = RecordingObserver.__hash__

    channel = ObserverChannel()
    a, b = AlwaysEqual("a"), AlwaysEqual("b")
    channel.register(a)
    channel.register(b)

    channel.unregister(b)
    channel.notify("m")

    assert a.messages == ["m"]
    assert b.messages == []


def test_failing_observer_does_not_abort_broadcast(caplog: pytest.LogCaptureFixture) -> None:
    channel = ObserverChannel()
    before, bad, after = RecordingObserver("before"), FailingObserver(), RecordingObserver("after")
    channel.register(before)
    channel.register(bad)
    channel.register(after)

    with caplog.at_level(logging.ERROR, logger="dayplan.schedule.observers"):
        channel.notify("news")

    assert before.messages == ["news"]
    assert after.messages == ["news"]
    assert bad.calls == 1
    assert any("failed" in r.getMessage() for r in caplog.records)


def test_registration_during_notify_waits_for_next_broadcast() -> None:
    channel = ObserverChannel()
    late = RecordingObserver("late")

    class Registrar:
        def update(self, message: str) -> None:
            channel.register(late)

    registrar = Registrar()
    channel.register(registrar)

    channel.notify("first")
    assert late.messages == []

    channel.notify("second")
    assert late.messages == ["second"]


def test_collected_observer_is_dropped() -> None:
    channel = ObserverChannel()
    keep = RecordingObserver("keep")
    channel.register(keep)
    channel.register(RecordingObserver("temp"))
    gc.collect()

    channel.notify("x")

    assert keep.messages == ["x"]
    assert len(channel) == 1


def test_non_weakrefable_observer_is_held_strongly() -> None:
    channel = ObserverChannel()
    slotted = SlottedObserver()
    channel.register(slotted)

    channel.notify("kept")
    assert slotted.messages == ["kept"]

    channel.unregister(slotted)
    channel.notify("gone")
    assert slotted.messages == ["kept"]
