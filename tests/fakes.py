# tests/fakes.py

from __future__ import annotations


class RecordingObserver:
    """
    Deterministic observer for unit tests.

    - Captures every message for assertions
    - Plain class (weak-referenceable), so tests must keep it alive while registered
    """

    def __init__(self, name: str = "rec") -> None:
        self.name = name
        self.messages: list[str] = []

    def update(self, message: str) -> None:
        self.messages.append(message)

    def __repr__(self) -> str:
        return f"RecordingObserver({self.name!r})"


class FailingObserver:
    """Observer whose update() always raises."""

    def __init__(self) -> None:
        self.calls = 0

    def update(self, message: str) -> None:
        self.calls += 1
        raise RuntimeError(f"boom on {message!r}")


class SlottedObserver:
    """Observer without __weakref__ support (held strongly by the channel)."""

    __slots__ = ("messages",)

    def __init__(self) -> None:
        self.messages: list[str] = []

    def update(self, message: str) -> None:
        self.messages.append(message)
