# src/dayplan/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the schedule core.

The manager depends on Protocols instead of concrete subscribers.
This keeps console/logging subscribers swappable and makes testing easier.
"""

from typing import Protocol


class Observer(Protocol):
    """
    Receives human-readable notifications from a subject.

    The message text is opaque: do not parse it to drive control flow.
    """

    def update(self, message: str) -> None: ...


class Subject(Protocol):
    def register(self, observer: Observer) -> None: ...
    def unregister(self, observer: Observer) -> None: ...
    def notify_observers(self, message: str) -> None: ...
