# src/dayplan/schedule/observers.py

from __future__ import annotations

"""
Observer channel.

A subscriber registry plus a synchronous broadcast:
- register() appends (duplicates allowed, each registration gets its own delivery),
- unregister() removes the first registration of the same object (identity match),
- notify() delivers to a snapshot of the registrations, in registration order.

Subscribers are owned by the caller. The channel keeps weak references where the
object allows it; objects without weakref support are held strongly and must be
unregistered by the caller.
"""

import logging
import weakref
from collections.abc import Callable

from ..core.ports import Observer

logger = logging.getLogger(__name__)

ObserverRef = Callable[[], Observer | None]


def _make_ref(observer: Observer) -> ObserverRef:
    try:
        return weakref.ref(observer)
    except TypeError:
        # e.g. slotted classes without __weakref__
        return lambda: observer


class ObserverChannel:
    def __init__(self) -> None:
        self._refs: list[ObserverRef] = []

    def __len__(self) -> int:
        return sum(1 for ref in self._refs if ref() is not None)

    def register(self, observer: Observer) -> None:
        self._refs.append(_make_ref(observer))
        logger.debug("Observer registered: %r (total=%d)", observer, len(self._refs))

    def unregister(self, observer: Observer) -> None:
        for i, ref in enumerate(self._refs):
            if ref() is observer:
                del self._refs[i]
                logger.debug("Observer unregistered: %r (total=%d)", observer, len(self._refs))
                return

    def observers(self) -> list[Observer]:
        """Live subscribers in registration order (one entry per registration)."""
        out: list[Observer] = []
        for ref in self._refs:
            obs = ref()
            if obs is not None:
                out.append(obs)
        return out

    def notify(self, message: str) -> None:
        """
        Deliver `message` to every subscriber registered when the call began.

        A failing subscriber is logged and skipped; the broadcast always completes
        and nothing is raised to the caller.
        """
        self._prune()
        for obs in self.observers():
            try:
                obs.update(message)
            except Exception:
                logger.exception("Observer %r failed on message %r", obs, message)

    def _prune(self) -> None:
        self._refs = [ref for ref in self._refs if ref() is not None]
