# src/dayplan/schedule/manager.py

from __future__ import annotations

"""
Schedule manager.

Admits tasks under a non-overlap rule and tells subscribers what happened:
- a conflicting candidate is rejected (False) and a conflict message is broadcast,
- a free candidate is appended (True) and an admission message is broadcast.

The internal list keeps insertion order; list_tasks() returns a sorted copy.
"""

import logging

from ..core.ports import Observer
from .observers import ObserverChannel
from .task_models import Task

logger = logging.getLogger(__name__)


def task_added_message(task: Task) -> str:
    return f"Task added: {task.name}"


def conflict_message(candidate: Task, existing: Task) -> str:
    return f"Conflict: {candidate.name} overlaps with {existing.name}"


class ScheduleManager:
    """In-memory scheduler for a single day. Not thread-safe; use from one caller."""

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._channel = ObserverChannel()

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- subject ----

    def register(self, observer: Observer) -> None:
        self._channel.register(observer)

    def unregister(self, observer: Observer) -> None:
        self._channel.unregister(observer)

    def notify_observers(self, message: str) -> None:
        self._channel.notify(message)

    def observers(self) -> list[Observer]:
        return self._channel.observers()

    # ---- tasks ----

    def find_conflict(self, candidate: Task) -> Task | None:
        """First admitted task (in admission order) that overlaps `candidate`."""
        for existing in self._tasks:
            if existing.overlaps_with(candidate):
                return existing
        return None

    def add_task(self, candidate: Task) -> bool:
        existing = self.find_conflict(candidate)
        if existing is not None:
            logger.info("Rejected %s: overlaps %s", candidate, existing)
            self.notify_observers(conflict_message(candidate, existing))
            return False

        self._tasks.append(candidate)
        logger.info("Admitted %s (total=%d)", candidate, len(self._tasks))
        self.notify_observers(task_added_message(candidate))
        return True

    def list_tasks(self) -> tuple[Task, ...]:
        """Snapshot of admitted tasks ordered by start (stable for equal starts)."""
        return tuple(sorted(self._tasks, key=Task.get_start))
