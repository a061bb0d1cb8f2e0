# src/dayplan/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..schedule.manager import ScheduleManager
from ..schedule.subscribers import ConsoleSubscriber


@dataclass
class AppState:
    # Settings object (real Settings or a test stand-in).
    settings: Any

    manager: ScheduleManager

    # The manager holds subscribers weakly; the state keeps them alive.
    # id -> one object per id; repeated /subscribe adds registrations, not objects.
    subscribers: dict[str, ConsoleSubscriber] = field(default_factory=dict)
    extra_observers: list[Any] = field(default_factory=list)
