# src/dayplan/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the schedule manager and its start-up subscribers into AppState.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..core.state import AppState
from ..schedule.manager import ScheduleManager
from ..schedule.subscribers import ConsoleSubscriber, LoggingSubscriber

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    Path(settings.data_dir).mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    state = AppState(settings=settings, manager=ScheduleManager())

    for sub_id in list(getattr(settings, "subscribers", []) or []):
        subscribe(state, sub_id)

    if getattr(settings, "log_notifications", False):
        log_sub = LoggingSubscriber()
        state.extra_observers.append(log_sub)
        state.manager.register(log_sub)

    logger.info(
        "State ready: subscribers=%s log_notifications=%s",
        list(state.subscribers),
        bool(getattr(settings, "log_notifications", False)),
    )
    return state


def subscribe(state: AppState, sub_id: str) -> ConsoleSubscriber:
    sub = state.subscribers.get(sub_id)
    if sub is None:
        sub = ConsoleSubscriber(sub_id)
        state.subscribers[sub_id] = sub
    state.manager.register(sub)
    return sub


def unsubscribe(state: AppState, sub_id: str) -> bool:
    """Drop one registration of `sub_id`. Returns False if it is unknown."""
    sub = state.subscribers.get(sub_id)
    if sub is None:
        return False
    state.manager.unregister(sub)
    if not any(o is sub for o in state.manager.observers()):
        del state.subscribers[sub_id]
    return True
