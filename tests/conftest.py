# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from dayplan.cli.bootstrap import create_initial_state
from dayplan.core.state import AppState
from dayplan.schedule.manager import ScheduleManager

from .fakes import RecordingObserver


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="dayplan-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        console_enabled=False,
        run_demo=False,
        subscribers=[],
        log_notifications=False,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return create_initial_state(settings=settings)


@pytest.fixture()
def manager() -> ScheduleManager:
    return ScheduleManager()


@pytest.fixture()
def observers(manager: ScheduleManager) -> tuple[RecordingObserver, RecordingObserver]:
    """Two recording observers ("UserA", "Logger") registered on `manager`."""
    a = RecordingObserver("UserA")
    b = RecordingObserver("Logger")
    manager.register(a)
    manager.register(b)
    return a, b
