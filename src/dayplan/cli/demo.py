# src/dayplan/cli/demo.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..schedule.manager import ScheduleManager
from ..schedule.task_models import Task

logger = logging.getLogger(__name__)

DEMO_TASKS: tuple[tuple[str, int, int], ...] = (
    ("Morning Exercise", 7 * 60, 8 * 60),
    ("Team Meeting", 9 * 60, 10 * 60),
    ("Training Session", 9 * 60 + 30, 10 * 60 + 30),
)


def run_demo(manager: ScheduleManager, emit: Callable[[str], None] = print) -> list[bool]:
    """Admit the walkthrough tasks (the third one conflicts), then print the day."""
    logger.info("Running demo against manager with %d task(s)", len(manager))

    results = [manager.add_task(Task(name, start, end)) for name, start, end in DEMO_TASKS]

    emit("Current tasks:")
    for task in manager.list_tasks():
        emit(f"  {task}")
    return results
