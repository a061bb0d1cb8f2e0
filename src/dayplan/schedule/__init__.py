"""
Schedule subsystem.

Components:
- task_models.py: Task value type, minute-of-day helpers, InvalidTaskError
- observers.py: ObserverChannel (subscriber registry + synchronous broadcast)
- manager.py: ScheduleManager (admission under the non-overlap rule, sorted listing)
- subscribers.py: ready-made subscribers (console, logging)
"""

from .manager import ScheduleManager
from .task_models import InvalidTaskError, Task

__all__ = ["InvalidTaskError", "ScheduleManager", "Task"]
