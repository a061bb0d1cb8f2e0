# src/dayplan/schedule/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import NewType

Minute = NewType("Minute", int)
# Minute of day, 0..1440 (1440 is only valid as an exclusive end).

MINUTES_PER_DAY = 1440


class InvalidTaskError(ValueError):
    """Raised when a task (or a time string) is not a valid minute-of-day interval."""


def format_minute(minute: int) -> str:
    return f"{minute // 60:02d}:{minute % 60:02d}"


def parse_minute(raw: str) -> Minute:
    """
    Parse "HH:MM" into a minute of day.

    "24:00" is accepted as the end of the day (1440).
    """
    text = (raw or "").strip()
    hh, sep, mm = text.partition(":")
    # isdigit() alone accepts e.g. "²", which int() rejects
    if not sep or not (hh + mm).isascii() or not hh.isdigit() or not mm.isdigit() or len(mm) != 2:
        raise InvalidTaskError(f"Expected HH:MM, got {raw!r}")

    hours, minutes = int(hh), int(mm)
    if minutes >= 60:
        raise InvalidTaskError(f"Minutes out of range in {raw!r}")

    value = hours * 60 + minutes
    if value > MINUTES_PER_DAY:
        raise InvalidTaskError(f"Time out of range in {raw!r}")
    return Minute(value)


@dataclass(frozen=True, slots=True)
class Task:
    """
    A named half-open interval [start, end) in minutes of day.

    Names are display-only and need not be unique.
    """

    name: str
    start: int
    end: int

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidTaskError("Task name must be a non-empty string")
        if isinstance(self.start, bool) or isinstance(self.end, bool):
            raise InvalidTaskError("Task times must be integers")
        if not isinstance(self.start, int) or not isinstance(self.end, int):
            raise InvalidTaskError("Task times must be integers")
        if self.start >= self.end:
            raise InvalidTaskError(f"start < end required (got {self.start} >= {self.end})")
        if self.start < 0 or self.end > MINUTES_PER_DAY:
            raise InvalidTaskError(
                f"Task times must fall within [0, {MINUTES_PER_DAY}] (got {self.start}..{self.end})"
            )

    def overlaps_with(self, other: Task) -> bool:
        return not (self.end <= other.start or self.start >= other.end)

    def get_start(self) -> int:
        return self.start

    def __str__(self) -> str:
        return f"{format_minute(self.start)}-{format_minute(self.end)} {self.name}"
