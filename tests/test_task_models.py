# tests/test_task_models.py

from __future__ import annotations

import pytest

from dayplan.schedule.task_models import (
    MINUTES_PER_DAY,
    InvalidTaskError,
    Task,
    format_minute,
    parse_minute,
)


def test_display_form_is_zero_padded() -> None:
    assert str(Task("Morning Exercise", 420, 480)) == "07:00-08:00 Morning Exercise"
    assert str(Task("x", 5, 65)) == "00:05-01:05 x"
    assert str(Task("late", 1380, MINUTES_PER_DAY)) == "23:00-24:00 late"


@pytest.mark.parametrize(
    ("start", "end"),
    [(500, 500), (500, 400), (-1, 10), (0, MINUTES_PER_DAY + 1)],
)
def test_invalid_bounds_raise_value_error(start: int, end: int) -> None:
    with pytest.raises(InvalidTaskError):
        Task("Bad", start, end)
    # invalid-argument is a ValueError for callers that do not know our type
    with pytest.raises(ValueError):
        Task("Bad", start, end)


def test_empty_name_and_non_int_times_rejected() -> None:
    with pytest.raises(InvalidTaskError):
        Task("", 0, 10)
    with pytest.raises(InvalidTaskError):
        Task("x", 1.5, 10)  # type: ignore[arg-type]
    with pytest.raises(InvalidTaskError):
        Task("x", False, True)  # type: ignore[arg-type]


def test_full_day_is_valid() -> None:
    t = Task("all day", 0, MINUTES_PER_DAY)
    assert t.get_start() == 0


def test_overlap_is_half_open_symmetric_and_reflexive() -> None:
    a = Task("A", 600, 660)
    b = Task("B", 660, 720)
    c = Task("C", 630, 700)

    assert not a.overlaps_with(b)
    assert not b.overlaps_with(a)

    assert a.overlaps_with(c) and c.overlaps_with(a)
    assert b.overlaps_with(c) and c.overlaps_with(b)

    assert a.overlaps_with(a)


def test_containment_overlaps() -> None:
    outer = Task("outer", 480, 720)
    inner = Task("inner", 540, 600)
    assert outer.overlaps_with(inner)
    assert inner.overlaps_with(outer)


def test_task_is_immutable() -> None:
    t = Task("A", 0, 10)
    with pytest.raises(AttributeError):
        t.start = 5  # type: ignore[misc]


def test_parse_and_format_minute() -> None:
    assert parse_minute("07:00") == 420
    assert parse_minute("9:30") == 570
    assert parse_minute("24:00") == MINUTES_PER_DAY
    assert format_minute(570) == "09:30"


@pytest.mark.parametrize(
    "raw", ["", "7", "07:60", "24:01", "ab:cd", "07:5", "-1:00", "²:00", "07:²0", "٠٧:٠٠"]
)
def test_parse_minute_rejects_garbage(raw: str) -> None:
    with pytest.raises(InvalidTaskError):
        parse_minute(raw)
