from __future__ import annotations

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, timedelta
from numbers import Integral
from typing import Optional

import numpy as np

from ._exceptions import InvalidWeekSpec

WEEKS_PER_YEAR: int = 52
DAYS_PER_WEEK: int = 7


@dataclass(frozen=True, slots=True)
class WeekWindow:
    """
    Monday-to-Sunday window for ``(year, week_number)``.

    ``end`` is derived, so ``end == start + 6 days`` holds by construction.
    """

    year: int
    week_number: int
    start: date

    @property
    def end(self) -> date:
        return self.start + timedelta(days=DAYS_PER_WEEK - 1)

    @property
    def days(self) -> list[date]:
        return [self.start + timedelta(days=i) for i in range(DAYS_PER_WEEK)]

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def day_index(self, day: date) -> int:
        """Signed day offset of ``day`` from the window's Monday."""
        return (day - self.start).days

    def __repr__(self) -> str:
        return (
            f"WeekWindow(year={self.year}, week={self.week_number}, "
            f"start={self.start.isoformat()}, end={self.end.isoformat()})"
        )


def _check_int(name: str, value: object, year: object, week: object) -> int:
    # bool is an int subclass but never a meaningful year or week.
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, Integral):
        raise InvalidWeekSpec(year, week, f"{name} must be an integer")
    return int(value)


def _validate(year: object, week: object) -> tuple[int, int]:
    y = _check_int("year", year, year, week)
    w = _check_int("week", week, year, week)
    if not MINYEAR <= y <= MAXYEAR:
        raise InvalidWeekSpec(year, week, f"year must be in {MINYEAR}..{MAXYEAR}")
    if not 1 <= w <= WEEKS_PER_YEAR:
        raise InvalidWeekSpec(year, week, f"week must be in 1..{WEEKS_PER_YEAR}")
    return y, w


def compute_week_window(year: int, week_number: int) -> WeekWindow:
    """
    Resolve ``(year, week_number)`` to its Monday-to-Sunday window.

    January 4 always falls in week 1.  The anchor is shifted by whole weeks,
    which preserves its weekday, and the window starts on the Monday on or
    before the shifted date.  Week 53 is never produced.
    """
    y, w = _validate(year, week_number)
    shifted = date(y, 1, 4) + timedelta(weeks=w - 1)
    start = shifted - timedelta(days=shifted.weekday())
    return WeekWindow(year=y, week_number=w, start=start)


def previous_week(year: int, week: int) -> tuple[int, int]:
    y, w = _validate(year, week)
    if w > 1:
        return y, w - 1
    return y - 1, WEEKS_PER_YEAR


def next_week(year: int, week: int) -> tuple[int, int]:
    y, w = _validate(year, week)
    if w < WEEKS_PER_YEAR:
        return y, w + 1
    return y + 1, 1


def current_week(today: Optional[date] = None) -> tuple[int, int]:
    """
    ``(year, week)`` containing ``today`` (default: the local date).

    Uses the ISO year, so 30 Dec 2024 belongs to (2025, 1).  ISO week 53 has
    no counterpart in the 52-week calendar and is reported as week 52.
    """
    if today is None:
        today = date.today()
    iso_year, iso_week, _ = today.isocalendar()
    return iso_year, min(iso_week, WEEKS_PER_YEAR)


def weeks_for_year(year: int) -> list[WeekWindow]:
    """All windows of ``year`` in week order, as offered by the week picker."""
    return [compute_week_window(year, w) for w in range(1, WEEKS_PER_YEAR + 1)]
