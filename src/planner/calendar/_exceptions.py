from __future__ import annotations


class CalendarError(ValueError):
    """Base class for all week-calendar errors."""


class InvalidWeekSpec(CalendarError):
    """A (year, week) pair that does not name a week of the 52-week calendar."""

    def __init__(self, year: object, week: object, reason: str) -> None:
        super().__init__(f"Invalid week spec ({year!r}, {week!r}): {reason}")
        self.year = year
        self.week = week
        self.reason = reason
