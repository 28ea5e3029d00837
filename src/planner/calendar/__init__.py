"""
planner.calendar
~~~~~~~~~~~~~~~~

Week arithmetic for the weekly planner.  A week is addressed by a
``(year, week_number)`` pair and resolves to a concrete Monday–Sunday
:class:`WeekWindow`.  Week 1 is the week containing January 4; every year has
exactly 52 weeks, so navigation wraps from week 52 straight to week 1 of the
next year.

Basic usage::

    from planner.calendar import compute_week_window, next_week

    window = compute_week_window(2024, 1)      # 2024-01-01 .. 2024-01-07
    year, week = next_week(2024, 52)           # → (2025, 1)

Public API
----------
WeekWindow            Concrete 7-day window.
compute_week_window   Resolve a (year, week) pair.
previous_week         Step one week back (52-week wraparound).
next_week             Step one week forward (52-week wraparound).
current_week          The (year, week) pair containing a given day.
weeks_for_year        All 52 windows of a year.
CalendarError         Base exception for all calendar-related errors.
InvalidWeekSpec       Malformed or out-of-range (year, week).
"""

from __future__ import annotations

from planner.calendar._exceptions import CalendarError, InvalidWeekSpec
from planner.calendar.week import (
    DAYS_PER_WEEK,
    WEEKS_PER_YEAR,
    WeekWindow,
    compute_week_window,
    current_week,
    next_week,
    previous_week,
    weeks_for_year,
)

__all__ = [
    "DAYS_PER_WEEK",
    "WEEKS_PER_YEAR",
    "WeekWindow",
    "compute_week_window",
    "previous_week",
    "next_week",
    "current_week",
    "weeks_for_year",
    "CalendarError",
    "InvalidWeekSpec",
]
