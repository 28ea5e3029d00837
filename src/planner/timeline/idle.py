from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Sequence, Union

import numpy as np

from planner.calendar import WeekWindow

from .entities import UNASSIGNED, ResourceAvailability, ScheduledEntity, readable_spans

AvailabilityLike = Union[ResourceAvailability, bool, None]


@dataclass(frozen=True, slots=True)
class DayStatus:
    resource_key: str
    date: date
    busy: bool
    idle: bool


def _is_available(availability: AvailabilityLike) -> bool:
    if availability is None:
        return True
    if isinstance(availability, ResourceAvailability):
        return availability.available
    return bool(availability)


def availability_map(records: Iterable[ResourceAvailability]) -> dict[str, bool]:
    """``resource_key -> available``; later records override earlier ones."""
    return {r.resource_key: r.available for r in records}


def day_status(
    resource_key: str,
    day: date,
    resource_entities: Sequence[ScheduledEntity],
    availability: AvailabilityLike = None,
) -> DayStatus:
    """
    Busy/idle flags of one resource on one day.

    A resource is idle when it is marked unavailable or has no work covering
    the day.  The Unassigned bucket is never idle.  Entities with unusable
    dates are ignored.
    """
    busy = any(start <= day <= end for start, end in readable_spans(resource_entities))
    if resource_key == UNASSIGNED:
        idle = False
    else:
        idle = not _is_available(availability) or not busy
    return DayStatus(resource_key=resource_key, date=day, busy=busy, idle=idle)


def week_status(
    resource_key: str,
    resource_entities: Sequence[ScheduledEntity],
    window: WeekWindow,
    availability: AvailabilityLike = None,
) -> list[DayStatus]:
    """:func:`day_status` for every day of ``window``, computed in one pass."""
    days = np.arange(
        np.datetime64(window.start, "D"),
        np.datetime64(window.end, "D") + 1,
    )
    spans = readable_spans(resource_entities)
    if spans:
        starts = np.array([s for s, _ in spans], dtype="datetime64[D]")
        ends = np.array([e for _, e in spans], dtype="datetime64[D]")
        busy = ((starts[:, None] <= days) & (ends[:, None] >= days)).any(axis=0)
    else:
        busy = np.zeros(days.shape, dtype=bool)

    if resource_key == UNASSIGNED:
        idle = np.zeros(days.shape, dtype=bool)
    elif not _is_available(availability):
        idle = np.ones(days.shape, dtype=bool)
    else:
        idle = ~busy

    return [
        DayStatus(resource_key=resource_key, date=day, busy=bool(b), idle=bool(i))
        for day, b, i in zip(window.days, busy, idle)
    ]

