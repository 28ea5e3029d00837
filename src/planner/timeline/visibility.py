from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from planner.calendar import WeekWindow

from ._exceptions import UnparsableDateEntity
from .entities import ScheduledEntity, parse_entity_dates

logger = logging.getLogger(__name__)


def is_visible(entity: ScheduledEntity, window: WeekWindow) -> bool:
    """
    True when the entity's closed date range intersects the window.

    Entities spanning the whole week are visible even though neither endpoint
    lies inside it.  Unreadable dates make an entity invisible.
    """
    try:
        start, end = parse_entity_dates(entity)
    except UnparsableDateEntity:
        return False
    return start <= window.end and end >= window.start


def visible_mask(starts, ends, window: WeekWindow) -> np.ndarray:
    """Vectorised :func:`is_visible` over ``datetime64[D]``-convertible arrays."""
    s = np.asarray(starts, dtype="datetime64[D]")
    e = np.asarray(ends, dtype="datetime64[D]")
    lo = np.datetime64(window.start, "D")
    hi = np.datetime64(window.end, "D")
    return (s <= hi) & (e >= lo)


def filter_visible(
    entities: Iterable[ScheduledEntity],
    window: WeekWindow,
) -> tuple[list[ScheduledEntity], list[UnparsableDateEntity]]:
    """
    Split ``entities`` into those visible in ``window`` and the rejects.

    Input order is preserved.  Entities with unreadable or inverted dates are
    reported, not raised, so one bad record cannot break the board.
    """
    visible: list[ScheduledEntity] = []
    rejected: list[UnparsableDateEntity] = []
    for entity in entities:
        try:
            start, end = parse_entity_dates(entity)
        except UnparsableDateEntity as exc:
            logger.warning("Excluding entity from %r: %s", window, exc)
            rejected.append(exc)
            continue
        if start <= window.end and end >= window.start:
            visible.append(entity)
    return visible, rejected
