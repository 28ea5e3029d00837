from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Iterable, Optional, Union

import numpy as np

from ._exceptions import UnparsableDateEntity

logger = logging.getLogger(__name__)

UNASSIGNED: str = "Unassigned"

DateLike = Union[date, str, np.datetime64]


@dataclass(frozen=True, slots=True)
class ScheduledEntity:
    """
    A date-ranged work item on the board.

    Dates are kept as supplied by the load store (``date`` or ISO string) and
    read with :func:`parse_entity_dates`; ``payload`` is carried through
    untouched.
    """

    id: str
    resource_key: Optional[str]
    start_date: DateLike
    end_date: DateLike
    payload: Any = None

    @property
    def bucket(self) -> str:
        return self.resource_key or UNASSIGNED


@dataclass(frozen=True, slots=True)
class ResourceAvailability:
    resource_key: str
    available: bool = True


def to_calendar_date(value: object) -> date:
    """
    Reduce ``value`` to a calendar day.

    Accepts ``date``, ``datetime`` (time of day dropped), ``np.datetime64``
    and ISO-8601 strings with or without a time part.  Raises ``ValueError``
    for anything else.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, np.datetime64):
        if np.isnat(value):
            raise ValueError("NaT is not a date")
        return value.astype("datetime64[D]").item()
    if isinstance(value, str):
        text = value.strip()
        if text[-1:] in ("Z", "z"):
            # UTC designator; fromisoformat only accepts it from 3.11 on.
            text = text[:-1] + "+00:00"
        try:
            return date.fromisoformat(text)
        except ValueError:
            return datetime.fromisoformat(text).date()
    raise ValueError(f"cannot read a date from {type(value).__name__}")


def parse_entity_dates(entity: ScheduledEntity) -> tuple[date, date]:
    """``(start, end)`` of ``entity``; raises :class:`UnparsableDateEntity`."""
    try:
        start = to_calendar_date(entity.start_date)
        end = to_calendar_date(entity.end_date)
    except ValueError as exc:
        raise UnparsableDateEntity(entity.id, str(exc)) from exc
    if start > end:
        raise UnparsableDateEntity(
            entity.id, f"start {start.isoformat()} is after end {end.isoformat()}"
        )
    return start, end


def readable_spans(entities: Iterable[ScheduledEntity]) -> list[tuple[date, date]]:
    """``(start, end)`` of every entity with usable dates; the rest are logged and skipped."""
    spans: list[tuple[date, date]] = []
    for entity in entities:
        try:
            spans.append(parse_entity_dates(entity))
        except UnparsableDateEntity as exc:
            logger.warning("Ignoring entity: %s", exc)
    return spans
