from __future__ import annotations

from dataclasses import dataclass

from planner.calendar import DAYS_PER_WEEK, WeekWindow

from ._exceptions import OutOfWindowEntity
from .entities import ScheduledEntity, parse_entity_dates


@dataclass(frozen=True, slots=True)
class BarGeometry:
    """
    Grid placement of one bar on a 7-column week board.

    ``column_start`` and ``row`` are 1-indexed grid lines.  The two flags tell
    the renderer to draw a "continues off-screen" edge.
    """

    entity_id: str
    column_start: int
    column_span: int
    row: int
    starts_before_week: bool
    ends_after_week: bool

    @property
    def column_end(self) -> int:
        # Exclusive grid line, as used by CSS grid-column-end.
        return self.column_start + self.column_span


def project(entity: ScheduledEntity, lane: int, window: WeekWindow) -> BarGeometry:
    """Clip ``entity`` to ``window`` and place it on row ``lane + 1``."""
    start, end = parse_entity_dates(entity)
    if start > window.end or end < window.start:
        raise OutOfWindowEntity(entity.id, window)
    last = DAYS_PER_WEEK - 1
    start_pos = min(max(0, window.day_index(start)), last)
    end_pos = max(0, min(last, window.day_index(end)))
    return BarGeometry(
        entity_id=entity.id,
        column_start=start_pos + 1,
        column_span=end_pos - start_pos + 1,
        row=lane + 1,
        starts_before_week=start < window.start,
        ends_after_week=end > window.end,
    )
