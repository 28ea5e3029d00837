"""
End-to-end weekly board computation.

``build_board`` runs the whole pipeline for one snapshot::

    window → visibility → grouping → lanes → {bar geometry, day status}

and returns a fresh :class:`Board`.  Nothing is cached between calls; callers
that want to skip redundant work should memoise on their inputs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from planner.calendar import WeekWindow, compute_week_window
from planner.loads.models import Load, LoadStatus, count_statuses

from ._exceptions import OutOfWindowEntity, UnparsableDateEntity
from .entities import UNASSIGNED, ResourceAvailability, ScheduledEntity
from .geometry import BarGeometry, project
from .grouping import group
from .idle import DayStatus, availability_map, week_status
from .lanes import LaneResult, assign_lanes
from .visibility import filter_visible

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResourceRow:
    resource_key: str
    entities: list[ScheduledEntity]
    lanes: LaneResult
    bars: list[BarGeometry]
    days: list[DayStatus]

    @property
    def is_unassigned(self) -> bool:
        return self.resource_key == UNASSIGNED

    @property
    def row_count(self) -> int:
        return max(1, self.lanes.max_lane + 1)


@dataclass(frozen=True, slots=True)
class Board:
    window: WeekWindow
    rows: list[ResourceRow]
    rejected: list[UnparsableDateEntity] = field(default_factory=list)
    status_counts: dict[LoadStatus, int] = field(default_factory=dict)

    @property
    def order(self) -> list[str]:
        return [row.resource_key for row in self.rows]

    @property
    def entity_count(self) -> int:
        return sum(len(row.entities) for row in self.rows)

    def row(self, resource_key: str) -> ResourceRow:
        for r in self.rows:
            if r.resource_key == resource_key:
                return r
        raise KeyError(resource_key)


def _project_row(
    entities: list[ScheduledEntity],
    lanes: LaneResult,
    window: WeekWindow,
    strict: bool,
) -> list[BarGeometry]:
    bars: list[BarGeometry] = []
    for entity in entities:
        try:
            bars.append(project(entity, lanes.lane_of[entity.id], window))
        except OutOfWindowEntity:
            if strict:
                raise
            logger.error("Dropping bar for %r: entity is outside %r", entity.id, window)
    return bars


def build_board(
    entities: Iterable[ScheduledEntity],
    year: int,
    week: int,
    availability: Iterable[ResourceAvailability] = (),
    strict: bool = __debug__,
) -> Board:
    """
    Compute the board for week ``(year, week)``.

    Raises :class:`~planner.calendar.InvalidWeekSpec` for a bad week.
    Entities with unusable dates end up in ``Board.rejected``.  With
    ``strict`` a bar that does not intersect the window raises
    :class:`OutOfWindowEntity`; without it the bar is dropped and logged.
    """
    window = compute_week_window(year, week)
    available = availability_map(availability)

    visible, rejected = filter_visible(entities, window)
    grouping = group(visible)
    rejected.extend(grouping.rejected)

    rows: list[ResourceRow] = []
    for key, members in grouping:
        lanes = assign_lanes(members)
        rows.append(
            ResourceRow(
                resource_key=key,
                entities=members,
                lanes=lanes,
                bars=_project_row(members, lanes, window, strict),
                days=week_status(key, members, window, available.get(key)),
            )
        )

    status_counts = count_statuses(e.payload for e in visible if isinstance(e.payload, Load))
    logger.debug(
        "Board for %r: %d resources, %d entities, %d rejected",
        window, len(rows), len(visible), len(rejected),
    )
    return Board(window=window, rows=rows, rejected=rejected, status_counts=status_counts)
