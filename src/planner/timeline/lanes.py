from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Sequence

import numpy as np

from .entities import ScheduledEntity, parse_entity_dates


class LaneAllocator:
    """
    Greedy first-fit lane allocator for one resource row.

    Each lane remembers the end date of its last occupant.  A new item goes to
    the lowest-indexed lane whose last occupant ended strictly before the
    item starts; a lane is never handed over on the same day.  Items must be
    placed in start-date order for the lanes to stay collision-free.
    """

    def __init__(self) -> None:
        self._last_end: list[date] = []

    def place(self, start: date, end: date) -> int:
        for lane, last_end in enumerate(self._last_end):
            if last_end < start:
                self._last_end[lane] = end
                return lane
        self._last_end.append(end)
        return len(self._last_end) - 1

    @property
    def lane_count(self) -> int:
        return len(self._last_end)

    def __repr__(self) -> str:
        return (
            f"LaneAllocator(lane_count={self.lane_count}, "
            f"lane_last_end={[d.isoformat() for d in self._last_end]})"
        )


@dataclass(frozen=True, slots=True)
class LaneAssignment:
    entity_id: str
    lane: int


@dataclass(frozen=True, slots=True)
class LaneResult:
    lane_of: dict[str, int] = field(default_factory=dict)
    max_lane: int = -1

    @property
    def lane_count(self) -> int:
        return self.max_lane + 1

    @property
    def assignments(self) -> list[LaneAssignment]:
        return [LaneAssignment(entity_id, lane) for entity_id, lane in self.lane_of.items()]


def assign_lanes(resource_entities: Sequence[ScheduledEntity]) -> LaneResult:
    """
    Lane per entity for one resource group, sorted by start date.

    An empty group has ``max_lane == -1``.  Entities with unreadable dates are
    expected to have been filtered out upstream and raise
    :class:`~planner.timeline.UnparsableDateEntity`.
    """
    allocator = LaneAllocator()
    lane_of: dict[str, int] = {}
    max_lane = -1
    for entity in resource_entities:
        start, end = parse_entity_dates(entity)
        lane = allocator.place(start, end)
        lane_of[entity.id] = lane
        max_lane = max(max_lane, lane)
    return LaneResult(lane_of=lane_of, max_lane=max_lane)


def peak_concurrency(starts, ends) -> int:
    """
    Largest number of closed ``[start, end]`` day ranges active on one day.

    This is the lower bound on the lanes any collision-free layout needs.
    """
    s = np.asarray(starts, dtype="datetime64[D]").astype(np.int64).ravel()
    e = np.asarray(ends, dtype="datetime64[D]").astype(np.int64).ravel()
    if s.size == 0:
        return 0
    # An item stops counting the day after its end; at equal positions the
    # -1 events sort before the +1 events.
    positions = np.concatenate([s, e + 1])
    deltas = np.concatenate([np.ones_like(s), -np.ones_like(e)])
    order = np.lexsort((deltas, positions))
    return int(np.cumsum(deltas[order]).max())
