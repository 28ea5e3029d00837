"""
planner.timeline
~~~~~~~~~~~~~~~~

Weekly resource timeline: which work items fall in a week, which lane each
one takes inside its resource row, where its bar sits on a 7-column grid and
which resource-days are idle.

Basic usage::

    from planner.timeline import ScheduledEntity, build_board

    entities = [
        ScheduledEntity("A", "T1", "2024-01-01", "2024-01-03"),
        ScheduledEntity("B", "T1", "2024-01-03", "2024-01-05"),
    ]
    board = build_board(entities, 2024, 1)
    board.row("T1").lanes.lane_of          # → {"A": 0, "B": 1}

The pieces are usable on their own::

    window  = compute_week_window(2024, 1)
    visible, rejected = filter_visible(entities, window)
    grouping = group(visible)
    lanes = assign_lanes(grouping.by_resource["T1"])

Public API
----------
ScheduledEntity, ResourceAvailability   Inputs.
is_visible, filter_visible, visible_mask
group, Grouping
assign_lanes, LaneAllocator, LaneResult, LaneAssignment, peak_concurrency
project, BarGeometry
day_status, week_status, DayStatus
build_board, Board, ResourceRow
TimelineError, UnparsableDateEntity, OutOfWindowEntity
"""

from __future__ import annotations

from planner.timeline._exceptions import (
    OutOfWindowEntity,
    TimelineError,
    UnparsableDateEntity,
)
from planner.timeline.entities import (
    UNASSIGNED,
    ResourceAvailability,
    ScheduledEntity,
    parse_entity_dates,
    readable_spans,
    to_calendar_date,
)
from planner.timeline.visibility import filter_visible, is_visible, visible_mask
from planner.timeline.grouping import Grouping, group
from planner.timeline.lanes import (
    LaneAllocator,
    LaneAssignment,
    LaneResult,
    assign_lanes,
    peak_concurrency,
)
from planner.timeline.geometry import BarGeometry, project
from planner.timeline.idle import DayStatus, availability_map, day_status, week_status
from planner.timeline.board import Board, ResourceRow, build_board

__all__ = [
    "UNASSIGNED",
    "ScheduledEntity",
    "ResourceAvailability",
    "parse_entity_dates",
    "readable_spans",
    "to_calendar_date",
    "is_visible",
    "filter_visible",
    "visible_mask",
    "Grouping",
    "group",
    "LaneAllocator",
    "LaneAssignment",
    "LaneResult",
    "assign_lanes",
    "peak_concurrency",
    "BarGeometry",
    "project",
    "DayStatus",
    "availability_map",
    "day_status",
    "week_status",
    "Board",
    "ResourceRow",
    "build_board",
    "TimelineError",
    "UnparsableDateEntity",
    "OutOfWindowEntity",
]
