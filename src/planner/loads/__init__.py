"""
planner.loads
~~~~~~~~~~~~~

Load records from the load store and their adaptation to board entities.

Basic usage::

    from planner.loads import Load, to_entities

    loads = [Load("1", "LD-001", "2024-01-01", "2024-01-03", vehicle_id="T1")]
    entities = to_entities(loads)

A load's ``time_window`` JSON decodes to a typed :class:`TimeWindow`::

    tw = parse_time_window(load.time_window)
    if isinstance(tw.backload, RegularBackload):
        ...

Public API
----------
Load, LoadStatus          Load record and its status values.
to_entity, to_entities    Load → ScheduledEntity.
is_legacy_backload        Old-style backload detection by cargo type / id.
has_backload              Load carries an embedded regular backload.
is_third_party            Load hauled for another customer.
count_statuses            Per-status counts.
TimeWindow, Stop, ...     Typed time-window metadata.
parse_time_window         Decode the stored JSON.
TimeWindowError           Malformed time-window metadata.
"""

from __future__ import annotations

from planner.loads._exceptions import TimeWindowError
from planner.loads.adapter import to_entities, to_entity
from planner.loads.models import (
    LOAD_STATUSES,
    Load,
    LoadStatus,
    count_statuses,
    has_backload,
    is_legacy_backload,
    is_third_party,
)
from planner.loads.timewindow import (
    Quantities,
    RegularBackload,
    Stop,
    ThirdPartyBackload,
    TimeWindow,
    parse_time_window,
)

__all__ = [
    "Load",
    "LoadStatus",
    "LOAD_STATUSES",
    "to_entity",
    "to_entities",
    "is_legacy_backload",
    "has_backload",
    "is_third_party",
    "count_statuses",
    "TimeWindow",
    "Stop",
    "Quantities",
    "RegularBackload",
    "ThirdPartyBackload",
    "parse_time_window",
    "TimeWindowError",
]
