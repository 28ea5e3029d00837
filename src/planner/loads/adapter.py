from __future__ import annotations

from typing import Iterable

from planner.timeline.entities import ScheduledEntity

from .models import Load


def to_entity(load: Load) -> ScheduledEntity:
    """Board entity for ``load``: its truck, loading and offloading dates."""
    return ScheduledEntity(
        id=load.id,
        resource_key=load.vehicle_id or None,
        start_date=load.loading_date,
        end_date=load.offloading_date,
        payload=load,
    )


def to_entities(loads: Iterable[Load]) -> list[ScheduledEntity]:
    return [to_entity(load) for load in loads]
