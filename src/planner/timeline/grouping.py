from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Iterator

from ._exceptions import UnparsableDateEntity
from .entities import UNASSIGNED, ScheduledEntity, parse_entity_dates

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Grouping:
    order: list[str]
    by_resource: dict[str, list[ScheduledEntity]]
    rejected: list[UnparsableDateEntity] = field(default_factory=list)

    def __iter__(self) -> Iterator[tuple[str, list[ScheduledEntity]]]:
        for key in self.order:
            yield key, self.by_resource[key]


def resource_sort_key(key: str) -> tuple[bool, str]:
    # False sorts before True, so the Unassigned bucket always lands last.
    return key == UNASSIGNED, key


def group(entities: Iterable[ScheduledEntity]) -> Grouping:
    """
    Bucket entities by resource and order everything deterministically.

    Keys ascend by plain (case-sensitive) string comparison with
    ``"Unassigned"`` forced last.  Buckets are sorted by start date; the sort
    is stable, so equal starts keep their input order.
    """
    buckets: dict[str, list[tuple[date, ScheduledEntity]]] = {}
    rejected: list[UnparsableDateEntity] = []
    for entity in entities:
        try:
            start, _ = parse_entity_dates(entity)
        except UnparsableDateEntity as exc:
            logger.warning("Skipping entity while grouping: %s", exc)
            rejected.append(exc)
            continue
        buckets.setdefault(entity.bucket, []).append((start, entity))

    order = sorted(buckets, key=resource_sort_key)
    by_resource = {
        key: [e for _, e in sorted(buckets[key], key=lambda pair: pair[0])]
        for key in order
    }
    return Grouping(order=order, by_resource=by_resource, rejected=rejected)
