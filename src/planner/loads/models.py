from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Literal, Optional, Union

from .timewindow import RegularBackload, ThirdPartyBackload, TimeWindow, parse_time_window

LoadStatus = Literal["scheduled", "in-transit", "pending", "delivered"]
LOAD_STATUSES: tuple[LoadStatus, ...] = ("scheduled", "in-transit", "pending", "delivered")

LEGACY_BACKLOAD_PREFIX = "BL-"
THIRD_PARTY_PREFIX = "TP-"


@dataclass(frozen=True, slots=True)
class Load:
    """A load record as supplied by the load store (read-only snapshot)."""

    id: str
    load_id: str
    loading_date: Union[date, str]
    offloading_date: Union[date, str]
    vehicle_id: Optional[str] = None
    status: LoadStatus = "scheduled"
    cargo_type: str = ""
    time_window: Optional[str] = None

    @property
    def times(self) -> TimeWindow:
        return parse_time_window(self.time_window)


def is_legacy_backload(load: Load) -> bool:
    """Backloads recorded as their own load before backloads were embedded."""
    return load.cargo_type == "Packaging" or load.load_id.startswith(LEGACY_BACKLOAD_PREFIX)


def has_backload(load: Load) -> bool:
    return isinstance(load.times.backload, RegularBackload)


def is_third_party(load: Load) -> bool:
    """Load hauled for another customer (``TP-`` id or a third-party link)."""
    return load.load_id.startswith(THIRD_PARTY_PREFIX) or isinstance(
        load.times.backload, ThirdPartyBackload
    )


def count_statuses(loads: Iterable[Load]) -> dict[LoadStatus, int]:
    """Per-status load counts; every status is present, unknown ones are ignored."""
    counts = Counter(load.status for load in loads)
    return {status: counts.get(status, 0) for status in LOAD_STATUSES}
