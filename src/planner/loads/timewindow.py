"""
Typed model of a load's time-window metadata.

The load store keeps one JSON document per load::

    {
      "origin":      {"placeName": ..., "plannedArrival": "08:00", ...},
      "destination": {...},
      "backload":    {"enabled": true, "destination": "BV", ...},   # optional
      "thirdParty":  {"customerId": ..., "linkedLoadId": ...}       # optional
    }

``parse_time_window`` turns it into a :class:`TimeWindow` whose ``backload`` is
either ``None``, a :class:`RegularBackload` or a :class:`ThirdPartyBackload`.
Wrong-typed fields raise :class:`TimeWindowError` instead of being defaulted.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from ._exceptions import TimeWindowError


@dataclass(frozen=True, slots=True)
class Stop:
    place_name: str = ""
    address: str = ""
    planned_arrival: str = ""
    planned_departure: str = ""
    actual_arrival: str = ""
    actual_departure: str = ""


@dataclass(frozen=True, slots=True)
class Quantities:
    bins: int = 0
    crates: int = 0
    pallets: int = 0


@dataclass(frozen=True, slots=True)
class RegularBackload:
    """Return trip carried by the same truck after offloading."""

    destination: str
    cargo_type: str
    offloading_date: str
    quantities: Quantities = field(default_factory=Quantities)
    notes: str = ""


@dataclass(frozen=True, slots=True)
class ThirdPartyBackload:
    """Load hauled for another customer, linked to the load it returns from."""

    customer_id: str
    customer_name: str
    linked_load_id: str


Backload = Union[RegularBackload, ThirdPartyBackload]


@dataclass(frozen=True, slots=True)
class TimeWindow:
    origin: Stop = field(default_factory=Stop)
    destination: Stop = field(default_factory=Stop)
    backload: Optional[Backload] = None

    def to_json(self) -> str:
        doc: dict[str, Any] = {
            "origin": _dump_stop(self.origin),
            "destination": _dump_stop(self.destination),
        }
        if isinstance(self.backload, RegularBackload):
            b = self.backload
            doc["backload"] = {
                "enabled": True,
                "destination": b.destination,
                "cargoType": b.cargo_type,
                "offloadingDate": b.offloading_date,
                "quantities": {
                    "bins": b.quantities.bins,
                    "crates": b.quantities.crates,
                    "pallets": b.quantities.pallets,
                },
                "notes": b.notes,
            }
        elif isinstance(self.backload, ThirdPartyBackload):
            t = self.backload
            doc["thirdParty"] = {
                "customerId": t.customer_id,
                "customerName": t.customer_name,
                "linkedLoadId": t.linked_load_id,
            }
        return json.dumps(doc)


_STOP_KEYS = {
    "place_name": "placeName",
    "address": "address",
    "planned_arrival": "plannedArrival",
    "planned_departure": "plannedDeparture",
    "actual_arrival": "actualArrival",
    "actual_departure": "actualDeparture",
}


def _dump_stop(stop: Stop) -> dict[str, str]:
    return {key: getattr(stop, attr) for attr, key in _STOP_KEYS.items()}


def _object(doc: Mapping[str, Any], key: str) -> Optional[Mapping[str, Any]]:
    value = doc.get(key)
    if value is None:
        return None
    if not isinstance(value, dict):
        raise TimeWindowError(f"{key!r} must be an object, got {type(value).__name__}")
    return value


def _str(doc: Mapping[str, Any], key: str, where: str) -> str:
    value = doc.get(key, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TimeWindowError(f"{where}.{key} must be a string, got {type(value).__name__}")
    return value


def _int(doc: Mapping[str, Any], key: str, where: str) -> int:
    value = doc.get(key, 0)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TimeWindowError(f"{where}.{key} must be a whole number, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise TimeWindowError(f"{where}.{key} must be a whole number, got {value!r}")
    return int(value)


def _parse_stop(doc: Mapping[str, Any], key: str) -> Stop:
    raw = _object(doc, key)
    if raw is None:
        return Stop()
    return Stop(**{attr: _str(raw, k, key) for attr, k in _STOP_KEYS.items()})


def _parse_regular(raw: Mapping[str, Any]) -> Optional[RegularBackload]:
    if raw.get("enabled") is not True:
        return None
    quantities = _object(raw, "quantities") or {}
    return RegularBackload(
        destination=_str(raw, "destination", "backload"),
        cargo_type=_str(raw, "cargoType", "backload"),
        offloading_date=_str(raw, "offloadingDate", "backload"),
        quantities=Quantities(
            bins=_int(quantities, "bins", "backload.quantities"),
            crates=_int(quantities, "crates", "backload.quantities"),
            pallets=_int(quantities, "pallets", "backload.quantities"),
        ),
        notes=_str(raw, "notes", "backload"),
    )


def _parse_third_party(raw: Mapping[str, Any]) -> Optional[ThirdPartyBackload]:
    linked = _str(raw, "linkedLoadId", "thirdParty")
    if not linked:
        return None
    return ThirdPartyBackload(
        customer_id=_str(raw, "customerId", "thirdParty"),
        customer_name=_str(raw, "customerName", "thirdParty"),
        linked_load_id=linked,
    )


def parse_time_window(raw: Optional[str]) -> TimeWindow:
    """
    Decode the stored JSON document.

    ``None`` or a blank string yields an empty :class:`TimeWindow`.  An enabled
    ``backload`` wins over ``thirdParty`` when a document carries both.
    """
    if raw is None or not raw.strip():
        return TimeWindow()
    try:
        doc = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise TimeWindowError(f"time window is not valid JSON: {exc.msg}") from exc
    if not isinstance(doc, dict):
        raise TimeWindowError(f"time window must be a JSON object, got {type(doc).__name__}")

    backload: Optional[Backload] = None
    regular = _object(doc, "backload")
    if regular is not None:
        backload = _parse_regular(regular)
    if backload is None:
        third_party = _object(doc, "thirdParty")
        if third_party is not None:
            backload = _parse_third_party(third_party)

    return TimeWindow(
        origin=_parse_stop(doc, "origin"),
        destination=_parse_stop(doc, "destination"),
        backload=backload,
    )
