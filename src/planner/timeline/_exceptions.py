from __future__ import annotations


class TimelineError(Exception):
    """Base class for all timeline errors."""


class UnparsableDateEntity(TimelineError, ValueError):
    """
    An entity whose start/end dates cannot be read.

    Never raised out of the board pipeline: such entities are excluded and the
    exception instance is handed back to the caller as a data-quality report.
    """

    def __init__(self, entity_id: str, reason: str) -> None:
        super().__init__(f"Entity {entity_id!r} has unusable dates: {reason}")
        self.entity_id = entity_id
        self.reason = reason

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnparsableDateEntity):
            return NotImplemented
        return (self.entity_id, self.reason) == (other.entity_id, other.reason)

    def __hash__(self) -> int:
        return hash((self.entity_id, self.reason))


class OutOfWindowEntity(TimelineError):
    """An entity reached geometry projection without intersecting the window."""

    def __init__(self, entity_id: str, window: object) -> None:
        super().__init__(f"Entity {entity_id!r} does not intersect {window!r}")
        self.entity_id = entity_id
        self.window = window
