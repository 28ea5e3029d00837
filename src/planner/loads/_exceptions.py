from __future__ import annotations


class TimeWindowError(ValueError):
    """Raised when a load's time-window metadata cannot be decoded."""
