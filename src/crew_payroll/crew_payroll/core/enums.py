from __future__ import annotations

from enum import Enum


class WorkerStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class EntryKind(str, Enum):
    """Classification of a day's entry. Exactly one applies."""

    NORMAL = "NORMAL"
    APPROVED_LEAVE = "APPROVED_LEAVE"
    REJECTED_LEAVE = "REJECTED_LEAVE"

    @property
    def is_leave(self) -> bool:
        return self is not EntryKind.NORMAL


class OtRateBasis(str, Enum):
    """Which hour count the overtime hourly rate is derived from."""

    FIXED = "fixed"
    BASE_HOURS = "base_hours"
