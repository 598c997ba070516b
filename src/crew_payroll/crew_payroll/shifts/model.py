from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ShiftHours:
    """Worked and overtime hours for one shift, rounded to 2 decimals."""

    working_hours: float
    ot_hours: float
