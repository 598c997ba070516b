from __future__ import annotations

from typing import Optional

from ..common.time_parser import parse_time_to_minutes
from ..core.constants import MINUTES_PER_DAY
from .model import ShiftHours


def calculate_hours(
    check_in: str,
    check_out: str,
    break_minutes: int,
    base_hours: float,
) -> Optional[ShiftHours]:
    """Worked/overtime hours for a shift, or None when a time does not parse.

    A check-out earlier than check-in is a shift crossing midnight. The break
    is always subtracted; working time never goes below zero.
    """
    in_min = parse_time_to_minutes(check_in)
    out_min = parse_time_to_minutes(check_out)
    if in_min is None or out_min is None:
        return None

    duration = out_min - in_min
    if duration < 0:
        duration += MINUTES_PER_DAY

    working_minutes = max(0, duration - int(break_minutes or 0))
    working_hours = round(working_minutes / 60, 2)
    ot_hours = round(max(0.0, working_hours - base_hours), 2)
    return ShiftHours(working_hours=working_hours, ot_hours=ot_hours)
