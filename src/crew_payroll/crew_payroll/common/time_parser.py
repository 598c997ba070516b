"""Free-form time-of-day parsing.

Accepted inputs, tried in order (first match wins):

- ``HH:MM`` / ``H:MM`` as 24-hour time ("07:00", "21:15")
- ``H[:MM] AM|PM`` as 12-hour time ("7 AM", "7:30pm")
- a bare hour ``H`` / ``HH`` as 24-hour time ("7" -> 07:00)

Anything else, or an out-of-range hour/minute, parses to ``None``.
"""

from __future__ import annotations

import re
from typing import Optional

from ..core.constants import MINUTES_PER_DAY

_CLOCK_RE = re.compile(r"^(\d{1,2}):(\d{2})$", re.ASCII)
_AM_PM_RE = re.compile(r"^(\d{1,2})(?::(\d{2}))?\s*(AM|PM)$", re.ASCII)
_HOUR_RE = re.compile(r"^(\d{1,2})$", re.ASCII)


def _to_minutes(hours: int, minutes: int) -> Optional[int]:
    if hours < 24 and minutes < 60:
        return hours * 60 + minutes
    return None


def parse_time_to_minutes(text: Optional[str]) -> Optional[int]:
    """Return minutes since midnight in [0, 1440), or None if unparseable."""
    if text is None:
        return None
    normalized = str(text).strip().upper()

    m = _CLOCK_RE.match(normalized)
    if m:
        value = _to_minutes(int(m.group(1)), int(m.group(2)))
        if value is not None:
            return value

    m = _AM_PM_RE.match(normalized)
    if m:
        hours = int(m.group(1))
        minutes = int(m.group(2) or 0)
        if hours == 12:
            hours = 0
        if m.group(3) == "PM":
            hours += 12
        value = _to_minutes(hours, minutes)
        if value is not None:
            return value

    m = _HOUR_RE.match(normalized)
    if m:
        return _to_minutes(int(m.group(1)), 0)

    return None


def format_minutes_to_time(minutes: int) -> str:
    """Render minutes since midnight as zero-padded ``HH:MM``."""
    minutes = int(minutes) % MINUTES_PER_DAY
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
