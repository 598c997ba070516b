from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .constants import DEFAULT_BASE_HOURS, DEFAULT_BREAK_MINUTES
from .enums import OtRateBasis


@dataclass(frozen=True)
class AppSettings:
    """Entry-form defaults and pay rules, passed explicitly to services."""

    default_base_hours: float = DEFAULT_BASE_HOURS
    default_break_minutes: int = DEFAULT_BREAK_MINUTES
    ot_rate_basis: OtRateBasis = OtRateBasis.FIXED

    @classmethod
    def from_module(cls, settings: Any) -> "AppSettings":
        return cls(
            default_base_hours=float(getattr(settings, "DEFAULT_BASE_HOURS", DEFAULT_BASE_HOURS)),
            default_break_minutes=int(getattr(settings, "DEFAULT_BREAK_MINUTES", DEFAULT_BREAK_MINUTES)),
            ot_rate_basis=OtRateBasis(getattr(settings, "OT_RATE_BASIS", OtRateBasis.FIXED.value)),
        )
