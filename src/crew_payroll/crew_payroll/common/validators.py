from __future__ import annotations

import math
from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_finite(value: float, field_name: str) -> float:
    if value is None or not math.isfinite(value):
        raise ValidationError(f"{field_name} must be a finite number")
    return value


def require_non_negative(value: float, field_name: str) -> float:
    if require_finite(value, field_name) < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return value


def require_positive(value: float, field_name: str) -> float:
    if require_finite(value, field_name) <= 0:
        raise ValidationError(f"{field_name} must be greater than zero")
    return value


def require_max_length(value: Optional[str], field_name: str, max_len: int) -> Optional[str]:
    if value is not None and len(value) > max_len:
        raise ValidationError(f"{field_name} must be at most {max_len} characters")
    return value


def optional_text(value, field_name: str) -> Optional[str]:
    """Accept a JSON string or null; anything else is a validation error."""
    if value is None or isinstance(value, str):
        return value
    raise ValidationError(f"{field_name} must be text")
