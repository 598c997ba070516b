from __future__ import annotations

from ...core.enums import OtRateBasis
from .base import PayrollCalculator
from .base_hours_calculator import BaseHoursPayrollCalculator
from .standard_calculator import StandardPayrollCalculator


def calculator_for(basis: OtRateBasis) -> PayrollCalculator:
    if basis == OtRateBasis.BASE_HOURS:
        return BaseHoursPayrollCalculator()
    return StandardPayrollCalculator()
