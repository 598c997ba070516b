from __future__ import annotations

from ...core.constants import OT_RATE_HOURS
from ...workers.model import Worker
from ..formula import compute_ot_pay
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: OT hourly rate = daily rate / 10, whatever the base hours."""

    def ot_pay(self, ot_hours: float, worker: Worker) -> float:
        return compute_ot_pay(ot_hours, worker.monthly_salary, rate_hours=OT_RATE_HOURS)
