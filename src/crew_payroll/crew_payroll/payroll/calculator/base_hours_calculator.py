from __future__ import annotations

from ...workers.model import Worker
from ..formula import compute_ot_pay
from .base import PayrollCalculator


class BaseHoursPayrollCalculator(PayrollCalculator):
    """OT hourly rate = daily rate / the worker's own base hours.

    Keeps the pay rate consistent with the threshold overtime is measured from.
    """

    def ot_pay(self, ot_hours: float, worker: Worker) -> float:
        return compute_ot_pay(ot_hours, worker.monthly_salary, rate_hours=worker.base_hours)
