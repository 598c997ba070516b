from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from ...entries.model import AttendanceEntry
from ...workers.model import Worker
from ..formula import compute_monthly_payroll
from ..model import MonthlyPayroll


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def ot_pay(self, ot_hours: float, worker: Worker) -> float:
        raise NotImplementedError

    def monthly(self, worker: Worker, entries: Iterable[AttendanceEntry]) -> MonthlyPayroll:
        return compute_monthly_payroll(worker, entries)
