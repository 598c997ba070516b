"""Pay formulas shared by all payroll calculators.

Everything here is a pure function of its arguments: the caller resolves
the worker and filters entries to the month before calling.
"""

from __future__ import annotations

from typing import Iterable

from ..core.constants import DAYS_PER_MONTH, MONEY_DECIMALS, OT_MULTIPLIER, OT_RATE_HOURS
from ..core.enums import EntryKind
from ..entries.model import AttendanceEntry
from ..workers.model import Worker
from .model import MonthlyPayroll


def _money(value: float) -> float:
    return round(value, MONEY_DECIMALS)


def compute_ot_pay(ot_hours: float, monthly_salary: float, *, rate_hours: float = OT_RATE_HOURS) -> float:
    """Overtime pay: ot_hours x (salary / 30 / rate_hours) x 1.5."""
    hourly_rate = monthly_salary / DAYS_PER_MONTH / rate_hours
    return _money(ot_hours * hourly_rate * OT_MULTIPLIER)


def compute_monthly_payroll(worker: Worker, entries: Iterable[AttendanceEntry]) -> MonthlyPayroll:
    """final = salary + OT pay - rejected leave days x daily rate - advances."""
    total_ot_pay = 0.0
    total_advances = 0.0
    working_hours = 0.0
    ot_hours = 0.0
    rejected = 0
    approved = 0

    for e in entries:
        # Advances count on any day, leave or not.
        total_advances += e.advance_payment or 0
        if e.kind == EntryKind.REJECTED_LEAVE:
            rejected += 1
        elif e.kind == EntryKind.APPROVED_LEAVE:
            approved += 1
        else:
            total_ot_pay += e.ot_pay or 0
            working_hours += e.working_hours or 0
            ot_hours += e.ot_hours or 0

    leave_deduction = rejected * (worker.monthly_salary / DAYS_PER_MONTH)
    final_payable = worker.monthly_salary + total_ot_pay - leave_deduction - total_advances

    return MonthlyPayroll(
        worker_id=worker.worker_id,
        worker_name=worker.name,
        base_salary=_money(worker.monthly_salary),
        total_ot_pay=_money(total_ot_pay),
        leave_deduction=_money(leave_deduction),
        total_advances=_money(total_advances),
        final_payable=_money(final_payable),
        rejected_leave_days=rejected,
        approved_leave_days=approved,
        total_working_hours=round(working_hours, 2),
        total_ot_hours=round(ot_hours, 2),
    )
