from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..entries.model import AttendanceEntry


@dataclass(frozen=True)
class MonthlyPayroll:
    """One worker's settlement for a month.

    ``final_payable`` may be negative when advances and deductions exceed
    salary plus overtime; it is reported as-is.
    """

    worker_id: int
    worker_name: str
    base_salary: float
    total_ot_pay: float
    leave_deduction: float
    total_advances: float
    final_payable: float
    rejected_leave_days: int = 0
    approved_leave_days: int = 0
    total_working_hours: float = 0.0
    total_ot_hours: float = 0.0

    @property
    def is_idle(self) -> bool:
        return self.final_payable <= 0 and self.total_ot_pay <= 0 and self.total_advances <= 0

    def to_dict(self) -> dict:
        return {
            "workerId": self.worker_id,
            "workerName": self.worker_name,
            "baseSalary": self.base_salary,
            "totalOtPay": self.total_ot_pay,
            "leaveDeduction": self.leave_deduction,
            "totalAdvances": self.total_advances,
            "finalPayable": self.final_payable,
            "rejectedLeaveDays": self.rejected_leave_days,
            "approvedLeaveDays": self.approved_leave_days,
            "totalWorkingHours": self.total_working_hours,
            "totalOtHours": self.total_ot_hours,
        }


@dataclass(frozen=True)
class WorkerMonthReport:
    payroll: MonthlyPayroll
    entries: list[AttendanceEntry] = field(default_factory=list)


@dataclass(frozen=True)
class TopOtWorker:
    worker_id: int
    name: str
    ot_hours: float
    trade: Optional[str] = None


@dataclass(frozen=True)
class DashboardStats:
    today_working_hours: float
    today_ot_hours: float
    today_present: int
    today_on_leave: int
    month_working_hours: float
    month_ot_hours: float
    worker_count: int
    top_ot_workers: list[TopOtWorker] = field(default_factory=list)
    last_7_days: list[DailyHours] = field(default_factory=list)


@dataclass(frozen=True)
class DailyHours:
    work_date: date
    hours: float
