from __future__ import annotations

from collections import defaultdict
from datetime import date, timedelta
from typing import Iterable, Optional

from ..common.datetime_utils import month_bounds
from ..core.constants import TOP_OT_WORKERS
from ..core.enums import EntryKind
from ..core.exceptions import NotFoundError
from ..entries.model import AttendanceEntry
from ..entries.repository import EntryRepository
from ..workers.repository import WorkerRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import DailyHours, DashboardStats, MonthlyPayroll, TopOtWorker, WorkerMonthReport


def _hours(entries: Iterable[AttendanceEntry]) -> tuple[float, float]:
    working = 0.0
    ot = 0.0
    for e in entries:
        working += e.working_hours or 0
        ot += e.ot_hours or 0
    return round(working, 2), round(ot, 2)


class PayrollReportService:
    def __init__(
        self,
        entries: EntryRepository,
        workers: WorkerRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._entries = entries
        self._workers = workers
        self._calculator = calculator or StandardPayrollCalculator()

    def monthly_report(self, *, year: int, month: int, include_idle: bool = False) -> list[MonthlyPayroll]:
        """Payroll for every worker with entries in the month.

        Workers with nothing to pay, no OT and no advances are left out
        unless ``include_idle`` is set.
        """
        start, end = month_bounds(year, month)
        by_worker: dict[int, list[AttendanceEntry]] = defaultdict(list)
        for e in self._entries.list_range(start=start, end=end):
            by_worker[e.worker_id].append(e)

        out: list[MonthlyPayroll] = []
        for w in self._workers.list_all():
            payroll = self._calculator.monthly(w, by_worker.get(w.worker_id, []))
            if include_idle or not payroll.is_idle:
                out.append(payroll)
        return out

    def worker_report(self, *, worker_id: int, year: int, month: int) -> WorkerMonthReport:
        worker = self._workers.get_by_id(int(worker_id))
        if not worker:
            raise NotFoundError("Worker not found")

        start, end = month_bounds(year, month)
        entries = list(self._entries.list_range(start=start, end=end, worker_id=worker.worker_id))
        return WorkerMonthReport(payroll=self._calculator.monthly(worker, entries), entries=entries)

    def dashboard(self, *, today: date) -> DashboardStats:
        workers = {w.worker_id: w for w in self._workers.list_all()}
        start, end = month_bounds(today.year, today.month)
        window_start = min(start, today - timedelta(days=6))
        recent = list(self._entries.list_range(start=window_start, end=end))

        month_entries = [e for e in recent if start <= e.work_date <= end]
        today_entries = [e for e in recent if e.work_date == today]
        today_working, today_ot = _hours(today_entries)
        month_working, month_ot = _hours(month_entries)

        ot_by_worker: dict[int, float] = defaultdict(float)
        for e in month_entries:
            if e.ot_hours > 0:
                ot_by_worker[e.worker_id] += e.ot_hours
        top = sorted(ot_by_worker.items(), key=lambda kv: kv[1], reverse=True)[:TOP_OT_WORKERS]

        last_7_days = []
        for offset in range(6, -1, -1):
            day = today - timedelta(days=offset)
            working, ot = _hours(e for e in recent if e.work_date == day)
            last_7_days.append(DailyHours(work_date=day, hours=round(working + ot, 1)))

        return DashboardStats(
            today_working_hours=today_working,
            today_ot_hours=today_ot,
            today_present=sum(1 for e in today_entries if e.kind == EntryKind.NORMAL),
            today_on_leave=sum(1 for e in today_entries if e.kind.is_leave),
            month_working_hours=month_working,
            month_ot_hours=month_ot,
            worker_count=len(workers),
            top_ot_workers=[
                TopOtWorker(
                    worker_id=worker_id,
                    name=workers[worker_id].name if worker_id in workers else "Unknown",
                    ot_hours=round(hours, 2),
                    trade=workers[worker_id].trade if worker_id in workers else None,
                )
                for worker_id, hours in top
            ],
            last_7_days=last_7_days,
        )
