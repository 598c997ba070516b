from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

from src.crew_payroll.crew_payroll.core.enums import EntryKind, WorkerStatus
from src.crew_payroll.crew_payroll.entries.model import AttendanceEntry
from src.crew_payroll.crew_payroll.workers.model import Worker


def make_worker(worker_id: int = 1, *, salary: float = 30000, base_hours: float = 10, name: str = "Ravi", **kw) -> Worker:
    return Worker(worker_id=worker_id, name=name, monthly_salary=salary, base_hours=base_hours, **kw)


def make_entry(
    work_date: date,
    *,
    worker_id: int = 1,
    kind: EntryKind = EntryKind.NORMAL,
    working_hours: float = 9.0,
    ot_hours: float = 0.0,
    ot_pay: float = 0.0,
    advance: float = 0.0,
    entry_id: Optional[int] = None,
    updated_at: Optional[datetime] = None,
) -> AttendanceEntry:
    leave = kind != EntryKind.NORMAL
    return AttendanceEntry(
        entry_id=entry_id,
        worker_id=worker_id,
        work_date=work_date,
        check_in="--" if leave else "08:00",
        check_out="--" if leave else "18:00",
        break_minutes=0 if leave else 60,
        working_hours=0.0 if leave else working_hours,
        ot_hours=0.0 if leave else ot_hours,
        ot_pay=0.0 if leave else ot_pay,
        kind=kind,
        advance_payment=advance,
        updated_at=updated_at or datetime.combine(work_date, datetime.min.time()),
    )


class InMemoryWorkers:
    def __init__(self, *workers: Worker):
        self._rows: dict[int, Worker] = {w.worker_id: w for w in workers}
        self._next_id = max(self._rows, default=0) + 1

    def get_by_id(self, worker_id):
        return self._rows.get(int(worker_id))

    def list_all(self, *, status=None):
        rows = sorted(self._rows.values(), key=lambda w: w.name)
        return [w for w in rows if status is None or w.status == status]

    def create(self, *, name, trade, base_hours, monthly_salary, status):
        worker_id = self._next_id
        self._next_id += 1
        self._rows[worker_id] = Worker(
            worker_id=worker_id,
            name=name,
            trade=trade,
            base_hours=base_hours,
            monthly_salary=monthly_salary,
            status=status,
            created_at=datetime(2026, 3, 1, 9, 0),
        )
        return worker_id

    def update(self, *, worker_id, name, trade, base_hours, monthly_salary):
        current = self._rows.get(int(worker_id))
        if not current:
            return False
        self._rows[int(worker_id)] = replace(
            current, name=name, trade=trade, base_hours=base_hours, monthly_salary=monthly_salary
        )
        return True

    def set_status(self, worker_id, *, status: WorkerStatus):
        current = self._rows.get(int(worker_id))
        if not current:
            return False
        self._rows[int(worker_id)] = replace(current, status=status)
        return True

    def delete_by_id(self, worker_id):
        return self._rows.pop(int(worker_id), None) is not None


class InMemoryEntries:
    def __init__(self, *entries: AttendanceEntry):
        self._rows: dict[int, AttendanceEntry] = {}
        self._next_id = 1
        for e in entries:
            self.upsert(e)

    def get_by_id(self, entry_id):
        return self._rows.get(int(entry_id))

    def get_for_worker_and_date(self, worker_id, work_date):
        for e in self._rows.values():
            if e.worker_id == worker_id and e.work_date == work_date:
                return e
        return None

    def get_latest_normal_for_worker(self, worker_id):
        rows = [e for e in self._rows.values() if e.worker_id == worker_id and e.kind == EntryKind.NORMAL]
        return max(rows, key=lambda e: e.updated_at, default=None)

    def list_range(self, *, start, end, worker_id=None):
        rows = [
            e
            for e in self._rows.values()
            if start <= e.work_date <= end and (worker_id is None or e.worker_id == worker_id)
        ]
        return sorted(rows, key=lambda e: (e.work_date, e.worker_id))

    def upsert(self, entry):
        existing = self.get_for_worker_and_date(entry.worker_id, entry.work_date)
        if existing:
            entry_id = existing.entry_id
        else:
            entry_id = self._next_id
            self._next_id += 1
        self._rows[entry_id] = replace(entry, entry_id=entry_id, sheet_id=existing.sheet_id if existing else entry.sheet_id)
        return entry_id

    def set_sheet_id(self, entry_id, sheet_id):
        current = self._rows.get(int(entry_id))
        if not current:
            return False
        self._rows[int(entry_id)] = replace(current, sheet_id=sheet_id)
        return True

    def delete_by_id(self, entry_id):
        return self._rows.pop(int(entry_id), None) is not None

    def all(self):
        return list(self._rows.values())


class FakeSync:
    def __init__(self):
        self.upserted: list[AttendanceEntry] = []
        self.deleted: list[str] = []

    def upsert_entry(self, entry):
        self.upserted.append(entry)
        return entry.sheet_id or f"row-{len(self.upserted)}"

    def delete_entry(self, sheet_id):
        self.deleted.append(sheet_id)

    def list_entries(self):
        return [e.to_sheet_payload() for e in self.upserted]
