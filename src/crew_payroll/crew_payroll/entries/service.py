from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_max_length, require_non_negative
from ..core.constants import (
    DEFAULT_CHECK_IN,
    DEFAULT_CHECK_OUT,
    LEAVE_TIME_PLACEHOLDER,
    NOTES_MAX_LENGTH,
    TIME_TEXT_MAX_LENGTH,
)
from ..core.enums import EntryKind
from ..core.exceptions import NotFoundError, ValidationError
from ..core.settings import AppSettings
from ..payroll.calculator.base import PayrollCalculator
from ..payroll.calculator.factory import calculator_for
from ..shifts.calculator import calculate_hours
from ..sync.sheet_client import SheetSyncClient
from ..workers.model import Worker
from ..workers.repository import WorkerRepository
from .model import AttendanceEntry
from .repository import EntryRepository

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntryPreview:
    working_hours: float
    ot_hours: float
    ot_pay: float


@dataclass(frozen=True)
class EntrySuggestion:
    """Pre-filled form values for a worker and date.

    ``source`` is "existing" (that day's entry), "latest" (times from the
    worker's most recent working day) or "defaults".
    """

    check_in: str
    check_out: str
    break_minutes: int
    kind: EntryKind
    advance_payment: float
    notes: str
    source: str
    entry_id: Optional[int] = None


class EntryService:
    def __init__(
        self,
        entries: EntryRepository,
        workers: WorkerRepository,
        *,
        settings: Optional[AppSettings] = None,
        calculator: Optional[PayrollCalculator] = None,
        sync: Optional[SheetSyncClient] = None,
    ):
        self._entries = entries
        self._workers = workers
        self._settings = settings or AppSettings()
        self._calculator = calculator or calculator_for(self._settings.ot_rate_basis)
        self._sync = sync

    def _require_worker(self, worker_id: int) -> Worker:
        worker = self._workers.get_by_id(int(worker_id))
        if not worker:
            raise NotFoundError("Worker not found")
        return worker

    def preview(
        self,
        *,
        worker_id: int,
        check_in: str,
        check_out: str,
        break_minutes: int,
    ) -> Optional[EntryPreview]:
        worker = self._require_worker(worker_id)
        hours = calculate_hours(check_in, check_out, int(break_minutes or 0), worker.base_hours)
        if hours is None:
            return None
        return EntryPreview(
            working_hours=hours.working_hours,
            ot_hours=hours.ot_hours,
            ot_pay=self._calculator.ot_pay(hours.ot_hours, worker),
        )

    def save_entry(
        self,
        *,
        worker_id: int,
        work_date: date,
        check_in: str = "",
        check_out: str = "",
        break_minutes: Optional[int] = None,
        kind: EntryKind = EntryKind.NORMAL,
        advance_payment: float = 0.0,
        notes: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> AttendanceEntry:
        """Compute and store the entry for ``worker_id`` on ``work_date``.

        An existing entry for the same worker and date is overwritten. Pay
        fields come from the worker's current profile.
        """
        worker = self._require_worker(worker_id)
        advance_payment = float(require_non_negative(float(advance_payment or 0), "Advance payment"))
        notes = require_max_length((notes or "").strip() or None, "Notes", NOTES_MAX_LENGTH)

        if kind.is_leave:
            check_in = check_out = LEAVE_TIME_PLACEHOLDER
            break_minutes = 0
            working_hours = ot_hours = ot_pay = 0.0
        else:
            check_in = require_max_length((check_in or "").strip(), "Check-in", TIME_TEXT_MAX_LENGTH)
            check_out = require_max_length((check_out or "").strip(), "Check-out", TIME_TEXT_MAX_LENGTH)
            if break_minutes is None:
                break_minutes = self._settings.default_break_minutes
            break_minutes = int(require_non_negative(int(break_minutes), "Break minutes"))
            hours = calculate_hours(check_in, check_out, break_minutes, worker.base_hours)
            if hours is None:
                raise ValidationError("Invalid time format.")
            working_hours = hours.working_hours
            ot_hours = hours.ot_hours
            ot_pay = self._calculator.ot_pay(ot_hours, worker)

        existing = self._entries.get_for_worker_and_date(worker.worker_id, work_date)
        entry = AttendanceEntry(
            entry_id=existing.entry_id if existing else None,
            worker_id=worker.worker_id,
            work_date=work_date,
            check_in=check_in,
            check_out=check_out,
            break_minutes=break_minutes,
            working_hours=working_hours,
            ot_hours=ot_hours,
            ot_pay=ot_pay,
            kind=kind,
            advance_payment=advance_payment,
            notes=notes,
            updated_at=now or now_local(),
            sheet_id=existing.sheet_id if existing else None,
        )
        entry_id = self._entries.upsert(entry)
        _logger.info("Saved entry %s for worker %s on %s (%s)", entry_id, worker.worker_id, work_date, kind.value)

        if self._sync:
            sheet_id = self._sync.upsert_entry(entry)
            if sheet_id and sheet_id != entry.sheet_id:
                self._entries.set_sheet_id(entry_id, sheet_id)

        saved = self._entries.get_by_id(entry_id)
        if not saved:
            raise NotFoundError("Entry not found")
        return saved

    def suggest_defaults(self, *, worker_id: int, work_date: date) -> EntrySuggestion:
        worker = self._require_worker(worker_id)

        same_day = self._entries.get_for_worker_and_date(worker.worker_id, work_date)
        if same_day:
            return EntrySuggestion(
                check_in=same_day.check_in if not same_day.kind.is_leave else DEFAULT_CHECK_IN,
                check_out=same_day.check_out if not same_day.kind.is_leave else DEFAULT_CHECK_OUT,
                break_minutes=same_day.break_minutes
                if not same_day.kind.is_leave
                else self._settings.default_break_minutes,
                kind=same_day.kind,
                advance_payment=same_day.advance_payment,
                notes=same_day.notes or "",
                source="existing",
                entry_id=same_day.entry_id,
            )

        latest = self._entries.get_latest_normal_for_worker(worker.worker_id)
        if latest:
            return EntrySuggestion(
                check_in=latest.check_in,
                check_out=latest.check_out,
                break_minutes=latest.break_minutes,
                kind=EntryKind.NORMAL,
                advance_payment=0.0,
                notes="",
                source="latest",
            )

        return EntrySuggestion(
            check_in=DEFAULT_CHECK_IN,
            check_out=DEFAULT_CHECK_OUT,
            break_minutes=self._settings.default_break_minutes,
            kind=EntryKind.NORMAL,
            advance_payment=0.0,
            notes="",
            source="defaults",
        )

    def get_entry(self, entry_id: int) -> AttendanceEntry:
        entry = self._entries.get_by_id(int(entry_id))
        if not entry:
            raise NotFoundError("Entry not found")
        return entry

    def list_entries(self, *, start: date, end: date, worker_id: Optional[int] = None) -> Sequence[AttendanceEntry]:
        if end < start:
            raise ValidationError("End date must not be before start date")
        return self._entries.list_range(start=start, end=end, worker_id=worker_id)

    def delete_entry(self, entry_id: int) -> None:
        entry = self.get_entry(entry_id)
        self._entries.delete_by_id(entry.entry_id)
        _logger.info("Deleted entry %s", entry.entry_id)
        if self._sync and entry.sheet_id:
            self._sync.delete_entry(entry.sheet_id)

    def list_remote_entries(self, *, worker_id: Optional[int] = None) -> list[dict]:
        """Rows currently held by the sheet endpoint, optionally for one worker."""
        if not self._sync:
            raise ValidationError("Sheet sync is not configured")
        rows = self._sync.list_entries()
        if worker_id is None:
            return rows
        return [r for r in rows if str(r.get("workerId")) == str(worker_id)]
