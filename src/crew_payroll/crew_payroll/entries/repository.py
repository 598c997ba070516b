from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceEntry


class EntryRepository(Protocol):
    def get_by_id(self, entry_id: int) -> Optional[AttendanceEntry]:
        raise NotImplementedError

    def get_for_worker_and_date(self, worker_id: int, work_date: date) -> Optional[AttendanceEntry]:
        raise NotImplementedError

    def get_latest_normal_for_worker(self, worker_id: int) -> Optional[AttendanceEntry]:
        raise NotImplementedError

    def list_range(
        self,
        *,
        start: date,
        end: date,
        worker_id: Optional[int] = None,
    ) -> Sequence[AttendanceEntry]:
        """Entries with ``start <= work_date <= end``, oldest first."""

        raise NotImplementedError

    def upsert(self, entry: AttendanceEntry) -> int:
        """Insert, or overwrite the row with the same worker and date. Returns its id."""

        raise NotImplementedError

    def set_sheet_id(self, entry_id: int, sheet_id: str) -> bool:
        raise NotImplementedError

    def delete_by_id(self, entry_id: int) -> bool:
        raise NotImplementedError
