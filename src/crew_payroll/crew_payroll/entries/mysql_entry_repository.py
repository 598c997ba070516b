from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import EntryKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceEntry
from .repository import EntryRepository

_COLUMNS = (
    "entry_id, worker_id, work_date, check_in, check_out, break_minutes, working_hours, "
    "ot_hours, ot_pay, kind, advance_payment, notes, updated_at, sheet_id"
)


def _to_entry(row: dict) -> AttendanceEntry:
    return AttendanceEntry(
        entry_id=int(row["entry_id"]),
        worker_id=int(row["worker_id"]),
        work_date=row["work_date"],
        check_in=row["check_in"],
        check_out=row["check_out"],
        break_minutes=int(row["break_minutes"] or 0),
        working_hours=float(row["working_hours"] or 0),
        ot_hours=float(row["ot_hours"] or 0),
        ot_pay=float(row["ot_pay"] or 0),
        kind=EntryKind(row["kind"]),
        advance_payment=float(row["advance_payment"] or 0),
        notes=row.get("notes"),
        updated_at=row.get("updated_at"),
        sheet_id=row.get("sheet_id"),
    )


class MySQLEntryRepository(EntryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, entry_id: int) -> Optional[AttendanceEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_entries WHERE entry_id=%s", (entry_id,))
            row = fetchone(cur)
            return _to_entry(row) if row else None

    def get_for_worker_and_date(self, worker_id: int, work_date: date) -> Optional[AttendanceEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_entries WHERE worker_id=%s AND work_date=%s",
                (worker_id, work_date),
            )
            row = fetchone(cur)
            return _to_entry(row) if row else None

    def get_latest_normal_for_worker(self, worker_id: int) -> Optional[AttendanceEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_entries
                WHERE worker_id=%s AND kind=%s
                ORDER BY updated_at DESC
                LIMIT 1
                """,
                (worker_id, EntryKind.NORMAL.value),
            )
            row = fetchone(cur)
            return _to_entry(row) if row else None

    def list_range(
        self,
        *,
        start: date,
        end: date,
        worker_id: Optional[int] = None,
    ) -> Sequence[AttendanceEntry]:
        sql = f"SELECT {_COLUMNS} FROM attendance_entries WHERE work_date BETWEEN %s AND %s"
        params: list = [start, end]
        if worker_id is not None:
            sql += " AND worker_id=%s"
            params.append(worker_id)
        sql += " ORDER BY work_date, worker_id"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_to_entry(r) for r in fetchall(cur)]

    def upsert(self, entry: AttendanceEntry) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_entries(
                    worker_id, work_date, check_in, check_out, break_minutes, working_hours,
                    ot_hours, ot_pay, kind, advance_payment, notes, updated_at
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    entry_id=LAST_INSERT_ID(entry_id),
                    check_in=VALUES(check_in),
                    check_out=VALUES(check_out),
                    break_minutes=VALUES(break_minutes),
                    working_hours=VALUES(working_hours),
                    ot_hours=VALUES(ot_hours),
                    ot_pay=VALUES(ot_pay),
                    kind=VALUES(kind),
                    advance_payment=VALUES(advance_payment),
                    notes=VALUES(notes),
                    updated_at=VALUES(updated_at)
                """,
                (
                    entry.worker_id,
                    entry.work_date,
                    entry.check_in,
                    entry.check_out,
                    entry.break_minutes,
                    entry.working_hours,
                    entry.ot_hours,
                    entry.ot_pay,
                    entry.kind.value,
                    entry.advance_payment,
                    entry.notes,
                    entry.updated_at,
                ),
            )
            return int(cur.lastrowid)

    def set_sheet_id(self, entry_id: int, sheet_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE attendance_entries SET sheet_id=%s WHERE entry_id=%s", (sheet_id, entry_id))
            return cur.rowcount > 0

    def delete_by_id(self, entry_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_entries WHERE entry_id=%s", (entry_id,))
            return cur.rowcount > 0
