from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import WorkerStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Worker
from .repository import WorkerRepository

_COLUMNS = "worker_id, name, trade, base_hours, monthly_salary, status, created_at"


def _to_worker(row: dict) -> Worker:
    return Worker(
        worker_id=int(row["worker_id"]),
        name=row["name"],
        trade=row.get("trade"),
        base_hours=float(row["base_hours"]),
        monthly_salary=float(row["monthly_salary"]),
        status=WorkerStatus(row["status"]),
        created_at=row.get("created_at"),
    )


class MySQLWorkerRepository(WorkerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, worker_id: int) -> Optional[Worker]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM workers WHERE worker_id=%s", (worker_id,))
            row = fetchone(cur)
            return _to_worker(row) if row else None

    def list_all(self, *, status: Optional[WorkerStatus] = None) -> Sequence[Worker]:
        with db_cursor(self._conn_factory) as (_, cur):
            if status is None:
                cur.execute(f"SELECT {_COLUMNS} FROM workers ORDER BY name")
            else:
                cur.execute(f"SELECT {_COLUMNS} FROM workers WHERE status=%s ORDER BY name", (status.value,))
            return [_to_worker(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        name: str,
        trade: Optional[str],
        base_hours: float,
        monthly_salary: float,
        status: WorkerStatus,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO workers(name, trade, base_hours, monthly_salary, status)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (name, trade, base_hours, monthly_salary, status.value),
            )
            return int(cur.lastrowid)

    def update(
        self,
        *,
        worker_id: int,
        name: str,
        trade: Optional[str],
        base_hours: float,
        monthly_salary: float,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE workers
                SET name=%s, trade=%s, base_hours=%s, monthly_salary=%s
                WHERE worker_id=%s
                """,
                (name, trade, base_hours, monthly_salary, worker_id),
            )
            return cur.rowcount > 0

    def set_status(self, worker_id: int, *, status: WorkerStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE workers SET status=%s WHERE worker_id=%s", (status.value, worker_id))
            return cur.rowcount > 0

    def delete_by_id(self, worker_id: int) -> bool:
        # Entries keep their worker_id; there is no foreign key to cascade on.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM workers WHERE worker_id=%s", (worker_id,))
            return cur.rowcount > 0
