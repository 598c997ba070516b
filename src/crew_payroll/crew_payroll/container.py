from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.settings import AppSettings
from .database.connection import DatabaseConnection, DBConfig
from .entries.mysql_entry_repository import MySQLEntryRepository
from .entries.repository import EntryRepository
from .entries.service import EntryService
from .payroll.calculator.factory import calculator_for
from .payroll.service import PayrollReportService
from .sync.sheet_client import SheetSyncClient
from .workers.mysql_worker_repository import MySQLWorkerRepository
from .workers.repository import WorkerRepository
from .workers.service import WorkerService


@dataclass(frozen=True)
class Container:
    settings: AppSettings

    workers_repo: WorkerRepository
    entries_repo: EntryRepository
    sheet_client: Optional[SheetSyncClient]

    worker_service: WorkerService
    entry_service: EntryService
    payroll_report_service: PayrollReportService

    conn: Optional[DatabaseConnection] = None


def wire(
    *,
    workers_repo: WorkerRepository,
    entries_repo: EntryRepository,
    settings: Optional[AppSettings] = None,
    sheet_client: Optional[SheetSyncClient] = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    settings = settings or AppSettings()
    calculator = calculator_for(settings.ot_rate_basis)

    return Container(
        settings=settings,
        workers_repo=workers_repo,
        entries_repo=entries_repo,
        sheet_client=sheet_client,
        worker_service=WorkerService(workers_repo, default_base_hours=settings.default_base_hours),
        entry_service=EntryService(
            entries_repo,
            workers_repo,
            settings=settings,
            calculator=calculator,
            sync=sheet_client,
        ),
        payroll_report_service=PayrollReportService(entries_repo, workers_repo, calculator=calculator),
        conn=conn,
    )


def build_container(
    *,
    db_config: dict,
    settings: Optional[AppSettings] = None,
    sheet_url: str = "",
    sheet_timeout: float = 15.0,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return wire(
        workers_repo=MySQLWorkerRepository(conn),
        entries_repo=MySQLEntryRepository(conn),
        settings=settings,
        sheet_client=SheetSyncClient(sheet_url, timeout=sheet_timeout) if sheet_url else None,
        conn=conn,
    )
