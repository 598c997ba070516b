from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_max_length, require_non_empty, require_non_negative, require_positive
from ..core.constants import NAME_MAX_LENGTH, TRADE_MAX_LENGTH
from ..core.enums import WorkerStatus
from ..core.exceptions import NotFoundError
from .model import Worker
from .repository import WorkerRepository

_logger = logging.getLogger(__name__)


def _clean_name(name: str) -> str:
    return require_max_length(require_non_empty(name, "Name"), "Name", NAME_MAX_LENGTH)


def _clean_trade(trade: Optional[str]) -> Optional[str]:
    return require_max_length((trade or "").strip() or None, "Trade", TRADE_MAX_LENGTH)


class WorkerService:
    def __init__(self, workers: WorkerRepository, *, default_base_hours: float = 10):
        self._workers = workers
        self._default_base_hours = default_base_hours

    def get_worker(self, worker_id: int) -> Worker:
        worker = self._workers.get_by_id(int(worker_id))
        if not worker:
            raise NotFoundError("Worker not found")
        return worker

    def list_workers(self, *, active_only: bool = False) -> Sequence[Worker]:
        return self._workers.list_all(status=WorkerStatus.ACTIVE if active_only else None)

    def create_worker(
        self,
        *,
        name: str,
        monthly_salary: float,
        base_hours: Optional[float] = None,
        trade: Optional[str] = None,
    ) -> Worker:
        name = _clean_name(name)
        monthly_salary = float(require_non_negative(monthly_salary, "Monthly salary"))
        if base_hours is None:
            base_hours = self._default_base_hours
        base_hours = float(require_positive(base_hours, "Base hours"))
        trade = _clean_trade(trade)

        worker_id = self._workers.create(
            name=name,
            trade=trade,
            base_hours=base_hours,
            monthly_salary=monthly_salary,
            status=WorkerStatus.ACTIVE,
        )
        _logger.info("Created worker %s (%s)", worker_id, name)
        return self.get_worker(worker_id)

    def update_worker(
        self,
        worker_id: int,
        *,
        name: str,
        monthly_salary: float,
        base_hours: float,
        trade: Optional[str] = None,
    ) -> Worker:
        self.get_worker(worker_id)
        self._workers.update(
            worker_id=int(worker_id),
            name=_clean_name(name),
            trade=_clean_trade(trade),
            base_hours=float(require_positive(base_hours, "Base hours")),
            monthly_salary=float(require_non_negative(monthly_salary, "Monthly salary")),
        )
        return self.get_worker(worker_id)

    def set_status(self, worker_id: int, status: WorkerStatus) -> Worker:
        self.get_worker(worker_id)
        self._workers.set_status(int(worker_id), status=status)
        return self.get_worker(worker_id)

    def delete_worker(self, worker_id: int) -> None:
        """Remove the worker; their attendance entries stay on record."""
        if not self._workers.delete_by_id(int(worker_id)):
            raise NotFoundError("Worker not found")
        _logger.info("Deleted worker %s, entries preserved", worker_id)
