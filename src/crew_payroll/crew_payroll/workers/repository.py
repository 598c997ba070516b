from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import WorkerStatus
from .model import Worker


class WorkerRepository(Protocol):
    """Repository interface for Worker.

    Services depend on this interface, never on a concrete database.
    """

    def get_by_id(self, worker_id: int) -> Optional[Worker]:
        raise NotImplementedError

    def list_all(self, *, status: Optional[WorkerStatus] = None) -> Sequence[Worker]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        trade: Optional[str],
        base_hours: float,
        monthly_salary: float,
        status: WorkerStatus,
    ) -> int:
        raise NotImplementedError

    def update(
        self,
        *,
        worker_id: int,
        name: str,
        trade: Optional[str],
        base_hours: float,
        monthly_salary: float,
    ) -> bool:
        raise NotImplementedError

    def set_status(self, worker_id: int, *, status: WorkerStatus) -> bool:
        raise NotImplementedError

    def delete_by_id(self, worker_id: int) -> bool:
        raise NotImplementedError
