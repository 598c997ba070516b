from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.constants import DAYS_PER_MONTH, DEFAULT_BASE_HOURS, OT_MULTIPLIER, OT_RATE_HOURS
from ..core.enums import WorkerStatus


@dataclass(frozen=True)
class Worker:
    """Domain entity: a crew member and their pay profile.

    Note: ``monthly_salary`` is the authoritative pay input; the rates below
    are derived, never stored.
    """

    worker_id: int
    name: str
    monthly_salary: float
    base_hours: float = DEFAULT_BASE_HOURS
    trade: Optional[str] = None
    status: WorkerStatus = WorkerStatus.ACTIVE
    created_at: Optional[datetime] = None

    @property
    def daily_rate(self) -> float:
        return self.monthly_salary / DAYS_PER_MONTH

    @property
    def hourly_rate(self) -> float:
        return self.daily_rate / OT_RATE_HOURS

    @property
    def ot_rate(self) -> float:
        return self.hourly_rate * OT_MULTIPLIER

    @property
    def is_active(self) -> bool:
        return self.status == WorkerStatus.ACTIVE

    def to_dict(self) -> dict:
        return {
            "id": self.worker_id,
            "name": self.name,
            "trade": self.trade,
            "baseHours": self.base_hours,
            "monthlySalary": self.monthly_salary,
            "status": self.status.value,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
