from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import EntryKind
from ..core.exceptions import ValidationError


def kind_from_flags(*, is_approved_leave: bool = False, is_rejected_leave: bool = False) -> EntryKind:
    """Map the two legacy leave flags onto a single kind."""
    if is_approved_leave and is_rejected_leave:
        raise ValidationError("An entry cannot be both approved and rejected leave")
    if is_approved_leave:
        return EntryKind.APPROVED_LEAVE
    if is_rejected_leave:
        return EntryKind.REJECTED_LEAVE
    return EntryKind.NORMAL


@dataclass(frozen=True)
class AttendanceEntry:
    """Domain entity: one worker's attendance for one calendar date.

    ``working_hours``, ``ot_hours`` and ``ot_pay`` are computed on save and
    persisted for display; they are zero for either kind of leave.
    """

    entry_id: Optional[int]
    worker_id: int
    work_date: date
    check_in: str
    check_out: str
    break_minutes: int
    working_hours: float
    ot_hours: float
    ot_pay: float
    kind: EntryKind = EntryKind.NORMAL
    advance_payment: float = 0.0
    notes: Optional[str] = None
    updated_at: Optional[datetime] = None
    sheet_id: Optional[str] = None

    @property
    def is_approved_leave(self) -> bool:
        return self.kind == EntryKind.APPROVED_LEAVE

    @property
    def is_rejected_leave(self) -> bool:
        return self.kind == EntryKind.REJECTED_LEAVE

    def to_dict(self) -> dict:
        return {
            "id": self.entry_id,
            "workerId": self.worker_id,
            "date": self.work_date.strftime("%Y-%m-%d"),
            "checkIn": self.check_in,
            "checkOut": self.check_out,
            "breakMinutes": self.break_minutes,
            "workingHours": self.working_hours,
            "otHours": self.ot_hours,
            "otPay": self.ot_pay,
            "kind": self.kind.value,
            "isApprovedLeave": self.is_approved_leave,
            "isRejectedLeave": self.is_rejected_leave,
            "advancePayment": self.advance_payment,
            "notes": self.notes or "",
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def to_sheet_payload(self) -> dict:
        """Row shape expected by the spreadsheet endpoint."""
        payload = {
            "date": self.work_date.strftime("%Y-%m-%d"),
            "workerId": self.worker_id,
            "checkIn": self.check_in,
            "checkOut": self.check_out,
            "breakMinutes": self.break_minutes,
            "workingHours": self.working_hours,
            "otHours": self.ot_hours,
            "otPay": self.ot_pay,
            "isRejectedLeave": self.is_rejected_leave,
            "isApprovedLeave": self.is_approved_leave,
            "advancePayment": self.advance_payment,
            "notes": self.notes or "",
            "updatedAt": int(self.updated_at.timestamp() * 1000) if self.updated_at else 0,
        }
        if self.sheet_id:
            payload["id"] = self.sheet_id
        return payload
