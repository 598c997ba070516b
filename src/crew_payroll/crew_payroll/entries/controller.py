from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import month_bounds, parse_iso_date
from ..common.validators import optional_text
from ..core.enums import EntryKind
from ..core.exceptions import ValidationError
from ..container import Container
from .model import kind_from_flags


def _parse_date(value, field_name: str) -> date:
    try:
        return parse_iso_date(str(value))
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be YYYY-MM-DD")


def _parse_int(value, field_name: str):
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number")


def _parse_kind(data: dict) -> EntryKind:
    if data.get("kind"):
        try:
            return EntryKind(str(data["kind"]).upper())
        except ValueError:
            raise ValidationError("kind must be NORMAL, APPROVED_LEAVE or REJECTED_LEAVE")
    return kind_from_flags(
        is_approved_leave=bool(data.get("isApprovedLeave")),
        is_rejected_leave=bool(data.get("isRejectedLeave")),
    )


def register(app: Flask, container: Container) -> None:
    service = container.entry_service

    @app.route("/api/entries", methods=["GET"], endpoint="entries_list")
    def entries_list():
        today = date.today()
        default_start, default_end = month_bounds(today.year, today.month)
        start = _parse_date(request.args["start"], "start") if request.args.get("start") else default_start
        end = _parse_date(request.args["end"], "end") if request.args.get("end") else default_end
        worker_id = _parse_int(request.args.get("worker_id"), "worker_id")

        rows = service.list_entries(start=start, end=end, worker_id=worker_id)
        return jsonify([e.to_dict() for e in rows])

    @app.route("/api/entries", methods=["POST"], endpoint="entries_save")
    def entries_save():
        data = request.get_json(silent=True) or {}
        worker_id = _parse_int(data.get("workerId"), "workerId")
        if not worker_id:
            raise ValidationError("Please select a worker")

        try:
            advance = float(data.get("advancePayment") or 0)
        except (TypeError, ValueError):
            raise ValidationError("advancePayment must be a number")

        entry = service.save_entry(
            worker_id=worker_id,
            work_date=_parse_date(data.get("date") or date.today().strftime("%Y-%m-%d"), "date"),
            check_in=str(data.get("checkIn") or ""),
            check_out=str(data.get("checkOut") or ""),
            break_minutes=_parse_int(data.get("breakMinutes"), "breakMinutes"),
            kind=_parse_kind(data),
            advance_payment=advance,
            notes=optional_text(data.get("notes"), "notes"),
        )
        return jsonify(entry.to_dict()), 201

    @app.route("/api/entries/preview", methods=["POST"], endpoint="entries_preview")
    def entries_preview():
        data = request.get_json(silent=True) or {}
        worker_id = _parse_int(data.get("workerId"), "workerId")
        if not worker_id:
            raise ValidationError("Please select a worker")

        preview = service.preview(
            worker_id=worker_id,
            check_in=str(data.get("checkIn") or ""),
            check_out=str(data.get("checkOut") or ""),
            break_minutes=_parse_int(data.get("breakMinutes"), "breakMinutes") or 0,
        )
        if preview is None:
            raise ValidationError("Invalid time format.")
        return jsonify(
            {
                "workingHours": preview.working_hours,
                "otHours": preview.ot_hours,
                "otPay": preview.ot_pay,
            }
        )

    @app.route("/api/entries/suggest", methods=["GET"], endpoint="entries_suggest")
    def entries_suggest():
        worker_id = _parse_int(request.args.get("worker_id"), "worker_id")
        if not worker_id:
            raise ValidationError("Please select a worker")
        work_date = _parse_date(request.args.get("date") or date.today().strftime("%Y-%m-%d"), "date")

        s = service.suggest_defaults(worker_id=worker_id, work_date=work_date)
        return jsonify(
            {
                "id": s.entry_id,
                "checkIn": s.check_in,
                "checkOut": s.check_out,
                "breakMinutes": s.break_minutes,
                "kind": s.kind.value,
                "advancePayment": s.advance_payment,
                "notes": s.notes,
                "source": s.source,
            }
        )

    @app.route("/api/entries/remote", methods=["GET"], endpoint="entries_remote")
    def entries_remote():
        worker_id = _parse_int(request.args.get("worker_id"), "worker_id")
        return jsonify(service.list_remote_entries(worker_id=worker_id))

    @app.route("/api/entries/<int:entry_id>", methods=["GET"], endpoint="entries_get")
    def entries_get(entry_id: int):
        return jsonify(service.get_entry(entry_id).to_dict())

    @app.route("/api/entries/<int:entry_id>", methods=["DELETE"], endpoint="entries_delete")
    def entries_delete(entry_id: int):
        service.delete_entry(entry_id)
        return jsonify({"success": True})
