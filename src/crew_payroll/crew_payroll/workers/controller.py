from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import optional_text
from ..core.enums import WorkerStatus
from ..core.exceptions import ValidationError
from ..container import Container


def _number(data: dict, key: str, default=None):
    value = data.get(key, default)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{key} must be a number")


def register(app: Flask, container: Container) -> None:
    service = container.worker_service

    @app.route("/api/workers", methods=["GET"], endpoint="workers_list")
    def workers_list():
        active_only = request.args.get("active") in {"1", "true", "yes"}
        return jsonify([w.to_dict() for w in service.list_workers(active_only=active_only)])

    @app.route("/api/workers", methods=["POST"], endpoint="workers_create")
    def workers_create():
        data = request.get_json(silent=True) or {}
        worker = service.create_worker(
            name=optional_text(data.get("name"), "name") or "",
            monthly_salary=_number(data, "monthlySalary", 0.0),
            base_hours=_number(data, "baseHours"),
            trade=optional_text(data.get("trade"), "trade"),
        )
        return jsonify(worker.to_dict()), 201

    @app.route("/api/workers/<int:worker_id>", methods=["GET"], endpoint="workers_get")
    def workers_get(worker_id: int):
        return jsonify(service.get_worker(worker_id).to_dict())

    @app.route("/api/workers/<int:worker_id>", methods=["PUT"], endpoint="workers_update")
    def workers_update(worker_id: int):
        data = request.get_json(silent=True) or {}
        current = service.get_worker(worker_id)
        worker = service.update_worker(
            worker_id,
            name=optional_text(data.get("name", current.name), "name") or "",
            monthly_salary=_number(data, "monthlySalary", current.monthly_salary),
            base_hours=_number(data, "baseHours", current.base_hours),
            trade=optional_text(data.get("trade", current.trade), "trade"),
        )
        return jsonify(worker.to_dict())

    @app.route("/api/workers/<int:worker_id>/status", methods=["POST"], endpoint="workers_status")
    def workers_status(worker_id: int):
        data = request.get_json(silent=True) or {}
        try:
            status = WorkerStatus(str(data.get("status") or "").upper())
        except ValueError:
            raise ValidationError("status must be ACTIVE or INACTIVE")
        return jsonify(service.set_status(worker_id, status).to_dict())

    @app.route("/api/workers/<int:worker_id>", methods=["DELETE"], endpoint="workers_delete")
    def workers_delete(worker_id: int):
        service.delete_worker(worker_id)
        return jsonify({"success": True, "message": "Worker deleted, attendance logs preserved"})
