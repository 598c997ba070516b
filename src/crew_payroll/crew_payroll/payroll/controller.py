from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date, parse_month
from ..core.exceptions import ValidationError
from ..container import Container


def _month_arg() -> tuple[int, int]:
    value = request.args.get("month")
    if not value:
        today = date.today()
        return today.year, today.month
    try:
        return parse_month(value)
    except ValueError:
        raise ValidationError("month must be YYYY-MM")


def register(app: Flask, container: Container) -> None:
    service = container.payroll_report_service

    @app.route("/api/payroll/monthly", methods=["GET"], endpoint="payroll_monthly")
    def payroll_monthly():
        year, month = _month_arg()
        include_idle = request.args.get("all") in {"1", "true", "yes"}
        rows = service.monthly_report(year=year, month=month, include_idle=include_idle)
        return jsonify(
            {
                "month": f"{year:04d}-{month:02d}",
                "rows": [r.to_dict() for r in rows],
            }
        )

    @app.route("/api/payroll/workers/<int:worker_id>", methods=["GET"], endpoint="payroll_worker")
    def payroll_worker(worker_id: int):
        year, month = _month_arg()
        report = service.worker_report(worker_id=worker_id, year=year, month=month)
        return jsonify(
            {
                "month": f"{year:04d}-{month:02d}",
                "payroll": report.payroll.to_dict(),
                "entries": [e.to_dict() for e in report.entries],
            }
        )

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard():
        value = request.args.get("date")
        try:
            today = parse_iso_date(value) if value else date.today()
        except ValueError:
            raise ValidationError("date must be YYYY-MM-DD")

        stats = service.dashboard(today=today)
        return jsonify(
            {
                "todayWorking": stats.today_working_hours,
                "todayOT": stats.today_ot_hours,
                "todayPresent": stats.today_present,
                "todayOnLeave": stats.today_on_leave,
                "monthWorking": stats.month_working_hours,
                "monthOT": stats.month_ot_hours,
                "workerCount": stats.worker_count,
                "topOtWorkers": [
                    {"id": t.worker_id, "name": t.name, "otHours": t.ot_hours, "trade": t.trade}
                    for t in stats.top_ot_workers
                ],
                "last7Days": [
                    {"date": d.work_date.strftime("%Y-%m-%d"), "hours": d.hours} for d in stats.last_7_days
                ],
            }
        )
