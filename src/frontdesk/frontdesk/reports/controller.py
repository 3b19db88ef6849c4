from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..container import Container
from ..core.constants import API_PREFIX
from ..core.enums import DatasetKind
from .service import format_minutes

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    reports = container.report_service

    @app.route(f"{API_PREFIX}/stats", methods=["GET"], endpoint="stats")
    def stats():
        try:
            s = reports.dashboard_stats()
            return jsonify({"volunteers": s.volunteers, "guests": s.guests, "employees": s.employees})
        except Exception:
            logger.exception("Failed to fetch stats")
            return jsonify({"message": "Failed to fetch stats"}), 500

    @app.route(f"{API_PREFIX}/employees/status/today", methods=["GET"], endpoint="employee_status_today")
    def employee_status_today():
        try:
            rows = reports.employee_day_statuses()
            return jsonify(
                [
                    {
                        "employeeId": r.employee_id,
                        "name": r.name,
                        "role": r.role,
                        "status": r.status.value,
                        "workedMinutes": r.worked_minutes,
                        "workedHours": format_minutes(r.worked_minutes),
                    }
                    for r in rows
                ]
            )
        except Exception:
            logger.exception("Failed to fetch employee status")
            return jsonify({"message": "Failed to fetch employee status"}), 500

    @app.route(f"{API_PREFIX}/volunteers/hours/today", methods=["GET"], endpoint="volunteer_hours_today")
    def volunteer_hours_today():
        try:
            rows = reports.volunteer_day_hours()
            return jsonify(
                [
                    {
                        "volunteerId": r.volunteer_id,
                        "name": r.name,
                        "role": r.role,
                        "isCheckedIn": r.is_checked_in,
                        "workedMinutes": r.worked_minutes,
                        "workedHours": format_minutes(r.worked_minutes),
                    }
                    for r in rows
                ]
            )
        except Exception:
            logger.exception("Failed to fetch volunteer hours")
            return jsonify({"message": "Failed to fetch volunteer hours"}), 500

    @app.route(f"{API_PREFIX}/export/<dataset>", methods=["GET"], endpoint="export_csv")
    def export_csv(dataset: str):
        try:
            kind = DatasetKind(dataset)
        except ValueError:
            return jsonify({"message": "Unknown export"}), 404

        try:
            data = reports.export_csv(kind)
        except Exception:
            logger.exception("Failed to export %s", dataset)
            return jsonify({"message": f"Failed to export {dataset}"}), 500

        return app.response_class(
            data.content.encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={data.filename}"},
        )
