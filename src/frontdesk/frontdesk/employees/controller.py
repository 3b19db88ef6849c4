from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import to_iso
from ..common.validators import require_mapping
from ..container import Container
from ..core.constants import API_PREFIX
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee, EmployeeLog

logger = logging.getLogger(__name__)


def employee_json(e: Employee) -> dict:
    return {
        "id": e.id,
        "name": e.name,
        "role": e.role,
        "isActive": bool(e.is_active),
        "createdAt": to_iso(e.created_at),
    }


def employee_log_json(log: EmployeeLog) -> dict:
    return {
        "id": log.id,
        "employeeId": log.employee_id,
        "action": log.action.value,
        "timestamp": to_iso(log.timestamp),
    }


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route(f"{API_PREFIX}/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        try:
            return jsonify([employee_json(e) for e in service.list_employees()])
        except Exception:
            logger.exception("Failed to fetch employees")
            return jsonify({"message": "Failed to fetch employees"}), 500

    @app.route(f"{API_PREFIX}/employees", methods=["POST"], endpoint="create_employee")
    def create_employee():
        try:
            data = require_mapping(request.get_json(silent=True))
            employee = service.create_employee(
                name=data.get("name"),
                role=data.get("role"),
                is_active=data.get("isActive"),
            )
            return jsonify(employee_json(employee))
        except ValidationError as e:
            logger.info("Rejected employee payload: %s", e)
            return jsonify({"message": "Invalid employee data"}), 400
        except Exception:
            logger.exception("Failed to create employee")
            return jsonify({"message": "Failed to create employee"}), 500

    @app.route(f"{API_PREFIX}/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: int):
        try:
            service.delete_employee(employee_id)
            return jsonify({"message": "Employee deleted successfully"})
        except NotFoundError as e:
            return jsonify({"message": str(e)}), 404
        except Exception:
            logger.exception("Failed to delete employee %s", employee_id)
            return jsonify({"message": "Failed to delete employee"}), 500

    @app.route(f"{API_PREFIX}/employees/<int:employee_id>/clockin", methods=["POST"], endpoint="clockin_employee")
    def clockin_employee(employee_id: int):
        try:
            return jsonify(employee_log_json(service.clock_in(employee_id)))
        except NotFoundError as e:
            return jsonify({"message": str(e)}), 404
        except Exception:
            logger.exception("Failed to clock in employee %s", employee_id)
            return jsonify({"message": "Failed to clock in employee"}), 500

    @app.route(f"{API_PREFIX}/employees/<int:employee_id>/clockout", methods=["POST"], endpoint="clockout_employee")
    def clockout_employee(employee_id: int):
        try:
            return jsonify(employee_log_json(service.clock_out(employee_id)))
        except NotFoundError as e:
            return jsonify({"message": str(e)}), 404
        except Exception:
            logger.exception("Failed to clock out employee %s", employee_id)
            return jsonify({"message": "Failed to clock out employee"}), 500

    @app.route(f"{API_PREFIX}/employee-logs/today", methods=["GET"], endpoint="list_todays_employee_logs")
    def list_todays_employee_logs():
        try:
            return jsonify([employee_log_json(log) for log in service.list_todays_logs()])
        except Exception:
            logger.exception("Failed to fetch today's employee logs")
            return jsonify({"message": "Failed to fetch today's employee logs"}), 500

    @app.route(f"{API_PREFIX}/employee-logs", methods=["GET"], endpoint="list_employee_logs")
    def list_employee_logs():
        employee_id = request.args.get("employeeId", type=int)
        try:
            return jsonify([employee_log_json(log) for log in service.list_logs(employee_id)])
        except Exception:
            logger.exception("Failed to fetch employee logs")
            return jsonify({"message": "Failed to fetch employee logs"}), 500
