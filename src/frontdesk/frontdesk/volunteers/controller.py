from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import to_iso
from ..common.validators import require_mapping
from ..container import Container
from ..core.constants import API_PREFIX
from ..core.exceptions import NotFoundError, ValidationError
from .model import Volunteer, VolunteerLog

logger = logging.getLogger(__name__)

# JSON name -> attribute name for PATCH bodies
_PATCH_FIELDS = {"name": "name", "role": "role", "photoUrl": "photo_url"}


def volunteer_json(v: Volunteer) -> dict:
    return {
        "id": v.id,
        "name": v.name,
        "role": v.role,
        "photoUrl": v.photo_url,
        "isCheckedIn": bool(v.is_checked_in),
        "lastCheckIn": to_iso(v.last_check_in),
        "lastCheckOut": to_iso(v.last_check_out),
        "createdAt": to_iso(v.created_at),
    }


def volunteer_log_json(log: VolunteerLog) -> dict:
    return {
        "id": log.id,
        "volunteerId": log.volunteer_id,
        "action": log.action.value,
        "timestamp": to_iso(log.timestamp),
        "activity": log.activity,
        "hoursWorked": log.hours_worked,
    }


def register(app: Flask, container: Container) -> None:
    service = container.volunteer_service

    @app.route(f"{API_PREFIX}/volunteers", methods=["GET"], endpoint="list_volunteers")
    def list_volunteers():
        try:
            return jsonify([volunteer_json(v) for v in service.list_volunteers()])
        except Exception:
            logger.exception("Failed to fetch volunteers")
            return jsonify({"message": "Failed to fetch volunteers"}), 500

    @app.route(f"{API_PREFIX}/volunteers", methods=["POST"], endpoint="create_volunteer")
    def create_volunteer():
        try:
            data = require_mapping(request.get_json(silent=True))
            volunteer = service.create_volunteer(
                name=data.get("name"),
                role=data.get("role"),
                photo_url=data.get("photoUrl"),
            )
            return jsonify(volunteer_json(volunteer))
        except ValidationError as e:
            logger.info("Rejected volunteer payload: %s", e)
            return jsonify({"message": "Invalid volunteer data"}), 400
        except Exception:
            logger.exception("Failed to create volunteer")
            return jsonify({"message": "Failed to create volunteer"}), 500

    @app.route(f"{API_PREFIX}/volunteers/<int:volunteer_id>", methods=["PATCH"], endpoint="update_volunteer")
    def update_volunteer(volunteer_id: int):
        try:
            data = require_mapping(request.get_json(silent=True))
            changes = {attr: data[key] for key, attr in _PATCH_FIELDS.items() if key in data}
            volunteer = service.update_volunteer(volunteer_id, changes)
            return jsonify(volunteer_json(volunteer))
        except NotFoundError as e:
            return jsonify({"message": str(e)}), 404
        except ValidationError as e:
            logger.info("Rejected volunteer update: %s", e)
            return jsonify({"message": "Invalid volunteer data"}), 400
        except Exception:
            logger.exception("Failed to update volunteer %s", volunteer_id)
            return jsonify({"message": "Failed to update volunteer"}), 500

    @app.route(f"{API_PREFIX}/volunteers/<int:volunteer_id>", methods=["DELETE"], endpoint="delete_volunteer")
    def delete_volunteer(volunteer_id: int):
        try:
            service.delete_volunteer(volunteer_id)
            return jsonify({"message": "Volunteer deleted successfully"})
        except NotFoundError as e:
            return jsonify({"message": str(e)}), 404
        except Exception:
            logger.exception("Failed to delete volunteer %s", volunteer_id)
            return jsonify({"message": "Failed to delete volunteer"}), 500

    @app.route(f"{API_PREFIX}/volunteers/<int:volunteer_id>/checkin", methods=["POST"], endpoint="checkin_volunteer")
    def checkin_volunteer(volunteer_id: int):
        try:
            return jsonify(volunteer_json(service.check_in(volunteer_id)))
        except NotFoundError as e:
            return jsonify({"message": str(e)}), 404
        except Exception:
            logger.exception("Failed to check in volunteer %s", volunteer_id)
            return jsonify({"message": "Failed to check in volunteer"}), 500

    @app.route(f"{API_PREFIX}/volunteers/<int:volunteer_id>/checkout", methods=["POST"], endpoint="checkout_volunteer")
    def checkout_volunteer(volunteer_id: int):
        try:
            data = request.get_json(silent=True) or {}
            activity = data.get("activity") if isinstance(data, dict) else None
            return jsonify(volunteer_json(service.check_out(volunteer_id, activity=activity)))
        except NotFoundError as e:
            return jsonify({"message": str(e)}), 404
        except ValidationError as e:
            logger.info("Rejected checkout payload: %s", e)
            return jsonify({"message": "Invalid checkout data"}), 400
        except Exception:
            logger.exception("Failed to check out volunteer %s", volunteer_id)
            return jsonify({"message": "Failed to check out volunteer"}), 500

    @app.route(f"{API_PREFIX}/volunteer-logs", methods=["GET"], endpoint="list_volunteer_logs")
    def list_volunteer_logs():
        volunteer_id = request.args.get("volunteerId", type=int)
        try:
            return jsonify([volunteer_log_json(log) for log in service.list_logs(volunteer_id)])
        except Exception:
            logger.exception("Failed to fetch volunteer logs")
            return jsonify({"message": "Failed to fetch volunteer logs"}), 500
