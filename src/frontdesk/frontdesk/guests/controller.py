from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import to_iso
from ..common.validators import require_mapping
from ..container import Container
from ..core.constants import API_PREFIX
from ..core.exceptions import ValidationError
from .model import Guest

logger = logging.getLogger(__name__)


def guest_json(g: Guest) -> dict:
    return {
        "id": g.id,
        "firstName": g.first_name,
        "lastName": g.last_name,
        "email": g.email,
        "phone": g.phone,
        "purpose": g.purpose,
        "wantsNewsletter": bool(g.wants_newsletter),
        "visitedAt": to_iso(g.visited_at),
    }


def register(app: Flask, container: Container) -> None:
    service = container.guest_service

    @app.route(f"{API_PREFIX}/guests", methods=["GET"], endpoint="list_guests")
    def list_guests():
        try:
            return jsonify([guest_json(g) for g in service.list_guests()])
        except Exception:
            logger.exception("Failed to fetch guests")
            return jsonify({"message": "Failed to fetch guests"}), 500

    @app.route(f"{API_PREFIX}/guests/today", methods=["GET"], endpoint="list_todays_guests")
    def list_todays_guests():
        try:
            return jsonify([guest_json(g) for g in service.list_todays_guests()])
        except Exception:
            logger.exception("Failed to fetch today's guests")
            return jsonify({"message": "Failed to fetch today's guests"}), 500

    @app.route(f"{API_PREFIX}/guests", methods=["POST"], endpoint="register_guest")
    def register_guest():
        try:
            data = require_mapping(request.get_json(silent=True))
            guest = service.register_visit(
                first_name=data.get("firstName"),
                last_name=data.get("lastName"),
                email=data.get("email"),
                phone=data.get("phone"),
                purpose=data.get("purpose"),
                wants_newsletter=data.get("wantsNewsletter"),
            )
            return jsonify(guest_json(guest))
        except ValidationError as e:
            logger.info("Rejected guest payload: %s", e)
            return jsonify({"message": "Invalid guest data"}), 400
        except Exception:
            logger.exception("Failed to register guest")
            return jsonify({"message": "Failed to register guest"}), 500
