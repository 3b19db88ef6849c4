from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import Container, build_container
from .employees.controller import register as register_employees
from .guests.controller import register as register_guests
from .reports.controller import register as register_reports
from .volunteers.controller import register as register_volunteers

logger = logging.getLogger(__name__)


def create_app(*, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        webhook_url = getattr(settings, "SHEETS_WEBHOOK_URL", None)
        container = build_container(
            webhook_url=webhook_url,
            sync_timeout=float(getattr(settings, "SYNC_TIMEOUT_SECONDS", 10.0)),
            seed=bool(getattr(settings, "SEED_SAMPLE_DATA", False)),
        )
        logger.info(
            "[frontdesk] settings=%s sheets_sync=%s",
            settings_module,
            "on" if webhook_url else "off",
        )

    register_volunteers(app, container)
    register_guests(app, container)
    register_employees(app, container)
    register_reports(app, container)

    @app.route("/health", endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    app.extensions["frontdesk"] = container
    return app
