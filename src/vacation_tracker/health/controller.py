from __future__ import annotations

import logging

from flask import Flask, current_app, jsonify

from ..core.exceptions import DataAccessError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        email = {
            "configured": container.mailer_configured,
            "recipient": container.backup_service.recipient or None,
        }
        try:
            counts = {
                "employees": len(container.employee_service.list_employees()),
                "vacations": len(container.vacation_service.list_vacations()),
            }
        except DataAccessError as e:
            logger.error("Health check: storage unreachable: %s", e)
            return (
                jsonify(
                    {
                        "status": "unavailable",
                        "storage": container.storage_backend.value,
                        "error": str(e) if current_app.config.get("DEBUG") else "Storage unavailable",
                        "email": email,
                    }
                ),
                503,
            )

        return jsonify({"status": "ok", "storage": container.storage_backend.value, "counts": counts, "email": email})
