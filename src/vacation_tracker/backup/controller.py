from __future__ import annotations

import logging

from flask import Flask, current_app, jsonify

from ..auth.guards import admin_required
from ..common.datetime_utils import display_timezone, format_de
from ..core.constants import DISPLAY_TIMEZONE
from ..core.exceptions import DataAccessError, DeliveryError, DomainError
from ..container import Container

logger = logging.getLogger(__name__)

# Client-facing text; driver and SMTP details stay in the server log
_PUBLIC_ERRORS = {
    DataAccessError: "Backup data could not be read",
    DeliveryError: "Backup could not be delivered",
}


def _public_error(exc: Exception) -> str:
    if current_app.config.get("DEBUG"):
        return str(exc)
    for exc_type, message in _PUBLIC_ERRORS.items():
        if isinstance(exc, exc_type):
            return message
    return "Unknown error"


def register(app: Flask, container: Container) -> None:
    @app.route("/api/backup", methods=["POST"], endpoint="trigger_backup")
    @admin_required
    def trigger_backup():
        try:
            result = container.backup_service.perform_backup()
        except DomainError as e:
            logger.error("Manual backup failed: %s", e)
            return jsonify({"success": False, "message": "Backup failed", "error": _public_error(e)}), 500
        except Exception as e:
            logger.exception("Manual backup failed: %s", e)
            return jsonify({"success": False, "message": "Backup failed", "error": _public_error(e)}), 500

        return jsonify(
            {
                "success": True,
                "message": f"Backup completed successfully and sent to {result.recipient}",
            }
        )

    @app.route("/api/backup", methods=["GET"], endpoint="backup_status")
    def backup_status():
        try:
            next_run = container.backup_service.get_next_backup_time()
            local = next_run.astimezone(display_timezone(DISPLAY_TIMEZONE))
        except Exception as e:
            logger.exception("Failed to get backup status: %s", e)
            return jsonify({"success": False, "error": "Failed to get backup status"}), 500

        return jsonify(
            {
                "success": True,
                "nextBackupTime": next_run.isoformat(),
                "nextBackupFormatted": format_de(local),
            }
        )
