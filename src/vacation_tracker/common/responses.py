from __future__ import annotations

import logging

from flask import current_app, jsonify

logger = logging.getLogger(__name__)


def error_response(message: str, status: int, **extra):
    body = {"success": False, "error": message}
    body.update(extra)
    return jsonify(body), status


def internal_error(exc: Exception, message: str):
    """Log the traceback server-side; expose details to the client only in DEBUG."""

    logger.exception("%s: %s", message, exc)
    if current_app.config.get("DEBUG"):
        return error_response(f"{message}: {exc}", 500)
    return error_response(message, 500)
