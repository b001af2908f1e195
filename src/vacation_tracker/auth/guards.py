from __future__ import annotations

from functools import wraps

from flask import current_app, jsonify, session


def admin_required(view):
    """Reject the request with 401 unless an admin session exists.

    A no-op while AUTH_REQUIRED is off.
    """

    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_app.config.get("AUTH_REQUIRED") and "user_id" not in session:
            return jsonify({"success": False, "error": "Authentication required"}), 401
        return view(*args, **kwargs)

    return wrapper
