from __future__ import annotations

import logging

from flask import Flask, jsonify, request, session

from ..core.exceptions import AuthenticationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def login():
        body = request.get_json(silent=True) or {}
        try:
            s_user = container.auth_service.authenticate(body.get("pin"))
        except AuthenticationError as e:
            logger.warning("Failed admin login from %s", request.remote_addr)
            return jsonify({"success": False, "error": str(e)}), 401

        session.clear()
        session.permanent = bool(body.get("remember"))
        session["user_id"] = s_user.user_id
        session["authenticated_at"] = s_user.authenticated_at.isoformat()
        logger.info("Admin logged in from %s", request.remote_addr)
        return jsonify({"success": True, "user": s_user.to_dict()})

    @app.route("/api/auth/logout", methods=["POST"], endpoint="auth_logout")
    def logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/api/auth/session", methods=["GET"], endpoint="auth_session")
    def current_session():
        if "user_id" not in session:
            return jsonify({"authenticated": False, "user": None})
        return jsonify(
            {
                "authenticated": True,
                "user": {"id": session["user_id"], "authenticatedAt": session.get("authenticated_at")},
            }
        )
