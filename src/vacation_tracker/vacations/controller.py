from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.guards import admin_required
from ..common.responses import error_response, internal_error
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/vacations", methods=["GET"], endpoint="list_vacations")
    def list_vacations():
        """
        GET /api/vacations
        GET /api/vacations?employee_id=emp_1
        """
        try:
            vacations = container.vacation_service.list_vacations(request.args.get("employee_id") or None)
        except Exception as e:
            return internal_error(e, "Failed to load vacations")
        return jsonify([v.to_dict() for v in vacations])

    @app.route("/api/vacations", methods=["POST"], endpoint="create_vacation")
    @admin_required
    def create_vacation():
        """
        POST /api/vacations
        Body: {"employee_id": "...", "start_date": "YYYY-MM-DD", "end_date": "YYYY-MM-DD",
               "working_days": 5, "note": "..."}; working_days is counted when omitted.
        """
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return error_response("Request body must be a JSON object", 400)
        try:
            vacation = container.vacation_service.add_vacation(
                employee_id=body.get("employee_id"),
                start_date=body.get("start_date"),
                end_date=body.get("end_date"),
                working_days=body.get("working_days"),
                note=body.get("note"),
            )
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception as e:
            return internal_error(e, "Failed to create vacation")
        return jsonify({"success": True, "vacation": vacation.to_dict()}), 201

    @app.route("/api/vacations/<vacation_id>", methods=["GET"], endpoint="get_vacation")
    def get_vacation(vacation_id: str):
        try:
            vacation = container.vacation_service.get_vacation(vacation_id)
        except NotFoundError as e:
            return error_response(str(e), 404)
        except Exception as e:
            return internal_error(e, "Failed to load vacation")
        return jsonify(vacation.to_dict())

    @app.route("/api/vacations/<vacation_id>", methods=["DELETE"], endpoint="delete_vacation")
    @admin_required
    def delete_vacation(vacation_id: str):
        try:
            vacation = container.vacation_service.remove_vacation(vacation_id)
        except NotFoundError as e:
            return error_response(str(e), 404)
        except Exception as e:
            return internal_error(e, "Failed to delete vacation")
        return jsonify({"success": True, "deletedVacation": vacation.to_dict()})
