from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.guards import admin_required
from ..common.responses import error_response, internal_error
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        try:
            employees = container.employee_service.list_employees()
        except Exception as e:
            return internal_error(e, "Failed to load employees")
        return jsonify([e.to_dict() for e in employees])

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @admin_required
    def create_employee():
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return error_response("Request body must be a JSON object", 400)
        try:
            employee = container.employee_service.add_employee(
                name=body.get("name"),
                allowance=body.get("allowance"),
                color=body.get("color"),
            )
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception as e:
            return internal_error(e, "Failed to create employee")
        return jsonify({"success": True, "employee": employee.to_dict()}), 201

    @app.route("/api/employees", methods=["PUT"], endpoint="replace_employees")
    @admin_required
    def replace_employees():
        body = request.get_json(silent=True)
        try:
            container.employee_service.replace_all(body)
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception as e:
            return internal_error(e, "Failed to save employees")
        return jsonify({"success": True})

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: str):
        try:
            employee = container.employee_service.get_employee(employee_id)
        except NotFoundError as e:
            return error_response(str(e), 404)
        except Exception as e:
            return internal_error(e, "Failed to load employee")
        return jsonify(employee.to_dict())

    @app.route("/api/employees/<employee_id>", methods=["PATCH"], endpoint="update_employee")
    @admin_required
    def update_employee(employee_id: str):
        try:
            employee = container.employee_service.update_employee(employee_id, request.get_json(silent=True))
        except NotFoundError as e:
            return error_response(str(e), 404)
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception as e:
            return internal_error(e, "Failed to update employee")
        return jsonify({"success": True, "employee": employee.to_dict()})
