from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.guards import admin_required
from ..common.datetime_utils import now_utc, parse_year
from ..common.responses import error_response, internal_error
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reconcile", methods=["POST"], endpoint="reconcile")
    @admin_required
    def reconcile():
        try:
            year = parse_year(request.args.get("year"), default=now_utc().year)
            employees = container.reconciliation_service.reconcile(year)
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception as e:
            return internal_error(e, "Reconciliation failed")
        return jsonify({"success": True, "year": year, "employees": [e.to_dict() for e in employees]})

    @app.route("/api/employees/summary", methods=["GET"], endpoint="employee_summary")
    def employee_summary():
        try:
            year = parse_year(request.args.get("year"), default=now_utc().year)
            summaries = container.reconciliation_service.summarize(year)
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception as e:
            return internal_error(e, "Failed to build employee summary")
        return jsonify({"success": True, "year": year, "data": [s.to_dict() for s in summaries]})
