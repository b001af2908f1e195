from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_year
from ..common.responses import error_response
from ..core.exceptions import ValidationError
from ..container import Container
from .calendar import german_federal_holidays


def register(app: Flask, container: Container) -> None:
    @app.route("/api/holidays", methods=["GET"], endpoint="list_holidays")
    def list_holidays():
        try:
            year = parse_year(request.args.get("year"), default=date.today().year)
        except ValidationError as e:
            return error_response(str(e), 400)

        holidays = german_federal_holidays(year)
        return jsonify({"success": True, "year": year, "data": [h.to_dict() for h in holidays]})
