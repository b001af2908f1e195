from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Any, Callable, Sequence

from ..common.validators import require_int_in_range, require_non_empty
from ..core.constants import MAX_ALLOWANCE_DAYS, MAX_NAME_LENGTH, MIN_ALLOWANCE_DAYS
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee, normalize_color
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = {"name", "allowance", "color"}


def new_employee_id() -> str:
    return f"emp_{uuid.uuid4().hex[:12]}"


class EmployeeService:
    """Use case: maintain the employee list and its allowance figures."""

    def __init__(self, employees: EmployeeRepository, *, id_factory: Callable[[], str] = new_employee_id):
        self._employees = employees
        self._new_id = id_factory

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def add_employee(self, *, name: Any, allowance: Any, color: Any = None) -> Employee:
        name = require_non_empty(name, "Employee name", max_length=MAX_NAME_LENGTH)
        allowance = require_int_in_range(allowance, "Allowance days", MIN_ALLOWANCE_DAYS, MAX_ALLOWANCE_DAYS)
        color = normalize_color(color)

        employee = Employee(
            id=self._new_id(),
            name=name,
            allowance=allowance,
            used=0,
            remaining=allowance,
            color=color,
        )
        self._employees.insert(employee)
        logger.info("Created employee %s (%s, allowance=%s)", employee.id, employee.name, employee.allowance)
        return employee

    def replace_all(self, records: Any) -> int:
        """Overwrite the whole collection with client-edited records.

        Only the shape of each record is checked; allowance ranges and the
        remaining/used relation are stored as sent.
        """

        if not isinstance(records, list):
            raise ValidationError("Request body must be an array of employees")

        employees = [Employee.from_dict(r) for r in records]
        seen: set[str] = set()
        for e in employees:
            if e.id in seen:
                raise ValidationError(f"Duplicate employee id {e.id}")
            seen.add(e.id)
            if e.remaining != e.allowance - e.used:
                logger.warning(
                    "Bulk replace stores inconsistent balance for %s: allowance=%s used=%s remaining=%s",
                    e.id, e.allowance, e.used, e.remaining,
                )

        self._employees.replace_all(employees)
        logger.info("Replaced employee list (%d records)", len(employees))
        return len(employees)

    def update_employee(self, employee_id: str, fields: Any) -> Employee:
        if not isinstance(fields, dict):
            raise ValidationError("Request body must be an object")
        unknown = set(fields) - _UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(f"Cannot update field(s): {', '.join(sorted(unknown))}")

        current = self.get_employee(employee_id)
        changes: dict[str, Any] = {}
        if "name" in fields:
            changes["name"] = require_non_empty(fields["name"], "Employee name", max_length=MAX_NAME_LENGTH)
        if "allowance" in fields:
            allowance = require_int_in_range(
                fields["allowance"], "Allowance days", MIN_ALLOWANCE_DAYS, MAX_ALLOWANCE_DAYS
            )
            changes["allowance"] = allowance
            changes["remaining"] = allowance - current.used
        if "color" in fields:
            changes["color"] = normalize_color(fields["color"])

        updated = replace(current, **changes)
        if not self._employees.save(updated):
            raise NotFoundError("Employee not found")
        return updated
