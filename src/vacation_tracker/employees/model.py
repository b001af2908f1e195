from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..core.constants import DEFAULT_EMPLOYEE_COLOR, MAX_COLOR_LENGTH, MAX_ID_LENGTH, MAX_NAME_LENGTH
from ..core.exceptions import ValidationError


def _as_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ValidationError(f"{field_name} must be a whole number")


def normalize_color(value: Any) -> str:
    """Display colour as sent, or the default for missing/empty values."""
    if value is None or value == "":
        return DEFAULT_EMPLOYEE_COLOR
    if not isinstance(value, str) or len(value.strip()) > MAX_COLOR_LENGTH:
        raise ValidationError(f"color must be text of at most {MAX_COLOR_LENGTH} characters")
    return value.strip() or DEFAULT_EMPLOYEE_COLOR


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee and their vacation balance for the year.

    `used` is derived by reconciliation; `remaining` mirrors `allowance - used`.
    """

    id: str
    name: str
    allowance: int
    used: int = 0
    remaining: int = 0
    color: str = DEFAULT_EMPLOYEE_COLOR

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "allowance": self.allowance,
            "used": self.used,
            "remaining": self.remaining,
            "color": self.color,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Employee":
        """Coerce a client-supplied record (bulk replace) into an Employee.

        Only the shape and column sizes are checked here; ranges are left as sent.
        """

        if not isinstance(data, dict):
            raise ValidationError("Each employee must be an object")
        raw_id = data.get("id")
        if raw_id is None or (isinstance(raw_id, str) and not raw_id.strip()):
            raise ValidationError("Each employee needs an id")
        if len(str(raw_id)) > MAX_ID_LENGTH:
            raise ValidationError(f"Employee id must be at most {MAX_ID_LENGTH} characters")
        name = data.get("name")
        if not isinstance(name, str) or len(name) > MAX_NAME_LENGTH:
            raise ValidationError(f"Employee {raw_id}: name must be a string of at most {MAX_NAME_LENGTH} characters")
        if "allowance" not in data:
            raise ValidationError(f"Employee {raw_id}: allowance is required")

        allowance = _as_int(data.get("allowance"), "allowance")
        used = _as_int(data.get("used", 0) or 0, "used")
        remaining = data.get("remaining")
        return cls(
            id=str(raw_id),
            name=name,
            allowance=allowance,
            used=used,
            remaining=_as_int(remaining, "remaining") if remaining is not None else allowance - used,
            color=normalize_color(data.get("color")),
        )


@dataclass(frozen=True)
class EmployeeSummary:
    """Read-model for the yearly overview (not persisted)."""

    employee_id: str
    name: str
    allowance: int
    used: int
    remaining: int
    color: str

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "name": self.name,
            "allowance": self.allowance,
            "used": self.used,
            "remaining": self.remaining,
            "color": self.color,
        }
