from __future__ import annotations

import logging
import uuid
from datetime import date, datetime
from typing import Any, Callable, Optional, Sequence

from ..common.datetime_utils import count_working_days, now_utc, parse_iso_date
from ..common.validators import optional_text, require_date_order, require_max_span, require_non_negative_int
from ..core.constants import MAX_NOTE_LENGTH, MAX_VACATION_SPAN_DAYS
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..holidays.calendar import holiday_dates
from .model import Vacation
from .repository import VacationRepository

logger = logging.getLogger(__name__)


def new_vacation_id() -> str:
    return f"vac_{uuid.uuid4().hex[:12]}"


def _as_date(value: Any, field_name: str) -> date:
    if isinstance(value, date):
        return value
    if not value:
        raise ValidationError(f"{field_name} is required")
    return parse_iso_date(value)


class VacationService:
    """Use case: record and remove vacation entries.

    Employee balances are not touched here; reconciliation recomputes them.
    """

    def __init__(
        self,
        vacations: VacationRepository,
        employees: EmployeeRepository,
        *,
        id_factory: Callable[[], str] = new_vacation_id,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._vacations = vacations
        self._employees = employees
        self._new_id = id_factory
        self._clock = clock

    def list_vacations(self, employee_id: Optional[str] = None) -> Sequence[Vacation]:
        return self._vacations.list_all(employee_id=employee_id)

    def get_vacation(self, vacation_id: str) -> Vacation:
        vacation = self._vacations.get_by_id(vacation_id)
        if not vacation:
            raise NotFoundError("Vacation not found")
        return vacation

    def add_vacation(
        self,
        *,
        employee_id: Any,
        start_date: Any,
        end_date: Any,
        working_days: Any = None,
        note: Any = None,
    ) -> Vacation:
        if not employee_id or not isinstance(employee_id, (str, int)) or isinstance(employee_id, bool):
            raise ValidationError("employee_id is required")
        employee_id = str(employee_id)
        start = _as_date(start_date, "start_date")
        end = _as_date(end_date, "end_date")
        require_date_order(start, end)
        require_max_span(start, end, MAX_VACATION_SPAN_DAYS)

        if working_days is None:
            years = range(start.year, end.year + 1)
            working_days = count_working_days(start, end, holiday_dates(years))
        else:
            working_days = require_non_negative_int(working_days, "working_days")

        note = optional_text(note, "note", max_length=MAX_NOTE_LENGTH)

        if self._employees.get_by_id(employee_id) is None:
            raise ValidationError(f"employee_id {employee_id} does not exist")

        vacation = Vacation(
            id=self._new_id(),
            employee_id=employee_id,
            start_date=start,
            end_date=end,
            working_days=working_days,
            note=note,
            created_at=self._clock(),
        )
        self._vacations.insert(vacation)
        logger.info(
            "Added vacation %s for %s: %s..%s (%d working days)",
            vacation.id, employee_id, start.isoformat(), end.isoformat(), working_days,
        )
        return vacation

    def remove_vacation(self, vacation_id: str) -> Vacation:
        vacation = self.get_vacation(vacation_id)
        if not self._vacations.delete_by_id(vacation_id):
            raise NotFoundError("Vacation not found")
        logger.info("Removed vacation %s of %s", vacation_id, vacation.employee_id)
        return vacation
