from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_utc, year_bounds
from ..core.exceptions import DataAccessError
from ..employees.model import Employee, EmployeeSummary
from ..employees.repository import EmployeeRepository
from ..vacations.repository import VacationRepository

logger = logging.getLogger(__name__)


class ReconciliationService:
    """Recompute every employee's used/remaining days from vacation entries.

    Only entries lying fully inside the target year count; an entry that
    crosses Jan 1 or Dec 31 is left out entirely rather than prorated.
    The result is a corrective batch, not a live view: balances can be stale
    between vacation writes and the next run.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        vacations: VacationRepository,
        *,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._employees = employees
        self._vacations = vacations
        self._clock = clock

    def _used_days(self, employee_id: str, year: int) -> int:
        start, end = year_bounds(year)
        entries = self._vacations.list_all(employee_id=employee_id)
        return sum((v.working_days or 0) for v in entries if v.within(start, end))

    def summarize(self, year: Optional[int] = None) -> Sequence[EmployeeSummary]:
        year = year or self._clock().year
        out: list[EmployeeSummary] = []
        for e in self._employees.list_all():
            used = self._used_days(e.id, year)
            out.append(
                EmployeeSummary(
                    employee_id=e.id,
                    name=e.name,
                    allowance=e.allowance,
                    used=used,
                    remaining=e.allowance - used,
                    color=e.color,
                )
            )
        return out

    def reconcile(self, year: Optional[int] = None) -> Sequence[Employee]:
        year = year or self._clock().year
        updated: list[Employee] = []
        for e in self._employees.list_all():
            used = self._used_days(e.id, year)
            fixed = replace(e, used=used, remaining=e.allowance - used)
            if not self._employees.save(fixed):
                raise DataAccessError(f"Employee {e.id} vanished during reconciliation")
            if fixed != e:
                logger.info("Reconciled %s (%s): used %s -> %s", e.id, e.name, e.used, used)
            updated.append(fixed)
        logger.info("Reconciliation for %s finished (%d employees)", year, len(updated))
        return updated
