from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class Vacation:
    """Domain entity: one vacation entry of an employee.

    `working_days` is the business-day count of the range; it is trusted as given.
    """

    id: str
    employee_id: str
    start_date: date
    end_date: date
    working_days: int = 0
    note: Optional[str] = None
    created_at: Optional[datetime] = None

    def within(self, start: date, end: date) -> bool:
        """True when the whole range lies inside [start, end]."""
        return self.start_date >= start and self.end_date <= end

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employee_id": self.employee_id,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "working_days": self.working_days,
            "note": self.note,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
