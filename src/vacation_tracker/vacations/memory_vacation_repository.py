from __future__ import annotations

import threading
from typing import Iterable, Optional, Sequence

from .model import Vacation
from .repository import VacationRepository


class InMemoryVacationRepository(VacationRepository):
    def __init__(self, vacations: Iterable[Vacation] = ()):
        self._lock = threading.Lock()
        self._items: list[Vacation] = list(vacations)

    def list_all(self, *, employee_id: Optional[str] = None) -> Sequence[Vacation]:
        with self._lock:
            items = [v for v in self._items if employee_id is None or v.employee_id == employee_id]
        return sorted(items, key=lambda v: (v.start_date, v.id))

    def get_by_id(self, vacation_id: str) -> Optional[Vacation]:
        with self._lock:
            return next((v for v in self._items if v.id == vacation_id), None)

    def insert(self, vacation: Vacation) -> None:
        with self._lock:
            self._items.append(vacation)

    def delete_by_id(self, vacation_id: str) -> bool:
        with self._lock:
            for i, v in enumerate(self._items):
                if v.id == vacation_id:
                    del self._items[i]
                    return True
            return False
