from __future__ import annotations

import threading
from typing import Iterable, Optional, Sequence

from .model import Employee
from .repository import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    """Process-local employee store. Each process has its own copy."""

    def __init__(self, employees: Iterable[Employee] = ()):
        self._lock = threading.Lock()
        self._items: list[Employee] = list(employees)

    def list_all(self) -> Sequence[Employee]:
        with self._lock:
            return list(self._items)

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with self._lock:
            for e in self._items:
                if e.id == employee_id:
                    return e
            return None

    def insert(self, employee: Employee) -> None:
        with self._lock:
            self._items.append(employee)

    def save(self, employee: Employee) -> bool:
        with self._lock:
            for i, e in enumerate(self._items):
                if e.id == employee.id:
                    self._items[i] = employee
                    return True
            return False

    def replace_all(self, employees: Sequence[Employee]) -> None:
        new_items = list(employees)
        with self._lock:
            self._items = new_items
