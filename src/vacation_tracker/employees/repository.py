from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Persistence interface for employees.

    Services depend on this protocol, not on a concrete backend. Implementations
    raise DataAccessError when the backing store is unreachable.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def insert(self, employee: Employee) -> None:
        raise NotImplementedError

    def save(self, employee: Employee) -> bool:
        """Overwrite an existing record; False when the id is unknown."""

        raise NotImplementedError

    def replace_all(self, employees: Sequence[Employee]) -> None:
        raise NotImplementedError
