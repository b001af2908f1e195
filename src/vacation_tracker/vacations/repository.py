from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Vacation


class VacationRepository(Protocol):
    def list_all(self, *, employee_id: Optional[str] = None) -> Sequence[Vacation]:
        raise NotImplementedError

    def get_by_id(self, vacation_id: str) -> Optional[Vacation]:
        raise NotImplementedError

    def insert(self, vacation: Vacation) -> None:
        raise NotImplementedError

    def delete_by_id(self, vacation_id: str) -> bool:
        raise NotImplementedError
