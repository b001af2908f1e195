from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Vacation
from .repository import VacationRepository

_COLUMNS = "id, employee_id, start_date, end_date, working_days, note, created_at"


def _row_to_vacation(row: dict) -> Vacation:
    return Vacation(
        id=str(row["id"]),
        employee_id=str(row["employee_id"]),
        start_date=row["start_date"],
        end_date=row["end_date"],
        working_days=int(row.get("working_days") or 0),
        note=row.get("note"),
        created_at=row.get("created_at"),
    )


class MySQLVacationRepository(VacationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self, *, employee_id: Optional[str] = None) -> Sequence[Vacation]:
        sql = f"SELECT {_COLUMNS} FROM vacations"
        params: tuple = ()
        if employee_id is not None:
            sql += " WHERE employee_id=%s"
            params = (employee_id,)
        sql += " ORDER BY start_date, id"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return [_row_to_vacation(r) for r in fetchall(cur)]

    def get_by_id(self, vacation_id: str) -> Optional[Vacation]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM vacations WHERE id=%s", (vacation_id,))
            row = fetchone(cur)
            return _row_to_vacation(row) if row else None

    def insert(self, vacation: Vacation) -> None:
        # MySQL DATETIME has no zone; store UTC naive
        created_at = vacation.created_at.replace(tzinfo=None) if vacation.created_at else None
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO vacations(id, employee_id, start_date, end_date, working_days, note, created_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    vacation.id,
                    vacation.employee_id,
                    vacation.start_date,
                    vacation.end_date,
                    vacation.working_days,
                    vacation.note,
                    created_at,
                ),
            )

    def delete_by_id(self, vacation_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM vacations WHERE id=%s", (vacation_id,))
            return cur.rowcount > 0
