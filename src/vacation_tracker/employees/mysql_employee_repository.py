from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "id, name, allowance, used, remaining, color"


def _row_to_employee(row: dict) -> Employee:
    return Employee(
        id=str(row["id"]),
        name=row["name"],
        allowance=int(row["allowance"]),
        used=int(row["used"]),
        remaining=int(row["remaining"]),
        color=row["color"],
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY position, id")
            return [_row_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (employee_id,))
            row = fetchone(cur)
            return _row_to_employee(row) if row else None

    def insert(self, employee: Employee) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COALESCE(MAX(position), 0) + 1 AS next_pos FROM employees")
            next_pos = int(fetchone(cur)["next_pos"])
            cur.execute(
                """
                INSERT INTO employees(id, position, name, allowance, used, remaining, color)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    employee.id,
                    next_pos,
                    employee.name,
                    employee.allowance,
                    employee.used,
                    employee.remaining,
                    employee.color,
                ),
            )

    def save(self, employee: Employee) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET name=%s, allowance=%s, used=%s, remaining=%s, color=%s
                WHERE id=%s
                """,
                (employee.name, employee.allowance, employee.used, employee.remaining, employee.color, employee.id),
            )
            # rowcount is 0 for an unchanged row too, so confirm existence separately
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS found FROM employees WHERE id=%s", (employee.id,))
            return fetchone(cur) is not None

    def replace_all(self, employees: Sequence[Employee]) -> None:
        # Single transaction: db_cursor commits only after both statements succeed.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees")
            if employees:
                cur.executemany(
                    """
                    INSERT INTO employees(id, position, name, allowance, used, remaining, color)
                    VALUES(%s,%s,%s,%s,%s,%s,%s)
                    """,
                    [
                        (e.id, pos, e.name, e.allowance, e.used, e.remaining, e.color)
                        for pos, e in enumerate(employees, start=1)
                    ],
                )
