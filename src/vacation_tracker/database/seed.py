from __future__ import annotations

import logging

from ..employees.model import Employee
from ..employees.repository import EmployeeRepository

logger = logging.getLogger(__name__)

DEMO_EMPLOYEES = (
    Employee(id="emp_demo01", name="Anna Becker", allowance=30, remaining=30, color="#1c5975"),
    Employee(id="emp_demo02", name="Jonas Hoffmann", allowance=28, remaining=28, color="#8B4513"),
    Employee(id="emp_demo03", name="Lea Schneider", allowance=32, remaining=32, color="#228B22"),
    Employee(id="emp_demo04", name="Paul Wagner", allowance=25, remaining=25, color="#DC143C"),
)


def ensure_demo_employees(employees: EmployeeRepository) -> int:
    """Insert demo employees when the store is empty. Returns the number inserted."""
    if employees.list_all():
        return 0
    for employee in DEMO_EMPLOYEES:
        employees.insert(employee)
    logger.info("Seeded %d demo employees", len(DEMO_EMPLOYEES))
    return len(DEMO_EMPLOYEES)
