from __future__ import annotations

from vacation_tracker.core.exceptions import DataAccessError
from vacation_tracker.employees.memory_employee_repository import InMemoryEmployeeRepository
from vacation_tracker.main import create_app


class UnreachableEmployees(InMemoryEmployeeRepository):
    def list_all(self):
        raise DataAccessError("MySQL unreachable")


def test_health_reports_counts(client):
    client.post("/api/employees", json={"name": "Anna", "allowance": 30})

    res = client.get("/api/health")

    assert res.status_code == 200
    body = res.get_json()
    assert body["status"] == "ok"
    assert body["storage"] == "memory"
    assert body["counts"] == {"employees": 1, "vacations": 0}
    assert body["email"] == {"configured": True, "recipient": "backup@example.com"}


def test_health_unavailable_when_store_fails(monkeypatch, clock, mailer):
    monkeypatch.setenv("APP_ENV", "testing")
    client = create_app(employees_repo=UnreachableEmployees(), mailer=mailer, clock=clock).test_client()

    res = client.get("/api/health")

    assert res.status_code == 503
    assert res.get_json()["status"] == "unavailable"
    assert res.get_json()["error"] == "Storage unavailable"
    assert "MySQL" not in res.get_data(as_text=True)


def test_health_error_detail_only_in_debug(monkeypatch, clock, mailer):
    monkeypatch.setenv("APP_ENV", "testing")
    client = create_app({"DEBUG": True}, employees_repo=UnreachableEmployees(), mailer=mailer, clock=clock).test_client()

    res = client.get("/api/health")

    assert res.status_code == 503
    assert res.get_json()["error"] == "MySQL unreachable"
