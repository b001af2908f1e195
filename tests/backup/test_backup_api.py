from __future__ import annotations

from datetime import timedelta

import pytest

from conftest import BrokenEmployeeRepo
from vacation_tracker.main import create_app


def test_trigger_backup(client, mailer):
    res = client.post("/api/backup")

    assert res.status_code == 200
    assert res.get_json() == {
        "success": True,
        "message": "Backup completed successfully and sent to backup@example.com",
    }
    assert len(mailer.sent) == 1


def test_backup_status_reports_next_run(client, clock):
    res = client.get("/api/backup")

    assert res.status_code == 200
    body = res.get_json()
    assert body["success"] is True
    assert body["nextBackupTime"] == (clock.now + timedelta(days=7)).isoformat()
    # 2024-06-10 08:00 UTC is 10:00 in Berlin (CEST)
    assert body["nextBackupFormatted"] == "10.6.2024, 10:00:00"


def test_delivery_failure_returns_500(monkeypatch, clock, failing_mailer):
    monkeypatch.setenv("APP_ENV", "testing")
    client = create_app(mailer=failing_mailer, clock=clock).test_client()

    res = client.post("/api/backup")

    assert res.status_code == 500
    body = res.get_json()
    assert body["success"] is False
    assert body["message"] == "Backup failed"
    assert body["error"] == "Backup could not be delivered"


def test_store_failure_returns_500_and_sends_nothing(monkeypatch, clock, mailer):
    monkeypatch.setenv("APP_ENV", "testing")
    client = create_app(employees_repo=BrokenEmployeeRepo(), mailer=mailer, clock=clock).test_client()

    res = client.post("/api/backup")

    assert res.status_code == 500
    body = res.get_json()
    assert body["message"] == "Backup failed"
    assert body["error"] == "Backup data could not be read"
    assert "connection refused" not in res.get_data(as_text=True)
    assert mailer.sent == []


def test_debug_mode_returns_underlying_error(monkeypatch, clock, failing_mailer):
    monkeypatch.setenv("APP_ENV", "testing")
    client = create_app({"DEBUG": True}, mailer=failing_mailer, clock=clock).test_client()

    res = client.post("/api/backup")

    assert res.status_code == 500
    assert "timed out" in res.get_json()["error"]


@pytest.mark.parametrize("path", ["/api/backup", "/api/employees", "/api/vacations"])
def test_mutating_routes_require_login_when_enabled(monkeypatch, clock, mailer, path):
    monkeypatch.setenv("APP_ENV", "testing")
    client = create_app({"AUTH_REQUIRED": True}, mailer=mailer, clock=clock).test_client()

    assert client.post(path, json={}).status_code == 401

    client.post("/api/auth/login", json={"pin": "0000"})
    assert client.post(path, json={}).status_code != 401
