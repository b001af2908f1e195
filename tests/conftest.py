from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from vacation_tracker.backup.model import OutgoingMail
from vacation_tracker.core.exceptions import DeliveryError
from vacation_tracker.employees.memory_employee_repository import InMemoryEmployeeRepository
from vacation_tracker.main import create_app, get_container
from vacation_tracker.vacations.memory_vacation_repository import InMemoryVacationRepository


class FixedClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


class RecordingMailer:
    configured = True

    def __init__(self, error: Exception | None = None):
        self.sent: list[OutgoingMail] = []
        self.error = error

    def send(self, mail: OutgoingMail) -> None:
        if self.error:
            raise self.error
        self.sent.append(mail)


class BrokenEmployeeRepo(InMemoryEmployeeRepository):
    def list_all(self):
        raise RuntimeError("connection refused")


@pytest.fixture
def clock():
    return FixedClock(datetime(2024, 6, 3, 8, 0, tzinfo=timezone.utc))


@pytest.fixture
def mailer():
    return RecordingMailer()


@pytest.fixture
def employees_repo():
    return InMemoryEmployeeRepository()


@pytest.fixture
def vacations_repo():
    return InMemoryVacationRepository()


@pytest.fixture
def app(monkeypatch, clock, mailer, employees_repo, vacations_repo):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(
        employees_repo=employees_repo,
        vacations_repo=vacations_repo,
        mailer=mailer,
        clock=clock,
    )


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def container(app):
    return get_container(app)


@pytest.fixture
def failing_mailer():
    return RecordingMailer(error=DeliveryError("connection timed out"))
