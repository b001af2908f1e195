from __future__ import annotations

import pytest

from vacation_tracker.common.http_security import SECURITY_HEADERS, RateLimiter
from vacation_tracker.main import create_app


class Ticker:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def limited_client(monkeypatch, clock, mailer):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app({"RATE_LIMIT_MAX": 2}, mailer=mailer, clock=clock).test_client()


def test_security_headers_on_every_response(client):
    for res in (client.get("/api/health"), client.get("/api/vacations/missing")):
        for name, value in SECURITY_HEADERS.items():
            assert res.headers[name] == value


def test_writes_beyond_the_limit_get_429(limited_client):
    for _ in range(2):
        res = limited_client.post("/api/employees", json={"name": "Anna", "allowance": 30})
        assert res.status_code == 201

    res = limited_client.post("/api/employees", json={"name": "Anna", "allowance": 30})

    assert res.status_code == 429
    assert res.get_json() == {"success": False, "error": "Too many requests, please try again later"}
    assert int(res.headers["Retry-After"]) > 0
    assert res.headers["X-RateLimit-Remaining"] == "0"
    assert res.headers["X-Content-Type-Options"] == "nosniff"
    assert len(limited_client.get("/api/employees").get_json()) == 2


def test_reads_are_not_limited(limited_client):
    for _ in range(5):
        res = limited_client.get("/api/employees")
        assert res.status_code == 200
        assert "X-RateLimit-Remaining" not in res.headers


def test_limit_headers_count_down(limited_client):
    res = limited_client.post("/api/backup")

    assert res.headers["X-RateLimit-Limit"] == "2"
    assert res.headers["X-RateLimit-Remaining"] == "1"


def test_limiter_can_be_switched_off(monkeypatch, clock, mailer):
    monkeypatch.setenv("APP_ENV", "testing")
    client = create_app({"RATE_LIMIT_ENABLED": False, "RATE_LIMIT_MAX": 1}, mailer=mailer, clock=clock).test_client()

    for _ in range(3):
        assert client.post("/api/backup").status_code == 200


def test_window_resets_after_it_expires():
    ticker = Ticker()
    limiter = RateLimiter(2, 60, clock=ticker)

    assert limiter.hit("10.0.0.1").allowed
    assert limiter.hit("10.0.0.1").allowed
    blocked = limiter.hit("10.0.0.1")
    assert not blocked.allowed
    assert limiter.seconds_until(blocked.reset_at) == 60

    # other clients have their own window
    assert limiter.hit("10.0.0.2").allowed

    ticker.now += 60
    result = limiter.hit("10.0.0.1")
    assert result.allowed
    assert result.remaining == 1


@pytest.mark.parametrize("max_requests,window", [(0, 60), (5, 0)])
def test_limiter_rejects_unusable_settings(max_requests, window):
    with pytest.raises(ValueError):
        RateLimiter(max_requests, window)
