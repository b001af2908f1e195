from __future__ import annotations

from datetime import date

import pytest

from vacation_tracker.common.datetime_utils import count_working_days
from vacation_tracker.holidays.calendar import easter_sunday, german_federal_holidays, holiday_dates


@pytest.mark.parametrize(
    "year, expected",
    [(2023, date(2023, 4, 9)), (2024, date(2024, 3, 31)), (2025, date(2025, 4, 20)), (2038, date(2038, 4, 25))],
)
def test_easter_sunday(year, expected):
    assert easter_sunday(year) == expected


def test_2024_holidays_include_easter_dates():
    by_date = {h.date: h.description for h in german_federal_holidays(2024)}

    assert len(by_date) == 9
    assert by_date[date(2024, 3, 29)] == "Good Friday"
    assert by_date[date(2024, 4, 1)] == "Easter Monday"
    assert by_date[date(2024, 5, 9)] == "Ascension Day"
    assert by_date[date(2024, 5, 20)] == "Whit Monday"
    assert date(2024, 10, 3) in by_date


def test_holidays_are_sorted():
    dates = [h.date for h in german_federal_holidays(2025)]
    assert dates == sorted(dates)


def test_working_days_skip_weekends_and_holidays():
    # Mon 2024-12-23 .. Fri 2024-12-27 with Christmas on Wed/Thu
    assert count_working_days(date(2024, 12, 23), date(2024, 12, 27), holiday_dates([2024])) == 3
    assert count_working_days(date(2024, 3, 1), date(2024, 3, 5)) == 3


def test_holidays_endpoint(client):
    res = client.get("/api/holidays?year=2024")

    assert res.status_code == 200
    body = res.get_json()
    assert body["year"] == 2024
    assert {"date": "2024-04-01", "name": "Ostermontag", "description": "Easter Monday"} in body["data"]
    assert client.get("/api/holidays?year=x").status_code == 400
