from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from vacation_tracker.common.datetime_utils import display_timezone, format_de, parse_iso_date, parse_year
from vacation_tracker.core.exceptions import ValidationError


def test_parse_iso_date():
    assert parse_iso_date("2024-02-29") == date(2024, 2, 29)
    with pytest.raises(ValidationError):
        parse_iso_date("2023-02-29")


def test_parse_year():
    assert parse_year(None, default=2024) == 2024
    assert parse_year("2025", default=2024) == 2025
    with pytest.raises(ValidationError):
        parse_year("1800", default=2024)


def test_format_de_has_no_zero_padding_on_date():
    assert format_de(datetime(2024, 3, 5, 7, 4, 9)) == "5.3.2024, 07:04:09"


def test_unknown_timezone_falls_back_to_utc():
    assert display_timezone("Mars/Olympus_Mons") is timezone.utc
