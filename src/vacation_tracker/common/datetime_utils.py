from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Iterable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD") from None


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now(timezone.utc)


def year_bounds(year: int) -> tuple[date, date]:
    return date(year, 1, 1), date(year, 12, 31)


def count_working_days(start: date, end: date, holidays: Iterable[date] = ()) -> int:
    """Count Monday-Friday days in [start, end] that are not holidays."""
    if end < start:
        raise ValidationError("end_date must be on/after start_date")

    excluded = set(holidays)
    days = 0
    current = start
    while current <= end:
        if current.weekday() < 5 and current not in excluded:
            days += 1
        current += timedelta(days=1)
    return days


def format_de(value: datetime) -> str:
    """Locale string in the German style used by the backup mails (d.m.yyyy, HH:MM:SS)."""
    return f"{value.day}.{value.month}.{value.year}, {value.strftime('%H:%M:%S')}"


def parse_year(value: str | None, *, default: int) -> int:
    if value is None or value == "":
        return default
    try:
        year = int(value)
    except ValueError:
        raise ValidationError("year must be a number") from None
    if not 1900 <= year <= 2200:
        raise ValidationError("year out of range")
    return year


@lru_cache(maxsize=8)
def display_timezone(name: str) -> tzinfo:
    """Resolve an IANA zone name, falling back to UTC when tz data is missing."""
    try:
        return ZoneInfo(name)
    except ZoneInfoNotFoundError:
        logger.warning("Unknown timezone '%s'; falling back to UTC", name)
        return timezone.utc
