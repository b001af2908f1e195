from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Holiday:
    date: date
    name: str
    description: str

    def to_dict(self) -> dict:
        return {"date": self.date.isoformat(), "name": self.name, "description": self.description}


def easter_sunday(year: int) -> date:
    """Gregorian Easter Sunday (anonymous Gregorian algorithm)."""
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day + 1)


def german_federal_holidays(year: int) -> Sequence[Holiday]:
    """Public holidays observed in every German state, in date order."""
    easter = easter_sunday(year)
    holidays = [
        Holiday(date(year, 1, 1), "Neujahr", "New Year's Day"),
        Holiday(easter - timedelta(days=2), "Karfreitag", "Good Friday"),
        Holiday(easter + timedelta(days=1), "Ostermontag", "Easter Monday"),
        Holiday(date(year, 5, 1), "Tag der Arbeit", "Labour Day"),
        Holiday(easter + timedelta(days=39), "Christi Himmelfahrt", "Ascension Day"),
        Holiday(easter + timedelta(days=50), "Pfingstmontag", "Whit Monday"),
        Holiday(date(year, 10, 3), "Tag der Deutschen Einheit", "German Unity Day"),
        Holiday(date(year, 12, 25), "1. Weihnachtstag", "Christmas Day"),
        Holiday(date(year, 12, 26), "2. Weihnachtstag", "St. Stephen's Day"),
    ]
    return sorted(holidays, key=lambda h: h.date)


def holiday_dates(years: Iterable[int]) -> set[date]:
    out: set[date] = set()
    for y in years:
        out.update(h.date for h in german_federal_holidays(y))
    return out
