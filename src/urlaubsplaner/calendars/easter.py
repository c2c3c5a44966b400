"""
Easter Sunday Calculation

All moveable German holidays are fixed offsets from Easter Sunday, so an
error here shifts every one of them. Validated against published tables in
tests/test_easter.py.
"""
from __future__ import annotations

from datetime import date, timedelta

from ..exceptions import InvalidYear

# First full year of the Gregorian calendar
GREGORIAN_START_YEAR = 1583


def easter_sunday(year: int) -> date:
    """
    Calculate Easter Sunday using the Anonymous Gregorian algorithm
    (Meeus/Jones/Butcher).

    Args:
        year: Gregorian calendar year (1583 or later)

    Returns:
        Date of Easter Sunday

    Raises:
        InvalidYear: If the year predates the Gregorian calendar
    """
    if not isinstance(year, int) or isinstance(year, bool):
        raise InvalidYear(
            message=f"Year must be an integer, got {type(year).__name__}",
            details={"year": repr(year)},
        )
    if year < GREGORIAN_START_YEAR or year > date.max.year:
        raise InvalidYear(
            message=f"Year {year} is outside the Gregorian range",
            details={"year": year, "min": GREGORIAN_START_YEAR, "max": date.max.year},
        )

    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def easter_offset(year: int, days: int) -> date:
    """Date that lies `days` after Easter Sunday (negative for before)."""
    return easter_sunday(year) + timedelta(days=days)
