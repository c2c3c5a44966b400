"""
German Federal State Holiday Calendars

Implements the public holidays of the 16 German federal states.

Nationwide holidays:
- Neujahr (January 1)
- Karfreitag (Easter - 2)
- Ostermontag (Easter + 1)
- Tag der Arbeit (May 1)
- Christi Himmelfahrt (Easter + 39)
- Pfingstmontag (Easter + 50)
- Tag der Deutschen Einheit (October 3)
- 1. and 2. Weihnachtstag (December 25, 26)

Half-day holidays (all states): Heiligabend (December 24) and
Silvester (December 31). Only half of these days is a working obligation.

State-specific holidays are listed in STATE_HOLIDAY_RULES. Only holidays
observed state-wide are included; holidays that depend on the municipality
(e.g. Mariä Himmelfahrt in Catholic parts of Bavaria) are not.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from functools import lru_cache
from typing import Optional, Union

from ..models import HolidayEntry, HolidayWeight, Jurisdiction
from .base import BaseCalendar
from .easter import easter_sunday

logger = logging.getLogger(__name__)


# =============================================================================
# State Rule Table
# =============================================================================

class OptionalHoliday(str, Enum):
    """Holidays observed only in some federal states."""
    EPIPHANY = "epiphany"                # Heilige Drei Könige, Jan 6
    WOMENS_DAY = "womens_day"            # Internationaler Frauentag, Mar 8
    CORPUS_CHRISTI = "corpus_christi"    # Fronleichnam, Easter + 60
    ASSUMPTION = "assumption"            # Mariä Himmelfahrt, Aug 15
    CHILDRENS_DAY = "childrens_day"      # Weltkindertag, Sep 20
    REFORMATION_DAY = "reformation_day"  # Reformationstag, Oct 31
    ALL_SAINTS = "all_saints"            # Allerheiligen, Nov 1
    REPENTANCE_DAY = "repentance_day"    # Buß- und Bettag, Wednesday before Nov 23


_H = OptionalHoliday

STATE_HOLIDAY_RULES: dict[Jurisdiction, frozenset[OptionalHoliday]] = {
    Jurisdiction.BW: frozenset({_H.EPIPHANY, _H.CORPUS_CHRISTI, _H.ALL_SAINTS}),
    Jurisdiction.BY: frozenset({_H.EPIPHANY, _H.CORPUS_CHRISTI, _H.ALL_SAINTS}),
    Jurisdiction.BE: frozenset({_H.WOMENS_DAY}),
    Jurisdiction.BB: frozenset({_H.REFORMATION_DAY}),
    Jurisdiction.HB: frozenset({_H.REFORMATION_DAY}),
    Jurisdiction.HH: frozenset({_H.REFORMATION_DAY}),
    Jurisdiction.HE: frozenset({_H.CORPUS_CHRISTI}),
    Jurisdiction.MV: frozenset({_H.REFORMATION_DAY}),
    Jurisdiction.NI: frozenset({_H.REFORMATION_DAY}),
    Jurisdiction.NW: frozenset({_H.CORPUS_CHRISTI, _H.ALL_SAINTS}),
    Jurisdiction.RP: frozenset({_H.CORPUS_CHRISTI, _H.ALL_SAINTS}),
    Jurisdiction.SL: frozenset({_H.CORPUS_CHRISTI, _H.ASSUMPTION, _H.ALL_SAINTS}),
    Jurisdiction.SN: frozenset({_H.REFORMATION_DAY, _H.REPENTANCE_DAY}),
    Jurisdiction.ST: frozenset({_H.EPIPHANY, _H.REFORMATION_DAY}),
    Jurisdiction.SH: frozenset({_H.REFORMATION_DAY}),
    Jurisdiction.TH: frozenset({_H.CHILDRENS_DAY, _H.REFORMATION_DAY}),
}

# First year a state observed the holiday; absent pairs have always applied
OPTIONAL_HOLIDAY_SINCE: dict[tuple[Jurisdiction, OptionalHoliday], int] = {
    (Jurisdiction.BE, _H.WOMENS_DAY): 2019,
    (Jurisdiction.HB, _H.REFORMATION_DAY): 2018,
    (Jurisdiction.HH, _H.REFORMATION_DAY): 2018,
    (Jurisdiction.NI, _H.REFORMATION_DAY): 2018,
    (Jurisdiction.SH, _H.REFORMATION_DAY): 2018,
    (Jurisdiction.TH, _H.CHILDRENS_DAY): 2019,
}

OPTIONAL_HOLIDAY_NAMES: dict[OptionalHoliday, str] = {
    _H.EPIPHANY: "Heilige Drei Könige",
    _H.WOMENS_DAY: "Internationaler Frauentag",
    _H.CORPUS_CHRISTI: "Fronleichnam",
    _H.ASSUMPTION: "Mariä Himmelfahrt",
    _H.CHILDRENS_DAY: "Weltkindertag",
    _H.REFORMATION_DAY: "Reformationstag",
    _H.ALL_SAINTS: "Allerheiligen",
    _H.REPENTANCE_DAY: "Buß- und Bettag",
}


def optional_holidays_for(year: int, jurisdiction: Jurisdiction) -> frozenset[OptionalHoliday]:
    """Optional holidays a state observes in a given year."""
    return frozenset(
        h for h in STATE_HOLIDAY_RULES[jurisdiction]
        if year >= OPTIONAL_HOLIDAY_SINCE.get((jurisdiction, h), year)
    )


# =============================================================================
# Date Rules
# =============================================================================

def _repentance_day(year: int) -> date:
    """Wednesday before November 23."""
    nov22 = date(year, 11, 22)
    return nov22 - timedelta(days=(nov22.weekday() - 2) % 7)


def _optional_holiday_date(year: int, holiday: OptionalHoliday, easter: date) -> date:
    if holiday is _H.CORPUS_CHRISTI:
        return easter + timedelta(days=60)
    if holiday is _H.REPENTANCE_DAY:
        return _repentance_day(year)
    month, day = {
        _H.EPIPHANY: (1, 6),
        _H.WOMENS_DAY: (3, 8),
        _H.ASSUMPTION: (8, 15),
        _H.CHILDRENS_DAY: (9, 20),
        _H.REFORMATION_DAY: (10, 31),
        _H.ALL_SAINTS: (11, 1),
    }[holiday]
    return date(year, month, day)


def _get_fixed_holidays(year: int) -> list[tuple[date, str]]:
    """Nationwide fixed-date holidays as (date, name) tuples."""
    return [
        (date(year, 1, 1), "Neujahr"),
        (date(year, 5, 1), "Tag der Arbeit"),
        (date(year, 10, 3), "Tag der Deutschen Einheit"),
        (date(year, 12, 25), "1. Weihnachtstag"),
        (date(year, 12, 26), "2. Weihnachtstag"),
    ]


def _get_moveable_holidays(easter: date) -> list[tuple[date, str]]:
    """Nationwide Easter-relative holidays as (date, name) tuples."""
    return [
        (easter - timedelta(days=2), "Karfreitag"),
        (easter + timedelta(days=1), "Ostermontag"),
        (easter + timedelta(days=39), "Christi Himmelfahrt"),
        (easter + timedelta(days=50), "Pfingstmontag"),
    ]


def _get_half_holidays(year: int) -> list[tuple[date, str]]:
    return [
        (date(year, 12, 24), "Heiligabend"),
        (date(year, 12, 31), "Silvester"),
    ]


def _merge(entries: dict[date, HolidayEntry], new: HolidayEntry) -> None:
    """Add an entry keyed by date; FULL wins, coinciding names are joined."""
    existing = entries.get(new.date)
    if existing is None:
        entries[new.date] = new
        return
    weight = HolidayWeight.FULL if HolidayWeight.FULL in (existing.weight, new.weight) else HolidayWeight.HALF
    entries[new.date] = HolidayEntry(
        date=new.date,
        name=f"{existing.name} / {new.name}",
        weight=weight,
    )


@lru_cache(maxsize=512)
def _compute_holidays(year: int, jurisdiction: Jurisdiction) -> tuple[HolidayEntry, ...]:
    easter = easter_sunday(year)
    entries: dict[date, HolidayEntry] = {}

    for d, name in _get_fixed_holidays(year) + _get_moveable_holidays(easter):
        _merge(entries, HolidayEntry(d, name, HolidayWeight.FULL))

    for holiday in sorted(optional_holidays_for(year, jurisdiction), key=lambda h: h.value):
        d = _optional_holiday_date(year, holiday, easter)
        _merge(entries, HolidayEntry(d, OPTIONAL_HOLIDAY_NAMES[holiday], HolidayWeight.FULL))

    for d, name in _get_half_holidays(year):
        _merge(entries, HolidayEntry(d, name, HolidayWeight.HALF))

    logger.debug(
        "Computed %d holidays for %s %d", len(entries), jurisdiction.value, year
    )
    return tuple(sorted(entries.values(), key=lambda e: e.date))


# =============================================================================
# Public API
# =============================================================================

def holidays_for(year: int, jurisdiction: Union[Jurisdiction, str]) -> tuple[HolidayEntry, ...]:
    """
    Get all public holidays of a state for a year.

    Args:
        year: Calendar year
        jurisdiction: State (enum member or code such as "BY")

    Returns:
        HolidayEntry tuple sorted by date, one entry per date

    Raises:
        InvalidJurisdiction: If the state code is unknown
        InvalidYear: If the year predates the Gregorian calendar
    """
    return _compute_holidays(year, Jurisdiction.from_code(jurisdiction))


def holiday_map(year: int, jurisdiction: Union[Jurisdiction, str]) -> dict[date, HolidayEntry]:
    """Holidays of a state for a year, keyed by date."""
    return {entry.date: entry for entry in holidays_for(year, jurisdiction)}


def holiday_on(d: date, jurisdiction: Union[Jurisdiction, str]) -> Optional[HolidayEntry]:
    """The holiday falling on a date, None if the date is no holiday."""
    for entry in holidays_for(d.year, jurisdiction):
        if entry.date == d:
            return entry
    return None


def is_holiday(d: date, jurisdiction: Union[Jurisdiction, str]) -> bool:
    """Check if a date is a holiday (full or half) in a state."""
    return holiday_on(d, jurisdiction) is not None


@dataclass
class GermanStateCalendar(BaseCalendar):
    """
    Holiday calendar of a single German federal state.

    Usage:
        calendar = GermanStateCalendar(jurisdiction=Jurisdiction.BY)
        calendar.is_business_day(date(2025, 6, 19))   # False, Fronleichnam
        calendar.holiday_weight(date(2025, 12, 24))   # HolidayWeight.HALF
    """

    jurisdiction: Jurisdiction = Jurisdiction.BY

    def __post_init__(self) -> None:
        self.jurisdiction = Jurisdiction.from_code(self.jurisdiction)

    def holidays_for(self, year: int) -> tuple[HolidayEntry, ...]:
        """All holidays of this state in a year, sorted by date."""
        return holidays_for(year, self.jurisdiction)

    def holiday_map(self, year: int) -> dict[date, HolidayEntry]:
        return holiday_map(year, self.jurisdiction)

    def holiday_weight(self, d: date) -> Optional[HolidayWeight]:
        entry = holiday_on(d, self.jurisdiction)
        return entry.weight if entry else None

    def get_holiday_name(self, d: date) -> Optional[str]:
        entry = holiday_on(d, self.jurisdiction)
        return entry.name if entry else None

    def get_holidays_for_year(self, year: int) -> list[tuple[date, str]]:
        """
        Get all holidays for a year with names.

        Returns list of (date, name) tuples sorted by date.
        """
        return [(entry.date, entry.name) for entry in self.holidays_for(year)]
