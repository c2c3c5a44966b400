"""
Urlaubsplaner Calendars

Holiday calendars for the 16 German federal states.

Provides:
- easter_sunday() for the Gregorian Easter date
- HolidayCalendar protocol for custom implementations
- BaseCalendar with common business day logic
- GermanStateCalendar for one federal state
- holidays_for() and friends for quick lookups

Usage:
    from urlaubsplaner.calendars import GermanStateCalendar, holidays_for

    # All holidays of Bavaria in 2025
    for entry in holidays_for(2025, "BY"):
        print(entry.date, entry.name, entry.weight.value)

    # Business day helpers
    calendar = GermanStateCalendar(jurisdiction=Jurisdiction.BE)
    calendar.next_business_day(date(2025, 12, 24))
"""
from __future__ import annotations

from .base import (
    BaseCalendar,
    FixedHolidayCalendar,
    HolidayCalendar,
    NoHolidayCalendar,
    iter_days,
)
from .easter import (
    GREGORIAN_START_YEAR,
    easter_offset,
    easter_sunday,
)
from .germany import (
    OPTIONAL_HOLIDAY_NAMES,
    OPTIONAL_HOLIDAY_SINCE,
    STATE_HOLIDAY_RULES,
    GermanStateCalendar,
    OptionalHoliday,
    holiday_map,
    holiday_on,
    holidays_for,
    is_holiday,
    optional_holidays_for,
)

__all__ = [
    # Protocols and base classes
    "HolidayCalendar",
    "BaseCalendar",
    "NoHolidayCalendar",
    "FixedHolidayCalendar",
    "iter_days",
    # Easter
    "GREGORIAN_START_YEAR",
    "easter_sunday",
    "easter_offset",
    # German states
    "GermanStateCalendar",
    "OptionalHoliday",
    "STATE_HOLIDAY_RULES",
    "OPTIONAL_HOLIDAY_SINCE",
    "OPTIONAL_HOLIDAY_NAMES",
    "optional_holidays_for",
    "holidays_for",
    "holiday_map",
    "holiday_on",
    "is_holiday",
]
