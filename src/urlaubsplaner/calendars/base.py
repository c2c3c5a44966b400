"""
Urlaubsplaner Holiday Calendar Base

Provides the protocol and base implementation for holiday calendars
used in working day calculations.

The calendar system is pluggable: every federal state is its own
calendar, and tests can substitute fixed calendars.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterator, Optional, Protocol, runtime_checkable

from ..models import HolidayWeight


@runtime_checkable
class HolidayCalendar(Protocol):
    """
    Protocol for holiday calendars.

    Implementations report whether a date is a holiday and with which
    weight. Working-day classification and quota accounting only rely
    on this protocol.
    """

    def is_weekend(self, d: date) -> bool:
        """Check if a date falls on a weekend."""
        ...

    def holiday_weight(self, d: date) -> Optional[HolidayWeight]:
        """
        Weight of the holiday on a date.

        Args:
            d: Date to check

        Returns:
            FULL or HALF for a holiday, None for an ordinary day
        """
        ...

    def get_holiday_name(self, d: date) -> Optional[str]:
        """Name of the holiday on a date, None if there is none."""
        ...


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every date from start to end inclusive (safe up to date.max)."""
    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)


@dataclass
class BaseCalendar(ABC):
    """
    Abstract base class for holiday calendars.

    Provides common functionality for working day calculations.
    Subclasses must implement `holiday_weight()`.
    """

    # Weekend days (0=Monday, 6=Sunday)
    weekend_days: frozenset[int] = field(default_factory=lambda: frozenset({5, 6}))

    @abstractmethod
    def holiday_weight(self, d: date) -> Optional[HolidayWeight]:
        """Weight of the holiday on a date, None for an ordinary day."""
        ...

    def get_holiday_name(self, d: date) -> Optional[str]:
        """Name of the holiday on a date; unnamed by default."""
        return None

    def is_holiday(self, d: date) -> bool:
        """Check if a date is a holiday of any weight."""
        return self.holiday_weight(d) is not None

    def is_weekend(self, d: date) -> bool:
        """Check if a date is a weekend day."""
        return d.weekday() in self.weekend_days

    def is_business_day(self, d: date) -> bool:
        """
        Check if a date is a business day.

        A business day is a weekday that is not a holiday. Half-weight
        holidays are not business days either.
        """
        if self.is_weekend(d):
            return False
        return not self.is_holiday(d)

    def get_holidays_in_range(self, start: date, end: date) -> list[date]:
        """Get all holidays within a date range (inclusive)."""
        return [d for d in iter_days(start, end) if self.is_holiday(d)]

    def add_business_days(self, start: date, days: int) -> date:
        """
        Add business days to a date.

        Args:
            start: Starting date
            days: Number of business days to add (can be negative)

        Returns:
            The resulting date after adding business days
        """
        if days == 0:
            return start

        direction = 1 if days > 0 else -1
        remaining = abs(days)
        current = start

        while remaining > 0:
            current += timedelta(days=direction)
            if self.is_business_day(current):
                remaining -= 1

        return current

    def business_days_between(self, start: date, end: date) -> int:
        """
        Count business days between two dates.

        Args:
            start: Start date (exclusive)
            end: End date (inclusive)

        Returns:
            Number of business days between the dates
        """
        if start >= end:
            return 0
        return sum(
            1 for d in iter_days(start + timedelta(days=1), end)
            if self.is_business_day(d)
        )

    def next_business_day(self, d: date) -> date:
        """Get the next business day on or after a date."""
        current = d
        while not self.is_business_day(current):
            current += timedelta(days=1)
        return current

    def previous_business_day(self, d: date) -> date:
        """Get the previous business day on or before a date."""
        current = d
        while not self.is_business_day(current):
            current -= timedelta(days=1)
        return current


@dataclass
class NoHolidayCalendar(BaseCalendar):
    """
    A calendar with no holidays.

    Only weekends are non-business days. Useful for testing.
    """

    def holiday_weight(self, d: date) -> Optional[HolidayWeight]:
        """No holidays in this calendar."""
        return None


@dataclass
class FixedHolidayCalendar(BaseCalendar):
    """
    A calendar with a fixed mapping of holiday dates to weights.

    Useful for testing or when holidays are provided externally.
    """

    holidays: dict[date, HolidayWeight] = field(default_factory=dict)

    def holiday_weight(self, d: date) -> Optional[HolidayWeight]:
        return self.holidays.get(d)

    @classmethod
    def from_dates(cls, *dates: date, weight: HolidayWeight = HolidayWeight.FULL) -> FixedHolidayCalendar:
        """Create a calendar where each given date is a holiday of one weight."""
        return cls(holidays={d: weight for d in dates})
