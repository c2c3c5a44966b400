"""
Urlaubsplaner Working Day Classifier

Classifies a single date as weekend, full holiday, half holiday or workday
by composing the weekday lookup with a holiday calendar.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from ..calendars import GermanStateCalendar, HolidayCalendar, iter_days
from ..models import DayKind, HolidayWeight, Jurisdiction


@dataclass
class WorkingDayClassifier:
    """
    Maps dates to DayKind for one holiday calendar.

    Weekend is checked first: a holiday on a Saturday or Sunday is reported
    as WEEKEND. Consumers treat every non-WORKDAY kind as a day to skip, so
    the precedence only affects labelling.

    Usage:
        classifier = WorkingDayClassifier.for_jurisdiction("BY")
        classifier.classify(date(2025, 1, 6))    # DayKind.HOLIDAY_FULL
        classifier.classify(date(2025, 12, 24))  # DayKind.HOLIDAY_HALF
    """

    calendar: HolidayCalendar

    @classmethod
    def for_jurisdiction(cls, jurisdiction: Union[Jurisdiction, str]) -> WorkingDayClassifier:
        """
        Raises:
            InvalidJurisdiction: If the state code is unknown
        """
        return cls(calendar=GermanStateCalendar(jurisdiction=Jurisdiction.from_code(jurisdiction)))

    def classify(self, d: date) -> DayKind:
        if self.calendar.is_weekend(d):
            return DayKind.WEEKEND
        weight = self.calendar.holiday_weight(d)
        if weight is HolidayWeight.FULL:
            return DayKind.HOLIDAY_FULL
        if weight is HolidayWeight.HALF:
            return DayKind.HOLIDAY_HALF
        return DayKind.WORKDAY

    def is_workday(self, d: date) -> bool:
        return self.classify(d) is DayKind.WORKDAY

    def holiday_name(self, d: date) -> Optional[str]:
        return self.calendar.get_holiday_name(d)

    def classify_year(self, year: int) -> dict[date, DayKind]:
        """Classification of every date of a year, in calendar order."""
        return {
            d: self.classify(d)
            for d in iter_days(date(year, 1, 1), date(year, 12, 31))
        }


# =============================================================================
# Convenience Functions
# =============================================================================

def classify(d: date, jurisdiction: Union[Jurisdiction, str]) -> DayKind:
    """
    Classify a date for a federal state.

    Raises:
        InvalidJurisdiction: If the state code is unknown
    """
    return WorkingDayClassifier.for_jurisdiction(jurisdiction).classify(d)


def classify_year(year: int, jurisdiction: Union[Jurisdiction, str]) -> dict[date, DayKind]:
    """Classify every date of a year for a federal state."""
    return WorkingDayClassifier.for_jurisdiction(jurisdiction).classify_year(year)
