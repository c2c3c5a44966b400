"""
Urlaubsplaner: Holiday Calendar and Vacation Quota Engine

Computes the public holidays of the 16 German federal states, classifies
working days, expands selection ranges and accounts vacation quotas.

Core Principle: Same date + Same state = Same answer

Quick Start:
    from datetime import date
    from urlaubsplaner import holidays_for, expand_range, accumulate, AbsenceType

    # Holidays
    for entry in holidays_for(2025, "BY"):
        print(entry.date, entry.name)

    # Selection range (click order does not matter)
    days = expand_range(date(2025, 6, 6), date(2025, 6, 2), "BE")

    # Quota
    absences = {d: AbsenceType.FULL_VACATION for d in days}
    result = accumulate(2025, 30, absences, "BE")
    print(result.remaining)   # 25
"""

__version__ = "0.1.0"

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    InconsistentAbsence,
    InvalidAbsenceType,
    InvalidDate,
    InvalidJurisdiction,
    InvalidYear,
    LedgerLoadError,
    LedgerValidationError,
    UrlaubsplanerError,
)

# =============================================================================
# Models
# =============================================================================
from .models import (
    AbsenceType,
    AbsenceWarning,
    DayKind,
    HolidayEntry,
    HolidayWeight,
    Jurisdiction,
    Ledger,
    QuotaResult,
)

# =============================================================================
# Calendars
# =============================================================================
from .calendars import (
    GermanStateCalendar,
    easter_sunday,
    holiday_map,
    holidays_for,
    is_holiday,
)

# =============================================================================
# Engine
# =============================================================================
from .engine import (
    QuotaAccountant,
    SelectionRangeExpander,
    WorkingDayClassifier,
    accumulate,
    classify,
    expand_range,
    remaining_days,
)

# =============================================================================
# Configuration and Ledgers
# =============================================================================
from .config import EngineSettings, configure_logging
from .ledger import LedgerLoader, load_ledger

__all__ = [
    "__version__",
    # Exceptions
    "UrlaubsplanerError",
    "InvalidJurisdiction",
    "InvalidYear",
    "InvalidAbsenceType",
    "InvalidDate",
    "InconsistentAbsence",
    "LedgerLoadError",
    "LedgerValidationError",
    # Models
    "AbsenceType",
    "AbsenceWarning",
    "DayKind",
    "HolidayEntry",
    "HolidayWeight",
    "Jurisdiction",
    "Ledger",
    "QuotaResult",
    # Calendars
    "GermanStateCalendar",
    "easter_sunday",
    "holidays_for",
    "holiday_map",
    "is_holiday",
    # Engine
    "WorkingDayClassifier",
    "SelectionRangeExpander",
    "QuotaAccountant",
    "classify",
    "expand_range",
    "accumulate",
    "remaining_days",
    # Configuration and ledgers
    "EngineSettings",
    "configure_logging",
    "LedgerLoader",
    "load_ledger",
]
