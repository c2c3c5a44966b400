"""
Urlaubsplaner Models

Value objects shared by the calendars and the engine.
"""
from __future__ import annotations

# =============================================================================
# Enums
# =============================================================================
from .enums import (
    AbsenceType,
    DayKind,
    HolidayWeight,
    Jurisdiction,
)

# =============================================================================
# Holidays
# =============================================================================
from .holiday import HolidayEntry

# =============================================================================
# Quota
# =============================================================================
from .quota import (
    HALF_DAY,
    AbsenceMap,
    AbsenceWarning,
    QuotaResult,
)

# =============================================================================
# Ledger
# =============================================================================
from .ledger import Ledger

__all__ = [
    # Enums
    "AbsenceType",
    "DayKind",
    "HolidayWeight",
    "Jurisdiction",
    # Holidays
    "HolidayEntry",
    # Quota
    "HALF_DAY",
    "AbsenceMap",
    "AbsenceWarning",
    "QuotaResult",
    # Ledger
    "Ledger",
]
