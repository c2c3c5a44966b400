"""
Urlaubsplaner Quota Models

Models for vacation quota accounting.

Key components:
- AbsenceMap: date -> AbsenceType, as supplied by the persistence layer
- AbsenceWarning: an absence stored on a non-working day
- QuotaResult: consumed and remaining allowance for one year

All values are computed on demand and never persisted by the engine.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Mapping, Optional

from .enums import AbsenceType, DayKind


AbsenceMap = Mapping[date, AbsenceType]

HALF_DAY = Decimal("0.5")


# =============================================================================
# Absence Warning
# =============================================================================

@dataclass(frozen=True)
class AbsenceWarning:
    """
    An absence that falls on a weekend or public holiday.

    Such absences are kept (e.g. imported legacy data) and still counted,
    but surfaced so the boundary layer can flag a likely data-entry mistake.
    """
    date: date
    absence_type: AbsenceType
    day_kind: DayKind
    holiday_name: Optional[str] = None

    @property
    def message(self) -> str:
        where = self.holiday_name or self.day_kind.value
        return (
            f"{self.absence_type.value} on {self.date.isoformat()} "
            f"is not a working day ({where})"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "absence_type": self.absence_type.value,
            "day_kind": self.day_kind.value,
            "holiday_name": self.holiday_name,
        }


# =============================================================================
# Quota Result
# =============================================================================

@dataclass(frozen=True)
class QuotaResult:
    """
    Vacation allowance accounting for one user and one year.

    Attributes:
        year: Accounted year
        base_allowance: Days granted for the year
        consumed_full: Number of full-day charges (1.0 each)
        consumed_half: Number of half-day charges (0.5 each)
        special_leave: Days of special leave (informational)
        unpaid_leave: Days of unpaid leave (informational)
        warnings: Absences stored on non-working days
    """
    year: int
    base_allowance: Decimal
    consumed_full: int = 0
    consumed_half: int = 0
    special_leave: int = 0
    unpaid_leave: int = 0
    warnings: tuple[AbsenceWarning, ...] = field(default_factory=tuple)

    @property
    def consumed(self) -> Decimal:
        """Days deducted from the allowance."""
        return Decimal(self.consumed_full) + HALF_DAY * self.consumed_half

    @property
    def remaining(self) -> Decimal:
        """Days left: base - full - 0.5 * half."""
        return self.base_allowance - self.consumed

    @property
    def is_overdrawn(self) -> bool:
        return self.remaining < 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize for display and canonical hashing."""
        return {
            "year": self.year,
            "base_allowance": str(self.base_allowance),
            "consumed_full": self.consumed_full,
            "consumed_half": self.consumed_half,
            "consumed": str(self.consumed),
            "remaining": str(self.remaining),
            "special_leave": self.special_leave,
            "unpaid_leave": self.unpaid_leave,
            "warnings": [w.to_dict() for w in self.warnings],
        }
