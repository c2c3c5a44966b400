"""
Urlaubsplaner Quota Accountant

Computes consumed and remaining vacation days for a user and a year.

Charging rules:
- UR (full vacation) is one full-day charge
- UR/2 (half vacation) is one half-day charge
- UR on a half-day holiday (Dec 24, Dec 31) is a half-day charge, since
  only half of that day is a working obligation
- SUR (special leave) and UUR (unpaid leave) are counted but not deducted

Absences on weekends or full holidays are kept and charged at their own
weight. They are reported as AbsenceWarning (or raised as
InconsistentAbsence in strict mode) so the boundary layer can flag them.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Mapping, Optional, Union

from ..exceptions import InconsistentAbsence, UrlaubsplanerError
from ..models import (
    AbsenceMap,
    AbsenceType,
    AbsenceWarning,
    DayKind,
    Jurisdiction,
    QuotaResult,
)
from .classifier import WorkingDayClassifier

logger = logging.getLogger(__name__)

Allowance = Union[Decimal, int, float, str]


def to_days(value: Allowance) -> Decimal:
    """
    Normalize an allowance (int, float, Decimal or numeric string) to Decimal.

    Floats go through str() so 27.5 stays 27.5. NaN and infinities are
    rejected.
    """
    if isinstance(value, bool):
        raise UrlaubsplanerError(
            message="Allowance must be numeric, got bool",
            code="UP_INVALID_ALLOWANCE",
        )
    try:
        days = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as e:
        raise UrlaubsplanerError(
            message=f"Allowance is not a number: {value!r}",
            code="UP_INVALID_ALLOWANCE",
            details={"value": repr(value)},
        ) from e
    if not days.is_finite():
        raise UrlaubsplanerError(
            message=f"Allowance must be finite: {value!r}",
            code="UP_INVALID_ALLOWANCE",
            details={"value": repr(value)},
        )
    return days


def resolve_base_allowance(
    year: int,
    quotas: Mapping[int, Allowance],
    default_quota: Allowance,
) -> Decimal:
    """
    Allowance for a year: the per-year override if one is stored,
    otherwise the user's default quota.
    """
    if year in quotas:
        return to_days(quotas[year])
    return to_days(default_quota)


@dataclass
class QuotaAccountant:
    """
    Accumulates absences into a QuotaResult.

    Usage:
        accountant = QuotaAccountant.for_jurisdiction("BY")
        result = accountant.accumulate(2025, 30, absences)
        print(f"{result.remaining} days left")
    """

    classifier: WorkingDayClassifier

    # Raise InconsistentAbsence instead of collecting warnings
    strict: bool = False

    @classmethod
    def for_jurisdiction(
        cls,
        jurisdiction: Union[Jurisdiction, str],
        strict: bool = False,
    ) -> QuotaAccountant:
        return cls(classifier=WorkingDayClassifier.for_jurisdiction(jurisdiction), strict=strict)

    def accumulate(
        self,
        year: int,
        base_allowance: Allowance,
        absence_map: AbsenceMap,
    ) -> QuotaResult:
        """
        Compute the quota result for one year.

        Args:
            year: Year to account; absences in other years are ignored
            base_allowance: Days granted for the year
            absence_map: date -> AbsenceType (not modified)

        Returns:
            QuotaResult with counts, warnings and remaining days

        Raises:
            InconsistentAbsence: In strict mode, for an absence on a non-workday
        """
        allowance = to_days(base_allowance)
        full = half = special = unpaid = 0
        warnings: list[AbsenceWarning] = []

        for d in sorted(d for d in absence_map if d.year == year):
            absence_type = AbsenceType.from_code(absence_map[d])
            kind = self.classifier.classify(d)

            if not kind.is_workday:
                warning = AbsenceWarning(
                    date=d,
                    absence_type=absence_type,
                    day_kind=kind,
                    holiday_name=self.classifier.holiday_name(d),
                )
                if self.strict:
                    raise InconsistentAbsence(
                        message=warning.message,
                        details=warning.to_dict(),
                    )
                logger.warning(warning.message)
                warnings.append(warning)

            if absence_type.deducts_quota:
                if absence_type is AbsenceType.HALF_VACATION or kind is DayKind.HOLIDAY_HALF:
                    half += 1
                else:
                    full += 1
            elif absence_type is AbsenceType.SPECIAL_LEAVE:
                special += 1
            else:
                unpaid += 1

        result = QuotaResult(
            year=year,
            base_allowance=allowance,
            consumed_full=full,
            consumed_half=half,
            special_leave=special,
            unpaid_leave=unpaid,
            warnings=tuple(warnings),
        )
        logger.debug(
            "Quota %d: base=%s consumed=%s remaining=%s",
            year, result.base_allowance, result.consumed, result.remaining,
        )
        return result

    def accumulate_all(
        self,
        absence_map: AbsenceMap,
        quotas: Mapping[int, Allowance],
        default_quota: Allowance,
    ) -> list[QuotaResult]:
        """
        One QuotaResult per year that has absences or a quota override,
        in year order.
        """
        years = sorted({d.year for d in absence_map} | set(quotas))
        return [
            self.accumulate(year, resolve_base_allowance(year, quotas, default_quota), absence_map)
            for year in years
        ]


# =============================================================================
# Convenience Functions
# =============================================================================

def accumulate(
    year: int,
    base_allowance: Allowance,
    absence_map: AbsenceMap,
    jurisdiction: Union[Jurisdiction, str],
    strict: bool = False,
) -> QuotaResult:
    """
    Compute consumed and remaining vacation days for a year.

    Raises:
        InvalidJurisdiction: If the state code is unknown
        InconsistentAbsence: In strict mode, for an absence on a non-workday
    """
    accountant = QuotaAccountant.for_jurisdiction(jurisdiction, strict=strict)
    return accountant.accumulate(year, base_allowance, absence_map)


def remaining_days(
    year: int,
    absence_map: AbsenceMap,
    jurisdiction: Union[Jurisdiction, str],
    quotas: Optional[Mapping[int, Allowance]] = None,
    default_quota: Allowance = 30,
) -> Decimal:
    """Remaining days for a year, resolving the allowance from overrides."""
    allowance = resolve_base_allowance(year, quotas or {}, default_quota)
    return accumulate(year, allowance, absence_map, jurisdiction).remaining
