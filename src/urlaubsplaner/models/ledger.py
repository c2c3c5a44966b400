"""
Urlaubsplaner Ledger Model

A user's stored vacation data as the persistence layer hands it over:
state, default quota, per-year quota overrides and the absence map.

Ledgers are immutable; the with_/without_ methods return updated copies.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from typing import Iterable, Mapping, Optional

from .enums import AbsenceType, Jurisdiction


@dataclass(frozen=True)
class Ledger:
    """
    Attributes:
        state: Federal state whose holidays apply
        default_quota: Vacation days per year without an override
        quotas: year -> days, explicit per-year overrides
        absences: date -> AbsenceType, at most one type per date
        user: Optional user name, informational only
        display_name: Optional name shown to the user, informational only
    """
    state: Jurisdiction = Jurisdiction.BY
    default_quota: Decimal = Decimal("30")
    quotas: Mapping[int, Decimal] = field(default_factory=dict)
    absences: Mapping[date, AbsenceType] = field(default_factory=dict)
    user: Optional[str] = None
    display_name: Optional[str] = None

    def base_allowance(self, year: int) -> Decimal:
        """Per-year override if present, else the default quota."""
        return self.quotas.get(year, self.default_quota)

    def absences_for_year(self, year: int) -> dict[date, AbsenceType]:
        return {d: t for d, t in self.absences.items() if d.year == year}

    def years(self) -> list[int]:
        """Years that have absences or a quota override, ascending."""
        return sorted({d.year for d in self.absences} | set(self.quotas))

    def with_absences(self, updates: Mapping[date, AbsenceType]) -> Ledger:
        """Insert or replace absences; later types overwrite earlier ones."""
        merged = dict(self.absences)
        merged.update(updates)
        return replace(self, absences=merged)

    def without_absences(self, dates: Iterable[date]) -> Ledger:
        drop = set(dates)
        return replace(self, absences={d: t for d, t in self.absences.items() if d not in drop})

    def with_quota(self, year: int, quota: Decimal) -> Ledger:
        quotas = dict(self.quotas)
        quotas[year] = quota
        return replace(self, quotas=quotas)
