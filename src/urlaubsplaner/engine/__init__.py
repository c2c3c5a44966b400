"""
Urlaubsplaner Engine

Pure computations on top of the holiday calendars:

- WorkingDayClassifier: weekend / full holiday / half holiday / workday
- SelectionRangeExpander: working days between two clicked dates
- QuotaAccountant: consumed and remaining vacation days

Every operation is a deterministic function of its arguments; nothing is
stored between calls.
"""
from __future__ import annotations

from .classifier import (
    WorkingDayClassifier,
    classify,
    classify_year,
)
from .quota_accountant import (
    QuotaAccountant,
    accumulate,
    remaining_days,
    resolve_base_allowance,
    to_days,
)
from .selection import (
    SelectionRangeExpander,
    expand_range,
    iter_range,
)

__all__ = [
    # Classification
    "WorkingDayClassifier",
    "classify",
    "classify_year",
    # Selection
    "SelectionRangeExpander",
    "expand_range",
    "iter_range",
    # Quota
    "QuotaAccountant",
    "accumulate",
    "remaining_days",
    "resolve_base_allowance",
    "to_days",
]
