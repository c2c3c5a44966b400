"""
Urlaubsplaner Selection Range Expander

Turns a shift-click selection (anchor date + target date) into the dates
that may be bulk-edited: every working day between the two, inclusive.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterator, Union

from ..calendars import iter_days
from ..models import Jurisdiction
from .classifier import WorkingDayClassifier


@dataclass
class SelectionRangeExpander:
    """
    Expands selection ranges against one working day classifier.

    Weekends, full holidays and half holidays are excluded. Ranges may
    span a year boundary.
    """

    classifier: WorkingDayClassifier

    @classmethod
    def for_jurisdiction(cls, jurisdiction: Union[Jurisdiction, str]) -> SelectionRangeExpander:
        return cls(classifier=WorkingDayClassifier.for_jurisdiction(jurisdiction))

    def iter_range(self, anchor: date, target: date) -> Iterator[date]:
        """Lazily yield the editable dates in ascending order."""
        start, end = min(anchor, target), max(anchor, target)
        for d in iter_days(start, end):
            if self.classifier.is_workday(d):
                yield d

    def expand(self, anchor: date, target: date) -> list[date]:
        """
        Editable dates between anchor and target, both inclusive.

        Click order does not matter. An empty list means there is
        nothing to add (e.g. a single click on a holiday).
        """
        return list(self.iter_range(anchor, target))


# =============================================================================
# Convenience Functions
# =============================================================================

def iter_range(anchor: date, target: date, jurisdiction: Union[Jurisdiction, str]) -> Iterator[date]:
    return SelectionRangeExpander.for_jurisdiction(jurisdiction).iter_range(anchor, target)


def expand_range(anchor: date, target: date, jurisdiction: Union[Jurisdiction, str]) -> list[date]:
    """
    Expand a selection range for a federal state.

    Args:
        anchor: First clicked date
        target: Second clicked date (may be before the anchor)
        jurisdiction: State whose holidays are skipped

    Returns:
        Ascending list of working days in the closed range

    Raises:
        InvalidJurisdiction: If the state code is unknown
    """
    return SelectionRangeExpander.for_jurisdiction(jurisdiction).expand(anchor, target)
