"""
Urlaubsplaner Holiday Models

Value objects produced by the holiday calendar.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

from .enums import HolidayWeight


@dataclass(frozen=True)
class HolidayEntry:
    """
    A public holiday on a specific date.

    Produced fresh per (year, jurisdiction); carries no persisted identity.

    Attributes:
        date: Calendar date of the holiday
        name: German label (e.g. "Karfreitag")
        weight: FULL or HALF
    """
    date: date
    name: str
    weight: HolidayWeight = HolidayWeight.FULL

    @property
    def is_half(self) -> bool:
        return self.weight is HolidayWeight.HALF

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "name": self.name,
            "weight": self.weight.value,
        }
