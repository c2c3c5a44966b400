"""
Urlaubsplaner Enumerations

All enumeration types used by the calendar and quota engine.

All enums inherit from (str, Enum) for JSON serialization compatibility.
"""
from __future__ import annotations

from enum import Enum
from typing import Union

from ..exceptions import InvalidAbsenceType, InvalidJurisdiction


# =============================================================================
# Jurisdictions
# =============================================================================

class Jurisdiction(str, Enum):
    """German federal states, by their two-letter abbreviation."""
    BW = "BW"
    BY = "BY"
    BE = "BE"
    BB = "BB"
    HB = "HB"
    HH = "HH"
    HE = "HE"
    MV = "MV"
    NI = "NI"
    NW = "NW"
    RP = "RP"
    SL = "SL"
    SN = "SN"
    ST = "ST"
    SH = "SH"
    TH = "TH"

    @property
    def display_name(self) -> str:
        return _STATE_NAMES[self]

    @classmethod
    def from_code(cls, code: Union[str, "Jurisdiction"]) -> "Jurisdiction":
        """
        Resolve a state code (case-insensitive) to a Jurisdiction.

        Raises:
            InvalidJurisdiction: If the code is not a known state
        """
        if isinstance(code, cls):
            return code
        if isinstance(code, str):
            try:
                return cls(code.strip().upper())
            except ValueError:
                pass
        raise InvalidJurisdiction(
            message=f"Unknown jurisdiction: {code!r}",
            details={"jurisdiction": str(code), "valid": [j.value for j in cls]},
        )


_STATE_NAMES: dict[Jurisdiction, str] = {
    Jurisdiction.BW: "Baden-Württemberg",
    Jurisdiction.BY: "Bayern",
    Jurisdiction.BE: "Berlin",
    Jurisdiction.BB: "Brandenburg",
    Jurisdiction.HB: "Bremen",
    Jurisdiction.HH: "Hamburg",
    Jurisdiction.HE: "Hessen",
    Jurisdiction.MV: "Mecklenburg-Vorpommern",
    Jurisdiction.NI: "Niedersachsen",
    Jurisdiction.NW: "Nordrhein-Westfalen",
    Jurisdiction.RP: "Rheinland-Pfalz",
    Jurisdiction.SL: "Saarland",
    Jurisdiction.SN: "Sachsen",
    Jurisdiction.ST: "Sachsen-Anhalt",
    Jurisdiction.SH: "Schleswig-Holstein",
    Jurisdiction.TH: "Thüringen",
}


# =============================================================================
# Holiday Weight
# =============================================================================

class HolidayWeight(str, Enum):
    """How much of the working obligation a holiday removes."""
    FULL = "full"
    HALF = "half"                        # Christmas Eve, New Year's Eve


# =============================================================================
# Day Classification
# =============================================================================

class DayKind(str, Enum):
    """Working-day status of a single calendar date."""
    WEEKEND = "weekend"
    HOLIDAY_FULL = "holiday_full"
    HOLIDAY_HALF = "holiday_half"
    WORKDAY = "workday"

    @property
    def is_workday(self) -> bool:
        return self is DayKind.WORKDAY


# =============================================================================
# Absence Types
# =============================================================================

class AbsenceType(str, Enum):
    """
    Absence markings a user can put on a day.

    Values are the codes stored by the persistence layer.
    Only the two vacation types are deducted from the quota.
    """
    FULL_VACATION = "UR"                 # Urlaub
    HALF_VACATION = "UR/2"               # halber Urlaubstag
    SPECIAL_LEAVE = "SUR"                # Sonderurlaub
    UNPAID_LEAVE = "UUR"                 # unbezahlter Urlaub

    @property
    def deducts_quota(self) -> bool:
        return self in (AbsenceType.FULL_VACATION, AbsenceType.HALF_VACATION)

    @classmethod
    def from_code(cls, code: Union[str, "AbsenceType"]) -> "AbsenceType":
        """
        Resolve a stored absence code to an AbsenceType.

        Accepts the stored code ("UR") or the member name ("FULL_VACATION").

        Raises:
            InvalidAbsenceType: If the code is not in the enumeration
        """
        if isinstance(code, cls):
            return code
        if isinstance(code, str):
            try:
                return cls(code)
            except ValueError:
                member = cls.__members__.get(code.upper())
                if member is not None:
                    return member
        raise InvalidAbsenceType(
            message=f"Invalid absence type: {code!r}",
            details={"absence_type": str(code), "valid": [t.value for t in cls]},
        )
