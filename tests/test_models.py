"""
Model and Exception Tests

Enum parsing, value objects and the error hierarchy.
"""
from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from urlaubsplaner.canon import canonical_json, content_hash
from urlaubsplaner.exceptions import (
    InconsistentAbsence,
    InvalidAbsenceType,
    InvalidDate,
    InvalidJurisdiction,
    InvalidYear,
    LedgerLoadError,
    LedgerValidationError,
    UrlaubsplanerError,
)
from urlaubsplaner.models import (
    AbsenceType,
    AbsenceWarning,
    DayKind,
    HolidayEntry,
    HolidayWeight,
    Jurisdiction,
    Ledger,
)


class TestJurisdiction:

    def test_sixteen_states(self) -> None:
        assert len(Jurisdiction) == 16

    def test_from_code_normalizes(self) -> None:
        assert Jurisdiction.from_code(" by ") is Jurisdiction.BY
        assert Jurisdiction.from_code(Jurisdiction.TH) is Jurisdiction.TH

    def test_from_code_rejects(self) -> None:
        with pytest.raises(InvalidJurisdiction) as exc_info:
            Jurisdiction.from_code("Bayern")
        assert exc_info.value.details["jurisdiction"] == "Bayern"
        with pytest.raises(InvalidJurisdiction):
            Jurisdiction.from_code(None)

    def test_display_name(self) -> None:
        assert Jurisdiction.BW.display_name == "Baden-Württemberg"
        assert all(j.display_name for j in Jurisdiction)


class TestAbsenceType:

    @pytest.mark.parametrize("code,expected", [
        ("UR", AbsenceType.FULL_VACATION),
        ("UR/2", AbsenceType.HALF_VACATION),
        ("SUR", AbsenceType.SPECIAL_LEAVE),
        ("UUR", AbsenceType.UNPAID_LEAVE),
        ("half_vacation", AbsenceType.HALF_VACATION),
    ])
    def test_from_code(self, code: str, expected: AbsenceType) -> None:
        assert AbsenceType.from_code(code) is expected

    def test_from_code_rejects(self) -> None:
        with pytest.raises(InvalidAbsenceType) as exc_info:
            AbsenceType.from_code("K")
        assert exc_info.value.code == "UP_INVALID_ABSENCE_TYPE"
        assert "UR/2" in exc_info.value.details["valid"]

    def test_deducts_quota(self) -> None:
        deducting = {t for t in AbsenceType if t.deducts_quota}
        assert deducting == {AbsenceType.FULL_VACATION, AbsenceType.HALF_VACATION}


class TestValueObjects:

    def test_holiday_entry(self) -> None:
        entry = HolidayEntry(date(2025, 12, 24), "Heiligabend", HolidayWeight.HALF)
        assert entry.is_half
        assert entry.to_dict() == {"date": "2025-12-24", "name": "Heiligabend", "weight": "half"}

    def test_holiday_entry_frozen(self) -> None:
        entry = HolidayEntry(date(2025, 1, 1), "Neujahr")
        with pytest.raises(AttributeError):
            entry.name = "Silvester"

    def test_absence_warning_message(self) -> None:
        warning = AbsenceWarning(
            date=date(2025, 6, 7),
            absence_type=AbsenceType.FULL_VACATION,
            day_kind=DayKind.WEEKEND,
        )
        assert warning.message == "UR on 2025-06-07 is not a working day (weekend)"


class TestLedger:

    def test_years(self) -> None:
        ledger = Ledger(
            quotas={2027: Decimal("25")},
            absences={date(2025, 6, 2): AbsenceType.FULL_VACATION},
        )
        assert ledger.years() == [2025, 2027]

    def test_absences_for_year(self) -> None:
        ledger = Ledger(absences={
            date(2024, 12, 30): AbsenceType.FULL_VACATION,
            date(2025, 1, 2): AbsenceType.FULL_VACATION,
        })
        assert list(ledger.absences_for_year(2025)) == [date(2025, 1, 2)]

    def test_updates_return_copies(self) -> None:
        ledger = Ledger()
        updated = ledger.with_absences({date(2025, 6, 2): AbsenceType.SPECIAL_LEAVE})
        updated = updated.with_quota(2025, Decimal("20"))
        assert ledger.absences == {}
        assert ledger.quotas == {}
        assert updated.base_allowance(2025) == Decimal("20")
        assert updated.without_absences([date(2025, 6, 2)]).absences == {}


class TestExceptions:
    """Error hierarchy and serialization."""

    @pytest.mark.parametrize("exc_class,code", [
        (InvalidJurisdiction, "UP_INVALID_JURISDICTION"),
        (InvalidYear, "UP_INVALID_YEAR"),
        (InvalidAbsenceType, "UP_INVALID_ABSENCE_TYPE"),
        (InvalidDate, "UP_INVALID_DATE"),
        (InconsistentAbsence, "UP_INCONSISTENT_ABSENCE"),
        (LedgerLoadError, "UP_LEDGER_LOAD_ERROR"),
        (LedgerValidationError, "UP_LEDGER_VALIDATION_ERROR"),
    ])
    def test_codes(self, exc_class, code: str) -> None:
        exc = exc_class(message="boom")
        assert exc.code == code
        assert isinstance(exc, UrlaubsplanerError)
        assert str(exc) == f"[{code}] boom"

    def test_to_dict(self) -> None:
        exc = InvalidYear(message="Year 1500", details={"year": 1500})
        assert exc.to_dict() == {
            "code": "UP_INVALID_YEAR",
            "message": "Year 1500",
            "details": {"year": 1500},
        }
        assert "details" not in UrlaubsplanerError(message="plain").to_dict()

    def test_catchable_as_base(self) -> None:
        with pytest.raises(UrlaubsplanerError):
            raise LedgerLoadError(message="no file")


class TestCanon:
    """Canonical JSON."""

    def test_sorted_compact(self) -> None:
        assert canonical_json({"b": 1, "a": 2}) == '{"a":2,"b":1}'

    def test_domain_types(self) -> None:
        data = {
            "date": date(2025, 6, 2),
            "days": Decimal("29.5"),
            "kind": DayKind.WORKDAY,
            "states": {"BY", "BE"},
        }
        assert canonical_json(data) == (
            '{"date":"2025-06-02","days":"29.5","kind":"workday","states":["BE","BY"]}'
        )

    def test_unicode_preserved(self) -> None:
        assert "ß" in canonical_json({"name": "Buß- und Bettag"})

    def test_unserializable(self) -> None:
        with pytest.raises(TypeError):
            canonical_json({"x": object()})

    def test_content_hash(self) -> None:
        first = content_hash({"a": 1, "b": [1, 2]})
        assert first == content_hash({"b": [1, 2], "a": 1})
        assert len(first) == 64
