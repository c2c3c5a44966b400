"""
Holiday Calendar Tests

Covers the nationwide holidays, the per-state rule table, observance
start years, coinciding holidays and the business day helpers.
"""
from __future__ import annotations

from datetime import date

import pytest

from urlaubsplaner.calendars import (
    STATE_HOLIDAY_RULES,
    FixedHolidayCalendar,
    GermanStateCalendar,
    HolidayCalendar,
    NoHolidayCalendar,
    OptionalHoliday,
    holiday_map,
    holiday_on,
    holidays_for,
    is_holiday,
    optional_holidays_for,
)
from urlaubsplaner.canon import canonical_json, content_hash
from urlaubsplaner.exceptions import InvalidJurisdiction, InvalidYear
from urlaubsplaner.models import HolidayWeight, Jurisdiction


NATIONWIDE_2025 = {
    date(2025, 1, 1): "Neujahr",
    date(2025, 4, 18): "Karfreitag",
    date(2025, 4, 21): "Ostermontag",
    date(2025, 5, 1): "Tag der Arbeit",
    date(2025, 5, 29): "Christi Himmelfahrt",
    date(2025, 6, 9): "Pfingstmontag",
    date(2025, 10, 3): "Tag der Deutschen Einheit",
    date(2025, 12, 25): "1. Weihnachtstag",
    date(2025, 12, 26): "2. Weihnachtstag",
}


class TestNationwideHolidays:
    """Holidays every state shares."""

    @pytest.mark.parametrize("state", list(Jurisdiction))
    def test_nationwide_present_everywhere(self, state: Jurisdiction) -> None:
        holidays = holiday_map(2025, state)
        for d, name in NATIONWIDE_2025.items():
            assert holidays[d].name == name
            assert holidays[d].weight is HolidayWeight.FULL

    @pytest.mark.parametrize("state", list(Jurisdiction))
    def test_half_days(self, state: Jurisdiction) -> None:
        holidays = holiday_map(2025, state)
        assert holidays[date(2025, 12, 24)].weight is HolidayWeight.HALF
        assert holidays[date(2025, 12, 31)].weight is HolidayWeight.HALF
        assert holidays[date(2025, 12, 24)].name == "Heiligabend"
        assert holidays[date(2025, 12, 31)].name == "Silvester"

    def test_bavaria_2025_complete(self) -> None:
        dates = [entry.date for entry in holidays_for(2025, "BY")]
        assert dates == [
            date(2025, 1, 1),
            date(2025, 1, 6),
            date(2025, 4, 18),
            date(2025, 4, 21),
            date(2025, 5, 1),
            date(2025, 5, 29),
            date(2025, 6, 9),
            date(2025, 6, 19),
            date(2025, 10, 3),
            date(2025, 11, 1),
            date(2025, 12, 24),
            date(2025, 12, 25),
            date(2025, 12, 26),
            date(2025, 12, 31),
        ]

    def test_berlin_2025_complete(self) -> None:
        holidays = holiday_map(2025, Jurisdiction.BE)
        assert len(holidays) == 12
        assert date(2025, 3, 8) in holidays
        assert date(2025, 1, 6) not in holidays
        assert date(2025, 6, 19) not in holidays


class TestStateRules:
    """Per-state optional holidays."""

    def test_every_state_has_rules(self) -> None:
        assert set(STATE_HOLIDAY_RULES) == set(Jurisdiction)

    @pytest.mark.parametrize("state,expected", [
        ("BW", True), ("BY", True), ("ST", True),
        ("BE", False), ("NW", False), ("SN", False),
    ])
    def test_epiphany(self, state: str, expected: bool) -> None:
        assert is_holiday(date(2025, 1, 6), state) is expected

    @pytest.mark.parametrize("state,expected", [
        ("BW", True), ("BY", True), ("HE", True), ("NW", True), ("RP", True), ("SL", True),
        ("BE", False), ("HH", False), ("SN", False), ("TH", False),
    ])
    def test_corpus_christi(self, state: str, expected: bool) -> None:
        assert is_holiday(date(2025, 6, 19), state) is expected

    @pytest.mark.parametrize("state,expected", [
        ("BB", True), ("MV", True), ("SN", True), ("ST", True), ("TH", True),
        ("HB", True), ("HH", True), ("NI", True), ("SH", True),
        ("BY", False), ("BE", False), ("NW", False),
    ])
    def test_reformation_day(self, state: str, expected: bool) -> None:
        assert is_holiday(date(2025, 10, 31), state) is expected

    @pytest.mark.parametrize("state,expected", [
        ("BW", True), ("BY", True), ("NW", True), ("RP", True), ("SL", True),
        ("HE", False), ("BE", False),
    ])
    def test_all_saints(self, state: str, expected: bool) -> None:
        assert is_holiday(date(2025, 11, 1), state) is expected

    def test_assumption_only_saarland(self) -> None:
        assert is_holiday(date(2025, 8, 15), "SL")
        assert not is_holiday(date(2025, 8, 15), "BY")

    def test_womens_day_only_berlin(self) -> None:
        assert holiday_on(date(2025, 3, 8), "BE").name == "Internationaler Frauentag"
        assert not is_holiday(date(2025, 3, 8), "BB")

    def test_repentance_day_saxony(self) -> None:
        """Wednesday before November 23."""
        assert holiday_on(date(2025, 11, 19), "SN").name == "Buß- und Bettag"
        assert holiday_on(date(2023, 11, 22), "SN").name == "Buß- und Bettag"
        assert not is_holiday(date(2025, 11, 19), "BY")

    def test_childrens_day_thuringia(self) -> None:
        assert is_holiday(date(2025, 9, 20), "TH")
        assert not is_holiday(date(2025, 9, 20), "SN")


class TestObservanceStart:
    """Holidays introduced in a given year are not back-dated."""

    def test_womens_day_from_2019(self) -> None:
        assert not is_holiday(date(2018, 3, 8), "BE")
        assert is_holiday(date(2019, 3, 8), "BE")

    @pytest.mark.parametrize("state", ["HB", "HH", "NI", "SH"])
    def test_northern_reformation_day_from_2018(self, state: str) -> None:
        assert not is_holiday(date(2016, 10, 31), state)
        assert is_holiday(date(2018, 10, 31), state)

    def test_old_reformation_states_always(self) -> None:
        assert is_holiday(date(2000, 10, 31), "SN")
        assert is_holiday(date(2000, 10, 31), "BB")

    def test_childrens_day_from_2019(self) -> None:
        assert OptionalHoliday.CHILDRENS_DAY not in optional_holidays_for(2018, Jurisdiction.TH)
        assert OptionalHoliday.CHILDRENS_DAY in optional_holidays_for(2019, Jurisdiction.TH)


class TestHolidayList:
    """Shape and determinism of holidays_for()."""

    @pytest.mark.parametrize("state", list(Jurisdiction))
    def test_unique_sorted_dates(self, state: Jurisdiction) -> None:
        for year in range(2000, 2041):
            dates = [entry.date for entry in holidays_for(year, state)]
            assert dates == sorted(set(dates)), (state, year)
            assert all(d.year == year for d in dates)

    def test_coinciding_holidays_merged(self) -> None:
        """In 2008 Ascension fell on May 1."""
        entry = holiday_on(date(2008, 5, 1), "BE")
        assert entry.name == "Tag der Arbeit / Christi Himmelfahrt"
        assert entry.weight is HolidayWeight.FULL
        assert len([e for e in holidays_for(2008, "BE") if e.date == date(2008, 5, 1)]) == 1

    def test_state_code_case_insensitive(self) -> None:
        assert holidays_for(2025, "by") == holidays_for(2025, Jurisdiction.BY)

    def test_idempotent(self) -> None:
        first = canonical_json(holidays_for(2025, "NW"))
        second = canonical_json(holidays_for(2025, "NW"))
        assert first == second
        assert content_hash(holidays_for(2025, "NW")) == content_hash(holidays_for(2025, "NW"))

    def test_unknown_state_rejected(self) -> None:
        with pytest.raises(InvalidJurisdiction) as exc_info:
            holidays_for(2025, "XX")
        assert "BY" in exc_info.value.details["valid"]

    def test_invalid_year_rejected(self) -> None:
        with pytest.raises(InvalidYear):
            holidays_for(1500, "BY")


class TestGermanStateCalendar:
    """Business day helpers on a state calendar."""

    def test_satisfies_protocol(self) -> None:
        assert isinstance(GermanStateCalendar(jurisdiction=Jurisdiction.BE), HolidayCalendar)

    def test_accepts_code(self) -> None:
        calendar = GermanStateCalendar(jurisdiction="nw")
        assert calendar.jurisdiction is Jurisdiction.NW

    def test_holiday_weight_and_name(self) -> None:
        calendar = GermanStateCalendar(jurisdiction=Jurisdiction.BY)
        assert calendar.holiday_weight(date(2025, 6, 19)) is HolidayWeight.FULL
        assert calendar.holiday_weight(date(2025, 12, 31)) is HolidayWeight.HALF
        assert calendar.holiday_weight(date(2025, 6, 18)) is None
        assert calendar.get_holiday_name(date(2025, 6, 19)) == "Fronleichnam"
        assert calendar.get_holiday_name(date(2025, 6, 18)) is None

    def test_half_day_is_not_business_day(self) -> None:
        calendar = GermanStateCalendar(jurisdiction=Jurisdiction.BE)
        assert not calendar.is_business_day(date(2025, 12, 24))

    def test_next_business_day_over_christmas(self) -> None:
        calendar = GermanStateCalendar(jurisdiction=Jurisdiction.BE)
        assert calendar.next_business_day(date(2025, 12, 24)) == date(2025, 12, 29)
        assert calendar.previous_business_day(date(2025, 12, 28)) == date(2025, 12, 23)

    def test_add_business_days(self) -> None:
        calendar = GermanStateCalendar(jurisdiction=Jurisdiction.BE)
        assert calendar.add_business_days(date(2025, 12, 23), 1) == date(2025, 12, 29)
        assert calendar.add_business_days(date(2025, 12, 29), -1) == date(2025, 12, 23)
        assert calendar.add_business_days(date(2025, 12, 29), 0) == date(2025, 12, 29)

    def test_business_days_between(self) -> None:
        calendar = GermanStateCalendar(jurisdiction=Jurisdiction.BE)
        assert calendar.business_days_between(date(2025, 6, 1), date(2025, 6, 8)) == 5
        assert calendar.business_days_between(date(2025, 6, 8), date(2025, 6, 1)) == 0

    def test_holidays_in_range(self) -> None:
        calendar = GermanStateCalendar(jurisdiction=Jurisdiction.BE)
        assert calendar.get_holidays_in_range(date(2025, 12, 20), date(2025, 12, 31)) == [
            date(2025, 12, 24),
            date(2025, 12, 25),
            date(2025, 12, 26),
            date(2025, 12, 31),
        ]

    def test_get_holidays_for_year(self) -> None:
        pairs = GermanStateCalendar(jurisdiction=Jurisdiction.BE).get_holidays_for_year(2025)
        assert pairs[0] == (date(2025, 1, 1), "Neujahr")
        assert len(pairs) == 12


class TestSimpleCalendars:
    """Calendars used to isolate the engine from the German rules."""

    def test_no_holiday_calendar(self) -> None:
        calendar = NoHolidayCalendar()
        assert calendar.is_business_day(date(2025, 1, 1))
        assert not calendar.is_business_day(date(2025, 1, 4))

    def test_fixed_holiday_calendar(self) -> None:
        calendar = FixedHolidayCalendar.from_dates(date(2025, 6, 4), weight=HolidayWeight.HALF)
        assert calendar.holiday_weight(date(2025, 6, 4)) is HolidayWeight.HALF
        assert not calendar.is_business_day(date(2025, 6, 4))
        assert calendar.is_business_day(date(2025, 6, 5))

    def test_range_helpers_at_date_max(self) -> None:
        calendar = FixedHolidayCalendar.from_dates(date.max)
        assert calendar.get_holidays_in_range(date(9999, 12, 25), date.max) == [date.max]
        assert calendar.business_days_between(date(9999, 12, 27), date.max) == 3
