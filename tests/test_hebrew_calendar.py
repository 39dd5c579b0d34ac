from __future__ import annotations

from datetime import date, datetime

import pytest
from pyluach.dates import HebrewDate

from yidlist.const import ADAR_II, AV, TISHREI
from yidlist.errors import InvalidYear
from yidlist.hebrew_calendar import HebrewYear, evening_of, hebrew_date_at, validate_year


def test_evening_of_is_six_pm_on_the_eve():
    assert evening_of(HebrewDate(5785, TISHREI, 10)) == datetime(2024, 10, 11, 18)
    assert evening_of(HebrewDate(5785, TISHREI, 1)) == datetime(2024, 10, 2, 18)


def test_hebrew_date_at_rolls_over_at_evening():
    assert hebrew_date_at(datetime(2024, 10, 11, 17, 59)) == HebrewDate(5785, TISHREI, 9)
    assert hebrew_date_at(datetime(2024, 10, 11, 18)) == HebrewDate(5785, TISHREI, 10)
    assert hebrew_date_at(date(2024, 10, 12)) == HebrewDate(5785, TISHREI, 10)


def test_evening_round_trips():
    hdate = HebrewDate(5784, 12, 14)
    assert hebrew_date_at(evening_of(hdate)) == hdate


def test_leap_years():
    assert validate_year(5784).is_leap()
    assert not validate_year(5785).is_leap()


def test_year_bounds():
    hyear = validate_year(5785)
    assert hyear.first_day.to_pydate() == date(2024, 10, 3)
    assert hyear.last_day.to_pydate() == date(2025, 9, 22)


def test_resolve_date_missing_day():
    hyear = HebrewYear(5785)
    assert hyear.resolve_date(ADAR_II, 1) is None
    assert hyear.resolve_date(TISHREI, 1) == HebrewDate(5785, TISHREI, 1)
    assert HebrewYear(5784).resolve_date(ADAR_II, 1) is not None


def test_tisha_beav_postponed_from_shabbos():
    # 9 Av 5779 was Shabbos, the fast moved to Sunday
    assert HebrewYear(5779).tisha_beav() == HebrewDate(5779, AV, 10)
    assert HebrewYear(5779).tisha_beav().to_pydate() == date(2019, 8, 11)
    assert HebrewYear(5785).tisha_beav() == HebrewDate(5785, AV, 9)


@pytest.mark.parametrize("year", [0, -5, 20000])
def test_validate_year_rejects(year):
    with pytest.raises(InvalidYear) as info:
        validate_year(year)
    assert info.value.year == year
    assert str(year) in str(info.value)
