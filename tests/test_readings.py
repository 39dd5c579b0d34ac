from __future__ import annotations

from datetime import date

from pyluach.dates import HebrewDate

from yidlist import readings
from yidlist.const import ADAR, ADAR_II, AV, CHESHVAN, KISLEV, NISSAN, TISHREI
from yidlist.models import Location, ReadingKind


def _keys(pairs):
    return [reading.key for reading, _ in pairs]


def test_yom_tov_diaspora_and_israel():
    diaspora = _keys(readings.yom_tov(5785, Location.DIASPORA))
    israel = _keys(readings.yom_tov(5785, Location.ISRAEL))
    assert len(diaspora) == 22
    assert set(diaspora) - set(israel) == {"SimchasTorah", "Pesach8", "Shavuos2"}
    assert "Sukkos2" in israel


def test_yom_kippur_date():
    found = dict((r.key, d) for r, d in readings.yom_tov(5785, Location.DIASPORA))
    assert found["YomKippur"] == HebrewDate(5785, TISHREI, 10)
    assert found["Pesach1"].to_pydate() == date(2025, 4, 13)


def test_fasts_on_observed_days():
    fasts_5779 = dict((r.key, d) for r, d in readings.fasts(5779))
    assert len(fasts_5779) == 5
    assert fasts_5779["NineAv"] == HebrewDate(5779, AV, 10)

    fasts_5785 = dict((r.key, d) for r, d in readings.fasts(5785))
    assert fasts_5785["NineAv"] == HebrewDate(5785, AV, 9)
    assert fasts_5785["TzomGedalia"] == HebrewDate(5785, TISHREI, 4)


def test_chanukah_has_eight_days():
    days = readings.chanukah(5785)
    assert _keys(days) == [f"Chanukah{n}" for n in range(1, 9)]
    assert days[0][1] == HebrewDate(5785, KISLEV, 25)
    assert days[-1][1] - days[0][1] == 7


def test_rosh_chodesh_two_days_after_full_month():
    rc = dict((r.key, d) for r, d in readings.rosh_chodesh(5785))
    # Tishrei always has 30 days
    assert rc["RoshChodeshCheshvan1"] == HebrewDate(5785, TISHREI, 30)
    assert rc["RoshChodeshCheshvan2"] == HebrewDate(5785, CHESHVAN, 1)
    assert not any(key.startswith("RoshChodeshTishrei") for key in rc)


def test_rosh_chodesh_leap_year_names():
    keys = _keys(readings.rosh_chodesh(5784))
    assert any(key.startswith("RoshChodeshAdarRishon") for key in keys)
    assert any(key.startswith("RoshChodeshAdarSheni") for key in keys)
    assert not any(key.startswith("RoshChodeshAdar1") for key in keys)


def test_purim_in_last_adar():
    purim = dict((r.key, d) for r, d in readings.purim(5784))
    assert purim["Purim"] == HebrewDate(5784, 13, 14)
    assert purim["ShushanPurim"] == HebrewDate(5784, 13, 15)


def test_weekly_parsha_on_shabbos():
    for location in Location:
        parshas = readings.weekly_parsha(5785, location)
        assert parshas
        for reading, hdate in parshas:
            assert reading.kind is ReadingKind.SHABBOS
            assert hdate.to_pydate().weekday() == 5


def test_weekly_parsha_doubled_names():
    parshas = readings.weekly_parsha(5785, Location.DIASPORA)
    doubled = [reading for reading, _ in parshas if "/" in reading.english]
    assert doubled
    for reading in doubled:
        assert "-" in reading.hebrew
        assert " " not in reading.key and "/" not in reading.key


def test_special_parshas():
    specials = readings.special_parshas(5785, Location.DIASPORA)
    assert _keys(specials) == ["Shekalim", "Zachor", "Parah", "HaChodesh"]
    for _, hdate in specials:
        assert hdate.to_pydate().weekday() == 5
    # HaChodesh is read on or before Rosh Chodesh Nissan
    assert specials[-1][1] <= HebrewDate(5785, NISSAN, 1)


def test_year_readings_respects_kinds():
    only_chol = readings.year_readings(5785, Location.DIASPORA, [ReadingKind.CHOL])
    assert {reading.kind for reading, _ in only_chol} == {ReadingKind.CHOL}
    assert readings.year_readings(5785, Location.DIASPORA, []) == []


def test_month_helpers():
    assert readings.months_in_order(5785)[0] == TISHREI
    assert len(readings.months_in_order(5785)) == 12
    assert len(readings.months_in_order(5784)) == 13
    assert readings.month_length(5785, TISHREI) == 30
    assert readings.last_adar(5784) == ADAR_II
    assert readings.last_adar(5785) == ADAR
