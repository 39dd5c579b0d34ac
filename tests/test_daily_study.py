from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from yidlist import daily_study
from yidlist.const import TISHREI
from yidlist.data import daf_yomi_data, rambam_data, yerushalmi_data
from yidlist.hebrew_calendar import HebrewYear, hebrew_date_at
from yidlist.models import (
    DafRef,
    DailyStudy,
    RambamChapterRef,
    RambamThreeChaptersRef,
    StudyUnit,
    YerushalmiRef,
)


def test_table_sizes():
    assert daf_yomi_data.CYCLE_LENGTH == 2711
    assert daf_yomi_data.FIRST_CYCLE_LENGTH == 2702
    assert rambam_data.CYCLE_LENGTH == 1017
    assert rambam_data.THREE_CHAPTER_CYCLE == 339
    assert yerushalmi_data.CYCLE_LENGTH == 1554


def test_table_lookup_bounds():
    assert daf_yomi_data.lookup(0)[::2] == ("Berachos", 2)
    assert daf_yomi_data.lookup(daf_yomi_data.CYCLE_LENGTH - 1)[::2] == ("Niddah", 73)
    assert yerushalmi_data.lookup(yerushalmi_data.CYCLE_LENGTH - 1)[::2] == ("Niddah", 13)
    with pytest.raises(IndexError):
        daf_yomi_data.lookup(daf_yomi_data.CYCLE_LENGTH)
    with pytest.raises(IndexError):
        rambam_data.lookup(-1)


# ─── Daf Yomi ─────────────────────────────────────────────────────────────────

def test_daf_yomi_fourteenth_cycle_start():
    # The 14th cycle began on the night of 2020-01-04
    assert daily_study.daf_yomi(datetime(2020, 1, 4, 18)) == DafRef("Berachos", "ברכות", 2)
    assert daily_study.daf_yomi(datetime(2020, 1, 5, 18)) == DafRef("Berachos", "ברכות", 3)
    assert daily_study.daf_yomi(datetime(2020, 1, 3, 18)) == DafRef("Niddah", "נדה", 73)


def test_daf_yomi_first_cycle():
    assert daily_study.daf_yomi_offset(daily_study.DAF_YOMI_FIRST_EPOCH) == (0, True)
    assert daily_study.daf_yomi(daily_study.DAF_YOMI_FIRST_EPOCH).page == 2
    assert daily_study.daf_yomi(datetime(1923, 9, 9, 18)) is None


def test_daf_yomi_switches_to_vilna_shekalim_cycle():
    epoch = daily_study.DAF_YOMI_SECOND_EPOCH
    offsets = [daily_study.daf_yomi_offset(epoch + timedelta(days=n)) for n in range(-3, 4)]
    last = daf_yomi_data.FIRST_CYCLE_LENGTH - 1
    assert offsets[:3] == [(last - 2, True), (last - 1, True), (last, True)]
    assert offsets[3:] == [(0, False), (1, False), (2, False), (3, False)]
    assert daily_study.daf_yomi(epoch - timedelta(days=1)) == DafRef("Niddah", "נדה", 73)
    assert daily_study.daf_yomi(epoch) == DafRef("Berachos", "ברכות", 2)


def test_daf_yomi_offsets_advance_daily():
    day = datetime(2023, 1, 1, 18)
    previous, _ = daily_study.daf_yomi_offset(day)
    for _ in range(400):
        day += timedelta(days=1)
        offset, first_cycle = daily_study.daf_yomi_offset(day)
        assert not first_cycle
        assert offset == (previous + 1) % daf_yomi_data.CYCLE_LENGTH
        previous = offset


# ─── Rambam ───────────────────────────────────────────────────────────────────

def test_rambam_starts_with_introduction():
    epoch = daily_study.RAMBAM_EPOCH
    assert daily_study.rambam_one_chapter(epoch) == RambamChapterRef("Introduction", "הקדמה", None)
    assert daily_study.rambam_one_chapter(epoch + timedelta(days=4)) == RambamChapterRef(
        "Yesodei HaTorah", "הלכות יסודי התורה", 1
    )
    assert daily_study.rambam_one_chapter(epoch - timedelta(days=1)) is None


def test_rambam_three_chapters():
    epoch = daily_study.RAMBAM_EPOCH
    first = daily_study.rambam_three_chapters(epoch)
    assert isinstance(first, RambamThreeChaptersRef)
    assert [ref.english for ref in first.chapters] == [
        "Introduction", "Positive Commandments", "Negative Commandments",
    ]
    second = daily_study.rambam_three_chapters(epoch + timedelta(days=1))
    assert [ref.chapter for ref in second.chapters] == [None, 1, 2]


def test_rambam_cycles_repeat():
    epoch = daily_study.RAMBAM_EPOCH
    assert daily_study.rambam_offset(epoch + timedelta(days=1017)) == 0
    assert daily_study.rambam_offset(epoch + timedelta(days=339), three_chapters=True) == 0


# ─── Yerushalmi ───────────────────────────────────────────────────────────────

def _scan(first: datetime, days: int):
    day = first
    for _ in range(days):
        hdate = hebrew_date_at(day)
        yield day, hdate, daily_study.yerushalmi_offset(day, hdate, HebrewYear(hdate.year).tisha_beav())
        day += timedelta(days=1)


def test_yerushalmi_nothing_on_or_before_epoch():
    epoch = daily_study.YERUSHALMI_EPOCH
    assert daily_study.yerushalmi_yomi(epoch, hebrew_date_at(epoch), HebrewYear(5740).tisha_beav()) is None
    before = epoch - timedelta(days=3)
    assert daily_study.yerushalmi_offset(before, hebrew_date_at(before), HebrewYear(5740).tisha_beav()) is None


def test_yerushalmi_skips_yom_kippur_and_tisha_beav():
    previous = None
    skipped = []
    for _, hdate, offset in _scan(datetime(2019, 9, 1, 18), 3 * 366):
        if offset is None:
            skipped.append(hdate)
            continue
        if previous is not None:
            assert (offset - previous) % yerushalmi_data.CYCLE_LENGTH == 1
        previous = offset

    assert skipped
    for hdate in skipped:
        yom_kippur = hdate.month == TISHREI and hdate.day == 10
        assert yom_kippur or hdate == HebrewYear(hdate.year).tisha_beav()


def test_yerushalmi_skips_postponed_tisha_beav():
    # 9 Av 5779 was Shabbos; the fast, and the skip, were on 10 Av
    eve_of_ninth = datetime(2019, 8, 9, 18)
    eve_of_tenth = datetime(2019, 8, 10, 18)
    tisha_beav = HebrewYear(5779).tisha_beav()
    assert daily_study.yerushalmi_offset(eve_of_ninth, hebrew_date_at(eve_of_ninth), tisha_beav) is not None
    assert daily_study.yerushalmi_offset(eve_of_tenth, hebrew_date_at(eve_of_tenth), tisha_beav) is None


# ─── Scan ─────────────────────────────────────────────────────────────────────

def test_study_events_one_per_cycle_per_day():
    first = datetime(2024, 1, 1, 18)
    last = first + timedelta(days=9)
    events = list(daily_study.study_events(first, last, [DailyStudy.YERUSHALMI_YOMI, DailyStudy.DAF_YOMI]))
    assert len(events) == 20
    assert all(isinstance(e.name, StudyUnit) for e in events)
    # Daf Yomi is always listed before Yerushalmi on the same night
    assert isinstance(events[0].name.study, DafRef)
    assert isinstance(events[1].name.study, YerushalmiRef)
    assert events[0].day == first and events[-1].day == last


def test_study_events_empty_selection():
    first = datetime(2024, 1, 1, 18)
    assert list(daily_study.study_events(first, first + timedelta(days=5), [])) == []
