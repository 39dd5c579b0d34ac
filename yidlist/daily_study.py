# yidlist/daily_study.py
"""
Daily study cycles: Daf Yomi, Rambam (one or three chapters) and Yerushalmi Yomi.

The offset helpers are pure functions of the evening instant. ``study_events``
walks a span of evenings one civil day at a time and yields one event per
subscribed cycle per day.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from datetime import datetime, timedelta
from functools import lru_cache

from pyluach.dates import HebrewDate

from .const import TISHREI
from .data import daf_yomi_data, rambam_data, yerushalmi_data
from .hebrew_calendar import HebrewYear, hebrew_date_at
from .models import (
    DafRef,
    DailyStudy,
    Event,
    RambamChapterRef,
    RambamThreeChaptersRef,
    StudyRef,
    StudyUnit,
    YerushalmiRef,
)

_LOGGER = logging.getLogger(__name__)

# ── Cycle epochs (evening the first unit is learned) ──
DAF_YOMI_FIRST_EPOCH = datetime(1923, 9, 10, 18)
DAF_YOMI_SECOND_EPOCH = datetime(1975, 6, 23, 18)
RAMBAM_EPOCH = datetime(1984, 4, 27, 18)
YERUSHALMI_EPOCH = datetime(1980, 2, 1, 18)

YOM_KIPPUR_DAY = 10


# ─── Offsets ──────────────────────────────────────────────────────────────────

def daf_yomi_offset(instant: datetime) -> tuple[int, bool] | None:
    """(offset into the cycle, is first cycle), or None before the first cycle."""
    if instant >= DAF_YOMI_SECOND_EPOCH:
        return (instant - DAF_YOMI_SECOND_EPOCH).days % daf_yomi_data.CYCLE_LENGTH, False
    if instant >= DAF_YOMI_FIRST_EPOCH:
        return (instant - DAF_YOMI_FIRST_EPOCH).days % daf_yomi_data.FIRST_CYCLE_LENGTH, True
    return None


def rambam_offset(instant: datetime, three_chapters: bool = False) -> int | None:
    if instant < RAMBAM_EPOCH:
        return None
    cycle = rambam_data.THREE_CHAPTER_CYCLE if three_chapters else rambam_data.CYCLE_LENGTH
    return (instant - RAMBAM_EPOCH).days % cycle


def yerushalmi_offset(instant: datetime, hdate: HebrewDate, tisha_beav: HebrewDate) -> int | None:
    """
    Offset into the Yerushalmi Yomi cycle, skipping Yom Kippur and Tisha B'Av.

    ``hdate`` is the Hebrew day beginning at ``instant`` and ``tisha_beav`` the
    observed Tisha B'Av of that Hebrew year. Returns None on the skipped days
    and on or before the epoch.
    """
    if instant < YERUSHALMI_EPOCH:
        return None
    if hdate.month == TISHREI and hdate.day == YOM_KIPPUR_DAY:
        return None
    if hdate == tisha_beav:
        return None

    years = hdate.year - _yerushalmi_epoch_year()
    days = (instant - YERUSHALMI_EPOCH).days

    yk_this_year = 0 if hdate.month == TISHREI and hdate.day < YOM_KIPPUR_DAY else 1
    tb_this_year = 0 if hdate < tisha_beav else 1

    if years == 0:
        yk_skipped = 0
        tb_skipped = tb_this_year
    elif years == 1:
        yk_skipped = yk_this_year
        tb_skipped = tb_this_year + 1
    else:
        yk_skipped = years - 1 + yk_this_year
        tb_skipped = years + tb_this_year

    if days <= 0:
        return None
    return (days - tb_skipped - yk_skipped) % yerushalmi_data.CYCLE_LENGTH


@lru_cache(maxsize=1)
def _yerushalmi_epoch_year() -> int:
    return hebrew_date_at(YERUSHALMI_EPOCH).year


# ─── References ───────────────────────────────────────────────────────────────

def daf_yomi(instant: datetime) -> DafRef | None:
    found = daf_yomi_offset(instant)
    if found is None:
        return None
    offset, first_cycle = found
    english, hebrew, page = daf_yomi_data.lookup(offset, first_cycle)
    return DafRef(english, hebrew, page)


def _rambam_chapter(unit: int) -> RambamChapterRef:
    english, hebrew, chapter = rambam_data.lookup(unit)
    return RambamChapterRef(english, hebrew, chapter)


def rambam_one_chapter(instant: datetime) -> RambamChapterRef | None:
    offset = rambam_offset(instant)
    if offset is None:
        return None
    return _rambam_chapter(offset)


def rambam_three_chapters(instant: datetime) -> RambamThreeChaptersRef | None:
    offset = rambam_offset(instant, three_chapters=True)
    if offset is None:
        return None
    return RambamThreeChaptersRef(tuple(_rambam_chapter(3 * offset + n) for n in range(3)))


def yerushalmi_yomi(instant: datetime, hdate: HebrewDate, tisha_beav: HebrewDate) -> YerushalmiRef | None:
    offset = yerushalmi_offset(instant, hdate, tisha_beav)
    if offset is None:
        return None
    english, hebrew, page = yerushalmi_data.lookup(offset)
    return YerushalmiRef(english, hebrew, page)


# ─── Scan ─────────────────────────────────────────────────────────────────────

def study_events(
    first: datetime, last: datetime, cycles: Iterable[DailyStudy]
) -> Iterator[Event]:
    """
    Study events for every evening from ``first`` through ``last``.

    Cycles are emitted in a fixed order within each day. The Tisha B'Av of each
    Hebrew year crossed is looked up once and kept for the rest of the scan.
    """
    cycles = frozenset(cycles)
    ordered = [cycle for cycle in DailyStudy if cycle in cycles]
    if not ordered:
        return

    _LOGGER.debug("Study scan %s → %s for %s", first, last, [c.value for c in ordered])
    tisha_beav: dict[int, HebrewDate] = {}
    day = first
    while day <= last:
        for cycle in ordered:
            ref: StudyRef | None
            if cycle is DailyStudy.DAF_YOMI:
                ref = daf_yomi(day)
            elif cycle is DailyStudy.RAMBAM_ONE_CHAPTER:
                ref = rambam_one_chapter(day)
            elif cycle is DailyStudy.RAMBAM_THREE_CHAPTERS:
                ref = rambam_three_chapters(day)
            elif cycle is DailyStudy.YERUSHALMI_YOMI:
                hdate = hebrew_date_at(day)
                if hdate.year not in tisha_beav:
                    tisha_beav[hdate.year] = HebrewYear(hdate.year).tisha_beav()
                ref = yerushalmi_yomi(day, hdate, tisha_beav[hdate.year])
            else:
                raise TypeError(f"Unknown study cycle {cycle!r}")
            if ref is not None:
                yield Event(day, StudyUnit(ref))
        day += timedelta(days=1)
