# yidlist/readings.py
"""
Torah reading catalog for one Hebrew year.

Every generator here returns ``(Reading, HebrewDate)`` pairs in calendar order.
Dates come from pyluach: fixed festival days, observed fast days
(``fast_day()``), the weekly parsha table (``parshatable``) and the four
special parshiyos (``four_parshios``).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pyluach import hebrewcal, parshios
from pyluach.dates import HebrewDate

from .const import ADAR, ADAR_II, AV, KISLEV, NISSAN, SIVAN, TAMMUZ, TEVES, TISHREI
from .data import names
from .models import Location, Reading, ReadingKind

_LOGGER = logging.getLogger(__name__)

# (key, month, day, diaspora only)
_YOM_TOV_DAYS: tuple[tuple[str, int, int, bool], ...] = (
    ("RoshHashanah1", TISHREI, 1, False),
    ("RoshHashanah2", TISHREI, 2, False),
    ("YomKippur",     TISHREI, 10, False),
    *((f"Sukkos{n}", TISHREI, 14 + n, False) for n in range(1, 8)),
    ("ShminiAtzeres", TISHREI, 22, False),
    ("SimchasTorah",  TISHREI, 23, True),
    *((f"Pesach{n}", NISSAN, 14 + n, False) for n in range(1, 8)),
    ("Pesach8",       NISSAN, 22, True),
    ("Shavuos1",      SIVAN, 6, False),
    ("Shavuos2",      SIVAN, 7, True),
)

# Candidate days for each fast; pyluach tells which one is observed.
_FAST_CANDIDATES: tuple[tuple[int | None, tuple[int, ...]], ...] = (
    (TISHREI, (3, 4)),
    (TEVES, (10,)),
    (None, (11, 13)),          # Taanis Esther, in (the last) Adar
    (TAMMUZ, (17, 18)),
    (AV, (9, 10)),
)


def _reading(kind: ReadingKind, key: str, table: dict[str, tuple[str, str]]) -> Reading:
    english, hebrew = table[key]
    return Reading(kind, key, english, hebrew)


def months_in_order(year: int) -> list[int]:
    """Month numbers of ``year`` from Tishrei to Elul."""
    return [month.month for month in hebrewcal.Year(year).itermonths()]


def month_length(year: int, month: int) -> int:
    return len(hebrewcal.Month(year, month))


def last_adar(year: int) -> int:
    return ADAR_II if hebrewcal.Year(year).leap else ADAR


# ─── Yom Tov ──────────────────────────────────────────────────────────────────

def yom_tov(year: int, location: Location) -> list[tuple[Reading, HebrewDate]]:
    out = []
    for key, month, day, diaspora_only in _YOM_TOV_DAYS:
        if diaspora_only and location is Location.ISRAEL:
            continue
        out.append((_reading(ReadingKind.YOM_TOV, key, names.YOM_TOV), HebrewDate(year, month, day)))
    return out


# ─── Weekday readings ─────────────────────────────────────────────────────────

def rosh_chodesh(year: int) -> list[tuple[Reading, HebrewDate]]:
    """Rosh Chodesh of every month but Tishrei; two days after a 30-day month."""
    leap = hebrewcal.Year(year).leap
    order = months_in_order(year)
    out = []
    for prev, month in zip(order, order[1:]):
        key, english, hebrew = names.month_names(month, leap)
        if month_length(year, prev) == 30:
            days = ((1, HebrewDate(year, prev, 30)), (2, HebrewDate(year, month, 1)))
        else:
            days = ((None, HebrewDate(year, month, 1)),)
        for n, hdate in days:
            rc_key, rc_english, rc_hebrew = names.rosh_chodesh(key, english, hebrew, n)
            out.append((Reading(ReadingKind.CHOL, rc_key, rc_english, rc_hebrew), hdate))
    return out


def chanukah(year: int) -> list[tuple[Reading, HebrewDate]]:
    first = HebrewDate(year, KISLEV, 25)
    return [
        (_reading(ReadingKind.CHOL, f"Chanukah{n}", names.CHOL), first + (n - 1))
        for n in range(1, 9)
    ]


def fasts(year: int) -> list[tuple[Reading, HebrewDate]]:
    """The five public fasts on their observed (possibly postponed) dates."""
    out = []
    for month, days in _FAST_CANDIDATES:
        month = month or last_adar(year)
        for day in days:
            hdate = HebrewDate(year, month, day)
            fast = hdate.fast_day()
            if fast:
                out.append((_reading(ReadingKind.CHOL, names.FAST_DAYS[fast], names.CHOL), hdate))
                break
    return out


def purim(year: int) -> list[tuple[Reading, HebrewDate]]:
    adar = last_adar(year)
    return [
        (_reading(ReadingKind.CHOL, "Purim", names.CHOL), HebrewDate(year, adar, 14)),
        (_reading(ReadingKind.CHOL, "ShushanPurim", names.CHOL), HebrewDate(year, adar, 15)),
    ]


def chol(year: int) -> list[tuple[Reading, HebrewDate]]:
    return rosh_chodesh(year) + chanukah(year) + fasts(year) + purim(year)


# ─── Shabbos ──────────────────────────────────────────────────────────────────

def _parsha_key(index: int) -> str:
    return parshios.PARSHIOS[index].replace(" ", "").replace("'", "")


def weekly_parsha(year: int, location: Location) -> list[tuple[Reading, HebrewDate]]:
    """One reading per Shabbos with a parsha; doubled parshiyos form one reading."""
    table = parshios.parshatable(year, israel=location is Location.ISRAEL)
    out = []
    for shabbos, indices in table.items():
        if not indices:
            continue
        reading = Reading(
            ReadingKind.SHABBOS,
            "".join(_parsha_key(i) for i in indices),
            "/".join(parshios.PARSHIOS[i] for i in indices),
            "-".join(parshios.PARSHIOS_HEBREW[i] for i in indices),
        )
        out.append((reading, shabbos))
    return out


def special_parshas(year: int, location: Location) -> list[tuple[Reading, HebrewDate]]:
    out = []
    for shabbos in parshios.parshatable(year, israel=location is Location.ISRAEL):
        special = parshios.four_parshios(shabbos)
        if not special:
            continue
        key, english, hebrew = names.SPECIAL_PARSHAS[special]
        out.append((Reading(ReadingKind.SPECIAL_PARSHAS, key, english, hebrew), shabbos))
    return out


def year_readings(
    year: int, location: Location, kinds: Iterable[ReadingKind]
) -> list[tuple[Reading, HebrewDate]]:
    """All readings of ``year`` in the selected categories."""
    kinds = frozenset(kinds)
    out: list[tuple[Reading, HebrewDate]] = []
    if ReadingKind.YOM_TOV in kinds:
        out += yom_tov(year, location)
    if ReadingKind.CHOL in kinds:
        out += chol(year)
    if ReadingKind.SHABBOS in kinds:
        out += weekly_parsha(year, location)
    if ReadingKind.SPECIAL_PARSHAS in kinds:
        out += special_parshas(year, location)
    _LOGGER.debug("Year %d: %d readings for %s", year, len(out), sorted(k.value for k in kinds))
    return out
