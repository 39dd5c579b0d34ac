# yidlist/yidlist_lib/specials.py
"""
Fixed-rule observances: Shabbos Mevarchim, Israeli national days and
Chabad days. Each function returns ``(label, HebrewDate)`` pairs for one year.
"""

from __future__ import annotations

from datetime import date, timedelta

from pyluach import dates, hebrewcal

from ..const import (
    AV, CHESHVAN, ELUL, IYAR, KISLEV, NISSAN, SHVAT, TAMMUZ, TEVES, TISHREI,
)
from ..data import names
from ..models import ChabadHoliday, IsraeliHoliday, ShabbosMevarchim
from ..readings import month_length, months_in_order
from .helper import is_shabbat, shabbos_on_or_before

# Python weekday()
_MONDAY, _FRIDAY, _SATURDAY, _SUNDAY = 0, 4, 5, 6


def _weekday(y: int, m: int, d: int) -> int:
    return dates.HebrewDate(y, m, d).to_pydate().weekday()


# ─── Shabbos Mevarchim ────────────────────────────────────────────────────────

def mevarchim_date(first_rc: date) -> date:
    """Shabbos before the first day of Rosh Chodesh; a week earlier if that day is Shabbos."""
    if is_shabbat(first_rc):
        return first_rc - timedelta(days=7)
    return shabbos_on_or_before(first_rc)


def shabbos_mevarchim(year: int) -> list[tuple[ShabbosMevarchim, dates.HebrewDate]]:
    """Shabbos Mevarchim of every month of ``year`` except Tishrei."""
    leap = hebrewcal.Year(year).leap
    order = months_in_order(year)
    out = []
    for prev, month in zip(order, order[1:]):
        if month_length(year, prev) == 30:
            first_rc = dates.HebrewDate(year, prev, 30)
        else:
            first_rc = dates.HebrewDate(year, month, 1)
        shabbos = mevarchim_date(first_rc.to_pydate())
        key, english, hebrew = names.month_names(month, leap)
        label = ShabbosMevarchim(
            key,
            f"Shabbos Mevarchim {english}",
            f"שבת מברכים חודש {hebrew}",
        )
        out.append((label, dates.HebrewDate.from_pydate(shabbos)))
    return out


# ─── Israeli national days ────────────────────────────────────────────────────

def _israeli(key: str, y: int, m: int, d: int) -> tuple[IsraeliHoliday, dates.HebrewDate]:
    english, hebrew = names.ISRAELI_HOLIDAYS[key]
    return IsraeliHoliday(key, english, hebrew), dates.HebrewDate(y, m, d)


def israeli_holidays(year: int, exact_days: bool = False) -> list[tuple[IsraeliHoliday, dates.HebrewDate]]:
    """
    Israeli national days with the Knesset's Shabbos postponements.

    With ``exact_days`` every day stays on its nominal date.
    """
    rabin = 12
    shoah = 27
    zikaron, atzmaut = 4, 5
    if not exact_days:
        if _weekday(year, CHESHVAN, 12) == _FRIDAY:
            rabin = 11

        wd = _weekday(year, NISSAN, 27)
        if wd == _FRIDAY:
            shoah = 26
        elif wd == _SUNDAY:
            shoah = 28

        wd = _weekday(year, IYAR, 5)
        if wd == _FRIDAY:
            zikaron, atzmaut = 3, 4
        elif wd == _SATURDAY:
            zikaron, atzmaut = 2, 3
        elif wd == _MONDAY:
            zikaron, atzmaut = 5, 6

    return [
        _israeli("RabinMemorial", year, CHESHVAN, rabin),
        _israeli("YomHaShoah", year, NISSAN, shoah),
        _israeli("YomHaZikaron", year, IYAR, zikaron),
        _israeli("YomHaAtzmaut", year, IYAR, atzmaut),
        _israeli("YomYerushalayim", year, IYAR, 28),
    ]


# ─── Chabad days ──────────────────────────────────────────────────────────────

_CHABAD_DATES: dict[str, tuple[int, int]] = {
    "VovTishrei":      (TISHREI, 6),
    "YudTesKislev":    (KISLEV, 19),
    "ChofKislev":      (KISLEV, 20),
    "HeiTeves":        (TEVES, 5),
    "YudShvat":        (SHVAT, 10),
    "ChofBeisShvat":   (SHVAT, 22),
    "YudAlephNissan":  (NISSAN, 11),
    "GimmelTammuz":    (TAMMUZ, 3),
    "YudBeisTammuz":   (TAMMUZ, 12),
    "YudGimmelTammuz": (TAMMUZ, 13),
    "ChofAv":          (AV, 20),
    "ChaiElul":        (ELUL, 18),
}


def chabad_holidays(year: int) -> list[tuple[ChabadHoliday, dates.HebrewDate]]:
    out = []
    for key, (month, day) in _CHABAD_DATES.items():
        english, hebrew = names.CHABAD_HOLIDAYS[key]
        out.append((ChabadHoliday(key, english, hebrew), dates.HebrewDate(year, month, day)))
    return out
