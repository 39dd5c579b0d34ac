# yidlist/minor_holidays.py
"""Omer count and the calendar-fixed minor observances."""

from __future__ import annotations

from datetime import datetime, timedelta

from .const import ADAR, AV, ELUL, IYAR, NISSAN, SHVAT, SIVAN, TISHREI
from .data import names
from .hebrew_calendar import HebrewYear, evening_of
from .models import MinorHoliday

OMER_DAYS = 49

_CATALOG: tuple[tuple[str, int, int], ...] = (
    ("ErevYomKippur",    TISHREI, 9),
    ("ErevSukkos",       TISHREI, 14),
    ("ErevPesach",       NISSAN, 14),
    ("PesachSheni",      IYAR, 14),
    ("LagBaomer",        IYAR, 18),
    ("ErevShavuos",      SIVAN, 5),
    ("ErevRoshHashanah", ELUL, 29),
    ("Shvat15",          SHVAT, 15),
    ("Av15",             AV, 15),
)

# Adar I, so only in leap years
_LEAP_CATALOG: tuple[tuple[str, int, int], ...] = (
    ("PurimKattan",        ADAR, 14),
    ("ShushanPurimKattan", ADAR, 15),
)


def omer(hyear: HebrewYear) -> list[tuple[MinorHoliday, datetime]]:
    """The 49 nights of the count, starting the night after the first day of Pesach."""
    first_pesach = evening_of(hyear.resolve_date(NISSAN, 15))
    out = []
    for day in range(1, OMER_DAYS + 1):
        key, english, hebrew = names.omer(day)
        out.append((MinorHoliday(key, english, hebrew), first_pesach + timedelta(days=day)))
    return out


def minor_holidays(hyear: HebrewYear) -> list[tuple[MinorHoliday, datetime]]:
    catalog = _CATALOG + (_LEAP_CATALOG if hyear.is_leap() else ())
    out = []
    for key, month, day in catalog:
        hdate = hyear.resolve_date(month, day)
        if hdate is None:
            continue
        english, hebrew = names.MINOR_HOLIDAYS[key]
        out.append((MinorHoliday(key, english, hebrew), evening_of(hdate)))
    return out
