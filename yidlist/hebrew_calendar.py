# yidlist/hebrew_calendar.py
"""
Adapter over pyluach.

Everything else in yidlist talks to the Hebrew calendar through this module:
``validate_year`` hands out ``HebrewYear`` objects for years that can be fully
expressed as Python dates, and ``evening_of`` / ``hebrew_date_at`` convert
between Hebrew days and the civil instant at which each one begins.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, datetime, time, timedelta

from pyluach import hebrewcal
from pyluach.dates import HebrewDate

from .const import AV, ELUL, EVENING_HOUR, TISHREI
from .errors import InvalidYear
from .models import Location, Reading, ReadingKind
from .readings import year_readings

_LOGGER = logging.getLogger(__name__)


# ─── Instant convention ───────────────────────────────────────────────────────

def evening_of(hdate: HebrewDate) -> datetime:
    """The civil instant a Hebrew day begins: 18:00 on the preceding civil day."""
    eve = hdate.to_pydate() - timedelta(days=1)
    return datetime.combine(eve, time(EVENING_HOUR))


def hebrew_date_at(instant: datetime | date) -> HebrewDate:
    """The Hebrew day in progress at ``instant``; from 18:00 on, the next one."""
    if isinstance(instant, datetime):
        day = instant.date()
        if instant.hour >= EVENING_HOUR:
            day += timedelta(days=1)
    else:
        day = instant
    return HebrewDate.from_pydate(day)


# ─── Years ────────────────────────────────────────────────────────────────────

class HebrewYear:
    """One validated Hebrew year."""

    def __init__(self, year: int) -> None:
        self.year = year
        self._cal = hebrewcal.Year(year)

    def __repr__(self) -> str:
        return f"HebrewYear({self.year})"

    def is_leap(self) -> bool:
        return self._cal.leap

    @property
    def first_day(self) -> HebrewDate:
        return HebrewDate(self.year, TISHREI, 1)

    @property
    def last_day(self) -> HebrewDate:
        return HebrewDate(self.year, ELUL, 29)

    def resolve_date(self, month: int, day: int) -> HebrewDate | None:
        """The date (month, day) in this year, or None when the year has no such day."""
        try:
            return HebrewDate(self.year, month, day)
        except ValueError:
            return None

    def tisha_beav(self) -> HebrewDate:
        """Observed Tisha B'Av: 9 Av, or 10 Av when the 9th is Shabbos."""
        ninth = HebrewDate(self.year, AV, 9)
        if ninth.fast_day():
            return ninth
        return ninth + 1

    def holidays(
        self, location: Location, kinds: Iterable[ReadingKind]
    ) -> list[tuple[Reading, datetime]]:
        """Readings of this year in ``kinds``, each with its evening instant."""
        return [
            (reading, evening_of(hdate))
            for reading, hdate in year_readings(self.year, location, kinds)
        ]


def validate_year(year: int) -> HebrewYear:
    """Return a HebrewYear, or raise InvalidYear if pyluach or datetime cannot express it."""
    try:
        hyear = HebrewYear(year)
        evening_of(hyear.first_day)
        hyear.last_day.to_pydate()
    except (ValueError, OverflowError) as err:
        _LOGGER.debug("Rejecting Hebrew year %s: %s", year, err)
        raise InvalidYear(year) from err
    return hyear
