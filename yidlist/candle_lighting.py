# yidlist/candle_lighting.py
"""
Candle-lighting classification for Torah reading events.

A reading's eve is a Shabbos eve when the reading is the weekly parsha or
its instant falls on a Friday. Some Yom Tov days are Yom Tov eves as well;
which ones depends on the location (second days only count outside Israel).
Times are sunset on the eve, from zmanim, minus the city's offset.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from functools import lru_cache

from zmanim.util.geo_location import GeoLocation
from zmanim.zmanim_calendar import ZmanimCalendar

from .models import (
    APPLICABLE_UNKNOWN,
    NOT_APPLICABLE,
    ApplicableKnown,
    CandleLighting,
    City,
    Location,
    Reading,
    ReadingKind,
)

_LOGGER = logging.getLogger(__name__)

# Python weekday()
_FRIDAY = 4
_SATURDAY = 5

# Lit before sunset unless the eve is itself Shabbos
_FIRST_DAYS = frozenset({
    "RoshHashanah1", "YomKippur", "Sukkos1", "ShminiAtzeres",
    "Pesach1", "Pesach7", "Shavuos1",
})

# Yom Tov only where a second day is kept
_SECOND_DAYS = frozenset({
    "Sukkos2", "SimchasTorah", "Pesach2", "Pesach8", "Shavuos2",
})


# ─── Sunset ───────────────────────────────────────────────────────────────────

@lru_cache(maxsize=8)
def _geo(city: City) -> GeoLocation:
    return GeoLocation(
        name="yidlist",
        latitude=city.latitude,
        longitude=city.longitude,
        time_zone=city.timezone,
        elevation=0,
    )


def sunset(city: City, day: date) -> datetime | None:
    """Local sunset for ``day`` at ``city``; None where the sun does not set."""
    cal = ZmanimCalendar(geo_location=_geo(city), date=day)
    return cal.sunset()


def lighting_time(city: City, day: date) -> datetime | None:
    shkia = sunset(city, day)
    if shkia is None:
        _LOGGER.debug("No sunset at %s on %s", city, day)
        return None
    return shkia - timedelta(minutes=city.candlelighting_offset - 1)


# ─── Classification ───────────────────────────────────────────────────────────

def classify(
    reading: Reading,
    instant: datetime,
    location: Location,
    city: City | None,
) -> CandleLighting:
    """Candle-lighting state of the evening at ``instant`` for ``reading``."""
    weekday = instant.weekday()

    is_shabbos = reading.kind is ReadingKind.SHABBOS or weekday == _FRIDAY
    light_on_time = is_shabbos
    is_yom_tov = False

    if reading.kind is ReadingKind.YOM_TOV:
        if reading.key == "RoshHashanah2":
            is_yom_tov = True
        elif reading.key in _FIRST_DAYS:
            is_yom_tov = True
            light_on_time = weekday != _SATURDAY
        elif reading.key in _SECOND_DAYS:
            is_yom_tov = location is Location.DIASPORA

    if not (is_shabbos or is_yom_tov):
        return NOT_APPLICABLE
    if city is None or not light_on_time:
        return APPLICABLE_UNKNOWN

    time = lighting_time(city, instant.date())
    if time is None:
        return APPLICABLE_UNKNOWN
    return ApplicableKnown(time)
