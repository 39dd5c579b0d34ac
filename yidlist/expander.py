# yidlist/expander.py
"""
Per-year event expansion.

``expand_year`` is a pure function of (year, selection) so the listing stage
can run it in worker processes.
"""

from __future__ import annotations

import logging

from . import candle_lighting
from .hebrew_calendar import HebrewYear, evening_of
from .minor_holidays import minor_holidays, omer
from .models import CustomHoliday, CustomHolidayDef, Event, Selection, TorahReading
from .yidlist_lib.specials import chabad_holidays, israeli_holidays, shabbos_mevarchim

_LOGGER = logging.getLogger(__name__)


def resolve_custom_holiday(hyear: HebrewYear, definition: CustomHolidayDef) -> list[Event]:
    """
    Events for one custom holiday in ``hyear``.

    The primary date wins when the year has it. Otherwise every fallback date
    that exists in the year produces an event, in definition order.
    """
    label = CustomHoliday(definition)
    primary = hyear.resolve_date(definition.date.month, definition.date.day)
    if primary is not None:
        return [Event(evening_of(primary), label)]

    events = []
    for fallback in definition.if_not_exists:
        hdate = hyear.resolve_date(fallback.month, fallback.day)
        if hdate is not None:
            events.append(Event(evening_of(hdate), label))
    if not events:
        _LOGGER.debug("Custom holiday %s has no date in %d", definition.json, hyear.year)
    return events


def expand_year(year: int, selection: Selection) -> list[Event]:
    """All non-study events of one Hebrew year, unordered."""
    hyear = HebrewYear(year)
    events: list[Event] = []

    if selection.readings:
        for reading, instant in hyear.holidays(selection.location, selection.readings):
            lighting = candle_lighting.classify(reading, instant, selection.location, selection.city)
            events.append(Event(instant, TorahReading(reading), lighting))

    if selection.omer:
        events.extend(Event(instant, label) for label, instant in omer(hyear))
    if selection.minor_holidays:
        events.extend(Event(instant, label) for label, instant in minor_holidays(hyear))

    if selection.israeli_holidays:
        events.extend(
            Event(evening_of(hdate), label)
            for label, hdate in israeli_holidays(year, selection.exact_days)
        )
    if selection.chabad_holidays:
        events.extend(Event(evening_of(hdate), label) for label, hdate in chabad_holidays(year))
    if selection.shabbos_mevarchim:
        events.extend(Event(evening_of(hdate), label) for label, hdate in shabbos_mevarchim(year))

    for definition in selection.custom_holidays:
        events.extend(resolve_custom_holiday(hyear, definition))

    _LOGGER.debug("Expanded %d: %d events", year, len(events))
    return events
