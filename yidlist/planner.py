# yidlist/planner.py
"""
Turn a year request into the Hebrew years to expand.

A Hebrew request of N years starting at Y expands Y … Y+N-1 as-is. A
Gregorian request expands every Hebrew year that can hold an evening of the
requested civil years and records the civil window to keep afterwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from .const import EVENING_HOUR
from .errors import InvalidYear
from .hebrew_calendar import evening_of, hebrew_date_at, validate_year
from .models import YearRequest, YearType

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Plan:
    years: tuple[int, ...]
    study_first: datetime
    study_last: datetime
    # [start, end) civil window for Gregorian requests
    window: tuple[datetime, datetime] | None = None

    def keep(self, instant: datetime) -> bool:
        if self.window is None:
            return True
        start, end = self.window
        return start <= instant < end


def _study_span(first_year: int, last_year: int) -> tuple[datetime, datetime]:
    return (
        evening_of(validate_year(first_year).first_day),
        evening_of(validate_year(last_year).last_day),
    )


def plan_hebrew(year: int, amount: int) -> Plan:
    validate_year(year)
    validate_year(year + amount)
    years = tuple(range(year, year + amount))
    first, last = _study_span(year, year + amount - 1)
    return Plan(years, first, last)


def plan_gregorian(year: int, amount: int) -> Plan:
    try:
        before = datetime(year - 1, 12, 31, EVENING_HOUR)
        after = datetime(year + amount + 1, 1, 1, EVENING_HOUR)
        window = (datetime(year, 1, 1), datetime(year + amount, 1, 1))
        that_year = hebrew_date_at(before).year
        last_year = hebrew_date_at(after).year
    except (ValueError, OverflowError) as err:
        raise InvalidYear(year) from err

    validate_year(that_year)
    validate_year(last_year)
    years = tuple(range(that_year, last_year))
    first, last = _study_span(that_year, last_year)
    return Plan(years, first, last, window)


def plan(request: YearRequest) -> Plan:
    """Validate every Hebrew year the request touches and lay out the work."""
    if request.amount < 1:
        raise InvalidYear(request.year)
    if request.year_type is YearType.HEBREW:
        result = plan_hebrew(request.year, request.amount)
    else:
        result = plan_gregorian(request.year, request.amount)
    _LOGGER.debug(
        "Planned %s %d+%d: Hebrew years %s, study %s → %s",
        request.year_type.value, request.year, request.amount,
        result.years, result.study_first, result.study_last,
    )
    return result
