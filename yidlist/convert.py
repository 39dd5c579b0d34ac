# yidlist/convert.py
"""
Date conversion between the civil and Hebrew calendars.

A civil date overlaps two Hebrew days (its daytime, and the night after
18:00). A Hebrew day spans two civil dates (its evening and its daytime).
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Any, TextIO

from pyluach import hebrewcal
from pyluach.dates import HebrewDate

from .const import ADAR, ADAR_II, HEBREW_YEAR_THRESHOLD
from .data import names
from .errors import InvalidDate, RenderError
from .hebrew_calendar import evening_of, hebrew_date_at
from .models import Language, OutputType

_LOGGER = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^\s*(\d{1,4})-([A-Za-z' ]+|\d{1,2})-(\d{1,2})\s*$")

_MONTH_ALIASES: dict[str, int] = {
    key.lower(): number for number, (key, _, _) in names.MONTHS.items()
}
_MONTH_ALIASES.update({
    "adarrishon": ADAR, "adari": ADAR, "adar1": ADAR,
    "adarsheni": ADAR_II, "adarii": ADAR_II, "adar2": ADAR_II,
    "nisan": 1, "tamuz": 4, "tishri": 7, "heshvan": 8, "marcheshvan": 8,
    "tevet": 10, "shevat": 11,
})


@dataclass(frozen=True)
class Conversion:
    source: date | HebrewDate
    # two Hebrew dates for a civil source, two civil instants for a Hebrew source
    result: tuple[HebrewDate, HebrewDate] | tuple[datetime, datetime]


# ─── Parsing ──────────────────────────────────────────────────────────────────

def parse_month(text: str) -> int:
    text = text.strip()
    if text.isdigit():
        return int(text)
    key = text.replace(" ", "").replace("'", "").lower()
    if key not in _MONTH_ALIASES:
        raise InvalidDate(f"Unknown Hebrew month {text!r}")
    return _MONTH_ALIASES[key]


def parse_date(text: str) -> date | HebrewDate:
    """
    Parse ``YYYY-MM-DD`` or ``YYYY-MONTH-DD``.

    A named month, or a numeric year of 3000 or more, means a Hebrew date
    (months numbered as in pyluach, Nissan = 1).
    """
    match = _DATE_RE.match(text)
    if not match:
        raise InvalidDate(f"Cannot parse date {text!r}; expected YYYY-MM-DD or YYYY-MONTH-DD")
    year, month_text, day = int(match[1]), match[2], int(match[3])
    hebrew = not month_text.isdigit() or year >= HEBREW_YEAR_THRESHOLD
    try:
        if hebrew:
            return HebrewDate(year, parse_month(month_text), day)
        return date(year, int(month_text), day)
    except ValueError as err:
        raise InvalidDate(f"{text!r} is not a valid date: {err}") from err


# ─── Conversion ───────────────────────────────────────────────────────────────

def convert_gregorian(day: date) -> tuple[HebrewDate, HebrewDate]:
    """The Hebrew day during daytime of ``day`` and the one beginning that evening."""
    try:
        return (
            hebrew_date_at(datetime.combine(day, time(0, 0, 1))),
            hebrew_date_at(datetime.combine(day, time(23, 0, 1))),
        )
    except (ValueError, OverflowError) as err:
        raise InvalidDate(f"{day} cannot be converted: {err}") from err


def convert_hebrew(hdate: HebrewDate) -> tuple[datetime, datetime]:
    """The civil instants at which ``hdate`` begins and ends."""
    try:
        start = evening_of(hdate)
        return start, start + timedelta(days=1)
    except (ValueError, OverflowError) as err:
        raise InvalidDate(f"{hdate} cannot be converted: {err}") from err


def convert(text: str) -> Conversion:
    source = parse_date(text)
    if isinstance(source, HebrewDate):
        result = convert_hebrew(source)
    else:
        result = convert_gregorian(source)
    _LOGGER.debug("Converted %s → %s", source, result)
    return Conversion(source, result)


# ─── Output ───────────────────────────────────────────────────────────────────

def hebrew_date_text(hdate: HebrewDate, language: Language) -> str:
    if language is Language.HEBREW:
        return hdate.hebrew_date_string()
    leap = hebrewcal.Year(hdate.year).leap
    _, english, _ = names.month_names(hdate.month, leap)
    return f"{hdate.day} {english} {hdate.year}"


def _hebrew_json(hdate: HebrewDate) -> dict[str, Any]:
    leap = hebrewcal.Year(hdate.year).leap
    key, _, _ = names.month_names(hdate.month, leap)
    return {"year": hdate.year, "month": key, "day": hdate.day}


def _civil(day: date) -> str:
    return f"{day.year}/{day.month}/{day.day}"


def conversion_lines(conversion: Conversion, language: Language) -> list[str]:
    night = "Night of" if language is Language.ENGLISH else "ליל"
    if isinstance(conversion.source, HebrewDate):
        start, end = conversion.result
        text = hebrew_date_text(conversion.source, language)
        return [f"{night} {_civil(start.date())}: {text}", f"{_civil(end.date())}: {text}"]
    daytime, evening = conversion.result
    day = conversion.source
    return [
        f"{_civil(day)}: {hebrew_date_text(daytime, language)}",
        f"{night} {_civil(day)}: {hebrew_date_text(evening, language)}",
    ]


def conversion_json(conversion: Conversion) -> list[Any]:
    if isinstance(conversion.source, HebrewDate):
        return [instant.isoformat() for instant in conversion.result]
    return [_hebrew_json(hdate) for hdate in conversion.result]


def render_conversion(
    conversion: Conversion, output: OutputType, language: Language, stream: TextIO
) -> None:
    try:
        if output is OutputType.JSON:
            json.dump(conversion_json(conversion), stream, ensure_ascii=False)
            stream.write("\n")
        else:
            stream.writelines(line + "\n" for line in conversion_lines(conversion, language))
        stream.flush()
    except (OSError, UnicodeError) as err:
        raise RenderError(f"Could not write output: {err}") from err
