from __future__ import annotations

import io
import json
from datetime import date, datetime

import pytest
from pyluach.dates import HebrewDate

from yidlist.const import ADAR, ADAR_II, TISHREI
from yidlist.convert import (
    convert,
    convert_gregorian,
    convert_hebrew,
    conversion_lines,
    parse_date,
    parse_month,
    render_conversion,
)
from yidlist.errors import InvalidDate, RenderError
from yidlist.models import Language, OutputType


@pytest.mark.parametrize(
    "text, month",
    [("Tishrei", TISHREI), ("tishri", TISHREI), ("Adar", ADAR), ("Adar Sheni", ADAR_II), ("13", ADAR_II)],
)
def test_parse_month(text, month):
    assert parse_month(text) == month


def test_parse_dates():
    assert parse_date("2024-10-11") == date(2024, 10, 11)
    assert parse_date("5785-7-10") == HebrewDate(5785, TISHREI, 10)
    assert parse_date("5785-Tishrei-10") == HebrewDate(5785, TISHREI, 10)


@pytest.mark.parametrize("text", ["yesterday", "2024-13-01", "5785-AdarSheni-1", "5785-Kislevv-1", "2023-02-29"])
def test_parse_rejects(text):
    with pytest.raises(InvalidDate):
        parse_date(text)


def test_civil_date_spans_two_hebrew_days():
    assert convert_gregorian(date(2024, 10, 11)) == (
        HebrewDate(5785, TISHREI, 9),
        HebrewDate(5785, TISHREI, 10),
    )


def test_hebrew_date_spans_two_civil_days():
    assert convert_hebrew(HebrewDate(5785, TISHREI, 10)) == (
        datetime(2024, 10, 11, 18),
        datetime(2024, 10, 12, 18),
    )


def test_conversion_lines():
    lines = conversion_lines(convert("2024-10-11"), Language.ENGLISH)
    assert lines == [
        "2024/10/11: 9 Tishrei 5785",
        "Night of 2024/10/11: 10 Tishrei 5785",
    ]
    lines = conversion_lines(convert("5784-AdarRishon-14"), Language.ENGLISH)
    assert lines[0].endswith(": 14 Adar Rishon 5784")


def test_conversion_json():
    out = io.StringIO()
    render_conversion(convert("2024-10-11"), OutputType.JSON, Language.ENGLISH, out)
    assert json.loads(out.getvalue()) == [
        {"year": 5785, "month": "Tishrei", "day": 9},
        {"year": 5785, "month": "Tishrei", "day": 10},
    ]

    out = io.StringIO()
    render_conversion(convert("5785-Tishrei-10"), OutputType.JSON, Language.ENGLISH, out)
    assert json.loads(out.getvalue()) == ["2024-10-11T18:00:00", "2024-10-12T18:00:00"]


def test_unencodable_conversion_is_render_error():
    stream = io.TextIOWrapper(io.BytesIO(), encoding="ascii")
    with pytest.raises(RenderError):
        render_conversion(convert("2024-10-11"), OutputType.REGULAR, Language.HEBREW, stream)
