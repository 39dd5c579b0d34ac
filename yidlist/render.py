# yidlist/render.py
"""
Text and JSON output.

Text output is one line per event:
  Night of 2024/10/11: Yom Kippur, Candle lighting 18:12
JSON output is a list of ``{"day", "name", "candle_lighting"}`` records.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any, TextIO

from .errors import RenderError
from .models import (
    ApplicableKnown,
    ApplicableUnknown,
    CandleLighting,
    ChabadHoliday,
    CustomHoliday,
    DafRef,
    Event,
    IsraeliHoliday,
    Label,
    Language,
    MinorHoliday,
    NotApplicable,
    OutputType,
    RambamChapterRef,
    RambamThreeChaptersRef,
    ShabbosMevarchim,
    StudyRef,
    StudyUnit,
    TorahReading,
    YerushalmiRef,
)
from .yidlist_lib.helper import int_to_hebrew

_LOGGER = logging.getLogger(__name__)

_NIGHT_OF = {Language.ENGLISH: "Night of", Language.HEBREW: "ליל"}
_CANDLE_LIGHTING = {Language.ENGLISH: "Candle lighting", Language.HEBREW: "הדלקת נרות"}
_DAF_YOMI = {Language.ENGLISH: "Daf Yomi", Language.HEBREW: "דף יומי"}
_RAMBAM = {Language.ENGLISH: "Rambam", Language.HEBREW: "רמב״ם"}
_YERUSHALMI = {Language.ENGLISH: "Yerushalmi Yomi", Language.HEBREW: "ירושלמי יומי"}

_BATCH = 4096


# ─── Labels as text ───────────────────────────────────────────────────────────

def _page(num: int, language: Language) -> str:
    return str(num) if language is Language.ENGLISH else int_to_hebrew(num)


def _pick(english: str, hebrew: str, language: Language) -> str:
    return english if language is Language.ENGLISH else hebrew


def _rambam_chapter(ref: RambamChapterRef, language: Language) -> str:
    name = _pick(ref.english, ref.hebrew, language)
    if ref.chapter is None:
        return name
    return f"{name} {_page(ref.chapter, language)}"


def study_text(study: StudyRef, language: Language) -> str:
    if isinstance(study, DafRef):
        return f"{_DAF_YOMI[language]}: {_pick(study.english, study.hebrew, language)} {_page(study.page, language)}"
    if isinstance(study, RambamChapterRef):
        return f"{_RAMBAM[language]}: {_rambam_chapter(study, language)}"
    if isinstance(study, RambamThreeChaptersRef):
        chapters = ", ".join(_rambam_chapter(ref, language) for ref in study.chapters)
        return f"{_RAMBAM[language]}: {chapters}"
    if isinstance(study, YerushalmiRef):
        return f"{_YERUSHALMI[language]}: {_pick(study.english, study.hebrew, language)} {_page(study.page, language)}"
    raise TypeError(f"Unknown study reference {study!r}")


def label_text(label: Label, language: Language) -> str:
    if isinstance(label, TorahReading):
        return _pick(label.reading.english, label.reading.hebrew, language)
    if isinstance(label, (MinorHoliday, IsraeliHoliday, ChabadHoliday, ShabbosMevarchim)):
        return _pick(label.english, label.hebrew, language)
    if isinstance(label, CustomHoliday):
        return label.definition.printable
    if isinstance(label, StudyUnit):
        return study_text(label.study, language)
    raise TypeError(f"Unknown label {label!r}")


def format_line(event: Event, language: Language) -> str:
    day = event.day
    line = f"{_NIGHT_OF[language]} {day.year}/{day.month}/{day.day}: {label_text(event.name, language)}"
    lighting = event.candle_lighting
    if isinstance(lighting, ApplicableKnown):
        line += f", {_CANDLE_LIGHTING[language]} {lighting.time:%H:%M}"
    elif isinstance(lighting, ApplicableUnknown):
        line += f", {_CANDLE_LIGHTING[language]}"
    elif not isinstance(lighting, NotApplicable):
        raise TypeError(f"Unknown candle lighting {lighting!r}")
    return line


# ─── Labels as JSON ───────────────────────────────────────────────────────────

def _rambam_json(ref: RambamChapterRef) -> dict[str, Any]:
    return {"halacha": ref.english, "chapter": ref.chapter}


def study_json(study: StudyRef) -> dict[str, Any]:
    if isinstance(study, DafRef):
        return {"study": "DafYomi", "masechta": study.english, "daf": study.page}
    if isinstance(study, RambamChapterRef):
        return {"study": "RambamOneChapter", **_rambam_json(study)}
    if isinstance(study, RambamThreeChaptersRef):
        return {"study": "RambamThreeChapters", "chapters": [_rambam_json(ref) for ref in study.chapters]}
    if isinstance(study, YerushalmiRef):
        return {"study": "YerushalmiYomi", "masechta": study.english, "page": study.page}
    raise TypeError(f"Unknown study reference {study!r}")


def label_json(label: Label) -> dict[str, Any]:
    if isinstance(label, TorahReading):
        return {"type": "TorahReading", "kind": label.reading.kind.value, "name": label.reading.key}
    if isinstance(label, MinorHoliday):
        return {"type": "MinorHoliday", "name": label.key}
    if isinstance(label, IsraeliHoliday):
        return {"type": "IsraeliHoliday", "name": label.key}
    if isinstance(label, ChabadHoliday):
        return {"type": "ChabadHoliday", "name": label.key}
    if isinstance(label, ShabbosMevarchim):
        return {"type": "ShabbosMevarchim", "name": label.key}
    if isinstance(label, CustomHoliday):
        return {
            "type": "CustomHoliday",
            "name": label.definition.json,
            "printable": label.definition.printable,
        }
    if isinstance(label, StudyUnit):
        return {"type": "DailyStudy", **study_json(label.study)}
    raise TypeError(f"Unknown label {label!r}")


def candle_lighting_json(lighting: CandleLighting) -> dict[str, Any]:
    if isinstance(lighting, NotApplicable):
        return {"applicable": False, "time": None}
    if isinstance(lighting, ApplicableUnknown):
        return {"applicable": True, "time": None}
    if isinstance(lighting, ApplicableKnown):
        return {"applicable": True, "time": lighting.time.isoformat()}
    raise TypeError(f"Unknown candle lighting {lighting!r}")


def event_json(event: Event) -> dict[str, Any]:
    return {
        "day": event.day.isoformat(),
        "name": label_json(event.name),
        "candle_lighting": candle_lighting_json(event.candle_lighting),
    }


# ─── Writers ──────────────────────────────────────────────────────────────────

def write_text(events: Iterable[Event], language: Language, stream: TextIO) -> int:
    """Write one line per event in batches; return the number of lines."""
    count = 0
    batch: list[str] = []
    for event in events:
        batch.append(format_line(event, language) + "\n")
        if len(batch) >= _BATCH:
            stream.writelines(batch)
            count += len(batch)
            batch.clear()
    stream.writelines(batch)
    return count + len(batch)


def write_json(events: Iterable[Event], stream: TextIO) -> int:
    records = [event_json(event) for event in events]
    json.dump(records, stream, ensure_ascii=False)
    stream.write("\n")
    return len(records)


def render(events: Iterable[Event], output: OutputType, language: Language, stream: TextIO) -> None:
    """Render ``events`` to ``stream``; I/O and encoding failures surface as RenderError."""
    try:
        if output is OutputType.JSON:
            count = write_json(events, stream)
        else:
            count = write_text(events, language, stream)
        stream.flush()
    except (OSError, UnicodeError) as err:
        raise RenderError(f"Could not write output: {err}") from err
    _LOGGER.debug("Rendered %d events as %s", count, output.value)
