# yidlist/models.py
"""
Value types shared by every generator.

An ``Event`` is the unit all generators produce:
  day             – civil datetime of the evening the Hebrew day begins ("night of")
  name            – one of the label classes below
  candle_lighting – NotApplicable | ApplicableUnknown | ApplicableKnown

Everything here is frozen, so the same objects can be handed to worker
processes and shared between generators without copying.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum


class Location(Enum):
    DIASPORA = "diaspora"
    ISRAEL = "israel"


class ReadingKind(Enum):
    YOM_TOV = "YomTov"
    CHOL = "Chol"
    SHABBOS = "Shabbos"
    SPECIAL_PARSHAS = "SpecialParsha"


class DailyStudy(Enum):
    DAF_YOMI = "DafYomi"
    RAMBAM_ONE_CHAPTER = "RambamOneChapter"
    RAMBAM_THREE_CHAPTERS = "RambamThreeChapters"
    YERUSHALMI_YOMI = "YerushalmiYomi"


class YearType(Enum):
    HEBREW = "hebrew"
    GREGORIAN = "gregorian"


class Language(Enum):
    ENGLISH = "en"
    HEBREW = "he"


class OutputType(Enum):
    REGULAR = "regular"
    JSON = "json"


# ─── Candle lighting (three states, never collapsed) ──────────────────────────

@dataclass(frozen=True)
class NotApplicable:
    """The day is not a Shabbos or Yom Tov eve."""


@dataclass(frozen=True)
class ApplicableUnknown:
    """Candles are lit, but no city is configured or the time is not before sunset."""


@dataclass(frozen=True)
class ApplicableKnown:
    time: datetime


CandleLighting = NotApplicable | ApplicableUnknown | ApplicableKnown

NOT_APPLICABLE = NotApplicable()
APPLICABLE_UNKNOWN = ApplicableUnknown()


# ─── Labels ───────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Reading:
    kind: ReadingKind
    key: str
    english: str
    hebrew: str


@dataclass(frozen=True)
class TorahReading:
    reading: Reading


@dataclass(frozen=True)
class MinorHoliday:
    key: str
    english: str
    hebrew: str


@dataclass(frozen=True)
class IsraeliHoliday:
    key: str
    english: str
    hebrew: str


@dataclass(frozen=True)
class ChabadHoliday:
    key: str
    english: str
    hebrew: str


@dataclass(frozen=True)
class ShabbosMevarchim:
    key: str          # month being blessed, e.g. "Cheshvan"
    english: str
    hebrew: str


@dataclass(frozen=True)
class DayMonth:
    month: int
    day: int


@dataclass(frozen=True)
class CustomHolidayDef:
    printable: str
    json: str
    date: DayMonth
    if_not_exists: tuple[DayMonth, ...] = ()


@dataclass(frozen=True)
class CustomHoliday:
    definition: CustomHolidayDef


@dataclass(frozen=True)
class DafRef:
    english: str
    hebrew: str
    page: int


@dataclass(frozen=True)
class RambamChapterRef:
    english: str
    hebrew: str
    chapter: int | None   # None for the introductory units


@dataclass(frozen=True)
class RambamThreeChaptersRef:
    chapters: tuple[RambamChapterRef, ...]


@dataclass(frozen=True)
class YerushalmiRef:
    english: str
    hebrew: str
    page: int


StudyRef = DafRef | RambamChapterRef | RambamThreeChaptersRef | YerushalmiRef


@dataclass(frozen=True)
class StudyUnit:
    study: StudyRef


Label = (
    TorahReading
    | MinorHoliday
    | CustomHoliday
    | StudyUnit
    | IsraeliHoliday
    | ChabadHoliday
    | ShabbosMevarchim
)


# ─── Event record ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Event:
    day: datetime
    name: Label
    candle_lighting: CandleLighting = NOT_APPLICABLE

    @property
    def announces(self) -> date:
        """The civil date whose daytime belongs to this Hebrew day."""
        return (self.day + timedelta(days=1)).date()


# ─── Configuration values ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class City:
    latitude: float
    longitude: float
    timezone: str
    candlelighting_offset: int


@dataclass(frozen=True)
class Selection:
    """Read-only choices shared by every generator of a run."""

    location: Location = Location.DIASPORA
    readings: frozenset[ReadingKind] = frozenset()
    omer: bool = False
    minor_holidays: bool = False
    israeli_holidays: bool = False
    chabad_holidays: bool = False
    shabbos_mevarchim: bool = False
    exact_days: bool = False
    daily_study: frozenset[DailyStudy] = frozenset()
    custom_holidays: tuple[CustomHolidayDef, ...] = ()
    city: City | None = None


@dataclass(frozen=True)
class YearRequest:
    year: int
    amount: int = 1
    year_type: YearType = YearType.HEBREW
