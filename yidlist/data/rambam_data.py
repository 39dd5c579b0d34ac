# yidlist/data/rambam_data.py
"""
Mishneh Torah study units for the daily Rambam cycle.

The cycle has 1017 units: the Introduction, the two lists of commandments,
one "list of laws" unit opening each of the 14 books, and the 1000 chapters.
"""

from __future__ import annotations

from bisect import bisect_right
from itertools import accumulate

# ══════════════════════════════════════════════════════════════════════════════
# BOOKS & SECTIONS
# ══════════════════════════════════════════════════════════════════════════════

# (book English, book Hebrew, [(section English, section Hebrew, chapters), …])
BOOKS: tuple[tuple[str, str, tuple[tuple[str, str, int], ...]], ...] = (
    ("Madda", "המדע", (
        ("Yesodei HaTorah", "יסודי התורה", 10),
        ("Deos",            "דעות",        7),
        ("Talmud Torah",    "תלמוד תורה",  7),
        ("Avodah Zarah",    "עבודה זרה",   12),
        ("Teshuvah",        "תשובה",       10),
    )),
    ("Ahavah", "אהבה", (
        ("Krias Shema",       "קריאת שמע",            4),
        ("Tefillah",          "תפילה",                15),
        ("Tefillin uMezuzah", "תפילין ומזוזה וספר תורה", 10),
        ("Tzitzis",           "ציצית",                3),
        ("Berachos",          "ברכות",                11),
        ("Milah",             "מילה",                 3),
    )),
    ("Zemanim", "זמנים", (
        ("Shabbos",             "שבת",              30),
        ("Eruvin",              "עירובין",           8),
        ("Shevisas Asor",       "שביתת עשור",       3),
        ("Shevisas Yom Tov",    "שביתת יום טוב",    8),
        ("Chametz uMatzah",     "חמץ ומצה",         8),
        ("Shofar Sukkah Lulav", "שופר וסוכה ולולב", 8),
        ("Shekalim",            "שקלים",            4),
        ("Kiddush HaChodesh",   "קידוש החודש",      19),
        ("Taaniyos",            "תעניות",           5),
        ("Megillah vaChanukah", "מגילה וחנוכה",     4),
    )),
    ("Nashim", "נשים", (
        ("Ishus",          "אישות",         25),
        ("Gerushin",       "גירושין",        13),
        ("Yibbum",         "יבום וחליצה",    8),
        ("Naarah Besulah", "נערה בתולה",     3),
        ("Sotah",          "סוטה",          4),
    )),
    ("Kedushah", "קדושה", (
        ("Issurei Biah",     "איסורי ביאה",    22),
        ("Maachalos Asuros", "מאכלות אסורות",  17),
        ("Shechitah",        "שחיטה",          14),
    )),
    ("Haflaah", "הפלאה", (
        ("Shevuos", "שבועות",       12),
        ("Nedarim", "נדרים",        13),
        ("Nezirus", "נזירות",       10),
        ("Arachin", "ערכין וחרמין", 8),
    )),
    ("Zeraim", "זרעים", (
        ("Kilayim",           "כלאים",              10),
        ("Matnos Aniyim",     "מתנות עניים",        10),
        ("Terumos",           "תרומות",             15),
        ("Maaser",            "מעשר",               14),
        ("Maaser Sheni",      "מעשר שני ונטע רבעי", 11),
        ("Bikkurim",          "ביכורים",            12),
        ("Shemittah veYovel", "שמיטה ויובל",        13),
    )),
    ("Avodah", "עבודה", (
        ("Beis HaBechirah",        "בית הבחירה",         8),
        ("Klei HaMikdash",         "כלי המקדש",          10),
        ("Bias HaMikdash",         "ביאת המקדש",         9),
        ("Issurei HaMizbeach",     "איסורי המזבח",       7),
        ("Maaseh HaKorbanos",      "מעשה הקרבנות",       19),
        ("Temidin uMusafin",       "תמידין ומוספין",     10),
        ("Pesulei HaMukdashin",    "פסולי המוקדשין",     19),
        ("Avodas Yom HaKippurim",  "עבודת יום הכפורים",  5),
        ("Meilah",                 "מעילה",              8),
    )),
    ("Korbanos", "קרבנות", (
        ("Korban Pesach",       "קרבן פסח",      10),
        ("Chagigah",            "חגיגה",         3),
        ("Bechoros",            "בכורות",        8),
        ("Shegagos",            "שגגות",         15),
        ("Mechussarei Kapparah", "מחוסרי כפרה",  5),
        ("Temurah",             "תמורה",         4),
    )),
    ("Taharah", "טהרה", (
        ("Tumas Meis",          "טומאת מת",           25),
        ("Parah Adumah",        "פרה אדומה",          15),
        ("Tumas Tzaraas",       "טומאת צרעת",         16),
        ("Metamei Mishkav",     "מטמאי משכב ומושב",   13),
        ("Shear Avos HaTumos",  "שאר אבות הטומאות",   20),
        ("Tumas Ochalin",       "טומאת אוכלין",       16),
        ("Keilim",              "כלים",               28),
        ("Mikvaos",             "מקואות",             11),
    )),
    ("Nezikin", "נזיקין", (
        ("Nizkei Mamon",       "נזקי ממון",          14),
        ("Geneivah",           "גניבה",              9),
        ("Gezeilah vaAveidah", "גזילה ואבידה",       18),
        ("Chovel uMazik",      "חובל ומזיק",         8),
        ("Rotzeach",           "רוצח ושמירת נפש",    13),
    )),
    ("Kinyan", "קנין", (
        ("Mechirah",            "מכירה",          30),
        ("Zechiyah uMatanah",   "זכייה ומתנה",    12),
        ("Shecheinim",          "שכנים",          14),
        ("Sheluchin veShutafin", "שלוחין ושותפין", 10),
        ("Avadim",              "עבדים",          9),
    )),
    ("Mishpatim", "משפטים", (
        ("Sechirus",         "שכירות",      13),
        ("Sheilah uPikadon", "שאלה ופקדון", 8),
        ("Malveh veLoveh",   "מלוה ולוה",   27),
        ("Toen veNitan",     "טוען ונטען",  16),
        ("Nachalos",         "נחלות",       11),
    )),
    ("Shoftim", "שופטים", (
        ("Sanhedrin", "סנהדרין",        26),
        ("Edus",      "עדות",           22),
        ("Mamrim",    "ממרים",          7),
        ("Evel",      "אבל",            14),
        ("Melachim",  "מלכים ומלחמות",  12),
    )),
)

_INTRODUCTION: tuple[tuple[str, str], ...] = (
    ("Introduction",           "הקדמה"),
    ("Positive Commandments",  "מצוות עשה"),
    ("Negative Commandments",  "מצוות לא תעשה"),
)

# ─── Flattened unit list ──────────────────────────────────────────────────────
# (English, Hebrew, chapter count or 0 for a single unnumbered unit)


def _units() -> list[tuple[str, str, int]]:
    units = [(eng, heb, 0) for eng, heb in _INTRODUCTION]
    for book_eng, book_heb, sections in BOOKS:
        units.append((f"Sefer {book_eng}", f"ספר {book_heb}", 0))
        for eng, heb, chapters in sections:
            units.append((eng, f"הלכות {heb}", chapters))
    return units


_UNITS = _units()
_ENDS = list(accumulate(max(chapters, 1) for _, _, chapters in _UNITS))

CYCLE_LENGTH = _ENDS[-1]            # 1017
THREE_CHAPTER_CYCLE = CYCLE_LENGTH // 3


def lookup(offset: int) -> tuple[str, str, int | None]:
    """Map a unit offset to (English, Hebrew, chapter); chapter is None for unnumbered units."""
    if not 0 <= offset < CYCLE_LENGTH:
        raise IndexError(f"Rambam offset {offset} out of range")
    idx = bisect_right(_ENDS, offset)
    start = _ENDS[idx - 1] if idx else 0
    english, hebrew, chapters = _UNITS[idx]
    if not chapters:
        return english, hebrew, None
    return english, hebrew, offset - start + 1
