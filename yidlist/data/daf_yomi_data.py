# yidlist/data/daf_yomi_data.py
"""
Daf Yomi page catalog.

Each entry is (English name, Hebrew name, first daf, last daf). Meilah is split
into Meilah, Kinnim, Tamid and Middos the way the printed luach lists them.
The first cycle (1923) learned the Babylonian Shekalim of 12 dapim; from the
eighth cycle on the Vilna Shekalim (21 dapim) is used.
"""

from __future__ import annotations

from bisect import bisect_right
from itertools import accumulate

# ══════════════════════════════════════════════════════════════════════════════
# MASECHTOS
# ══════════════════════════════════════════════════════════════════════════════

MASECHTOS: tuple[tuple[str, str, int, int], ...] = (
    ("Berachos",      "ברכות",      2,  64),
    ("Shabbos",       "שבת",        2, 157),
    ("Eruvin",        "עירובין",     2, 105),
    ("Pesachim",      "פסחים",      2, 121),
    ("Shekalim",      "שקלים",      2,  22),
    ("Yoma",          "יומא",       2,  88),
    ("Sukkah",        "סוכה",       2,  56),
    ("Beitzah",       "ביצה",       2,  40),
    ("Rosh Hashanah", "ראש השנה",   2,  35),
    ("Taanis",        "תענית",      2,  31),
    ("Megillah",      "מגילה",      2,  32),
    ("Moed Katan",    "מועד קטן",   2,  29),
    ("Chagigah",      "חגיגה",      2,  27),
    ("Yevamos",       "יבמות",      2, 122),
    ("Kesubos",       "כתובות",     2, 112),
    ("Nedarim",       "נדרים",      2,  91),
    ("Nazir",         "נזיר",       2,  66),
    ("Sotah",         "סוטה",       2,  49),
    ("Gittin",        "גיטין",      2,  90),
    ("Kiddushin",     "קידושין",    2,  82),
    ("Bava Kamma",    "בבא קמא",    2, 119),
    ("Bava Metzia",   "בבא מציעא",   2, 119),
    ("Bava Basra",    "בבא בתרא",    2, 176),
    ("Sanhedrin",     "סנהדרין",    2, 113),
    ("Makkos",        "מכות",       2,  24),
    ("Shevuos",       "שבועות",     2,  49),
    ("Avodah Zarah",  "עבודה זרה",   2,  76),
    ("Horayos",       "הוריות",     2,  14),
    ("Zevachim",      "זבחים",      2, 120),
    ("Menachos",      "מנחות",      2, 110),
    ("Chullin",       "חולין",      2, 142),
    ("Bechoros",      "בכורות",     2,  61),
    ("Arachin",       "ערכין",      2,  34),
    ("Temurah",       "תמורה",      2,  34),
    ("Kerisus",       "כריתות",     2,  28),
    ("Meilah",        "מעילה",      2,  21),
    ("Kinnim",        "קינים",     22,  25),
    ("Tamid",         "תמיד",      26,  33),
    ("Middos",        "מדות",      34,  37),
    ("Niddah",        "נדה",        2,  73),
)

_SHEKALIM = 4

# First cycle: Shekalim ends at daf 13
MASECHTOS_FIRST_CYCLE: tuple[tuple[str, str, int, int], ...] = (
    MASECHTOS[:_SHEKALIM]
    + (("Shekalim", "שקלים", 2, 13),)
    + MASECHTOS[_SHEKALIM + 1:]
)


def _pages(table) -> list[int]:
    return [last - first + 1 for _, _, first, last in table]


_ENDS = list(accumulate(_pages(MASECHTOS)))
_ENDS_FIRST_CYCLE = list(accumulate(_pages(MASECHTOS_FIRST_CYCLE)))

CYCLE_LENGTH = _ENDS[-1]                        # 2711
FIRST_CYCLE_LENGTH = _ENDS_FIRST_CYCLE[-1]      # 2702


def lookup(offset: int, first_cycle: bool = False) -> tuple[str, str, int]:
    """Map a day offset within a cycle to (English, Hebrew, daf)."""
    table = MASECHTOS_FIRST_CYCLE if first_cycle else MASECHTOS
    ends = _ENDS_FIRST_CYCLE if first_cycle else _ENDS
    if not 0 <= offset < ends[-1]:
        raise IndexError(f"Daf Yomi offset {offset} out of range")
    idx = bisect_right(ends, offset)
    start = ends[idx - 1] if idx else 0
    english, hebrew, first, _ = table[idx]
    return english, hebrew, first + offset - start
