# yidlist/data/yerushalmi_data.py
"""
Yerushalmi Yomi page catalog (Vilna edition, pages numbered from 1).
"""

from __future__ import annotations

from bisect import bisect_right
from itertools import accumulate

# (English name, Hebrew name, pages)
MASECHTOS: tuple[tuple[str, str, int], ...] = (
    # Zeraim
    ("Berachos",      "ברכות",      68),
    ("Peah",          "פאה",        37),
    ("Demai",         "דמאי",       34),
    ("Kilayim",       "כלאים",      44),
    ("Sheviis",       "שביעית",     31),
    ("Terumos",       "תרומות",     59),
    ("Maasros",       "מעשרות",     26),
    ("Maaser Sheni",  "מעשר שני",   33),
    ("Challah",       "חלה",        28),
    ("Orlah",         "ערלה",       20),
    ("Bikkurim",      "ביכורים",    13),
    # Moed
    ("Shabbos",       "שבת",        92),
    ("Eruvin",        "עירובין",     65),
    ("Pesachim",      "פסחים",      71),
    ("Beitzah",       "ביצה",       22),
    ("Rosh Hashanah", "ראש השנה",   22),
    ("Yoma",          "יומא",       42),
    ("Sukkah",        "סוכה",       26),
    ("Taanis",        "תענית",      26),
    ("Shekalim",      "שקלים",      33),
    ("Megillah",      "מגילה",      34),
    ("Chagigah",      "חגיגה",      22),
    ("Moed Katan",    "מועד קטן",   19),
    # Nashim
    ("Yevamos",       "יבמות",      85),
    ("Kesubos",       "כתובות",     72),
    ("Sotah",         "סוטה",       47),
    ("Nedarim",       "נדרים",      40),
    ("Nazir",         "נזיר",       47),
    ("Gittin",        "גיטין",      54),
    ("Kiddushin",     "קידושין",    48),
    # Nezikin
    ("Bava Kamma",    "בבא קמא",    44),
    ("Bava Metzia",   "בבא מציעא",   37),
    ("Bava Basra",    "בבא בתרא",    34),
    ("Sanhedrin",     "סנהדרין",    57),
    ("Shevuos",       "שבועות",     44),
    ("Avodah Zarah",  "עבודה זרה",   37),
    ("Makkos",        "מכות",       9),
    ("Horayos",       "הוריות",     19),
    # Taharos
    ("Niddah",        "נדה",        13),
)

_ENDS = list(accumulate(pages for _, _, pages in MASECHTOS))

CYCLE_LENGTH = _ENDS[-1]    # 1554


def lookup(offset: int) -> tuple[str, str, int]:
    """Map a day offset within the cycle to (English, Hebrew, page)."""
    if not 0 <= offset < CYCLE_LENGTH:
        raise IndexError(f"Yerushalmi offset {offset} out of range")
    idx = bisect_right(_ENDS, offset)
    start = _ENDS[idx - 1] if idx else 0
    english, hebrew, _ = MASECHTOS[idx]
    return english, hebrew, offset - start + 1
