# yidlist/data/names.py
"""
Display names for every fixed label yidlist emits.

Each table maps a machine key (used in JSON output) to (English, Hebrew).
"""

from __future__ import annotations

from ..yidlist_lib.helper import int_to_hebrew, ordinal

# ══════════════════════════════════════════════════════════════════════════════
# MONTHS (pyluach numbering)
# ══════════════════════════════════════════════════════════════════════════════

MONTHS: dict[int, tuple[str, str, str]] = {
    # number: (key, English, Hebrew)
    1:  ("Nissan",  "Nissan",  "ניסן"),
    2:  ("Iyar",    "Iyar",    "אייר"),
    3:  ("Sivan",   "Sivan",   "סיון"),
    4:  ("Tammuz",  "Tammuz",  "תמוז"),
    5:  ("Av",      "Av",      "אב"),
    6:  ("Elul",    "Elul",    "אלול"),
    7:  ("Tishrei", "Tishrei", "תשרי"),
    8:  ("Cheshvan", "Cheshvan", "חשון"),
    9:  ("Kislev",  "Kislev",  "כסלו"),
    10: ("Teves",   "Teves",   "טבת"),
    11: ("Shvat",   "Shvat",   "שבט"),
    12: ("Adar",    "Adar",    "אדר"),
}

LEAP_MONTHS: dict[int, tuple[str, str, str]] = {
    12: ("AdarRishon", "Adar Rishon", "אדר א׳"),
    13: ("AdarSheni",  "Adar Sheni",  "אדר ב׳"),
}


def month_names(month: int, leap: bool) -> tuple[str, str, str]:
    """Return (key, English, Hebrew) for a pyluach month number."""
    if leap and month in LEAP_MONTHS:
        return LEAP_MONTHS[month]
    return MONTHS[month]


# ══════════════════════════════════════════════════════════════════════════════
# TORAH READINGS
# ══════════════════════════════════════════════════════════════════════════════

YOM_TOV: dict[str, tuple[str, str]] = {
    "RoshHashanah1": ("1st day of Rosh Hashanah", "יום א׳ של ראש השנה"),
    "RoshHashanah2": ("2nd day of Rosh Hashanah", "יום ב׳ של ראש השנה"),
    "YomKippur":     ("Yom Kippur",               "יום כיפור"),
    "Sukkos1":       ("1st day of Sukkos",        "יום א׳ של חג הסוכות"),
    "Sukkos2":       ("2nd day of Sukkos",        "יום ב׳ של חג הסוכות"),
    "Sukkos3":       ("3rd day of Sukkos",        "יום ג׳ של חג הסוכות"),
    "Sukkos4":       ("4th day of Sukkos",        "יום ד׳ של חג הסוכות"),
    "Sukkos5":       ("5th day of Sukkos",        "יום ה׳ של חג הסוכות"),
    "Sukkos6":       ("6th day of Sukkos",        "יום ו׳ של חג הסוכות"),
    "Sukkos7":       ("7th day of Sukkos",        "יום ז׳ של חג הסוכות"),
    "ShminiAtzeres": ("Shmini Atzeres",           "שמיני עצרת"),
    "SimchasTorah":  ("Simchas Torah",            "שמחת תורה"),
    "Pesach1":       ("1st day of Pesach",        "יום א׳ של חג הפסח"),
    "Pesach2":       ("2nd day of Pesach",        "יום ב׳ של חג הפסח"),
    "Pesach3":       ("3rd day of Pesach",        "יום ג׳ של חג הפסח"),
    "Pesach4":       ("4th day of Pesach",        "יום ד׳ של חג הפסח"),
    "Pesach5":       ("5th day of Pesach",        "יום ה׳ של חג הפסח"),
    "Pesach6":       ("6th day of Pesach",        "יום ו׳ של חג הפסח"),
    "Pesach7":       ("7th day of Pesach",        "יום ז׳ של חג הפסח"),
    "Pesach8":       ("8th day of Pesach",        "יום ח׳ של חג הפסח"),
    "Shavuos1":      ("1st day of Shavuos",       "יום א׳ של חג השבועות"),
    "Shavuos2":      ("2nd day of Shavuos",       "יום ב׳ של חג השבועות"),
}

CHOL: dict[str, tuple[str, str]] = {
    "TzomGedalia":     ("Tzom Gedalia",          "צום גדליה"),
    "TenTeves":        ("Tenth of Teves",        "עשרה בטבת"),
    "TaanisEsther":    ("Taanis Esther",         "תענית אסתר"),
    "SeventeenTammuz": ("Seventeenth of Tammuz", "שבעה עשר בתמוז"),
    "NineAv":          ("Ninth of Av",           "תשעה באב"),
    "Purim":           ("Purim",                 "פורים"),
    "ShushanPurim":    ("Shushan Purim",         "שושן פורים"),
}
for _n in range(1, 9):
    CHOL[f"Chanukah{_n}"] = (
        f"{ordinal(_n)} day of Chanukah",
        f"יום {int_to_hebrew(_n)} של חנוכה",
    )

# pyluach fast_day() names → our keys
FAST_DAYS: dict[str, str] = {
    "Tzom Gedalia":  "TzomGedalia",
    "10 of Teves":   "TenTeves",
    "Taanis Esther": "TaanisEsther",
    "17 of Tamuz":   "SeventeenTammuz",
    "9 of Av":       "NineAv",
}

SPECIAL_PARSHAS: dict[str, tuple[str, str, str]] = {
    # pyluach four_parshios() name: (key, English, Hebrew)
    "Shekalim":  ("Shekalim",  "Parshas Shekalim",  "פרשת שקלים"),
    "Zachor":    ("Zachor",    "Parshas Zachor",    "פרשת זכור"),
    "Parah":     ("Parah",     "Parshas Parah",     "פרשת פרה"),
    "Hachodesh": ("HaChodesh", "Parshas HaChodesh", "פרשת החודש"),
}


def rosh_chodesh(month_key: str, english: str, hebrew: str, day: int | None) -> tuple[str, str, str]:
    """Names for a Rosh Chodesh day; ``day`` is 1 or 2 for two-day months, else None."""
    if day is None:
        return (f"RoshChodesh{month_key}", f"Rosh Chodesh {english}", f"ראש חודש {hebrew}")
    return (
        f"RoshChodesh{month_key}{day}",
        f"{ordinal(day)} day of Rosh Chodesh {english}",
        f"יום {int_to_hebrew(day)} של ראש חודש {hebrew}",
    )


# ══════════════════════════════════════════════════════════════════════════════
# MINOR HOLIDAYS & OMER
# ══════════════════════════════════════════════════════════════════════════════

MINOR_HOLIDAYS: dict[str, tuple[str, str]] = {
    "ErevYomKippur":      ("Erev Yom Kippur",      "ערב יום כיפור"),
    "ErevSukkos":         ("Erev Sukkos",          "ערב סוכות"),
    "ErevPesach":         ("Erev Pesach",          "ערב פסח"),
    "PesachSheni":        ("Pesach Sheni",         "פסח שני"),
    "LagBaomer":          ("Lag Baomer",           "ל״ג בעומר"),
    "ErevShavuos":        ("Erev Shavuos",         "ערב שבועות"),
    "ErevRoshHashanah":   ("Erev Rosh Hashanah",   "ערב ראש השנה"),
    "Shvat15":            ("15th of Shvat",        "ט״ו בשבט"),
    "Av15":               ("15th of Av",           "ט״ו באב"),
    "PurimKattan":        ("Purim Kattan",         "פורים קטן"),
    "ShushanPurimKattan": ("Shushan Purim Kattan", "שושן פורים קטן"),
}


def omer(day: int) -> tuple[str, str, str]:
    return (
        f"Omer{day}",
        f"{ordinal(day)} day of the Omer",
        f"יום {int_to_hebrew(day)} לעומר",
    )


# ══════════════════════════════════════════════════════════════════════════════
# ISRAELI & CHABAD DAYS
# ══════════════════════════════════════════════════════════════════════════════

ISRAELI_HOLIDAYS: dict[str, tuple[str, str]] = {
    "YomHaShoah":      ("Yom HaShoah",              "יום השואה"),
    "YomHaZikaron":    ("Yom HaZikaron",            "יום הזיכרון"),
    "YomHaAtzmaut":    ("Yom HaAtzmaut",            "יום העצמאות"),
    "YomYerushalayim": ("Yom Yerushalayim",         "יום ירושלים"),
    "RabinMemorial":   ("Yitzchak Rabin Memorial",  "יום הזיכרון ליצחק רבין"),
}

CHABAD_HOLIDAYS: dict[str, tuple[str, str]] = {
    "VovTishrei":        ("Vov Tishrei",         "ו׳ תשרי"),
    "YudTesKislev":      ("Yud Tes Kislev",      "י״ט כסלו"),
    "ChofKislev":        ("Chof Kislev",         "כ׳ כסלו"),
    "HeiTeves":          ("Hei Teves",           "ה׳ טבת"),
    "YudShvat":          ("Yud Shvat",           "י׳ שבט"),
    "ChofBeisShvat":     ("Chof Beis Shvat",     "כ״ב שבט"),
    "YudAlephNissan":    ("Yud Aleph Nissan",    "י״א ניסן"),
    "GimmelTammuz":      ("Gimmel Tammuz",       "ג׳ תמוז"),
    "YudBeisTammuz":     ("Yud Beis Tammuz",     "י״ב תמוז"),
    "YudGimmelTammuz":   ("Yud Gimmel Tammuz",   "י״ג תמוז"),
    "ChofAv":            ("Chof Av",             "כ׳ אב"),
    "ChaiElul":          ("Chai Elul",           "ח״י אלול"),
}
