# yidlist/yidlist_lib/helper.py

"""
Small formatting and date helpers shared by the generators.
"""

from __future__ import annotations

from datetime import date, timedelta


def is_shabbat(gdate: date) -> bool:
    """Return True if the given Gregorian date is Saturday (Shabbat)."""
    return gdate.weekday() == 5  # Python: Monday=0 … Saturday=5


def shabbos_on_or_before(gdate: date) -> date:
    """Return the Saturday on or before gdate."""
    days_back = (gdate.weekday() - 5) % 7
    return gdate - timedelta(days=days_back)


def ordinal(num: int) -> str:
    """1 → '1st', 2 → '2nd', 11 → '11th', 23 → '23rd'."""
    if 10 <= num % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(num % 10, "th")
    return f"{num}{suffix}"


def int_to_hebrew(num: int) -> str:
    """
    Convert an integer (1–400+) into Hebrew letters with geresh/gershayim.
    E.g. 5 → 'ה׳', 15 → 'ט״ו', 100 → 'ק׳', 115 → 'קט״ו'
    """
    mapping = [
        (400, "ת"), (300, "ש"), (200, "ר"), (100, "ק"),
        (90,  "צ"),  (80,  "פ"),  (70,  "ע"),  (60,  "ס"),  (50,  "נ"),
        (40,  "מ"),  (30,  "ל"),  (20,  "כ"),  (10,  "י"),
        (9,   "ט"),  (8,   "ח"),  (7,   "ז"),  (6,   "ו"),  (5,   "ה"),
        (4,   "ד"),  (3,   "ג"),  (2,   "ב"),  (1,   "א"),
    ]

    result = ""
    temp = num

    # 15 and 16 are written ט״ו / ט״ז
    if num % 100 in (15, 16):
        temp = num - num % 100
        tail = "טו" if num % 100 == 15 else "טז"
    else:
        tail = ""

    for value, letter in mapping:
        while temp >= value:
            result += letter
            temp -= value
    result += tail

    # Add gershayim for multi-letter, geresh for single
    if len(result) > 1:
        return f"{result[:-1]}״{result[-1]}"
    return f"{result}׳"
