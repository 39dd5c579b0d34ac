# yidlist/const.py

DOMAIN = "yidlist"

# Every Hebrew day is announced at this civil hour of the preceding evening.
EVENING_HOUR = 18

DEFAULT_CANDLELIGHT_OFFSET = 18

# pyluach month numbers (Nissan-based)
NISSAN = 1
IYAR = 2
SIVAN = 3
TAMMUZ = 4
AV = 5
ELUL = 6
TISHREI = 7
CHESHVAN = 8
KISLEV = 9
TEVES = 10
SHVAT = 11
ADAR = 12      # Adar, or Adar I in a leap year
ADAR_II = 13   # leap years only

# Numeric years from here up are Hebrew years.
HEBREW_YEAR_THRESHOLD = 3000
