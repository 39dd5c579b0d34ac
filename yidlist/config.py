# yidlist/config.py
"""
Configuration loading.

Values are layered: built-in defaults, then an optional JSON file, then
command-line overrides. The merged mapping is validated with voluptuous and
turned into the immutable values the generators use.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import voluptuous as vol
from timezonefinder import TimezoneFinder

from .const import DEFAULT_CANDLELIGHT_OFFSET, DOMAIN
from .errors import ConfigError
from .models import City, CustomHolidayDef, DayMonth, Language, Location

_LOGGER = logging.getLogger(__name__)

CONF_LANGUAGE = "language"
CONF_LOCATION = "location"
CONF_CANDLELIGHT_OFFSET = "candlelighting_offset"
CONF_CITY = "city"
CONF_LATITUDE = "latitude"
CONF_LONGITUDE = "longitude"
CONF_TIMEZONE = "timezone"
CONF_CUSTOM_HOLIDAYS = "custom_holidays"
CONF_PRINTABLE = "printable"
CONF_JSON = "json"
CONF_MONTH = "month"
CONF_DAY = "day"
CONF_IF_NOT_EXISTS = "if_not_exists"

DEFAULT_LANGUAGE = Language.ENGLISH.value
DEFAULT_LOCATION = Location.DIASPORA.value
CONFIG_FILENAME = "config.json"


def _timezone(value: Any) -> str:
    name = vol.Coerce(str)(value)
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as err:
        raise vol.Invalid(f"unknown timezone {name!r}") from err
    return name


_OFFSET = vol.All(vol.Coerce(int), vol.Range(min=0, max=120))

_DAY_MONTH = {
    vol.Required(CONF_MONTH): vol.All(vol.Coerce(int), vol.Range(min=1, max=13)),
    vol.Required(CONF_DAY): vol.All(vol.Coerce(int), vol.Range(min=1, max=30)),
}

CUSTOM_HOLIDAY_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_PRINTABLE): vol.All(str, vol.Length(min=1)),
        vol.Required(CONF_JSON): vol.All(str, vol.Length(min=1)),
        **_DAY_MONTH,
        vol.Optional(CONF_IF_NOT_EXISTS, default=list): [vol.Schema(_DAY_MONTH)],
    }
)

CITY_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_LATITUDE): vol.All(vol.Coerce(float), vol.Range(min=-90, max=90)),
        vol.Required(CONF_LONGITUDE): vol.All(vol.Coerce(float), vol.Range(min=-180, max=180)),
        vol.Optional(CONF_TIMEZONE): _timezone,
        vol.Optional(CONF_CANDLELIGHT_OFFSET): _OFFSET,
    }
)

CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_LANGUAGE, default=DEFAULT_LANGUAGE): vol.In([lang.value for lang in Language]),
        vol.Optional(CONF_LOCATION, default=DEFAULT_LOCATION): vol.In([loc.value for loc in Location]),
        vol.Optional(CONF_CANDLELIGHT_OFFSET, default=DEFAULT_CANDLELIGHT_OFFSET): _OFFSET,
        vol.Optional(CONF_CITY, default=None): vol.Any(None, CITY_SCHEMA),
        vol.Optional(CONF_CUSTOM_HOLIDAYS, default=list): [CUSTOM_HOLIDAY_SCHEMA],
    }
)


@dataclass(frozen=True)
class Settings:
    language: Language
    location: Location
    city: City | None
    custom_holidays: tuple[CustomHolidayDef, ...]


# ─── Sources ──────────────────────────────────────────────────────────────────

def default_config_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / DOMAIN / CONFIG_FILENAME


def read_config_file(path: str | os.PathLike | None) -> dict[str, Any]:
    """
    Read a JSON config file.

    An explicit path must exist. Without one the XDG default is used if present.
    """
    if path is None:
        candidate = default_config_path()
        if not candidate.is_file():
            return {}
        path = candidate
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as err:
        raise ConfigError(f"Cannot read config file {path}: {err}") from err
    except json.JSONDecodeError as err:
        raise ConfigError(f"Config file {path} is not valid JSON: {err}") from err
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    _LOGGER.debug("Loaded config from %s", path)
    return data


def merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """
    Overlay non-None ``overrides`` on ``base``.

    The city mapping merges key by key. An overridden top-level candle-lighting
    offset also replaces the city's own offset.
    """
    merged = dict(base)
    for key, value in overrides.items():
        if value is None:
            continue
        if key == CONF_CITY and isinstance(value, dict):
            city = dict(merged.get(CONF_CITY) or {})
            city.update({k: v for k, v in value.items() if v is not None})
            merged[CONF_CITY] = city or None
        else:
            merged[key] = value
            if key == CONF_CANDLELIGHT_OFFSET and isinstance(merged.get(CONF_CITY), dict):
                merged[CONF_CITY] = {
                    k: v for k, v in merged[CONF_CITY].items() if k != CONF_CANDLELIGHT_OFFSET
                }
    return merged


# ─── Timezone lookup ──────────────────────────────────────────────────────────

def get_tzname(lat: float, lon: float) -> str:
    """Timezone name for the coordinates, or UTC when none is found."""
    try:
        tzname = TimezoneFinder().timezone_at(lng=lon, lat=lat)
    except Exception as err:
        _LOGGER.warning("Timezone lookup failed (%s), falling back to UTC", err)
        return "UTC"
    if not tzname:
        _LOGGER.warning("No timezone found for %.4f, %.4f; falling back to UTC", lat, lon)
        return "UTC"
    return tzname


# ─── Build ────────────────────────────────────────────────────────────────────

def _city(conf: dict[str, Any]) -> City | None:
    city = conf[CONF_CITY]
    if city is None:
        return None
    tzname = city.get(CONF_TIMEZONE) or get_tzname(city[CONF_LATITUDE], city[CONF_LONGITUDE])
    return City(
        latitude=city[CONF_LATITUDE],
        longitude=city[CONF_LONGITUDE],
        timezone=tzname,
        candlelighting_offset=city.get(CONF_CANDLELIGHT_OFFSET, conf[CONF_CANDLELIGHT_OFFSET]),
    )


def _custom_holiday(conf: dict[str, Any]) -> CustomHolidayDef:
    return CustomHolidayDef(
        printable=conf[CONF_PRINTABLE],
        json=conf[CONF_JSON],
        date=DayMonth(conf[CONF_MONTH], conf[CONF_DAY]),
        if_not_exists=tuple(DayMonth(f[CONF_MONTH], f[CONF_DAY]) for f in conf[CONF_IF_NOT_EXISTS]),
    )


def build_settings(raw: dict[str, Any]) -> Settings:
    try:
        conf = CONFIG_SCHEMA(raw)
    except vol.Invalid as err:
        raise ConfigError(f"Invalid configuration: {err}") from err
    return Settings(
        language=Language(conf[CONF_LANGUAGE]),
        location=Location(conf[CONF_LOCATION]),
        city=_city(conf),
        custom_holidays=tuple(_custom_holiday(c) for c in conf[CONF_CUSTOM_HOLIDAYS]),
    )


def load_config(
    path: str | os.PathLike | None = None, overrides: dict[str, Any] | None = None
) -> Settings:
    """Defaults, then the config file, then ``overrides``; validated."""
    return build_settings(merge(read_config_file(path), overrides or {}))
