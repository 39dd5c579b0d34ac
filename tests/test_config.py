from __future__ import annotations

import json
import logging

import pytest

from yidlist import config
from yidlist.errors import ConfigError
from yidlist.models import City, CustomHolidayDef, DayMonth, Language, Location


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_defaults():
    settings = config.load_config()
    assert settings.language is Language.ENGLISH
    assert settings.location is Location.DIASPORA
    assert settings.city is None
    assert settings.custom_holidays == ()


def test_default_path_follows_xdg(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert config.default_config_path() == tmp_path / "yidlist" / "config.json"

    (tmp_path / "yidlist").mkdir()
    _write(tmp_path / "yidlist" / "config.json", {"language": "he"})
    assert config.load_config().language is Language.HEBREW


def test_file_values(tmp_path):
    path = _write(tmp_path / "c.json", {
        "location": "israel",
        "city": {"latitude": 31.778, "longitude": 35.235, "timezone": "Asia/Jerusalem",
                 "candlelighting_offset": 40},
        "custom_holidays": [
            {"printable": "Birthday", "json": "birthday", "month": 13, "day": 1,
             "if_not_exists": [{"month": 12, "day": 1}]},
        ],
    })
    settings = config.load_config(path)
    assert settings.location is Location.ISRAEL
    assert settings.city == City(31.778, 35.235, "Asia/Jerusalem", 40)
    assert settings.custom_holidays == (
        CustomHolidayDef("Birthday", "birthday", DayMonth(13, 1), (DayMonth(12, 1),)),
    )


def test_top_level_offset_applies_to_city(tmp_path):
    path = _write(tmp_path / "c.json", {
        "candlelighting_offset": 20,
        "city": {"latitude": 40.7, "longitude": -74.0, "timezone": "America/New_York"},
    })
    assert config.load_config(path).city.candlelighting_offset == 20


def test_overrides_win(tmp_path):
    path = _write(tmp_path / "c.json", {
        "language": "he",
        "city": {"latitude": 40.7, "longitude": -74.0, "timezone": "America/New_York",
                 "candlelighting_offset": 40},
    })
    settings = config.load_config(path, {
        config.CONF_LANGUAGE: "en",
        config.CONF_LOCATION: None,
        config.CONF_CANDLELIGHT_OFFSET: 18,
        config.CONF_CITY: {config.CONF_LATITUDE: 41.0, config.CONF_LONGITUDE: None,
                           config.CONF_TIMEZONE: None},
    })
    assert settings.language is Language.ENGLISH
    assert settings.location is Location.DIASPORA
    assert settings.city == City(41.0, -74.0, "America/New_York", 18)


def test_city_from_overrides_only():
    settings = config.load_config(None, {
        config.CONF_CITY: {config.CONF_LATITUDE: 40.7, config.CONF_LONGITUDE: -74.0,
                           config.CONF_TIMEZONE: "America/New_York"},
    })
    assert settings.city.candlelighting_offset == 18


def test_empty_city_override_means_no_city():
    settings = config.load_config(None, {
        config.CONF_CITY: {config.CONF_LATITUDE: None, config.CONF_LONGITUDE: None,
                           config.CONF_TIMEZONE: None},
    })
    assert settings.city is None


@pytest.mark.parametrize(
    "raw",
    [
        {"language": "fr"},
        {"location": "mars"},
        {"candlelighting_offset": -3},
        {"city": {"latitude": 100, "longitude": 0, "timezone": "UTC"}},
        {"city": {"latitude": 10, "longitude": 0, "timezone": "Not/AZone"}},
        {"custom_holidays": [{"printable": "x", "json": "x", "month": 14, "day": 1}]},
        {"unknown": 1},
    ],
)
def test_invalid_values(raw):
    with pytest.raises(ConfigError):
        config.build_settings(raw)


def test_bad_files(tmp_path):
    with pytest.raises(ConfigError):
        config.load_config(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        config.load_config(broken)

    with pytest.raises(ConfigError):
        config.load_config(_write(tmp_path / "list.json", [1, 2]))


def test_timezone_lookup(monkeypatch):
    class _Finder:
        def timezone_at(self, lng, lat):
            return "Europe/London"

    monkeypatch.setattr(config, "TimezoneFinder", _Finder)
    settings = config.build_settings({"city": {"latitude": 51.5, "longitude": -0.12}})
    assert settings.city.timezone == "Europe/London"


def test_timezone_fallback_to_utc(monkeypatch, caplog):
    class _Finder:
        def timezone_at(self, lng, lat):
            return None

    monkeypatch.setattr(config, "TimezoneFinder", _Finder)
    with caplog.at_level(logging.WARNING, logger="yidlist.config"):
        assert config.get_tzname(0.0, -160.0) == "UTC"
    assert "falling back to UTC" in caplog.text
