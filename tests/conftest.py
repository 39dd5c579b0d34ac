from __future__ import annotations

import pytest

from yidlist.models import City, Location, ReadingKind, Selection

NEW_YORK = City(
    latitude=40.7128,
    longitude=-74.006,
    timezone="America/New_York",
    candlelighting_offset=18,
)


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    """Keep a real ~/.config/yidlist/config.json out of every test."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))


@pytest.fixture
def city() -> City:
    return NEW_YORK


@pytest.fixture
def all_readings() -> frozenset[ReadingKind]:
    return frozenset(ReadingKind)


@pytest.fixture
def selection():
    """Build a Selection; keyword arguments override the defaults."""

    def _build(**kwargs) -> Selection:
        kwargs.setdefault("location", Location.DIASPORA)
        return Selection(**kwargs)

    return _build
