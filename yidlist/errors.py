# yidlist/errors.py
"""Exceptions raised by yidlist."""

from __future__ import annotations


class YidListError(Exception):
    """Base class for every error yidlist reports to the user."""


class InvalidYear(YidListError):
    """A requested Hebrew year is outside the calendar's supported range."""

    def __init__(self, year: int) -> None:
        super().__init__(f"Hebrew year {year} is not supported")
        self.year = year


class InvalidDate(YidListError):
    """A date given to ``convert`` could not be parsed or does not exist."""


class ConfigError(YidListError):
    """The configuration file or command-line options failed validation."""


class RenderError(YidListError):
    """Writing the rendered output failed."""
