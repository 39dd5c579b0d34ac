"""yidlist: Hebrew calendar event lister."""

from __future__ import annotations

from .errors import ConfigError, InvalidDate, InvalidYear, RenderError, YidListError
from .listing import generate
from .models import Event, Selection, YearRequest

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "Event",
    "InvalidDate",
    "InvalidYear",
    "RenderError",
    "Selection",
    "YearRequest",
    "YidListError",
    "generate",
]
