# yidlist/cli.py
"""Command-line entry point: ``yidlist list`` and ``yidlist convert``."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from . import config
from .const import HEBREW_YEAR_THRESHOLD
from .convert import convert, render_conversion
from .errors import YidListError
from .listing import generate
from .models import (
    DailyStudy,
    Language,
    Location,
    OutputType,
    ReadingKind,
    Selection,
    YearRequest,
    YearType,
)
from .render import render

_LOGGER = logging.getLogger(__name__)

READING_EVENTS: dict[str, ReadingKind] = {
    "yom-tov": ReadingKind.YOM_TOV,
    "chol": ReadingKind.CHOL,
    "shabbos": ReadingKind.SHABBOS,
    "special-parshas": ReadingKind.SPECIAL_PARSHAS,
}
STUDY_EVENTS: dict[str, DailyStudy] = {
    "daf-yomi": DailyStudy.DAF_YOMI,
    "rambam-1-chapter": DailyStudy.RAMBAM_ONE_CHAPTER,
    "rambam-3-chapters": DailyStudy.RAMBAM_THREE_CHAPTERS,
    "yerushalmi-yomi": DailyStudy.YERUSHALMI_YOMI,
}
FLAG_EVENTS = ("omer", "minor-holidays", "israeli-holidays", "chabad-holidays", "shabbos-mevarchim")
DEFAULT_EVENTS = ["yom-tov", "chol", "shabbos", "special-parshas"]


def build_parser() -> argparse.ArgumentParser:
    base = argparse.ArgumentParser(add_help=False)
    base.add_argument("--config", default=None, help="Path to a JSON config file")
    base.add_argument("--language", choices=[lang.value for lang in Language], default=None)
    base.add_argument("--output", choices=[out.value for out in OutputType], default=OutputType.REGULAR.value)
    base.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")

    parser = argparse.ArgumentParser(prog="yidlist", description="Hebrew calendar event lister")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", parents=[base], help="List events for a range of years")
    list_parser.add_argument("year", type=int)
    list_parser.add_argument("--years", type=int, default=1, help="Number of years to list")
    list_parser.add_argument("--type", choices=["auto", "hebrew", "gregorian"], default="auto")
    list_parser.add_argument("--location", choices=[loc.value for loc in Location], default=None)
    list_parser.add_argument(
        "--events",
        nargs="+",
        choices=[*READING_EVENTS, *FLAG_EVENTS, *STUDY_EVENTS],
        default=DEFAULT_EVENTS,
    )
    list_parser.add_argument("--exact-days", action="store_true", help="Do not move Israeli days off Shabbos")
    list_parser.add_argument("--no-sort", action="store_true")
    list_parser.add_argument("--workers", type=int, default=None, help="Worker processes for year expansion")
    list_parser.add_argument("--latitude", type=float, default=None)
    list_parser.add_argument("--longitude", type=float, default=None)
    list_parser.add_argument("--timezone", default=None)
    list_parser.add_argument("--candlelighting-offset", type=int, default=None)

    convert_parser = subparsers.add_parser("convert", parents=[base], help="Convert a date")
    convert_parser.add_argument("date", help="YYYY-MM-DD or YYYY-MONTH-DD")

    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _overrides(args: argparse.Namespace) -> dict:
    overrides = {config.CONF_LANGUAGE: args.language}
    if args.command == "list":
        overrides[config.CONF_LOCATION] = args.location
        overrides[config.CONF_CANDLELIGHT_OFFSET] = args.candlelighting_offset
        overrides[config.CONF_CITY] = {
            config.CONF_LATITUDE: args.latitude,
            config.CONF_LONGITUDE: args.longitude,
            config.CONF_TIMEZONE: args.timezone,
        }
    return overrides


def year_request(args: argparse.Namespace) -> YearRequest:
    if args.type == "auto":
        year_type = YearType.HEBREW if args.year >= HEBREW_YEAR_THRESHOLD else YearType.GREGORIAN
    else:
        year_type = YearType(args.type)
    return YearRequest(args.year, args.years, year_type)


def selection_from(args: argparse.Namespace, settings: config.Settings) -> Selection:
    events = set(args.events)
    return Selection(
        location=settings.location,
        readings=frozenset(kind for name, kind in READING_EVENTS.items() if name in events),
        omer="omer" in events,
        minor_holidays="minor-holidays" in events,
        israeli_holidays="israeli-holidays" in events,
        chabad_holidays="chabad-holidays" in events,
        shabbos_mevarchim="shabbos-mevarchim" in events,
        exact_days=args.exact_days,
        daily_study=frozenset(study for name, study in STUDY_EVENTS.items() if name in events),
        custom_holidays=settings.custom_holidays,
        city=settings.city,
    )


def _utf8_stdout() -> None:
    """Output is always UTF-8, whatever the locale says."""
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None and (sys.stdout.encoding or "").lower().replace("-", "") != "utf8":
        reconfigure(encoding="utf-8")


def run(args: argparse.Namespace) -> None:
    settings = config.load_config(args.config, _overrides(args))
    output = OutputType(args.output)
    _utf8_stdout()

    if args.command == "convert":
        render_conversion(convert(args.date), output, settings.language, sys.stdout)
        return

    events = generate(
        year_request(args),
        selection_from(args, settings),
        workers=args.workers,
        sort=not args.no_sort,
    )
    render(events, output, settings.language, sys.stdout)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        run(args)
    except YidListError as err:
        _LOGGER.debug("Aborting", exc_info=True)
        print(f"yidlist: error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
