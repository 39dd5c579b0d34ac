# yidlist/listing.py
"""
Merge stage: fan the per-year expansion out over a process pool, scan the
study cycles in this process meanwhile, then filter and sort.
"""

from __future__ import annotations

import concurrent.futures
import logging
import os

from .daily_study import study_events
from .expander import expand_year
from .models import Event, Selection, YearRequest
from .planner import Plan, plan

_LOGGER = logging.getLogger(__name__)


def _expand_years(
    years: tuple[int, ...], selection: Selection, workers: int, plan_: Plan
) -> list[Event]:
    """Expand every year and the study span; results keep year order, then study order."""
    if workers <= 1 or len(years) <= 1:
        events = [event for year in years for event in expand_year(year, selection)]
        events.extend(study_events(plan_.study_first, plan_.study_last, selection.daily_study))
        return events

    with concurrent.futures.ProcessPoolExecutor(max_workers=min(workers, len(years))) as executor:
        futures = {year: executor.submit(expand_year, year, selection) for year in years}
        studies = list(study_events(plan_.study_first, plan_.study_last, selection.daily_study))
        events = [event for year in years for event in futures[year].result()]
    events.extend(studies)
    return events


def generate(
    request: YearRequest,
    selection: Selection,
    *,
    workers: int | None = None,
    sort: bool = True,
) -> list[Event]:
    """
    Every event the request asks for.

    Raises InvalidYear before any work starts if the request touches a year the
    calendar cannot express. Sorting is stable, so events sharing an instant
    keep expansion order (years ascending, then study cycles).
    """
    plan_ = plan(request)
    workers = workers or os.cpu_count() or 1

    events = _expand_years(plan_.years, selection, workers, plan_)
    if plan_.window is not None:
        events = [event for event in events if plan_.keep(event.day)]
    if sort:
        events.sort(key=lambda event: event.day)

    _LOGGER.debug("Generated %d events (workers=%d, sorted=%s)", len(events), workers, sort)
    return events
