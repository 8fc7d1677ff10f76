"""Group logged period days into period episodes.

An episode is a maximal run of logged dates where neighbouring dates (after
sorting) are no more than ``gap_days`` apart.  Episodes never overlap, and
merging two adjacent episodes would always break the gap rule.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable

from cyclecast.prediction.base import PeriodEpisode

logger = logging.getLogger("cyclecast.prediction.episodes")

DEFAULT_GAP_DAYS = 7


def _distinct_dates(dates: Iterable[date]) -> set[date]:
    return {d.date() if isinstance(d, datetime) else d for d in dates}


def group_episodes(
    dates: Iterable[date], gap_days: int = DEFAULT_GAP_DAYS
) -> list[PeriodEpisode]:
    """Cluster logged dates into period episodes.

    Args:
        dates:    Logged period days in any order; duplicates are ignored.
        gap_days: Largest gap in days that keeps two dates in one episode.

    Returns:
        Episodes ordered from most recent to oldest.  Empty for empty input.
    """
    ordered = sorted(_distinct_dates(dates), reverse=True)
    if not ordered:
        return []

    episodes: list[PeriodEpisode] = []
    current: list[date] = [ordered[0]]
    for previous, d in zip(ordered, ordered[1:]):
        if abs((previous - d).days) > gap_days:
            episodes.append(PeriodEpisode(tuple(reversed(current))))
            current = [d]
        else:
            current.append(d)
    episodes.append(PeriodEpisode(tuple(reversed(current))))

    logger.debug("Grouped %d dates into %d episodes", len(ordered), len(episodes))
    return episodes


def episode_starts(episodes: Iterable[PeriodEpisode]) -> list[date]:
    return [e.start for e in episodes]

