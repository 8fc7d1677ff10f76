"""Cycle history and summary statistics over all logged periods."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Iterable

from cyclecast.prediction.base import CycleHistoryEntry, CycleStatistics, PeriodEpisode
from cyclecast.prediction.config_loader import PredictionConfig, get_prediction_config
from cyclecast.prediction.cycle_length import estimate_cycle_length, round_half_up
from cyclecast.prediction.episodes import group_episodes
from cyclecast.prediction.forecast import cycle_day_of

logger = logging.getLogger("cyclecast.prediction.history")


def cycle_history(
    episodes: list[PeriodEpisode], now: date | None = None
) -> list[CycleHistoryEntry]:
    """Build one history entry per episode, most recent first.

    The most recent episode opens the in-progress cycle: it has no cycle
    length or end date yet, and ``days_so_far`` is the cycle day of ``now``
    when a reference date is given.

    Args:
        episodes: Episodes ordered most recent first.
        now:      Reference date for the in-progress cycle.
    """
    history: list[CycleHistoryEntry] = []
    newer_start: date | None = None
    for episode in episodes:
        if newer_start is None:
            history.append(
                CycleHistoryEntry(
                    start_date=episode.start,
                    period_length=episode.length,
                    in_progress=True,
                    days_so_far=cycle_day_of(episode.start, now) if now else None,
                )
            )
        else:
            length = (newer_start - episode.start).days
            history.append(
                CycleHistoryEntry(
                    start_date=episode.start,
                    period_length=episode.length,
                    cycle_length=length,
                    end_date=episode.start + timedelta(days=length - 1),
                )
            )
        newer_start = episode.start
    return history


def average_period_length(episodes: list[PeriodEpisode]) -> int:
    """Mean number of logged days per period, rounded half-up; 0 if none."""
    if not episodes:
        return 0
    return round_half_up(sum(e.length for e in episodes) / len(episodes))


def cycle_statistics(
    dates: Iterable[date],
    now: date | None = None,
    config: PredictionConfig | None = None,
) -> CycleStatistics:
    """Summarize logged periods for a statistics view.

    Args:
        dates:  Logged period days in any order.
        now:    Reference date for the in-progress cycle.
        config: Prediction settings; the global config by default.

    Returns:
        CycleStatistics; all zeros and an empty history when nothing is logged.
    """
    config = config or get_prediction_config()
    dates = list(dates)
    episodes = group_episodes(dates, config.episode_gap_days)
    if not episodes:
        return CycleStatistics()

    stats = CycleStatistics(
        completed_cycles=max(0, len(episodes) - 1),
        average_cycle_length=estimate_cycle_length(dates, config),
        average_period_length=average_period_length(episodes),
        history=cycle_history(episodes, now),
    )
    logger.debug(
        "Statistics: %d completed cycle(s), avg cycle %d, avg period %d",
        stats.completed_cycles,
        stats.average_cycle_length,
        stats.average_period_length,
    )
    return stats
