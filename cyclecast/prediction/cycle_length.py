"""Recency-weighted average cycle length.

Algorithm:
1. Group logged dates into episodes, most recent first.
2. Take the gaps between consecutive episode starts, newest first, at most
   ``max_weighted_gaps`` of them (5 gaps = 6 episodes).
3. Weight gap ``k`` by ``max(1 - k * 0.2, 0.2)``: the newest gap counts
   fully, each older one 0.2 less, never below 0.2.
4. Round the weighted mean half-up to whole days.

With fewer than two distinct dates, or a single episode, the default of 28
days is returned.
"""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Iterable

from cyclecast.prediction.base import PeriodEpisode
from cyclecast.prediction.config_loader import PredictionConfig, get_prediction_config
from cyclecast.prediction.episodes import episode_starts, group_episodes

logger = logging.getLogger("cyclecast.prediction.cycle_length")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (27.5 -> 28)."""
    return math.floor(value + 0.5)


def recency_weights(count: int, config: PredictionConfig | None = None) -> list[float]:
    """Return the weights for ``count`` gaps, newest first."""
    config = config or get_prediction_config()
    return [config.recency_weight(k) for k in range(count)]


def cycle_gaps(episodes: list[PeriodEpisode], max_gaps: int | None = None) -> list[int]:
    """Days between consecutive episode starts, newest gap first.

    Args:
        episodes: Episodes ordered most recent first.
        max_gaps: Keep at most this many gaps.  None keeps all.
    """
    starts = episode_starts(episodes)
    gaps = [(newer - older).days for newer, older in zip(starts, starts[1:])]
    return gaps if max_gaps is None else gaps[:max_gaps]


def estimate_cycle_length(
    dates: Iterable[date], config: PredictionConfig | None = None
) -> int:
    """Estimate the average cycle length from logged period days.

    Args:
        dates:  Logged period days in any order.
        config: Prediction settings; the global config by default.

    Returns:
        Weighted average cycle length in whole days.
    """
    config = config or get_prediction_config()
    episodes = group_episodes(dates, config.episode_gap_days)
    gaps = cycle_gaps(episodes, config.max_weighted_gaps)
    if not gaps:
        logger.debug(
            "No complete cycles in %d episode(s); using default %d days",
            len(episodes),
            config.default_cycle_length,
        )
        return config.default_cycle_length

    weights = recency_weights(len(gaps), config)
    weighted_total = sum(g * w for g, w in zip(gaps, weights))
    length = round_half_up(weighted_total / sum(weights))
    logger.debug("Estimated cycle length %d days from gaps %s", length, gaps)
    return length
