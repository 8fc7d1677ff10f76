"""Cycle prediction facade.

Wraps the pure functions of this package behind one object bound to a
prediction config, and converts caller-supplied dates (``date``,
``datetime`` or ISO-8601 strings) at the boundary.  Holds no state besides
the config, so one instance can be shared freely.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable

from cyclecast.prediction import classification, cycle_length, forecast, history
from cyclecast.prediction.base import (
    CycleDayClassification,
    CycleSnapshot,
    CycleStatistics,
    FertilityWindow,
    PeriodEpisode,
    PredictionResult,
    ProjectedPeriod,
)
from cyclecast.prediction.config_loader import PredictionConfig, get_prediction_config
from cyclecast.prediction.dates import DateLike, parse_logged_date, parse_logged_dates
from cyclecast.prediction.episodes import group_episodes

logger = logging.getLogger("cyclecast.prediction.predictor")


def _reference(now: DateLike) -> date:
    """Parse a reference date, keeping a datetime whole for partial-day countdowns."""
    return now if isinstance(now, datetime) else parse_logged_date(now)


class CyclePredictor:
    """Predict periods, ovulation and cycle phases from logged period days.

    Usage::

        predictor = CyclePredictor()
        snapshot = predictor.snapshot(logged_dates, now=date(2024, 2, 10))
        print(snapshot.prediction.date)
        print(snapshot.today.phase)
    """

    def __init__(self, config: PredictionConfig | None = None) -> None:
        self._config = config or get_prediction_config()

    @property
    def config(self) -> PredictionConfig:
        return self._config

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------

    def episodes(self, dates: Iterable[DateLike]) -> list[PeriodEpisode]:
        return group_episodes(parse_logged_dates(dates), self._config.episode_gap_days)

    def estimate_cycle_length(self, dates: Iterable[DateLike]) -> int:
        return cycle_length.estimate_cycle_length(parse_logged_dates(dates), self._config)

    def predict_next(
        self,
        episode_start: DateLike,
        all_dates: Iterable[DateLike],
        now: DateLike,
    ) -> PredictionResult:
        return forecast.predict_next(
            parse_logged_date(episode_start),
            parse_logged_dates(all_dates),
            _reference(now),
            self._config,
        )

    def cycle_day_of(self, episode_start: DateLike, reference_date: DateLike) -> int:
        return forecast.cycle_day_of(
            parse_logged_date(episode_start), parse_logged_date(reference_date)
        )

    def ovulation_day(self, episode_start: DateLike, cycle_length: int | None = None) -> date:
        return forecast.ovulation_day(
            parse_logged_date(episode_start), cycle_length, self._config
        )

    def fertility_window(
        self, episode_start: DateLike, cycle_length: int | None = None
    ) -> FertilityWindow:
        return forecast.fertility_window(
            parse_logged_date(episode_start), cycle_length, self._config
        )

    def classify(self, cycle_day: int) -> CycleDayClassification:
        return classification.classify(cycle_day)

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def cycle_info(
        self, episode_start: DateLike, reference_date: DateLike
    ) -> CycleDayClassification | None:
        """Classify ``reference_date`` within the cycle opened by ``episode_start``.

        Returns:
            The classification, or None when the reference date precedes the
            episode start and is therefore not in an active cycle.
        """
        day = self.cycle_day_of(episode_start, reference_date)
        if day < 1:
            logger.debug("Reference %s precedes cycle start %s", reference_date, episode_start)
            return None
        return classification.classify(day)

    def project_periods(
        self, episode_start: DateLike, all_dates: Iterable[DateLike]
    ) -> list[ProjectedPeriod]:
        dates = parse_logged_dates(all_dates)
        return forecast.project_periods(
            parse_logged_date(episode_start),
            cycle_length.estimate_cycle_length(dates, self._config),
            dates,
            self._config,
        )

    def statistics(
        self, dates: Iterable[DateLike], now: DateLike | None = None
    ) -> CycleStatistics:
        reference = _reference(now) if now is not None else None
        return history.cycle_statistics(parse_logged_dates(dates), reference, self._config)

    def snapshot(self, dates: Iterable[DateLike], now: DateLike) -> CycleSnapshot:
        """Compute every derived view for one reference date.

        Args:
            dates: Logged period days in any order.
            now:   Reference date, datetime or ISO-8601 string.

        Returns:
            CycleSnapshot.  With nothing logged only ``statistics`` is set.
            ``today`` is None when ``now`` precedes the latest period start.
        """
        mc = self._config
        now = _reference(now)
        logged = parse_logged_dates(dates)
        snapshot = CycleSnapshot(
            reference_date=parse_logged_date(now),
            statistics=history.cycle_statistics(logged, now, mc),
        )

        episodes = group_episodes(logged, mc.episode_gap_days)
        if not episodes:
            logger.debug("No logged periods; snapshot has statistics only")
            return snapshot

        start = episodes[0].start
        prediction = forecast.predict_next(start, logged, now, mc)
        snapshot.last_period_start = start
        snapshot.prediction = prediction
        snapshot.today = self.cycle_info(start, now)
        snapshot.fertility_window = forecast.fertility_window(
            start, prediction.cycle_length, mc
        )
        snapshot.projected_periods = forecast.project_periods(
            start, prediction.cycle_length, logged, mc
        )
        return snapshot
