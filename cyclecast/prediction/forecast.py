"""Next-period forecast, cycle day, ovulation day and fertile window.

Ovulation is placed a fixed luteal phase (14 days) before the next expected
period, whatever the total cycle length.  The fertile window covers the five
days before ovulation plus the ovulation day itself.
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime, time, timedelta
from typing import Iterable

from cyclecast.prediction.base import FertilityWindow, PredictionResult, ProjectedPeriod
from cyclecast.prediction.config_loader import PredictionConfig, get_prediction_config
from cyclecast.prediction.cycle_length import estimate_cycle_length
from cyclecast.prediction.dates import format_display_date

logger = logging.getLogger("cyclecast.prediction.forecast")

_SECONDS_PER_DAY = 24 * 60 * 60


def _as_date(d: date) -> date:
    return d.date() if isinstance(d, datetime) else d


def days_until(target: date, now: date) -> int:
    """Whole days from ``now`` to ``target``, rounded up; negative when past.

    A ``datetime`` for ``now`` is measured against midnight of ``target``, so
    partial days count as a full day remaining.
    """
    if isinstance(now, datetime):
        target_start = datetime.combine(target, time(), tzinfo=now.tzinfo)
        return math.ceil((target_start - now).total_seconds() / _SECONDS_PER_DAY)
    return (target - now).days


def predict_next(
    episode_start: date,
    all_dates: Iterable[date],
    now: date,
    config: PredictionConfig | None = None,
) -> PredictionResult:
    """Forecast the next period start.

    Args:
        episode_start: First day of the most recent period.
        all_dates:     Every logged period day; used for the cycle length.
        now:           Reference date (or datetime) the countdown is taken from.
        config:        Prediction settings; the global config by default.

    Returns:
        PredictionResult; ``days`` is negative when the period is overdue.
    """
    config = config or get_prediction_config()
    cycle_length = estimate_cycle_length(all_dates, config)
    forecast = _as_date(episode_start) + timedelta(days=cycle_length)
    result = PredictionResult(
        date=forecast,
        days=days_until(forecast, now),
        cycle_length=cycle_length,
        display_date=format_display_date(forecast),
    )
    if result.days < 0:
        logger.debug("Period overdue by %d day(s) (expected %s)", -result.days, forecast)
    return result


def cycle_day_of(episode_start: date, reference_date: date) -> int:
    """Return the 1-based cycle day of ``reference_date``.

    The period start itself is day 1.  Not clamped: a reference before the
    start yields 0 or a negative number, and past the usual cycle length the
    count keeps growing.
    """
    return (_as_date(reference_date) - _as_date(episode_start)).days + 1


def ovulation_day(
    episode_start: date,
    cycle_length: int | None = None,
    config: PredictionConfig | None = None,
) -> date:
    """Estimated ovulation day: ``start + (cycle_length - 14)`` days."""
    config = config or get_prediction_config()
    length = cycle_length or config.default_cycle_length
    return _as_date(episode_start) + timedelta(days=length - config.luteal_phase_days)


def fertility_window(
    episode_start: date,
    cycle_length: int | None = None,
    config: PredictionConfig | None = None,
) -> FertilityWindow:
    """Fertile window ending on the ovulation day and opening 5 days earlier."""
    config = config or get_prediction_config()
    ovulation = ovulation_day(episode_start, cycle_length, config)
    return FertilityWindow(
        start=ovulation - timedelta(days=config.fertile_lead_days),
        end=ovulation,
        ovulation_day=ovulation,
    )


def project_periods(
    episode_start: date,
    cycle_length: int,
    logged_dates: Iterable[date] = (),
    config: PredictionConfig | None = None,
) -> list[ProjectedPeriod]:
    """Project the next few periods for calendar display.

    Period ``i`` (0-based) starts ``cycle_length * (i + 1)`` days after
    ``episode_start`` and spans ``projection.period_days`` days.  Days that are
    already logged are left out of the projected days.

    Args:
        episode_start: First day of the most recent period.
        cycle_length:  Cycle length to step forward by.
        logged_dates:  Logged period days.
        config:        Prediction settings; the global config by default.

    Returns:
        One ProjectedPeriod per projected cycle, earliest first.
    """
    config = config or get_prediction_config()
    logged = {_as_date(d) for d in logged_dates}
    start = _as_date(episode_start)

    projected: list[ProjectedPeriod] = []
    for i in range(config.projection.cycles):
        period_start = start + timedelta(days=cycle_length * (i + 1))
        days = [
            period_start + timedelta(days=j)
            for j in range(config.projection.period_days)
        ]
        projected.append(
            ProjectedPeriod(start=period_start, days=[d for d in days if d not in logged])
        )
    return projected
