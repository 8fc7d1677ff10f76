"""Cycle prediction engine for cyclecast.

Turns a snapshot of logged period days into an average cycle length, a
next-period forecast, ovulation and fertile-window estimates, and a per-day
phase / pregnancy-chance classification.  Every function is pure; the
reference date is always passed in.

Modules:
    base           — Value types, enums and errors
    config_loader  — Load/validate/hot-reload prediction_config.yaml
    dates          — Boundary parsing of caller-supplied dates
    episodes       — Grouping logged days into period episodes
    cycle_length   — Recency-weighted average cycle length
    forecast       — Next period, cycle day, ovulation, fertile window, projections
    classification — Phase and pregnancy-chance tables
    history        — Cycle history and summary statistics
    predictor      — CyclePredictor facade
"""

from cyclecast.prediction.base import (
    CycleDayClassification,
    CycleDayError,
    CycleHistoryEntry,
    CyclePhase,
    CycleSnapshot,
    CycleStatistics,
    FertilityWindow,
    InvalidDateError,
    PeriodEpisode,
    PredictionResult,
    PregnancyChance,
    ProjectedPeriod,
)
from cyclecast.prediction.classification import classify
from cyclecast.prediction.config_loader import PredictionConfig, get_prediction_config
from cyclecast.prediction.cycle_length import estimate_cycle_length
from cyclecast.prediction.episodes import group_episodes
from cyclecast.prediction.forecast import (
    cycle_day_of,
    fertility_window,
    ovulation_day,
    predict_next,
    project_periods,
)
from cyclecast.prediction.history import cycle_statistics
from cyclecast.prediction.predictor import CyclePredictor

__all__ = [
    "CyclePredictor",
    "PredictionConfig",
    "get_prediction_config",
    "group_episodes",
    "estimate_cycle_length",
    "predict_next",
    "cycle_day_of",
    "ovulation_day",
    "fertility_window",
    "project_periods",
    "classify",
    "cycle_statistics",
    "PeriodEpisode",
    "PredictionResult",
    "FertilityWindow",
    "ProjectedPeriod",
    "CycleDayClassification",
    "CycleHistoryEntry",
    "CycleStatistics",
    "CycleSnapshot",
    "CyclePhase",
    "PregnancyChance",
    "InvalidDateError",
    "CycleDayError",
]
