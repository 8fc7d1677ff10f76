"""Canonical value types for the cycle prediction engine.

Every type here is derived on demand from a snapshot of logged period dates
and a reference date.  Nothing is persisted; presentation layers consume these
objects directly or validate them into the read schemas in
``cyclecast.models``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class CyclePhase(str, Enum):
    menstrual = "Menstrual"
    follicular = "Follicular"
    ovulatory = "Ovulatory"
    luteal = "Luteal"
    extended = "Extended"


class PregnancyChance(str, Enum):
    high = "High"
    medium = "Medium"
    low = "Low"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class InvalidDateError(ValueError):
    """Raised when a logged date cannot be interpreted as a calendar date."""


class CycleDayError(ValueError):
    """Raised when a cycle day outside the active cycle is classified."""


# ---------------------------------------------------------------------------
# Episodes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PeriodEpisode:
    """A maximal run of logged period days, i.e. one real-world period.

    Attributes:
        dates: Member dates in ascending order, no duplicates.
    """

    dates: tuple[date, ...]

    @property
    def start(self) -> date:
        return self.dates[0]

    @property
    def end(self) -> date:
        return self.dates[-1]

    @property
    def length(self) -> int:
        return len(self.dates)


# ---------------------------------------------------------------------------
# Forecasts
# ---------------------------------------------------------------------------


@dataclass
class PredictionResult:
    """Forecast of the next period start.

    Attributes:
        date:         Forecast start of the next period.
        days:         Days from the reference date to ``date``; negative
                      when the period is overdue.
        cycle_length: Cycle length used for the forecast.
        display_date: ``date`` rendered for display (``M/D/YYYY``).
    """

    date: date
    days: int
    cycle_length: int
    display_date: str = ""


@dataclass
class FertilityWindow:
    """Heuristic fertile window ending on the estimated ovulation day."""

    start: date
    end: date
    ovulation_day: date


@dataclass
class ProjectedPeriod:
    """A predicted future period as marked on a calendar.

    Attributes:
        start: Predicted first day.
        days:  Predicted days that are not already logged, ascending.
    """

    start: date
    days: list[date] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


@dataclass
class CycleDayClassification:
    """Phase and pregnancy-chance view of a single cycle day.

    Attributes:
        cycle_day:          1-based day within the cycle.
        phase:              Cycle phase for the day.
        description:        What the phase typically feels like.
        pregnancy_chance:   Conception likelihood tier for the day.
        chance_description: Explanation of the tier.
        symptoms:           Symptoms commonly reported in the phase.
    """

    cycle_day: int
    phase: CyclePhase
    description: str
    pregnancy_chance: PregnancyChance
    chance_description: str
    symptoms: str


# ---------------------------------------------------------------------------
# History / statistics
# ---------------------------------------------------------------------------


@dataclass
class CycleHistoryEntry:
    """One logged cycle, from a period start to the next period start.

    Attributes:
        start_date:    First day of the period opening the cycle.
        period_length: Number of logged period days.
        cycle_length:  Days until the next period start; None while the cycle
                       is still in progress.
        end_date:      Last day of a completed cycle.
        in_progress:   True for the most recent cycle.
        days_so_far:   Cycle day of the reference date for the in-progress cycle.
    """

    start_date: date
    period_length: int
    cycle_length: int | None = None
    end_date: date | None = None
    in_progress: bool = False
    days_so_far: int | None = None


@dataclass
class CycleStatistics:
    """Aggregate statistics over all logged periods."""

    completed_cycles: int = 0
    average_cycle_length: int = 0
    average_period_length: int = 0
    history: list[CycleHistoryEntry] = field(default_factory=list)


@dataclass
class CycleSnapshot:
    """Everything a dashboard needs for one reference date.

    Fields other than ``statistics`` are None when no dates are logged.
    """

    reference_date: date
    last_period_start: date | None = None
    prediction: PredictionResult | None = None
    today: CycleDayClassification | None = None
    fertility_window: FertilityWindow | None = None
    projected_periods: list[ProjectedPeriod] = field(default_factory=list)
    statistics: CycleStatistics = field(default_factory=CycleStatistics)
