"""Pydantic models for logged period dates and cycle predictions."""

from __future__ import annotations

from datetime import date

from pydantic import Field, field_validator

from cyclecast.models.base import CyclecastBase
from cyclecast.prediction.base import CyclePhase, PregnancyChance


# ---------- Input ----------

class PeriodDateLog(CyclecastBase):
    """Snapshot of logged period days as handed over by the date store.

    Strings are parsed as ISO-8601 dates; anything unparsable fails
    validation.  Dates are deduplicated and kept in ascending order.
    """

    dates: list[date] = Field(default_factory=list)

    @field_validator("dates")
    @classmethod
    def _dedupe_and_sort(cls, v: list[date]) -> list[date]:
        return sorted(set(v))


# ---------- Forecasts ----------

class PredictionRead(CyclecastBase):
    date: date
    days: int
    cycle_length: int = Field(ge=1)
    display_date: str = ""


class FertilityWindowRead(CyclecastBase):
    start: date
    end: date
    ovulation_day: date


class ProjectedPeriodRead(CyclecastBase):
    start: date
    days: list[date] = Field(default_factory=list)


# ---------- Classification ----------

class CycleDayRead(CyclecastBase):
    cycle_day: int = Field(ge=1)
    phase: CyclePhase
    description: str
    pregnancy_chance: PregnancyChance
    chance_description: str
    symptoms: str


# ---------- History ----------

class CycleHistoryEntryRead(CyclecastBase):
    start_date: date
    period_length: int = Field(ge=1)
    cycle_length: int | None = None
    end_date: date | None = None
    in_progress: bool = False
    days_so_far: int | None = None


class CycleStatisticsRead(CyclecastBase):
    completed_cycles: int = Field(default=0, ge=0)
    average_cycle_length: int = Field(default=0, ge=0)
    average_period_length: int = Field(default=0, ge=0)
    history: list[CycleHistoryEntryRead] = Field(default_factory=list)


class CycleSnapshotRead(CyclecastBase):
    reference_date: date
    last_period_start: date | None = None
    prediction: PredictionRead | None = None
    today: CycleDayRead | None = None
    fertility_window: FertilityWindowRead | None = None
    projected_periods: list[ProjectedPeriodRead] = Field(default_factory=list)
    statistics: CycleStatisticsRead = Field(default_factory=CycleStatisticsRead)
