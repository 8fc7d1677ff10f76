"""Tests for validating engine results into the Pydantic read schemas."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from cyclecast.models.cycle import (
    CycleDayRead,
    CycleSnapshotRead,
    FertilityWindowRead,
    PeriodDateLog,
    PredictionRead,
)
from cyclecast.prediction.base import CyclePhase, PregnancyChance
from cyclecast.prediction.predictor import CyclePredictor
from cyclecast.prediction.tests.conftest import TEST_DATE


class TestPeriodDateLog:
    def test_parses_and_sorts(self) -> None:
        log = PeriodDateLog(dates=["2024-01-03", "2024-01-01", "2024-01-03"])
        assert log.dates == [date(2024, 1, 1), date(2024, 1, 3)]

    def test_rejects_unparsable(self) -> None:
        with pytest.raises(ValidationError):
            PeriodDateLog(dates=["Jan 3"])

    def test_empty_by_default(self) -> None:
        assert PeriodDateLog().dates == []


class TestReadSchemas:
    def test_prediction_from_dataclass(self, predictor: CyclePredictor) -> None:
        result = predictor.predict_next(
            "2024-01-01", ["2024-01-01", "2024-01-02"], TEST_DATE
        )
        read = PredictionRead.model_validate(result)
        assert read.date == date(2024, 1, 29)
        assert read.days == -12
        assert read.cycle_length == 28
        assert read.display_date == "1/29/2024"

    def test_fertility_window_from_dataclass(self, predictor: CyclePredictor) -> None:
        read = FertilityWindowRead.model_validate(predictor.fertility_window("2024-01-01"))
        assert read.start == date(2024, 1, 10)
        assert read.ovulation_day == date(2024, 1, 15)

    def test_cycle_day_serializes_enum_values(self, predictor: CyclePredictor) -> None:
        read = CycleDayRead.model_validate(predictor.classify(16))
        assert read.phase is CyclePhase.luteal
        assert read.pregnancy_chance is PregnancyChance.high
        dumped = read.model_dump(mode="json")
        assert dumped["phase"] == "Luteal"
        assert dumped["pregnancy_chance"] == "High"

    def test_snapshot_round_trip_to_json(
        self, predictor: CyclePredictor, regular_dates: list[date]
    ) -> None:
        snapshot = predictor.snapshot(regular_dates, date(2024, 6, 1))
        read = CycleSnapshotRead.model_validate(snapshot)
        dumped = read.model_dump(mode="json")
        assert dumped["last_period_start"] == "2024-05-20"
        assert dumped["prediction"]["date"] == "2024-06-17"
        assert dumped["today"]["cycle_day"] == 13
        assert dumped["statistics"]["completed_cycles"] == 5
        assert dumped["statistics"]["history"][0]["in_progress"] is True
        assert len(dumped["projected_periods"]) == 3

    def test_empty_snapshot(self, predictor: CyclePredictor) -> None:
        read = CycleSnapshotRead.model_validate(predictor.snapshot([], TEST_DATE))
        assert read.prediction is None
        assert read.statistics.history == []
