"""Shared fixtures for cycle prediction tests."""

from __future__ import annotations

import json
from datetime import date, timedelta
from pathlib import Path

import pytest

from cyclecast.prediction.config_loader import PredictionConfig, load_prediction_config
from cyclecast.prediction.predictor import CyclePredictor

# Fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"

TEST_DATE = date(2024, 2, 10)


def period_days(start: date, length: int = 5) -> list[date]:
    """Consecutive logged days of one period."""
    return [start + timedelta(days=i) for i in range(length)]


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def prediction_config() -> PredictionConfig:
    """Load the bundled prediction config for tests."""
    return load_prediction_config()


@pytest.fixture
def predictor(prediction_config: PredictionConfig) -> CyclePredictor:
    return CyclePredictor(prediction_config)


# ---------------------------------------------------------------------------
# JSON fixture loaders
# ---------------------------------------------------------------------------


@pytest.fixture
def period_dates_raw() -> dict:
    return json.loads((FIXTURES_DIR / "period_dates.json").read_text())


@pytest.fixture
def regular_dates(period_dates_raw: dict) -> list[date]:
    return [date.fromisoformat(d) for d in period_dates_raw["regular"]["dates"]]


@pytest.fixture
def irregular_dates(period_dates_raw: dict) -> list[date]:
    return [date.fromisoformat(d) for d in period_dates_raw["irregular"]["dates"]]
