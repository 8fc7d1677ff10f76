"""Shared Pydantic base model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CyclecastBase(BaseModel):
    """Base model with shared config for all cyclecast schemas.

    ``from_attributes`` lets the engine's dataclasses be validated directly::

        PredictionRead.model_validate(predictor.predict_next(...))
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )
