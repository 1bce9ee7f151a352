"""Pydantic schemas for the API."""

from firespread_api.schemas.prediction import (
    FireSpreadRequest,
    FireSpreadResponse,
    IgnitionPoint,
    JobStatus,
    Prediction,
    PredictionResults,
    WindParams,
)

__all__ = [
    "FireSpreadRequest",
    "FireSpreadResponse",
    "IgnitionPoint",
    "JobStatus",
    "Prediction",
    "PredictionResults",
    "WindParams",
]
