"""Pydantic models for fire spread prediction endpoints.

Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class IgnitionPoint(CamelModel):
    """Where the fire started."""

    lat: float = Field(
        ..., ge=-85, le=85, allow_inf_nan=False, description="Latitude (polar caps excluded)"
    )
    lng: float = Field(..., ge=-180, le=180, allow_inf_nan=False, description="Longitude")


class WindParams(CamelModel):
    """Wind input for the prediction."""

    speed: float = Field(..., ge=0, le=300, allow_inf_nan=False, description="Wind speed in km/h")
    direction: float = Field(
        ...,
        ge=0,
        le=360,
        allow_inf_nan=False,
        description="Compass bearing the fire spreads toward (degrees)",
    )


class FireSpreadRequest(CamelModel):
    """Request body for a fire spread prediction."""

    ignition_point: IgnitionPoint
    fuel_map: str = Field(..., min_length=1, description="Fuel class: grass, shrub, forest, flat")
    wind: WindParams
    humidity: float = Field(..., ge=0, le=100, allow_inf_nan=False, description="Relative humidity (%)")
    terrain_slope: float = Field(
        default=0.0, ge=-90, le=90, allow_inf_nan=False, description="Terrain slope (degrees)"
    )


class JobStatus(str, Enum):
    """Prediction job status."""

    COMPLETED = "completed"
    FAILED = "failed"


class Prediction(CamelModel):
    """Fire footprint at one checkpoint."""

    time: str
    radius: str
    elapsed_minutes: int
    rate_of_spread_kmh: float
    spread_distance_km: float
    area_ha: float
    geojson: dict[str, Any]


class FireSpreadResponse(CamelModel):
    """Response from a prediction request."""

    job_id: str
    status: JobStatus
    timestamp: str
    predicted_polygons: list[Prediction] = []


class PredictionResults(CamelModel):
    """Stored results for a prediction job."""

    job_id: str
    status: JobStatus
    timestamp: str
    predictions: list[Prediction] = []
    error: str | None = None
