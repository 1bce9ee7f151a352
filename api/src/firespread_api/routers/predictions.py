"""Fire spread prediction REST endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from firespread.spread.perimeter import ring_to_geojson, to_feature_collection
from firespread.types import PredictionStep

from firespread_api.schemas.prediction import (
    FireSpreadRequest,
    FireSpreadResponse,
    Prediction,
    PredictionResults,
)
from firespread_api.services.runner import PredictionError, PredictionRunner

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["predictions"])

# Shared state, injected from main app
runner: PredictionRunner | None = None


def _step_to_schema(step: PredictionStep) -> Prediction:
    """Convert an engine PredictionStep to the API schema."""
    feature = ring_to_geojson(step.perimeter, dict(step.properties))
    return Prediction(
        time=step.label,
        radius=step.radius_label,
        elapsed_minutes=step.elapsed_minutes,
        rate_of_spread_kmh=round(step.rate_of_spread, 4),
        spread_distance_km=round(step.spread_distance_km, 4),
        area_ha=round(step.area_ha, 4),
        geojson=to_feature_collection([feature]),
    )


@router.post("/fire-spread-model", response_model=FireSpreadResponse)
async def create_prediction(params: FireSpreadRequest) -> FireSpreadResponse:
    """Run the fire spread model and store its predictions."""
    if runner is None:
        raise HTTPException(status_code=500, detail="Runner not initialized")

    try:
        job = runner.submit(params)
    except PredictionError as e:
        raise HTTPException(status_code=500, detail=f"Server error: {e}") from e

    return FireSpreadResponse(
        job_id=job.id,
        status=job.status,
        timestamp=job.timestamp,
        predicted_polygons=[_step_to_schema(s) for s in job.steps],
    )


@router.get("/simulate/results/{job_id}", response_model=PredictionResults)
async def get_prediction(job_id: str) -> PredictionResults:
    """Get stored predictions for a job."""
    if runner is None:
        raise HTTPException(status_code=500, detail="Runner not initialized")

    job = runner.get(job_id)
    if job is None:
        logger.info("Prediction job %s not found", job_id)
        raise HTTPException(
            status_code=404, detail=f"No fire predictions found for job ID: {job_id}"
        )

    return PredictionResults(
        job_id=job.id,
        status=job.status,
        timestamp=job.timestamp,
        predictions=[_step_to_schema(s) for s in job.steps],
        error=job.error,
    )
