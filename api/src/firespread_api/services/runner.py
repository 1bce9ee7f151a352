"""Prediction runner service.

Runs the fire spread model for a request and keeps the resulting job
(steps, timestamp, status) for later retrieval by job ID. The model is a
microsecond-scale pure computation, so jobs run synchronously.
"""

from __future__ import annotations

import logging
import threading
import time
import uuid
from collections import OrderedDict
from datetime import datetime, timezone

from firespread.spread.predictor import run_fire_spread_model
from firespread.types import LatLng, PredictionStep, SimulationInput, Wind

from firespread_api.schemas.prediction import FireSpreadRequest, JobStatus

logger = logging.getLogger(__name__)


class PredictionError(RuntimeError):
    """The model failed for a job. The failed job is still stored."""

    def __init__(self, job_id: str, message: str):
        super().__init__(message)
        self.job_id = job_id


class PredictionJob:
    """State of a single prediction job."""

    def __init__(self, job_id: str, request: FireSpreadRequest):
        self.id = job_id
        self.request = request
        self.timestamp = datetime.now(timezone.utc).isoformat()
        self.status: JobStatus = JobStatus.COMPLETED
        self.steps: list[PredictionStep] = []
        self.error: str | None = None


def to_simulation_input(request: FireSpreadRequest) -> SimulationInput:
    """Convert a validated API request to engine input."""
    return SimulationInput(
        ignition_point=LatLng(
            lat=request.ignition_point.lat,
            lng=request.ignition_point.lng,
        ),
        fuel_map=request.fuel_map,
        wind=Wind(speed=request.wind.speed, direction=request.wind.direction),
        humidity=request.humidity,
        terrain_slope=request.terrain_slope,
    )


def new_job_id() -> str:
    return f"fire-sim-{int(time.time() * 1000)}-{uuid.uuid4().hex[:6]}"


class PredictionRunner:
    """Runs predictions and stores jobs in memory.

    The store is insertion ordered and bounded; once ``max_jobs`` is reached
    the oldest job is evicted. In a production deployment this would be
    backed by a spatial database.
    """

    def __init__(self, max_jobs: int = 500) -> None:
        self.max_jobs = max_jobs
        self._jobs: OrderedDict[str, PredictionJob] = OrderedDict()
        self._lock = threading.Lock()

    def submit(self, request: FireSpreadRequest) -> PredictionJob:
        """Run the model for ``request`` and store the job.

        Args:
            request: Validated prediction request

        Returns:
            The completed PredictionJob

        Raises:
            PredictionError: If the model fails. The job is stored as failed.
        """
        job = PredictionJob(new_job_id(), request)

        try:
            job.steps = run_fire_spread_model(to_simulation_input(request))
        except Exception as e:
            job.status = JobStatus.FAILED
            job.error = str(e)
            logger.exception("Prediction %s failed: %s", job.id, e)
            self._save(job)
            raise PredictionError(job.id, str(e)) from e

        self._save(job)
        logger.info(
            "Prediction %s completed: %d steps, ROS %.2f km/h",
            job.id,
            len(job.steps),
            job.steps[0].rate_of_spread if job.steps else 0.0,
        )
        return job

    def get(self, job_id: str) -> PredictionJob | None:
        with self._lock:
            return self._jobs.get(job_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._jobs)

    def _save(self, job: PredictionJob) -> None:
        with self._lock:
            self._jobs[job.id] = job
            while len(self._jobs) > self.max_jobs:
                evicted, _ = self._jobs.popitem(last=False)
                logger.debug("Evicted prediction job %s", evicted)
