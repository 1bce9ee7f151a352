"""FastAPI application factory.

Creates the FastAPI app with all routers, middleware, and shared services.

Usage:
    uvicorn firespread_api.main:app --reload
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from firespread_api.config import API_VERSION, Settings, get_settings
from firespread_api.routers import health, predictions
from firespread_api.services.runner import PredictionRunner

_settings = get_settings()

logging.basicConfig(
    level=_settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

# Shared services (module-level so they survive app recreation in tests)
_runner = PredictionRunner(max_jobs=_settings.max_jobs)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    logging.getLogger(__name__).info("Fire spread API started")
    yield


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report invalid request bodies as 400 with the offending fields."""
    errors = exc.errors()
    missing = [
        str(err["loc"][-1]) for err in errors
        if err.get("type") == "missing" and err.get("loc")
    ]
    if missing:
        message = f"Missing required parameters: {', '.join(missing)}"
    else:
        message = "Invalid request parameters"
    logging.getLogger(__name__).info("%s %s rejected: %s", request.method, request.url.path, message)
    return JSONResponse(
        status_code=400,
        content={"error": message, "details": jsonable_encoder(errors)},
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Report HTTP errors with the same envelope as validation failures."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def create_app(
    settings: Settings | None = None,
    runner: PredictionRunner | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings if settings is not None else _settings

    application = FastAPI(
        title="Fire Spread API",
        description="Simplified bushfire spread prediction API",
        version=API_VERSION,
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Inject services into routers
    predictions.runner = runner if runner is not None else _runner

    # Register routers
    application.include_router(health.router)
    application.include_router(predictions.router)

    return application


app = create_app()
