"""Service configuration, read from environment variables."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

API_VERSION = "1.0.0"


class Settings(BaseModel):
    """Runtime settings for the API process.

    Environment:
        FIRESPREAD_CORS_ORIGINS: Comma-separated allowed origins (default "*")
        FIRESPREAD_LOG_LEVEL: Root log level (default "INFO")
        FIRESPREAD_MAX_JOBS: Prediction jobs kept in memory (default 500)
    """

    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    max_jobs: int = Field(default=500, gt=0)


def get_settings() -> Settings:
    origins = os.getenv("FIRESPREAD_CORS_ORIGINS", "*")
    return Settings(
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        log_level=os.getenv("FIRESPREAD_LOG_LEVEL", "INFO").upper(),
        max_jobs=int(os.getenv("FIRESPREAD_MAX_JOBS", "500")),
    )
