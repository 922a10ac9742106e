"""Health check API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")
    service: str = Field(..., description="Application name")
    timestamp: datetime


class DatabaseHealthResponse(BaseModel):
    """Response for GET /health/db: one flag per table plus an overall verdict."""

    model_config = ConfigDict(populate_by_name=True)

    status: str
    database: str
    services: dict[str, bool]
    all_tests_passed: bool = Field(..., alias="allTestsPassed")
    timestamp: datetime


class DiagnosticsResponse(BaseModel):
    """Response for GET /health/diagnostics: which settings are present, never their values."""

    environment: str
    config: dict[str, bool]
    candidate_api_urls: list[str]
    warnings: list[str]
    timestamp: datetime
