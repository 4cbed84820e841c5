"""Pydantic models for health responses."""

from datetime import datetime

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Basic health check response."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness response with file-layout checks."""

    status: str = Field(..., description="Overall readiness: ready or not_ready")
    version: str = Field(..., description="Application version")
    timestamp: datetime = Field(..., description="Current server timestamp")
    checks: dict[str, str] = Field(..., description="Individual readiness check results")
    partials_loaded: bool = Field(..., description="Whether partial discovery has run")
    partial_count: int = Field(..., description="Number of registered partials")
    request_count: int = Field(..., description="Requests handled since startup")
