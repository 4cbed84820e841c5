"""Pydantic models for Hybrid Pages."""

from hybrid_pages.models.base_models import HealthResponse, ReadinessResponse
from hybrid_pages.models.route_models import RouteFile, RouteRequest

__all__ = [
    "HealthResponse",
    "ReadinessResponse",
    "RouteFile",
    "RouteRequest",
]
