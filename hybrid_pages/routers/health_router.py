"""Health and readiness endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends, Request

from hybrid_pages import __version__
from hybrid_pages.config import Settings
from hybrid_pages.dependencies import get_app_settings, get_partial_registry
from hybrid_pages.models import HealthResponse, ReadinessResponse
from hybrid_pages.state_managers import PartialRegistry

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint.

    For file-layout checks, use `/health/ready`.
    """
    return HealthResponse(status="ok", version=__version__)


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    registry: PartialRegistry = Depends(get_partial_registry),
):
    """Readiness probe.

    Ready when the routes directory exists. A missing partials directory
    is reported but does not make the app unready.
    """
    checks = {
        "routes_dir": "ok" if settings.routes_dir.is_dir() else "missing",
        "partials_dir": "ok" if settings.partials_dir.is_dir() else "missing",
    }

    return ReadinessResponse(
        status="ready" if checks["routes_dir"] == "ok" else "not_ready",
        version=__version__,
        timestamp=datetime.now(UTC),
        checks=checks,
        partials_loaded=registry.loaded,
        partial_count=len(registry.partials),
        request_count=getattr(request.app.state, "request_count", 0),
    )
