"""Middleware configuration."""

from fastapi import FastAPI

from hybrid_pages.config import Settings
from hybrid_pages.logging_config import get_logger, log_with_context
from hybrid_pages.middleware.logging_middleware import log_requests

logger = get_logger(__name__)


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Configure all middleware for the application.

    Args:
        app: FastAPI application instance
        settings: Application settings
    """
    log_with_context(
        logger,
        "info",
        "Configuring request logging middleware",
        api_prefix=settings.api_prefix,
        event_type="middleware_config",
    )
    app.middleware("http")(log_requests)

    @app.middleware("http")
    async def count_requests(request, call_next):
        """Count total requests for the readiness endpoint."""
        app.state.request_count = getattr(app.state, "request_count", 0) + 1
        response = await call_next(request)
        return response
