"""Application lifespan management."""

import time
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

import httpx
from fastapi import FastAPI

from hybrid_pages import __version__
from hybrid_pages.config import Settings
from hybrid_pages.logging_config import get_logger, log_with_context
from hybrid_pages.middleware.logging_middleware import redact_sensitive_data
from hybrid_pages.services.route_file_service import RouteFileService
from hybrid_pages.services.route_renderer import RouteRenderer
from hybrid_pages.services.script_service import ScriptEvaluator, ScriptFetcher
from hybrid_pages.state_managers import PartialRegistry
from hybrid_pages.views.template_renderer import TemplateRenderer

logger = get_logger(__name__)


async def log_request(request: httpx.Request) -> None:
    """Event hook to log script fetch requests with redacted sensitive data."""
    log_with_context(
        logger,
        "info",
        "Script fetch request",
        method=request.method,
        url=redact_sensitive_data(str(request.url)),
        event_type="fetch_request",
    )


async def log_response(response: httpx.Response) -> None:
    """Event hook to log script fetch responses with redacted sensitive data."""
    log_with_context(
        logger,
        "info",
        "Script fetch response",
        status_code=response.status_code,
        url=redact_sensitive_data(str(response.request.url)),
        event_type="fetch_response",
    )


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create the pooled client shared by route script ``fetch`` calls.

    Script fetches carry no timeout unless fetch_timeout is configured.
    """
    event_hooks: dict[str, list[Callable[..., Any]]] = {
        "request": [log_request],
        "response": [log_response],
    }
    return httpx.AsyncClient(  # nosec B113
        timeout=httpx.Timeout(settings.fetch_timeout),
        limits=httpx.Limits(
            max_keepalive_connections=settings.fetch_max_connections,
            max_connections=settings.fetch_max_connections,
            keepalive_expiry=30.0,
        ),
        follow_redirects=True,
        event_hooks=event_hooks,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events.

    Exceptions after yield are re-raised so cleanup still runs and the
    failure stays visible.
    """
    settings: Settings = app.state.settings
    app.state.startup_time = time.time()
    app.state.request_count = 0

    log_with_context(
        logger,
        "info",
        "Starting Hybrid Pages application",
        version=__version__,
        routes_dir=str(settings.routes_dir),
        event_type="app_startup",
    )

    client = create_http_client(settings)
    app.state.http_client = client

    registry = PartialRegistry(settings.partials_dir, settings.partial_extensions)
    await registry.initialize()
    app.state.partial_registry = registry

    app.state.route_renderer = RouteRenderer(
        source=RouteFileService(settings.routes_dir),
        evaluator=ScriptEvaluator(ScriptFetcher(client)),
        template_renderer=TemplateRenderer(registry),
    )
    log_with_context(
        logger,
        "info",
        "Route renderer initialized",
        partials_dir=str(settings.partials_dir),
        event_type="renderer_ready",
    )

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down Hybrid Pages application",
            event_type="app_shutdown",
        )

        await registry.cleanup()
        await client.aclose()
        log_with_context(
            logger,
            "info",
            "HTTP client closed",
            event_type="http_client_cleanup",
        )
