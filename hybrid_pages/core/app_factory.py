"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from hybrid_pages import __version__
from hybrid_pages.config import Settings, get_settings
from hybrid_pages.core.lifespan import lifespan
from hybrid_pages.core.middleware import setup_middleware
from hybrid_pages.middleware.error_handlers import register_error_handlers
from hybrid_pages.routers import health_router, page_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use (defaults to the process-wide singleton)

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Hybrid Pages",
        description="Server-rendered HTML pages from file-based hybrid route files.",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings

    setup_middleware(app, settings)

    register_error_handlers(app)

    # Health first: the page router's catch-all would shadow it otherwise
    app.include_router(health_router.router, tags=["health"])
    app.include_router(page_router.router, tags=["pages"])

    return app
