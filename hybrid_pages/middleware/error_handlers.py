"""Exception handlers for the application."""

from fastapi import Request
from fastapi.responses import PlainTextResponse

from hybrid_pages.exceptions import PageException
from hybrid_pages.logging_config import get_logger, log_with_context
from hybrid_pages.services.request_handler import TEXT_CONTENT_TYPE

logger = get_logger(__name__)


async def page_exception_handler(request: Request, exc: PageException) -> PlainTextResponse:
    """Handle page exceptions that escape a route with the plain-text error body."""
    log_with_context(
        logger,
        "warning",
        "Page error",
        error_code=exc.code.value,
        error_message=exc.message,
        status_code=exc.status_code,
        method=request.method,
        url=str(request.url),
        event_type="page_exception",
    )

    return PlainTextResponse(
        f"Error: {exc.message}",
        status_code=exc.status_code,
        media_type=TEXT_CONTENT_TYPE,
    )


async def general_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """Handle general exceptions with logging."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        url=str(request.url),
        event_type="unhandled_error",
    )
    logger.error("Exception traceback:", exc_info=True)

    # Don't expose internal error details to clients
    return PlainTextResponse(
        "Error: Internal server error",
        status_code=500,
        media_type=TEXT_CONTENT_TYPE,
    )


def register_error_handlers(app) -> None:
    """Register all exception handlers with the application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(PageException, page_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
