"""Transport-independent request handling for page routes."""

from hybrid_pages.exceptions import PageException
from hybrid_pages.logging_config import get_logger, log_with_context
from hybrid_pages.models import RouteRequest
from hybrid_pages.protocols import ResponseWriter
from hybrid_pages.services.path_resolver import resolve_route_path
from hybrid_pages.services.route_renderer import RouteRenderer

logger = get_logger(__name__)

HTML_CONTENT_TYPE = "text/html; charset=utf-8"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


async def handle_request(
    request: RouteRequest,
    response: ResponseWriter,
    renderer: RouteRenderer,
    api_prefix: str = "/api",
) -> None:
    """Resolve, render and write one page response.

    Success writes 200 with HTML; any failure writes 500 with a plain-text
    ``Error: <message>`` body and nothing else from the exception.

    Args:
        request: Inbound request
        response: Writer for the hosting transport
        renderer: Route renderer
        api_prefix: Mount prefix stripped before resolution
    """
    try:
        route_path = resolve_route_path(request.routing_hint, api_prefix)
        html = await renderer.render(route_path, request)
    except Exception as e:
        message = e.message if isinstance(e, PageException) else str(e)
        log_with_context(
            logger,
            "error",
            "Page request failed",
            url=request.url,
            error=message,
            error_type=type(e).__name__,
            event_type="page_error",
        )
        response.set_header("Content-Type", TEXT_CONTENT_TYPE)
        response.status(500).send(f"Error: {message}")
        return

    response.set_header("Content-Type", HTML_CONTENT_TYPE)
    response.status(200).send(html)
