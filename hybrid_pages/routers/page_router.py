"""Catch-all page route backed by file-based route files."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, Response

from hybrid_pages.config import Settings
from hybrid_pages.dependencies import get_app_settings, get_route_renderer
from hybrid_pages.models import RouteRequest
from hybrid_pages.services.request_handler import handle_request
from hybrid_pages.services.route_renderer import RouteRenderer

router = APIRouter()


class BufferedResponseWriter:
    """ResponseWriter that collects status, headers and body for Starlette."""

    def __init__(self):
        self.status_code = 200
        self.headers: dict[str, str] = {}
        self.body = ""

    def set_header(self, name: str, value: str) -> None:
        self.headers[name] = value

    def status(self, code: int) -> "BufferedResponseWriter":
        self.status_code = code
        return self

    def send(self, body: str) -> None:
        self.body = body

    def to_response(self) -> Response:
        return Response(content=self.body, status_code=self.status_code, headers=self.headers)


def collect_query(request: Request) -> dict[str, str | list[str]]:
    """Query parameters with repeated keys collected into lists."""
    query: dict[str, str | list[str]] = {}
    for key, value in request.query_params.multi_items():
        if key not in query:
            query[key] = value
        elif isinstance(query[key], list):
            query[key].append(value)
        else:
            query[key] = [query[key], value]
    return query


def build_route_request(request: Request) -> RouteRequest:
    """Adapt a Starlette request to the transport-independent RouteRequest."""
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"

    return RouteRequest(
        url=url,
        method=request.method,
        query=collect_query(request),
        headers=dict(request.headers),
        cookies=dict(request.cookies),
    )


@router.get("/{route:path}", response_class=HTMLResponse)
async def render_page(
    request: Request,
    renderer: RouteRenderer = Depends(get_route_renderer),
    settings: Settings = Depends(get_app_settings),
):
    """Render the route file matching the request path."""
    writer = BufferedResponseWriter()
    await handle_request(build_route_request(request), writer, renderer, settings.api_prefix)
    return writer.to_response()
