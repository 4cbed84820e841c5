"""Mapping inbound request paths to route file names."""

from collections.abc import Sequence
from urllib.parse import urlsplit

INDEX_ROUTE = "index.html"
ROUTE_SUFFIX = ".html"


def resolve_route_path(route: str | Sequence[str] | None, api_prefix: str = "/api") -> str:
    """Resolve a routing hint to a route file name.

    Rules, in order:
    1. A segment sequence is joined with '/'.
    2. A URL string loses its query, the api_prefix mount, and one leading slash.
    3. An empty result becomes 'index.html'.
    4. Anything else gets '.html' appended unless it already ends with it.

    No '..' normalization happens here; the file reader rejects escapes.

    Args:
        route: Path segments, a URL/path string, or None
        api_prefix: Mount prefix to strip ('' disables stripping)

    Returns:
        Route file name relative to the routes directory

    Example:
        >>> resolve_route_path("/api/about?x=1")
        'about.html'
    """
    if route is None or isinstance(route, str):
        route_path = _strip_url(route or "", api_prefix)
    else:
        route_path = "/".join(route)

    if not route_path:
        return INDEX_ROUTE
    if not route_path.endswith(ROUTE_SUFFIX):
        route_path = f"{route_path}{ROUTE_SUFFIX}"
    return route_path


def _strip_url(url: str, api_prefix: str) -> str:
    if "://" in url:
        url = urlsplit(url).path

    url = url.split("?", 1)[0]

    if api_prefix:
        if url.startswith(f"{api_prefix}/"):
            url = url[len(api_prefix) + 1 :]
        elif url == api_prefix:
            url = ""

    return url.removeprefix("/")


def derive_current_path(route_path: str) -> str:
    """Canonical site path for a route file ('about.html' -> '/about', 'index.html' -> '/')."""
    current_path = "/" + route_path.removesuffix(ROUTE_SUFFIX)
    if current_path == "/index":
        return "/"
    return current_path
