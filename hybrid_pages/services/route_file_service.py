"""Route file read capability rooted at the routes directory."""

from pathlib import Path

import anyio

from hybrid_pages.exceptions import RouteNotFound
from hybrid_pages.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


class RouteFileService:
    """Reads route files fresh from disk on every call.

    Resolved paths that escape the routes directory are reported as
    missing rather than read.
    """

    def __init__(self, routes_dir: Path):
        self.routes_dir = Path(routes_dir).resolve()

    async def read(self, route_path: str) -> str:
        """Read a route file as UTF-8 text.

        Args:
            route_path: Path relative to the routes directory (e.g. 'about.html')

        Returns:
            Raw file content

        Raises:
            RouteNotFound: If the file is absent or outside the routes directory
        """
        candidate = await anyio.Path(self.routes_dir / route_path).resolve()

        if not Path(candidate).is_relative_to(self.routes_dir):
            log_with_context(
                logger,
                "warning",
                "Rejected route path outside routes directory",
                route_path=route_path,
                event_type="route_path_rejected",
            )
            raise RouteNotFound(route_path, details={"reason": "outside routes directory"})

        try:
            return await candidate.read_text(encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
            raise RouteNotFound(route_path) from e
