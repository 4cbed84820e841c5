"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from hybrid_pages.config import Settings
from hybrid_pages.services.route_renderer import RouteRenderer
from hybrid_pages.state_managers import PartialRegistry


async def get_route_renderer(request: Request) -> RouteRenderer:
    """
    Get the route renderer from app state.

    Raises:
        RuntimeError: If the renderer is not initialized.
    """
    renderer: RouteRenderer | None = getattr(request.app.state, "route_renderer", None)

    if renderer is None:
        raise RuntimeError("Route renderer not initialized.")

    return renderer


async def get_partial_registry(request: Request) -> PartialRegistry:
    """
    Get the partial registry from app state.

    Raises:
        RuntimeError: If the registry is not initialized.
    """
    registry: PartialRegistry | None = getattr(request.app.state, "partial_registry", None)

    if registry is None:
        raise RuntimeError("Partial registry not initialized.")

    return registry


async def get_app_settings(request: Request) -> Settings:
    """Get the Settings the app was created with."""
    return request.app.state.settings
