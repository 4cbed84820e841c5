"""Models for route files and the inbound request abstraction."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RouteRequest(BaseModel):
    """Transport-independent view of an inbound page request.

    Exposed verbatim to route scripts as ``req``.
    """

    model_config = ConfigDict(frozen=True)

    url: str | None = Field(default=None, description="Request URL or path, optionally with a query string")
    segments: list[str] | None = Field(default=None, description="Catch-all path segments, when the host provides them")
    method: str = Field(default="GET", description="HTTP method")
    query: dict[str, Any] = Field(default_factory=dict, description="Query parameters")
    headers: dict[str, str] = Field(default_factory=dict, description="Request headers")
    cookies: dict[str, str] = Field(default_factory=dict, description="Request cookies")

    @property
    def routing_hint(self) -> str | list[str] | None:
        """Segments when non-empty, otherwise the URL string."""
        if self.segments:
            return self.segments
        return self.url


class RouteFile(BaseModel):
    """A parsed hybrid route file."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Route path relative to the routes directory")
    script: str = Field(..., description="Script section source")
    template: str = Field(..., description="Template section source")
