"""Protocol definitions for the hosting boundary."""

from typing import Protocol


class ResponseWriter(Protocol):
    """Protocol for writing a page response back to the hosting transport.

    Each hosting environment supplies one thin implementation; the request
    handler only ever talks to this interface.
    """

    def set_header(self, name: str, value: str) -> None:
        """Set a response header."""
        ...

    def status(self, code: int) -> "ResponseWriter":
        """Set the numeric status code and return self for chaining."""
        ...

    def send(self, body: str) -> None:
        """Write the response body."""
        ...


class RouteSource(Protocol):
    """Protocol for the route-file read capability."""

    async def read(self, route_path: str) -> str:
        """Return the text of a route file.

        Raises:
            RouteNotFound: If no file exists at route_path
        """
        ...
