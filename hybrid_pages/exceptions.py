"""Custom exceptions for the route-rendering pipeline with HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    PAGE_ERROR = "PAGE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Route file errors
    MALFORMED_ROUTE_FILE = "MALFORMED_ROUTE_FILE"
    ROUTE_NOT_FOUND = "ROUTE_NOT_FOUND"

    # Pipeline stage errors
    SCRIPT_EXECUTION_ERROR = "SCRIPT_EXECUTION_ERROR"
    TEMPLATE_RENDER_ERROR = "TEMPLATE_RENDER_ERROR"
    ROUTE_RENDER_ERROR = "ROUTE_RENDER_ERROR"


class PageException(Exception):
    """Base exception for page rendering errors with HTTP status code support.

    All custom exceptions should inherit from this class to ensure
    consistent error handling across the application.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.PAGE_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize page exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class MalformedRouteFile(PageException):
    """Route file is missing its script or template section."""

    def __init__(
        self,
        message: str = "Route file must contain both <script> and <template> sections",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message,
            code=ErrorCode.MALFORMED_ROUTE_FILE,
            details=details,
        )


class RouteNotFound(PageException):
    """No route file exists for the resolved path."""

    def __init__(self, route_path: str, details: dict[str, Any] | None = None):
        self.route_path = route_path
        super().__init__(
            f"Route file not found: {route_path}",
            code=ErrorCode.ROUTE_NOT_FOUND,
            details=details,
        )


class ScriptExecutionError(PageException):
    """Route script failed to compile, raised, or an awaited step failed."""

    def __init__(self, cause_message: str, details: dict[str, Any] | None = None):
        self.cause_message = cause_message
        super().__init__(
            f"Error executing script: {cause_message}",
            code=ErrorCode.SCRIPT_EXECUTION_ERROR,
            details=details,
        )


class TemplateRenderError(PageException):
    """Template failed to compile or failed while rendering."""

    def __init__(self, cause_message: str, details: dict[str, Any] | None = None):
        self.cause_message = cause_message
        super().__init__(
            f"Error rendering template: {cause_message}",
            code=ErrorCode.TEMPLATE_RENDER_ERROR,
            details=details,
        )


class RouteRenderError(PageException):
    """Umbrella error for any failure while rendering a route.

    Carries the offending route path and the underlying cause so callers
    have a single failure surface.
    """

    def __init__(self, route_path: str, cause: BaseException, details: dict[str, Any] | None = None):
        self.route_path = route_path
        self.cause = cause
        cause_message = cause.message if isinstance(cause, PageException) else str(cause)
        super().__init__(
            f"Failed to render route {route_path}: {cause_message}",
            code=ErrorCode.ROUTE_RENDER_ERROR,
            details={"route_path": route_path, "cause_type": type(cause).__name__, **(details or {})},
        )
