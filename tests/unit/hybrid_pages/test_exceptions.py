"""Tests for custom exception classes."""

from hybrid_pages.exceptions import (
    ErrorCode,
    MalformedRouteFile,
    PageException,
    RouteNotFound,
    RouteRenderError,
    ScriptExecutionError,
    TemplateRenderError,
)


class TestErrorCodes:
    """Tests for ErrorCode enum."""

    def test_error_code_values(self):
        """Test that error codes have correct values."""
        assert ErrorCode.PAGE_ERROR == "PAGE_ERROR"
        assert ErrorCode.MALFORMED_ROUTE_FILE == "MALFORMED_ROUTE_FILE"
        assert ErrorCode.ROUTE_NOT_FOUND == "ROUTE_NOT_FOUND"
        assert ErrorCode.SCRIPT_EXECUTION_ERROR == "SCRIPT_EXECUTION_ERROR"
        assert ErrorCode.TEMPLATE_RENDER_ERROR == "TEMPLATE_RENDER_ERROR"
        assert ErrorCode.ROUTE_RENDER_ERROR == "ROUTE_RENDER_ERROR"


class TestPageException:
    """Tests for PageException."""

    def test_page_exception_basic(self):
        """Test creating basic page exception."""
        exc = PageException(message="Test error")

        assert exc.message == "Test error"
        assert exc.code == ErrorCode.PAGE_ERROR
        assert exc.status_code == 500
        assert exc.details == {}
        assert str(exc) == "Test error"

    def test_subclasses_share_base(self):
        """Test every pipeline error is a PageException with status 500."""
        errors = [
            MalformedRouteFile(),
            RouteNotFound("x.html"),
            ScriptExecutionError("boom"),
            TemplateRenderError("bad"),
            RouteRenderError("x.html", ValueError("v")),
        ]

        assert all(isinstance(e, PageException) for e in errors)
        assert all(e.status_code == 500 for e in errors)


class TestRouteRenderError:
    """Tests for the umbrella route error."""

    def test_wraps_page_exception_message(self):
        """Test the nested message is the cause's message."""
        cause = ScriptExecutionError("boom")
        exc = RouteRenderError("about.html", cause)

        assert exc.route_path == "about.html"
        assert exc.cause is cause
        assert exc.message == "Failed to render route about.html: Error executing script: boom"
        assert exc.details == {"route_path": "about.html", "cause_type": "ScriptExecutionError"}

    def test_wraps_plain_exception(self):
        """Test plain exceptions contribute str(exc)."""
        exc = RouteRenderError("about.html", OSError("disk"), details={"stage": "reading"})

        assert exc.message == "Failed to render route about.html: disk"
        assert exc.details["stage"] == "reading"
