"""Orchestration of a single route render."""

from enum import Enum

from hybrid_pages.exceptions import RouteRenderError
from hybrid_pages.logging_config import get_logger, log_with_context
from hybrid_pages.models import RouteRequest
from hybrid_pages.protocols import RouteSource
from hybrid_pages.services.path_resolver import derive_current_path
from hybrid_pages.services.route_parser import parse_route_file
from hybrid_pages.services.script_service import ScriptEvaluator
from hybrid_pages.views.template_renderer import TemplateRenderer

logger = get_logger(__name__)


class RenderStage(str, Enum):
    """Pipeline stages of one render, ending in DONE or FAILED."""

    READING = "reading"
    PARSING = "parsing"
    EVALUATING = "evaluating"
    RENDERING = "rendering"
    DONE = "done"
    FAILED = "failed"


class RouteRenderer:
    """Reads, parses, evaluates and renders one route file per call.

    Nothing is cached between calls: every render re-reads and re-parses
    the file and builds a new script namespace.
    """

    def __init__(
        self,
        source: RouteSource,
        evaluator: ScriptEvaluator,
        template_renderer: TemplateRenderer,
    ):
        self.source = source
        self.evaluator = evaluator
        self.template_renderer = template_renderer

    async def render(self, route_path: str, request: RouteRequest | None = None) -> str:
        """Render a route file to HTML.

        Args:
            route_path: Route file name relative to the routes directory
            request: Inbound request passed to the script as ``req``

        Returns:
            Rendered HTML

        Raises:
            RouteRenderError: Wrapping whichever stage failed
        """
        stage = RenderStage.READING
        try:
            content = await self.source.read(route_path)

            stage = RenderStage.PARSING
            route_file = parse_route_file(content, route_path)

            stage = RenderStage.EVALUATING
            data = await self.evaluator.evaluate(route_file.script, request, route_path=route_path)

            stage = RenderStage.RENDERING
            data = {**data, "currentPath": derive_current_path(route_path)}
            html = await self.template_renderer.render(route_file.template, data)
        except Exception as e:
            log_with_context(
                logger,
                "warning",
                "Route render failed",
                route_path=route_path,
                stage=stage.value,
                state=RenderStage.FAILED.value,
                error=str(e),
                error_type=type(e).__name__,
                event_type="route_render_error",
            )
            details = {"stage": stage.value, "state": RenderStage.FAILED.value}
            raise RouteRenderError(route_path, e, details=details) from e

        log_with_context(
            logger,
            "debug",
            "Route rendered",
            route_path=route_path,
            state=RenderStage.DONE.value,
            html_length=len(html),
            event_type="route_rendered",
        )
        return html
