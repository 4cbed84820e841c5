"""Template rendering for route template sections."""

from collections.abc import Mapping
from typing import Any

from jinja2 import DictLoader, Environment, TemplateSyntaxError

from hybrid_pages.exceptions import TemplateRenderError
from hybrid_pages.logging_config import get_logger, log_with_context
from hybrid_pages.state_managers import PartialRegistry

logger = get_logger(__name__)


def eq(a: Any, b: Any) -> bool:
    """Equality helper, usable as ``eq(a, b)`` or ``a | eq(b)``."""
    return a == b


def create_environment(partials: Mapping[str, str]) -> Environment:
    """Create the Jinja2 environment route templates compile against.

    Args:
        partials: Live mapping of partial name to source; includes resolve
            against it by name, e.g. ``{% include "menu" %}``

    Returns:
        Async-enabled environment with HTML autoescaping
    """
    environment = Environment(
        loader=DictLoader(partials),
        autoescape=True,
        enable_async=True,
    )
    environment.globals["eq"] = eq
    environment.filters["eq"] = eq
    return environment


class TemplateRenderer:
    """Compiles template sections and renders them with script data."""

    def __init__(self, registry: PartialRegistry):
        self.registry = registry
        self.environment = create_environment(registry.partials)

    async def render(self, template_source: str, data: Mapping[str, Any]) -> str:
        """Render a template section.

        Partials are loaded (once per registry) before compiling.

        Args:
            template_source: Template section source
            data: Render data from the route script

        Returns:
            Rendered HTML

        Raises:
            TemplateRenderError: On invalid syntax or a failure while rendering
        """
        await self.registry.ensure_loaded()

        try:
            template = self.environment.from_string(template_source)
        except TemplateSyntaxError as e:
            log_with_context(
                logger,
                "warning",
                "Template failed to compile",
                error=str(e),
                template_line=e.lineno,
                event_type="template_syntax_error",
            )
            raise TemplateRenderError(str(e), details={"stage": "compile", "line": e.lineno}) from e

        try:
            return await template.render_async(dict(data))
        except Exception as e:
            log_with_context(
                logger,
                "warning",
                "Template failed to render",
                error=str(e),
                error_type=type(e).__name__,
                event_type="template_render_error",
            )
            raise TemplateRenderError(
                str(e) or type(e).__name__,
                details={"stage": "render", "error_type": type(e).__name__},
            ) from e
