"""Views package for template rendering."""

from hybrid_pages.views.template_renderer import TemplateRenderer

__all__ = ["TemplateRenderer"]
