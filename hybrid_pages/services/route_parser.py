"""Splitting hybrid route files into script and template sections."""

import re
import textwrap

from hybrid_pages.exceptions import MalformedRouteFile
from hybrid_pages.models import RouteFile

SCRIPT_RE = re.compile(r"<script>(.*?)</script>", re.DOTALL)
TEMPLATE_RE = re.compile(r"<template>(.*?)</template>", re.DOTALL)


def parse_route_file(content: str, route_path: str = "<inline>") -> RouteFile:
    """Extract the first script section and first template section.

    Sections may appear in either order. The script is dedented before
    trimming so an indented block still compiles as Python.

    Args:
        content: Raw route file text
        route_path: Route path, carried on the result and in error details

    Returns:
        RouteFile with trimmed script and template sources

    Raises:
        MalformedRouteFile: If either section is missing
    """
    script_match = SCRIPT_RE.search(content)
    template_match = TEMPLATE_RE.search(content)

    if not script_match or not template_match:
        missing = [
            name
            for name, match in (("script", script_match), ("template", template_match))
            if match is None
        ]
        raise MalformedRouteFile(details={"route_path": route_path, "missing": missing})

    return RouteFile(
        path=route_path,
        script=textwrap.dedent(script_match.group(1)).strip(),
        template=template_match.group(1).strip(),
    )
