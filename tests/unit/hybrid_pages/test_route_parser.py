"""Unit tests for route file parsing."""

import pytest

from hybrid_pages.exceptions import ErrorCode, MalformedRouteFile
from hybrid_pages.services.route_parser import parse_route_file


def test_parse_extracts_trimmed_sections():
    """Test both sections are returned trimmed."""
    content = "<script>\n  exports.title = 'Hi'  \n</script>\n<template>\n  <h1>{{ title }}</h1>\n</template>"

    route_file = parse_route_file(content, "about.html")

    assert route_file.path == "about.html"
    assert route_file.script == "exports.title = 'Hi'"
    assert route_file.template == "<h1>{{ title }}</h1>"


def test_parse_sections_in_any_order():
    """Test template may come before script."""
    content = "<template><p>{{ x }}</p></template>\n<script>exports.x = 1</script>"

    route_file = parse_route_file(content)

    assert route_file.script == "exports.x = 1"
    assert route_file.template == "<p>{{ x }}</p>"


def test_parse_uses_first_occurrence():
    """Test the first marker pair wins when a section repeats."""
    content = "<script>first = 1</script><script>second = 2</script><template>a</template><template>b</template>"

    route_file = parse_route_file(content)

    assert route_file.script == "first = 1"
    assert route_file.template == "a"


def test_parse_dedents_indented_script():
    """Test an indented script block becomes valid top-level Python."""
    content = (
        "<script>\n"
        "    items = [1, 2]\n"
        "    for item in items:\n"
        "        exports.last = item\n"
        "</script>\n"
        "<template>{{ last }}</template>"
    )

    route_file = parse_route_file(content)

    assert route_file.script == "items = [1, 2]\nfor item in items:\n    exports.last = item"


def test_parse_keeps_template_multiline_content():
    """Test inner template lines are preserved apart from outer whitespace."""
    content = "<script>x = 1</script>\n<template>\n<ul>\n  <li>a</li>\n</ul>\n</template>"

    route_file = parse_route_file(content)

    assert route_file.template == "<ul>\n  <li>a</li>\n</ul>"


@pytest.mark.parametrize(
    "content,missing",
    [
        ("<template><p>hi</p></template>", ["script"]),
        ("<script>x = 1</script>", ["template"]),
        ("<p>plain html</p>", ["script", "template"]),
        ("<script>x = 1<template>unterminated", ["script", "template"]),
    ],
)
def test_parse_missing_section_raises(content, missing):
    """Test a missing marker pair raises MalformedRouteFile."""
    with pytest.raises(MalformedRouteFile) as exc_info:
        parse_route_file(content, "broken.html")

    assert exc_info.value.code == ErrorCode.MALFORMED_ROUTE_FILE
    assert exc_info.value.details["missing"] == missing
    assert exc_info.value.details["route_path"] == "broken.html"
    assert "<script> and <template>" in exc_info.value.message
