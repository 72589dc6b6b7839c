"""Unit tests for core/extract/outline.py"""

import pytest

from pagegen.core.extract.outline import node_line, outline_to_text, parse_outline
from pagegen.core.models import OutlineNode


def _pairs(nodes):
    return [(n.level, n.text) for n in nodes]


def test_parse_outline_heading_and_items():
    nodes = parse_outline("## Section\n- item one\n- item two")
    assert _pairs(nodes) == [(1, "Section"), (3, "item one"), (3, "item two")]


@pytest.mark.parametrize("line,expected", [
    ("# Title", (0, "Title")),
    ("## Section", (1, "Section")),
    ("### Sub", (2, "Sub")),
    ("- dash item", (3, "dash item")),
    ("* star item", (3, "star item")),
    ("Plain line", (0, "Plain line")),
    ("#### Deep", (0, "#### Deep")),
    ("-no space", (0, "-no space")),
])
def test_parse_outline_line_levels(line, expected):
    """Each prefix maps to its level; unprefixed lines are level 0 verbatim."""
    assert _pairs(parse_outline(line)) == [expected]


def test_parse_outline_trims_and_skips_blank_lines():
    nodes = parse_outline("\n   ## Indented  \n\n\t- tabbed\n   \n")
    assert _pairs(nodes) == [(1, "Indented"), (3, "tabbed")]


@pytest.mark.parametrize("text", ["", "   ", "\n\n"])
def test_parse_outline_empty(text):
    assert parse_outline(text) == []


def test_parse_outline_preserves_order():
    text = "# A\n- a1\n## B\n### B1\n- b\nloose"
    assert [n.text for n in parse_outline(text)] == ["A", "a1", "B", "B1", "b", "loose"]


def test_outline_to_text_prefixes():
    nodes = [
        OutlineNode(level=0, text="Title"),
        OutlineNode(level=1, text="Section"),
        OutlineNode(level=2, text="Sub"),
        OutlineNode(level=3, text="item"),
    ]
    assert outline_to_text(nodes) == "# Title\n## Section\n### Sub\n- item"


def test_outline_round_trip():
    """Serializing parsed nodes and parsing again yields the same nodes."""
    text = "Intro\n# Title\n## Section\n* item\n### Sub\n- other"
    nodes = parse_outline(text)
    assert parse_outline(outline_to_text(nodes)) == nodes


@pytest.mark.parametrize("level,expected", [
    (0, "# T"),
    (1, "## T"),
    (2, "### T"),
    (3, "- T"),
])
def test_node_line(level, expected):
    assert node_line(OutlineNode(level=level, text="T")) == expected
