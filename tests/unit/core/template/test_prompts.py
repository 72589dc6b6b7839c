"""Unit tests for core/template/prompts.py"""

import pytest

from pagegen.core.template.prompts import (
    extract_image_prompts,
    extract_prompts,
    get_prompt_placeholder,
    has_image_prompts,
    has_prompts,
)


def test_prompt_ids_follow_order():
    """Prompts get prompt_0, prompt_1, ... in order of appearance."""
    prompts = extract_prompts('prompt("first") and prompt("second")')
    assert [p.id for p in prompts] == ["prompt_0", "prompt_1"]
    assert [p.prompt for p in prompts] == ["first", "second"]


def test_original_is_exact_marker():
    """original holds the matched marker text verbatim."""
    (p,) = extract_prompts("before prompt('do it') after")
    assert p.original == "prompt('do it')"


def test_placeholders_resolved_separately():
    """The instruction keeps its placeholders; the resolved copy substitutes them."""
    (p,) = extract_prompts('prompt("about {{city}}")', {"city": "Boston"})
    assert p.prompt == "about {{city}}"
    assert p.placeholders_replaced == "about Boston"


def test_placeholders_replaced_without_data():
    (p,) = extract_prompts('prompt("about {{city}}")')
    assert p.placeholders_replaced == "about {{city}}"


@pytest.mark.parametrize("marker", [
    'prompt("double")',
    "prompt('single')",
    "prompt(`backtick`)",
    "prompt(\"mixed')",
])
def test_quote_styles(marker):
    """Any of the three quote characters delimits the instruction."""
    assert len(extract_prompts(marker)) == 1
    assert has_prompts(marker)


@pytest.mark.parametrize("text", [
    'prompt("")',
    'prompt("unterminated',
    'prompt(no quotes)',
    'prompt("it\'s")',
    'prompt ("spaced")',
    "",
])
def test_malformed_markers_do_not_match(text):
    """Empty, unterminated, unquoted or quote-containing literals are plain text."""
    assert extract_prompts(text) == []
    assert not has_prompts(text)


def test_extract_is_repeatable(template, data):
    """Extraction does not consume or alter the template."""
    assert extract_prompts(template, data) == extract_prompts(template, data)


def test_image_prompt_tail_takes_a_prompt_slot(template, data):
    """The generic prompt pattern also matches inside image_prompt markers."""
    prompts = extract_prompts(template, data)
    assert [p.id for p in prompts] == ["prompt_0", "prompt_1", "prompt_2"]
    assert prompts[2].placeholders_replaced == "A photo of Boston skyline"


def test_extract_image_prompts(template, data):
    """image_prompt markers are listed with their own id sequence."""
    (img,) = extract_image_prompts(template, data)
    assert img.id == "image_prompt_0"
    assert img.original == 'image_prompt("A photo of {{city}} skyline")'
    assert img.placeholders_replaced == "A photo of Boston skyline"
    assert has_image_prompts(template)
    assert not has_image_prompts('prompt("text only")')


def test_get_prompt_placeholder_short():
    assert get_prompt_placeholder("write a greeting") == '[AI will generate: "write a greeting"]'


def test_get_prompt_placeholder_exactly_limit():
    """Exactly 50 chars is not truncated."""
    text = "x" * 50
    assert get_prompt_placeholder(text) == f'[AI will generate: "{text}"]'


def test_get_prompt_placeholder_truncates():
    """Longer instructions are cut to 50 chars followed by an ellipsis."""
    text = "a" * 50 + "b" * 10
    assert get_prompt_placeholder(text) == f'[AI will generate: "{"a" * 50}..."]'


def test_get_prompt_placeholder_custom_limit():
    assert get_prompt_placeholder("abcdef", limit=3) == '[AI will generate: "abc..."]'
