"""prompt("...") / image_prompt("...") marker extraction"""

import re
from typing import Mapping, Optional

from pagegen.core.models import ExtractedPrompt
from pagegen.core.template.placeholders import substitute


# Any of the three quote characters may open or close; no escapes inside the literal.
PROMPT_RE = re.compile(r'prompt\(["\'`]([^"\'`]+)["\'`]\)')
IMAGE_PROMPT_RE = re.compile(r'image_prompt\(["\'`]([^"\'`]+)["\'`]\)')

PREVIEW_LENGTH = 50


def _extract(pattern: re.Pattern, prefix: str, template: str, data: Optional[Mapping[str, object]]) -> list[ExtractedPrompt]:
    return [
        ExtractedPrompt(
            id=f"{prefix}_{i}",
            original=m.group(0),
            prompt=m.group(1),
            placeholders_replaced=substitute(m.group(1), data),
        )
        for i, m in enumerate(pattern.finditer(template))
    ]


def extract_prompts(template: str, data: Optional[Mapping[str, object]] = None) -> list[ExtractedPrompt]:
    """Return every prompt marker in order of appearance, with ids prompt_0, prompt_1, ...

    The pattern also matches the prompt(...) tail of an image_prompt(...) marker.
    """
    return _extract(PROMPT_RE, "prompt", template, data)


def extract_image_prompts(template: str, data: Optional[Mapping[str, object]] = None) -> list[ExtractedPrompt]:
    """Return every image_prompt marker in order, with ids image_prompt_0, image_prompt_1, ..."""
    return _extract(IMAGE_PROMPT_RE, "image_prompt", template, data)


def has_prompts(text: str) -> bool:
    return PROMPT_RE.search(text) is not None


def has_image_prompts(text: str) -> bool:
    return IMAGE_PROMPT_RE.search(text) is not None


def get_prompt_placeholder(prompt_text: str, limit: int = PREVIEW_LENGTH) -> str:
    """Format the visible stand-in for content that has not been generated yet."""
    truncated = prompt_text[:limit] + "..." if len(prompt_text) > limit else prompt_text
    return f'[AI will generate: "{truncated}"]'
