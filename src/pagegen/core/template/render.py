"""Template rendering: data substitution plus generated content or preview stand-ins"""

import logging
from typing import Mapping, Optional

from pagegen.core.template.placeholders import substitute
from pagegen.core.template.prompts import PREVIEW_LENGTH, PROMPT_RE, extract_prompts, get_prompt_placeholder


logger = logging.getLogger(__name__)


def render_template_with_placeholders(
    template: str,
    data: Optional[Mapping[str, object]] = None,
    generated_content: Optional[Mapping[str, str]] = None,
    preview_length: int = PREVIEW_LENGTH,
    ) -> str:
    """Render a template, slotting generated content in by prompt id.

    Prompts without (non-empty) generated content render as an
    [AI will generate: "..."] stand-in built from the resolved instruction.
    Each marker is located by its placeholder-resolved text, so markers that
    contain {{placeholders}} are replaced too rather than left in the output.
    """
    generated_content = generated_content or {}
    rendered = substitute(template, data)

    for p in extract_prompts(template, data):
        content = generated_content.get(p.id)
        if not content:
            logger.debug("No generated content for %s; rendering stand-in", p.id)
            content = get_prompt_placeholder(p.placeholders_replaced, preview_length)
        # Step one already resolved placeholders inside the marker.
        rendered = rendered.replace(substitute(p.original, data), content, 1)

    return rendered


def replace_prompts(text: str, generated: Mapping[str, str]) -> str:
    """Replace the first remaining prompt marker once per entry of generated, in iteration order.

    Keys are ignored: entries land on markers by position only.
    """
    for prompt_id, content in generated.items():
        logger.debug("Legacy replacement of next prompt marker with %s", prompt_id)
        text = PROMPT_RE.sub(lambda _m: content, text, count=1)
    return text


def render_template(
    template: str,
    data: Optional[Mapping[str, object]] = None,
    ai_content: Optional[Mapping[str, str]] = None,
    ) -> str:
    """Legacy render: substitute data, then replace prompt markers in ai_content order.

    Prefer render_template_with_placeholders, which correlates content by prompt id.
    """
    rendered = substitute(template, data)
    if ai_content:
        rendered = replace_prompts(rendered, ai_content)
    return rendered
