"""Plain-text truncation and excerpts for the publishing step"""

import re


TAG_RE = re.compile(r'<[^>]*>')
EXCERPT_LENGTH = 160


def strip_html(text: str) -> str:
    """Remove HTML tags and surrounding whitespace."""
    return TAG_RE.sub('', text).strip()


def truncate_text(text: str, max_length: int) -> str:
    """Return tag-free text cut to max_length, ending in '...' when shortened."""
    if not text:
        return ''
    plain = strip_html(text)
    if len(plain) <= max_length:
        return plain
    return plain[:max(max_length - 3, 0)] + '...'


def generate_excerpt(content: str, max_length: int = EXCERPT_LENGTH) -> str:
    return truncate_text(content, max_length)
