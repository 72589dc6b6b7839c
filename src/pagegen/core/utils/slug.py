"""Slug generation for published page and article identifiers"""

import re


SLUG_MAX_LENGTH = 100


def generate_slug(title: str, max_length: int = SLUG_MAX_LENGTH) -> str:
    """Convert a title to a lowercase, hyphen-separated slug of at most max_length chars."""
    text = title.strip().lower()
    text = re.sub(r'[^a-z0-9\s-]', '', text)
    text = re.sub(r'\s+', '-', text)
    return re.sub(r'-+', '-', text)[:max_length]
