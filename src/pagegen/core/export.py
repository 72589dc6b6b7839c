"""Export: HTML preview, page frontmatter, and writing rendered pages to disk"""

from pathlib import Path
from typing import Any

import yaml
from markdown_it import MarkdownIt


EMPTY_PREVIEW = '<p class="text-muted-foreground">No content to preview</p>'


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def render_html(content: str, preset: str = 'commonmark') -> str:
    """Render article content to HTML; blank content renders a muted placeholder paragraph."""
    if not content.strip():
        return EMPTY_PREVIEW
    return _make_parser(preset).render(content)


def build_page(body: str, slug: str, frontmatter: dict[str, Any] = None, excerpt: str = '') -> str:
    """Return body with a YAML frontmatter block (user fields, slug, excerpt) prepended."""
    fm = {k: v for k, v in (frontmatter or {}).items() if k not in ('data', 'generated')}
    fm['slug'] = slug
    if excerpt:
        fm['excerpt'] = excerpt
    header = yaml.dump(fm, default_flow_style=False, allow_unicode=True, sort_keys=False)
    return f"---\n{header}---\n\n{body.lstrip()}"


def write_page(
    body: str,
    slug: str,
    output_dir: Path,
    fmt: str = 'md',
    frontmatter: dict[str, Any] = None,
    excerpt: str = '',
    preset: str = 'commonmark',
    ) -> Path:
    """Write a rendered page as markdown with frontmatter, or as an HTML fragment.

    Returns the written path: output_dir / slug.{md|html}
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    out_path = output_dir / f"{slug}.{fmt}"
    if fmt == 'html':
        out_path.write_text(render_html(body, preset), encoding='utf-8')
    else:
        out_path.write_text(build_page(body, slug, frontmatter, excerpt), encoding='utf-8')
    return out_path
