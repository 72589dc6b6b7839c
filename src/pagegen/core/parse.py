"""Template file discovery, frontmatter extraction, and data file loading"""

import json
import re
from pathlib import Path
from typing import Any

import yaml

from pagegen.core.models import ParsedTemplate
from pagegen.core.utils.slug import SLUG_MAX_LENGTH, generate_slug


FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
TEMPLATE_EXTENSIONS = {'.md', '.mdx', '.txt'}


def _strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def _string_map(raw: Any, source: str) -> dict[str, str]:
    """Coerce a mapping's values to str, dropping None; raise ValueError for non-mappings."""
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid {source}: expected a mapping, got {type(raw).__name__}")
    return {str(k): str(v) for k, v in raw.items() if v is not None}


def discover_files(path: Path) -> list[Path]:
    """Return sorted template files under path, or [path] if a single template file."""
    if path.is_file():
        return [path] if path.suffix in TEMPLATE_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in TEMPLATE_EXTENSIONS)


def load_template(path: Path, slug_max_length: int = SLUG_MAX_LENGTH) -> ParsedTemplate:
    """Read a template file; the slug is generated from frontmatter slug, then title, then filename."""
    raw = path.read_text(encoding='utf-8')
    frontmatter, body = _strip_frontmatter(raw)
    title = str(frontmatter.get('title') or path.stem)
    slug = generate_slug(str(frontmatter.get('slug') or title), slug_max_length) or 'page'
    return ParsedTemplate(
        path=path,
        slug=slug,
        raw=raw,
        body=body,
        frontmatter=frontmatter,
    )


def template_data(parsed: ParsedTemplate) -> dict[str, str]:
    """Sample data declared under the template's 'data' frontmatter key."""
    return _string_map(parsed.frontmatter.get('data'), f"'data' in {parsed.path}")


def template_generated(parsed: ParsedTemplate) -> dict[str, str]:
    """Generated prompt content declared under the template's 'generated' frontmatter key."""
    return _string_map(parsed.frontmatter.get('generated'), f"'generated' in {parsed.path}")


def load_data(path: Path) -> dict[str, str]:
    """Load a YAML or JSON mapping of variable values from path."""
    text = path.read_text(encoding='utf-8')
    try:
        raw = json.loads(text) if path.suffix == '.json' else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Invalid data file {path}: {e}") from e
    return _string_map(raw, f"data file {path}")
