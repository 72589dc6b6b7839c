"""Pipeline step functions: load, render, check, and write template pages"""

import logging
from pathlib import Path
from typing import Mapping, Optional

from pagegen.config import Settings
from pagegen.core.export import write_page
from pagegen.core.models import ParsedTemplate
from pagegen.core.parse import discover_files, load_template, template_data, template_generated
from pagegen.core.template.aliases import expand_aliases
from pagegen.core.template.placeholders import substitute, unresolved_placeholders
from pagegen.core.template.prompts import extract_prompts
from pagegen.core.template.render import render_template, render_template_with_placeholders
from pagegen.core.utils.slug import generate_slug
from pagegen.core.utils.text import generate_excerpt


logger = logging.getLogger(__name__)


def merge_inputs(
    parsed: ParsedTemplate,
    data: Optional[Mapping[str, str]],
    generated: Optional[Mapping[str, str]],
    settings: Settings,
    ) -> tuple[dict, dict]:
    """Combine frontmatter data/generated maps with caller-supplied ones (caller wins)."""
    merged = {**template_data(parsed), **(data or {})}
    if settings.expand_aliases:
        merged = expand_aliases(merged)
    return merged, {**template_generated(parsed), **(generated or {})}


def missing_inputs(template: str, data: Mapping[str, object], generated: Mapping[str, str]) -> list[str]:
    """Describe what keeps a template from rendering completely: unbound variables and ungenerated prompts."""
    problems = [f"unbound placeholder {{{{{k}}}}}" for k in unresolved_placeholders(template, data)]
    problems += [f"no generated content for {p.id}" for p in extract_prompts(template, data) if not generated.get(p.id)]
    return problems


def render_page(
    parsed: ParsedTemplate,
    settings: Settings,
    data: Optional[Mapping[str, str]] = None,
    generated: Optional[Mapping[str, str]] = None,
    legacy: bool = False,
    strict: bool = False,
    ) -> str:
    """Render one parsed template. strict raises ValueError if anything would be left unrendered."""
    merged, gen = merge_inputs(parsed, data, generated, settings)
    if strict:
        problems = missing_inputs(parsed.body, merged, gen)
        if problems:
            raise ValueError("; ".join(problems))
    if legacy:
        return render_template(parsed.body, merged, gen)
    return render_template_with_placeholders(parsed.body, merged, gen, settings.preview_length)


def page_meta(parsed: ParsedTemplate, data: Mapping[str, object], settings: Settings) -> tuple[str, dict]:
    """Return (slug, frontmatter) with placeholders resolved in string frontmatter values.

    The resolved frontmatter slug, else the resolved title, is passed through generate_slug.
    """
    frontmatter = {k: substitute(v, data) if isinstance(v, str) else v for k, v in parsed.frontmatter.items()}
    source = frontmatter.get('slug') or frontmatter.get('title')
    if not source:
        return parsed.slug, frontmatter
    return generate_slug(str(source), settings.slug_max_length) or parsed.slug, frontmatter


def output_dir_for(source: Path, root: Path, output_dir: Path) -> Path:
    """Mirror the source file's folder below root into output_dir."""
    if root.is_file():
        return output_dir
    return output_dir / source.parent.relative_to(root)


def run_render(
    path: str,
    settings: Settings,
    data: Optional[Mapping[str, str]] = None,
    generated: Optional[Mapping[str, str]] = None,
    legacy: bool = False,
    strict: bool = False,
    ) -> list[tuple[Path, Path]]:
    """Render every template under path into settings.output_dir. Returns (source, output) pairs.

    Output folders mirror the template folders; two templates resolving to one output file raise.
    """
    root = Path(path)
    output_dir = Path(settings.output_dir)
    written: dict[Path, Path] = {}
    results = []
    for p in discover_files(root):
        try:
            parsed = load_template(p, settings.slug_max_length)
            body = render_page(parsed, settings, data, generated, legacy, strict)
            slug, frontmatter = page_meta(parsed, merge_inputs(parsed, data, None, settings)[0], settings)
            dest_dir = output_dir_for(p, root, output_dir)
            target = dest_dir / f"{slug}.{settings.output_format}"
            if target in written:
                raise ValueError(f"output {target} already written from {written[target]}")
            out_file = write_page(
                body, slug, dest_dir, settings.output_format,
                frontmatter=frontmatter,
                excerpt=generate_excerpt(body, settings.excerpt_length),
                preset=settings.parser_config,
            )
        except Exception as e:
            raise RuntimeError(f"Failed to render {p}: {e}") from e
        logger.info("Rendered %s -> %s", p, out_file)
        written[out_file] = p
        results.append((p, out_file))
    return results
