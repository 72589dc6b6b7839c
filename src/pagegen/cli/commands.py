"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from pagegen.config import Settings, load_config
from pagegen.core.export import render_html
from pagegen.core.extract.outline import node_line, outline_to_text, parse_outline
from pagegen.core.extract.sections import parse_content_to_sections, sections_to_content
from pagegen.core.parse import load_data, load_template
from pagegen.core.pipeline import merge_inputs, run_render
from pagegen.core.template.prompts import extract_image_prompts, extract_prompts
from pagegen.core.utils.slug import generate_slug


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _data(path: Optional[str]) -> dict[str, str]:
    """Load an optional YAML/JSON data file, failing the command on bad input."""
    if not path:
        return {}
    try:
        return load_data(Path(path))
    except (OSError, ValueError) as e:
        _fail(f"Could not load {path}", e)


def _read(path: str) -> str:
    try:
        return Path(path).read_text(encoding='utf-8')
    except OSError as e:
        _fail(f"Could not read {path}", e)


def render_cmd(
    path: Annotated[str, typer.Argument(help="Template file or directory of templates")],
    data: Annotated[Optional[str], typer.Option("--data", help="YAML/JSON file of variable values")] = None,
    generated: Annotated[Optional[str], typer.Option("--generated", help="YAML/JSON file of prompt_<n> -> content")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="md or html")] = None,
    aliases: Annotated[Optional[bool], typer.Option("--aliases/--no-aliases", help="Expand singular/plural/case data aliases")] = None,
    legacy: Annotated[bool, typer.Option("--legacy", help="Place generated content by order, ignoring prompt ids")] = False,
    strict: Annotated[bool, typer.Option("--strict", help="Fail if any placeholder or prompt would stay unrendered")] = False,
    ):
    """Render templates with data and generated content; missing content renders as previews."""
    settings = _settings(overrides={"output_dir": out, "output_format": fmt, "expand_aliases": aliases})
    values, content = _data(data), _data(generated)
    try:
        results = run_render(path, settings, values, content, legacy=legacy, strict=strict)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        typer.echo(f"No templates found at {path}.")
        raise typer.Exit(1)
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Rendered {len(results)} page(s) to {settings.output_dir}/")


def prompts_cmd(
    path: Annotated[str, typer.Argument(help="Template file")],
    data: Annotated[Optional[str], typer.Option("--data", help="YAML/JSON file of variable values")] = None,
    ):
    """List the prompt and image_prompt markers of a template with their resolved instructions."""
    settings = _settings()
    try:
        parsed = load_template(Path(path), settings.slug_max_length)
    except (OSError, ValueError) as e:
        _fail(f"Could not load {path}", e)
    merged, _ = merge_inputs(parsed, _data(data), None, settings)

    found = extract_prompts(parsed.body, merged) + extract_image_prompts(parsed.body, merged)
    if not found:
        typer.echo("No prompts found.")
        return
    for p in found:
        typer.echo(f"{p.id}: {p.placeholders_replaced}")


def outline_cmd(
    path: Annotated[str, typer.Argument(help="Outline text file")],
    normalize: Annotated[bool, typer.Option("--normalize", help="Print the reassembled outline instead of the tree")] = False,
    ):
    """Print the parsed outline as an indented tree."""
    nodes = parse_outline(_read(path))
    if normalize:
        typer.echo(outline_to_text(nodes))
        return
    for node in nodes:
        typer.echo(f"{'  ' * node.level}{node_line(node)}")


def sections_cmd(
    path: Annotated[str, typer.Argument(help="Article body text file")],
    normalize: Annotated[bool, typer.Option("--normalize", help="Print the reassembled body instead of the section list")] = False,
    ):
    """Show the editor sections of an article body."""
    sections = parse_content_to_sections(_read(path))
    if normalize:
        typer.echo(sections_to_content(sections))
        return
    for s in sections:
        typer.echo(f"[{s.id}] {s.type.value}: {s.content}")


def slug_cmd(
    title: Annotated[str, typer.Argument(help="Title to convert")],
    ):
    """Print the URL slug for a title."""
    typer.echo(generate_slug(title, _settings().slug_max_length))


def preview_html_cmd(
    path: Annotated[str, typer.Argument(help="Article body text file")],
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """Print the HTML preview of an article body."""
    settings = _settings(overrides={"parser_config": parser})
    typer.echo(render_html(_read(path), settings.parser_config))
