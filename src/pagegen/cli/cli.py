"""CLI entrypoint: Typer app definition and command registration"""

from typing import Annotated, Optional

import typer

from pagegen.cli.commands import (
    outline_cmd, preview_html_cmd, prompts_cmd, render_cmd, sections_cmd, slug_cmd,
)
from pagegen.config import load_config
from pagegen.logging_config import setup_logging


app = typer.Typer(name="pagegen", no_args_is_help=True, help="Programmatic SEO page template rendering")


@app.callback()
def main(
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")] = None,
    ):
    """Configure logging before any command runs."""
    try:
        level = log_level or load_config().log_level
    except ValueError:
        level = "WARNING"
    setup_logging(level)


app.command(name="render")(render_cmd)
app.command(name="prompts")(prompts_cmd)
app.command(name="outline")(outline_cmd)
app.command(name="sections")(sections_cmd)
app.command(name="slug")(slug_cmd)
app.command(name="preview-html")(preview_html_cmd)
