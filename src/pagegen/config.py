"""Application configuration: rendering settings and their config.yaml / environment sources"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "PAGEGEN_"


class Settings(BaseModel):
    app_name:        str = "pagegen"
    output_dir:      str = Field(default="dist",  description="Directory for rendered pages")
    output_format:   str = Field(default="md",    pattern="^(md|html)$", description="md or html")
    preview_length:  int = Field(default=50,  ge=1, description="Chars of a prompt shown in its preview stand-in")
    excerpt_length:  int = Field(default=160, ge=1, description="Max excerpt length for published pages")
    slug_max_length: int = Field(default=100, ge=1, description="Max generated slug length")
    expand_aliases:  bool = Field(default=True, description="Add singular/plural/case aliases to data keys")
    parser_config:   str = Field(default="commonmark", description="MarkdownIt preset for HTML previews")
    log_level:       str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$")


def _read_config_file(path: Path) -> dict[str, Any]:
    """Return the mapping stored in a YAML config file; a missing or empty file gives {}."""
    if not path.exists():
        return {}
    try:
        raw = yaml.safe_load(path.read_text(encoding='utf-8'))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(raw).__name__}")
    return raw


def _env_values() -> dict[str, str]:
    """Non-empty PAGEGEN_<FIELD> environment variables, keyed by field name."""
    return {
        name: val for name in Settings.model_fields
        if (val := os.getenv(f"{ENV_PREFIX}{name.upper()}"))
    }


def load_config(overrides: dict[str, Any] = None, config_file: str = CONFIG_FILE) -> Settings:
    """Build Settings from config_file, then PAGEGEN_<FIELD> env vars, then non-None CLI overrides."""
    data = {**_read_config_file(Path(config_file)), **_env_values()}
    data.update({k: v for k, v in (overrides or {}).items() if v is not None})
    return Settings(**data)
