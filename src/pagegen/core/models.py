"""Value models for template rendering and outline/section parsing"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Literal, Mapping

from pydantic import BaseModel


DataMap = Mapping[str, str]
GeneratedContentMap = Mapping[str, str]


class SectionType(str, Enum):
    h2 = "h2"
    h3 = "h3"
    paragraph = "paragraph"
    list = "list"


class ExtractedPrompt(BaseModel):
    """A single prompt("...") occurrence found in a template."""
    id: str                         # prompt_<n>, in order of appearance
    original: str                   # exact matched marker text
    prompt: str                     # instruction text as written
    placeholders_replaced: str      # instruction text with data substituted


class OutlineNode(BaseModel):
    """One outline entry: heading levels 0-2, or 3 for a list item."""
    level: Literal[0, 1, 2, 3]
    text: str


class Section(BaseModel):
    """Editor-facing content block parsed from an article body."""
    id: str
    type: SectionType
    content: str


@dataclass
class ParsedTemplate:
    """Template file split into YAML frontmatter and body; not persisted."""
    path:        Path
    slug:        str
    raw:         str                # full file content (includes frontmatter)
    body:        str                # template text (frontmatter stripped)
    frontmatter: dict[str, Any]
