"""Article body grouping into editor sections (h2, h3, list, paragraph) and back"""

from pagegen.core.models import Section, SectionType


BULLET_PREFIXES = ('- ', '* ')


def parse_content_to_sections(text: str) -> list[Section]:
    """Split an article body into sections; consecutive plain lines form one paragraph.

    Blank lines do not end a paragraph; only a heading, a list line or the end of
    input does. A single '# ' line is plain paragraph text here.
    """
    if not text:
        return []

    sections: list[Section] = []
    paragraph = ''

    def _flush() -> None:
        nonlocal paragraph
        if paragraph:
            sections.append(Section(
                id=f"p-{len(sections)}", type=SectionType.paragraph, content=paragraph.strip(),
            ))
            paragraph = ''

    for i, line in enumerate(text.split('\n')):
        stripped = line.strip()
        if stripped.startswith('## '):
            _flush()
            sections.append(Section(id=f"h2-{i}", type=SectionType.h2, content=stripped[3:]))
        elif stripped.startswith('### '):
            _flush()
            sections.append(Section(id=f"h3-{i}", type=SectionType.h3, content=stripped[4:]))
        elif stripped.startswith(BULLET_PREFIXES):
            _flush()
            sections.append(Section(id=f"list-{i}", type=SectionType.list, content=stripped))
        elif stripped:
            paragraph += line + '\n'
    _flush()

    return sections


def sections_to_content(sections: list[Section]) -> str:
    """Reassemble sections into body text, separated by blank lines."""
    parts = []
    for s in sections:
        if s.type == SectionType.h2:
            parts.append(f"## {s.content}")
        elif s.type == SectionType.h3:
            parts.append(f"### {s.content}")
        else:
            parts.append(s.content)
    return '\n\n'.join(parts)
