"""Article outline parsing into flat heading/list nodes"""

from pagegen.core.models import OutlineNode


LIST_LEVEL = 3

# Checked in order: '### ' must win over '## ' and '# '.
HEADING_PREFIXES: list[tuple[str, int]] = [('### ', 2), ('## ', 1), ('# ', 0)]
BULLET_PREFIXES = ('- ', '* ')


def _classify(line: str) -> tuple[int, str]:
    """Return (level, text) for a trimmed outline line; unprefixed lines are level 0."""
    for prefix, level in HEADING_PREFIXES:
        if line.startswith(prefix):
            return level, line[len(prefix):]
    if line.startswith(BULLET_PREFIXES):
        return LIST_LEVEL, line[2:]
    return 0, line


def parse_outline(text: str) -> list[OutlineNode]:
    """Parse outline text into ordered nodes, skipping blank lines and empty items."""
    nodes: list[OutlineNode] = []
    for raw in text.split('\n'):
        line = raw.strip()
        if not line:
            continue
        level, item = _classify(line)
        if item:
            nodes.append(OutlineNode(level=level, text=item))
    return nodes


def node_line(node: OutlineNode) -> str:
    """Format one node as its prefixed outline line."""
    marker = '-' if node.level == LIST_LEVEL else '#' * (node.level + 1)
    return f"{marker} {node.text}"


def outline_to_text(nodes: list[OutlineNode]) -> str:
    """Serialize nodes back to outline text, one prefixed line per node."""
    return '\n'.join(node_line(node) for node in nodes)
