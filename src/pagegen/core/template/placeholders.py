"""{{identifier}} placeholder substitution and inspection"""

import re
from typing import Mapping, Optional


PLACEHOLDER_RE = re.compile(r'\{\{(\w+)\}\}')


def substitute(template: str, data: Optional[Mapping[str, object]] = None) -> str:
    """Replace bound {{key}} tokens with their values; unbound tokens are kept verbatim.

    A key mapped to None or '' counts as unbound. Substituted values are not re-scanned.
    """
    data = data or {}

    def _value(m: re.Match) -> str:
        value = data.get(m.group(1))
        if value is None or value == '':
            return m.group(0)
        return str(value)

    return PLACEHOLDER_RE.sub(_value, template)


def find_placeholders(template: str) -> list[str]:
    """Return unique placeholder identifiers in order of first appearance."""
    return list(dict.fromkeys(PLACEHOLDER_RE.findall(template)))


def unresolved_placeholders(template: str, data: Optional[Mapping[str, object]] = None) -> list[str]:
    """Return identifiers that substitute() would leave untouched for this data."""
    data = data or {}
    return [k for k in find_placeholders(template) if data.get(k) is None or data.get(k) == '']
