"""Singular/plural and case aliasing of campaign data keys before substitution"""

from typing import Mapping


def to_singular(key: str) -> str:
    """Best-effort singular form: cities -> city, addresses -> address, services -> service."""
    if key.endswith('ies') and len(key) > 3:
        return key[:-3] + 'y'
    if key.endswith('ses') and len(key) > 3:
        return key[:-2]
    if key.endswith('s') and not key.endswith('ss') and len(key) > 1:
        return key[:-1]
    return key


def to_plural(key: str) -> str:
    """Best-effort plural form: city -> cities, service -> services; keys ending in s are kept."""
    if key.endswith('y') and len(key) > 1:
        return key[:-1] + 'ies'
    if key.endswith('s'):
        return key
    return key + 's'


def _capitalize(key: str) -> str:
    return key[:1].upper() + key[1:]


def expand_aliases(data: Mapping[str, object]) -> dict[str, object]:
    """Return a new map adding lowercase, singular, plural, capitalized and upper-case aliases per key.

    Explicit keys always keep their own value; among aliases the first key wins.
    """
    expanded: dict[str, object] = dict(data)
    for key, value in data.items():
        lower = key.lower()
        for alias in (lower, to_singular(lower), to_plural(lower)):
            expanded.setdefault(alias, value)
            expanded.setdefault(_capitalize(alias), value)
            expanded.setdefault(alias.upper(), value)
    return expanded
