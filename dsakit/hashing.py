"""Key-value insertion and table rendering."""

from __future__ import annotations

from typing import Hashable, Iterable, Mapping

_RULE = "----------------------"
_HEADER = "| key      |  value |"


def first_wins(pairs: Iterable[tuple[Hashable, object]]) -> dict:
    """Build a mapping from pairs, keeping the first value given for each key."""
    mapping: dict = {}
    for key, value in pairs:
        mapping.setdefault(key, value)
    return mapping


def render_table(mapping: Mapping) -> str:
    """Render a mapping as a two-column text table."""
    rows = [f"| {key}        |  {value}     |" for key, value in mapping.items()]
    return "\n".join([_RULE, _HEADER, *rows, _RULE])