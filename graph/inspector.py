"""
Query-shape helpers: decide whether a field selection needs a network fetch at all.
"""

import re
from typing import Iterable

_FIELD_NAME = re.compile(r"[_A-Za-z][_0-9A-Za-z]*")


def needs_fetch(requested: Iterable[str] | None, identifying: Iterable[str]) -> bool:
    """
    True unless every requested field is one of the identifying fields.
    None means no selection information and always fetches; an empty selection never does.
    """
    if requested is None:
        return True
    known = set(identifying)
    return any(name not in known for name in requested)


def selected_fields(selection: str) -> list[str]:
    """
    Top-level field names of a selection such as "{ symbol waypoints { symbol } }".
    Nested selections and arguments are skipped.
    """
    text = selection.strip()
    if text.startswith("{") and text.endswith("}"):
        text = text[1:-1]
    fields: list[str] = []
    depth = 0
    pos = 0
    while pos < len(text):
        ch = text[pos]
        if ch in "{(":
            depth += 1
            pos += 1
        elif ch in "})":
            depth -= 1
            pos += 1
        elif depth == 0 and (m := _FIELD_NAME.match(text, pos)):
            fields.append(m.group(0))
            pos = m.end()
        else:
            pos += 1
    return fields
