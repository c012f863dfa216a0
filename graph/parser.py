"""
Free-text parsing of system / waypoint symbols into typed references.
"""

import re

from data.refs import ResourceRef, SystemRef, WaypointRef

SYSTEM_PATTERN = re.compile(r"(X1-.{3,4})", re.IGNORECASE)
WAYPOINT_PATTERN = re.compile(r"((X1-.{3,4})-.{3,6})", re.IGNORECASE)


def parse(name: str, value: str) -> list[ResourceRef]:
    """
    Resolve free text into references for the given node type.
    Returns [] for unknown node types or when nothing matches.
    """
    if not isinstance(value, str):
        return []
    if name == "system":
        m = SYSTEM_PATTERN.search(value)
        if m:
            return [SystemRef(m.group(1))]
    elif name == "waypoint":
        m = WAYPOINT_PATTERN.search(value)
        if m:
            return [WaypointRef(system_symbol=m.group(2), symbol=m.group(1))]
    return []


def parse_any(value: str) -> list[ResourceRef]:
    """Try the waypoint pattern first, then the bare system pattern."""
    return parse("waypoint", value) or parse("system", value)
