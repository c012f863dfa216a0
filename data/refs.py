"""
Typed references addressing remote entities without fetching them, plus the page wrapper.
"""

from dataclasses import dataclass, field
from typing import Any, Union

from data.enums import PageKind


def system_symbol_of(waypoint_symbol: str) -> str:
    """X1-AB12-XYZ -> X1-AB12"""
    parts = waypoint_symbol.split("-")
    if len(parts) >= 2:
        return f"{parts[0]}-{parts[1]}"
    return waypoint_symbol


@dataclass(frozen=True)
class SystemRef:
    symbol: str


@dataclass(frozen=True)
class WaypointRef:
    system_symbol: str
    symbol: str

    @property
    def system(self) -> SystemRef:
        return SystemRef(self.system_symbol)

    @staticmethod
    def from_symbol(symbol: str) -> "WaypointRef":
        return WaypointRef(system_symbol_of(symbol), symbol)


@dataclass(frozen=True)
class ShipRef:
    symbol: str


@dataclass(frozen=True)
class ContractRef:
    id: str


@dataclass(frozen=True)
class FactionRef:
    symbol: str


ResourceRef = Union[SystemRef, WaypointRef, ShipRef, ContractRef, FactionRef]


@dataclass(frozen=True)
class PageRef:
    """Deferred pointer to one page of a collection. `parent` scopes waypoint pages to a system."""

    kind: PageKind
    page: int = 1
    limit: int | None = None
    parent: SystemRef | None = None


@dataclass
class Page:
    items: list[dict[str, Any]] = field(default_factory=list)
    next: PageRef | None = None
