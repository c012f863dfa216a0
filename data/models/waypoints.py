from dataclasses import dataclass, field
from typing import Any

from data.enums import WaypointTraitType, WaypointType


@dataclass
class WaypointTrait:
    symbol: str
    name: str | None = None
    description: str | None = None


@dataclass
class Waypoints:
    """
    Partial view of a waypoint payload, enough to tell which sub-resources can exist.
    `traits` and `type` stay None when the payload did not carry them.
    """

    symbol: str | None
    systemSymbol: str | None = None
    type: str | None = None
    traits: list[WaypointTrait] | None = None

    @staticmethod
    def from_detail_dict(d: dict[str, Any] | None) -> "Waypoints":
        d = d or {}
        traits = d.get("traits")
        return Waypoints(
            symbol=d.get("symbol"),
            systemSymbol=d.get("systemSymbol"),
            type=d.get("type"),
            traits=(
                [
                    WaypointTrait(symbol=t.get("symbol"), name=t.get("name"), description=t.get("description"))
                    for t in traits
                    if isinstance(t, dict) and "symbol" in t
                ]
                if isinstance(traits, list)
                else None
            ),
        )

    def lacks_trait(self, trait: WaypointTraitType) -> bool:
        """True only when traits are known and none matches."""
        if self.traits is None:
            return False
        return all(t.symbol != trait.value for t in self.traits)

    def cannot_be(self, waypoint_type: WaypointType) -> bool:
        return self.type is not None and self.type != waypoint_type.value
