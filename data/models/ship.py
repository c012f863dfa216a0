from dataclasses import dataclass
from typing import Any

from data.enums import ShipNavFlightMode, ShipNavStatus


@dataclass
class ShipNavRouteWaypoint:
    symbol: str | None
    type: str | None
    systemSymbol: str | None
    x: int | None
    y: int | None

    @staticmethod
    def from_dict(d: Any) -> "ShipNavRouteWaypoint":
        if not isinstance(d, dict):
            return ShipNavRouteWaypoint(symbol=None, type=None, systemSymbol=None, x=None, y=None)
        return ShipNavRouteWaypoint(
            symbol=d.get("symbol"),
            type=d.get("type"),
            systemSymbol=d.get("systemSymbol"),
            x=d.get("x"),
            y=d.get("y"),
        )


@dataclass
class ShipNavRoute:
    departure: ShipNavRouteWaypoint | None
    destination: ShipNavRouteWaypoint | None
    departureTime: str | None
    arrival: str | None


@dataclass
class ShipNav:
    systemSymbol: str | None
    waypointSymbol: str | None
    route: ShipNavRoute | None
    status: ShipNavStatus | None
    flightMode: ShipNavFlightMode = ShipNavFlightMode.CRUISE

    @staticmethod
    def from_dict(nav_dict: dict[str, Any] | None) -> "ShipNav":
        nav_dict = nav_dict or {}
        route_dict = nav_dict.get("route", {}) or {}
        route = (
            ShipNavRoute(
                departure=ShipNavRouteWaypoint.from_dict(route_dict.get("origin")),
                destination=ShipNavRouteWaypoint.from_dict(route_dict.get("destination")),
                departureTime=route_dict.get("departureTime"),
                arrival=route_dict.get("arrival"),
            )
            if route_dict
            else None
        )

        status_value = nav_dict.get("status")
        status = None
        if isinstance(status_value, str):
            try:
                status = ShipNavStatus(status_value)
            except ValueError:
                status = None

        flight_mode_value = nav_dict.get("flightMode", ShipNavFlightMode.CRUISE.value)
        try:
            flight_mode = ShipNavFlightMode(flight_mode_value)
        except ValueError:
            flight_mode = ShipNavFlightMode.CRUISE

        return ShipNav(
            systemSymbol=nav_dict.get("systemSymbol"),
            waypointSymbol=nav_dict.get("waypointSymbol"),
            route=route,
            status=status,
            flightMode=flight_mode,
        )

    def describe(self) -> str:
        """Short human status, e.g. 'DOCKED at X1-AB12-A1' or 'IN_TRANSIT to X1-AB12-B2 (arrives ...)'."""
        if self.status is None:
            return "UNKNOWN"
        if self.status == ShipNavStatus.IN_TRANSIT:
            dest = self.route.destination.symbol if self.route and self.route.destination else None
            arrival = self.route.arrival if self.route else None
            text = f"{self.status.value} to {dest or '?'}"
            if arrival:
                text += f" (arrives {arrival})"
            return text
        return f"{self.status.value} at {self.waypointSymbol or '?'}"
