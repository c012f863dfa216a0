"""
Fleet API module for ship control operations including navigation, extraction, and trading.
"""

from typing import TYPE_CHECKING, Any

from data.enums import ShipNavFlightMode

if TYPE_CHECKING:
    from api.client import ApiClient


class FleetAPI:
    """Fleet endpoints."""

    def __init__(self, client: "ApiClient"):
        self.client = client

    def _action(self, ship_symbol: str, action: str, body: Any = None) -> dict:
        return self.client.http.post_json(f"my/ships/{ship_symbol}/{action}", json=body)

    def get_my_ships(self, page: int | None = None, limit: int | None = None) -> dict:
        """Fetch fleet list (GET /my/ships) with optional pagination."""
        return self.client.http.get_json("my/ships", params={"page": page, "limit": limit})

    def get_ship(self, ship_symbol: str) -> dict:
        """Fetch a single ship (GET /my/ships/{shipSymbol})."""
        return self.client.http.get_json(f"my/ships/{ship_symbol}")

    def purchase_ship(self, ship_type: str, waypoint_symbol: str) -> dict:
        """Purchase a ship at a shipyard (POST /my/ships)."""
        body = {"shipType": ship_type, "waypointSymbol": waypoint_symbol}
        return self.client.http.post_json("my/ships", json=body)

    def get_cooldown(self, ship_symbol: str) -> dict:
        """Fetch reactor cooldown (GET /my/ships/{shipSymbol}/cooldown). 204 when none."""
        return self.client.http.get_json(f"my/ships/{ship_symbol}/cooldown")

    def orbit_ship(self, ship_symbol: str) -> dict:
        """Orbit a ship (POST /my/ships/{shipSymbol}/orbit)."""
        return self._action(ship_symbol, "orbit")

    def dock_ship(self, ship_symbol: str) -> dict:
        """Dock a ship (POST /my/ships/{shipSymbol}/dock)."""
        return self._action(ship_symbol, "dock")

    def negotiate_contract(self, ship_symbol: str) -> dict:
        """POST /my/ships/{shipSymbol}/negotiate/contract"""
        return self._action(ship_symbol, "negotiate/contract")

    def refuel_ship(self, ship_symbol: str, units: int | None = None, from_cargo: bool | None = None) -> dict:
        """Refuel a ship (POST /my/ships/{shipSymbol}/refuel)."""
        body: dict = {}
        if units is not None:
            body["units"] = units
        if from_cargo is not None:
            body["fromCargo"] = from_cargo
        return self._action(ship_symbol, "refuel", body or None)

    def refine(self, ship_symbol: str, produce: str) -> dict:
        """POST /my/ships/{shipSymbol}/refine"""
        return self._action(ship_symbol, "refine", {"produce": produce})

    def scan_ships(self, ship_symbol: str) -> dict:
        return self._action(ship_symbol, "scan/ships")

    def scan_systems(self, ship_symbol: str) -> dict:
        return self._action(ship_symbol, "scan/systems")

    def scan_waypoints(self, ship_symbol: str) -> dict:
        return self._action(ship_symbol, "scan/waypoints")

    def chart(self, ship_symbol: str) -> dict:
        """Chart the current waypoint (POST /my/ships/{shipSymbol}/chart)."""
        return self._action(ship_symbol, "chart")

    def survey(self, ship_symbol: str) -> dict:
        """Survey the current waypoint (POST /my/ships/{shipSymbol}/survey)."""
        return self._action(ship_symbol, "survey")

    def extract(self, ship_symbol: str, survey: dict | None = None) -> dict:
        """Extract resources (POST /my/ships/{shipSymbol}/extract), optionally biased by a survey."""
        body = {"survey": survey} if survey is not None else None
        return self._action(ship_symbol, "extract", body)

    def navigate_ship(self, ship_symbol: str, waypoint_symbol: str) -> dict:
        """Navigate a ship to a waypoint (POST /my/ships/{shipSymbol}/navigate)."""
        return self._action(ship_symbol, "navigate", {"waypointSymbol": waypoint_symbol})

    def set_flight_mode(self, ship_symbol: str, mode: ShipNavFlightMode) -> dict:
        """Set ship flight mode (PATCH /my/ships/{shipSymbol}/nav)."""
        body = {"flightMode": mode.value}
        return self.client.http.patch_json(f"my/ships/{ship_symbol}/nav", json=body)

    def warp_ship(self, ship_symbol: str, waypoint_symbol: str) -> dict:
        """Warp to a waypoint in another system (POST /my/ships/{shipSymbol}/warp)."""
        return self._action(ship_symbol, "warp", {"waypointSymbol": waypoint_symbol})

    def jump_ship(self, ship_symbol: str, system_symbol: str) -> dict:
        """Jump to a system (POST /my/ships/{shipSymbol}/jump)."""
        return self._action(ship_symbol, "jump", {"systemSymbol": system_symbol})

    def purchase_cargo(self, ship_symbol: str, symbol: str, units: int) -> dict:
        """Buy cargo at the current market (POST /my/ships/{shipSymbol}/purchase)."""
        return self._action(ship_symbol, "purchase", {"symbol": symbol, "units": units})

    def transfer_cargo(self, ship_symbol: str, trade_symbol: str, units: int, to_ship_symbol: str) -> dict:
        """Transfer cargo to another ship (POST /my/ships/{shipSymbol}/transfer)."""
        body = {"tradeSymbol": trade_symbol, "units": units, "shipSymbol": to_ship_symbol}
        return self._action(ship_symbol, "transfer", body)

    def jettison(self, ship_symbol: str, symbol: str, units: int) -> dict:
        """Jettison cargo (POST /my/ships/{shipSymbol}/jettison)."""
        return self._action(ship_symbol, "jettison", {"symbol": symbol, "units": units})

    def install_mount(self, ship_symbol: str, symbol: str) -> dict:
        """POST /my/ships/{shipSymbol}/mounts/install"""
        return self._action(ship_symbol, "mounts/install", {"symbol": symbol})

    def sell(self, ship_symbol: str, symbol: str, units: int) -> dict:
        """Sell cargo (POST /my/ships/{shipSymbol}/sell)."""
        return self._action(ship_symbol, "sell", {"symbol": symbol, "units": units})
