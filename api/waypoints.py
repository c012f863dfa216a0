from typing import Any, Dict
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from api.client import ApiClient


class WaypointsAPI:
    """Waypoints endpoints, including the market / shipyard / jump-gate sub-resources."""

    def __init__(self, client: 'ApiClient'):
        self.client = client

    def list(self, system_symbol: str, *, page: int | None = None, limit: int | None = None) -> Dict[str, Any]:
        """
        Fetch a page of waypoints for a system.
        GET /v2/systems/{systemSymbol}/waypoints
        Returns the full payload ({data, meta}).
        """
        return self.client.http.get_json(
            f"systems/{system_symbol}/waypoints",
            params={"page": page, "limit": limit},
        )

    def get(self, system_symbol: str, waypoint_symbol: str) -> Dict[str, Any]:
        """GET /v2/systems/{systemSymbol}/waypoints/{waypointSymbol}"""
        return self.client.http.get_json(f"systems/{system_symbol}/waypoints/{waypoint_symbol}")

    def get_market(self, system_symbol: str, waypoint_symbol: str) -> Dict[str, Any]:
        """GET /v2/systems/{systemSymbol}/waypoints/{waypointSymbol}/market"""
        return self.client.http.get_json(f"systems/{system_symbol}/waypoints/{waypoint_symbol}/market")

    def get_shipyard(self, system_symbol: str, waypoint_symbol: str) -> Dict[str, Any]:
        """GET /v2/systems/{systemSymbol}/waypoints/{waypointSymbol}/shipyard"""
        return self.client.http.get_json(f"systems/{system_symbol}/waypoints/{waypoint_symbol}/shipyard")

    def get_jump_gate(self, system_symbol: str, waypoint_symbol: str) -> Dict[str, Any]:
        """GET /v2/systems/{systemSymbol}/waypoints/{waypointSymbol}/jump-gate"""
        return self.client.http.get_json(f"systems/{system_symbol}/waypoints/{waypoint_symbol}/jump-gate")
