"""
Factions API module.
"""
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from api.client import ApiClient


class FactionsAPI:
    """Faction endpoints."""

    def __init__(self, client: "ApiClient"):
        self.client = client

    def list(self, page: int | None = None, limit: int | None = None) -> dict:
        """Fetch a page of factions (GET /factions)."""
        return self.client.http.get_json("factions", params={"page": page, "limit": limit})

    def get(self, faction_symbol: str) -> dict:
        """Fetch a single faction (GET /factions/{factionSymbol})."""
        return self.client.http.get_json(f"factions/{faction_symbol}")
