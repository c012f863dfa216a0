"""
Systems API module for accessing star system information and metadata.
"""
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from api.client import ApiClient

class SystemsAPI:
    """Systems endpoints."""

    def __init__(self, client: 'ApiClient'):
        self.client = client

    def list(self, page: int | None = None, limit: int | None = None) -> dict:
        """Fetch a page of systems (GET /systems)."""
        return self.client.http.get_json("systems", params={"page": page, "limit": limit})

    def get(self, system_symbol: str) -> dict:
        """Fetch a single system (GET /systems/{systemSymbol})."""
        return self.client.http.get_json(f"systems/{system_symbol}")
