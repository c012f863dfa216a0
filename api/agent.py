"""
Agent API module for accessing player account information, events, and registration.
"""
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from api.client import ApiClient

class AgentAPI:
    """Agent endpoints."""

    def __init__(self, client: 'ApiClient'):
        self.client = client

    def get(self) -> dict:
        """Fetch current agent details (GET /my/agent)."""
        return self.client.http.get_json("my/agent")

    def events(self) -> dict:
        """Fetch recent agent events (GET /my/agent/events)."""
        return self.client.http.get_json("my/agent/events")

    def register(self, symbol: str, faction: str, email: str | None = None) -> dict:
        """Register a new agent (POST /register)."""
        body = {"symbol": symbol, "faction": faction}
        if email is not None:
            body["email"] = email
        return self.client.http.post_json("register", json=body)
