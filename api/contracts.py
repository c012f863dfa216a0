"""
Contracts API module for listing and acting on the agent's contracts.
"""
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from api.client import ApiClient


class ContractsAPI:
    """Contract endpoints."""

    def __init__(self, client: "ApiClient"):
        self.client = client

    def list(self, page: int | None = None, limit: int | None = None) -> dict:
        """Fetch a page of contracts (GET /my/contracts)."""
        return self.client.http.get_json("my/contracts", params={"page": page, "limit": limit})

    def get(self, contract_id: str) -> dict:
        """Fetch a single contract (GET /my/contracts/{contractId})."""
        return self.client.http.get_json(f"my/contracts/{contract_id}")

    def accept(self, contract_id: str) -> dict:
        """Accept a contract (POST /my/contracts/{contractId}/accept)."""
        return self.client.http.post_json(f"my/contracts/{contract_id}/accept")

    def fulfill(self, contract_id: str) -> dict:
        """Fulfill a contract (POST /my/contracts/{contractId}/fulfill)."""
        return self.client.http.post_json(f"my/contracts/{contract_id}/fulfill")

    def deliver(self, contract_id: str, ship_symbol: str | None, trade_symbol: str | None, units: int | None) -> dict:
        """Deliver cargo to a contract (POST /my/contracts/{contractId}/deliver)."""
        body = {"shipSymbol": ship_symbol, "tradeSymbol": trade_symbol, "units": units}
        return self.client.http.post_json(f"my/contracts/{contract_id}/deliver", json=body)
