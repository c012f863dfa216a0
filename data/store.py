"""
Session store holding the agent credential and the opportunistic market / jump-gate caches.
Owned by the application context; lives as long as the context does.
"""

import logging
from dataclasses import dataclass, field
from typing import Any


@dataclass
class SessionStore:
    token: str | None = None
    # Full payload returned by POST /register (agent, contract, faction, ship, token)
    registration: dict[str, Any] | None = None
    markets_by_waypoint: dict[str, dict[str, Any]] = field(default_factory=dict)
    jump_gates_by_waypoint: dict[str, dict[str, Any]] = field(default_factory=dict)

    def set_token(self, token: str) -> None:
        self.token = token
        self.registration = None

    def set_registration(self, payload: dict[str, Any]) -> None:
        self.registration = payload
        self.token = payload.get("token")

    def clear_credential(self) -> None:
        self.token = None
        self.registration = None

    # Market cache: only entries with transaction history count as complete
    def get_market(self, waypoint_symbol: str) -> dict[str, Any] | None:
        market = self.markets_by_waypoint.get(waypoint_symbol)
        if isinstance(market, dict) and market.get("transactions") is not None:
            return market
        return None

    def put_market(self, waypoint_symbol: str, market: dict[str, Any]) -> None:
        self.markets_by_waypoint[waypoint_symbol] = market
        logging.debug(f"Cached market for {waypoint_symbol} (transactions={market.get('transactions') is not None})")

    # Jump-gate cache: any stored entry counts
    def get_jump_gate(self, waypoint_symbol: str) -> dict[str, Any] | None:
        return self.jump_gates_by_waypoint.get(waypoint_symbol)

    def put_jump_gate(self, waypoint_symbol: str, jump_gate: dict[str, Any]) -> None:
        self.jump_gates_by_waypoint[waypoint_symbol] = jump_gate
        logging.debug(f"Cached jump gate for {waypoint_symbol}")

    def cache_summary(self) -> dict[str, list[str]]:
        return {
            "markets": sorted(self.markets_by_waypoint),
            "jumpGates": sorted(self.jump_gates_by_waypoint),
        }

    def reset(self) -> None:
        self.clear_credential()
        self.markets_by_waypoint.clear()
        self.jump_gates_by_waypoint.clear()

    def __str__(self):
        output = ""
        output += f"Token: {'set' if self.token else 'missing'}\n"
        output += f"Cached markets: {len(self.markets_by_waypoint)}\n"
        output += f"Cached jump gates: {len(self.jump_gates_by_waypoint)}\n"
        return output
