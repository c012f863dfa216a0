"""
Waypoint resolvers, including the conditional market / shipyard / jump-gate sub-resources.
Sub-resources answer None, without a request, when the waypoint's traits or type rule them out,
and turn a remote "not found" into None instead of an error.
"""

import logging
from typing import Any

from api.client import ApiClient
from api.errors import ApiError
from data.enums import PageKind, WaypointTraitType, WaypointType
from data.models.waypoints import Waypoints as WaypointView
from data.refs import Page, PageRef, SystemRef, WaypointRef
from data.store import SessionStore
from graph.factions import Factions
from graph.pagination import build_page

MARKET_NOT_FOUND = (404,)
SHIPYARD_NOT_FOUND = (404,)
# Older API revisions answer 400 for a waypoint without a jump gate
JUMP_GATE_NOT_FOUND = (400, 404)


def _system_symbol(system: str | SystemRef) -> str:
    return system.symbol if isinstance(system, SystemRef) else system


class Waypoints:
    def __init__(self, client: ApiClient, store: SessionStore, factions: Factions):
        self.client = client
        self.store = store
        self.factions = factions

    def one(self, ref: WaypointRef) -> dict:
        return self.client.waypoints.get(ref.system_symbol, ref.symbol)["data"]

    def page(self, system: str | SystemRef, page: int | None = None, limit: int | None = None) -> Page:
        system_symbol = _system_symbol(system)
        payload = self.client.waypoints.list(system_symbol, page=page, limit=limit)
        return build_page(payload, PageKind.WAYPOINTS, page, limit, parent=SystemRef(system_symbol))

    def resolve_page(self, ref: PageRef) -> Page:
        return self.page(ref.parent, page=ref.page, limit=ref.limit)

    def gref(self, obj: dict, system_symbol: str | None = None) -> WaypointRef:
        system_symbol = system_symbol or obj.get("systemSymbol")
        if not system_symbol:
            return WaypointRef.from_symbol(obj["symbol"])
        return WaypointRef(system_symbol=system_symbol, symbol=obj["symbol"])

    # Passthrough fields
    def orbitals(self, obj: dict) -> list:
        return obj.get("orbitals") or []

    def traits(self, obj: dict) -> list:
        return obj.get("traits") or []

    def chart(self, obj: dict) -> dict | None:
        return obj.get("chart")

    def faction(self, obj: dict) -> dict | None:
        faction = obj.get("faction")
        if not isinstance(faction, dict) or not faction.get("symbol"):
            return None
        return self.factions.one(faction["symbol"])

    # Conditional sub-resources
    def _fetch_optional(self, fetch, ref: WaypointRef, not_found: tuple[int, ...], what: str) -> dict[str, Any] | None:
        try:
            return fetch(ref.system_symbol, ref.symbol)["data"]
        except ApiError as e:
            if e.status in not_found:
                logging.debug(f"No {what} at {ref.symbol} ({e.status})")
                return None
            raise

    def shipyard(self, ref: WaypointRef, obj: dict | None = None) -> dict | None:
        if WaypointView.from_detail_dict(obj).lacks_trait(WaypointTraitType.SHIPYARD):
            return None
        return self._fetch_optional(self.client.waypoints.get_shipyard, ref, SHIPYARD_NOT_FOUND, "shipyard")

    def market(self, ref: WaypointRef, obj: dict | None = None) -> dict | None:
        cached = self.store.get_market(ref.symbol)
        if cached is not None:
            return cached
        if WaypointView.from_detail_dict(obj).lacks_trait(WaypointTraitType.MARKETPLACE):
            return None
        market = self._fetch_optional(self.client.waypoints.get_market, ref, MARKET_NOT_FOUND, "market")
        if market is not None:
            self.store.put_market(ref.symbol, market)
        return market

    def jump_gate(self, ref: WaypointRef, obj: dict | None = None) -> dict | None:
        cached = self.store.get_jump_gate(ref.symbol)
        if cached is not None:
            return cached
        if WaypointView.from_detail_dict(obj).cannot_be(WaypointType.JUMP_GATE):
            return None
        jump_gate = self._fetch_optional(self.client.waypoints.get_jump_gate, ref, JUMP_GATE_NOT_FOUND, "jump gate")
        if jump_gate is not None:
            self.store.put_jump_gate(ref.symbol, jump_gate)
        return jump_gate
