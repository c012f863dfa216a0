import logging
from typing import Iterable

from api.client import ApiClient
from data.enums import PageKind
from data.refs import Page, PageRef, SystemRef
from graph.inspector import needs_fetch
from graph.pagination import build_page

# Fields answerable from the reference alone
SYSTEM_IDENTIFYING_FIELDS = ("symbol",)


class Systems:
    def __init__(self, client: ApiClient):
        self.client = client

    def one(self, symbol: str | SystemRef, fields: Iterable[str] | None = None) -> dict:
        """
        Fetch a system, unless the selection only asks for its symbol.
        `fields` is the requested top-level selection; None means everything.
        """
        if isinstance(symbol, SystemRef):
            symbol = symbol.symbol
        if not needs_fetch(fields, SYSTEM_IDENTIFYING_FIELDS):
            logging.debug(f"System {symbol}: identifying fields only, skipping fetch")
            return {"symbol": symbol}
        return self.client.systems.get(symbol)["data"]

    def page(self, page: int | None = None, limit: int | None = None) -> Page:
        payload = self.client.systems.list(page=page, limit=limit)
        return build_page(payload, PageKind.SYSTEMS, page, limit)

    def resolve_page(self, ref: PageRef) -> Page:
        return self.page(page=ref.page, limit=ref.limit)

    def gref(self, obj: dict, system_symbol: str | None = None) -> SystemRef:
        return SystemRef(obj.get("symbol") or system_symbol)

    def waypoints(self, system: dict | SystemRef) -> SystemRef:
        """Parent reference for the system's waypoint collection."""
        if isinstance(system, SystemRef):
            return system
        return SystemRef(system["symbol"])
