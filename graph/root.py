"""
Root of the resource graph: agent-level fields, free-text parsing, and the resolvers for every
collection. `page()` re-invokes a deferred PageRef on the collection it belongs to.
"""

import logging
from typing import Callable

import requests

from api.client import ApiClient
from api.errors import SpaceTradersError
from data.enums import PageKind
from data.refs import Page, PageRef, ResourceRef
from data.store import SessionStore
from flow.events import Notifier
from flow.scheduler import ArrivalScheduler
from graph import parser
from graph.contracts import Contracts
from graph.factions import Factions
from graph.ships import Ships
from graph.systems import Systems
from graph.waypoints import Waypoints


class Root:
    def __init__(self, client: ApiClient, store: SessionStore, scheduler: ArrivalScheduler, notifier: Notifier):
        self.client = client
        self.store = store
        self.factions = Factions(client)
        self.contracts = Contracts(client)
        self.ships = Ships(client, scheduler, notifier)
        self.systems = Systems(client)
        self.waypoints = Waypoints(client, store, self.factions)
        self._pages: dict[PageKind, Callable[[PageRef], Page]] = {
            PageKind.FACTIONS: self.factions.resolve_page,
            PageKind.CONTRACTS: self.contracts.resolve_page,
            PageKind.SHIPS: self.ships.resolve_page,
            PageKind.SYSTEMS: self.systems.resolve_page,
            PageKind.WAYPOINTS: self.waypoints.resolve_page,
        }

    def parse(self, name: str, value: str) -> list[ResourceRef]:
        return parser.parse(name, value)

    def status(self) -> str:
        agent = self.client.agent.get().get("data")
        return f"{agent['symbol']}: {agent['credits']}" if agent else "Not ready"

    def server_status(self) -> dict:
        return self.client.server_status()

    def agent(self) -> dict:
        return self.client.agent.get()["data"]

    def events(self) -> list:
        return self.client.agent.events()["data"]

    def page(self, ref: PageRef) -> Page:
        return self._pages[ref.kind](ref)

    def smoke_tests(self) -> dict[str, bool]:
        """Cheap live checks of the main read paths; each maps to pass/fail."""
        checks: dict[str, Callable[[], bool]] = {
            "getFactions": lambda: isinstance(self.factions.page().items, list),
            "getAgent": lambda: isinstance((self.agent() or {}).get("credits"), int),
            "getEvents": lambda: isinstance(self.events(), list),
            "getContracts": lambda: isinstance(self.contracts.page().items, list),
            "getShips": lambda: isinstance(self.ships.page().items, list),
            "getSystems": lambda: isinstance(self.systems.page().items, list),
            "serverStatus": lambda: isinstance((self.server_status() or {}).get("status"), str),
        }
        results: dict[str, bool] = {}
        for name, check in checks.items():
            try:
                results[name] = check()
            except (SpaceTradersError, requests.RequestException) as e:
                logging.error(f"Smoke test {name} failed: {e}")
                results[name] = False
        return results
