"""
API Client module providing centralized access to SpaceTraders API endpoints.
Orchestrates sub-API modules for agent, factions, contracts, systems, waypoints, and fleet operations.
"""

import time
from typing import Callable

import requests

from api.agent import AgentAPI
from api.contracts import ContractsAPI
from api.factions import FactionsAPI
from api.fleet import FleetAPI
from api.handle_requests import DEFAULT_API_URL, MAX_RETRIES, RequestHandler
from api.systems import SystemsAPI
from api.waypoints import WaypointsAPI
from data.store import SessionStore


class ApiClient:
    """Root client that centralizes sub-APIs and holds shared HTTP/session state."""

    def __init__(
        self,
        store: SessionStore,
        api_url: str = DEFAULT_API_URL,
        *,
        session: requests.Session | None = None,
        sleep: Callable[[float], None] = time.sleep,
        max_retries: int = MAX_RETRIES,
    ):
        self.store = store
        self.http = RequestHandler(store, api_url, session=session, sleep=sleep, max_retries=max_retries)
        self.agent = AgentAPI(self)
        self.factions = FactionsAPI(self)
        self.contracts = ContractsAPI(self)
        self.systems = SystemsAPI(self)
        self.waypoints = WaypointsAPI(self)
        self.fleet = FleetAPI(self)

    def server_status(self) -> dict:
        """Fetch server status (GET /)."""
        return self.http.get_json("")
