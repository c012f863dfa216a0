"""
Ship resolvers: fleet pages, derived navigation fields, and every ship action.
Each action issues exactly one API call and returns the response `data`.
"""

import json
import logging
from typing import Any

from api.client import ApiClient
from api.errors import InvalidArgumentError
from data.enums import PageKind, ShipNavFlightMode
from data.models.ship import ShipNav
from data.refs import Page, PageRef, ShipRef, SystemRef, WaypointRef
from flow.events import ARRIVED, Notifier
from flow.scheduler import ArrivalScheduler, ScheduledTask, parse_arrival
from graph.pagination import build_page


def _ship_symbol(ship: str | ShipRef) -> str:
    return ship.symbol if isinstance(ship, ShipRef) else ship


def _exclusive_waypoint(waypoint: WaypointRef | None, waypoint_symbol: str | None) -> str | None:
    if waypoint is not None and waypoint_symbol is not None:
        raise InvalidArgumentError("Please provide waypoint or waypointSymbol but not both.")
    if waypoint is not None:
        return waypoint.symbol
    return waypoint_symbol


def parse_flight_mode(mode: str | ShipNavFlightMode) -> ShipNavFlightMode:
    if isinstance(mode, ShipNavFlightMode):
        return mode
    try:
        return ShipNavFlightMode(mode)
    except ValueError:
        raise InvalidArgumentError(
            "Invalid flight mode. Only CRUISE, BURN, DRIFT, STEALTH are available."
        ) from None


def parse_survey(survey: str | dict | None) -> dict | None:
    """Surveys are passed through opaquely; JSON text is decoded first."""
    if survey is None or isinstance(survey, dict):
        return survey
    try:
        decoded = json.loads(survey)
    except json.JSONDecodeError as e:
        raise InvalidArgumentError(f"Survey is not valid JSON: {e}") from e
    if not isinstance(decoded, dict):
        raise InvalidArgumentError("Survey must be a JSON object")
    return decoded


class Ships:
    def __init__(self, client: ApiClient, scheduler: ArrivalScheduler, notifier: Notifier):
        self.client = client
        self.scheduler = scheduler
        self.notifier = notifier

    # Collection
    def one(self, ship: str | ShipRef) -> dict:
        return self.client.fleet.get_ship(_ship_symbol(ship))["data"]

    def page(self, page: int | None = None, limit: int | None = None) -> Page:
        payload = self.client.fleet.get_my_ships(page=page, limit=limit)
        return build_page(payload, PageKind.SHIPS, page, limit)

    def resolve_page(self, ref: PageRef) -> Page:
        return self.page(page=ref.page, limit=ref.limit)

    def purchase(self, ship_type: str, waypoint: WaypointRef | None = None, waypoint_symbol: str | None = None) -> dict:
        waypoint_symbol = _exclusive_waypoint(waypoint, waypoint_symbol)
        logging.info(f"Purchasing {ship_type} at {waypoint_symbol}")
        return self.client.fleet.purchase_ship(ship_type, waypoint_symbol)["data"]

    # Derived fields (no network)
    def gref(self, obj: dict) -> ShipRef:
        return ShipRef(obj["symbol"])

    def status(self, obj: dict) -> str:
        return ShipNav.from_dict(obj.get("nav")).describe()

    def system(self, obj: dict) -> SystemRef:
        return SystemRef(obj["nav"]["systemSymbol"])

    def waypoint(self, obj: dict) -> WaypointRef:
        nav = obj["nav"]
        return WaypointRef(system_symbol=nav["systemSymbol"], symbol=nav["waypointSymbol"])

    def cooldown(self, ship: str | ShipRef) -> int:
        res = self.client.fleet.get_cooldown(_ship_symbol(ship))
        data = res.get("data") if isinstance(res, dict) else None
        return (data or {}).get("remainingSeconds") or 0

    # Actions
    def orbit(self, ship: str | ShipRef) -> dict:
        return self.client.fleet.orbit_ship(_ship_symbol(ship))["data"]

    def dock(self, ship: str | ShipRef) -> dict:
        return self.client.fleet.dock_ship(_ship_symbol(ship))["data"]

    def negotiate_contract(self, ship: str | ShipRef) -> dict:
        return self.client.fleet.negotiate_contract(_ship_symbol(ship))["data"]

    def refuel(self, ship: str | ShipRef, units: int | None = None, from_cargo: bool | None = None) -> dict:
        return self.client.fleet.refuel_ship(_ship_symbol(ship), units=units, from_cargo=from_cargo)["data"]

    def refine(self, ship: str | ShipRef, produce: str) -> dict:
        return self.client.fleet.refine(_ship_symbol(ship), produce)["data"]

    def scan_ships(self, ship: str | ShipRef) -> dict:
        return self.client.fleet.scan_ships(_ship_symbol(ship))["data"]

    def scan_systems(self, ship: str | ShipRef) -> dict:
        return self.client.fleet.scan_systems(_ship_symbol(ship))["data"]

    def scan_waypoints(self, ship: str | ShipRef) -> dict:
        return self.client.fleet.scan_waypoints(_ship_symbol(ship))["data"]

    def chart(self, ship: str | ShipRef) -> dict:
        return self.client.fleet.chart(_ship_symbol(ship))["data"]

    def survey(self, ship: str | ShipRef) -> dict:
        return self.client.fleet.survey(_ship_symbol(ship))["data"]

    def extract(self, ship: str | ShipRef, survey: str | dict | None = None) -> dict:
        survey_obj = parse_survey(survey)
        return self.client.fleet.extract(_ship_symbol(ship), survey=survey_obj)["data"]

    def purchase_cargo(self, ship: str | ShipRef, symbol: str, units: int) -> dict:
        return self.client.fleet.purchase_cargo(_ship_symbol(ship), symbol, units)["data"]

    def transfer_cargo(self, ship: str | ShipRef, trade_symbol: str, units: int, ship_symbol: str) -> dict:
        return self.client.fleet.transfer_cargo(_ship_symbol(ship), trade_symbol, units, ship_symbol)["data"]

    def jettison(self, ship: str | ShipRef, symbol: str, units: int) -> dict:
        return self.client.fleet.jettison(_ship_symbol(ship), symbol, units)["data"]

    def install_mount(self, ship: str | ShipRef, symbol: str) -> dict:
        return self.client.fleet.install_mount(_ship_symbol(ship), symbol)["data"]

    def sell(self, ship: str | ShipRef, symbol: str, units: int) -> dict:
        return self.client.fleet.sell(_ship_symbol(ship), symbol, units)["data"]

    def set_flight_mode(self, ship: str | ShipRef, mode: str | ShipNavFlightMode) -> dict:
        flight_mode = parse_flight_mode(mode)
        return self.client.fleet.set_flight_mode(_ship_symbol(ship), flight_mode)["data"]

    def warp(self, ship: str | ShipRef, waypoint_symbol: str | WaypointRef) -> dict:
        if isinstance(waypoint_symbol, WaypointRef):
            waypoint_symbol = waypoint_symbol.symbol
        return self.client.fleet.warp_ship(_ship_symbol(ship), waypoint_symbol)["data"]

    def jump(self, ship: str | ShipRef, system_symbol: str | SystemRef) -> dict:
        if isinstance(system_symbol, SystemRef):
            system_symbol = system_symbol.symbol
        return self.client.fleet.jump_ship(_ship_symbol(ship), system_symbol)["data"]

    def navigate(self, ship: str | ShipRef, waypoint: WaypointRef | None = None, waypoint_symbol: str | None = None) -> dict:
        """
        Navigate within the current system. When the response carries an arrival time,
        a one-shot task is scheduled to emit `arrived` then; navigating the same ship again
        replaces the pending task.
        """
        waypoint_symbol = _exclusive_waypoint(waypoint, waypoint_symbol)
        symbol = _ship_symbol(ship)
        res = self.client.fleet.navigate_ship(symbol, waypoint_symbol)
        data = res.get("data") or {}
        arrival = ((data.get("nav") or {}).get("route") or {}).get("arrival")
        if arrival:
            self.schedule_arrival(symbol, waypoint_symbol, arrival)
        return data

    def schedule_arrival(self, ship_symbol: str, waypoint_symbol: str, arrival: str) -> ScheduledTask:
        fire_at = parse_arrival(arrival)
        logging.info(f"{ship_symbol} navigating to {waypoint_symbol}, arrival at {fire_at.isoformat()}")
        return self.scheduler.schedule(
            f"arrival:{ship_symbol}",
            fire_at,
            lambda: self.handle_arrival(ship_symbol, waypoint_symbol),
        )

    def handle_arrival(self, ship_symbol: str, waypoint_symbol: str) -> Any:
        return self.notifier.emit(ARRIVED, ship_symbol, waypoint_symbol)
