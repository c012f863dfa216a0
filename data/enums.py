from enum import Enum


class ShipNavFlightMode(Enum):
    CRUISE = "CRUISE"
    BURN = "BURN"
    DRIFT = "DRIFT"
    STEALTH = "STEALTH"


class ShipNavStatus(Enum):
    IN_TRANSIT = "IN_TRANSIT"
    IN_ORBIT = "IN_ORBIT"
    DOCKED = "DOCKED"


class WaypointTraitType(Enum):
    MARKETPLACE = "MARKETPLACE"
    SHIPYARD = "SHIPYARD"


class WaypointType(Enum):
    JUMP_GATE = "JUMP_GATE"


class PageKind(Enum):
    FACTIONS = "factions"
    CONTRACTS = "contracts"
    SHIPS = "ships"
    SYSTEMS = "systems"
    WAYPOINTS = "waypoints"
