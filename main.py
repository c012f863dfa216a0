import argparse
import json
import logging
import sys

from api.errors import SpaceTradersError
from app.bootstrap import AppContext, build_app, configure
from app.config import load_settings
from data.refs import WaypointRef
from flow.events import ARRIVED
from graph.inspector import selected_fields


def _print(obj) -> None:
    print(json.dumps(obj, indent=2, default=str))


def _waypoint_ref(ctx: AppContext, text: str) -> WaypointRef:
    refs = ctx.root.parse("waypoint", text)
    if not refs:
        raise SystemExit(f"Not a waypoint symbol: {text}")
    return refs[0]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse and drive a SpaceTraders agent.")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_reg = sub.add_parser("register", help="Register a new agent and print its token")
    p_reg.add_argument("--symbol", required=True, help="Agent callsign")
    p_reg.add_argument("--faction", required=True, help="Starting faction, e.g. COSMIC")
    p_reg.add_argument("--email", default=None)

    sub.add_parser("status", help="Agent symbol and credits")
    sub.add_parser("server-status", help="Server status and reset info")
    sub.add_parser("smoke", help="Run live read-path checks")

    p_sys = sub.add_parser("system", help="Show a system")
    p_sys.add_argument("symbol")
    p_sys.add_argument("--select", default=None, help='Field selection, e.g. "{ symbol }"')

    p_wp = sub.add_parser("waypoint", help="Show a waypoint with its market/shipyard/jump gate")
    p_wp.add_argument("symbol")

    p_ships = sub.add_parser("ships", help="List ships")
    p_ships.add_argument("--page", type=int, default=None)
    p_ships.add_argument("--limit", type=int, default=None)
    p_ships.add_argument("--all", action="store_true", help="Follow next pages")

    p_nav = sub.add_parser("navigate", help="Navigate a ship to a waypoint")
    p_nav.add_argument("ship")
    p_nav.add_argument("waypoint")
    p_nav.add_argument("--mode", default=None, help="CRUISE, BURN, DRIFT or STEALTH")
    p_nav.add_argument("--wait", action="store_true", help="Block until arrival")
    return parser


def run(ctx: AppContext, args: argparse.Namespace) -> int:
    root = ctx.root
    if args.cmd == "register":
        configure(ctx, symbol=args.symbol, faction=args.faction, email=args.email)
        print(ctx.store.token)
    elif args.cmd == "status":
        print(root.status())
    elif args.cmd == "server-status":
        _print(root.server_status())
    elif args.cmd == "smoke":
        results = root.smoke_tests()
        _print(results)
        return 0 if all(results.values()) else 1
    elif args.cmd == "system":
        fields = selected_fields(args.select) if args.select else None
        _print(root.systems.one(args.symbol, fields))
    elif args.cmd == "waypoint":
        ref = _waypoint_ref(ctx, args.symbol)
        wp = root.waypoints.one(ref)
        _print(
            {
                "waypoint": wp,
                "market": root.waypoints.market(ref, wp),
                "shipyard": root.waypoints.shipyard(ref, wp),
                "jumpGate": root.waypoints.jump_gate(ref, wp),
            }
        )
    elif args.cmd == "ships":
        page = root.ships.page(page=args.page, limit=args.limit)
        items = list(page.items)
        while args.all and page.next is not None:
            page = root.page(page.next)
            items.extend(page.items)
        for ship in items:
            print(f"{ship['symbol']}: {root.ships.status(ship)}")
    elif args.cmd == "navigate":
        if args.mode:
            root.ships.set_flight_mode(args.ship, args.mode)
        root.ships.orbit(args.ship)
        result = root.ships.navigate(args.ship, waypoint=_waypoint_ref(ctx, args.waypoint))
        _print(result.get("nav"))
        if args.wait:
            ctx.notifier.subscribe(ARRIVED, lambda ship, wp: logging.info(f"{ship} arrived at {wp}"))
            ctx.scheduler.run_until_idle()
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s - %(levelname)s - %(message)s")

    if args.cmd != "register" and not settings.agent_token:
        logging.error("Error: AGENT_TOKEN not found in environment.")
        logging.error("Please set AGENT_TOKEN in your .env file or environment.")
        return 1

    ctx = build_app(settings)
    try:
        return run(ctx, args)
    except SpaceTradersError as e:
        logging.error(f"{e.kind.value}: {e}")
        return 1
    finally:
        ctx.close()


if __name__ == "__main__":
    sys.exit(main())
