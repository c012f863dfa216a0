import argparse
import logging
import sys

from api.errors import SpaceTradersError
from app.bootstrap import build_app
from app.config import load_settings
from data.refs import WaypointRef


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Manually purchase a ship at a shipyard.")
    parser.add_argument(
        "-w",
        "--waypoint",
        default="X1-GZ7-H60",
        help="Waypoint symbol of the shipyard (e.g. X1-GZ7-H60)",
    )
    parser.add_argument(
        "-t",
        "--type",
        default="SHIP_MINING_DRONE",
        help="Ship type to purchase (e.g. SHIP_MINING_DRONE)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available ships at the shipyard before purchasing.",
    )
    args = parser.parse_args(argv)

    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s - %(levelname)s - %(message)s")
    if not settings.agent_token:
        print("Missing AGENT_TOKEN in environment.", file=sys.stderr)
        return 1

    ctx = build_app(settings)
    waypoint = WaypointRef.from_symbol(args.waypoint)

    try:
        if args.list:
            shipyard = ctx.root.waypoints.shipyard(waypoint)
            if shipyard is None:
                print(f"No shipyard at {waypoint.symbol}", file=sys.stderr)
                return 1
            ship_types = [st.get("type") for st in shipyard.get("shipTypes", [])]
            print(f"Shipyard {waypoint.symbol} available types: {', '.join([t for t in ship_types if t]) or 'unknown'}")

        purchase = ctx.root.ships.purchase(args.type, waypoint=waypoint)
    except SpaceTradersError as exc:
        print(f"Purchase failed ({exc.status}): {exc.message}", file=sys.stderr)
        return 1
    finally:
        ctx.close()

    ship = purchase.get("ship", {})
    transaction = purchase.get("transaction", {})
    print("Purchase successful.")
    print(f"  Ship: {ship.get('symbol', '?')}")
    if transaction.get("price") is not None:
        print(f"  Price: {transaction['price']}")
    credits = purchase.get("agent", {}).get("credits")
    if credits is not None:
        print(f"  Remaining Credits: {credits}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
