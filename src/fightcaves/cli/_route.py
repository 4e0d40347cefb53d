"""``fightcaves route`` — print every spawn of one route."""

import argparse
import sys

from fightcaves.cli._render import render_route
from fightcaves.generation.rotator import ROUTE_COUNT
from fightcaves.generation.route import generate_all_routes
from fightcaves.generation.waves import check_round


def run_route(args: argparse.Namespace) -> None:
    if not 0 <= args.index < ROUTE_COUNT:
        print(f"Error: route index must be within 0..{ROUTE_COUNT - 1}", file=sys.stderr)
        raise SystemExit(1)
    try:
        check_round(args.start)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    route = generate_all_routes()[args.index]
    print(render_route(route, start=args.start), end="")
