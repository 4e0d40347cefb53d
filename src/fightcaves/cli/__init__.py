"""fightcaves CLI — inspect waves and routes, solve from observations.

Entry point registered as ``fightcaves`` in ``pyproject.toml``::

    [project.scripts]
    fightcaves = "fightcaves.cli:main"
"""

import argparse
import logging
import sys

from fightcaves.config import PredictorConfig


def configure_logging(config: PredictorConfig) -> None:
    """Route ``fightcaves.*`` loggers to stderr at ``config.log_level``."""
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("fightcaves").setLevel(config.log_level.upper())


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``fightcaves`` command."""
    parser = argparse.ArgumentParser(
        prog="fightcaves",
        description="fightcaves — predict Fight Caves spawns from partial observations.",
    )
    parser.add_argument(
        "--log-level",
        default=PredictorConfig().log_level,
        choices=["debug", "info", "warning", "error"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- fightcaves waves -------------------------------------------------
    waves_parser = subparsers.add_parser("waves", help="List the mobs of every round")
    waves_parser.add_argument("--round", type=int, default=None, help="Show a single round")

    # -- fightcaves route -------------------------------------------------
    route_parser = subparsers.add_parser("route", help="Show every spawn of one route")
    route_parser.add_argument("index", type=int, help="Route index (0-14)")
    route_parser.add_argument("--from", dest="start", type=int, default=1, help="First round to show")

    # -- fightcaves solve -------------------------------------------------
    solve_parser = subparsers.add_parser("solve", help="Narrow the routes from observations")
    solve_parser.add_argument(
        "observations",
        nargs="*",
        help="ROUND:LOCATION:KIND, where KIND is a mob name, a level, or 'empty'",
    )
    solve_parser.add_argument(
        "--state",
        default=None,
        help="JSON file to resume observations from and save them to",
    )

    args = parser.parse_args(argv)
    configure_logging(PredictorConfig(log_level=args.log_level))

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "waves":
        from fightcaves.cli._waves import run_waves

        run_waves(args)
    elif args.command == "route":
        from fightcaves.cli._route import run_route

        run_route(args)
    elif args.command == "solve":
        from fightcaves.cli._solve import run_solve

        run_solve(args)
