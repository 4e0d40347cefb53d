"""``fightcaves waves`` — list the mobs spawned on each round."""

import argparse
import sys

from fightcaves.cli._render import render_waves
from fightcaves.generation.waves import ROUND_COUNT, check_round, compute


def run_waves(args: argparse.Namespace) -> None:
    if args.round is not None:
        try:
            check_round(args.round)
        except ValueError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            raise SystemExit(1) from exc
        rounds = [args.round]
    else:
        rounds = list(range(1, ROUND_COUNT + 1))
    print(render_waves((r, compute(r)) for r in rounds), end="")
