"""``fightcaves solve`` — narrow the routes from command-line observations.

Each observation is ``ROUND:LOCATION:KIND``::

    fightcaves solve 1:north_west:tz_kih 3:south_east:45 7:center:empty

KIND is an entity name, a level, or ``empty``. With ``--state`` the
observations are merged into (and saved back to) a JSON session file.
Once solved, the remaining rounds are printed.
"""

import argparse
import sys

from fightcaves.cli._render import render_route, render_state
from fightcaves.config import PredictorConfig
from fightcaves.entities import EntityKind, SpawnLocation
from fightcaves.errors import FightCavesError
from fightcaves.generation.waves import ROUND_COUNT
from fightcaves.session import FightSession

Observation = tuple[int, SpawnLocation, EntityKind | int | None]


def parse_observation(text: str) -> Observation:
    """Parse ``ROUND:LOCATION:KIND``. Raises ``ValueError`` on bad input."""
    parts = text.split(":")
    if len(parts) != 3:
        msg = f"Expected ROUND:LOCATION:KIND, got {text!r}"
        raise ValueError(msg)
    round_text, location_text, kind_text = (p.strip().lower().replace("-", "_") for p in parts)
    try:
        round_ = int(round_text)
    except ValueError:
        msg = f"Round {round_text!r} is not a number"
        raise ValueError(msg) from None
    try:
        location = SpawnLocation(location_text)
    except ValueError:
        names = ", ".join(loc.value for loc in SpawnLocation)
        msg = f"Unknown location {location_text!r} (expected one of: {names})"
        raise ValueError(msg) from None
    if kind_text == "empty":
        return round_, location, None
    if kind_text.isdigit():
        return round_, location, int(kind_text)
    try:
        return round_, location, EntityKind[kind_text.upper()]
    except KeyError:
        msg = f"Unknown mob {kind_text!r}"
        raise ValueError(msg) from None


def run_solve(args: argparse.Namespace) -> None:
    try:
        observations = [parse_observation(text) for text in args.observations]
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    session = FightSession(config=PredictorConfig(state_path=args.state), notify=print)
    try:
        session.resume()
        for round_, location, kind in observations:
            if isinstance(kind, int):
                session.record_sighting(round_, location, kind)
            else:
                session.record_observation(round_, location, kind)
    except (FightCavesError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    route = session.route
    if route is None:
        candidates = [r.index for r in session.state.candidates]  # type: ignore[union-attr]
        print(render_state(solved=False, candidates=candidates), end="")
        return

    print(render_state(solved=True, index=route.index), end="")
    observed = max(session.criteria, default=0)
    if observed < ROUND_COUNT:
        print(render_route(route, start=observed + 1), end="")
