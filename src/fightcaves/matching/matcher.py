"""RouteMatcher — filter generated routes against recorded criteria.

Any amount of criteria may be given. Knowing only that round 30 has a
ket-zek in the south is enough to test a route; so is knowing that the
center stays empty on round 4.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from fightcaves.entities import EntityKind, SpawnLocation
from fightcaves.generation.route import Route, RoundSpawnMap, generate_all_routes

logger = logging.getLogger("fightcaves.matcher")

CriteriaView = Mapping[int, Mapping[SpawnLocation, EntityKind | None]]


@dataclass(frozen=True, slots=True)
class Unsolved:
    """More than one route (or none) is consistent with the criteria."""

    candidates: tuple[Route, ...]

    @property
    def count(self) -> int:
        return len(self.candidates)


@dataclass(frozen=True, slots=True)
class Solved:
    """Exactly one route is consistent with the criteria."""

    route: Route


SolveState = Unsolved | Solved


def matches(route: Route, criteria: CriteriaView) -> bool:
    """Return ``True`` if ``route`` agrees with every observation.

    A recorded kind must appear at that location with exactly that kind.
    A recorded ``None`` fails if the route spawns anything there.
    """
    for round_, observation in criteria.items():
        spawns = route.spawns(round_)
        for location, expected in observation.items():
            if expected is None:
                if location in spawns:
                    return False
            elif spawns.get(location) is not expected:
                return False
    return True


def find_matching(routes: Iterable[Route], criteria: CriteriaView) -> list[Route]:
    """Routes consistent with ``criteria``, in their original order."""
    return [route for route in routes if matches(route, criteria)]


def solve(criteria: CriteriaView, routes: Iterable[Route] | None = None) -> SolveState:
    """Narrow ``routes`` (default: all generated routes) by ``criteria``."""
    if routes is None:
        routes = generate_all_routes()
    candidates = tuple(find_matching(routes, criteria))
    if len(candidates) == 1:
        return Solved(candidates[0])
    if not candidates:
        logger.warning("No route is consistent with the recorded criteria")
    return Unsolved(candidates)


def predict(route: Route, round_: int) -> RoundSpawnMap:
    """Spawns on ``round_`` for a solved route."""
    return route.spawns(round_)
