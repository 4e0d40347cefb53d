"""Route — one full 63-round spawn assignment per rotation offset."""

from collections.abc import Mapping
from dataclasses import dataclass
from functools import cache
from types import MappingProxyType

from fightcaves.entities import EntityKind, SpawnLocation
from fightcaves.generation.rotator import ROUTE_COUNT, LocationRotator
from fightcaves.generation.waves import ROUND_COUNT, check_round, compute

RoundSpawnMap = Mapping[SpawnLocation, EntityKind]
"""Locations that spawn on a round. Absent key means nothing spawns there."""


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route. Built once, never mutated.

    ``waves`` is stored 0-indexed; read it through ``spawns(round)``,
    which takes the 1-indexed round number.
    """

    index: int
    waves: tuple[RoundSpawnMap, ...]

    def spawns(self, round_: int) -> RoundSpawnMap:
        """Spawn map for a 1-indexed round."""
        check_round(round_)
        return self.waves[round_ - 1]


def build(route_index: int) -> Route:
    """Build the route that starts the rotation at ``route_index``.

    Each round pairs its kinds (highest first) with the rotator's window
    in order. The window length never exceeds the table, so rotation
    indices within a round are distinct. Table duplicates can still land
    two kinds on one location; the later (lower) kind then replaces the
    earlier one in the map.
    """
    rotator = LocationRotator(route_index)
    waves: list[RoundSpawnMap] = []
    for round_ in range(1, ROUND_COUNT + 1):
        kinds = compute(round_)
        locations = rotator.advance(len(kinds))
        spawns: dict[SpawnLocation, EntityKind] = {}
        for location, kind in zip(locations, kinds, strict=True):
            spawns[location] = kind
        waves.append(MappingProxyType(spawns))
    return Route(index=route_index, waves=tuple(waves))


def generate_all() -> tuple[Route, ...]:
    """Build every route, ordered by index."""
    return tuple(build(i) for i in range(ROUTE_COUNT))


@cache
def generate_all_routes() -> tuple[Route, ...]:
    """Process-wide cached ``generate_all()``."""
    return generate_all()
