"""Cyclic spawn-location rotation.

Every route walks the same 15-entry table. The cursor moves one step per
round no matter how many mobs the round spawns, so consecutive rounds
share most of their window.
"""

from fightcaves.entities import SpawnLocation
from fightcaves.errors import ConfigurationError, InvariantViolation

_SE = SpawnLocation.SOUTH_EAST
_SW = SpawnLocation.SOUTH_WEST
_C = SpawnLocation.CENTER
_NW = SpawnLocation.NORTH_WEST
_S = SpawnLocation.SOUTH

ROTATION_TABLE: tuple[SpawnLocation, ...] = (
    _SE, _SW, _C, _NW, _SW,
    _SE, _S, _NW, _C, _SE,
    _SW, _S, _NW, _C, _S,
)  # fmt: skip

ROUTE_COUNT = len(ROTATION_TABLE)

if ROUTE_COUNT != 15 or not set(ROTATION_TABLE) <= set(SpawnLocation):
    msg = f"Rotation table must hold 15 spawn locations, got {ROUTE_COUNT}"
    raise ConfigurationError(msg)


def location_at(index: int) -> SpawnLocation:
    """Table entry at ``index``, wrapping past the end."""
    return ROTATION_TABLE[index % ROUTE_COUNT]


class LocationRotator:
    """Hands out one window of spawn locations per round.

    Usage::

        rotator = LocationRotator(0)
        rotator.advance(1)  # [SOUTH_EAST], cursor -> 1
        rotator.advance(2)  # [SOUTH_WEST, CENTER], cursor -> 2
    """

    __slots__ = ("_cursor",)

    def __init__(self, offset: int) -> None:
        if not 0 <= offset < ROUTE_COUNT:
            msg = f"Rotation offset must be within 0..{ROUTE_COUNT - 1}, got {offset}"
            raise ValueError(msg)
        self._cursor = offset

    @property
    def cursor(self) -> int:
        return self._cursor

    def advance(self, count: int) -> list[SpawnLocation]:
        """Return ``count`` consecutive locations from the cursor, then step once.

        A window never exceeds the table, so its indices are distinct
        modulo ``ROUTE_COUNT``. The locations themselves may repeat since
        the table does.
        """
        if count > ROUTE_COUNT:
            msg = f"Window of {count} would repeat a rotation index (table size {ROUTE_COUNT})"
            raise InvariantViolation(msg)
        start = self._cursor
        self._cursor += 1
        return [location_at(i) for i in range(start, start + count)]
