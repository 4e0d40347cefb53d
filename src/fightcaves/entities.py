"""Entity kinds and spawn locations.

Both are closed enumerations. ``EntityKind`` members are declared in
descending ``first_appearance`` order; wave composition depends on that
order, so it is checked at import.
"""

from enum import Enum

from fightcaves.errors import ConfigurationError, UnknownEntityLevel


class EntityKind(Enum):
    """A spawnable mob, with the round it first appears on and its level."""

    TZTOK_JAD = (63, 702)
    KET_ZEK = (31, 360)
    YT_MEJKOT = (15, 180)
    TOK_XIL = (7, 90)
    TZ_KEK = (3, 45)
    TZ_KIH = (1, 22)

    def __init__(self, first_appearance: int, level: int) -> None:
        self.first_appearance = first_appearance
        self.level = level

    @classmethod
    def descending(cls) -> tuple["EntityKind", ...]:
        """All kinds, highest threshold first."""
        return _DESCENDING

    @classmethod
    def by_level(cls, level: int) -> "EntityKind":
        """Find a kind by its level.

        Raises ``UnknownEntityLevel`` if no kind matches.
        """
        for kind in _DESCENDING:
            if kind.level == level:
                return kind
        raise UnknownEntityLevel(level)

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")


class SpawnLocation(Enum):
    """A named spawn position. Geometry lives with the caller."""

    SOUTH_EAST = "south_east"
    SOUTH_WEST = "south_west"
    CENTER = "center"
    NORTH_WEST = "north_west"
    SOUTH = "south"

    @property
    def label(self) -> str:
        return self.value.replace("_", "-")


_DESCENDING: tuple[EntityKind, ...] = tuple(EntityKind)


def _check_thresholds(kinds: tuple[EntityKind, ...]) -> None:
    thresholds = [k.first_appearance for k in kinds]
    if thresholds != sorted(set(thresholds), reverse=True):
        msg = f"Entity thresholds must be distinct and descending, got {thresholds}"
        raise ConfigurationError(msg)
    if thresholds[-1] != 1:
        msg = f"Smallest entity threshold must be 1, got {thresholds[-1]}"
        raise ConfigurationError(msg)
    levels = [k.level for k in kinds]
    if len(set(levels)) != len(levels):
        msg = f"Entity levels must be distinct, got {levels}"
        raise ConfigurationError(msg)


_check_thresholds(_DESCENDING)
