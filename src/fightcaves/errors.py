"""fightcaves exception hierarchy.

Shared across generation, matching, persistence and the session so every
module raises and catches the same types.
"""


class FightCavesError(Exception):
    """Base for all fightcaves-specific errors."""


class ConfigurationError(FightCavesError):
    """Raised when the threshold set or rotation table is malformed.

    Checked once at import time; unreachable with the shipped constants.
    """


class InvariantViolation(FightCavesError):  # noqa: N818
    """A wave decomposition or rotation window broke its invariant."""


class UnknownEntityLevel(FightCavesError, LookupError):  # noqa: N818
    """No EntityKind carries the requested level.

    Indicates a defect in whatever mapped the observed level; the
    observation is discarded, never recorded.
    """

    def __init__(self, level: int) -> None:
        super().__init__(f"No entity kind has level {level}")
        self.level = level


class CriteriaFormatError(FightCavesError, ValueError):
    """Serialized criteria are not structurally valid."""
