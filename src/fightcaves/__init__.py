"""fightcaves — predict Fight Caves spawns from a handful of observations.

Every run follows one of 15 fixed routes through 63 rounds. Record what
you see; once only one route fits, every remaining round is known.

Basic usage::

    from fightcaves import EntityKind, FightSession, SpawnLocation

    session = FightSession()
    session.record_observation(1, SpawnLocation.NORTH_WEST, EntityKind.TZ_KIH)
    session.record_observation(3, SpawnLocation.SOUTH_EAST, EntityKind.TZ_KEK)
    ...
    if session.is_solved:
        session.predict(42)

Lower level::

    from fightcaves import find_matching, generate_all_routes

    routes = generate_all_routes()
    candidates = find_matching(routes, {1: {SpawnLocation.SOUTH: None}})
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "CriteriaFormatError",
    "CriteriaStore",
    "EntityKind",
    "FightCavesError",
    "FightSession",
    "InvariantViolation",
    "LocationRotator",
    "PredictorConfig",
    "Route",
    "SessionStore",
    "Solved",
    "SpawnLocation",
    "UnknownEntityLevel",
    "Unsolved",
    "compute",
    "dump_criteria",
    "find_matching",
    "generate_all_routes",
    "load_criteria",
    "matches",
    "predict",
    "solve",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import fightcaves`` fast while providing a clean top-level API.
    """
    if name in ("EntityKind", "SpawnLocation"):
        from fightcaves import entities as _entities

        return getattr(_entities, name)

    if name == "compute":
        from fightcaves.generation.waves import compute

        return compute

    if name == "LocationRotator":
        from fightcaves.generation.rotator import LocationRotator

        return LocationRotator

    if name in ("Route", "generate_all_routes"):
        from fightcaves.generation import route as _route

        return getattr(_route, name)

    if name == "CriteriaStore":
        from fightcaves.matching.criteria import CriteriaStore

        return CriteriaStore

    if name in ("Solved", "Unsolved", "find_matching", "matches", "predict", "solve"):
        from fightcaves.matching import matcher as _matcher

        return getattr(_matcher, name)

    if name in ("SessionStore", "dump_criteria", "load_criteria"):
        from fightcaves import persistence as _persistence

        return getattr(_persistence, name)

    if name == "FightSession":
        from fightcaves.session import FightSession

        return FightSession

    if name == "PredictorConfig":
        from fightcaves.config import PredictorConfig

        return PredictorConfig

    if name in (
        "ConfigurationError",
        "CriteriaFormatError",
        "FightCavesError",
        "InvariantViolation",
        "UnknownEntityLevel",
    ):
        from fightcaves import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
