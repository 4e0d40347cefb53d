"""FightSession — one play-session's criteria, round and solved route.

The session is the only thing that mutates during play. Routes are
shared and immutable; the criteria store belongs to exactly one session
and is cleared when it ends.

Usage::

    session = FightSession()
    session.start_round(1)
    session.record_sighting(1, SpawnLocation.SOUTH_EAST, level=22)
    session.record_empty(1, [SpawnLocation.CENTER, SpawnLocation.SOUTH])
    if session.is_solved:
        session.next_spawns()

Perception feeds it one observation at a time. After every new
observation the session re-filters its candidates and narrates when the
candidate count shrinks or the route is solved. Once solved, further
observations are ignored.
"""

import logging
from collections.abc import Callable, Iterable, Sequence

from fightcaves.config import PredictorConfig
from fightcaves.entities import EntityKind, SpawnLocation
from fightcaves.errors import UnknownEntityLevel
from fightcaves.generation.route import Route, RoundSpawnMap, generate_all_routes
from fightcaves.generation.waves import ROUND_COUNT, check_round
from fightcaves.matching.criteria import Criteria, CriteriaStore
from fightcaves.matching.matcher import Solved, SolveState, Unsolved, solve
from fightcaves.persistence import SavedSession, SessionStore

logger = logging.getLogger("fightcaves.session")

SOLVED_MESSAGE = "Solved! You will now be shown the spawns for the rest of the game!"


class FightSession:
    """Session context owning criteria, the current round and the solved route."""

    __slots__ = (
        "_config",
        "_criteria",
        "_current_round",
        "_last_count",
        "_notify",
        "_paused",
        "_routes",
        "_state",
        "_store",
    )

    def __init__(
        self,
        routes: Sequence[Route] | None = None,
        *,
        config: PredictorConfig | None = None,
        store: SessionStore | None = None,
        notify: Callable[[str], None] | None = None,
    ) -> None:
        self._config = config or PredictorConfig()
        self._routes = tuple(routes) if routes is not None else generate_all_routes()
        if store is None and self._config.state_path is not None:
            store = SessionStore(self._config.state_path)
        self._store = store
        self._notify = notify or logger.info
        self._criteria = CriteriaStore()
        self._current_round = 0
        self._paused = False
        self._last_count = len(self._routes)
        self._state: SolveState = Unsolved(self._routes)

    # -- State --

    @property
    def state(self) -> SolveState:
        return self._state

    @property
    def is_solved(self) -> bool:
        return isinstance(self._state, Solved)

    @property
    def route(self) -> Route | None:
        """The solved route, or ``None`` while unsolved."""
        if isinstance(self._state, Solved):
            return self._state.route
        return None

    @property
    def candidate_count(self) -> int:
        if isinstance(self._state, Solved):
            return 1
        return self._state.count

    @property
    def current_round(self) -> int:
        return self._current_round

    @property
    def criteria(self) -> Criteria:
        return self._criteria.all()

    # -- Events from perception --

    def start_round(self, round_: int) -> None:
        """A new round has begun."""
        check_round(round_)
        self._current_round = round_
        self._paused = False
        self._persist()

    def record_observation(
        self, round_: int, location: SpawnLocation, kind: EntityKind | None
    ) -> SolveState:
        """Record one observation and re-filter the candidates."""
        if self.is_solved:
            return self._state
        if not self._criteria.record(round_, location, kind):
            return self._state
        if kind is None:
            self._say(f"I can see that there is nothing in the {location.label}...")
        else:
            self._say(f"I saw a {kind.label} in the {location.label}...")
        self._persist()
        return self.solve()

    def record_sighting(self, round_: int, location: SpawnLocation, level: int) -> SolveState:
        """Record a spawn identified by its level.

        An unknown level is logged and dropped; earlier criteria stay intact.
        """
        try:
            kind = EntityKind.by_level(level)
        except UnknownEntityLevel:
            logger.warning("Discarding round %d sighting in %s: unknown level %d", round_, location.value, level)
            return self._state
        return self.record_observation(round_, location, kind)

    def record_empty(self, round_: int, visible: Iterable[SpawnLocation]) -> SolveState:
        """Mark visible locations with no recorded spawn this round as empty."""
        seen = self._criteria.get(round_)
        for location in visible:
            if location not in seen:
                self.record_observation(round_, location, None)
        return self._state

    def solve(self) -> SolveState:
        """Re-filter candidates against the criteria. No-op once solved."""
        if self.is_solved:
            return self._state
        self._state = solve(self._criteria.all(), self._routes)
        if isinstance(self._state, Solved):
            logger.debug("Solved as route %d", self._state.route.index)
            self._say(SOLVED_MESSAGE)
            self._persist()
        elif self._state.count < self._last_count:
            self._last_count = self._state.count
            self._say(f"Narrowed down to {self._state.count} possible spawn patterns, not long now...")
        return self._state

    # -- Predictions --

    def predict(self, round_: int) -> RoundSpawnMap | None:
        """Spawns on ``round_``, or ``None`` while unsolved."""
        route = self.route
        if route is None:
            return None
        return route.spawns(round_)

    def next_spawns(self) -> RoundSpawnMap | None:
        """Spawns on the round after the current one, once solved."""
        if 0 < self._current_round < ROUND_COUNT:
            return self.predict(self._current_round + 1)
        return None

    # -- Lifecycle --

    def pause(self) -> None:
        """The game was paused; resume will continue at the current round."""
        self._paused = True
        self._persist()

    def save(self) -> None:
        self._persist()

    def resume(self) -> SolveState:
        """Reload criteria and round from the attached store.

        A paused session resumes at its saved round. Otherwise the saved
        round was interrupted and has to be played again, so the session
        resumes one round earlier.
        """
        if self._store is None:
            return self._state
        saved = self._store.load()
        for round_, observation in saved.criteria.items():
            for location, kind in observation.items():
                self._criteria.record(round_, location, kind)
        if saved.last_known_round is not None:
            if saved.paused:
                self._current_round = saved.last_known_round
            else:
                self._current_round = saved.last_known_round - 1
            logger.debug(
                "Resuming at round %d (saved %d, paused=%s)",
                self._current_round,
                saved.last_known_round,
                saved.paused,
            )
        self._paused = False
        return self.solve()

    def end(self) -> None:
        """Tear the session down and forget its saved state."""
        self._criteria.clear()
        self._current_round = 0
        self._paused = False
        self._last_count = len(self._routes)
        self._state = Unsolved(self._routes)
        if self._store is not None:
            self._store.clear()

    # -- Internals --

    def _say(self, message: str) -> None:
        if self._config.narrate:
            self._notify(message)

    def _persist(self) -> None:
        if self._store is None:
            return
        self._store.save(
            SavedSession(
                criteria=self._criteria.all(),
                last_known_round=self._current_round or None,
                paused=self._paused,
            )
        )

    def __repr__(self) -> str:
        return f"<FightSession round={self._current_round} candidates={self.candidate_count}>"
