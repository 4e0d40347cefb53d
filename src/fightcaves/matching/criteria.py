"""CriteriaStore — confirmed spawns and confirmed empty locations, per round.

``None`` is a real value here: it records that a location was seen to
stay empty. A location that was never looked at has no key at all.
"""

import logging

from fightcaves.entities import EntityKind, SpawnLocation
from fightcaves.generation.waves import check_round

logger = logging.getLogger("fightcaves.criteria")

RoundObservation = dict[SpawnLocation, EntityKind | None]
Criteria = dict[int, RoundObservation]


class CriteriaStore:
    """Observations keyed by round, grown one ``record`` at a time.

    Usage::

        store = CriteriaStore()
        store.record(12, SpawnLocation.SOUTH, EntityKind.TOK_XIL)
        store.record(12, SpawnLocation.CENTER, None)  # seen empty
        store.get(12)
    """

    __slots__ = ("_rounds",)

    def __init__(self, criteria: Criteria | None = None) -> None:
        self._rounds: Criteria = {}
        for round_, observation in (criteria or {}).items():
            for location, kind in observation.items():
                self.record(round_, location, kind)

    def record(self, round_: int, location: SpawnLocation, kind: EntityKind | None) -> bool:
        """Merge one observation. Returns ``True`` if the store changed.

        Recording the same value again is a no-op. A conflicting value
        replaces the old one and logs a warning; other entries are
        never touched.
        """
        check_round(round_)
        observation = self._rounds.setdefault(round_, {})
        if location in observation:
            previous = observation[location]
            if previous is kind:
                return False
            logger.warning(
                "Round %d %s: replacing %s with %s",
                round_,
                location.value,
                _describe(previous),
                _describe(kind),
            )
        observation[location] = kind
        return True

    def get(self, round_: int) -> RoundObservation:
        """Observations for ``round_`` (a copy; empty if unseen)."""
        return dict(self._rounds.get(round_, {}))

    def all(self) -> Criteria:
        """Snapshot of every observation, safe to mutate or serialize."""
        return {r: dict(obs) for r, obs in sorted(self._rounds.items()) if obs}

    def clear(self) -> None:
        self._rounds.clear()

    def __len__(self) -> int:
        return sum(len(obs) for obs in self._rounds.values())

    def __contains__(self, round_: object) -> bool:
        return bool(self._rounds.get(round_))  # type: ignore[call-overload]

    def __repr__(self) -> str:
        return f"<CriteriaStore rounds={len(self.all())} observations={len(self)}>"


def _describe(kind: EntityKind | None) -> str:
    return "nothing" if kind is None else kind.label
