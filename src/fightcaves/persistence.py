"""Persistence — criteria as JSON, plus a small file-backed session store.

The wire form maps round numbers to location/kind names::

    {"12": {"SOUTH": "TOK_XIL", "CENTER": null}}

Nothing outside this module depends on that shape.
"""

import json
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from fightcaves.entities import EntityKind, SpawnLocation
from fightcaves.errors import CriteriaFormatError
from fightcaves.generation.waves import ROUND_COUNT
from fightcaves.matching.criteria import Criteria, RoundObservation


def dump_criteria(criteria: Criteria) -> str:
    """Serialize criteria to a JSON string."""
    payload = {
        str(round_): {
            location.name: None if kind is None else kind.name
            for location, kind in observation.items()
        }
        for round_, observation in sorted(criteria.items())
    }
    return json.dumps(payload, sort_keys=True)


def load_criteria(text: str) -> Criteria:
    """Parse criteria written by ``dump_criteria``.

    Raises ``CriteriaFormatError`` on anything structurally invalid.
    An empty string loads as empty criteria.
    """
    if not text.strip():
        return {}
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"Criteria are not valid JSON: {exc}"
        raise CriteriaFormatError(msg) from exc
    return _criteria_from_payload(payload)


def _criteria_from_payload(payload: Any) -> Criteria:
    if not isinstance(payload, dict):
        msg = f"Criteria must be a JSON object, got {type(payload).__name__}"
        raise CriteriaFormatError(msg)
    criteria: Criteria = {}
    for key, observation in payload.items():
        try:
            round_ = int(key)
        except ValueError:
            msg = f"Criteria key {key!r} is not a round number"
            raise CriteriaFormatError(msg) from None
        if not 1 <= round_ <= ROUND_COUNT:
            msg = f"Criteria round {round_} is outside 1..{ROUND_COUNT}"
            raise CriteriaFormatError(msg)
        if not isinstance(observation, dict):
            msg = f"Round {round_} observations must be an object"
            raise CriteriaFormatError(msg)
        criteria[round_] = _observation_from_payload(round_, observation)
    return criteria


def _observation_from_payload(round_: int, payload: dict[str, Any]) -> RoundObservation:
    observation: RoundObservation = {}
    for location_name, kind_name in payload.items():
        try:
            location = SpawnLocation[location_name]
            kind = None if kind_name is None else EntityKind[kind_name]
        except (KeyError, TypeError):
            msg = f"Round {round_}: unknown observation {location_name!r}: {kind_name!r}"
            raise CriteriaFormatError(msg) from None
        observation[location] = kind
    return observation


@dataclass(slots=True)
class SavedSession:
    """What a session leaves behind between restarts."""

    criteria: Criteria = field(default_factory=dict)
    last_known_round: int | None = None
    paused: bool = False


class SessionStore:
    """A single JSON file holding one ``SavedSession``.

    Usage::

        store = SessionStore(Path("fightcaves.json"))
        saved = store.load()
        store.save(SavedSession(criteria, last_known_round=12))
        store.clear()
    """

    __slots__ = ("_path",)

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> SavedSession:
        """Read the saved session; a missing file is an empty session."""
        if not self._path.is_file():
            return SavedSession()
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            msg = f"{self._path} is not valid JSON: {exc}"
            raise CriteriaFormatError(msg) from exc
        if not isinstance(payload, dict):
            msg = f"{self._path} must hold a JSON object"
            raise CriteriaFormatError(msg)
        last_known = payload.get("last_known_round")
        if last_known is not None and (type(last_known) is not int or not 1 <= last_known <= ROUND_COUNT):
            msg = f"last_known_round must be a round within 1..{ROUND_COUNT}, got {last_known!r}"
            raise CriteriaFormatError(msg)
        paused = payload.get("paused", False)
        if not isinstance(paused, bool):
            msg = f"paused must be true or false, got {paused!r}"
            raise CriteriaFormatError(msg)
        return SavedSession(
            criteria=_criteria_from_payload(payload.get("criteria", {})),
            last_known_round=last_known,
            paused=paused,
        )

    def save(self, saved: SavedSession) -> None:
        payload = {
            "criteria": json.loads(dump_criteria(saved.criteria)),
            "last_known_round": saved.last_known_round,
            "paused": saved.paused,
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        # Readers only ever see a complete file.
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(json.dumps(payload, indent=2, sort_keys=True))
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)
