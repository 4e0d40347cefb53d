"""Predictor configuration.

PredictorConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class PredictorConfig:
    """Session configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = PredictorConfig(state_path="~/.fightcaves.json", narrate=False)
    """

    # Persistence: JSON file holding criteria and the last known round
    state_path: str | Path | None = None

    # Narration of sightings, narrowing and solving
    narrate: bool = True

    # Logging (CLI only)
    log_level: str = "warning"
