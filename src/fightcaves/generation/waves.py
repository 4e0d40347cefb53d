"""Wave composition: which entity kinds spawn on a given round."""

from functools import cache

from fightcaves.entities import EntityKind
from fightcaves.errors import InvariantViolation

ROUND_COUNT = 63


def check_round(round_: int) -> None:
    """Raise ``ValueError`` unless ``round_`` is within 1..ROUND_COUNT."""
    if not 1 <= round_ <= ROUND_COUNT:
        msg = f"Round must be within 1..{ROUND_COUNT}, got {round_}"
        raise ValueError(msg)


@cache
def compute(round_: int) -> tuple[EntityKind, ...]:
    """Return the kinds spawned on ``round_``, highest threshold first.

    Repeatedly takes the kind with the largest first-appearance
    threshold that still fits in the remainder::

        compute(22) == (EntityKind.YT_MEJKOT, EntityKind.TOK_XIL)  # 15 + 7

    The thresholds always sum to ``round_``.
    """
    check_round(round_)
    remainder = round_
    kinds: list[EntityKind] = []
    while remainder > 0:
        kind = next((k for k in EntityKind.descending() if k.first_appearance <= remainder), None)
        if kind is None:
            msg = f"No entity kind fits remainder {remainder} of round {round_}"
            raise InvariantViolation(msg)
        kinds.append(kind)
        remainder -= kind.first_appearance
    return tuple(kinds)
