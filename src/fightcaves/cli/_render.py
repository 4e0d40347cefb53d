"""Plain-text rendering of waves and routes with kida templates."""

from collections.abc import Iterable

from kida import Environment

from fightcaves.entities import EntityKind
from fightcaves.generation.route import Route, RoundSpawnMap

WAVES_TEMPLATE = """\
{% for line in lines %}
{{ line }}
{% end %}
"""

ROUTE_TEMPLATE = """\
Route {{ index }}
{% for line in lines %}
{{ line }}
{% end %}
"""

STATE_TEMPLATE = """\
{% if solved %}
Solved: route {{ index }}
{% else %}
Unsolved: {{ count }} candidate routes{% if candidates %} ({{ candidates }}){% end %}

{% end %}
"""


def _text_env() -> Environment:
    """A bare kida Environment for terminal output (no HTML escaping)."""
    return Environment(autoescape=False, trim_blocks=True, lstrip_blocks=True)


def format_kinds(kinds: Iterable[EntityKind]) -> str:
    return ", ".join(kind.label for kind in kinds)


def format_spawns(spawns: RoundSpawnMap) -> str:
    """``south-east: tz-kih, center: tok-xil`` in table order."""
    return ", ".join(f"{location.label}: {kind.label}" for location, kind in spawns.items())


def render_waves(rows: Iterable[tuple[int, tuple[EntityKind, ...]]]) -> str:
    lines = [f"{round_:>2}  {format_kinds(kinds)}" for round_, kinds in rows]
    return _text_env().from_string(WAVES_TEMPLATE).render({"lines": lines})


def render_route(route: Route, start: int = 1) -> str:
    lines = [
        f"{round_:>2}  {format_spawns(route.spawns(round_))}"
        for round_ in range(start, len(route.waves) + 1)
    ]
    return _text_env().from_string(ROUTE_TEMPLATE).render({"index": route.index, "lines": lines})


def render_state(*, solved: bool, index: int | None = None, candidates: Iterable[int] = ()) -> str:
    indices = list(candidates)
    context = {
        "solved": solved,
        "index": index,
        "count": len(indices),
        "candidates": ", ".join(str(i) for i in indices),
    }
    return _text_env().from_string(STATE_TEMPLATE).render(context)
