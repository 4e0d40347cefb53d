"""Tests for fightcaves.entities — entity kinds and spawn locations."""

import pytest

from fightcaves.entities import EntityKind, SpawnLocation
from fightcaves.errors import UnknownEntityLevel


class TestEntityKind:
    def test_thresholds(self) -> None:
        assert [k.first_appearance for k in EntityKind] == [63, 31, 15, 7, 3, 1]

    def test_descending_matches_declaration_order(self) -> None:
        assert EntityKind.descending() == tuple(EntityKind)

    def test_by_level(self) -> None:
        assert EntityKind.by_level(702) is EntityKind.TZTOK_JAD
        assert EntityKind.by_level(22) is EntityKind.TZ_KIH

    def test_by_level_round_trips_every_kind(self) -> None:
        for kind in EntityKind:
            assert EntityKind.by_level(kind.level) is kind

    def test_unknown_level(self) -> None:
        with pytest.raises(UnknownEntityLevel) as exc_info:
            EntityKind.by_level(100)
        assert exc_info.value.level == 100
        assert "100" in str(exc_info.value)

    def test_unknown_level_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            EntityKind.by_level(0)

    def test_label(self) -> None:
        assert EntityKind.YT_MEJKOT.label == "yt-mejkot"


class TestSpawnLocation:
    def test_five_locations(self) -> None:
        assert len(SpawnLocation) == 5

    def test_label(self) -> None:
        assert SpawnLocation.NORTH_WEST.label == "north-west"
        assert SpawnLocation.CENTER.label == "center"
