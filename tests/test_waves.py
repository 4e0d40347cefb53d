"""Tests for fightcaves.generation.waves — greedy wave composition."""

import pytest

from fightcaves.entities import EntityKind
from fightcaves.errors import InvariantViolation
from fightcaves.generation.waves import ROUND_COUNT, check_round, compute


class TestCompute:
    @pytest.mark.parametrize("round_", range(1, ROUND_COUNT + 1))
    def test_thresholds_sum_to_round(self, round_: int) -> None:
        assert sum(k.first_appearance for k in compute(round_)) == round_

    @pytest.mark.parametrize("round_", range(1, ROUND_COUNT + 1))
    def test_descending_order(self, round_: int) -> None:
        thresholds = [k.first_appearance for k in compute(round_)]
        assert thresholds == sorted(thresholds, reverse=True)

    def test_first_round(self) -> None:
        assert compute(1) == (EntityKind.TZ_KIH,)

    def test_last_round_is_jad_alone(self) -> None:
        assert compute(63) == (EntityKind.TZTOK_JAD,)

    def test_round_22(self) -> None:
        assert compute(22) == (EntityKind.YT_MEJKOT, EntityKind.TOK_XIL)

    def test_repeated_kind(self) -> None:
        assert compute(62) == (EntityKind.KET_ZEK, EntityKind.KET_ZEK)

    def test_four_mob_round(self) -> None:
        assert compute(12) == (
            EntityKind.TOK_XIL,
            EntityKind.TZ_KEK,
            EntityKind.TZ_KIH,
            EntityKind.TZ_KIH,
        )

    def test_largest_wave(self) -> None:
        assert compute(58) == (
            EntityKind.KET_ZEK,
            EntityKind.YT_MEJKOT,
            EntityKind.TOK_XIL,
            EntityKind.TZ_KEK,
            EntityKind.TZ_KIH,
            EntityKind.TZ_KIH,
        )
        assert max(len(compute(r)) for r in range(1, ROUND_COUNT + 1)) == 6


class TestComputeInvariant:
    def test_incomplete_threshold_set(self, monkeypatch: pytest.MonkeyPatch) -> None:
        compute.cache_clear()
        monkeypatch.setattr(EntityKind, "descending", lambda: (EntityKind.TOK_XIL, EntityKind.TZ_KEK))
        try:
            with pytest.raises(InvariantViolation, match="remainder 2"):
                compute(5)
        finally:
            compute.cache_clear()


class TestCheckRound:
    @pytest.mark.parametrize("round_", [0, -1, 64])
    def test_out_of_range(self, round_: int) -> None:
        with pytest.raises(ValueError, match="Round must be within"):
            check_round(round_)

    def test_compute_rejects_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            compute(0)
