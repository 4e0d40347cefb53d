"""Tests for fightcaves.cli — entrypoint, argument parsing and output."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from fightcaves.cli import configure_logging, main
from fightcaves.cli._solve import parse_observation
from fightcaves.config import PredictorConfig
from fightcaves.entities import EntityKind, SpawnLocation


@pytest.fixture(autouse=True)
def _restore_log_level() -> Iterator[None]:
    logger = logging.getLogger("fightcaves")
    level = logger.level
    yield
    logger.setLevel(level)


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    @pytest.mark.parametrize("command", ["waves", "route", "solve"])
    def test_subcommand_help_exits_zero(self, command: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([command, "--help"])
        assert exc_info.value.code == 0

    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "fightcaves" in capsys.readouterr().out

    def test_route_missing_index(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["route"])
        assert exc_info.value.code == 2


class TestWaves:
    def test_all_rounds(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["waves"])
        out = capsys.readouterr().out
        assert "22  yt-mejkot, tok-xil" in out
        assert "63  tztok-jad" in out

    def test_single_round(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["waves", "--round", "62"])
        out = capsys.readouterr().out
        assert "ket-zek, ket-zek" in out
        assert "tztok-jad" not in out

    def test_bad_round(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["waves", "--round", "0"])
        assert exc_info.value.code == 1
        assert "Error" in capsys.readouterr().err


class TestRoute:
    def test_route(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["route", "3"])
        out = capsys.readouterr().out
        assert "Route 3" in out
        assert " 1  north-west: tz-kih" in out

    def test_route_from(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["route", "0", "--from", "63"])
        out = capsys.readouterr().out
        assert "63  center: tztok-jad" in out
        assert " 1  " not in out

    def test_bad_index(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["route", "15"])
        assert exc_info.value.code == 1


class TestSolve:
    def test_solved(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["solve", "1:north_west:tz_kih", "3:south-east:45", "7:south_east:tok-xil"])
        out = capsys.readouterr().out
        assert "Solved: route 3" in out
        assert "Solved!" in out
        assert "63  " in out

    def test_unsolved(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["solve", "1:north_west:tz_kih"])
        out = capsys.readouterr().out
        assert "Unsolved: 3 candidate routes" in out
        assert "3, 7, 12" in out

    def test_bad_observation(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["solve", "1:upstairs:tz_kih"])
        assert exc_info.value.code == 2
        assert "Unknown location" in capsys.readouterr().err

    def test_state_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        state = str(tmp_path / "state.json")
        main(["solve", "--state", state, "1:north_west:tz_kih"])
        main(["solve", "--state", state, "3:south_east:tz_kek"])
        out = capsys.readouterr().out
        assert "Unsolved: 2 candidate routes" in out


class TestParseObservation:
    def test_kind_name(self) -> None:
        assert parse_observation("12:south:tok_xil") == (12, SpawnLocation.SOUTH, EntityKind.TOK_XIL)

    def test_level(self) -> None:
        assert parse_observation("12:south:90") == (12, SpawnLocation.SOUTH, 90)

    def test_empty(self) -> None:
        assert parse_observation("12:Center:empty") == (12, SpawnLocation.CENTER, None)

    @pytest.mark.parametrize("text", ["12:south", "x:south:empty", "1:south:goblin"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_observation(text)


class TestLogLevel:
    def test_default_comes_from_config(self) -> None:
        main(["waves", "--round", "1"])
        expected = getattr(logging, PredictorConfig().log_level.upper())
        assert logging.getLogger("fightcaves").level == expected

    def test_flag_overrides(self) -> None:
        main(["--log-level", "debug", "waves", "--round", "1"])
        assert logging.getLogger("fightcaves").level == logging.DEBUG

    def test_configure_logging(self) -> None:
        configure_logging(PredictorConfig(log_level="error"))
        assert logging.getLogger("fightcaves").level == logging.ERROR
