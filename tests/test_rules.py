from __future__ import annotations

import itertools
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
APP_DIR = ROOT / "src" / "app"
sys.path.insert(0, str(APP_DIR))

from errors import InvalidMoveSet, UnknownMove  # type: ignore[import-not-found]  # noqa: E402
from rules import MoveSet, OutcomeEngine  # type: ignore[import-not-found]  # noqa: E402

RPSLS = ["rock", "spock", "paper", "lizard", "scissors"]


def _moves(n: int) -> list[str]:
    return [f"m{i}" for i in range(n)]


def test_classic_rock_paper_scissors() -> None:
    engine = OutcomeEngine(["rock", "paper", "scissors"])
    assert engine.half == 1

    assert engine.classify("rock", "scissors") == "house_win"
    assert engine.classify("scissors", "paper") == "house_win"
    assert engine.classify("paper", "rock") == "house_win"

    assert engine.classify("scissors", "rock") == "user_win"
    assert engine.classify("paper", "scissors") == "user_win"
    assert engine.classify("rock", "paper") == "user_win"

    assert engine.classify("rock", "rock") == "draw"


def test_lizard_spock_truth_table() -> None:
    engine = OutcomeEngine(RPSLS)
    assert engine.half == 2

    assert engine.beats("rock", "scissors")
    assert engine.beats("rock", "lizard")
    assert engine.beats("paper", "rock")
    assert engine.beats("spock", "rock")
    assert engine.beats("scissors", "paper")
    assert engine.beats("scissors", "lizard")
    assert engine.beats("lizard", "spock")
    assert engine.beats("lizard", "paper")
    assert engine.beats("spock", "scissors")
    assert engine.beats("paper", "spock")


@pytest.mark.parametrize("n", [3, 5, 7, 9, 11])
def test_same_move_is_draw(n: int) -> None:
    engine = OutcomeEngine(_moves(n))
    for m in engine.moves:
        assert engine.classify(m, m) == "draw"


@pytest.mark.parametrize("n", [3, 5, 7, 9, 11])
def test_distinct_moves_have_opposite_results(n: int) -> None:
    engine = OutcomeEngine(_moves(n))
    flipped = {"house_win": "user_win", "user_win": "house_win"}
    for a, b in itertools.permutations(engine.moves, 2):
        result = engine.classify(a, b)
        assert result != "draw"
        assert engine.classify(b, a) == flipped[result]


@pytest.mark.parametrize("n", [3, 5, 7, 9])
def test_each_move_beats_exactly_half(n: int) -> None:
    engine = OutcomeEngine(_moves(n))
    for a in engine.moves:
        wins = [b for b in engine.moves if engine.beats(a, b)]
        assert len(wins) == n // 2


def test_half_cycle_away_goes_to_earlier_side() -> None:
    engine = OutcomeEngine(["a", "b", "c", "d", "e"])
    # c sits two places (half) after a.
    assert engine.classify("c", "a") == "house_win"
    assert engine.classify("a", "c") == "user_win"
    # Three places after wraps to two places before.
    assert engine.classify("d", "a") == "user_win"


@pytest.mark.parametrize(
    "moves",
    [
        ["a", "b", "c", "d"],
        ["a"],
        [],
        ["a", "b"],
        ["rock", "paper", "rock"],
    ],
)
def test_invalid_move_sets_rejected(moves: list[str]) -> None:
    with pytest.raises(InvalidMoveSet):
        OutcomeEngine(moves)


def test_move_names_are_case_sensitive() -> None:
    engine = OutcomeEngine(["Rock", "rock", "ROCK"])
    assert len(engine.moves) == 3
    with pytest.raises(UnknownMove):
        engine.classify("Rock", "rOcK")


def test_unknown_move_rejected() -> None:
    engine = OutcomeEngine(["rock", "paper", "scissors"])
    with pytest.raises(UnknownMove) as excinfo:
        engine.classify("rock", "well")
    assert excinfo.value.move == "well"
    with pytest.raises(UnknownMove):
        engine.classify("", "rock")


def test_move_set_is_immutable() -> None:
    ms = MoveSet(("a", "b", "c"))
    assert ms.index_of("c") == 2
    assert "b" in ms and "z" not in ms
    assert list(ms) == ["a", "b", "c"]
    with pytest.raises(AttributeError):
        ms.names = ("x", "y", "z")  # type: ignore[misc]


def test_engine_accepts_move_set() -> None:
    ms = MoveSet(("a", "b", "c"))
    assert OutcomeEngine(ms).moves is ms


def test_matrix_matches_classify() -> None:
    engine = OutcomeEngine(RPSLS)
    grid = engine.matrix()
    assert len(grid) == 5 and all(len(row) == 5 for row in grid)
    for i, row_move in enumerate(engine.moves):
        for j, col_move in enumerate(engine.moves):
            assert grid[i][j] == engine.classify(row_move, col_move)
    assert [grid[i][i] for i in range(5)] == ["draw"] * 5
