import pytest

from eightpuzzle.domains.puzzle8 import GOAL, decode
from eightpuzzle.heuristics import (
    HEURISTICS, BreadthFirst, DepthFirst, Heuristic, LinearConflict, MinMoves,
    MisplacedTiles, get_heuristic,
)
from eightpuzzle.heuristics.ordering import REACHABLE_STATES


def _with_goal(h):
    h.set_target_state(decode(GOAL))
    return h


def test_misplaced_counts_non_blank_tiles():
    h = _with_goal(MisplacedTiles())
    assert h.score(decode(GOAL), 0) == 0
    assert h.score(decode(123456078), 0) == 2
    assert h.score(decode(123456708), 0) == 1
    assert h.score(decode(123456078), 4) == 6


def test_min_moves_is_manhattan_plus_moves():
    h = _with_goal(MinMoves())
    assert h.score(decode(GOAL), 0) == 0
    # 8 one step right of home, 7 one step right of home
    assert h.score(decode(123456078), 0) == 2
    assert h.score(decode(123456078), 3) == 5


def test_linear_conflict_adds_two_per_reversed_pair():
    h = _with_goal(LinearConflict())
    m = _with_goal(MinMoves())
    state = decode(213456780)
    assert h.score(state, 0) == m.score(state, 0) + 2
    assert h.score(decode(GOAL), 0) == 0


def test_orderings():
    bfs = _with_goal(BreadthFirst())
    dfs = _with_goal(DepthFirst())
    grid = decode(GOAL)
    assert bfs.score(grid, 7) == 7
    assert dfs.score(grid, 0) == REACHABLE_STATES
    assert dfs.score(grid, 5) < dfs.score(grid, 4)
    assert dfs.score(grid, REACHABLE_STATES + 10) == 0


@pytest.mark.parametrize("name", sorted(HEURISTICS))
def test_score_is_idempotent(name):
    h = _with_goal(get_heuristic(name))
    grid = decode(724506831)
    assert h.score(grid, 3) == h.score(grid, 3)
    assert h.score(grid, 3) >= 0


@pytest.mark.parametrize("name", sorted(HEURISTICS))
def test_score_before_target_raises(name):
    with pytest.raises(RuntimeError):
        get_heuristic(name).score(decode(GOAL), 0)


def test_target_can_change():
    h = _with_goal(MisplacedTiles())
    grid = decode(123456078)
    assert h.score(grid, 0) == 2
    h.set_target_state(grid)
    assert h.score(grid, 0) == 0


def test_target_is_copied():
    target = decode(GOAL)
    h = MisplacedTiles()
    h.set_target_state(target)
    target[0, 0], target[0, 1] = 2, 1
    assert h.score(decode(GOAL), 0) == 0


def test_unknown_heuristic():
    with pytest.raises(ValueError):
        get_heuristic("euclid")
    assert isinstance(get_heuristic("MIN_MOVES"), MinMoves)


@pytest.mark.parametrize("cls", [MisplacedTiles, MinMoves, LinearConflict, BreadthFirst, DepthFirst])
def test_variants_derive_directly_from_heuristic(cls):
    assert cls.__bases__ == (Heuristic,)
