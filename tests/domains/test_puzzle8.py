import itertools
import random

import numpy as np
import pytest

from eightpuzzle.domains.puzzle8 import (
    GOAL, InvalidStateError, decode, encode, format_state, is_solvable,
    is_valid_state, make_unsolvable_variant, scramble,
)


def test_decode_goal_row_major():
    grid = decode(GOAL)
    assert grid.shape == (3, 3)
    assert grid.tolist() == [[1, 2, 3], [4, 5, 6], [7, 8, 0]]


def test_decode_leading_blank():
    grid = decode(12345678)
    assert grid[0, 0] == 0
    assert grid.tolist() == [[0, 1, 2], [3, 4, 5], [6, 7, 8]]
    assert encode(grid) == 12345678
    assert format_state(12345678) == "012345678"


def test_decode_returns_fresh_grid():
    a = decode(GOAL)
    a[0, 0] = 9
    assert decode(GOAL)[0, 0] == 1


def test_round_trip_sample_of_permutations():
    rng = random.Random(7)
    for _ in range(2000):
        perm = list(range(9))
        rng.shuffle(perm)
        grid = np.array(perm, dtype=np.int8).reshape(3, 3)
        assert np.array_equal(decode(encode(grid)), grid)
        n = int("".join(map(str, perm)))
        assert encode(decode(n)) == n


@pytest.mark.parametrize("bad", [123456788, 1234567890, -1, 123456789, 12345, 111111111])
def test_decode_rejects_invalid(bad):
    assert not is_valid_state(bad)
    with pytest.raises(InvalidStateError):
        decode(bad)


def test_encode_rejects_bad_grids():
    with pytest.raises(InvalidStateError):
        encode(np.zeros((3, 3), dtype=np.int8))
    with pytest.raises(InvalidStateError):
        encode([[1, 2], [3, 0]])


def test_invalid_state_is_value_error():
    with pytest.raises(ValueError):
        decode(999999999)


def test_solvability_parity():
    assert is_solvable(GOAL)
    assert is_solvable(123456078)
    assert not is_solvable(213456780)
    assert not is_solvable(make_unsolvable_variant(GOAL))


def test_scramble_is_seeded_and_solvable():
    for depth in (0, 1, 5, 20):
        s = scramble(depth, seed=3)
        assert s == scramble(depth, seed=3)
        assert is_valid_state(s)
        assert is_solvable(s)
    assert scramble(0, seed=1) == GOAL


@pytest.mark.slow
def test_round_trip_every_permutation():
    seen = set()
    for perm in itertools.permutations(range(9)):
        grid = np.array(perm, dtype=np.int8).reshape(3, 3)
        n = encode(grid)
        assert n == int("".join(map(str, perm)))
        assert np.array_equal(decode(n), grid)
        assert encode(decode(n)) == n
        seen.add(n)
    assert len(seen) == 362880
