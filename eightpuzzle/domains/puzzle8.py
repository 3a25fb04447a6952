from __future__ import annotations
from typing import Tuple, List
import random

import numpy as np

# Compact state: 9-digit base-10 int, row-major, most significant digit first.
GOAL: int = 123456780
N = 3
SIZE = N * N

# Precomputed neighbors (blank moves) on 3x3 grid
_NEI = {
    0: (1, 3),
    1: (0, 2, 4),
    2: (1, 5),
    3: (0, 4, 6),
    4: (1, 3, 5, 7),
    5: (2, 4, 8),
    6: (3, 7),
    7: (4, 6, 8),
    8: (5, 7),
}


class InvalidStateError(ValueError):
    """Raised for anything that is not a 3x3 permutation of 0..8."""


def _digits(state: int) -> List[int]:
    if isinstance(state, bool) or not isinstance(state, (int, np.integer)):
        raise InvalidStateError(f"invalid puzzle state {state!r}: not an integer")
    state = int(state)
    if state < 0 or state >= 10 ** SIZE:
        raise InvalidStateError(f"invalid puzzle state {state}: expected at most 9 digits")
    out = [0] * SIZE
    for k in range(SIZE - 1, -1, -1):
        out[k] = state % 10
        state //= 10
    if sorted(out) != list(range(SIZE)):
        raise InvalidStateError(
            f"invalid puzzle state {''.join(map(str, out))}: digits 0-8 must each appear once"
        )
    return out


def is_valid_state(state: int) -> bool:
    try:
        _digits(state)
    except InvalidStateError:
        return False
    return True


def decode(state: int) -> np.ndarray:
    """Compact int -> fresh 3x3 int8 grid (pure digit extraction)."""
    return np.array(_digits(state), dtype=np.int8).reshape(N, N)


def encode(grid) -> int:
    """3x3 grid -> compact int. Inverse of decode."""
    g = np.asarray(grid)
    if g.shape != (N, N):
        raise InvalidStateError(f"invalid puzzle grid: shape {g.shape}, expected ({N}, {N})")
    flat = [int(v) for v in g.ravel()]
    if sorted(flat) != list(range(SIZE)):
        raise InvalidStateError(f"invalid puzzle grid {flat}: values 0-8 must each appear once")
    state = 0
    for v in flat:
        state = state * 10 + v
    return state


def format_state(state: int) -> str:
    return f"{state:09d}"


def _inversions(state: int) -> int:
    arr = [x for x in _digits(state) if x != 0]
    inv = 0
    for i in range(len(arr)):
        for j in range(i+1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return inv


def is_solvable(state: int, goal: int = GOAL) -> bool:
    """3x3 puzzle: reachable iff inversion parities of state and goal agree."""
    return (_inversions(state) % 2) == (_inversions(goal) % 2)


def scramble(depth: int, seed: int, goal: int = GOAL) -> int:
    """Scramble goal by performing 'depth' random legal blank moves (no immediate backtracks)."""
    rng = random.Random(seed)
    s = _digits(goal)
    last_blank = None
    for _ in range(depth):
        z = s.index(0)
        cand = list(_NEI[z])
        if last_blank in cand and len(cand) > 1:
            cand.remove(last_blank)
        j = rng.choice(cand)
        s[z], s[j] = s[j], s[z]
        last_blank = z
    return int("".join(map(str, s)))


def make_unsolvable_variant(state: int) -> int:
    """Swap the first two non-blank tiles; flips the permutation parity."""
    lst = _digits(state)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1 :], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return int("".join(map(str, lst)))


def target_positions(grid) -> Tuple[np.ndarray, np.ndarray]:
    """Row and column of every tile value in grid, indexed by value."""
    flat = np.asarray(grid).ravel()
    rows = np.empty(SIZE, dtype=np.int8)
    cols = np.empty(SIZE, dtype=np.int8)
    for idx, tile in enumerate(flat):
        rows[tile], cols[tile] = divmod(idx, N)
    return rows, cols
