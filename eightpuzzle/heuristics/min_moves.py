from __future__ import annotations

import numpy as np

from eightpuzzle.heuristics.base import Heuristic


def manhattan(grid, rows: np.ndarray, cols: np.ndarray) -> int:
    """Sum of Manhattan distances to target positions (blank ignored)."""
    dist = 0
    for idx, tile in enumerate(np.asarray(grid).ravel()):
        if tile == 0:
            continue
        r, c = divmod(idx, 3)
        dist += abs(r - int(rows[tile])) + abs(c - int(cols[tile]))
    return dist


class MinMoves(Heuristic):
    """g + Manhattan distance. Admissible lower bound on the remaining moves."""

    name = "min_moves"

    def score(self, grid, moves: int) -> int:
        self._check_target()
        return moves + manhattan(grid, self._rows, self._cols)
