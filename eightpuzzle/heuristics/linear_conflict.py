from __future__ import annotations

import numpy as np

from eightpuzzle.heuristics.base import Heuristic
from eightpuzzle.heuristics.min_moves import manhattan


class LinearConflict(Heuristic):
    """g + Manhattan + 2 per linear conflict (row & column). Pairwise, so not always admissible."""

    name = "linear_conflict"

    def score(self, grid, moves: int) -> int:
        self._check_target()
        g = np.asarray(grid)
        rows, cols = self._rows, self._cols
        m = moves + manhattan(g, rows, cols)
        # Row conflicts
        for r in range(3):
            tiles = [t for t in g[r] if t != 0 and rows[t] == r]
            for i in range(len(tiles)):
                for j in range(i+1, len(tiles)):
                    if cols[tiles[i]] > cols[tiles[j]]:
                        m += 2
        # Column conflicts
        for c in range(3):
            tiles = [t for t in g[:, c] if t != 0 and cols[t] == c]
            for i in range(len(tiles)):
                for j in range(i+1, len(tiles)):
                    if rows[tiles[i]] > rows[tiles[j]]:
                        m += 2
        return m
