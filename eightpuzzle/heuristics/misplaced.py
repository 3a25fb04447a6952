from __future__ import annotations

import numpy as np

from eightpuzzle.heuristics.base import Heuristic


class MisplacedTiles(Heuristic):
    """g + number of non-blank tiles out of place."""

    name = "misplaced"

    def score(self, grid, moves: int) -> int:
        g = np.asarray(grid)
        return moves + int(np.count_nonzero((g != self.target) & (g != 0)))
