"""Degenerate orderings that turn the best-first engine into BFS / DFS.

Only meant for testing the engine; neither looks at the tiles.
"""
from __future__ import annotations

from eightpuzzle.heuristics.base import Heuristic

# 9!/2 states are reachable from any start, so no level can exceed this.
REACHABLE_STATES = 181440


class BreadthFirst(Heuristic):
    name = "breadth_first"

    def score(self, grid, moves: int) -> int:
        self._check_target()
        return moves


class DepthFirst(Heuristic):
    name = "depth_first"

    def score(self, grid, moves: int) -> int:
        self._check_target()
        return max(REACHABLE_STATES - moves, 0)
