from __future__ import annotations
from typing import Any, Dict, FrozenSet, List, Optional, Set, Tuple
from time import perf_counter
import heapq
import itertools
import logging

import numpy as np

from eightpuzzle.domains.puzzle8 import decode, encode, format_state
from eightpuzzle.heuristics.base import Heuristic
from eightpuzzle.search.node import Node

logger = logging.getLogger(__name__)

UNLIMITED = -1

# (row, col) offsets of the cell the blank swaps with: up, down, left, right
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _check_max_level(max_level: int) -> int:
    if max_level != UNLIMITED and max_level < 0:
        raise ValueError(f"max_level must be >= 0 or UNLIMITED ({UNLIMITED}), got {max_level}")
    return max_level


class AStar:
    """
    Best-first search from initial_state to final_state.

    The frontier tolerates several entries for the same state; only the
    closed-set check at pop time filters them. Equal scores pop in
    insertion order.
    """

    def __init__(self, initial_state: int, final_state: int, heuristic: Heuristic,
                 max_level: int = UNLIMITED):
        decode(initial_state)
        self.initial_state = initial_state
        self.final_state = final_state
        self.heuristic = heuristic
        self.max_level = _check_max_level(max_level)
        self.heuristic.set_target_state(decode(self.final_state))

        self._solution: Optional[Node] = None
        # None until the first solve()
        self._opened: Optional[List[Tuple[int, int, Node]]] = None
        self._closed: Optional[Set[Node]] = None
        self._developed: Optional[int] = None
        self._stats: Dict[str, Any] = self._new_stats("idle")

    def _new_stats(self, termination: str) -> Dict[str, Any]:
        return {
            "algorithm": "A*",
            "heuristic": getattr(self.heuristic, "name", type(self.heuristic).__name__),
            "expanded": 0, "generated": 0, "duplicates": 0,
            "peak_open": 0, "peak_closed": 0,
            "g": None, "time": 0.0,
            "termination": termination,
        }

    def solve(self) -> bool:
        """Run to completion. True iff a node holding final_state was popped."""
        t0 = perf_counter()
        self._developed = 0
        self._solution = None
        self._opened = []
        self._closed = set()
        stats = self._new_stats("exhausted")
        counter = itertools.count()

        root = Node(self.initial_state, None, self.heuristic.score(decode(self.initial_state), 0), 0)
        heapq.heappush(self._opened, (root.score, next(counter), root))
        logger.info("solve %s -> %s with %s, max_level=%d",
                    format_state(self.initial_state), format_state(self.final_state),
                    stats["heuristic"], self.max_level)

        while self._opened:
            stats["peak_open"] = max(stats["peak_open"], len(self._opened))
            _, _, current = heapq.heappop(self._opened)
            logger.debug("pop %09d level=%d score=%d", current.state, current.level, current.score)

            if current.state == self.final_state:
                self._solution = current
                stats["termination"] = "ok"
                stats["g"] = current.level
                break

            if current in self._closed:
                stats["duplicates"] += 1
                continue
            self._closed.add(current)
            stats["peak_closed"] = len(self._closed)

            if self.max_level == UNLIMITED or current.level < self.max_level:
                self._developed += 1
                for child in self.get_children(decode(current.state), current):
                    if child not in self._closed:
                        heapq.heappush(self._opened, (child.score, next(counter), child))
                        stats["generated"] += 1

        stats["expanded"] = self._developed
        stats["time"] = perf_counter() - t0
        self._stats = stats
        logger.info("%s after %d developed states (%.6fs)",
                    "solved" if self._solution is not None else "exhausted",
                    self._developed, stats["time"])
        return self._solution is not None

    def get_children(self, grid, parent: Node) -> List[Node]:
        """
        Neighbors of grid by sliding the blank up, down, left, right (in
        that order). Out-of-bounds moves are skipped; grid is not modified.
        """
        grid = np.asarray(grid)
        zi, zj = (int(v) for v in np.argwhere(grid == 0)[0])
        level = parent.level + 1
        children: List[Node] = []
        for di, dj in DIRECTIONS:
            ni, nj = zi + di, zj + dj
            if not (0 <= ni < 3 and 0 <= nj < 3):
                continue
            candidate = grid.copy()
            candidate[zi, zj], candidate[ni, nj] = candidate[ni, nj], 0
            children.append(Node(encode(candidate), parent,
                                 self.heuristic.score(candidate, level), level))
        return children

    # ---------- Accessors ----------
    def get_solution(self) -> Optional[Node]:
        return self._solution

    def get_opened(self) -> Optional[Tuple[Node, ...]]:
        if self._opened is None:
            return None
        return tuple(node for _, _, node in self._opened)

    def get_closed(self) -> Optional[FrozenSet[Node]]:
        if self._closed is None:
            return None
        return frozenset(self._closed)

    def get_number_of_developed_states(self) -> Optional[int]:
        return self._developed

    def stats(self) -> Dict[str, Any]:
        return dict(self._stats)

    # ---------- Setters ----------
    def set_max_level(self, max_level: int) -> None:
        self.max_level = _check_max_level(max_level)

    def set_heuristic(self, heuristic: Heuristic) -> None:
        self.heuristic = heuristic
        self.heuristic.set_target_state(decode(self.final_state))

    def set_initial_state(self, initial_state: int) -> None:
        decode(initial_state)
        self.initial_state = initial_state

    def set_final_state(self, final_state: int) -> None:
        self.heuristic.set_target_state(decode(final_state))
        self.final_state = final_state
