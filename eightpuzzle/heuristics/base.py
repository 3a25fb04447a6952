from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from eightpuzzle.domains.puzzle8 import encode, target_positions


class Heuristic(ABC):
    """
    Scores a 3x3 grid as an estimated total cost to the target.

    set_target_state must be called before score. Implementations must be
    deterministic given (grid, moves, target).
    """

    name = "heuristic"

    def __init__(self) -> None:
        self._target: Optional[np.ndarray] = None
        self._rows: Optional[np.ndarray] = None
        self._cols: Optional[np.ndarray] = None

    def set_target_state(self, grid) -> None:
        encode(grid)  # validates
        self._target = np.array(grid, dtype=np.int8, copy=True)
        self._rows, self._cols = target_positions(self._target)

    def _check_target(self) -> None:
        if self._target is None:
            raise RuntimeError(f"{type(self).__name__}: set_target_state() was never called")

    @property
    def target(self) -> np.ndarray:
        self._check_target()
        return self._target

    @abstractmethod
    def score(self, grid, moves: int) -> int:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
