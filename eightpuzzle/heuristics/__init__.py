from eightpuzzle.heuristics.base import Heuristic
from eightpuzzle.heuristics.linear_conflict import LinearConflict
from eightpuzzle.heuristics.min_moves import MinMoves
from eightpuzzle.heuristics.misplaced import MisplacedTiles
from eightpuzzle.heuristics.ordering import BreadthFirst, DepthFirst

HEURISTICS = {
    cls.name: cls
    for cls in (MisplacedTiles, MinMoves, LinearConflict, BreadthFirst, DepthFirst)
}


def get_heuristic(name: str) -> Heuristic:
    try:
        return HEURISTICS[name.lower()]()
    except KeyError:
        raise ValueError(f"unknown heuristic {name!r}; choose from {sorted(HEURISTICS)}") from None


__all__ = [
    "Heuristic", "MisplacedTiles", "MinMoves", "LinearConflict",
    "BreadthFirst", "DepthFirst", "HEURISTICS", "get_heuristic",
]
