from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Node:
    """
    Search-tree entry. Identity (eq/hash) is the compact state only, so
    a closed set of Nodes behaves like a set of states.
    """
    state: int
    parent: Optional["Node"] = field(default=None, compare=False, repr=False)
    score: int = field(default=0, compare=False)
    level: int = field(default=0, compare=False)

    def __lt__(self, other: "Node") -> bool:
        return self.score < other.score

    def path(self) -> List[int]:
        return reconstruct_path(self)


def reconstruct_path(node: Optional[Node]) -> List[int]:
    path: List[int] = []
    while node is not None:
        path.append(node.state)
        node = node.parent
    path.reverse()
    return path
