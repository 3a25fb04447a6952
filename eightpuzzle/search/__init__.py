from eightpuzzle.search.a_star import AStar, UNLIMITED
from eightpuzzle.search.node import Node, reconstruct_path

__all__ = ["AStar", "UNLIMITED", "Node", "reconstruct_path"]
