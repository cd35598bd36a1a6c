"""Path finding algorithm implementations."""

from .breadth_first import BreadthFirstFinder
from .depth_first import DepthFirstFinder, edge_count_heuristic
from .shortest_path import AStarFinder, DijkstraFinder

__all__ = [
    "AStarFinder",
    "BreadthFirstFinder",
    "DepthFirstFinder",
    "DijkstraFinder",
    "edge_count_heuristic",
]
