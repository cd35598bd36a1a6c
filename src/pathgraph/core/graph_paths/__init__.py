"""Graph path finding functionality."""

from typing import Optional

from ..config import SearchConfig
from ..exceptions import PathValidationError
from ..graph import Graph
from .algorithms import (
    AStarFinder,
    BreadthFirstFinder,
    DepthFirstFinder,
    DijkstraFinder,
    edge_count_heuristic,
)
from .base import PathFinder
from .models import Path, PerformanceMetrics, calculate_path_weight
from .types import HeuristicFunc, PathType, WeightFunc, intrinsic_weight, zero_heuristic

__all__ = [
    "AStarFinder",
    "BreadthFirstFinder",
    "DepthFirstFinder",
    "DijkstraFinder",
    "HeuristicFunc",
    "Path",
    "PathFinder",
    "PathFinding",
    "PathType",
    "PathValidationError",
    "PerformanceMetrics",
    "WeightFunc",
    "calculate_path_weight",
    "edge_count_heuristic",
    "intrinsic_weight",
    "zero_heuristic",
]

_FINDERS = {
    PathType.DFS: DepthFirstFinder,
    PathType.BFS: BreadthFirstFinder,
    PathType.DIJKSTRA: DijkstraFinder,
    PathType.A_STAR: AStarFinder,
}


class PathFinding:
    """Static interface for path finding operations."""

    @staticmethod
    def dfs(
        graph: Graph, start_id: str, target_id: str, config: Optional[SearchConfig] = None
    ) -> Optional[Path]:
        """Find any path by depth-first search; ``total_weight`` is the edge count."""
        return DepthFirstFinder(graph, config).find_path(start_id, target_id)

    @staticmethod
    def bfs(
        graph: Graph, start_id: str, target_id: str, config: Optional[SearchConfig] = None
    ) -> Optional[Path]:
        """Find the path with the fewest edges; ``total_weight`` is the edge count."""
        return BreadthFirstFinder(graph, config).find_path(start_id, target_id)

    @staticmethod
    def dijkstra(
        graph: Graph,
        start_id: str,
        target_id: str,
        weight_func: WeightFunc,
        config: Optional[SearchConfig] = None,
    ) -> Optional[Path]:
        """Find the path of minimum total weight."""
        return DijkstraFinder(graph, config).find_path(
            start_id, target_id, weight_func=weight_func
        )

    @staticmethod
    def a_star(
        graph: Graph,
        start_id: str,
        target_id: str,
        weight_func: WeightFunc,
        heuristic_func: HeuristicFunc,
        config: Optional[SearchConfig] = None,
    ) -> Optional[Path]:
        """Find a minimum weight path guided by ``heuristic_func``."""
        return AStarFinder(graph, config).find_path(
            start_id, target_id, weight_func=weight_func, heuristic_func=heuristic_func
        )

    @staticmethod
    def dijkstra_via_a_star(
        graph: Graph,
        start_id: str,
        target_id: str,
        weight_func: WeightFunc,
        config: Optional[SearchConfig] = None,
    ) -> Optional[Path]:
        """Run A* with a depth-first edge-count heuristic."""
        return AStarFinder(graph, config).dijkstra_via_a_star(start_id, target_id, weight_func)

    @classmethod
    def find_path(
        cls,
        graph: Graph,
        start_id: str,
        target_id: str,
        path_type: PathType = PathType.BFS,
        weight_func: Optional[WeightFunc] = None,
        heuristic_func: Optional[HeuristicFunc] = None,
        config: Optional[SearchConfig] = None,
    ) -> Optional[Path]:
        """Generic path finding interface."""
        if path_type in (PathType.DIJKSTRA, PathType.A_STAR) and weight_func is None:
            raise TypeError(f"{path_type.value} requires a weight_func")
        if path_type is PathType.A_STAR and heuristic_func is None:
            raise TypeError(f"{path_type.value} requires a heuristic_func")

        finder = _FINDERS[path_type](graph, config)
        kwargs = {}
        if weight_func is not None:
            kwargs["weight_func"] = weight_func
        if heuristic_func is not None:
            kwargs["heuristic_func"] = heuristic_func
        return finder.find_path(start_id, target_id, **kwargs)
