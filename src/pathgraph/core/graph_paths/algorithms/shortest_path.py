"""
Weighted shortest path algorithms: Dijkstra and A*.

Both share one best-first loop over a binary heap. Improved records are pushed
again instead of decreasing their key; copies that surface after their vertex is
finalized are skipped. Edge weights must be non-negative; this is a caller
precondition and is not checked during the search.
"""

import logging
from typing import Dict, Optional, Set

from ...models import Vertex
from ..base import PathFinder
from ..models import Path, PerformanceMetrics
from ..types import HeuristicFunc, WeightFunc
from ..utils import PriorityQueue, SearchState, get_edge_weight, is_better_cost
from .depth_first import edge_count_heuristic

logger = logging.getLogger(__name__)


class DijkstraFinder(PathFinder):
    """Dijkstra's algorithm: minimum total weight under a caller-supplied weight function."""

    operation = "dijkstra"
    weighted = True

    def _search(
        self,
        start: Vertex,
        target: Vertex,
        metrics: PerformanceMetrics,
        weight_func: Optional[WeightFunc] = None,
        **kwargs,
    ) -> Optional[Path]:
        if weight_func is None:
            raise TypeError(f"{self.operation} requires a weight_func")
        return self._best_first(start, target, metrics, weight_func, None)

    def _best_first(
        self,
        start: Vertex,
        target: Vertex,
        metrics: PerformanceMetrics,
        weight_func: WeightFunc,
        heuristic_func: Optional[HeuristicFunc],
    ) -> Optional[Path]:
        """Best-first search ordered by cumulative weight plus heuristic estimate."""
        logger.debug(f"Starting {self.operation} from {start.id} to {target.id}")

        estimates: Dict[Vertex, float] = {}

        def estimate(vertex: Vertex) -> float:
            if heuristic_func is None:
                return 0.0
            if vertex not in estimates:
                estimates[vertex] = heuristic_func(vertex, target)
            return estimates[vertex]

        states: Dict[Vertex, SearchState] = {start: SearchState(start, 0.0, None, None)}
        finalized: Set[Vertex] = set()
        queue: PriorityQueue[SearchState] = PriorityQueue()
        queue.push(states[start], estimate(start))

        while not queue.empty():
            self.memory_tracker.check_memory()
            priority, state = queue.pop()
            vertex = state.vertex
            if vertex in finalized:
                continue
            finalized.add(vertex)
            logger.debug(f"Finalized {vertex.id} at weight {state.weight} (priority {priority})")

            if vertex is target:
                metrics.nodes_explored = len(finalized)
                return Path(
                    start=start,
                    edges=tuple(state.get_path()),
                    total_weight=state.weight,
                    visited=frozenset(finalized),
                )

            for edge in vertex.edges:
                neighbor = edge.to_vertex
                if neighbor in finalized:
                    continue
                candidate = state.weight + get_edge_weight(edge, weight_func)
                known = states.get(neighbor)
                if known is None or is_better_cost(candidate, known.weight):
                    states[neighbor] = SearchState(neighbor, candidate, edge, state)
                    queue.push(states[neighbor], candidate + estimate(neighbor))

        metrics.nodes_explored = len(finalized)
        return None


class AStarFinder(DijkstraFinder):
    """
    A* search: Dijkstra ordered by cumulative weight plus a heuristic estimate.

    With an admissible heuristic (one that never overestimates the remaining
    cost) the result is optimal. Otherwise the search still terminates with some
    path, without an optimality guarantee. A heuristic of zero reproduces Dijkstra.
    """

    operation = "a_star"

    def _search(
        self,
        start: Vertex,
        target: Vertex,
        metrics: PerformanceMetrics,
        weight_func: Optional[WeightFunc] = None,
        heuristic_func: Optional[HeuristicFunc] = None,
        **kwargs,
    ) -> Optional[Path]:
        if weight_func is None:
            raise TypeError(f"{self.operation} requires a weight_func")
        if heuristic_func is None:
            raise TypeError(f"{self.operation} requires a heuristic_func")
        return self._best_first(start, target, metrics, weight_func, heuristic_func)

    def dijkstra_via_a_star(
        self, start_id: str, target_id: str, weight_func: WeightFunc
    ) -> Optional[Path]:
        """Run A* with depth-first edge counts as the heuristic."""
        return self.find_path(
            start_id,
            target_id,
            weight_func=weight_func,
            heuristic_func=edge_count_heuristic(self.graph),
        )
