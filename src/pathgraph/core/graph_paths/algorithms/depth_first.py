"""Depth-first path finding implementation."""

import logging
import math
from typing import Iterator, List, Optional, Set, Tuple

from ...graph import Graph
from ...models import Edge, Vertex
from ..base import PathFinder
from ..models import Path, PerformanceMetrics
from ..types import HeuristicFunc

logger = logging.getLogger(__name__)


class DepthFirstFinder(PathFinder):
    """
    Backtracking depth-first search.

    Returns the first path found in edge order; it is neither the shortest nor
    the lightest. A vertex is entered at most once per search, so cycles end a
    branch instead of looping. The traversal keeps an explicit stack, so deep
    graphs do not hit the interpreter's recursion limit.
    """

    operation = "dfs"

    def _search(
        self, start: Vertex, target: Vertex, metrics: PerformanceMetrics, **kwargs
    ) -> Optional[Path]:
        visited: Set[Vertex] = {start}
        stack: List[Tuple[Vertex, Iterator[Edge]]] = [(start, iter(start.edges))]
        trail: List[Edge] = []  # edges leading to stack[1:]

        while stack:
            self.memory_tracker.check_memory()
            _, edges = stack[-1]
            edge = next(edges, None)
            if edge is None:
                stack.pop()
                if trail:
                    trail.pop()
                continue

            neighbor = edge.to_vertex
            if neighbor in visited:
                continue
            visited.add(neighbor)
            trail.append(edge)

            if neighbor is target:
                metrics.nodes_explored = len(visited)
                return Path(
                    start=start,
                    edges=tuple(trail),
                    total_weight=float(len(trail)),
                    visited=frozenset(visited),
                )
            stack.append((neighbor, iter(neighbor.edges)))

        metrics.nodes_explored = len(visited)
        return None


def edge_count_heuristic(graph: Graph) -> HeuristicFunc:
    """
    Build a heuristic from depth-first edge counts.

    The estimate for a vertex is the edge count of the path DFS finds from it to
    the target, or infinity when DFS finds none. DFS paths are not shortest, so
    the estimate is not admissible in general. Estimates are memoized per
    (vertex, target) pair for the lifetime of the returned function.
    """
    finder = DepthFirstFinder(graph)
    estimates = {}

    def heuristic(vertex: Vertex, target: Vertex) -> float:
        key = (vertex.id, target.id)
        if key not in estimates:
            path = finder.find_path(vertex.id, target.id)
            estimates[key] = path.total_weight if path is not None else math.inf
            logger.debug(f"DFS estimate {vertex.id} -> {target.id}: {estimates[key]}")
        return estimates[key]

    return heuristic
