"""Breadth-first path finding implementation."""

from collections import deque
from typing import Deque, Dict, List, Optional, Set, Tuple

from ...models import Edge, Vertex
from ..base import PathFinder
from ..models import Path, PerformanceMetrics


class BreadthFirstFinder(PathFinder):
    """
    Breadth-first search for the path with the fewest edges.

    The frontier is processed level by level and the target is checked when it
    is dequeued, so the returned path has the minimum edge count. Every
    discovered neighbour is recorded as visited, whether or not it ends up on
    the path.
    """

    operation = "bfs"

    def _search(
        self, start: Vertex, target: Vertex, metrics: PerformanceMetrics, **kwargs
    ) -> Optional[Path]:
        visited: Set[Vertex] = {start}
        predecessors: Dict[Vertex, Optional[Tuple[Vertex, Edge]]] = {start: None}
        frontier: Deque[Vertex] = deque([start])

        while frontier:
            self.memory_tracker.check_memory()
            current = frontier.popleft()

            if current is target:
                metrics.nodes_explored = len(visited)
                edges = self._reconstruct(predecessors, target)
                return Path(
                    start=start,
                    edges=tuple(edges),
                    total_weight=float(len(edges)),
                    visited=frozenset(visited),
                )

            for edge in current.edges:
                neighbor = edge.to_vertex
                visited.add(neighbor)
                if neighbor not in predecessors:
                    predecessors[neighbor] = (current, edge)
                    frontier.append(neighbor)

        metrics.nodes_explored = len(visited)
        return None

    @staticmethod
    def _reconstruct(
        predecessors: Dict[Vertex, Optional[Tuple[Vertex, Edge]]], target: Vertex
    ) -> List[Edge]:
        """Walk predecessor links back from ``target`` and return edges in travel order."""
        edges = []
        step = predecessors[target]
        while step is not None:
            previous, edge = step
            edges.append(edge)
            step = predecessors[previous]
        edges.reverse()
        return edges
