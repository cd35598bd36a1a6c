"""
Data models for graph path finding.

This module provides the core data structures used throughout the path finding package:
- Path: Immutable record of a discovered route with traversal statistics
- PerformanceMetrics: Container for algorithm performance metrics

Example:
    >>> path = PathFinding.dijkstra(graph, "A", "D", weight_func=intrinsic_weight)
    >>> path.validate(graph)  # Ensures path consistency
    >>> [vertex.id for vertex in path.vertices]
    ['A', 'B', 'D']
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple, Union

from ..config import EPSILON
from ..exceptions import PathValidationError
from ..graph import Graph
from ..models import Edge, Vertex
from .types import WeightFunc


def calculate_path_weight(edges: Iterable[Edge], weight_func: WeightFunc) -> float:
    """Sum ``weight_func`` over ``edges``."""
    return sum((float(weight_func(edge)) for edge in edges), 0.0)


@dataclass(frozen=True)
class Path:
    """
    Result of a path search.

    A path is a value, not a live view of the graph: mutating the graph after the
    search does not change it.

    Attributes:
        start: Vertex the path begins at
        edges: Edges in travel order; empty when the path ends where it starts
        total_weight: Edge count for DFS/BFS, accumulated weight for Dijkstra/A*
        visited: Every vertex the search visited, a superset of the path's vertices

    Example:
        >>> path = Path(start=a, edges=(ab, bd), total_weight=2.0, visited=frozenset({a, b, d}))
        >>> print(path)
        Weight=2.000000 Length=3 Visited=3 (A, B, D)
    """

    start: Vertex
    edges: Tuple[Edge, ...] = ()
    total_weight: float = 0.0
    visited: FrozenSet[Vertex] = field(default_factory=frozenset)

    def __post_init__(self):
        """Normalize containers so the record cannot be mutated afterwards."""
        if not isinstance(self.edges, tuple):
            object.__setattr__(self, "edges", tuple(self.edges))
        if not isinstance(self.visited, frozenset):
            object.__setattr__(self, "visited", frozenset(self.visited))

    def __len__(self) -> int:
        """Return the number of edges in the path."""
        return len(self.edges)

    def __getitem__(self, index: int) -> Edge:
        """Get an edge from the path by index."""
        return self.edges[index]

    def __iter__(self) -> Iterator[Edge]:
        """Return an iterator over the path edges."""
        return iter(self.edges)

    @property
    def length(self) -> int:
        """Number of edges in the path."""
        return len(self.edges)

    @property
    def end(self) -> Vertex:
        """Vertex the path ends at."""
        return self.edges[-1].to_vertex if self.edges else self.start

    @property
    def vertices(self) -> List[Vertex]:
        """
        Get the sequence of vertices in the path.

        Returns:
            List of vertices in order of traversal, start first
        """
        return [self.start] + [edge.to_vertex for edge in self.edges]

    def validate(
        self,
        graph: Graph,
        weight_func: Optional[WeightFunc] = None,
        weight_epsilon: float = EPSILON,
    ) -> None:
        """
        Validate the path's consistency.

        Checks:
        - The first edge leaves ``start``
        - Path continuity (each edge starts where the previous one ended)
        - Edge existence (every edge is stored in the graph)
        - Weight consistency, when ``weight_func`` is given

        Raises:
            PathValidationError: If any validation check fails
        """
        if not self.edges:
            return

        if self.edges[0].from_vertex is not self.start:
            raise PathValidationError(
                f"First edge {self.edges[0]} does not leave start vertex {self.start.id}"
            )

        for i in range(len(self.edges) - 1):
            if self.edges[i].to_vertex is not self.edges[i + 1].from_vertex:
                raise PathValidationError(
                    f"Path discontinuity between edges {i} and {i+1}: "
                    f"{self.edges[i]} and {self.edges[i + 1]}"
                )

        for edge in self.edges:
            if not graph.has_edge(edge):
                raise PathValidationError(f"Edge {edge} not found in graph")

        if weight_func is not None:
            calculated_weight = calculate_path_weight(self.edges, weight_func)
            if abs(calculated_weight - self.total_weight) > weight_epsilon:
                raise PathValidationError(
                    f"Weight mismatch: calculated {calculated_weight} != stored {self.total_weight}"
                )

    def __str__(self) -> str:
        route = ", ".join(vertex.id for vertex in self.vertices)
        return (
            f"Weight={self.total_weight:f} Length={len(self.edges) + 1} "
            f"Visited={len(self.visited)} ({route})"
        )


@dataclass
class PerformanceMetrics:
    """
    Container for path finding performance metrics.

    Attributes:
        operation: Name of the path finding operation
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        path_length: Length of found path (None if no path was found)
        nodes_explored: Number of vertices visited during search
        max_memory_used: Peak process memory during the search (bytes), when tracked

    Example:
        >>> metrics = PerformanceMetrics(operation="dijkstra", start_time=time())
        >>> # ... perform operation ...
        >>> metrics.end_time = time()
        >>> print(f"Operation took {metrics.duration:.2f}ms")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    path_length: Optional[int] = None
    nodes_explored: Optional[int] = None
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

    @property
    def duration(self) -> float:
        """
        Calculate operation duration in milliseconds.

        Returns:
            Duration of the operation in milliseconds
        """
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """
        Convert metrics to dictionary format.

        Returns:
            Dictionary containing all metrics
        """
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "path_length": self.path_length,
            "nodes_explored": self.nodes_explored,
            "max_memory_used": self.max_memory_used,
        }
