"""Type definitions for graph path finding."""

from enum import Enum
from typing import Callable

from ..models import Edge, Vertex


class PathType(Enum):
    """Enumeration of path finding types."""

    DFS = "dfs"  # Any path, unweighted
    BFS = "bfs"  # Fewest edges
    DIJKSTRA = "dijkstra"  # Non-negative weights only
    A_STAR = "a_star"  # Non-negative weights, admissible heuristic for optimality


# Type alias for weight functions
WeightFunc = Callable[[Edge], float]

# Type alias for heuristic functions: (vertex, target) -> estimated remaining cost
HeuristicFunc = Callable[[Vertex, Vertex], float]


def zero_heuristic(vertex: Vertex, target: Vertex) -> float:
    """Heuristic that turns A* into Dijkstra."""
    return 0.0


def intrinsic_weight(edge: Edge) -> float:
    """Weight function reading the edge's own ``weight`` field."""
    return edge.weight
