"""
pathgraph - Directed graph engine with path search

This package provides a directed graph with identity-checked vertices and edges,
and four path searches over it:

- Depth-first search (any path)
- Breadth-first search (fewest edges)
- Dijkstra (minimum total weight)
- A* (minimum total weight, guided by a heuristic)
"""

__version__ = "0.1.0"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("pathgraph requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core.graph import Graph
from .core.models import Edge, Vertex
from .core.graph_paths import Path, PathFinding, PathType

__all__ = [
    "Graph",
    "Vertex",
    "Edge",
    "Path",
    "PathFinding",
    "PathType",
]
