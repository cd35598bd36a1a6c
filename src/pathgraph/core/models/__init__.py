"""
Core domain models package for the graph engine.

This package provides the vertex and edge data carriers the graph stores.
"""

from .vertex import Vertex
from .edge import Edge

__all__ = [
    "Vertex",
    "Edge",
]
