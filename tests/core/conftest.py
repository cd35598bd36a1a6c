"""Shared test fixtures."""

import math
from dataclasses import dataclass
from typing import Dict

import pytest

from pathgraph.core.graph import Graph
from pathgraph.core.models import Edge, Vertex


@dataclass(eq=False)
class Station(Vertex):
    """Vertex with planar coordinates, for heuristic tests."""

    x: float = 0.0
    y: float = 0.0


def distance(edge: Edge) -> float:
    """Euclidean length of an edge between two stations."""
    return math.hypot(
        edge.from_vertex.x - edge.to_vertex.x, edge.from_vertex.y - edge.to_vertex.y
    )


def straight_line(vertex: Station, target: Station) -> float:
    """Admissible heuristic: distance as the crow flies."""
    return math.hypot(vertex.x - target.x, vertex.y - target.y)


def build_graph(weighted_edges) -> Graph:
    """Build a graph from ``(from_id, to_id, weight)`` triples."""
    vertices: Dict[str, Vertex] = {}
    graph = Graph()
    for from_id, to_id, weight in weighted_edges:
        source = vertices.setdefault(from_id, Vertex(from_id))
        target = vertices.setdefault(to_id, Vertex(to_id))
        graph.add_or_get_edge(Edge(source, target, weight=weight))
    return graph


@pytest.fixture
def diamond_graph() -> Graph:
    """
    Fixture providing the diamond graph:
    A -1-> B -1-> D
    A -1-> C -5-> D
    """
    return build_graph([("A", "B", 1.0), ("B", "D", 1.0), ("A", "C", 1.0), ("C", "D", 5.0)])


@pytest.fixture
def cyclic_graph() -> Graph:
    """
    Fixture providing a test graph with cycles:
    A -> B -> C -> A
    |         |
    v         v
    D ------> E
    """
    return build_graph(
        [
            ("A", "B", 1.0),
            ("B", "C", 1.0),
            ("C", "A", 1.0),
            ("A", "D", 4.0),
            ("C", "E", 1.0),
            ("D", "E", 1.0),
        ]
    )


@pytest.fixture
def station_graph() -> Graph:
    """
    Fixture providing stations on a grid, connected both ways:

    S(0,0) - M(3,0) - T(6,0)
      |                 |
    N(0,4) ----------- E(6,4)
    """
    stations = {
        "S": Station("S", 0.0, 0.0),
        "M": Station("M", 3.0, 0.0),
        "T": Station("T", 6.0, 0.0),
        "N": Station("N", 0.0, 4.0),
        "E": Station("E", 6.0, 4.0),
    }
    graph = Graph()
    for a, b in [("S", "M"), ("M", "T"), ("S", "N"), ("N", "E"), ("E", "T")]:
        graph.add_or_get_edge(Edge(stations[a], stations[b]))
        graph.add_or_get_edge(Edge(stations[b], stations[a]))
    return graph
