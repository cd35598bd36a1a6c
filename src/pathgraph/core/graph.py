"""
Core graph data structure.

This module provides the Graph class: a directed graph that owns its vertices in
an id-keyed map, while each vertex owns its outgoing edges. The graph enforces the
representation invariants:

1. Vertex identifiers are unique within the graph.
2. Every edge stored under a vertex leaves that very vertex instance.
3. Every edge endpoint resolvable by id is the exact stored instance for that id.
4. A vertex only stores outgoing edges.

The graph does no locking. Callers that mutate it while other threads search must
provide their own exclusion.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Set

from .exceptions import InvariantViolationError
from .models import Edge, Vertex

logger = logging.getLogger(__name__)


class Graph:
    """
    Directed graph with idempotent upsert operations.

    Vertices and edges are added through ``add_or_get_*`` operations that return the
    canonical stored instance. There is no general deletion; the only removal is the
    bulk :meth:`remove_unconnected_vertices` clean-up.

    Attributes:
        _vertices (Dict[str, Vertex]): Stored vertices by id
    """

    def __init__(self, edges: Optional[Iterable[Edge]] = None):
        """
        Initialize graph, optionally from a collection of edges.

        Args:
            edges (Optional[Iterable[Edge]]): Edges to add; their endpoints are
                registered as vertices.
        """
        self._vertices: Dict[str, Vertex] = {}
        if edges is not None:
            self.add_edges(*edges)

    @classmethod
    def from_edges(cls, edges: Iterable[Edge]) -> "Graph":
        """Create a Graph instance from a collection of edges."""
        return cls(edges)

    def get_vertices(self) -> List[Vertex]:
        """Get all stored vertices in insertion order."""
        return list(self._vertices.values())

    def get_vertex_by_id(self, vertex_id: str) -> Optional[Vertex]:
        """Get the vertex stored under ``vertex_id``, or None if absent."""
        return self._vertices.get(vertex_id)

    def has_vertex(self, vertex_id: str) -> bool:
        """Check if a vertex id exists in the graph."""
        return vertex_id in self._vertices

    def add_or_get_vertex(self, vertex: Vertex) -> Vertex:
        """
        Add ``vertex`` unless its id is already present.

        Returns:
            Vertex: The stored vertex with that id, which is ``vertex`` itself
                if it has just been added
        """
        stored = self._vertices.setdefault(vertex.id, vertex)
        if stored is vertex:
            logger.debug(f"Added vertex {vertex.id}")
        return stored

    def add_vertices(self, *vertices: Vertex) -> int:
        """
        Add every vertex that is not present yet.

        Returns:
            int: The number of vertices actually added
        """
        added = 0
        for vertex in vertices:
            if vertex.id not in self._vertices:
                added += 1
            self.add_or_get_vertex(vertex)
        return added

    def add_or_get_edge(self, edge: Edge) -> Edge:
        """
        Add ``edge`` to the outgoing edges of its source vertex.

        Unseen endpoints are registered as vertices first. If an equal edge already
        leaves the source vertex, nothing changes and the stored edge is returned.

        Args:
            edge (Edge): The edge to add

        Returns:
            Edge: The stored duplicate of ``edge``, or ``edge`` itself if just added

        Raises:
            InvariantViolationError: If ``edge.from_vertex`` or ``edge.to_vertex``
                shares its id with a different vertex already in the graph, or
                if both endpoints share an id but are different instances
        """
        if edge.from_vertex.id == edge.to_vertex.id and not edge.is_self_loop:
            logger.warning(f"Rejected edge {edge}: endpoints are distinct vertices with one id")
            raise InvariantViolationError(
                f"Edge {edge} connects two different vertices with the same id "
                f"'{edge.from_vertex.id}'"
            )
        for endpoint in (edge.from_vertex, edge.to_vertex):
            stored = self._vertices.get(endpoint.id)
            if stored is not None and stored is not endpoint:
                logger.warning(f"Rejected edge {edge}: vertex '{endpoint.id}' is a duplicate")
                raise InvariantViolationError(
                    f"Edge {edge} references a vertex '{endpoint.id}' that is not the "
                    f"instance stored in the graph"
                )

        source = self.add_or_get_vertex(edge.from_vertex)
        self.add_or_get_vertex(edge.to_vertex)
        stored_edge = source.add_edge(edge)
        if stored_edge is edge:
            logger.debug(f"Added edge {edge}")
        return stored_edge

    def add_edges(self, *edges: Edge) -> int:
        """
        Add every edge that is not present yet.

        Returns:
            int: The number of edges actually added
        """
        added = 0
        for edge in edges:
            is_new = edge.from_vertex.find_edge(edge) is None
            self.add_or_get_edge(edge)
            if is_new:
                added += 1
        return added

    def get_num_vertices(self) -> int:
        """Get the total number of vertices in the graph."""
        return len(self._vertices)

    def get_num_edges(self) -> int:
        """Get the total number of edges in the graph."""
        return sum(vertex.out_degree for vertex in self._vertices.values())

    def get_edges(self) -> Iterator[Edge]:
        """Get all edges in the graph."""
        for vertex in self._vertices.values():
            yield from vertex.edges

    def has_edge(self, edge: Edge) -> bool:
        """Check if ``edge`` is stored under its source vertex in this graph."""
        source = self._vertices.get(edge.from_vertex.id)
        return source is edge.from_vertex and source.find_edge(edge) is edge

    def remove_unconnected_vertices(self) -> int:
        """
        Remove vertices without outgoing edges that no edge points to.

        The candidate set is computed in full before anything is removed, so
        dropping one vertex never changes the outcome for another.

        Returns:
            int: The number of vertices removed
        """
        unconnected: Set[str] = {
            vertex_id for vertex_id, vertex in self._vertices.items() if not vertex.out_degree
        }
        unconnected.difference_update(edge.to_vertex.id for edge in self.get_edges())
        for vertex_id in unconnected:
            del self._vertices[vertex_id]
        if unconnected:
            logger.debug(f"Removed {len(unconnected)} unconnected vertices")
        return len(unconnected)

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices

    def __iter__(self) -> Iterator[Vertex]:
        return iter(list(self._vertices.values()))

    def __str__(self) -> str:
        lines = []
        for vertex in self._vertices.values():
            targets = ", ".join(edge.to_vertex.id for edge in vertex.edges)
            lines.append(f"{vertex.id}: [{targets}]")
        return "{ " + ",\n  ".join(lines) + "\n}"
