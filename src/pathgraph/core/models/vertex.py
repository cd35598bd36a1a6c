"""
Vertex model for the graph engine.

A vertex is identified by a string id and owns the collection of its outgoing
edges. Vertices compare by instance: two vertices with the same id are only the
same graph member when they are the same object.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Hashable, Optional, Tuple

from ..exceptions import InvariantViolationError, ValidationError

if TYPE_CHECKING:
    from .edge import Edge


@dataclass(eq=False)
class Vertex:
    """
    Base vertex model.

    Applications subclass ``Vertex`` to attach domain data, e.g. coordinates used by
    an A* heuristic. Subclasses must keep ``eq=False`` so identity semantics hold.

    Attributes:
        id (str): Unique identifier within a graph
    """

    id: str
    _edges: Dict[Tuple[Hashable, ...], "Edge"] = field(
        default_factory=dict, init=False, repr=False
    )

    def __post_init__(self):
        """Validate vertex after initialization."""
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValidationError("vertex id must be a non-empty string")

    @property
    def edges(self) -> Tuple["Edge", ...]:
        """Outgoing edges in insertion order."""
        return tuple(self._edges.values())

    @property
    def out_degree(self) -> int:
        """Number of outgoing edges."""
        return len(self._edges)

    def find_edge(self, edge: "Edge") -> Optional["Edge"]:
        """Return the stored outgoing edge equal to ``edge``, if any."""
        return self._edges.get(edge.key)

    def add_edge(self, edge: "Edge") -> "Edge":
        """
        Store an outgoing edge, or return the equal edge already stored.

        Raises:
            InvariantViolationError: If the edge does not leave this vertex
        """
        if edge.from_vertex is not self:
            raise InvariantViolationError(
                f"Edge {edge} is not an outgoing edge of vertex '{self.id}'"
            )
        return self._edges.setdefault(edge.key, edge)

    def __str__(self) -> str:
        return self.id
