"""
Edge model for the graph engine.

An edge is a directed connection between two vertices. It never owns its
endpoints; the graph does. Its ``weight`` is intrinsic data only: every weighted
search takes a caller-supplied weight function, so one edge type can serve
differently weighted queries.
"""

from dataclasses import dataclass
from typing import Hashable, Optional, Tuple

from ..exceptions import ValidationError
from .vertex import Vertex


@dataclass(eq=False)
class Edge:
    """
    Base edge model representing a directed connection.

    Two edges are equal when they leave the same vertex instance, enter the same
    vertex instance and carry the same label. Distinct labels allow parallel
    edges between one pair of vertices.

    Attributes:
        from_vertex (Vertex): Source vertex
        to_vertex (Vertex): Target vertex
        weight (float): Intrinsic weight, read by weight functions that want it
        label (Optional[str]): Distinguishes parallel edges
    """

    from_vertex: Vertex
    to_vertex: Vertex
    weight: float = 1.0
    label: Optional[str] = None

    def __post_init__(self):
        """Validate edge after initialization."""
        if not isinstance(self.from_vertex, Vertex):
            raise ValidationError("from_vertex must be a Vertex")
        if not isinstance(self.to_vertex, Vertex):
            raise ValidationError("to_vertex must be a Vertex")
        if isinstance(self.weight, bool) or not isinstance(self.weight, (int, float)):
            raise ValidationError("weight must be a numeric value")

    @property
    def key(self) -> Tuple[Hashable, ...]:
        """Identity used to deduplicate edges within a vertex."""
        return (id(self.from_vertex), id(self.to_vertex), self.label)

    @property
    def is_self_loop(self) -> bool:
        return self.from_vertex is self.to_vertex

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (
            self.from_vertex is other.from_vertex
            and self.to_vertex is other.to_vertex
            and self.label == other.label
        )

    def __hash__(self) -> int:
        return hash((self.from_vertex.id, self.to_vertex.id, self.label))

    def __str__(self) -> str:
        arrow = f"-[{self.label}]->" if self.label is not None else "->"
        return f"{self.from_vertex.id}{arrow}{self.to_vertex.id}"
