"""
Custom exceptions for the graph engine.

This module defines the hierarchy of custom exceptions used throughout the engine.
A search that finds nothing is not an error: it returns ``None``. Exceptions are
reserved for caller mistakes that would otherwise corrupt the graph or its results.
"""


class ValidationError(Exception):
    """
    Raised when model validation fails.

    This exception is raised when input data fails to meet the required validation
    criteria of a vertex or edge.

    Examples:
        * Empty vertex identifier
        * Edge endpoint that is not a vertex
        * Non-numeric intrinsic edge weight
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when operations on the graph structure
    encounter errors that would violate its representation invariants.
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class InvariantViolationError(GraphOperationError):
    """
    Raised when an edge would introduce a shadow vertex.

    An edge endpoint whose identifier already maps to a *different* stored
    vertex instance cannot be added: every edge must reference the exact
    vertex objects the graph owns.

    Examples:
        * ``Edge(Vertex("A"), ...)`` added after another ``Vertex("A")`` was stored
    """


class PathValidationError(Exception):
    """
    Raised when a path fails validation checks.

    This exception indicates issues such as:
    - Discontinuities in the path (vertices not properly connected)
    - A first edge that does not leave the start vertex
    - Edges that are not stored in the graph
    - Weight inconsistencies
    """
