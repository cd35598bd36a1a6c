"""Core graph functionality."""

from .config import DEFAULT_CONFIG, SearchConfig
from .exceptions import (
    GraphOperationError,
    InvariantViolationError,
    PathValidationError,
    ValidationError,
)
from .models import Edge, Vertex
from .graph import Graph

__all__ = [
    "DEFAULT_CONFIG",
    "Edge",
    "Graph",
    "GraphOperationError",
    "InvariantViolationError",
    "PathValidationError",
    "SearchConfig",
    "ValidationError",
    "Vertex",
]
