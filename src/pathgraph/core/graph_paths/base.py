import logging
from abc import ABC, abstractmethod
from time import time
from typing import Any, Optional, Tuple

from ..config import DEFAULT_CONFIG, SearchConfig
from ..graph import Graph
from ..models import Vertex
from .models import Path, PerformanceMetrics
from .utils import MemoryTracker

logger = logging.getLogger(__name__)


class PathFinder(ABC):
    """Abstract base class for path finding algorithms."""

    operation = "path_search"
    weighted = False

    def __init__(self, graph: Graph, config: Optional[SearchConfig] = None):
        """Initialize finder with graph."""
        self.graph = graph
        self.config = config or DEFAULT_CONFIG
        self.memory_tracker = MemoryTracker()
        self.last_metrics: Optional[PerformanceMetrics] = None

    def resolve_vertices(self, start_id: str, target_id: str) -> Optional[Tuple[Vertex, Vertex]]:
        """Look up both endpoints; None if either is missing."""
        start = self.graph.get_vertex_by_id(start_id)
        target = self.graph.get_vertex_by_id(target_id)
        if start is None or target is None:
            return None
        return start, target

    def find_path(self, start_id: str, target_id: str, **kwargs: Any) -> Optional[Path]:
        """
        Find a path from ``start_id`` to ``target_id``.

        Returns None when either id is unknown or no path exists. A start equal to
        the target yields a zero-edge path whose visited set is just the start.
        """
        metrics = PerformanceMetrics(operation=self.operation, start_time=time())
        self.memory_tracker = MemoryTracker(
            self.config.track_memory, self.config.memory_check_interval
        )
        path: Optional[Path] = None
        try:
            endpoints = self.resolve_vertices(start_id, target_id)
            if endpoints is None:
                logger.debug(f"{self.operation}: unknown endpoint {start_id!r} or {target_id!r}")
                return None

            start, target = endpoints
            if start is target:
                metrics.nodes_explored = 1
                path = Path(start=start, visited=frozenset({start}))
            else:
                path = self._search(start, target, metrics, **kwargs)

            if path is not None and self.config.validate_results:
                path.validate(self.graph, kwargs.get("weight_func") if self.weighted else None)
            return path

        finally:
            metrics.end_time = time()
            metrics.path_length = len(path) if path is not None else None
            metrics.max_memory_used = self.memory_tracker.peak_memory
            self.last_metrics = metrics
            logger.debug(
                f"{self.operation} {start_id} -> {target_id}: "
                f"{'found' if path is not None else 'no path'}, "
                f"explored {metrics.nodes_explored} vertices in {metrics.duration:.2f}ms"
            )

    @abstractmethod
    def _search(
        self, start: Vertex, target: Vertex, metrics: PerformanceMetrics, **kwargs: Any
    ) -> Optional[Path]:
        """Search between two distinct resolved vertices."""
        pass
