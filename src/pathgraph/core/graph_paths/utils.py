"""
Utility functions and helpers for path finding operations.
"""

import math
import os
import time
from dataclasses import dataclass
from heapq import heappop, heappush
from typing import Generic, List, Optional, Tuple, TypeVar

import psutil

from ..models import Edge, Vertex
from .types import WeightFunc

T = TypeVar("T")


def get_edge_weight(edge: Edge, weight_func: WeightFunc) -> float:
    """
    Get weight of an edge using a weight function.

    Non-negative weights are a precondition of the weighted searches and are not
    checked here. Only values that cannot be ordered are rejected.

    Raises:
        ValueError: If the weight is not a number or is NaN
    """
    weight = weight_func(edge)
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise ValueError(f"Weight of edge {edge} must be numeric, got {weight!r}")
    if math.isnan(weight):
        raise ValueError(f"Weight of edge {edge} is NaN")
    return float(weight)


def is_better_cost(new_cost: float, old_cost: float) -> bool:
    """Return True if ``new_cost`` is strictly lower than ``old_cost``."""
    return new_cost < old_cost


@dataclass
class SearchState:
    """
    Progress record of a vertex during a weighted search.

    Attributes:
        vertex: The vertex this record tracks
        weight: Cumulative weight of the best known route from the start
        prev_edge: Edge from the predecessor's vertex to this vertex
        prev_state: Record of the predecessor
    """

    __slots__ = ("vertex", "weight", "prev_edge", "prev_state")

    vertex: Vertex
    weight: float
    prev_edge: Optional[Edge]
    prev_state: Optional["SearchState"]

    def get_path(self) -> List[Edge]:
        """Reconstruct the edges leading to this state."""
        path = []
        current: Optional[SearchState] = self
        while current is not None and current.prev_edge is not None:
            path.append(current.prev_edge)
            current = current.prev_state
        path.reverse()
        return path


class PriorityQueue(Generic[T]):
    """
    Binary-heap min-priority queue that tolerates duplicate items.

    There is no decrease-key: an improved item is pushed again and callers skip
    the stale copies when they surface. Equal priorities pop in insertion order.
    """

    def __init__(self) -> None:
        self._queue: List[Tuple[float, int, T]] = []
        self._counter = 0  # Unique counter to break ties

    def push(self, item: T, priority: float) -> None:
        """Add ``item`` with ``priority``."""
        heappush(self._queue, (priority, self._counter, item))
        self._counter += 1

    def pop(self) -> Tuple[float, T]:
        """Remove and return the lowest ``(priority, item)`` pair."""
        priority, _, item = heappop(self._queue)
        return priority, item

    def empty(self) -> bool:
        """Return True if the queue is empty."""
        return not self._queue

    def __len__(self) -> int:
        """Return the number of entries, stale ones included."""
        return len(self._queue)


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss


class MemoryTracker:
    """Samples process memory during a search to report its peak."""

    def __init__(self, enabled: bool = False, check_interval: float = 0.1):
        self.enabled = enabled
        self._check_interval = check_interval
        self._peak_memory = get_memory_usage() if enabled else 0
        self._last_check = time.monotonic()

    def check_memory(self) -> None:
        """Sample memory usage if enabled and the check interval has elapsed."""
        if not self.enabled:
            return
        current_time = time.monotonic()
        if current_time - self._last_check < self._check_interval:
            return
        self._last_check = current_time
        self._peak_memory = max(self._peak_memory, get_memory_usage())

    @property
    def peak_memory(self) -> Optional[int]:
        """Peak memory usage in bytes, or None when tracking is disabled."""
        if not self.enabled:
            return None
        self._peak_memory = max(self._peak_memory, get_memory_usage())
        return self._peak_memory
