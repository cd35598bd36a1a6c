"""
Tests for path models, validation and search utilities.
"""

from time import time

import pytest

from pathgraph.core.config import SearchConfig
from pathgraph.core.exceptions import PathValidationError
from pathgraph.core.graph_paths import (
    Path,
    PathFinding,
    PerformanceMetrics,
    calculate_path_weight,
    intrinsic_weight,
)
from pathgraph.core.graph_paths.utils import (
    PriorityQueue,
    SearchState,
    get_edge_weight,
    is_better_cost,
)
from pathgraph.core.models import Edge, Vertex


def test_path_accessors(diamond_graph):
    """Test the sequence protocol of a path."""
    path = PathFinding.dijkstra(diamond_graph, "A", "D", intrinsic_weight)

    assert path.length == 2
    assert path[0].from_vertex.id == "A"
    assert [edge.to_vertex.id for edge in path] == ["B", "D"]
    assert path.end.id == "D"


def test_path_normalizes_containers():
    """Test that lists and sets given to a path are frozen."""
    a, b = Vertex("A"), Vertex("B")
    path = Path(start=a, edges=[Edge(a, b)], total_weight=1.0, visited={a, b})

    assert isinstance(path.edges, tuple)
    assert isinstance(path.visited, frozenset)
    with pytest.raises(AttributeError):
        path.total_weight = 5.0  # type: ignore[misc]


def test_empty_path():
    """Test a path that ends where it starts."""
    a = Vertex("A")
    path = Path(start=a, visited=frozenset({a}))

    assert path.vertices == [a]
    assert path.end is a
    assert str(path) == "Weight=0.000000 Length=1 Visited=1 (A)"


def test_validate_rejects_wrong_start(diamond_graph):
    """Test that the first edge must leave the start vertex."""
    b = diamond_graph.get_vertex_by_id("B")
    a = diamond_graph.get_vertex_by_id("A")
    path = Path(start=a, edges=b.edges, total_weight=1.0)

    with pytest.raises(PathValidationError):
        path.validate(diamond_graph)


def test_validate_rejects_discontinuity(diamond_graph):
    """Test that consecutive edges must share a vertex."""
    a = diamond_graph.get_vertex_by_id("A")
    c = diamond_graph.get_vertex_by_id("C")
    to_b = next(edge for edge in a.edges if edge.to_vertex.id == "B")
    path = Path(start=a, edges=(to_b,) + c.edges, total_weight=2.0)

    with pytest.raises(PathValidationError):
        path.validate(diamond_graph)


def test_validate_rejects_foreign_edges(diamond_graph):
    """Test that every edge must be stored in the graph."""
    a = diamond_graph.get_vertex_by_id("A")
    d = diamond_graph.get_vertex_by_id("D")
    path = Path(start=a, edges=(Edge(a, d),), total_weight=1.0)

    with pytest.raises(PathValidationError):
        path.validate(diamond_graph)


def test_validate_rejects_weight_mismatch(diamond_graph):
    """Test weight consistency checking."""
    path = PathFinding.bfs(diamond_graph, "A", "D")
    wrong = Path(start=path.start, edges=path.edges, total_weight=42.0)

    path.validate(diamond_graph)
    with pytest.raises(PathValidationError):
        wrong.validate(diamond_graph, intrinsic_weight)


def test_calculate_path_weight():
    """Test summing a weight function over edges."""
    a, b, c = Vertex("A"), Vertex("B"), Vertex("C")
    edges = [Edge(a, b, weight=1.5), Edge(b, c, weight=2)]

    assert calculate_path_weight(edges, intrinsic_weight) == pytest.approx(3.5)
    assert calculate_path_weight([], intrinsic_weight) == 0.0


def test_get_edge_weight():
    """Test weight function checks."""
    a = Vertex("A")
    edge = Edge(a, a, weight=3)

    assert get_edge_weight(edge, intrinsic_weight) == 3.0
    assert isinstance(get_edge_weight(edge, intrinsic_weight), float)
    with pytest.raises(ValueError):
        get_edge_weight(edge, lambda e: float("nan"))
    with pytest.raises(ValueError):
        get_edge_weight(edge, lambda e: None)
    with pytest.raises(ValueError):
        get_edge_weight(edge, lambda e: True)


def test_is_better_cost():
    """Test strict cost comparison and infinity."""
    assert is_better_cost(1.0, 2.0)
    assert not is_better_cost(2.0, 1.0)
    assert is_better_cost(1.0, 1.0 + 1e-12)
    assert not is_better_cost(1.0, 1.0)
    assert is_better_cost(5.0, float("inf"))
    assert not is_better_cost(float("inf"), float("inf"))


def test_priority_queue_orders_and_keeps_duplicates():
    """Test the heap ordering, insertion-order ties and duplicate entries."""
    queue: PriorityQueue[str] = PriorityQueue()
    queue.push("b", 2.0)
    queue.push("a", 1.0)
    queue.push("b", 1.0)
    queue.push("c", 1.0)

    assert len(queue) == 4
    assert [queue.pop() for _ in range(4)] == [(1.0, "a"), (1.0, "b"), (1.0, "c"), (2.0, "b")]
    assert queue.empty()


def test_search_state_path():
    """Test reconstructing edges from a chain of search states."""
    a, b, c = Vertex("A"), Vertex("B"), Vertex("C")
    ab, bc = Edge(a, b), Edge(b, c)
    root = SearchState(a, 0.0, None, None)
    middle = SearchState(b, 1.0, ab, root)
    leaf = SearchState(c, 2.0, bc, middle)

    assert leaf.get_path() == [ab, bc]
    assert root.get_path() == []


def test_performance_metrics():
    """Test metrics validation and duration."""
    metrics = PerformanceMetrics(operation="bfs", start_time=100.0)
    assert metrics.duration == 0.0

    metrics.end_time = 100.25
    assert metrics.duration == pytest.approx(250.0)
    assert metrics.to_dict()["duration_ms"] == pytest.approx(250.0)

    with pytest.raises(ValueError):
        PerformanceMetrics(operation=" ", start_time=time())
    with pytest.raises(ValueError):
        PerformanceMetrics(operation="bfs", start_time=10.0, end_time=5.0)


def test_search_config_validation():
    """Test configuration defaults and checks."""
    config = SearchConfig()

    assert not config.track_memory
    assert not config.validate_results
    with pytest.raises(ValueError):
        SearchConfig(memory_check_interval=-1)
