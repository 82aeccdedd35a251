import pytest

from spanning_tree.exceptions import VertexNotFoundError
from spanning_tree.utils import Edge, Graph, is_spanning_tree, swap, total_weight


def test_from_edges_builds_symmetric_adjacency():
    graph = Graph.from_edges([0, 1, 2, 3], [(0, 1, 4), Edge(1, 2, 2.5)])
    assert graph.edges == [Edge(0, 1, 4), Edge(1, 2, 2.5)]
    assert graph.adjacency == {
        0: [(1, 4)],
        1: [(0, 4), (2, 2.5)],
        2: [(1, 2.5)],
        3: [],
    }
    assert graph.neighbors(3) == []
    assert graph.neighbors(99) == []
    assert len(graph) == 4


def test_from_edges_rejects_unknown_endpoint():
    with pytest.raises(VertexNotFoundError) as excinfo:
        Graph.from_edges([0, 1], [(0, 5, 1)])
    assert excinfo.value.vertex == 5
    assert "5" in str(excinfo.value)


def test_edge_endpoints_ignore_direction():
    assert Edge(1, 2, 3).endpoints() == Edge(2, 1, 3).endpoints()


def test_swap_and_total_weight():
    items = [1, 2, 3]
    swap(items, 0, 2)
    assert items == [3, 2, 1]
    assert total_weight([Edge(0, 1, 1.5), Edge(1, 2, 2)]) == 3.5
    assert total_weight([]) == 0


def test_is_spanning_tree():
    graph = Graph.from_edges(range(3), [(0, 1, 1), (1, 2, 1), (0, 2, 1)])
    assert is_spanning_tree(graph, [Edge(0, 1, 1), Edge(1, 2, 1)])
    assert not is_spanning_tree(graph, [Edge(0, 1, 1)])
    assert not is_spanning_tree(graph, [Edge(0, 1, 1), Edge(1, 0, 1)])
    assert not is_spanning_tree(graph, [Edge(0, 1, 1), Edge(1, 9, 1)])
    assert is_spanning_tree(Graph.from_edges([], []), [])
    assert is_spanning_tree(Graph.from_edges([0], []), [])
