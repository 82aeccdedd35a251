import logging

from spanning_tree.graph.advanced.mst_comparison import compare_msts
from spanning_tree.utils import Graph


def _build_graph() -> Graph:
    return Graph.from_edges(
        [0, 1, 2, 3],
        [(0, 1, 1), (1, 2, 2), (2, 3, 3), (0, 3, 10), (0, 2, 5)],
    )


def test_compare_connected_graph() -> None:
    result = compare_msts(_build_graph())
    assert result.kruskal_weight == result.prim_weight == 6
    assert result.weight_difference == 0
    assert result.weights_match
    assert result.same_edge_set
    assert result.kruskal_valid and result.prim_valid


def test_compare_equal_weights_agree_on_weight() -> None:
    graph = Graph.from_edges([0, 1, 2], [(1, 2, 1), (0, 2, 1), (0, 1, 1)])
    result = compare_msts(graph)
    assert result.weights_match
    assert result.kruskal_valid and result.prim_valid
    assert result.kruskal_weight == result.prim_weight == 2


def test_compare_disconnected_graph() -> None:
    graph = Graph.from_edges(range(4), [(0, 1, 2), (2, 3, 5)])
    result = compare_msts(graph)
    assert result.weights_match
    assert not result.kruskal_valid
    assert not result.prim_valid


def test_mismatch_is_logged(caplog) -> None:
    with caplog.at_level(logging.WARNING):
        result = compare_msts(_build_graph(), tolerance=-1)
    assert not result.weights_match
    assert "Weight mismatch" in caplog.text
