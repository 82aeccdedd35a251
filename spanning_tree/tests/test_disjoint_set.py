import pytest

from spanning_tree.data_structures.basic.disjoint_set import DisjointSet
from spanning_tree.exceptions import VertexNotFoundError


def test_singletons_on_creation():
    ds = DisjointSet([0, 1, 2])
    assert len(ds) == 3
    assert ds.find_set(0) == 0
    assert ds.find_set(2) == 2
    assert all(rank == 0 for rank in ds.rank.values())


def test_union_then_find():
    ds = DisjointSet(["a", "b", "c"])
    assert ds.union("a", "b")
    assert ds.find_set("a") == ds.find_set("b")
    assert ds.connected("a", "b")
    assert not ds.connected("a", "c")


def test_second_union_reports_cycle():
    ds = DisjointSet([1, 2, 3])
    assert ds.union(1, 2)
    assert ds.union(2, 3)
    assert not ds.union(1, 2)
    assert not ds.union(3, 1)


def test_union_by_rank():
    ds = DisjointSet([0, 1, 2])
    ds.union(0, 1)
    # tie: first root becomes parent and gains rank
    assert ds.parent[1] == 0
    assert ds.rank[0] == 1

    ds.union(2, 1)
    # lower-rank root is attached under the higher-rank one
    assert ds.parent[2] == 0
    assert ds.rank[0] == 1


def test_path_compression_flattens_chain():
    n = 5000
    ds = DisjointSet(range(n))
    # build a long chain directly, deeper than the default recursion limit
    for i in range(1, n):
        ds.parent[i] = i - 1
    assert ds.find_set(n - 1) == 0
    assert all(ds.parent[i] == 0 for i in range(n))


def test_unknown_vertex_is_an_error():
    ds = DisjointSet([0, 1])
    with pytest.raises(VertexNotFoundError):
        ds.find_set(7)
    with pytest.raises(VertexNotFoundError):
        ds.union(0, 7)
    with pytest.raises(KeyError):
        ds.union(7, 0)


def test_execute_returns_partition():
    ds = DisjointSet([0, 1, 2, 3])
    ds.union(0, 2)
    ds.union(1, 3)
    groups = ds.execute()
    assert sorted(sorted(members) for members in groups.values()) == [[0, 2], [1, 3]]
    assert 3 in ds
    assert 9 not in ds
