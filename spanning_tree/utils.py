"""最小生成树计算使用的数据模型和辅助函数。

本模块定义了边、图以及 Prim 算法的队列元素，
并提供交换元素、计算总权重和校验生成树的工具函数。
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import (
    Any,
    Dict,
    FrozenSet,
    Hashable,
    Iterable,
    List,
    NamedTuple,
    Sequence,
    Tuple,
)

from .data_structures.basic.disjoint_set import DisjointSet
from .exceptions import VertexNotFoundError

VertexId = Hashable
Adjacency = Dict[VertexId, List[Tuple[VertexId, float]]]


def swap(items: List[Any], i: int, j: int) -> None:
    """在列表中原地交换两个元素的位置。

    二叉堆上浮和下沉时使用。

    时间复杂度: O(1)
    """
    items[i], items[j] = items[j], items[i]


class Edge(NamedTuple):
    """无向带权边，``(u, v)`` 与 ``(v, u)`` 表示同一条边。"""

    u: VertexId
    v: VertexId
    weight: float

    def endpoints(self) -> FrozenSet[VertexId]:
        """返回与方向无关的端点集合，便于比较两棵生成树。"""
        return frozenset((self.u, self.v))


class PrimQueueItem(NamedTuple):
    """Prim 算法中的候选跨越边。

    属性:
        priority: 边的权重
        vertex: 尚未加入生成树的端点
        parent: 已经在生成树中的端点
    """

    priority: float
    vertex: VertexId
    parent: VertexId


@dataclass
class Graph:
    """带权无向图，同时保存顶点列表、边列表和邻接表。

    不变量:
        - ``adjacency`` 是 ``edges`` 的对称闭包：对每条边 (u, v, w)，
          ``adjacency[u]`` 含有 (v, w)，``adjacency[v]`` 含有 (u, w)
        - 边和邻接表中出现的每个顶点都必须出现在 ``vertices`` 中

    两个最小生成树算法都只读取图，不会修改它。
    """

    vertices: List[VertexId]
    edges: List[Edge]
    adjacency: Adjacency = field(default_factory=dict)

    @classmethod
    def from_edges(
        cls,
        vertices: Iterable[VertexId],
        edges: Iterable[Sequence[Any]],
    ) -> "Graph":
        """根据顶点和边构建图，并生成对称的邻接表。

        参数:
            vertices: 顶点序列，顺序即 ``Graph.vertices`` 的顺序
            edges: 边序列，元素可以是 ``Edge`` 或 ``(u, v, weight)`` 元组

        返回:
            Graph: 每个顶点都有邻接表条目（可能为空）的图

        异常:
            VertexNotFoundError: 边的端点不在顶点列表中
        """
        vertex_list = list(vertices)
        adjacency: Adjacency = {vertex: [] for vertex in vertex_list}
        edge_list: List[Edge] = []

        for raw in edges:
            edge = raw if isinstance(raw, Edge) else Edge(*raw)
            for endpoint in (edge.u, edge.v):
                if endpoint not in adjacency:
                    raise VertexNotFoundError(endpoint, "vertex list")
            adjacency[edge.u].append((edge.v, edge.weight))
            adjacency[edge.v].append((edge.u, edge.weight))
            edge_list.append(edge)

        return cls(vertices=vertex_list, edges=edge_list, adjacency=adjacency)

    def neighbors(self, vertex: VertexId) -> List[Tuple[VertexId, float]]:
        """返回顶点的 ``(邻居, 权重)`` 列表，顶点不存在时返回空列表。"""
        return self.adjacency.get(vertex, [])

    def __len__(self) -> int:
        return len(self.vertices)


def total_weight(edges: Iterable[Edge]) -> float:
    """返回边集合的总权重。"""
    return sum(edge.weight for edge in edges)


def is_spanning_tree(graph: Graph, edges: Sequence[Edge]) -> bool:
    """检查 ``edges`` 是否构成 ``graph`` 的一棵生成树。

    除了边数必须等于 ``|V| - 1`` 之外，还要求这些边不成环，
    并且所有端点都属于图的顶点集合。边数正确且无环时，
    这些边必然连通所有顶点。

    参数:
        graph: 原始图
        edges: 最小生成树算法返回的边

    返回:
        bool: 是生成树返回 True，否则返回 False
    """
    if not graph.vertices:
        return not edges
    if len(edges) != len(graph.vertices) - 1:
        return False

    components = DisjointSet(graph.vertices)
    for edge in edges:
        if edge.u not in components or edge.v not in components:
            return False
        if not components.union(edge.u, edge.v):
            return False
    return True
