"""Side-by-side comparison of Kruskal and Prim results on the same graph."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, Hashable, List, Set

from ...utils import Edge, Graph, is_spanning_tree, total_weight
from .mst import KruskalMST, PrimMST

logger = logging.getLogger(__name__)


@dataclass
class MSTComparison:
    """两种最小生成树算法在同一张图上的对比结果。"""

    kruskal_edges: List[Edge]
    prim_edges: List[Edge]
    kruskal_weight: float
    prim_weight: float
    kruskal_valid: bool
    prim_valid: bool
    weights_match: bool
    same_edge_set: bool

    @property
    def weight_difference(self) -> float:
        return abs(self.kruskal_weight - self.prim_weight)


def edge_set(edges: List[Edge]) -> Set[FrozenSet[Hashable]]:
    """把边列表转换为与方向无关的端点集合，用于比较两棵树是否相同。"""
    return {edge.endpoints() for edge in edges}


def compare_msts(graph: Graph, tolerance: float = 0.01) -> MSTComparison:
    """分别运行 Kruskal 和 Prim 算法并比较结果。

    最小生成树的总权重是唯一的，因此对连通图两者的权重必须一致；
    只有在所有边权互不相同时，两者选出的边集合才保证相同。

    参数:
        graph: 带权无向图
        tolerance: 判断权重一致时允许的绝对误差

    返回:
        MSTComparison: 对比结果

    异常:
        VertexNotFoundError: 图结构不合法
    """
    kruskal_edges = KruskalMST().execute(graph)
    prim_edges = PrimMST().execute(graph)

    kruskal_weight = total_weight(kruskal_edges)
    prim_weight = total_weight(prim_edges)
    weights_match = abs(kruskal_weight - prim_weight) <= tolerance

    if not weights_match:
        logger.warning(
            "Weight mismatch! Kruskal: %s, Prim: %s", kruskal_weight, prim_weight
        )

    return MSTComparison(
        kruskal_edges=kruskal_edges,
        prim_edges=prim_edges,
        kruskal_weight=kruskal_weight,
        prim_weight=prim_weight,
        kruskal_valid=is_spanning_tree(graph, kruskal_edges),
        prim_valid=is_spanning_tree(graph, prim_edges),
        weights_match=weights_match,
        same_edge_set=edge_set(kruskal_edges) == edge_set(prim_edges),
    )
