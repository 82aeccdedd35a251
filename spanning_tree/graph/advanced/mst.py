"""Minimum Spanning Tree algorithms: Kruskal's and Prim's methods."""
from __future__ import annotations

import logging
from typing import Dict, Hashable, List

from ...base import Algorithm
from ...data_structures.basic.disjoint_set import DisjointSet
from ...data_structures.basic.priority_queue import PriorityQueue
from ...exceptions import VertexNotFoundError
from ...utils import Edge, Graph, PrimQueueItem

logger = logging.getLogger(__name__)


class KruskalMST(Algorithm):
    """基于 Kruskal 算法的最小生成树实现。

    将所有边按权重升序排序，依次尝试加入生成树；
    借助并查集判断边的两个端点是否已经连通，连通则跳过（会形成环）。
    如果图不连通，返回的是最小生成森林，边数少于 ``|V| - 1``，不抛出异常。
    """

    def execute(self, graph: Graph) -> List[Edge]:
        """计算图的最小生成树。

        参数:
            graph: 带权无向图，算法不会修改它

        返回:
            List[Edge]: 按接受顺序（即权重升序）排列的生成树边

        异常:
            VertexNotFoundError: 边引用了 ``graph.vertices`` 之外的顶点

        时间复杂度: O(E log E) 排序 + O(E α(V)) 并查集操作
        """
        mst_edges: List[Edge] = []
        if not graph.vertices:
            return mst_edges

        components = DisjointSet(graph.vertices)
        target = len(graph.vertices) - 1

        # sorted() 是稳定排序，等权边按原始顺序决出
        edges = sorted(graph.edges, key=lambda e: e.weight)

        for edge in edges:
            # 先合并再判断是否完成，确保每条被检查的边都经过顶点校验
            if components.union(edge.u, edge.v):
                mst_edges.append(edge)
            if len(mst_edges) == target:
                break

        logger.debug(
            "Kruskal accepted %d of %d edges for %d vertices",
            len(mst_edges),
            len(graph.edges),
            len(graph.vertices),
        )
        return mst_edges


class PrimMST(Algorithm):
    """基于 Prim 算法的最小生成树实现。

    从 ``graph.vertices[0]`` 出发逐步扩展生成树，使用二叉最小堆
    每次取出跨越树边界的最小权重边。同一顶点可能被多次入队，
    过期的候选边在出队时才被丢弃（惰性删除），因此不需要 decrease-key。

    参数:
        forest: 图不连通时，是否在队列耗尽后从下一个未访问顶点重新开始，
            从而得到最小生成森林。为 False 时只返回起点所在连通分量的生成树。
    """

    def __init__(self, forest: bool = True) -> None:
        self.forest = forest

    def execute(self, graph: Graph) -> List[Edge]:
        """计算图的最小生成树。

        参数:
            graph: 带权无向图，算法不会修改它

        返回:
            List[Edge]: 按顶点被吸收进生成树的顺序排列的边，
                每条边为 ``Edge(parent, vertex, weight)``

        异常:
            VertexNotFoundError: 邻接表引用了 ``graph.vertices`` 之外的顶点

        时间复杂度: O(E log E)
        """
        mst_edges: List[Edge] = []
        if not graph.vertices or not graph.edges:
            return mst_edges

        vertex_index: Dict[Hashable, int] = {
            vertex: i for i, vertex in enumerate(graph.vertices)
        }
        visited = [False] * len(graph.vertices)
        queue: PriorityQueue[PrimQueueItem] = PriorityQueue()
        target = len(graph.vertices) - 1

        def index_of(vertex: Hashable) -> int:
            try:
                return vertex_index[vertex]
            except KeyError:
                raise VertexNotFoundError(vertex, "vertex index") from None

        def enqueue_neighbors(source: Hashable) -> None:
            for neighbor, weight in graph.neighbors(source):
                if not visited[index_of(neighbor)]:
                    queue.enqueue(PrimQueueItem(weight, neighbor, source))

        for root in graph.vertices:
            if visited[index_of(root)]:
                continue
            visited[index_of(root)] = True
            enqueue_neighbors(root)

            while len(mst_edges) < target and not queue.is_empty():
                item = queue.dequeue()
                position = index_of(item.vertex)
                if visited[position]:
                    continue

                visited[position] = True
                mst_edges.append(Edge(item.parent, item.vertex, item.priority))
                enqueue_neighbors(item.vertex)

            if not self.forest or len(mst_edges) >= target:
                break

        logger.debug(
            "Prim absorbed %d of %d vertices",
            sum(visited),
            len(graph.vertices),
        )
        return mst_edges


def kruskal_mst(graph: Graph) -> List[Edge]:
    """便捷函数：使用 Kruskal 算法计算最小生成树。"""
    return KruskalMST().execute(graph)


def prim_mst(graph: Graph, forest: bool = True) -> List[Edge]:
    """便捷函数：使用 Prim 算法计算最小生成树。"""
    return PrimMST(forest=forest).execute(graph)
