"""Disjoint-set (union-find) structure used by Kruskal's algorithm."""
from __future__ import annotations

from typing import Dict, Hashable, Iterable, List

from spanning_tree.base import Algorithm
from spanning_tree.exceptions import VertexNotFoundError


class DisjointSet(Algorithm):
    """带路径压缩和按秩合并的并查集实现。

    并查集维护顶点的一个划分，支持快速判断两个顶点是否属于同一集合，
    以及将两个集合合并。Kruskal 算法用它来检测加入一条边是否会形成环。

    主要操作：
        - find_set: 查找顶点所在集合的代表元（根）
        - union: 合并两个顶点所在的集合
        - connected: 判断两个顶点是否已经连通

    时间复杂度:
        - find_set / union: 均摊 O(α(n))，α 为反阿克曼函数
    空间复杂度: O(n)

    实现说明:
        使用字典保存父节点和秩，顶点可以是任意可哈希的标识符，
        不要求是连续整数。路径压缩采用迭代实现，避免长链导致的递归过深。
    """

    def __init__(self, vertices: Iterable[Hashable]) -> None:
        """以每个顶点为单元素集合初始化并查集，秩均为 0。"""
        self.parent: Dict[Hashable, Hashable] = {}
        self.rank: Dict[Hashable, int] = {}
        for vertex in vertices:
            self.parent[vertex] = vertex
            self.rank[vertex] = 0

    def find_set(self, x: Hashable) -> Hashable:
        """返回 ``x`` 所在集合的代表元，并压缩查找路径。

        参数:
            x: 要查找的顶点

        返回:
            Hashable: 集合的根顶点

        异常:
            VertexNotFoundError: ``x`` 不在初始化时的顶点列表中
        """
        if x not in self.parent:
            raise VertexNotFoundError(x, "disjoint set")

        root = x
        while self.parent[root] != root:
            root = self.parent[root]

        # 第二遍：让路径上的每个节点直接指向根
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]

        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """按秩合并 ``a`` 与 ``b`` 所在的集合。

        返回:
            bool: 两者原本属于不同集合并被合并时返回 True；
                已经在同一集合中（对 Kruskal 而言意味着成环）返回 False

        异常:
            VertexNotFoundError: 任一顶点未注册
        """
        root_a = self.find_set(a)
        root_b = self.find_set(b)

        if root_a == root_b:
            return False

        rank_a = self.rank[root_a]
        rank_b = self.rank[root_b]
        if rank_a < rank_b:
            self.parent[root_a] = root_b
        elif rank_a > rank_b:
            self.parent[root_b] = root_a
        else:
            self.parent[root_b] = root_a
            self.rank[root_a] = rank_a + 1
        return True

    def connected(self, a: Hashable, b: Hashable) -> bool:
        """判断两个顶点是否属于同一集合。"""
        return self.find_set(a) == self.find_set(b)

    def __contains__(self, x: object) -> bool:
        return x in self.parent

    def __len__(self) -> int:
        return len(self.parent)

    def execute(self, *args, **kwargs) -> Dict[Hashable, List[Hashable]]:
        """返回当前划分的快照。

        返回:
            Dict[Hashable, List[Hashable]]: 代表元到集合成员的映射，
                成员按顶点注册顺序排列
        """
        groups: Dict[Hashable, List[Hashable]] = {}
        for vertex in list(self.parent):
            groups.setdefault(self.find_set(vertex), []).append(vertex)
        return groups
