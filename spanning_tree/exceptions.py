"""最小生成树计算中的异常定义。

所有输入校验类错误都会立即抛给调用方，算法不会返回部分结果。
图不连通不被视为错误：算法只返回少于 ``|V| - 1`` 条边的森林。
"""

from __future__ import annotations

from typing import Hashable


class SpanningTreeError(Exception):
    """本项目自定义异常的基类。"""


class VertexNotFoundError(SpanningTreeError, KeyError):
    """边或邻接表引用了顶点列表之外的顶点。

    这表示传入的 ``Graph`` 结构不合法（违反了顶点/邻接表不变量），
    属于致命错误。
    """

    def __init__(self, vertex: Hashable, context: str = "graph") -> None:
        self.vertex = vertex
        self.context = context
        super().__init__(f"Vertex {vertex!r} not found in {context}")

    def __str__(self) -> str:
        return self.args[0]
