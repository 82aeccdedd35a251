"""Array-backed binary min-heap used by Prim's algorithm."""
from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

from spanning_tree.base import Algorithm
from spanning_tree.utils import swap

T = TypeVar("T")


class PriorityQueue(Algorithm, Generic[T]):
    """基于二叉最小堆的优先队列。

    元素需要提供数值类型的 ``priority`` 属性，``priority`` 越小越先出队。
    堆存放在一个连续列表中：下标 i 的父节点为 ``(i - 1) // 2``，
    左右子节点为 ``2i + 1`` 和 ``2i + 2``。

    主要操作：
        - enqueue: 插入元素并上浮
        - dequeue: 取出最小元素并将新的堆顶下沉
        - peek: 查看最小元素但不移除
        - is_empty / size: 常数时间查询

    时间复杂度:
        - enqueue / dequeue: O(log n)
        - peek / is_empty / size: O(1)
    空间复杂度: O(n)

    注意:
        堆不是稳定的，优先级相同的元素出队顺序没有保证。
    """

    def __init__(self) -> None:
        """初始化空堆。"""
        self.heap: List[T] = []

    def enqueue(self, item: T) -> None:
        """将元素加入堆尾，然后上浮到合适的位置。"""
        self.heap.append(item)
        self._bubble_up(len(self.heap) - 1)

    def dequeue(self) -> Optional[T]:
        """移除并返回优先级最小的元素。

        返回:
            Optional[T]: 堆顶元素，堆为空时返回 None
        """
        if not self.heap:
            return None
        if len(self.heap) == 1:
            return self.heap.pop()

        swap(self.heap, 0, len(self.heap) - 1)
        minimum = self.heap.pop()
        self._bubble_down(0)
        return minimum

    def peek(self) -> Optional[T]:
        """返回堆顶元素但不移除，堆为空时返回 None。"""
        return self.heap[0] if self.heap else None

    def is_empty(self) -> bool:
        return not self.heap

    def size(self) -> int:
        return len(self.heap)

    def __len__(self) -> int:
        return len(self.heap)

    def execute(self, *args, **kwargs) -> List[T]:
        """返回底层堆数组的快照（按堆顺序，而非完全有序）。"""
        return list(self.heap)

    def _bubble_up(self, index: int) -> None:
        """子节点优先级严格小于父节点时持续交换。"""
        while index > 0:
            parent = (index - 1) // 2
            if self.heap[index].priority < self.heap[parent].priority:
                swap(self.heap, index, parent)
                index = parent
            else:
                break

    def _bubble_down(self, index: int) -> None:
        """与优先级严格更小的子节点交换，直到堆性质恢复。"""
        n = len(self.heap)
        while True:
            left = 2 * index + 1
            right = 2 * index + 2
            smallest = index

            if left < n and self.heap[left].priority < self.heap[smallest].priority:
                smallest = left
            if right < n and self.heap[right].priority < self.heap[smallest].priority:
                smallest = right

            if smallest == index:
                break
            swap(self.heap, index, smallest)
            index = smallest
