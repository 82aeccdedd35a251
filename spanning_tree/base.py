from abc import ABC, abstractmethod
from typing import Any


class Algorithm(ABC):
    """所有算法与数据结构的基类。

    最小生成树算法（Kruskal、Prim）以及它们依赖的并查集、优先队列
    都继承这个类并实现 execute 方法，以便由算法管理器统一调度。

    子类必须实现:
        execute: 执行算法并返回结果的抽象方法
    """

    @abstractmethod
    def execute(self, *args, **kwargs) -> Any:
        """执行算法并返回结果。

        参数:
            *args: 位置参数，具体参数取决于算法实现
            **kwargs: 关键字参数，具体参数取决于算法实现

        返回:
            Any: 算法执行的结果，类型取决于具体算法
        """
        raise NotImplementedError
