"""
最小生成树算法管理器

按名称调度 Kruskal 与 Prim，记录每次计算的耗时和规模，
并可以在线程池中同时运行两种算法以便对比。
每次调用都新建算法实例，并查集和优先队列不会跨调用共享；
输入图只被读取，多个线程可以同时使用同一张图。
"""

import logging
import statistics
import time
from collections import deque
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Any, Deque, Dict, List, Optional, Type

from .base import Algorithm
from .graph.advanced.mst import KruskalMST, PrimMST
from .utils import Edge, Graph


class AlgorithmCategory(Enum):
    """已注册算法的类别"""
    MINIMUM_SPANNING_TREE = "minimum_spanning_tree"


@dataclass
class AlgorithmMetrics:
    """单次计算的记录"""
    execution_time: float
    success: bool = True
    error_message: Optional[str] = None
    input_size: Optional[int] = None  # |V| + |E|
    result_size: Optional[int] = None  # 返回的边数


@dataclass
class AlgorithmConfig:
    """每个已注册算法的运行配置"""
    enable_metrics: bool = True
    max_history: int = 1000


@dataclass
class _Registration:
    algorithm_class: Type[Algorithm]
    category: AlgorithmCategory
    config: AlgorithmConfig


class AlgorithmRegistry:
    """名称到算法类的映射，默认包含 kruskal_mst 与 prim_mst"""

    def __init__(self):
        self._entries: Dict[str, _Registration] = {}
        self.register("kruskal_mst", KruskalMST, AlgorithmCategory.MINIMUM_SPANNING_TREE)
        self.register("prim_mst", PrimMST, AlgorithmCategory.MINIMUM_SPANNING_TREE)

    def register(self, name: str, algorithm_class: Type[Algorithm],
                 category: AlgorithmCategory, config: Optional[AlgorithmConfig] = None) -> None:
        """
        登记一个算法类，同名时覆盖

        Raises:
            ValueError: ``algorithm_class`` 不是 Algorithm 的子类
        """
        if not (isinstance(algorithm_class, type) and issubclass(algorithm_class, Algorithm)):
            raise ValueError(f"{algorithm_class!r} 不是 Algorithm 的子类，无法注册为 {name}")
        self._entries[name] = _Registration(algorithm_class, category, config or AlgorithmConfig())

    def get_algorithm(self, name: str) -> Type[Algorithm]:
        return self._lookup(name).algorithm_class

    def get_config(self, name: str) -> AlgorithmConfig:
        return self._lookup(name).config

    def list_algorithms(self, category: Optional[AlgorithmCategory] = None) -> List[str]:
        return [
            name for name, entry in self._entries.items()
            if category is None or entry.category == category
        ]

    def _lookup(self, name: str) -> _Registration:
        try:
            return self._entries[name]
        except KeyError:
            raise KeyError(f"未注册的算法: {name}") from None


class AlgorithmManager:
    """
    在同一处执行并度量已注册的最小生成树算法

    计算是确定性的：失败时记录一条失败指标、写 ERROR 日志并原样抛出，
    不做重试。可用作上下文管理器，退出时关闭线程池。
    """

    def __init__(self, max_workers: int = 2):
        self.logger = logging.getLogger(__name__)
        self.registry = AlgorithmRegistry()
        self.executor = ThreadPoolExecutor(max_workers=max_workers)
        self._history: Dict[str, Deque[AlgorithmMetrics]] = {}

    def __enter__(self) -> "AlgorithmManager":
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()

    def execute_algorithm(self, algorithm_name: str, graph: Graph, **kwargs) -> List[Edge]:
        """
        在 ``graph`` 上运行指定算法

        Args:
            algorithm_name: 注册名，如 ``"kruskal_mst"``
            graph: 带权无向图
            **kwargs: 传给 ``execute`` 的额外参数

        Returns:
            生成树（或森林）的边

        Raises:
            KeyError: 算法未注册
            VertexNotFoundError: 图结构不合法
        """
        algorithm_class = self.registry.get_algorithm(algorithm_name)
        config = self.registry.get_config(algorithm_name)
        input_size = len(graph.vertices) + len(graph.edges)

        start_time = time.perf_counter()
        try:
            edges = algorithm_class().execute(graph, **kwargs)
        except Exception as e:
            elapsed = time.perf_counter() - start_time
            if config.enable_metrics:
                self._record(algorithm_name, config, AlgorithmMetrics(
                    execution_time=elapsed, success=False,
                    error_message=str(e), input_size=input_size,
                ))
            self.logger.error(f"{algorithm_name} 在 {len(graph.vertices)} 个顶点的图上失败: {e}")
            raise

        elapsed = time.perf_counter() - start_time
        if config.enable_metrics:
            self._record(algorithm_name, config, AlgorithmMetrics(
                execution_time=elapsed, input_size=input_size, result_size=len(edges),
            ))
        self.logger.info(f"{algorithm_name} 返回 {len(edges)} 条边，耗时 {elapsed:.4f}s")
        return edges

    def execute_algorithm_async(self, algorithm_name: str, graph: Graph, **kwargs) -> Future:
        """把 ``execute_algorithm`` 提交到线程池"""
        return self.executor.submit(self.execute_algorithm, algorithm_name, graph, **kwargs)

    def compare_async(self, graph: Graph) -> Dict[str, List[Edge]]:
        """
        同时运行 Kruskal 与 Prim

        Returns:
            {"kruskal_mst": 边列表, "prim_mst": 边列表}

        Raises:
            VertexNotFoundError: 图结构不合法
        """
        futures = {
            name: self.execute_algorithm_async(name, graph)
            for name in ("kruskal_mst", "prim_mst")
        }
        return {name: future.result() for name, future in futures.items()}

    def get_metrics(self, algorithm_name: str) -> List[AlgorithmMetrics]:
        return list(self._history.get(algorithm_name, ()))

    def get_performance_summary(self, algorithm_name: str) -> Dict[str, Any]:
        """汇总成功率与耗时分布，没有记录时返回空字典"""
        metrics = self.get_metrics(algorithm_name)
        if not metrics:
            return {}

        times = [m.execution_time for m in metrics if m.success]
        summary: Dict[str, Any] = {
            "total_executions": len(metrics),
            "successful_executions": len(times),
            "success_rate": len(times) / len(metrics),
        }
        if times:
            summary.update(
                mean_execution_time=statistics.mean(times),
                median_execution_time=statistics.median(times),
                min_execution_time=min(times),
                max_execution_time=max(times),
            )
        return summary

    def _record(self, algorithm_name: str, config: AlgorithmConfig,
                metrics: AlgorithmMetrics) -> None:
        history = self._history.get(algorithm_name)
        if history is None or history.maxlen != config.max_history:
            history = deque(history or (), maxlen=config.max_history)
            self._history[algorithm_name] = history
        history.append(metrics)

    def shutdown(self) -> None:
        self.executor.shutdown(wait=True)
