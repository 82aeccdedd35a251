"""
最小生成树算法性能基准测试系统

生成随机的完全图和稀疏图，分别计时 Kruskal 与 Prim，
校验结果是否为生成树并比较两者的总权重。
"""

import argparse
import json
import logging
import statistics
import time
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from ..graph.advanced.mst import kruskal_mst, prim_mst
from ..utils import Edge, Graph, is_spanning_tree, total_weight

# 低于该耗时（毫秒）时认为两者快到无法准确比较
MEASUREMENT_FLOOR_MS = 0.001


@dataclass
class BenchmarkCase:
    """单个基准测试用例"""
    name: str
    kind: str  # "complete" 或 "sparse"
    vertices: int
    edge_factor: float = 2.0


@dataclass
class BenchmarkConfig:
    """基准测试配置"""
    cases: List[BenchmarkCase]
    iterations: int = 1
    warmup_iterations: int = 1
    seed: Optional[int] = None
    tolerance: float = 0.01  # 权重比较的绝对误差
    results_dir: Optional[str] = None

    @classmethod
    def default(cls, **overrides) -> "BenchmarkConfig":
        """完全图 10/50/100 与稀疏图 100/500/1000 六个标准用例"""
        cases = [
            BenchmarkCase("Small Complete Graph", "complete", 10),
            BenchmarkCase("Medium Complete Graph", "complete", 50),
            BenchmarkCase("Large Complete Graph", "complete", 100),
            BenchmarkCase("Small Sparse Graph", "sparse", 100, 1.5),
            BenchmarkCase("Medium Sparse Graph", "sparse", 500, 2.0),
            BenchmarkCase("Large Sparse Graph", "sparse", 1000, 2.0),
        ]
        return cls(cases=cases, **overrides)


@dataclass
class BenchmarkCaseResult:
    """单个用例的对比结果，耗时单位为毫秒"""
    name: str
    vertices: int
    edges: int
    kruskal_time: float
    prim_time: float
    kruskal_weight: float
    prim_weight: float
    kruskal_valid: bool
    prim_valid: bool
    winner: str
    speedup: float
    weights_match: bool
    too_fast_to_measure: bool = False
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())


class GraphGenerator:
    """随机图生成器，边权为 1 到 100 的整数"""

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def _weight(self) -> int:
        return int(self.rng.integers(1, 101))

    def complete_graph(self, n: int) -> Graph:
        """生成完全图：任意两个顶点之间都有一条边"""
        edges = [
            Edge(i, j, self._weight())
            for i in range(n)
            for j in range(i + 1, n)
        ]
        return Graph.from_edges(range(n), edges)

    def sparse_graph(self, n: int, edge_factor: float = 2.0) -> Graph:
        """
        生成稀疏图

        先随机生成一棵生成树保证连通，再追加 ``floor(n * edge_factor)``
        次随机边（跳过自环，允许重边）。
        """
        edges: List[Edge] = []
        for i in range(1, n):
            parent = int(self.rng.integers(0, i))
            edges.append(Edge(parent, i, self._weight()))

        for _ in range(int(n * edge_factor)):
            u = int(self.rng.integers(0, n))
            v = int(self.rng.integers(0, n))
            if u != v:
                edges.append(Edge(u, v, self._weight()))

        return Graph.from_edges(range(n), edges)

    def generate(self, case: BenchmarkCase) -> Graph:
        if case.kind == "complete":
            return self.complete_graph(case.vertices)
        if case.kind == "sparse":
            return self.sparse_graph(case.vertices, case.edge_factor)
        raise ValueError(f"未知的图类型: {case.kind}")


class MSTBenchmark:
    """
    Kruskal 与 Prim 的对比基准测试

    每个用例先预热，再多次计时取平均值，最后校验两棵树并比较权重。
    """

    def __init__(self, config: Optional[BenchmarkConfig] = None):
        self.config = config or BenchmarkConfig.default()
        self.logger = logging.getLogger(__name__)
        self.generator = GraphGenerator(self.config.seed)

    def run(self) -> List[BenchmarkCaseResult]:
        """运行全部用例并返回结果"""
        previous_level = self.logger.level
        handler = self._setup_logging()
        try:
            self.logger.info("=== MST Algorithm Benchmark ===")
            results = [self.run_case(case) for case in self.config.cases]
            self._save_results(results)
            self.logger.info("=== Benchmark Complete ===")
            return results
        finally:
            if handler is not None:
                self.logger.removeHandler(handler)
                self.logger.setLevel(previous_level)
                handler.close()

    def run_case(self, case: BenchmarkCase) -> BenchmarkCaseResult:
        """运行单个用例"""
        graph = self.generator.generate(case)
        self.logger.info(
            f"{case.name}: vertices={len(graph.vertices)}, edges={len(graph.edges)}"
        )

        for _ in range(self.config.warmup_iterations):
            kruskal_mst(graph)
            prim_mst(graph)

        kruskal_time, kruskal_edges = self._measure(kruskal_mst, graph)
        prim_time, prim_edges = self._measure(prim_mst, graph)

        kruskal_weight = total_weight(kruskal_edges)
        prim_weight = total_weight(prim_edges)
        kruskal_valid = is_spanning_tree(graph, kruskal_edges)
        prim_valid = is_spanning_tree(graph, prim_edges)

        for name, valid, edges in (("Kruskal", kruskal_valid, kruskal_edges),
                                   ("Prim", prim_valid, prim_edges)):
            if not valid:
                self.logger.warning(
                    f"{name}: expected {len(graph.vertices) - 1} edges, got {len(edges)}"
                )

        winner = "Kruskal" if kruskal_time < prim_time else "Prim"
        max_time = max(kruskal_time, prim_time, np.finfo(float).eps)
        speedup = abs(kruskal_time - prim_time) / max_time * 100
        weights_match = abs(kruskal_weight - prim_weight) <= self.config.tolerance

        result = BenchmarkCaseResult(
            name=case.name,
            vertices=len(graph.vertices),
            edges=len(graph.edges),
            kruskal_time=kruskal_time,
            prim_time=prim_time,
            kruskal_weight=kruskal_weight,
            prim_weight=prim_weight,
            kruskal_valid=kruskal_valid,
            prim_valid=prim_valid,
            winner=winner,
            speedup=speedup,
            weights_match=weights_match,
            too_fast_to_measure=max_time < MEASUREMENT_FLOOR_MS,
        )
        self._report(result)
        return result

    def _measure(self, algorithm: Callable[[Graph], List[Edge]],
                 graph: Graph) -> Tuple[float, List[Edge]]:
        """返回平均耗时（毫秒）和最后一次的结果"""
        timings = []
        edges: List[Edge] = []
        for _ in range(max(1, self.config.iterations)):
            start_time = time.perf_counter()
            edges = algorithm(graph)
            timings.append((time.perf_counter() - start_time) * 1000)
        return statistics.mean(timings), edges

    def _report(self, result: BenchmarkCaseResult) -> None:
        self.logger.info(
            f"  Kruskal: {result.kruskal_time:.3f}ms (weight: {result.kruskal_weight}) "
            f"{'Yes' if result.kruskal_valid else 'No'}"
        )
        self.logger.info(
            f"  Prim:    {result.prim_time:.3f}ms (weight: {result.prim_weight}) "
            f"{'Yes' if result.prim_valid else 'No'}"
        )
        if result.too_fast_to_measure:
            self.logger.info(f"  Winner: {result.winner} (both too fast to measure accurately)")
        else:
            self.logger.info(f"  Winner: {result.winner} ({result.speedup:.1f}% faster)")
        if not result.weights_match:
            self.logger.warning(
                f"  Weight mismatch! Kruskal: {result.kruskal_weight}, Prim: {result.prim_weight}"
            )

    def _setup_logging(self) -> Optional[logging.Handler]:
        """配置了结果目录时，把日志同时写入 benchmark.log"""
        if not self.config.results_dir:
            return None
        results_dir = Path(self.config.results_dir)
        results_dir.mkdir(parents=True, exist_ok=True)

        handler = logging.FileHandler(results_dir / "benchmark.log", encoding="utf-8")
        handler.setFormatter(
            logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        )
        self.logger.addHandler(handler)
        self.logger.setLevel(logging.INFO)
        return handler

    def _save_results(self, results: List[BenchmarkCaseResult]) -> Optional[Path]:
        """保存 JSON 报告，未配置结果目录时跳过"""
        if not self.config.results_dir:
            return None
        report_file = (
            Path(self.config.results_dir)
            / f"mst_benchmark_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
        )
        report = {
            "timestamp": datetime.now().isoformat(),
            "config": asdict(self.config),
            "results": [asdict(result) for result in results],
        }
        with open(report_file, 'w', encoding='utf-8') as f:
            json.dump(report, f, indent=2, ensure_ascii=False)
        self.logger.info(f"基准测试报告已生成: {report_file}")
        return report_file


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Compare Kruskal and Prim MST algorithms")
    parser.add_argument("--seed", type=int, default=None, help="random seed for graph generation")
    parser.add_argument("--iterations", type=int, default=1, help="timed runs per algorithm")
    parser.add_argument("--warmup", type=int, default=1, help="warm-up runs per algorithm")
    parser.add_argument("--results-dir", default=None, help="directory for JSON report and log")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    config = BenchmarkConfig.default(
        seed=args.seed,
        iterations=args.iterations,
        warmup_iterations=args.warmup,
        results_dir=args.results_dir,
    )
    results = MSTBenchmark(config).run()
    return 0 if all(r.weights_match and r.kruskal_valid and r.prim_valid for r in results) else 1


if __name__ == "__main__":
    raise SystemExit(main())
