import json
import logging

import pytest

from spanning_tree.graph.advanced.mst import kruskal_mst
from spanning_tree.performance import benchmark_system
from spanning_tree.performance.benchmark_system import (
    BenchmarkCase,
    BenchmarkConfig,
    GraphGenerator,
    MSTBenchmark,
)
from spanning_tree.utils import is_spanning_tree


def test_complete_graph_shape():
    graph = GraphGenerator(seed=0).complete_graph(6)
    assert graph.vertices == list(range(6))
    assert len(graph.edges) == 15
    assert all(1 <= edge.weight <= 100 for edge in graph.edges)
    assert all(isinstance(edge.weight, int) for edge in graph.edges)


def test_sparse_graph_is_connected():
    graph = GraphGenerator(seed=1).sparse_graph(50, 1.5)
    assert 49 <= len(graph.edges) <= 49 + 75
    assert all(edge.u != edge.v for edge in graph.edges)
    assert is_spanning_tree(graph, kruskal_mst(graph))


def test_generator_is_seeded():
    first = GraphGenerator(seed=42).sparse_graph(20)
    second = GraphGenerator(seed=42).sparse_graph(20)
    assert first.edges == second.edges


def test_unknown_graph_kind():
    with pytest.raises(ValueError):
        GraphGenerator().generate(BenchmarkCase("odd", "lattice", 4))


def test_default_config_cases():
    config = BenchmarkConfig.default(seed=3)
    assert [case.vertices for case in config.cases] == [10, 50, 100, 100, 500, 1000]
    assert config.seed == 3


def test_benchmark_run_writes_report(tmp_path):
    config = BenchmarkConfig(
        cases=[
            BenchmarkCase("tiny complete", "complete", 8),
            BenchmarkCase("tiny sparse", "sparse", 40, 1.5),
        ],
        iterations=2,
        seed=0,
        results_dir=str(tmp_path),
    )
    results = MSTBenchmark(config).run()

    assert [r.name for r in results] == ["tiny complete", "tiny sparse"]
    for result in results:
        assert result.weights_match
        assert result.kruskal_valid and result.prim_valid
        assert result.kruskal_weight == result.prim_weight
        assert result.winner in ("Kruskal", "Prim")

    reports = list(tmp_path.glob("mst_benchmark_*.json"))
    assert len(reports) == 1
    payload = json.loads(reports[0].read_text(encoding="utf-8"))
    assert len(payload["results"]) == 2
    assert (tmp_path / "benchmark.log").exists()


def test_benchmark_without_results_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = BenchmarkConfig(cases=[BenchmarkCase("c", "complete", 5)], seed=0)
    results = MSTBenchmark(config).run()
    assert len(results) == 1
    assert list(tmp_path.iterdir()) == []


def test_run_restores_logger_state(tmp_path):
    logger = logging.getLogger(benchmark_system.__name__)
    logger.setLevel(logging.WARNING)
    handlers_before = list(logger.handlers)
    try:
        config = BenchmarkConfig(
            cases=[BenchmarkCase("c", "complete", 5)], seed=0, results_dir=str(tmp_path)
        )
        MSTBenchmark(config).run()
        assert logger.level == logging.WARNING
        assert logger.handlers == handlers_before
    finally:
        logger.setLevel(logging.NOTSET)
