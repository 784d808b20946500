"""Tests for utils/benchmark.py"""

import io

from rich.console import Console

from unionfind import Variant
from utils.benchmark import render_results, run_benchmark, time_variant
from utils.generators import chain_connections


class TestBenchmark:
    def test_variants_agree_on_count(self):
        results = run_benchmark(200, 300, seed=7)
        assert [result.variant for result in results] == list(Variant)
        assert len({result.count for result in results}) == 1
        assert all(result.pairs == 300 for result in results)
        assert all(result.seconds >= 0 for result in results)

    def test_heights(self):
        pairs = chain_connections(64)
        assert time_variant(Variant.QUICK_UNION, 64, pairs).height == 63
        assert time_variant(Variant.WEIGHTED, 64, pairs).height == 1
        assert time_variant(Variant.QUICK_FIND, 64, pairs).height == 0

    def test_render(self):
        results = run_benchmark(20, 10, [Variant.WEIGHTED_PC], seed=1)
        console = Console(file=io.StringIO(), width=120)
        render_results(results, console)
        output = console.file.getvalue()
        assert "weighted-pc" in output
        assert "Components" in output
