"""
Timing of the union-find variants on a shared input.
"""

import logging
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from rich.console import Console
from rich.table import Table

from unionfind import Connection, Variant, make_union_find

from .analysis import height
from .generators import random_connections

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BenchmarkResult:
    variant: Variant
    n: int
    pairs: int
    seconds: float
    count: int
    height: int


def time_variant(
    variant: Variant, n: int, pairs: Sequence[Connection]
) -> BenchmarkResult:
    """Run the connect loop (find both, merge if apart) and time it."""
    uf = make_union_find(variant, n)
    start = time.perf_counter()
    for p, q in pairs:
        if uf.find(p) == uf.find(q):
            continue
        uf.merge(p, q)
    seconds = time.perf_counter() - start
    return BenchmarkResult(variant, n, len(pairs), seconds, uf.count(), height(uf))


def run_benchmark(
    n: int,
    m: int,
    variants: Iterable[Variant] = tuple(Variant),
    seed: int | None = None,
) -> list[BenchmarkResult]:
    pairs = random_connections(n, m, seed)
    results = []
    for variant in variants:
        result = time_variant(variant, n, pairs)
        logger.info(f"{variant.value}: {result.seconds:.4f}s")
        results.append(result)
    return results


def render_results(
    results: Iterable[BenchmarkResult], console: Console | None = None
) -> None:
    table = Table(title="Union-find variants")
    table.add_column("Variant")
    table.add_column("n", justify="right")
    table.add_column("Pairs", justify="right")
    table.add_column("Seconds", justify="right")
    table.add_column("Components", justify="right")
    table.add_column("Height", justify="right")
    for result in results:
        table.add_row(
            result.variant.value,
            str(result.n),
            str(result.pairs),
            f"{result.seconds:.4f}",
            str(result.count),
            str(result.height),
        )
    (console or Console()).print(table)
