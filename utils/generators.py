"""
Generators of connection sequences.

- random_connections: uniformly random pairs
- chain_connections: (0, 1), (1, 2), ... the worst case of quick-union
- binomial_connections: merges of equal-size sets, the worst case of
  weighted quick-union
"""

from collections.abc import Iterable
from typing import TextIO

import numpy as np

from unionfind import Connection


def random_connections(n: int, m: int, seed: int | None = None) -> list[Connection]:
    """m pairs drawn uniformly from [0, n) x [0, n)."""
    if m < 0:
        raise ValueError(f"number of pairs must be non-negative, got {m}")
    if m == 0:
        return []
    if n <= 0:
        raise ValueError("cannot draw pairs from an empty universe")
    rng = np.random.default_rng(seed)
    pairs = rng.integers(0, n, size=(m, 2))
    return [(int(p), int(q)) for p, q in pairs]


def chain_connections(n: int) -> list[Connection]:
    return [(i, i + 1) for i in range(n - 1)]


def binomial_connections(n: int) -> list[Connection]:
    """
    Pair up blocks of equal size, doubling the block size each round.

    Round s merges i with i + s for every i multiple of 2s, so each merge
    joins two sets of s elements (when n is a power of two).
    """
    pairs: list[Connection] = []
    step = 1
    while step < n:
        pairs.extend((i, i + step) for i in range(0, n - step, 2 * step))
        step *= 2
    return pairs


def write_connections(stream: TextIO, n: int, pairs: Iterable[Connection]) -> None:
    """Write n then one pair per line."""
    stream.write(f"{n}\n")
    for p, q in pairs:
        stream.write(f"{p} {q}\n")
