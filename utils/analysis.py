"""
Structural analysis of union-find instances.

Nothing here mutates the structure it inspects: depths are computed on the
parent arena directly instead of through find, which would compress paths.
"""

import logging
from collections.abc import Iterable

import numpy as np
from scipy.sparse import coo_matrix
from scipy.sparse.csgraph import connected_components

from unionfind import Connection, TreeUnionFind, UnionFind

logger = logging.getLogger(__name__)

type Partition = frozenset[frozenset[int]]


def depths(uf: UnionFind) -> np.ndarray:
    """
    Number of hops from every element to its root.

    Variants without a forest (quick-find) have every element at depth 0.
    """
    if not isinstance(uf, TreeUnionFind):
        return np.zeros(uf.n, dtype=np.intp)

    parent = uf.parents()
    depth = np.zeros(uf.n, dtype=np.intp)
    current = np.arange(uf.n, dtype=np.intp)
    # Advance every element still below a root by one hop per round
    below_root = current != parent[current]
    while below_root.any():
        depth[below_root] += 1
        current = parent[current]
        below_root = current != parent[current]
    return depth


def height(uf: UnionFind) -> int:
    """Length of the longest path to a root."""
    if uf.n == 0:
        return 0
    return int(depths(uf).max())


def partition(uf: UnionFind) -> Partition:
    """The sets of the union-find, independent of representatives."""
    return frozenset(uf.components().values())


def labels_to_partition(labels: np.ndarray) -> Partition:
    sets: dict[int, set[int]] = {}
    for element, label in enumerate(labels):
        sets.setdefault(int(label), set()).add(element)
    return frozenset(frozenset(members) for members in sets.values())


def reference_partition(n: int, pairs: Iterable[Connection]) -> Partition:
    """
    Partition of 0..n-1 induced by pairs, computed as the connected
    components of the undirected graph whose edges are the pairs.
    """
    edges = np.array(list(pairs), dtype=np.intp).reshape(-1, 2)
    if n == 0:
        return frozenset()
    graph = coo_matrix(
        (np.ones(len(edges), dtype=np.int32), (edges[:, 0], edges[:, 1])),
        shape=(n, n),
    )
    ncomponents, labels = connected_components(graph, directed=False)
    logger.debug(f"Reference partition: {ncomponents} components over {n} elements")
    return labels_to_partition(labels)
