"""
Weighted quick-union (union by size), with and without path compression.

Each root records the number of elements in its tree. merge attaches the
root of the smaller tree under the root of the larger one; on a tie the
root of q goes under the root of p. An element's depth only grows when its
tree is absorbed by one at least as large, so its tree at least doubles
each time and no tree is taller than floor(log2(n)).

Complexity:
- WeightedQuickUnionUF: find and merge O(log n) worst case
- WeightedQuickUnionPathCompressionUF: O(α(n)) amortized, where α is the
  inverse Ackermann function (effectively constant)
"""

import numpy as np
from typing_extensions import override

from .base import TreeUnionFind
from .types import Element


class WeightedQuickUnionUF(TreeUnionFind):
    """Union by size, find never mutates the forest."""

    def __init__(self, n: int) -> None:
        super().__init__(n)
        # _size[i] = number of elements in the tree rooted at i
        # Note: stale once i stops being a root
        self._size = np.ones(self.n, dtype=np.intp)

    def component_size(self, p: Element) -> int:
        """Number of elements in the set containing p."""
        return int(self._size[self.find(p)])

    @override
    def _find(self, p: int) -> int:
        return self._root(p)

    @override
    def _merge(self, p: int, q: int) -> bool:
        root_p = self._find(p)
        root_q = self._find(q)
        if root_p == root_q:
            return False

        # Make smaller root point to larger one
        if self._size[root_p] < self._size[root_q]:
            self._parent[root_p] = root_q
            self._size[root_q] += self._size[root_p]
        else:
            self._parent[root_q] = root_p
            self._size[root_p] += self._size[root_q]
        return True


class WeightedQuickUnionPathCompressionUF(WeightedQuickUnionUF):
    """
    Union by size with full path compression.

    Compression only redirects non-root parent pointers: it never changes
    the identity of a root nor the size it records.
    """

    @override
    def _find(self, p: int) -> int:
        root = self._root(p)
        self._compress(p, root)
        return root
