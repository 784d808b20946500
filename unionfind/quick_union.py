"""
Quick-union union-find, with and without path compression.

Both variants attach the root of p under the root of q on merge(p, q);
nothing bounds the height of the trees, so a sequence of merges
(0, 1), (1, 2), ... builds a single chain of height n - 1.

Complexity:
- QuickUnionUF: find and merge O(n) worst case
- QuickUnionPathCompressionUF: find and merge O(log n) amortized
"""

from typing_extensions import override

from .base import TreeUnionFind


class QuickUnionUF(TreeUnionFind):
    """Unweighted quick-union. find never mutates the forest."""

    @override
    def _find(self, p: int) -> int:
        return self._root(p)

    @override
    def _merge(self, p: int, q: int) -> bool:
        root_p = self._find(p)
        root_q = self._find(q)
        if root_p == root_q:
            return False

        self._parent[root_p] = root_q
        return True


class QuickUnionPathCompressionUF(QuickUnionUF):
    """
    Unweighted quick-union with full path compression.

    find walks to the root, then walks the same path again pointing every
    visited element at the root. Roots are never rewritten, so the results
    of find are identical to QuickUnionUF for the same merges.
    """

    @override
    def _find(self, p: int) -> int:
        root = self._root(p)
        self._compress(p, root)
        return root
