"""
Quick-find union-find.

Each element stores the identifier of its set directly, so find is a single
lookup and merge relabels a whole set.

Complexity: construction O(n), find O(1), merge O(n), count O(1).
"""

import numpy as np
from typing_extensions import override

from .base import UnionFind


class QuickFindUF(UnionFind):
    """
    Union-find with eager set identifiers.

    On merge(p, q) every element of p's set takes q's set identifier, so the
    canonical element of the merged set is the one q's set already had.
    """

    def __init__(self, n: int) -> None:
        super().__init__(n)
        # _id[i] = set identifier of i
        self._id = np.arange(self.n, dtype=np.intp)

    def ids(self) -> np.ndarray:
        """Read-only view of the set identifiers."""
        view = self._id.view()
        view.flags.writeable = False
        return view

    @override
    def _find(self, p: int) -> int:
        return int(self._id[p])

    @override
    def _merge(self, p: int, q: int) -> bool:
        p_id = self._id[p]
        q_id = self._id[q]
        if p_id == q_id:
            return False

        self._id[self._id == p_id] = q_id
        return True
