"""
Abstract union-find contract.

A union-find (disjoint-set) tracks a partition of the elements 0 through
n - 1. Initially every element is its own set. Supported operations:

- find(p): canonical element of the set containing p
- merge(p, q): replace the sets of p and q by their union
- count(): number of sets

The canonical element of a set changes only when the set itself changes
during a merge; it never changes during find or count.

Subclasses provide the representation-specific `_find` and `_merge`. The
base class owns element validation and the set counter, so every variant
fails the same way and no failed call mutates state.
"""

import logging
from abc import ABC, abstractmethod

import numpy as np

from .types import Element, OutOfRange, Universe

logger = logging.getLogger(__name__)


class UnionFind(ABC):
    """Base class of all union-find variants."""

    def __init__(self, n: int) -> None:
        self._universe = Universe(n)
        self._count = self._universe.n
        logger.debug(f"{type(self).__name__}: {self.n} singleton sets")

    @property
    def n(self) -> int:
        """Size of the universe."""
        return self._universe.n

    def __len__(self) -> int:
        return self._universe.n

    def __contains__(self, element: object) -> bool:
        return element in self._universe

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={self.n}, count={self._count})"

    def count(self) -> int:
        """Returns the number of sets."""
        return self._count

    def find(self, p: Element) -> int:
        """
        Returns the canonical element of the set containing p.

        Raises:
            OutOfRange: if p is not in [0, n).
        """
        return self._find(self._universe.validate(p))

    def merge(self, p: Element, q: Element) -> None:
        """
        Merges the set containing p with the set containing q.

        Both elements are validated before anything is touched.

        Raises:
            OutOfRange: if p or q is not in [0, n).
        """
        p = self._universe.validate(p)
        q = self._universe.validate(q)
        if self._merge(p, q):
            self._count -= 1

    union = merge

    def connected(self, p: Element, q: Element) -> bool:
        """Returns True if p and q are in the same set."""
        p = self._universe.validate(p)
        q = self._universe.validate(q)
        return self._find(p) == self._find(q)

    def try_find(self, p: Element) -> int | OutOfRange:
        """Like `find`, but returns the OutOfRange error instead of raising it."""
        checked = self._universe.check(p)
        if isinstance(checked, OutOfRange):
            return checked
        return self._find(checked)

    def try_merge(self, p: Element, q: Element) -> OutOfRange | None:
        """Like `merge`, but returns the OutOfRange error instead of raising it."""
        checked_p = self._universe.check(p)
        if isinstance(checked_p, OutOfRange):
            return checked_p
        checked_q = self._universe.check(q)
        if isinstance(checked_q, OutOfRange):
            return checked_q
        if self._merge(checked_p, checked_q):
            self._count -= 1
        return None

    def components(self) -> dict[int, frozenset[int]]:
        """
        Get all disjoint sets.

        Returns:
            Mapping from each set's canonical element to its members.
        """
        sets: dict[int, set[int]] = {}
        for element in range(self.n):
            sets.setdefault(self._find(element), set()).add(element)
        return {root: frozenset(members) for root, members in sets.items()}

    @abstractmethod
    def _find(self, p: int) -> int:
        """Canonical element of a validated p."""
        ...

    @abstractmethod
    def _merge(self, p: int, q: int) -> bool:
        """Merges validated p and q. Returns True if two sets became one."""
        ...


class TreeUnionFind(UnionFind):
    """
    Union-find stored as a forest in a parent arena.

    parent[i] is the parent of i; roots are their own parent. The root of a
    tree is the canonical element of the corresponding set.
    """

    def __init__(self, n: int) -> None:
        super().__init__(n)
        self._parent = np.arange(self.n, dtype=np.intp)

    def parents(self) -> np.ndarray:
        """Read-only view of the parent arena."""
        view = self._parent.view()
        view.flags.writeable = False
        return view

    def _root(self, p: int) -> int:
        parent = self._parent
        while p != parent[p]:
            p = int(parent[p])
        return p

    def _compress(self, p: int, root: int) -> None:
        """Points every element on the path from p directly at root."""
        parent = self._parent
        while p != root:
            next_p = int(parent[p])
            parent[p] = root
            p = next_p
