"""
Registry of the union-find variants.
"""

from enum import Enum

from .base import UnionFind
from .quick_find import QuickFindUF
from .quick_union import QuickUnionPathCompressionUF, QuickUnionUF
from .weighted import WeightedQuickUnionPathCompressionUF, WeightedQuickUnionUF


class Variant(Enum):
    """Available union-find implementations."""

    QUICK_FIND = "quick-find"
    QUICK_UNION = "quick-union"
    QUICK_UNION_PC = "quick-union-pc"  # Path compression
    WEIGHTED = "weighted"  # Union by size
    WEIGHTED_PC = "weighted-pc"  # Union by size and path compression

    @property
    def implementation(self) -> type[UnionFind]:
        return _IMPLEMENTATIONS[self]

    @property
    def compresses(self) -> bool:
        return self in (Variant.QUICK_UNION_PC, Variant.WEIGHTED_PC)

    @property
    def weighted(self) -> bool:
        return self in (Variant.WEIGHTED, Variant.WEIGHTED_PC)


_IMPLEMENTATIONS: dict[Variant, type[UnionFind]] = {
    Variant.QUICK_FIND: QuickFindUF,
    Variant.QUICK_UNION: QuickUnionUF,
    Variant.QUICK_UNION_PC: QuickUnionPathCompressionUF,
    Variant.WEIGHTED: WeightedQuickUnionUF,
    Variant.WEIGHTED_PC: WeightedQuickUnionPathCompressionUF,
}


def make_union_find(variant: Variant | str, n: int) -> UnionFind:
    """
    Build a union-find over n singleton sets.

    Args:
        variant: A Variant or its name, e.g. "weighted-pc".
        n: Size of the universe.

    Raises:
        ValueError: if the variant name is unknown or n is negative.
    """
    return Variant(variant).implementation(n)
