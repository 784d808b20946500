"""
Union-find (disjoint-set) data structures.

Five interchangeable variants of one contract (find, merge, count) over
the elements 0 through n - 1:

    QuickFindUF                         - direct set identifiers
    QuickUnionUF                        - parent forest
    QuickUnionPathCompressionUF         - parent forest, compressed on find
    WeightedQuickUnionUF                - union by size
    WeightedQuickUnionPathCompressionUF - union by size, compressed on find

Main entry point: make_union_find()
"""

from .base import TreeUnionFind, UnionFind
from .quick_find import QuickFindUF
from .quick_union import QuickUnionPathCompressionUF, QuickUnionUF
from .types import Connection, Element, OutOfRange, Universe
from .variants import Variant, make_union_find
from .weighted import WeightedQuickUnionPathCompressionUF, WeightedQuickUnionUF

__all__ = [
    # Main entry point
    "make_union_find",
    "Variant",
    # Contract
    "UnionFind",
    "TreeUnionFind",
    # Variants
    "QuickFindUF",
    "QuickUnionUF",
    "QuickUnionPathCompressionUF",
    "WeightedQuickUnionUF",
    "WeightedQuickUnionPathCompressionUF",
    # Types
    "Connection",
    "Element",
    "OutOfRange",
    "Universe",
]
