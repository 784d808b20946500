"""
Shared types for the union-find variants.

Types:
    Element     - An element of the universe, a dense integer in [0, n)
    Connection  - A pair of elements fed to a merge
    OutOfRange  - Raised (or returned) when an element is outside [0, n)
    Universe    - Validation of element arguments against a fixed size
"""

import operator
from dataclasses import dataclass

type Element = int
type Connection = tuple[Element, Element]


class OutOfRange(IndexError):
    """An element argument lies outside the universe [low, high]."""

    def __init__(self, value: int, low: int, high: int) -> None:
        super().__init__(f"index {value} is not between {low} and {high}")
        self.value = value
        self.low = low
        self.high = high

    def __reduce__(self):
        return OutOfRange, (self.value, self.low, self.high)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OutOfRange):
            return NotImplemented
        return (self.value, self.low, self.high) == (
            other.value,
            other.low,
            other.high,
        )

    def __hash__(self) -> int:
        return hash((self.value, self.low, self.high))


@dataclass(frozen=True, slots=True)
class Universe:
    """
    The fixed set of elements 0 through n - 1.

    Every public operation of a union-find goes through `validate` before
    touching its arena, so a failed call never mutates anything.
    """

    n: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "n", operator.index(self.n))
        if self.n < 0:
            raise ValueError(f"universe size must be non-negative, got {self.n}")

    def __contains__(self, element: object) -> bool:
        try:
            value = operator.index(element)  # type: ignore[arg-type]
        except TypeError:
            return False
        return 0 <= value < self.n

    def check(self, element: Element) -> int | OutOfRange:
        """Returns the element as a plain int, or the error describing it."""
        value = operator.index(element)
        if value < 0 or value >= self.n:
            return OutOfRange(value, 0, self.n - 1)
        return value

    def validate(self, element: Element) -> int:
        result = self.check(element)
        if isinstance(result, OutOfRange):
            raise result
        return result
