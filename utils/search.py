"""
Binary search and allowlist filtering.
"""

from collections.abc import Iterable, Iterator, Sequence


def binary_search(values: Sequence[int], key: int) -> int:
    """
    Returns the index of key in the sorted sequence values, or -1 if absent.
    """
    lo, hi = 0, len(values) - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        # Key is in values[lo..hi] or not present
        if key < values[mid]:
            hi = mid - 1
        elif key > values[mid]:
            lo = mid + 1
        else:
            return mid
    return -1


class AllowList:
    """
    A set of allowed integers, sorted once and queried by binary search.

    Example:
        >>> allowed = AllowList([84, 48, 68, 10])
        >>> 48 in allowed
        True
        >>> list(allowed.filter([23, 10, 99, 84]))
        [10, 84]
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values = sorted(values)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        return binary_search(self._values, key) != -1

    def filter(self, keys: Iterable[int]) -> Iterator[int]:
        """Yields the keys present in the allowlist, in input order."""
        return (key for key in keys if key in self)
