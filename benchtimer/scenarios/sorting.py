from typing import List, MutableSequence, Optional


def insertion_sort(values: MutableSequence, lo: int = 0, hi: Optional[int] = None) -> MutableSequence:
    """Sort values[lo:hi] in place and return values."""
    if hi is None:
        hi = len(values)
    for i in range(lo + 1, hi):
        j = i
        while j > lo and values[j] < values[j - 1]:
            values[j], values[j - 1] = values[j - 1], values[j]
            j -= 1
    return values


def is_sorted(values: List) -> bool:
    return all(values[i - 1] <= values[i] for i in range(1, len(values)))
