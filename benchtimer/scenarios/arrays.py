"""
Input orderings for the insertion-sort benchmarks.

Insertion sort is linear on ordered input and quadratic on reverse
ordered input, so the same array length gives very different timings
depending on which supplier feeds it.
"""

import random
from typing import Callable, Dict, List, Optional


def random_array(n: int, rng: random.Random) -> List[int]:
    """Uniformly random integers, e.g. [1, 3, 2, 1, 7, 2, ...]."""
    return [rng.randrange(-2 ** 31, 2 ** 31) for _ in range(n)]


def ordered_array(n: int) -> List[int]:
    """Ascending integers [0, 1, 2, ..., n-1]."""
    return list(range(n))


def reverse_array(n: int) -> List[int]:
    """Descending integers [n-1, n-2, ..., 0]."""
    return list(range(n - 1, -1, -1))


def partial_array(n: int, rng: random.Random) -> List[int]:
    """First half ascending, second half random."""
    half = n // 2
    return ordered_array(half) + random_array(n - half, rng)


ORDERINGS: Dict[str, Callable[[int, random.Random], List[int]]] = {
    "random": random_array,
    "ordered": lambda n, rng: ordered_array(n),
    "reverse": lambda n, rng: reverse_array(n),
    "partial": partial_array,
}


def array_supplier(
    kind: str, n: int, rng: Optional[random.Random] = None
) -> Callable[[], List[int]]:
    """Return a zero-argument callable producing a fresh array of the given ordering."""
    if kind not in ORDERINGS:
        raise ValueError(f"Unknown array ordering: {kind}")
    if n < 0:
        raise ValueError(f"Array length must not be negative, got {n}")
    builder = ORDERINGS[kind]
    rng = rng or random.Random()
    return lambda: builder(n, rng)
