"""
Weighted quick-union used by the "count pairs" benchmark.

Two path-compression variants are supported:

- ``halving``: one pass, each visited node is pointed at its grandparent;
- ``full``: two passes, every visited node is pointed at the root.
"""

import random
from typing import List, Optional

PATH_COMPRESSION_MODES = ("halving", "full")


class UnionFind:
    """Height-weighted quick-union over sites 0..n-1."""

    def __init__(self, n: int, path_compression: str = "halving"):
        if n < 0:
            raise ValueError(f"Number of sites must not be negative, got {n}")
        if path_compression not in PATH_COMPRESSION_MODES:
            raise ValueError(f"Unknown path compression mode: {path_compression}")
        self.path_compression = path_compression
        self.parent: List[int] = list(range(n))
        self.height: List[int] = [1] * n
        self.count = n

    def __len__(self) -> int:
        return len(self.parent)

    def components(self) -> int:
        return self.count

    def find(self, p: int) -> int:
        self._validate(p)
        if self.path_compression == "halving":
            return self._find_halving(p)
        return self._find_full(p)

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> bool:
        """Merge the components of p and q. Returns False if already connected."""
        i = self.find(p)
        j = self.find(q)
        if i == j:
            return False
        if self.height[i] < self.height[j]:
            i, j = j, i
        self.parent[j] = i
        if self.height[i] == self.height[j]:
            self.height[i] += 1
        self.count -= 1
        return True

    def _find_halving(self, p: int) -> int:
        parent = self.parent
        while p != parent[p]:
            parent[p] = parent[parent[p]]
            p = parent[p]
        return p

    def _find_full(self, p: int) -> int:
        parent = self.parent
        root = p
        while root != parent[root]:
            root = parent[root]
        while p != root:
            parent[p], p = root, parent[p]
        return root

    def _validate(self, p: int):
        if p < 0 or p >= len(self.parent):
            raise IndexError(f"Site {p} is not between 0 and {len(self.parent) - 1}")


def count_pairs(n: int, rng: Optional[random.Random] = None, path_compression: str = "halving") -> int:
    """
    Generate random pairs of sites, connecting each unconnected pair, until
    all n sites form one component. Returns the number of pairs generated.
    """
    rng = rng or random.Random()
    uf = UnionFind(n, path_compression)
    pairs = 0
    while uf.components() > 1:
        p = rng.randrange(n)
        q = rng.randrange(n)
        pairs += 1
        uf.union(p, q)
    return pairs
