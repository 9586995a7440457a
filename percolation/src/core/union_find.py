"""Weighted quick-union with path compression over a fixed universe."""

from __future__ import annotations

from typing import List

from .errors import InvalidArgumentError
from .grid_utils import is_integer


class WeightedQuickUnionUF:
    """Disjoint sets over the integers ``0 .. n - 1``.

    Trees are merged smaller-under-larger and ``find`` halves paths as it
    walks, so both ``union`` and ``connected`` run in near-constant
    amortized time. There is no way to split a set once joined.

    >>> uf = WeightedQuickUnionUF(10)
    >>> for p, q in [(3, 4), (4, 9), (8, 0), (2, 3), (5, 6), (5, 9)]:
    ...     _ = uf.union(p, q)
    >>> uf.connected(2, 6)
    True
    >>> uf.connected(0, 1)
    False
    >>> uf.count
    4
    """

    def __init__(self, n: int) -> None:
        if not is_integer(n) or n < 1:
            raise InvalidArgumentError(f"union-find needs at least one element, got {n!r}")
        n = int(n)
        self._parent: List[int] = list(range(n))
        self._size: List[int] = [1] * n
        self._count = n

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def count(self) -> int:
        """Number of disjoint sets."""
        return self._count

    def _validate(self, p: int) -> None:
        if not is_integer(p) or not 0 <= p < len(self._parent):
            raise InvalidArgumentError(
                f"index {p} is not between 0 and {len(self._parent) - 1}"
            )

    def find(self, p: int) -> int:
        """Return the root of the set containing ``p``."""
        self._validate(p)
        parent = self._parent
        while p != parent[p]:
            parent[p] = parent[parent[p]]
            p = parent[p]
        return p

    def union(self, p: int, q: int) -> bool:
        """Merge the sets containing ``p`` and ``q``.

        Returns ``False`` when they were already in the same set.
        """
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return False
        if self._size[root_p] < self._size[root_q]:
            root_p, root_q = root_q, root_p
        self._parent[root_q] = root_p
        self._size[root_p] += self._size[root_q]
        self._count -= 1
        return True

    def connected(self, p: int, q: int) -> bool:
        """Return ``True`` if ``p`` and ``q`` are in the same set."""
        return self.find(p) == self.find(q)

    def size_of(self, p: int) -> int:
        """Return the number of elements in the set containing ``p``."""
        return self._size[self.find(p)]

    def __repr__(self) -> str:
        return f"WeightedQuickUnionUF(n={len(self)}, count={self._count})"


__all__ = ["WeightedQuickUnionUF"]
