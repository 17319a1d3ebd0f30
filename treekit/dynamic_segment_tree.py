"""Sparse, versioned segment tree supporting range additions and range sums."""

from __future__ import annotations

import sys
from typing import Optional, Sequence


class _Node:
    __slots__ = ("total", "pending", "left", "right")

    def __init__(
        self,
        total: int = 0,
        pending: int = 0,
        left: Optional[_Node] = None,
        right: Optional[_Node] = None,
    ) -> None:
        self.total = total
        self.pending = pending
        self.left = left
        self.right = right


def _add(node: Optional[_Node], lo: int, hi: int, start: int, end: int, value: int) -> _Node:
    """Return a copy of ``node`` with ``value`` added over ``[start, end]``.

    The range must overlap ``[lo, hi]``. Unchanged subtrees are shared.
    """
    fresh = _Node() if node is None else _Node(node.total, node.pending, node.left, node.right)
    if start <= lo and hi <= end:
        fresh.total += value * (hi - lo + 1)
        fresh.pending += value
        return fresh
    mid = lo + (hi - lo) // 2
    if start <= mid:
        fresh.left = _add(fresh.left, lo, mid, start, end, value)
    if end > mid:
        fresh.right = _add(fresh.right, mid + 1, hi, start, end, value)
    fresh.total += value * (min(hi, end) - max(lo, start) + 1)
    return fresh


def _sum(node: Optional[_Node], lo: int, hi: int, start: int, end: int, carry: int) -> int:
    overlap = min(hi, end) - max(lo, start) + 1
    if node is None:
        return carry * overlap
    if start <= lo and hi <= end:
        return node.total + carry * (hi - lo + 1)
    carry += node.pending
    mid = lo + (hi - lo) // 2
    result = 0
    if start <= mid:
        result += _sum(node.left, lo, mid, start, end, carry)
    if end > mid:
        result += _sum(node.right, mid + 1, hi, start, end, carry)
    return result


class DynamicSegmentTree:
    """An array of ``size`` zeros whose every modification creates a new version.

    Version 0 is the initial all-zero state; each call to :meth:`insert` or
    :meth:`update_range` produces the next version. Earlier versions stay
    queryable.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")
        self._size = size
        self._roots: list[Optional[_Node]] = [None]

    def version(self) -> int:
        """Number of the current (latest) version."""
        return len(self._roots) - 1

    def insert(self, key: int, value: int) -> None:
        """Add ``value`` to the element at index ``key``."""
        if not 0 <= key < self._size:
            raise IndexError(f"index {key} out of range for size {self._size}")
        self._commit(key, key, value)

    def update_range(self, start: int, end: int, value: int) -> None:
        """Add ``value`` to every element in ``[start, end]``, clipped to the array."""
        self._commit(max(start, 0), min(end, self._size - 1), value)

    def _commit(self, start: int, end: int, value: int) -> None:
        root = self._roots[-1]
        if start <= end:
            root = _add(root, 0, self._size - 1, start, end, value)
        self._roots.append(root)

    def get_sum(self, start: int, end: int, version: Optional[int] = None) -> int:
        """Sum of the elements in ``[start, end]`` as they were in ``version``."""
        if version is None:
            version = self.version()
        if not 0 <= version < len(self._roots):
            raise IndexError(f"version {version} does not exist")
        lo, hi = max(start, 0), min(end, self._size - 1)
        if lo > hi:
            return 0
        return _sum(self._roots[version], 0, self._size - 1, lo, hi, 0)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a short demonstration of range updates and queries."""
    tree = DynamicSegmentTree(100)
    tree.insert(1, 5)
    tree.insert(2, 10)
    tree.update_range(1, 2, 3)
    print(f"Sum from index 1 to 2: {tree.get_sum(1, 2)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())