"""Segment tree over a fixed array with lazy range additions and range sums."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence


class SegmentTree:
    """Range-sum tree built once from a sequence of numbers."""

    def __init__(self, values: Iterable[int]) -> None:
        data = list(values)
        if not data:
            raise ValueError("cannot build a segment tree from no values")
        self._n = len(data)
        self._total = [0] * (4 * self._n)
        self._pending = [0] * (4 * self._n)
        self._build(1, 0, self._n - 1, data)

    def _build(self, idx: int, lo: int, hi: int, data: list[int]) -> None:
        if lo == hi:
            self._total[idx] = data[lo]
            return
        mid = lo + (hi - lo) // 2
        self._build(2 * idx, lo, mid, data)
        self._build(2 * idx + 1, mid + 1, hi, data)
        self._total[idx] = self._total[2 * idx] + self._total[2 * idx + 1]

    def __len__(self) -> int:
        return self._n

    def _apply(self, idx: int, lo: int, hi: int, value: int) -> None:
        self._total[idx] += value * (hi - lo + 1)
        self._pending[idx] += value

    def _push(self, idx: int, lo: int, hi: int) -> None:
        value = self._pending[idx]
        if value:
            mid = lo + (hi - lo) // 2
            self._apply(2 * idx, lo, mid, value)
            self._apply(2 * idx + 1, mid + 1, hi, value)
            self._pending[idx] = 0

    def update_range(self, start: int, end: int, value: int) -> None:
        """Add ``value`` to every element in ``[start, end]``; indices outside are ignored."""
        self._update(1, 0, self._n - 1, start, end, value)

    def _update(self, idx: int, lo: int, hi: int, start: int, end: int, value: int) -> None:
        if end < lo or hi < start:
            return
        if start <= lo and hi <= end:
            self._apply(idx, lo, hi, value)
            return
        self._push(idx, lo, hi)
        mid = lo + (hi - lo) // 2
        self._update(2 * idx, lo, mid, start, end, value)
        self._update(2 * idx + 1, mid + 1, hi, start, end, value)
        self._total[idx] = self._total[2 * idx] + self._total[2 * idx + 1]

    def get_sum(self, start: int, end: int) -> int:
        """Sum of the elements in ``[start, end]``; indices outside are ignored."""
        return self._query(1, 0, self._n - 1, start, end)

    def _query(self, idx: int, lo: int, hi: int, start: int, end: int) -> int:
        if end < lo or hi < start:
            return 0
        if start <= lo and hi <= end:
            return self._total[idx]
        self._push(idx, lo, hi)
        mid = lo + (hi - lo) // 2
        return self._query(2 * idx, lo, mid, start, end) + self._query(
            2 * idx + 1, mid + 1, hi, start, end
        )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a short demonstration of a range update and range sums."""
    tree = SegmentTree([1, 2, 3, 4, 5])
    print(f"Initial sum of range (0, 4): {tree.get_sum(0, 4)}")
    tree.update_range(1, 3, 10)
    print(f"Sum after update of range (0, 4): {tree.get_sum(0, 4)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())