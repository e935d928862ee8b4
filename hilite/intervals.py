from __future__ import annotations

from bisect import bisect_right
from typing import Iterable, List, Tuple

Interval = Tuple[int, int]  # (start, end_excl)


class ClaimedIntervals:
    """
    Sorted set of disjoint half-open intervals.

    A position belongs to at most one claim; the first claim wins and
    later overlapping claims are refused.
    """

    def __init__(self, initial: Iterable[Interval] = ()):
        self._starts: List[int] = []
        self._ends: List[int] = []
        for s, e in initial:
            self.claim(s, e)

    def overlaps(self, start: int, end: int) -> bool:
        # Rightmost claim that starts before `end` is the only candidate:
        # claims are disjoint and sorted, so its end is the largest before `end`.
        i = bisect_right(self._starts, end - 1) - 1
        return i >= 0 and self._ends[i] > start

    def claim(self, start: int, end: int) -> bool:
        """Adds [start, end) unless it is empty or overlaps an existing claim."""
        if end <= start or self.overlaps(start, end):
            return False
        i = bisect_right(self._starts, start)
        self._starts.insert(i, start)
        self._ends.insert(i, end)
        return True

    def __iter__(self):
        return iter(zip(self._starts, self._ends))

    def __len__(self) -> int:
        return len(self._starts)


__all__ = ["Interval", "ClaimedIntervals"]
