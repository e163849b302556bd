"""
Partition-exchange and merge sorts over record sequences.

Both sorts order a mutable sequence of Record by value, ascending, over an
inclusive index range, and move whole records so each timestamp stays with
its value. SortAlgorithm tags the two strategies for the timing harness.
"""

from __future__ import annotations

import enum
from typing import Callable, MutableSequence

from tempsort.records import Record

Records = MutableSequence[Record]
SortFunction = Callable[[Records, int, int], None]


class SortAlgorithm(enum.Enum):
    """Sort strategies understood by the timing harness."""

    QUICK = "quick"
    MERGE = "merge"

    @property
    def label(self) -> str:
        return "Quick sort" if self is SortAlgorithm.QUICK else "Merge sort"


def sort_quickselect(records: Records, low: int, high: int) -> None:
    """
    Sort records[low..high] (inclusive) in place by value.

    Hoare-style partitioning around the value at the midpoint index
    (low + high) // 2. Not stable. O(n log n) on average, O(n^2) worst case.
    The smaller partition is handled by recursion and the larger one by the
    loop, so the stack stays O(log n) deep.
    """
    while low < high:
        left = low
        right = high
        pivot = records[(low + high) // 2].value
        while left <= right:
            while records[left].value < pivot:
                left += 1
            while records[right].value > pivot:
                right -= 1
            if left <= right:
                records[left], records[right] = records[right], records[left]
                left += 1
                right -= 1

        if right - low < high - left:
            if low < right:
                sort_quickselect(records, low, right)
            low = left
        else:
            if left < high:
                sort_quickselect(records, left, high)
            high = right


def _merge(records: Records, start: int, mid: int, end: int) -> None:
    buffer: list[Record] = []
    i = start
    j = mid + 1
    while i <= mid and j <= end:
        # <= keeps equal values in their original order
        if records[i].value <= records[j].value:
            buffer.append(records[i])
            i += 1
        else:
            buffer.append(records[j])
            j += 1
    while i <= mid:
        buffer.append(records[i])
        i += 1
    while j <= end:
        buffer.append(records[j])
        j += 1
    records[start:end + 1] = buffer


def sort_merge(records: Records, start: int, end: int) -> None:
    """
    Sort records[start..end] (inclusive) by value with a top-down merge sort.

    Stable. Each merge allocates a temporary buffer the size of its range.
    """
    if start < end:
        mid = (start + end) // 2
        sort_merge(records, start, mid)
        sort_merge(records, mid + 1, end)
        _merge(records, start, mid, end)


_SORTS: dict[SortAlgorithm, SortFunction] = {
    SortAlgorithm.QUICK: sort_quickselect,
    SortAlgorithm.MERGE: sort_merge,
}


def sort_function(algorithm: SortAlgorithm) -> SortFunction:
    """
    Return the sort implementing algorithm.

    Raises:
        ValueError: algorithm is not a SortAlgorithm member.
    """
    if not isinstance(algorithm, SortAlgorithm):
        raise ValueError(f"unknown sort algorithm: {algorithm!r}")
    return _SORTS[algorithm]
