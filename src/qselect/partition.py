"""In-place Lomuto partitioning.

The partition step is the only code that mutates the caller's sequence.
It works on any object with integer ``__getitem__``/``__setitem__``
(``list``, ``array.array``, 1-D ``numpy.ndarray``) and moves elements by
pairwise swaps only.

Invariant after ``p = partition(a, lo, hi)``::

    a[i] <= a[p]  for lo <= i < p
    a[i] >= a[p]  for p < i <= hi
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import MutableSequence


@dataclass(slots=True)
class PartitionStats:
    """Mutable work counters accumulated across partition calls.

    Attributes:
        partitions: Number of partition passes run.
        comparisons: Element comparisons against the pivot value.
        swaps: Pairwise swaps performed (including no-op self swaps).
    """

    partitions: int = 0
    comparisons: int = 0
    swaps: int = 0


def swap(sequence: MutableSequence[Any], i: int, j: int) -> None:
    """Exchange the elements at indices *i* and *j* in place."""
    sequence[i], sequence[j] = sequence[j], sequence[i]


def partition(
    sequence: MutableSequence[Any],
    lo: int,
    hi: int,
    stats: PartitionStats | None = None,
) -> int:
    """Partition ``sequence[lo..hi]`` around the value at *hi*.

    Elements ``<=`` the pivot value are gathered left to right into a
    contiguous block starting at *lo*; the pivot is then swapped in directly
    after that block. The rearrangement is not stable.

    Args:
        sequence: Sequence to rearrange in place.
        lo: First index of the range (inclusive).
        hi: Last index of the range (inclusive); ``lo <= hi`` is required.
        stats: Optional counters to update.

    Returns:
        Final index of the pivot element.
    """
    pivot_value = sequence[hi]
    i = lo - 1  # last index of the "<= pivot" block
    for j in range(lo, hi):
        if sequence[j] <= pivot_value:
            i += 1
            swap(sequence, i, j)
            if stats is not None:
                stats.swaps += 1
    swap(sequence, i + 1, hi)

    if stats is not None:
        stats.partitions += 1
        stats.comparisons += hi - lo
        stats.swaps += 1
    return i + 1


def partition_around(
    sequence: MutableSequence[Any],
    lo: int,
    hi: int,
    pivot_index: int,
    stats: PartitionStats | None = None,
) -> int:
    """Partition ``sequence[lo..hi]`` around the element at *pivot_index*.

    The chosen element is first swapped to *hi* so that :func:`partition`
    can be reused unchanged.

    Args:
        sequence: Sequence to rearrange in place.
        lo: First index of the range (inclusive).
        hi: Last index of the range (inclusive).
        pivot_index: Index in ``[lo, hi]`` of the element to pivot on.
        stats: Optional counters to update.

    Returns:
        Final index of the pivot element.
    """
    if pivot_index != hi:
        swap(sequence, pivot_index, hi)
        if stats is not None:
            stats.swaps += 1
    return partition(sequence, lo, hi, stats)
