"""Median-of-three pivot strategy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from qselect.pivot.base import PivotStrategy
from qselect.pivot.registry import PivotStrategyRegistry

if TYPE_CHECKING:
    from collections.abc import Sequence


@PivotStrategyRegistry.register("median_of_three")
class MedianOfThreePivot(PivotStrategy):
    """Pivot on the median of the first, middle and last elements.

    Sorted and reverse sorted ranges are split in half instead of peeling
    off one element per step. Ties resolve toward the lower index so the
    choice is deterministic for a given range.
    """

    @property
    def name(self) -> str:
        """Return ``'median_of_three'``."""
        return "median_of_three"

    def choose(self, sequence: Sequence[Any], lo: int, hi: int) -> int:
        """Return the index of ``median(a[lo], a[mid], a[hi])``.

        Args:
            sequence: Sequence being selected from (read only).
            lo: First index of the active range.
            hi: Last index of the active range.

        Returns:
            One of *lo*, ``lo + (hi - lo) // 2`` or *hi*.
        """
        mid = lo + (hi - lo) // 2
        a, b, c = sequence[lo], sequence[mid], sequence[hi]
        if a <= b:
            if b <= c:
                return mid
            return hi if a <= c else lo
        # b < a
        if a <= c:
            return lo
        return hi if b <= c else mid
