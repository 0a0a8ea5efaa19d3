"""Base class for pivot strategies.

A pivot strategy picks which element of the active range the partition
step pivots on. It only reads the sequence; moving the chosen element
into place is the partitioner's job.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence


class PivotStrategy(ABC):
    """Abstract base class for pivot strategies.

    Implementations must return an index in ``[lo, hi]`` and must not
    reorder the sequence. Any valid choice keeps selection correct; the
    strategy only affects how much work the narrowing loop does.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Registered identifier of this strategy."""

    @abstractmethod
    def choose(self, sequence: Sequence[Any], lo: int, hi: int) -> int:
        """Return the index of the pivot element for ``sequence[lo..hi]``.

        Args:
            sequence: Sequence being selected from (read only).
            lo: First index of the active range (inclusive).
            hi: Last index of the active range (inclusive), ``hi >= lo``.

        Returns:
            Index in ``[lo, hi]``.
        """
