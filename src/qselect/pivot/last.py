"""Rightmost-element pivot strategy.

The reference rule: always pivot on ``sequence[hi]``. Deterministic and
free, but quadratic on already sorted or reverse sorted input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from qselect.pivot.base import PivotStrategy
from qselect.pivot.registry import PivotStrategyRegistry

if TYPE_CHECKING:
    from collections.abc import Sequence


@PivotStrategyRegistry.register("last")
class LastElementPivot(PivotStrategy):
    """Returns *hi* for every range."""

    @property
    def name(self) -> str:
        """Return ``'last'``."""
        return "last"

    def choose(self, sequence: Sequence[Any], lo: int, hi: int) -> int:
        return hi
