"""Pivot strategy subsystem for qselect.

Chooses the element each partition step pivots on. Supports the fixed
rightmost rule, median-of-three, and seeded random pivots.
"""

from qselect.pivot.base import PivotStrategy
from qselect.pivot.last import LastElementPivot
from qselect.pivot.median import MedianOfThreePivot
from qselect.pivot.random import RandomPivot
from qselect.pivot.registry import PivotStrategyRegistry

__all__ = [
    "LastElementPivot",
    "MedianOfThreePivot",
    "PivotStrategy",
    "PivotStrategyRegistry",
    "RandomPivot",
]
