"""Data types for the selection subsystem."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class SelectionResult:
    """Result of a configured selection call.

    Attributes:
        value: The element at *rank* in ascending sorted order.
        rank: Zero-based rank that was selected.
        pivot_strategy: Name of the pivot strategy used.
        partitions: Number of partition passes run.
        comparisons: Element comparisons against pivot values.
        swaps: Pairwise swaps performed.
    """

    value: Any
    rank: int
    pivot_strategy: str
    partitions: int
    comparisons: int
    swaps: int
