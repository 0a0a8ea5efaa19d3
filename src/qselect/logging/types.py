"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class SelectionRecord:
    """Immutable record of a single selection call.

    Attributes:
        timestamp_ns: Wall-clock time of the call (nanoseconds since epoch).
        elapsed_ms: Time spent selecting (milliseconds).
        length: Length of the input sequence.
        rank: Requested zero-based rank.
        value: Selected element.
        pivot_strategy: Name of the pivot strategy used.
        partitions: Number of partition passes.
        comparisons: Element comparisons against pivot values.
        swaps: Pairwise swaps performed.
        config_hash: 16-char SHA-256 prefix of the active config.
    """

    # Timing
    timestamp_ns: int
    elapsed_ms: float

    # Request
    length: int
    rank: int
    value: Any

    # Work
    pivot_strategy: str
    partitions: int
    comparisons: int
    swaps: int

    # Config snapshot
    config_hash: str
