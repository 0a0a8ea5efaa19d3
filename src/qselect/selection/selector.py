"""Partition-driven order-statistic selection (quickselect).

Narrows an inclusive index range around successive partition points until
the pivot lands on the requested rank::

    p = partition(a, lo, hi)
    while p != k:
        if k >= p: lo = p + 1
        else:      hi = p - 1
        p = partition(a, lo, hi)
    return a[k]

The loop keeps ``lo <= k <= hi`` at every step, so the search always
terminates after at most ``hi - lo + 1`` partitions. The sequence is
reordered in place and left partitioned around position ``k``.
"""

from __future__ import annotations

import hashlib
import logging
import operator
import time
from typing import TYPE_CHECKING, Any

from qselect.config import SelectConfig
from qselect.exceptions import (
    EmptySequenceError,
    RankOutOfBoundsError,
    SelectionPreconditionError,
)
from qselect.logging.logger import SelectionLogger
from qselect.logging.types import SelectionRecord
from qselect.partition import PartitionStats, partition, partition_around
from qselect.pivot.registry import PivotStrategyRegistry
from qselect.selection.types import SelectionResult

if TYPE_CHECKING:
    from collections.abc import Iterable, MutableSequence

    from qselect.pivot.base import PivotStrategy

logger = logging.getLogger("qselect")


def _resolve_pivot(pivot: PivotStrategy | str | None) -> PivotStrategy | None:
    """Turn a strategy name into an instance; ``None`` means the rightmost rule."""
    if isinstance(pivot, str):
        return PivotStrategyRegistry.get(pivot)()
    return pivot


def _check_rank(sequence: MutableSequence[Any], rank: Any) -> int:
    """Validate *rank* against the whole of *sequence*.

    Returns:
        *rank* as a plain ``int``.

    Raises:
        EmptySequenceError: If the sequence is empty.
        RankOutOfBoundsError: If *rank* is not in ``[0, len - 1]``.
    """
    n = len(sequence)
    if n == 0:
        raise EmptySequenceError()
    rank = operator.index(rank)
    if not 0 <= rank < n:
        raise RankOutOfBoundsError(rank, 0, n - 1)
    return rank


def _narrow(
    sequence: MutableSequence[Any],
    lo: int,
    hi: int,
    k: int,
    strategy: PivotStrategy | None,
    stats: PartitionStats | None,
) -> Any:
    """Run the narrowing loop over a validated range.

    Callers guarantee ``0 <= lo <= k <= hi < len(sequence)``.
    """
    if lo >= hi:
        return sequence[lo]

    def step(lo: int, hi: int) -> int:
        if strategy is None:
            return partition(sequence, lo, hi, stats)
        return partition_around(sequence, lo, hi, strategy.choose(sequence, lo, hi), stats)

    p = step(lo, hi)
    while p != k:
        if k >= p:
            lo = p + 1
        else:
            hi = p - 1
        p = step(lo, hi)
    return sequence[k]


def select(
    sequence: MutableSequence[Any],
    lo: int,
    hi: int,
    k: int,
    pivot: PivotStrategy | str | None = None,
    stats: PartitionStats | None = None,
) -> Any:
    """Return the element at rank *k* of ``sorted(sequence[lo..hi])``.

    *k* is an absolute index into *sequence*, not an offset from *lo*.
    Elements outside ``[lo, hi]`` are never read or moved.

    Args:
        sequence: Sequence to select from; reordered in place.
        lo: First index of the range (inclusive).
        hi: Last index of the range (inclusive).
        k: Target index, ``lo <= k <= hi``.
        pivot: Pivot strategy instance or registered name. ``None`` pivots
            on the rightmost element of each range.
        stats: Optional counters updated by every partition pass.

    Returns:
        The selected element.

    Raises:
        EmptySequenceError: If the sequence is empty.
        SelectionPreconditionError: If ``[lo, hi]`` is not a valid range.
        RankOutOfBoundsError: If *k* is outside ``[lo, hi]``.
    """
    n = len(sequence)
    if n == 0:
        raise EmptySequenceError()
    lo, hi, k = operator.index(lo), operator.index(hi), operator.index(k)
    if not 0 <= lo <= hi < n:
        raise SelectionPreconditionError(
            f"Range [{lo}, {hi}] is not within a sequence of length {n}"
        )
    if not lo <= k <= hi:
        raise RankOutOfBoundsError(k, lo, hi)
    return _narrow(sequence, lo, hi, k, _resolve_pivot(pivot), stats)


def select_kth(
    sequence: MutableSequence[Any],
    rank: int,
    pivot: PivotStrategy | str | None = None,
) -> Any:
    """Return the element that would sit at *rank* if *sequence* were sorted.

    Equivalent to ``select(sequence, 0, len(sequence) - 1, rank)``.

    Args:
        sequence: Sequence to select from; reordered in place.
        rank: Zero-based rank in ``[0, len(sequence) - 1]``. Negative ranks
            are rejected rather than counted from the end.
        pivot: Pivot strategy instance or registered name.

    Returns:
        The selected element.

    Raises:
        EmptySequenceError: If the sequence is empty.
        RankOutOfBoundsError: If *rank* is out of range.
    """
    rank = _check_rank(sequence, rank)
    return _narrow(sequence, 0, len(sequence) - 1, rank, _resolve_pivot(pivot), None)


def _config_hash(config: SelectConfig) -> str:
    """Return the first 16 hex characters of the SHA-256 of the config dump."""
    raw = config.model_dump_json().encode("utf-8")
    return hashlib.sha256(raw).hexdigest()[:16]


class Selector:
    """Configured selection front end with work counters and logging.

    Builds its pivot strategy from ``config.pivot_strategy`` and reports
    every call to a :class:`SelectionLogger`. The strategy instance is
    reused across calls, so a seeded ``"random"`` selector is reproducible
    for a fixed sequence of calls.

    Args:
        config: Configuration; defaults are loaded from the environment
            when omitted.
    """

    def __init__(self, config: SelectConfig | None = None) -> None:
        self._config = config if config is not None else SelectConfig()
        self._strategy = PivotStrategyRegistry.build(self._config)
        self._logger = SelectionLogger(self._config)
        self._config_hash = _config_hash(self._config)
        logger.debug(
            "Selector ready: pivot=%s log_level=%s config=%s",
            self._strategy.name,
            self._config.log_level,
            self._config_hash,
        )

    @property
    def config(self) -> SelectConfig:
        return self._config

    @property
    def strategy(self) -> PivotStrategy:
        return self._strategy

    @property
    def selection_logger(self) -> SelectionLogger:
        """The diagnostic logger receiving one record per call."""
        return self._logger

    def select(self, sequence: MutableSequence[Any], rank: int) -> SelectionResult:
        """Select the element at *rank*, reordering *sequence* in place.

        Args:
            sequence: Sequence to select from.
            rank: Zero-based rank in ``[0, len(sequence) - 1]``.

        Returns:
            SelectionResult with the value and work counters.

        Raises:
            EmptySequenceError: If the sequence is empty.
            RankOutOfBoundsError: If *rank* is out of range.
        """
        rank = _check_rank(sequence, rank)
        stats = PartitionStats()

        timestamp_ns = time.time_ns()
        t0 = time.perf_counter()
        value = _narrow(sequence, 0, len(sequence) - 1, rank, self._strategy, stats)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        self._logger.log_selection(
            SelectionRecord(
                timestamp_ns=timestamp_ns,
                elapsed_ms=elapsed_ms,
                length=len(sequence),
                rank=rank,
                value=value,
                pivot_strategy=self._strategy.name,
                partitions=stats.partitions,
                comparisons=stats.comparisons,
                swaps=stats.swaps,
                config_hash=self._config_hash,
            )
        )
        return SelectionResult(
            value=value,
            rank=rank,
            pivot_strategy=self._strategy.name,
            partitions=stats.partitions,
            comparisons=stats.comparisons,
            swaps=stats.swaps,
        )

    def select_many(
        self, sequence: MutableSequence[Any], ranks: Iterable[int]
    ) -> list[SelectionResult]:
        """Select several ranks from the same sequence, in the given order.

        Each call runs on the sequence as left by the previous one; the
        selected values do not depend on that order.
        """
        return [self.select(sequence, rank) for rank in ranks]

    def median(self, sequence: MutableSequence[Any]) -> SelectionResult:
        """Select the lower median, rank ``(len(sequence) - 1) // 2``."""
        return self.select(sequence, (len(sequence) - 1) // 2)
