"""Diagnostic logger for selection calls.

Uses the standard ``logging`` module with the ``"qselect"`` logger.
No ``print()`` statements. Supports three verbosity levels and an
in-memory diagnostic mode for post-hoc analysis.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from qselect.config import SelectConfig
    from qselect.logging.types import SelectionRecord

logger = logging.getLogger("qselect")


class SelectionLogger:
    """Per-call diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per call with key metrics (length, rank,
        pivot strategy, partitions, comparisons, elapsed time).

        ``"full"``: Full JSON dump of all record fields.

    Diagnostic mode stores all records in memory for later inspection via
    ``get_diagnostic_data()`` and ``get_summary_stats()``.
    """

    def __init__(self, config: SelectConfig) -> None:
        """Initialize the logger from configuration.

        Args:
            config: Configuration providing ``log_level`` and ``diagnostic_mode``.
        """
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[SelectionRecord] = []

    def log_selection(self, record: SelectionRecord) -> None:
        """Log a single selection call.

        Args:
            record: Immutable record of the call.
        """
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.info(
                "select n=%d k=%d pivot=%s partitions=%d comparisons=%d swaps=%d time=%.3fms",
                record.length,
                record.rank,
                record.pivot_strategy,
                record.partitions,
                record.comparisons,
                record.swaps,
                record.elapsed_ms,
            )
        elif self._log_level == "full":
            logger.info("selection_record: %s", json.dumps(asdict(record), default=str))

    def get_diagnostic_data(self) -> list[SelectionRecord]:
        """Return all stored records (requires ``diagnostic_mode=True``).

        Returns:
            List of all SelectionRecord instances logged so far.
            Empty if diagnostic_mode is False.
        """
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        partitions = [r.partitions for r in self._records]
        comparisons = [r.comparisons for r in self._records]
        elapsed = [r.elapsed_ms for r in self._records]

        n = len(self._records)
        return {
            "total_calls": n,
            "mean_partitions": sum(partitions) / n,
            "max_partitions": max(partitions),
            "mean_comparisons": sum(comparisons) / n,
            "max_comparisons": max(comparisons),
            "mean_elapsed_ms": sum(elapsed) / n,
            "max_elapsed_ms": max(elapsed),
        }
