"""qselect: order-statistic selection without sorting.

Finds the element that would occupy a given rank in ascending sorted order
by repeatedly partitioning a shrinking index range in place (quickselect).
The pivot rule is pluggable; the default pivots on the rightmost element.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("qselect")
except PackageNotFoundError:
    __version__ = "0.0.0"

from qselect.config import SelectConfig, resolve_config, validate_overrides
from qselect.exceptions import (
    ConfigValidationError,
    EmptySequenceError,
    QSelectError,
    RankOutOfBoundsError,
    SelectionPreconditionError,
)
from qselect.partition import PartitionStats, partition, partition_around, swap
from qselect.pivot import PivotStrategy, PivotStrategyRegistry
from qselect.selection import SelectionResult, Selector, select, select_kth

__all__ = [
    "ConfigValidationError",
    "EmptySequenceError",
    "PartitionStats",
    "PivotStrategy",
    "PivotStrategyRegistry",
    "QSelectError",
    "RankOutOfBoundsError",
    "SelectConfig",
    "SelectionPreconditionError",
    "SelectionResult",
    "Selector",
    "__version__",
    "partition",
    "partition_around",
    "resolve_config",
    "select",
    "select_kth",
    "swap",
    "validate_overrides",
]
