"""Uniformly random pivot strategy.

Gives expected linear-time selection on every input, including the
sorted and reverse sorted inputs that defeat the fixed rightmost rule.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

from qselect.pivot.base import PivotStrategy
from qselect.pivot.registry import PivotStrategyRegistry

if TYPE_CHECKING:
    from collections.abc import Sequence

    from qselect.config import SelectConfig


@PivotStrategyRegistry.register("random")
class RandomPivot(PivotStrategy):
    """Pivot on an index drawn uniformly from ``[lo, hi]``.

    Owns a ``numpy.random.Generator``; instances are not thread-safe.

    Args:
        config: Optional config providing ``random_seed``.
        seed: Explicit seed, takes precedence over ``config.random_seed``.
    """

    def __init__(self, config: SelectConfig | None = None, seed: int | None = None) -> None:
        if seed is None and config is not None:
            seed = config.random_seed
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @property
    def name(self) -> str:
        """Return ``'random'``."""
        return "random"

    def choose(self, sequence: Sequence[Any], lo: int, hi: int) -> int:
        return int(self._rng.integers(lo, hi, endpoint=True))
