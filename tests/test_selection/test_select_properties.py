"""Property tests for order-statistic selection.

These tests validate invariants of the algorithm rather than individual
code paths, cross-checking against a full sort on seeded random inputs:

1. **Correctness**: the selected value equals ``sorted(S)[k]``.
2. **Permutation invariance**: selection only reorders the sequence.
3. **Idempotence**: selecting the same rank again gives the same value.
4. **Boundaries**: rank 0 is the minimum, rank n - 1 the maximum.
"""

from __future__ import annotations

from collections import Counter

import numpy as np
import pytest

from qselect.pivot.random import RandomPivot
from qselect.selection.selector import select_kth

# ---------------------------------------------------------------------------
# Configurable constants, no hardcoded iteration counts in test bodies.
# ---------------------------------------------------------------------------

# Number of random (sequence, rank) pairs per strategy.
_NUM_CASES: int = 300

# Sequence lengths are drawn from [1, _MAX_LENGTH].
_MAX_LENGTH: int = 64

# Small value range forces plenty of duplicates.
_DUPLICATE_VALUE_RANGE: int = 8

_STRATEGIES = ["last", "median_of_three", "random"]


def _random_case(rng: np.random.Generator, value_range: int) -> tuple[list[int], int]:
    n = int(rng.integers(1, _MAX_LENGTH, endpoint=True))
    seq = rng.integers(-value_range, value_range, size=n).tolist()
    k = int(rng.integers(0, n))
    return seq, k


@pytest.mark.parametrize("pivot", _STRATEGIES)
class TestSelectionProperties:
    """Invariants that hold for every pivot strategy."""

    def test_matches_sorted_reference(self, rng: np.random.Generator, pivot: str) -> None:
        for _ in range(_NUM_CASES):
            seq, k = _random_case(rng, value_range=1000)
            expected = sorted(seq)[k]
            assert select_kth(seq, k, pivot=pivot) == expected

    def test_matches_sorted_reference_with_duplicates(
        self, rng: np.random.Generator, pivot: str
    ) -> None:
        for _ in range(_NUM_CASES):
            seq, k = _random_case(rng, value_range=_DUPLICATE_VALUE_RANGE)
            expected = sorted(seq)[k]
            assert select_kth(seq, k, pivot=pivot) == expected

    def test_permutation_invariance(self, rng: np.random.Generator, pivot: str) -> None:
        for _ in range(_NUM_CASES):
            seq, k = _random_case(rng, value_range=_DUPLICATE_VALUE_RANGE)
            before = Counter(seq)
            select_kth(seq, k, pivot=pivot)
            assert Counter(seq) == before

    def test_idempotent_at_same_rank(self, rng: np.random.Generator, pivot: str) -> None:
        for _ in range(_NUM_CASES):
            seq, k = _random_case(rng, value_range=_DUPLICATE_VALUE_RANGE)
            first = select_kth(seq, k, pivot=pivot)
            assert select_kth(seq, k, pivot=pivot) == first

    def test_boundary_ranks(self, rng: np.random.Generator, pivot: str) -> None:
        for _ in range(_NUM_CASES // 10):
            seq, _ = _random_case(rng, value_range=1000)
            assert select_kth(list(seq), 0, pivot=pivot) == min(seq)
            assert select_kth(list(seq), len(seq) - 1, pivot=pivot) == max(seq)

    def test_every_rank_of_one_sequence(self, rng: np.random.Generator, pivot: str) -> None:
        seq = rng.integers(0, 50, size=40).tolist()
        expected = sorted(seq)
        for k in range(len(seq)):
            assert select_kth(list(seq), k, pivot=pivot) == expected[k]


class TestNumpyInput:
    """Selection over numpy arrays agrees with numpy's own ordering."""

    def test_matches_numpy_partition(self, rng: np.random.Generator) -> None:
        for _ in range(_NUM_CASES // 10):
            arr = rng.standard_normal(int(rng.integers(1, 200)))
            k = int(rng.integers(0, len(arr)))
            expected = np.partition(arr.copy(), k)[k]
            assert select_kth(arr, k, pivot=RandomPivot(seed=3)) == expected

    def test_float_duplicates(self) -> None:
        arr = np.array([2.5, 1.0, 2.5, 1.0, 2.5])
        assert select_kth(arr, 2) == 2.5
        assert sorted(arr.tolist()) == [1.0, 1.0, 2.5, 2.5, 2.5]
