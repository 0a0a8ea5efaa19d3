"""Exception hierarchy for qselect.

All exceptions derive from QSelectError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
Precondition errors also derive from the matching builtin so callers that
already catch ``ValueError`` or ``IndexError`` keep working.
"""

from __future__ import annotations


class QSelectError(Exception):
    """Base exception for all qselect errors."""


class SelectionPreconditionError(QSelectError, ValueError):
    """The caller passed input that selection is not defined for.

    Raised before the sequence is touched, so the caller's data is left
    in its original order.
    """


class EmptySequenceError(SelectionPreconditionError):
    """Selection was requested from a sequence of length zero."""

    def __init__(self) -> None:
        super().__init__("Cannot select an order statistic from an empty sequence")


class RankOutOfBoundsError(SelectionPreconditionError, IndexError):
    """The requested rank does not index into the active range.

    Attributes:
        rank: The rank that was requested.
        lo: Lowest valid rank.
        hi: Highest valid rank.
    """

    def __init__(self, rank: int, lo: int, hi: int) -> None:
        self.rank = rank
        self.lo = lo
        self.hi = hi
        super().__init__(f"Rank {rank} is outside the valid range [{lo}, {hi}]")


class ConfigValidationError(QSelectError):
    """Configuration override validation failed.

    Raised when per-call overrides contain unknown keys or values that
    fail type validation.
    """
