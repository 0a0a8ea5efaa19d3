"""Diagnostic logging subsystem for qselect.

Provides immutable per-call selection records and a configurable logger
that supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from qselect.logging.logger import SelectionLogger
from qselect.logging.types import SelectionRecord

__all__ = [
    "SelectionLogger",
    "SelectionRecord",
]
