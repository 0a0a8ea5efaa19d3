"""Selection subsystem for qselect.

Iterative quickselect over an in-place partitioned range, plus a
configured Selector that counts work and logs each call.
"""

from qselect.selection.selector import Selector, select, select_kth
from qselect.selection.types import SelectionResult

__all__ = [
    "SelectionResult",
    "Selector",
    "select",
    "select_kth",
]
