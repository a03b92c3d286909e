"""
Shared compute infrastructure for pymatrix.

Submodules:
    tolerances: Comparison tolerance tiers and iteration budgets
    timing: Execution timing utilities
"""

from pymatrix.core.compute.tolerances import (
    Tolerance,
    DEFAULT_TOLERANCE,
    STRICT_TOLERANCE,
    LOOSE_TOLERANCE,
    MACHINE_EPSILON,
    select_tolerance,
)
from pymatrix.core.compute.timing import Timer, timed

__all__ = [
    # Tolerances
    "Tolerance",
    "DEFAULT_TOLERANCE",
    "STRICT_TOLERANCE",
    "LOOSE_TOLERANCE",
    "MACHINE_EPSILON",
    "select_tolerance",
    # Timing
    "Timer",
    "timed",
]
