"""
Shared numeric infrastructure for NumericsPlus.

Submodules:
    precision: Real dtype resolution and machine constants
    tolerances: Pivot tolerance and comparison tiers
    timing: Execution timing utilities
"""

from numericsplus.core.compute.precision import (
    DEFAULT_REAL_DTYPE,
    all_finite,
    machine_epsilon,
    resolve_real_dtype,
    smallest_normal,
)
from numericsplus.core.compute.tolerances import (
    ToleranceTier,
    constant_tolerance,
    pivot_tolerance,
)
from numericsplus.core.compute.timing import Timer

__all__ = [
    # Precision
    "DEFAULT_REAL_DTYPE",
    "all_finite",
    "machine_epsilon",
    "resolve_real_dtype",
    "smallest_normal",
    # Tolerances
    "ToleranceTier",
    "constant_tolerance",
    "pivot_tolerance",
    # Timing
    "Timer",
]
