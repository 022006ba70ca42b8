"""
Tolerances for the regression solver and for numerical comparison.

Two kinds of threshold live here:
- the pivot tolerance, used by Gaussian elimination and back-substitution
  to decide whether a diagonal entry is effectively zero
- tolerance tiers, used by the test suite to compare results computed
  in different precisions
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import DTypeLike

from numericsplus.core.compute.precision import machine_epsilon, smallest_normal


# Pivot tolerance = max(smallest_normal * 1000, eps * 1e6).
# For float64 the eps term dominates (~2.2e-10).
PIVOT_SMALLEST_NORMAL_FACTOR = 1000
PIVOT_EPSILON_FACTOR = 1_000_000

# Constant-response check: |y_i - y_0| <= eps * 64 * max(1, max|y|)
CONSTANT_EPSILON_FACTOR = 64


def pivot_tolerance(dtype: DTypeLike = np.float64) -> float:
    """
    Magnitude below which a pivot is treated as zero.

    Args:
        dtype: Floating dtype the elimination runs in

    Returns:
        max(smallest_normal(dtype) * 1000, eps(dtype) * 1e6)
    """
    return max(
        smallest_normal(dtype) * PIVOT_SMALLEST_NORMAL_FACTOR,
        machine_epsilon(dtype) * PIVOT_EPSILON_FACTOR,
    )


def constant_tolerance(scale: float, dtype: DTypeLike = np.float64) -> float:
    """
    Absolute spread below which a response is considered constant.

    A few dozen units of round-off at the magnitude of the data (never
    below 1). Independent of pivot_tolerance(), which bounds moment sums.
    """
    return machine_epsilon(dtype) * CONSTANT_EPSILON_FACTOR * max(1.0, abs(float(scale)))


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Double precision, well-conditioned fits
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, well-conditioned normal equations',
)

# Double precision, normal equations of degree >= 3 on raw x
FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-6,
    atol=1e-6,
    name='fp64_ill_conditioned',
    description='Double precision, ill-conditioned normal equations',
)

# Single precision
FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision, statistically equivalent',
)
