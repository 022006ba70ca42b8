"""
Real-number type resolution and machine constants.

Every routine in NumericsPlus is parameterised by a NumPy floating dtype
(float32, float64, longdouble). This module decides which dtype a
computation runs in and exposes the machine constants the tolerances
are derived from.
"""

import numpy as np
from numpy.typing import DTypeLike, NDArray
from typing import Any

from numericsplus.core.exceptions import ValidationError


# Default real type for integer / boolean input
DEFAULT_REAL_DTYPE = np.dtype(np.float64)


def resolve_real_dtype(*arrays: NDArray[Any], dtype: DTypeLike | None = None) -> np.dtype:
    """
    Pick the floating dtype a computation runs in.

    Args:
        *arrays: Numeric input arrays
        dtype: Explicit override. Must be a floating dtype.

    Returns:
        The requested dtype, else the common floating dtype of the inputs,
        else float64 when the inputs are integral.

    Raises:
        ValidationError: If an explicit non-floating dtype is requested
    """
    if dtype is not None:
        resolved = np.dtype(dtype)
        if not np.issubdtype(resolved, np.floating):
            raise ValidationError(f"dtype: expected a floating dtype, got {resolved}")
        return resolved

    if not arrays:
        return DEFAULT_REAL_DTYPE

    common = np.result_type(*arrays)
    if np.issubdtype(common, np.floating):
        return common
    return DEFAULT_REAL_DTYPE


def machine_epsilon(dtype: DTypeLike = np.float64) -> float:
    """Unit round-off (spacing of 1.0) for a floating dtype."""
    return float(np.finfo(dtype).eps)


def smallest_normal(dtype: DTypeLike = np.float64) -> float:
    """Smallest positive normal magnitude for a floating dtype."""
    return float(np.finfo(dtype).smallest_normal)


def all_finite(array: NDArray[np.floating[Any]]) -> bool:
    """True if the array holds no NaN and no +/-Inf."""
    return bool(np.all(np.isfinite(array)))
