"""
Shared helpers for the regression module.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray


def polyval(coefficients: ArrayLike, x: ArrayLike) -> NDArray[np.floating[Any]] | np.floating[Any]:
    """
    Evaluate a polynomial with Horner's scheme.

    Parameters
    ----------
    coefficients : array-like
        Coefficients ordered highest power first, as returned by polyfit().
    x : array-like or scalar
        Evaluation points.

    Returns
    -------
    Values with the shape of x (a scalar for scalar x).
    """
    coef = np.asarray(coefficients)
    x_arr = np.asarray(x)
    dtype = np.result_type(coef, x_arr, np.float32)

    result = np.zeros(x_arr.shape, dtype=dtype)
    for c in coef:
        result = result * x_arr + c
    return result[()] if result.ndim == 0 else result


def zero_sentinel(degree: int, dtype: np.dtype) -> NDArray[np.floating[Any]]:
    """All-zero coefficient vector of length degree + 1 (empty for degree < 0)."""
    return np.zeros(max(degree + 1, 0), dtype=dtype)
