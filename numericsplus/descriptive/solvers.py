"""
Moment primitives: sum, mean, variance, std, corrcoef.

Each function accepts any 1-D array-like of real numbers and returns a
NumPy scalar of the resolved real dtype (float32 input stays float32,
integer input is promoted to float64).

Preconditions (non-empty input, enough samples, matching lengths) are
caller contracts: violating one raises ValidationError / DimensionError.
NaN and Inf are data, not contract violations, and propagate through the
arithmetic.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from numericsplus.core.exceptions import ValidationError
from numericsplus.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_integer,
    check_min_samples,
)


def _as_sample(values: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    arr = check_array(values, name)
    check_1d(arr, name)
    return arr


def _sum(arr: NDArray[np.floating[Any]]) -> np.floating[Any]:
    # Additive identity of the dtype for empty input
    return arr.dtype.type(np.add.reduce(arr, dtype=arr.dtype))


def _mean(arr: NDArray[np.floating[Any]]) -> np.floating[Any]:
    return arr.dtype.type(_sum(arr) / arr.dtype.type(arr.shape[0]))


def _centered(arr: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    return arr - _mean(arr)


def sum(values: ArrayLike) -> np.floating[Any]:
    """
    Sum of a sequence.

    Parameters
    ----------
    values : array-like
        1D real data. May be empty.

    Returns
    -------
    Scalar of the real dtype. Empty input returns zero.
    """
    return _sum(_as_sample(values, 'values'))


def mean(values: ArrayLike) -> np.floating[Any]:
    """
    Arithmetic mean, sum(values) / len(values).

    Parameters
    ----------
    values : array-like
        1D real data with at least one element.

    Raises
    ------
    ValidationError
        If values is empty.
    """
    arr = _as_sample(values, 'values')
    check_min_samples(arr, 1, 'values')
    return _mean(arr)


def variance(values: ArrayLike, ddof: int = 0) -> np.floating[Any]:
    """
    Variance, sum((x - mean)^2) / (n - ddof).

    Parameters
    ----------
    values : array-like
        1D real data with at least two elements.
    ddof : int
        Delta degrees of freedom. 0 (default) gives the population
        variance, 1 the unbiased sample estimator.

    Raises
    ------
    ValidationError
        If fewer than two values are given, or ddof is not in [0, n).
    """
    arr = _as_sample(values, 'values')
    check_min_samples(arr, 2, 'values')
    ddof = check_integer(ddof, 'ddof')
    n = arr.shape[0]
    if not 0 <= ddof < n:
        raise ValidationError(f"ddof: must satisfy 0 <= ddof < n={n}, got {ddof}")

    dev = _centered(arr)
    return arr.dtype.type(_sum(dev * dev) / arr.dtype.type(n - ddof))


def std(values: ArrayLike, ddof: int = 0) -> np.floating[Any]:
    """Standard deviation, sqrt(variance(values, ddof))."""
    return np.sqrt(variance(values, ddof=ddof))


def corrcoef(x: ArrayLike, y: ArrayLike) -> np.floating[Any]:
    """
    Pearson correlation coefficient of two paired samples.

    r = sum((x - mx)(y - my)) / sqrt(sum((x - mx)^2) * sum((y - my)^2))

    Parameters
    ----------
    x, y : array-like
        1D real data of equal length, at least two elements each.

    Returns
    -------
    Scalar in [-1, 1], or NaN when either sample has zero variance.

    Raises
    ------
    DimensionError
        If x and y differ in length.
    ValidationError
        If fewer than two pairs are given.
    """
    x_arr = _as_sample(x, 'x')
    y_arr = _as_sample(y, 'y')
    check_consistent_length(x_arr, y_arr, names=('x', 'y'))
    check_min_samples(x_arr, 2, 'x')

    dtype = np.result_type(x_arr, y_arr)

    # Zero variance gives 0/0 = NaN; products near the dtype's max give Inf/Inf = NaN
    with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
        dx = _centered(x_arr.astype(dtype, copy=False))
        dy = _centered(y_arr.astype(dtype, copy=False))

        sxy = _sum(dx * dy)
        sxx = _sum(dx * dx)
        syy = _sum(dy * dy)

        return dtype.type(sxy / np.sqrt(sxx * syy))
