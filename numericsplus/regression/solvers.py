"""
Solver dispatch for polynomial fits.

This module provides the public entry points:

    polyfit(x, y, degree)         -> coefficient array (total, never raises
                                     on data problems)
    fit_polynomial(x, y, degree)  -> PolyfitSolution (same coefficients,
                                     plus a status tag and diagnostics)
"""

from __future__ import annotations

from typing import Any, Callable
import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from numericsplus.core.exceptions import ValidationError
from numericsplus.core.result import Result
from numericsplus.core.compute.precision import DEFAULT_REAL_DTYPE, resolve_real_dtype
from numericsplus.core.compute.timing import Timer
from numericsplus.core.trace import DEGENERATE_INPUT, TraceEvent, Tracer
from numericsplus.core.validation import check_integer
from numericsplus.regression._common import zero_sentinel
from numericsplus.regression.backends.cpu import CPUNormalEquationsBackend
from numericsplus.regression.design import PolyfitDesign
from numericsplus.regression.solution import FitStatus, PolyfitParams, PolyfitSolution


Observer = Callable[[TraceEvent], None]


def fit_polynomial(
    x: ArrayLike,
    y: ArrayLike,
    degree: int,
    *,
    dtype: DTypeLike | None = None,
    observer: Observer | None = None,
) -> PolyfitSolution:
    """
    Least-squares polynomial fit with a tagged outcome.

    Minimises sum_i (y_i - p(x_i))^2 over polynomials p of the given degree
    by solving the normal equations. Invalid input and numerical failure do
    not raise; they yield the all-zero coefficient vector with status
    DEGENERATE or NON_FINITE. Call raise_for_status() on the solution to
    turn those into exceptions.

    Args:
        x: Sample positions, 1D array-like
        y: Sample values, 1D array-like of the same length
        degree: Polynomial degree (>= 0)
        dtype: Floating dtype to compute in. Default: common floating dtype
            of x and y, or float64 for integer input.
        observer: Callable receiving TraceEvent records (input summary,
            pivots, clamps, singular rows). Does not affect the result.

    Returns:
        PolyfitSolution; .coefficients has length degree + 1, highest
        power first

    Raises:
        TypeError: If degree is not an integer
        Exception: Whatever the observer raises; it is called synchronously
            and its exceptions propagate unchanged

    Example:
        >>> sol = fit_polynomial([0, 1, 2, 3], [1, 3, 5, 7], 1)
        >>> np.round(sol.coefficients, 12)
        array([2., 1.])
        >>> sol.status
        <FitStatus.OK: 'ok'>
    """
    degree = check_integer(degree, 'degree')
    tracer = Tracer(observer)
    timer = Timer()
    timer.start()

    # === Input Validation ===
    # Every data problem ends here as the zero sentinel
    with timer.section('validation'):
        try:
            design = PolyfitDesign.build(x, y, degree, dtype=dtype)
        except ValidationError as e:
            design = None
            reason = str(e)

    if design is None:
        return _degenerate(reason, degree, _sentinel_dtype(x, y, dtype), tracer, timer)

    # === Solve ===
    backend = CPUNormalEquationsBackend()
    result = backend.solve(design, tracer=tracer, timer=timer)

    return PolyfitSolution(_result=result, _design=design)


def polyfit(
    x: ArrayLike,
    y: ArrayLike,
    degree: int,
    *,
    dtype: DTypeLike | None = None,
    observer: Observer | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Least-squares polynomial coefficients, highest power first.

    Total on data: empty or mismatched inputs, NaN/Inf, too few samples,
    negative degree, singular systems and overflow all return
    np.zeros(degree + 1) instead of raising. Use fit_polynomial() to tell
    a genuine zero fit from a failure. A non-integer degree raises
    TypeError, and an exception raised by the observer propagates.

    Args:
        x: Sample positions, 1D array-like
        y: Sample values, 1D array-like of the same length
        degree: Polynomial degree
        dtype: Floating dtype to compute in (see fit_polynomial)
        observer: Optional TraceEvent sink

    Returns:
        Array of degree + 1 coefficients. Either every entry is finite or
        all entries are zero.

    Example:
        >>> polyfit([0.0, 1.0], [1.0, 2.0], 1)
        array([1., 1.])
    """
    return fit_polynomial(x, y, degree, dtype=dtype, observer=observer).coefficients


def _sentinel_dtype(x: ArrayLike, y: ArrayLike, dtype: DTypeLike | None) -> np.dtype:
    """Real dtype for a sentinel when the inputs could not be validated."""
    try:
        return resolve_real_dtype(np.asarray(x), np.asarray(y), dtype=dtype)
    except (ValueError, TypeError, ValidationError):
        return DEFAULT_REAL_DTYPE


def _degenerate(
    reason: str,
    degree: int,
    dtype: np.dtype,
    tracer: Tracer,
    timer: Timer,
) -> PolyfitSolution:
    tracer.emit(DEGENERATE_INPUT, reason=reason, degree=degree)
    timer.stop()

    params = PolyfitParams(
        coefficients=zero_sentinel(degree, dtype),
        status=FitStatus.DEGENERATE,
        degree=degree,
        n=0,
        reason=reason,
    )
    result = Result(
        params=params,
        info={'method': 'normal_equations', 'status': FitStatus.DEGENERATE.value},
        timing=timer.result(),
        backend_name=CPUNormalEquationsBackend().name,
        warnings=tuple(tracer.warnings),
        provenance={'algorithm': 'none', 'dtype': str(dtype)},
    )
    return PolyfitSolution(_result=result, _design=None)
