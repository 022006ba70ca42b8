"""
Normal-equations kernels for polynomial least squares.

For a degree-d fit the system is

    M[p, c] = sum_i x_i^(p + c)        p, c in [0, d]
    v[p]    = sum_i x_i^p * y_i

and the solution a[0..d] holds the coefficients from the constant term
upwards. The three stages below (build, eliminate, back-substitute) work
on function-local buffers owned by a single fit; eliminate() mutates its
arguments in place.

Every stage guards against non-finite arithmetic locally instead of
aborting: overflowing sums are clamped to zero, near-zero pivots drop the
row, non-finite updates are reverted. Each such decision is reported
through the Tracer.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from numericsplus.core.trace import (
    OVERFLOW_CLAMPED,
    PIVOT,
    SINGULAR_ROW,
    Tracer,
    UPDATE_DISCARDED,
    ZERO_DIAGONAL,
)


def _power(x: NDArray[np.floating[Any]], exponent: int) -> NDArray[np.floating[Any]]:
    # x^0 == 1 for every x, including 0
    if exponent == 0:
        return np.ones_like(x)
    return np.power(x, exponent)


def power_sums(x: NDArray[np.floating[Any]], max_power: int) -> NDArray[np.floating[Any]]:
    """
    Moment sums s[k] = sum_i x_i^k for k in [0, max_power].

    Entries may be +/-Inf or NaN when the powers overflow.
    """
    sums = np.empty(max_power + 1, dtype=x.dtype)
    with np.errstate(over='ignore', invalid='ignore'):
        for k in range(max_power + 1):
            sums[k] = np.add.reduce(_power(x, k), dtype=x.dtype)
    return sums


def build_normal_equations(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    degree: int,
    tracer: Tracer,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]], int]:
    """
    Build the (degree+1) x (degree+1) matrix and right-hand side.

    Non-finite entries are clamped to zero so that one overflowing moment
    cannot turn the whole system into NaN.

    Returns:
        (matrix, vector, n_clamped)
    """
    size = degree + 1
    sums = power_sums(x, 2 * degree)
    index = np.add.outer(np.arange(size), np.arange(size))
    matrix = sums[index]

    vector = np.empty(size, dtype=x.dtype)
    with np.errstate(over='ignore', invalid='ignore'):
        for p in range(size):
            vector[p] = np.add.reduce(_power(x, p) * y, dtype=x.dtype)

    n_clamped = 0
    for row, col in zip(*np.nonzero(~np.isfinite(matrix))):
        tracer.emit(OVERFLOW_CLAMPED, target='matrix', row=int(row), col=int(col),
                    value=float(matrix[row, col]))
        matrix[row, col] = 0
        n_clamped += 1
    for row in np.flatnonzero(~np.isfinite(vector)):
        tracer.emit(OVERFLOW_CLAMPED, target='vector', row=int(row),
                    value=float(vector[row]))
        vector[row] = 0
        n_clamped += 1

    return matrix, vector, n_clamped


def eliminate(
    matrix: NDArray[np.floating[Any]],
    vector: NDArray[np.floating[Any]],
    tol: float,
    tracer: Tracer,
) -> list[int]:
    """
    Forward elimination with partial pivoting, in place.

    For each row the candidate with the largest magnitude in the current
    column is swapped into the pivot position. A pivot below tol marks the
    row singular: its remaining entries and right-hand side are zeroed and
    elimination moves on.

    Returns:
        Indices of rows found singular
    """
    size = matrix.shape[0]
    singular_rows: list[int] = []

    with np.errstate(over='ignore', invalid='ignore', divide='ignore'):
        for row in range(size - 1):
            pivot_row = row + int(np.argmax(np.abs(matrix[row:, row])))
            magnitude = float(abs(matrix[pivot_row, row]))

            if magnitude < tol:
                tracer.emit(SINGULAR_ROW, row=row, magnitude=magnitude, tolerance=tol)
                matrix[row, row:] = 0
                vector[row] = 0
                singular_rows.append(row)
                continue

            tracer.emit(PIVOT, row=row, pivot_row=pivot_row, magnitude=magnitude)
            if pivot_row != row:
                matrix[[row, pivot_row]] = matrix[[pivot_row, row]]
                vector[[row, pivot_row]] = vector[[pivot_row, row]]

            for target in range(row + 1, size):
                multiplier = matrix[target, row] / matrix[row, row]
                if not np.isfinite(multiplier):
                    tracer.emit(UPDATE_DISCARDED, row=target, pivot_row=row,
                                reason='multiplier')
                    continue

                updated = matrix[target, row:] - multiplier * matrix[row, row:]
                bad = ~np.isfinite(updated)
                if bad.any():
                    tracer.emit(UPDATE_DISCARDED, row=target, pivot_row=row,
                                reason='matrix', entries=int(bad.sum()))
                    updated = np.where(bad, matrix[target, row:], updated)
                matrix[target, row:] = updated

                rhs = vector[target] - multiplier * vector[row]
                if np.isfinite(rhs):
                    vector[target] = rhs
                else:
                    tracer.emit(UPDATE_DISCARDED, row=target, pivot_row=row,
                                reason='vector')

    return singular_rows


def back_substitute(
    matrix: NDArray[np.floating[Any]],
    vector: NDArray[np.floating[Any]],
    tol: float,
    tracer: Tracer,
) -> tuple[NDArray[np.floating[Any]], list[int]]:
    """
    Solve the upper-triangular system left by eliminate().

    A diagonal entry below tol, or a non-finite quotient, yields a zero
    for that unknown.

    Returns:
        (solution ordered from the constant term upwards, zeroed rows)
    """
    size = matrix.shape[0]
    ans = np.zeros(size, dtype=matrix.dtype)
    zeroed: list[int] = []

    with np.errstate(over='ignore', invalid='ignore', divide='ignore'):
        for row in range(size - 1, -1, -1):
            acc = np.dot(matrix[row, row + 1:], ans[row + 1:])
            diagonal = matrix[row, row]

            if abs(diagonal) < tol:
                tracer.emit(ZERO_DIAGONAL, row=row, magnitude=float(abs(diagonal)))
                zeroed.append(row)
                continue

            value = (vector[row] - acc) / diagonal
            if np.isfinite(value):
                ans[row] = value
            else:
                tracer.emit(ZERO_DIAGONAL, row=row, magnitude=float(abs(diagonal)),
                            reason='non_finite')
                zeroed.append(row)

    return ans, sorted(zeroed)
