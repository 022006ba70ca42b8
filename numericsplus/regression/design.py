"""
Polynomial fit design.

PolyfitDesign holds a validated sample set (x, y), the requested degree
and the real dtype the fit runs in. Building one performs the input checks
of the fit engine in their defined order; each failed check raises, and the
solver turns the exception into the zero-coefficient sentinel.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from numericsplus.core.exceptions import ValidationError
from numericsplus.core.compute.precision import resolve_real_dtype
from numericsplus.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_min_samples,
)


@dataclass(frozen=True)
class PolyfitDesign:
    """
    Validated inputs for a polynomial least-squares fit.

    Immutable after construction. x and y are private copies in the real
    dtype, so the caller's data is never touched by the solver.

    Construction:
        PolyfitDesign.build(x, y, degree)
        PolyfitDesign.build(x, y, degree, dtype=np.float32)
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _degree: int
    _dtype: np.dtype

    @classmethod
    def build(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        degree: int,
        *,
        dtype: DTypeLike | None = None,
    ) -> PolyfitDesign:
        """
        Validate inputs and build the design.

        Checks, in order:
            1. x and y are non-empty numeric 1D arrays
            2. len(x) == len(y)
            3. degree >= 0
            4. for degree > 0: len(x) > degree
            5. for degree > 0: no NaN / Inf in x or y

        Degree 0 skips checks 4-5; its closed form is mean(y), and
        non-finite means are caught by the solver's final validation.

        Raises:
            ValidationError: If a check fails
            DimensionError: If inputs are not 1D or lengths differ
        """
        x_arr = check_array(x, 'x', dtype=dtype)
        y_arr = check_array(y, 'y', dtype=dtype)
        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        check_min_samples(x_arr, 1, 'x')
        check_min_samples(y_arr, 1, 'y')

        check_consistent_length(x_arr, y_arr, names=('x', 'y'))

        if degree < 0:
            raise ValidationError(f"degree: must be >= 0, got {degree}")

        real = resolve_real_dtype(x_arr, y_arr, dtype=dtype)
        x_arr = x_arr.astype(real, copy=False)
        y_arr = y_arr.astype(real, copy=False)

        if degree > 0:
            check_min_samples(x_arr, degree + 1, 'x')
            check_finite(x_arr, 'x')
            check_finite(y_arr, 'y')

        return cls(_x=x_arr, _y=y_arr, _degree=degree, _dtype=real)

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Sample positions (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Sample values (n,)."""
        return self._y

    @property
    def degree(self) -> int:
        return self._degree

    @property
    def dtype(self) -> np.dtype:
        """Real dtype the fit runs in."""
        return self._dtype

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._x.shape[0]

    @property
    def n_coefficients(self) -> int:
        return self._degree + 1

    def __repr__(self) -> str:
        return f"PolyfitDesign(n={self.n}, degree={self._degree}, dtype={self._dtype})"
