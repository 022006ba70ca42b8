"""
CPU backend for polynomial least squares.

Solves the normal equations with Gaussian elimination with partial
pivoting and back-substitution, in the design's real dtype. The design
has already passed input validation; this backend handles the closed
forms and every numerical hazard met while solving.
"""

from __future__ import annotations

from typing import Any
import numpy as np

from numericsplus.core.result import Result
from numericsplus.core.compute.precision import all_finite
from numericsplus.core.compute.timing import Timer
from numericsplus.core.compute.tolerances import constant_tolerance, pivot_tolerance
from numericsplus.core.trace import CLOSED_FORM, INPUT_SUMMARY, NON_FINITE_RESULT, Tracer
from numericsplus.descriptive.solvers import mean
from numericsplus.regression._common import zero_sentinel
from numericsplus.regression._normal_equations import (
    back_substitute,
    build_normal_equations,
    eliminate,
)
from numericsplus.regression.design import PolyfitDesign
from numericsplus.regression.solution import FitStatus, PolyfitParams


class CPUNormalEquationsBackend:
    """
    CPU backend using the normal equations.

    Implements design -> Result[PolyfitParams]. Never raises on numeric
    trouble; a solution that ends up non-finite is replaced by the zero
    sentinel with status NON_FINITE.
    """

    @property
    def name(self) -> str:
        return 'cpu_normal_equations'

    def solve(
        self,
        design: PolyfitDesign,
        *,
        tracer: Tracer | None = None,
        timer: Timer | None = None,
    ) -> Result[PolyfitParams]:
        """
        Fit the polynomial.

        Algorithm:
            1. degree 0: closed form mean(y)
            2. constant y: closed form [0, ..., 0, y0]
            3. build M, v from power sums (overflow clamped to zero)
            4. eliminate with partial pivoting (singular rows dropped)
            5. back-substitute, reverse to highest power first
            6. reject the whole vector if any entry is non-finite

        Args:
            design: Validated polynomial design
            tracer: Event sink; a silent one is used if omitted
            timer: Started Timer to record sections into; stopped here

        Returns:
            Result containing PolyfitParams
        """
        tracer = tracer if tracer is not None else Tracer()
        if timer is None:
            timer = Timer()
            timer.start()

        x, y = design.x, design.y
        degree, dtype = design.degree, design.dtype
        tol = pivot_tolerance(dtype)

        if tracer.enabled:
            tracer.emit(
                INPUT_SUMMARY,
                n=design.n,
                degree=degree,
                dtype=str(dtype),
                x_min=float(np.min(x)),
                x_max=float(np.max(x)),
                y_min=float(np.min(y)),
                y_max=float(np.max(y)),
            )

        singular_rows: list[int] = []
        n_clamped = 0

        if degree == 0:
            tracer.emit(CLOSED_FORM, form='mean')
            with np.errstate(over='ignore', invalid='ignore'):
                coefficients = np.array([mean(y)], dtype=dtype)
            status = FitStatus.CONSTANT
        elif self._is_constant(y, dtype):
            tracer.emit(CLOSED_FORM, form='horizontal')
            coefficients = zero_sentinel(degree, dtype)
            coefficients[-1] = y[0]
            status = FitStatus.HORIZONTAL
        else:
            with timer.section('normal_equations'):
                matrix, vector, n_clamped = build_normal_equations(x, y, degree, tracer)

            with timer.section('elimination'):
                singular_rows = eliminate(matrix, vector, tol, tracer)

            with timer.section('back_substitution'):
                ans, zeroed = back_substitute(matrix, vector, tol, tracer)

            singular_rows = sorted(set(singular_rows) | set(zeroed))
            coefficients = ans[::-1].copy()
            status = FitStatus.RANK_DEFICIENT if singular_rows else FitStatus.OK

        reason = None
        if not all_finite(coefficients):
            reason = 'solution contains non-finite values'
            tracer.emit(NON_FINITE_RESULT, status=status.value)
            coefficients = zero_sentinel(degree, dtype)
            status = FitStatus.NON_FINITE

        timer.stop()

        params = PolyfitParams(
            coefficients=coefficients,
            status=status,
            degree=degree,
            n=design.n,
            singular_rows=tuple(singular_rows),
            clamped_entries=n_clamped,
            reason=reason,
        )

        info: dict[str, Any] = {
            'method': 'normal_equations',
            'status': status.value,
            'pivot_tolerance': tol,
            'singular_rows': list(singular_rows),
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(tracer.warnings),
            provenance={'algorithm': 'gaussian_elimination_partial_pivoting', 'dtype': str(dtype)},
        )

    @staticmethod
    def _is_constant(y, dtype) -> bool:
        # Spread is judged against round-off at the data's scale, not the
        # pivot tolerance: a series stepping by 1e-10 is a real slope.
        scale = float(np.max(np.abs(y)))
        with np.errstate(over='ignore', invalid='ignore'):
            spread = np.abs(y - y[0])
        return bool(np.all(spread <= constant_tolerance(scale, dtype)))
