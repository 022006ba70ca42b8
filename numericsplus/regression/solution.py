"""
Polynomial fit solution types.

Contains the parameter payload and the user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from numericsplus.core.exceptions import SingularMatrixError, ValidationError
from numericsplus.core.result import Result
from numericsplus.regression._common import polyval

if TYPE_CHECKING:
    from numericsplus.regression.design import PolyfitDesign


class FitStatus(str, Enum):
    """How a fit reached its coefficients."""
    OK = 'ok'
    CONSTANT = 'constant'              # degree 0, mean(y)
    HORIZONTAL = 'horizontal'          # all y equal, [0, ..., 0, y0]
    RANK_DEFICIENT = 'rank_deficient'  # solved with singular rows dropped
    DEGENERATE = 'degenerate'          # invalid input, zero sentinel
    NON_FINITE = 'non_finite'          # non-finite solution, zero sentinel

    @property
    def is_sentinel(self) -> bool:
        return self in (FitStatus.DEGENERATE, FitStatus.NON_FINITE)


@dataclass(frozen=True)
class PolyfitParams:
    """
    Parameter payload for a polynomial fit.

    coefficients are ordered highest power first. They are either all
    finite or all zero (the sentinel).
    """
    coefficients: NDArray[np.floating[Any]]
    status: FitStatus
    degree: int
    n: int
    singular_rows: tuple[int, ...] = ()
    clamped_entries: int = 0
    reason: str | None = None


@dataclass
class PolyfitSolution:
    """
    User-facing polynomial fit results.

    Wraps Result[PolyfitParams]. Residual statistics are computed on
    demand from the design; they are None when the input never made it
    into a design (empty, mismatched, non-numeric).
    """
    _result: Result[PolyfitParams]
    _design: 'PolyfitDesign | None'

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Coefficients, highest power first."""
        return self._result.params.coefficients

    @property
    def status(self) -> FitStatus:
        return self._result.params.status

    @property
    def succeeded(self) -> bool:
        """False when the coefficients are the zero sentinel from a failed fit."""
        return not self.status.is_sentinel

    @property
    def reason(self) -> str | None:
        """Why the sentinel was returned, if it was."""
        return self._result.params.reason

    @property
    def degree(self) -> int:
        return self._result.params.degree

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def dtype(self) -> np.dtype:
        return self.coefficients.dtype

    @property
    def singular_rows(self) -> tuple[int, ...]:
        return self._result.params.singular_rows

    @property
    def clamped_entries(self) -> int:
        return self._result.params.clamped_entries

    def predict(self, x: ArrayLike) -> NDArray[np.floating[Any]] | np.floating[Any]:
        """Evaluate the fitted polynomial at x."""
        return polyval(self.coefficients, x)

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]] | None:
        if self._design is None:
            return None
        return polyval(self.coefficients, self._design.x)

    @property
    def residuals(self) -> NDArray[np.floating[Any]] | None:
        fitted = self.fitted_values
        if fitted is None:
            return None
        return self._design.y - fitted

    @property
    def rss(self) -> float | None:
        res = self.residuals
        if res is None:
            return None
        return float(res @ res)

    @property
    def tss(self) -> float | None:
        if self._design is None:
            return None
        dev = self._design.y - self._design.y.mean()
        return float(dev @ dev)

    @property
    def r_squared(self) -> float | None:
        rss, tss = self.rss, self.tss
        if rss is None or tss is None:
            return None
        if tss == 0:
            return 1.0 if rss == 0 else 0.0
        return 1.0 - (rss / tss)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def raise_for_status(self) -> PolyfitSolution:
        """
        Raise if the fit returned the zero sentinel.

        Raises:
            ValidationError: status is DEGENERATE
            SingularMatrixError: status is NON_FINITE

        Returns:
            self, so calls can be chained
        """
        if self.status is FitStatus.DEGENERATE:
            raise ValidationError(f"polyfit: degenerate input: {self.reason}")
        if self.status is FitStatus.NON_FINITE:
            raise SingularMatrixError(
                f"polyfit: {self.reason}",
                matrix_name='normal_equations',
                singular_rows=self.singular_rows,
                degree=self.degree,
            )
        return self

    def summary(self) -> str:
        """Plain-text summary of the fit."""
        lines = [
            "Polynomial Fit Results",
            "=" * 60,
            f"Observations: {self.n}",
            f"Degree: {self.degree}",
            f"Status: {self.status.value}",
        ]
        if self.reason:
            lines.append(f"Reason: {self.reason}")
        r2 = self.r_squared
        if r2 is not None and self.succeeded:
            lines.append(f"R-squared: {r2:.6f}")
        lines += [
            "",
            "Coefficients (highest power first):",
            "-" * 60,
        ]
        for power, coef in zip(range(self.degree, -1, -1), self.coefficients):
            lines.append(f"  x^{power:<3} {coef: .10g}")
        lines.append("-" * 60)
        if self.singular_rows:
            lines.append(f"Singular rows: {list(self.singular_rows)}")
        if self.clamped_entries:
            lines.append(f"Clamped entries: {self.clamped_entries}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.6f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"PolyfitSolution(n={self.n}, degree={self.degree}, "
            f"status={self.status.value})"
        )
