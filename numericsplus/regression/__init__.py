"""
Polynomial least-squares regression.

Public API:
    polyfit(x, y, degree, ...)        -> coefficients (highest power first)
    fit_polynomial(x, y, degree, ...) -> PolyfitSolution
    polyval(coefficients, x)          -> polynomial values

polyfit() is total: data problems (empty, mismatched, NaN/Inf,
underdetermined, singular, overflow) yield an all-zero vector of length
degree + 1. fit_polynomial() returns the same coefficients together with
a FitStatus saying whether they are a real fit or the sentinel.

Example:
    >>> import numpy as np
    >>> from numericsplus.regression import polyfit
    >>> coef = polyfit([0, 1, 2, 3], [1, 2, 5, 10], 2)  # y = x^2 + 1
    >>> bool(np.allclose(coef, [1.0, 0.0, 1.0]))
    True
"""

from numericsplus.regression._common import polyval
from numericsplus.regression.design import PolyfitDesign
from numericsplus.regression.solution import FitStatus, PolyfitParams, PolyfitSolution
from numericsplus.regression.solvers import fit_polynomial, polyfit

__all__ = [
    "polyfit",
    "fit_polynomial",
    "polyval",
    "PolyfitDesign",
    "FitStatus",
    "PolyfitParams",
    "PolyfitSolution",
]
