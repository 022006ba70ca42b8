"""
Moment primitives.

Public API:
    sum(x)            - Sum (zero for empty input)
    mean(x)           - Arithmetic mean
    variance(x, ddof) - Variance (population by default, ddof=1 for sample)
    std(x, ddof)      - Standard deviation
    corrcoef(x, y)    - Pearson correlation coefficient
"""

from numericsplus.descriptive.solvers import (
    sum,
    mean,
    variance,
    std,
    corrcoef,
)

__all__ = [
    "sum",
    "mean",
    "variance",
    "std",
    "corrcoef",
]
