"""
NumericsPlus: generic moment primitives and polynomial least squares.

A small numerics library working over any NumPy floating dtype.

Submodules:
    descriptive: sum, mean, variance, std, corrcoef
    regression: polyfit, fit_polynomial, polyval
    core: exceptions, result envelope, validation, tracing
"""

__version__ = "0.1.0"

from numericsplus import descriptive
from numericsplus import regression
from numericsplus.descriptive import sum, mean, variance, std, corrcoef
from numericsplus.regression import (
    FitStatus,
    PolyfitSolution,
    fit_polynomial,
    polyfit,
    polyval,
)
from numericsplus.core.exceptions import (
    NumericsPlusError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)
from numericsplus.core.trace import TraceEvent, TraceRecorder, LoggingObserver

__all__ = [
    "__version__",
    "descriptive",
    "regression",
    # Moment primitives
    "sum",
    "mean",
    "variance",
    "std",
    "corrcoef",
    # Polynomial fit
    "polyfit",
    "fit_polynomial",
    "polyval",
    "FitStatus",
    "PolyfitSolution",
    # Exceptions
    "NumericsPlusError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    # Tracing
    "TraceEvent",
    "TraceRecorder",
    "LoggingObserver",
]

import logging as _logging

# Trace logging stays silent unless the application configures a handler
_logging.getLogger(__name__).addHandler(_logging.NullHandler())
