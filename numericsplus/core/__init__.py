"""
Core infrastructure for NumericsPlus.

Shared abstractions used by the descriptive and regression submodules.

Key components:
    exceptions: Exception hierarchy
    result: Generic Result[P] envelope
    validation: Input validators
    protocols: TraceObserver protocol
    trace: Trace events and the shipped observers
    compute: dtype resolution, tolerances, timing
"""

from numericsplus.core.exceptions import (
    NumericsPlusError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)
from numericsplus.core.result import Result
from numericsplus.core.protocols import TraceObserver
from numericsplus.core.trace import TraceEvent, TraceRecorder, LoggingObserver

__all__ = [
    # Exceptions
    "NumericsPlusError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    # Result
    "Result",
    # Tracing
    "TraceObserver",
    "TraceEvent",
    "TraceRecorder",
    "LoggingObserver",
]
