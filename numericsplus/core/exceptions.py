"""
Exception hierarchy for NumericsPlus.

All exceptions inherit from NumericsPlusError to allow catching any
library-specific error.

Two tiers:
    - Contract violations (empty input to mean(), one sample to variance())
      raise ValidationError / DimensionError immediately.
    - Data-quality problems inside polyfit() never raise. They resolve to
      the all-zero coefficient sentinel; PolyfitSolution.raise_for_status()
      converts them into the exceptions below on request.
"""


class NumericsPlusError(Exception):
    """Base exception for all NumericsPlus errors."""
    pass


class ValidationError(NumericsPlusError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when an input is not 1-dimensional or when paired inputs
    have different lengths.
    """
    pass


class NumericalError(NumericsPlusError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Normal-equations matrix is singular or produced non-finite output.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        singular_rows: Rows whose pivot fell below tolerance
        degree: Polynomial degree of the failed fit, if applicable
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        singular_rows: tuple[int, ...] | None = None,
        degree: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.singular_rows = singular_rows
        self.degree = degree
