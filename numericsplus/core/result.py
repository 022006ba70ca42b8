"""
Generic result container for NumericsPlus computations.

Result is the envelope every backend returns. Domain modules define their
own parameter payloads; the envelope carries what is common to all of
them: metadata, timing and non-fatal warnings.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (status, reason, singular rows)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a fit cannot be altered after the fact
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Attributes:
        params: Domain-specific parameters (coefficients, status, ...)
        info: Structured metadata (method, status, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Algorithm and precision details for reproducibility

    Examples:
        >>> Result(
        ...     params=PolyfitParams(coefficients=coef, ...),
        ...     info={'method': 'normal_equations', 'status': 'ok'},
        ...     timing={'total_seconds': 0.0002},
        ...     backend_name='cpu_normal_equations',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, Any] = field(default_factory=dict)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
