"""
Regression backends.

Available backends:
    CPUNormalEquationsBackend: normal equations + Gaussian elimination
"""

from numericsplus.regression.backends.cpu import CPUNormalEquationsBackend

__all__ = [
    "CPUNormalEquationsBackend",
]
