"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the
dense matrix operations.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    result: Generic Result[P] per-call envelope
    timing: Execution timing
    tolerances: Comparison tolerance tiers
"""

from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    MatrixError,
    InvalidArgumentError,
    DimensionMismatchError,
    NumericalError,
    SingularMatrixError,
    OutOfMemoryError,
)
from pymatrix.core.tolerances import (
    ToleranceTier,
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
)
from pymatrix.core.timing import Timer, timed

__all__ = [
    # Result
    "Result",
    # Exceptions
    "MatrixError",
    "InvalidArgumentError",
    "DimensionMismatchError",
    "NumericalError",
    "SingularMatrixError",
    "OutOfMemoryError",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
    "CPU_FP64_ILL_CONDITIONED",
    # Timing
    "Timer",
    "timed",
]
