"""
PyMatrix: small dense-matrix arithmetic for Python.

Double-precision matrices with the basic linear-algebra primitives:
element-wise arithmetic, transpose, product, identity, trace, and
determinant / inverse by cofactor expansion. No pivoting, no
decompositions; determinant and inverse cost O(m!) and are meant for
small matrices.

Submodules:
    dense: Matrix type and operations
    core: Exceptions, validation, Result envelope, timing, tolerances
"""

__version__ = "0.1.0"

from pymatrix.core import (
    Result,
    MatrixError,
    InvalidArgumentError,
    DimensionMismatchError,
    NumericalError,
    SingularMatrixError,
    OutOfMemoryError,
)
from pymatrix.dense import (
    Matrix,
    add,
    subtract,
    scalar_multiply,
    transpose,
    multiply,
    identity,
    determinant,
    inverse,
    trace,
    checked,
)

__all__ = [
    "__version__",
    # Operations
    "Matrix",
    "add",
    "subtract",
    "scalar_multiply",
    "transpose",
    "multiply",
    "identity",
    "determinant",
    "inverse",
    "trace",
    "checked",
    # Result
    "Result",
    # Exceptions
    "MatrixError",
    "InvalidArgumentError",
    "DimensionMismatchError",
    "NumericalError",
    "SingularMatrixError",
    "OutOfMemoryError",
]
