"""
Dense matrix operations.

Public API:
    Matrix                  - Immutable float64 matrix
    add(a, b)               - Element-wise sum
    subtract(a, b)          - Element-wise difference
    scalar_multiply(m, s)   - Scale every element
    transpose(m)            - Swap rows and columns
    multiply(a, b)          - Matrix product
    identity(n)             - n x n identity
    determinant(m)          - Determinant (cofactor expansion)
    inverse(m)              - Inverse (adjugate / determinant)
    trace(m)                - Sum of the diagonal
    checked                 - The same operations returning Result
"""

from pymatrix.dense.matrix import Matrix
from pymatrix.dense._primitives import (
    add,
    subtract,
    scalar_multiply,
    transpose,
    identity,
    trace,
)
from pymatrix.dense._product import multiply
from pymatrix.dense._cofactor import determinant, inverse
from pymatrix.dense import checked

__all__ = [
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
]
