"""
Cofactor expansion: minor extraction, determinant, inverse.

The determinant expands recursively along column 0; the inverse is the
adjugate (transposed cofactor matrix) divided by the determinant. Both
cost O(m!) for an (m x m) input. There is no pivoting and no tolerance:
a determinant that is not exactly 0.0 is treated as invertible.

Each minor is built for one recursive call and dropped as soon as that
call returns, on the error path too, so at most one minor per recursion
level is alive at any time.
"""

from __future__ import annotations

import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import SingularMatrixError
from pymatrix.core.validation import check_nonempty, check_square
from pymatrix.dense import _alloc
from pymatrix.dense._primitives import _transpose
from pymatrix.dense.matrix import Matrix, as_matrix

# Above this order cofactor expansion takes long enough to warn about.
COFACTOR_WARNING_SIZE = 10


def _minor(data: NDArray[np.float64], row: int, col: int) -> NDArray[np.float64]:
    """
    Copy of data with one row and one column deleted.

    Indices are not checked; 0 <= row < rows and 0 <= col < cols is the
    caller's responsibility.
    """
    rows, cols = data.shape
    out = _alloc.allocate(rows - 1, cols - 1)
    out[:row, :col] = data[:row, :col]
    out[:row, col:] = data[:row, col + 1:]
    out[row:, :col] = data[row + 1:, :col]
    out[row:, col:] = data[row + 1:, col + 1:]
    return out


def _determinant(data: NDArray[np.float64]) -> float:
    """Determinant of a square buffer. The 0x0 determinant is 1.0."""
    m = data.shape[0]
    if m == 0:
        return 1.0
    if m == 1:
        return float(data[0, 0])
    if m == 2:
        a, b = float(data[0, 0]), float(data[0, 1])
        c, d = float(data[1, 0]), float(data[1, 1])
        return a * d - b * c

    det = 0.0
    sign = 1.0
    for i in range(m):
        det += sign * float(data[i, 0]) * _determinant(_minor(data, i, 0))
        sign = -sign
    return det


def _warn_if_large(m: int, operation: str) -> None:
    if m > COFACTOR_WARNING_SIZE:
        warnings.warn(
            f"{operation} of a {m}x{m} matrix uses cofactor expansion, "
            f"which costs O(m!) operations; expect a long computation",
            RuntimeWarning,
            stacklevel=3,
        )


def determinant(matrix: Matrix | ArrayLike) -> float:
    """
    Determinant by cofactor expansion along the first column.

    Parameters
    ----------
    matrix : Matrix or array-like
        Square (m x m) matrix, m >= 1.

    Returns
    -------
    float

    Raises
    ------
    InvalidArgumentError
        If the matrix is absent, empty, or not square.
    OutOfMemoryError
        If a minor cannot be allocated at any recursion depth.
    """
    matrix = as_matrix(matrix, 'matrix')
    check_nonempty(matrix, 'matrix')
    check_square(matrix, 'matrix')
    _warn_if_large(matrix.rows, 'determinant')
    return _determinant(matrix._data)


def inverse(matrix: Matrix | ArrayLike) -> Matrix:
    """
    Inverse by the adjugate method.

    cofactor[i, j] = (-1)^(i+j) * det(minor(i, j)) / det, and the inverse
    is the transpose of the cofactor matrix.

    Parameters
    ----------
    matrix : Matrix or array-like
        Square (m x m) matrix, m >= 1.

    Returns
    -------
    Matrix of shape (m, m).

    Raises
    ------
    InvalidArgumentError
        If the matrix is absent, empty, or not square.
    SingularMatrixError
        If the determinant is exactly 0.0.
    OutOfMemoryError
        If the cofactor matrix, a minor, or the result cannot be allocated.
    """
    matrix = as_matrix(matrix, 'matrix')
    check_nonempty(matrix, 'matrix')
    check_square(matrix, 'matrix')
    m = matrix.rows
    _warn_if_large(m, 'inverse')

    data = matrix._data
    det = _determinant(data)
    if det == 0.0:
        raise SingularMatrixError(
            f"matrix is singular: determinant of the {m}x{m} input is exactly 0.0",
            determinant=det,
            size=m,
        )

    cofactors = _alloc.allocate(m, m)
    for i in range(m):
        for j in range(m):
            sign = 1.0 if (i + j) % 2 == 0 else -1.0
            cofactors[i, j] = sign * _determinant(_minor(data, i, j)) / det

    return Matrix._wrap(_transpose(cofactors))
