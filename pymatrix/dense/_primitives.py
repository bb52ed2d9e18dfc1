"""
Element-wise and structural matrix operations.

add, subtract, scalar_multiply, transpose, identity, trace. None of
these depend on each other.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.validation import (
    check_nonempty, check_same_shape, check_scalar, check_size, check_square,
)
from pymatrix.dense import _alloc
from pymatrix.dense.matrix import Matrix, as_matrix


def add(a: Matrix | ArrayLike, b: Matrix | ArrayLike) -> Matrix:
    """
    Element-wise sum a + b.

    Zero-sized operands are accepted as long as both shapes match.

    Raises
    ------
    InvalidArgumentError
        If either operand is absent or the shapes differ.
    """
    a = as_matrix(a, 'a')
    b = as_matrix(b, 'b')
    check_same_shape(a, b, ('a', 'b'))

    out = _alloc.allocate(*a.shape)
    np.add(a._data, b._data, out=out)
    return Matrix._wrap(out)


def subtract(a: Matrix | ArrayLike, b: Matrix | ArrayLike) -> Matrix:
    """
    Element-wise difference a - b.

    Raises
    ------
    InvalidArgumentError
        If either operand is absent or the shapes differ.
    """
    a = as_matrix(a, 'a')
    b = as_matrix(b, 'b')
    check_same_shape(a, b, ('a', 'b'))

    out = _alloc.allocate(*a.shape)
    np.subtract(a._data, b._data, out=out)
    return Matrix._wrap(out)


def scalar_multiply(matrix: Matrix | ArrayLike, scalar: float) -> Matrix:
    """
    Multiply every element by scalar.

    Raises
    ------
    InvalidArgumentError
        If the matrix is absent or has a zero dimension, or scalar is
        not a real number.
    """
    matrix = as_matrix(matrix, 'matrix')
    check_nonempty(matrix, 'matrix')
    scalar = check_scalar(scalar, 'scalar')

    out = _alloc.allocate(*matrix.shape)
    np.multiply(matrix._data, scalar, out=out)
    return Matrix._wrap(out)


def _transpose(data: NDArray[np.float64]) -> NDArray[np.float64]:
    """Transposed copy of a raw buffer (no validation)."""
    rows, cols = data.shape
    out = _alloc.allocate(cols, rows)
    out[...] = data.T
    return out


def transpose(matrix: Matrix | ArrayLike) -> Matrix:
    """
    Return the (C x R) transpose of an (R x C) matrix.

    Raises
    ------
    InvalidArgumentError
        If the matrix is absent or has a zero dimension.
    """
    matrix = as_matrix(matrix, 'matrix')
    check_nonempty(matrix, 'matrix')
    return Matrix._wrap(_transpose(matrix._data))


def identity(n: int) -> Matrix:
    """
    Return the (n x n) identity matrix.

    n = 0 yields the empty 0x0 matrix.

    Raises
    ------
    InvalidArgumentError
        If n is negative or not an integer.
    """
    n = check_size(n, 'n')
    out = _alloc.allocate(n, n)
    out.fill(0.0)
    np.fill_diagonal(out, 1.0)
    return Matrix._wrap(out)


def trace(matrix: Matrix | ArrayLike) -> float:
    """
    Sum of the diagonal elements of a square matrix.

    Raises
    ------
    InvalidArgumentError
        If the matrix is absent, empty, or not square.
    """
    matrix = as_matrix(matrix, 'matrix')
    check_nonempty(matrix, 'matrix')
    check_square(matrix, 'matrix')

    # Summed left to right from 0.0, not np.trace's pairwise reduction
    total = 0.0
    for i in range(matrix.rows):
        total += float(matrix._data[i, i])
    return total
