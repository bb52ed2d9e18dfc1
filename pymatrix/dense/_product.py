"""
Matrix product.

Accumulates result[i, j] = sum_k a[i, k] * b[k, j] from 0.0 in increasing
k, one rank-1 update per k. Each element sees exactly the additions of
a naive triple loop in the same order, so results are reproducible bit
for bit; BLAS (np.matmul) reorders and blocks the sum and is not used.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike

from pymatrix.core.exceptions import DimensionMismatchError
from pymatrix.core.validation import check_nonempty, check_present
from pymatrix.dense import _alloc
from pymatrix.dense.matrix import Matrix, as_matrix


def _raw_shape(value: Any) -> tuple[int, ...] | None:
    """Shape of an operand without copying it, or None if it has none yet."""
    if isinstance(value, Matrix):
        return value.shape
    try:
        return np.shape(value)
    except (ValueError, TypeError):
        # Ragged or opaque input; as_matrix reports it properly
        return None


def _check_inner(left: tuple[int, ...], right: tuple[int, ...]) -> None:
    if len(left) != 2 or len(right) != 2:
        return
    if left[1] != right[0]:
        raise DimensionMismatchError(
            f"Cannot multiply {left[0]}x{left[1]} by {right[0]}x{right[1]}: "
            f"a has {left[1]} columns but b has {right[0]} rows",
            left_shape=tuple(left),
            right_shape=tuple(right),
        )


def multiply(a: Matrix | ArrayLike, b: Matrix | ArrayLike) -> Matrix:
    """
    Matrix product a @ b.

    Parameters
    ----------
    a : Matrix or array-like
        Left operand, shape (rowsA, colsA).
    b : Matrix or array-like
        Right operand, shape (rowsB, colsB) with rowsB == colsA.

    Returns
    -------
    Matrix of shape (rowsA, colsB).

    Raises
    ------
    InvalidArgumentError
        If either operand is absent or has a zero dimension.
    DimensionMismatchError
        If colsA != rowsB. Checked on the operands' own shapes, before
        array-likes are converted and before anything is allocated.
    """
    check_present(a, 'a')
    check_present(b, 'b')
    left, right = _raw_shape(a), _raw_shape(b)
    if left is not None and right is not None:
        _check_inner(left, right)

    a = as_matrix(a, 'a')
    b = as_matrix(b, 'b')
    _check_inner(a.shape, b.shape)
    check_nonempty(a, 'a')
    check_nonempty(b, 'b')

    out = _alloc.allocate(a.rows, b.cols)
    out.fill(0.0)
    term = _alloc.allocate(a.rows, b.cols)
    for k in range(a.cols):
        np.multiply(a._data[:, k, np.newaxis], b._data[np.newaxis, k, :], out=term)
        out += term
    return Matrix._wrap(out)
