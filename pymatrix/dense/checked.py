"""
Non-raising variants of the matrix operations.

Each function has the same arguments as its counterpart in
pymatrix.dense but returns a Result instead of raising: the value on
success, or the MatrixError on failure. Warnings raised during the call
are recorded in Result.warnings rather than emitted.

Only MatrixError is captured. Anything else (a bug, KeyboardInterrupt)
propagates unchanged.

Usage:
    r = checked.inverse(A)
    if not r.ok:
        if isinstance(r.error, SingularMatrixError):
            ...
    A_inv = r.value
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar
import warnings

from numpy.typing import ArrayLike

from pymatrix.core.exceptions import MatrixError
from pymatrix.core.result import Result
from pymatrix.core.timing import timed
from pymatrix.dense import _cofactor, _primitives, _product
from pymatrix.dense.matrix import Matrix

P = TypeVar('P')


def _run(operation: str, func: Callable[..., P], *args: Any) -> Result[P]:
    value = None
    error = None
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter('always')
        with timed() as timer:
            try:
                value = func(*args)
            except MatrixError as e:
                error = e

    return Result(
        operation=operation,
        value=value,
        error=error,
        timing=timer.result(),
        warnings=tuple(str(w.message) for w in caught),
    )


def add(a: Matrix | ArrayLike, b: Matrix | ArrayLike) -> Result[Matrix]:
    return _run('add', _primitives.add, a, b)


def subtract(a: Matrix | ArrayLike, b: Matrix | ArrayLike) -> Result[Matrix]:
    return _run('subtract', _primitives.subtract, a, b)


def scalar_multiply(matrix: Matrix | ArrayLike, scalar: float) -> Result[Matrix]:
    return _run('scalar_multiply', _primitives.scalar_multiply, matrix, scalar)


def transpose(matrix: Matrix | ArrayLike) -> Result[Matrix]:
    return _run('transpose', _primitives.transpose, matrix)


def identity(n: int) -> Result[Matrix]:
    return _run('identity', _primitives.identity, n)


def trace(matrix: Matrix | ArrayLike) -> Result[float]:
    return _run('trace', _primitives.trace, matrix)


def multiply(a: Matrix | ArrayLike, b: Matrix | ArrayLike) -> Result[Matrix]:
    return _run('multiply', _product.multiply, a, b)


def determinant(matrix: Matrix | ArrayLike) -> Result[float]:
    return _run('determinant', _cofactor.determinant, matrix)


def inverse(matrix: Matrix | ArrayLike) -> Result[Matrix]:
    return _run('inverse', _cofactor.inverse, matrix)
