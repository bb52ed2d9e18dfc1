"""
Matrix: immutable dense float64 matrix.

Wraps a private, read-only 2D array together with its row and column
counts. Every operation in pymatrix.dense returns a fresh Matrix and
never writes to its inputs, so two Matrix instances never share state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import InvalidArgumentError
from pymatrix.core.tolerances import ToleranceTier, CPU_FP64
from pymatrix.core.validation import (
    check_present, check_array, check_2d, check_size,
)
from pymatrix.dense import _alloc


@dataclass(frozen=True, eq=False)
class Matrix:
    """
    Rectangular matrix of double-precision values.

    R and C are fixed at construction; the backing array is read-only.
    Zero-sized matrices (R = 0 or C = 0) can be built, but most operations
    reject them.

    Construction:
        Matrix.from_array([[1.0, 2.0], [3.0, 4.0]])
        Matrix.zeros(3, 2)
    """
    _data: NDArray[np.float64]

    def __post_init__(self):
        data = self._data
        if not isinstance(data, np.ndarray):
            raise InvalidArgumentError(
                f"Matrix requires a numpy array, got {type(data).__name__}; "
                f"use Matrix.from_array to convert"
            )
        if data.ndim != 2:
            raise InvalidArgumentError(
                f"Matrix requires a 2D array, got {data.ndim}D with shape "
                f"{data.shape}; use Matrix.from_array"
            )
        if data.dtype != np.float64:
            raise InvalidArgumentError(
                f"Matrix requires float64 values, got {data.dtype}; "
                f"use Matrix.from_array to convert"
            )
        if data.flags.writeable:
            raise InvalidArgumentError(
                "Matrix requires a read-only array; use Matrix.from_array, "
                "which copies the input"
            )

    @classmethod
    def from_array(cls, data: ArrayLike, *, name: str = 'data') -> Matrix:
        """
        Build a Matrix from a 2D array-like.

        Parameters
        ----------
        data : array-like
            Nested sequences, numpy array, or any object with a .values
            attribute (e.g. a pandas DataFrame). Always copied.
        name : str
            Parameter name used in error messages.
        """
        check_present(data, name)
        if isinstance(data, Matrix):
            data = data._data
        values = getattr(data, 'values', None)
        if values is not None and not callable(values) and not isinstance(data, np.ndarray):
            data = values
        array = check_array(data, name)
        check_2d(array, name)

        out = _alloc.allocate(*array.shape)
        out[...] = array
        return cls._wrap(out)

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """Build a (rows x cols) matrix of zeros."""
        rows = check_size(rows, 'rows')
        cols = check_size(cols, 'cols')
        out = _alloc.allocate(rows, cols)
        out.fill(0.0)
        return cls._wrap(out)

    @classmethod
    def _wrap(cls, data: NDArray[np.float64]) -> Matrix:
        """Take ownership of a freshly allocated buffer. No copy."""
        data.flags.writeable = False
        return cls(_data=data)

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self.rows, self.cols)

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    @property
    def T(self) -> Matrix:
        """Transpose. See pymatrix.dense.transpose."""
        from pymatrix.dense._primitives import transpose
        return transpose(self)

    def __getitem__(self, index: tuple[int, int]) -> float:
        if (
            not isinstance(index, tuple)
            or len(index) != 2
            or not all(isinstance(i, (int, np.integer)) for i in index)
        ):
            raise TypeError(
                f"Matrix indices must be a pair of integers (i, j), got {index!r}"
            )
        return float(self._data[index])

    def to_array(self) -> NDArray[np.float64]:
        """Return a writable copy of the values."""
        return self._data.copy()

    def tolist(self) -> list[list[float]]:
        return self._data.tolist()

    def allclose(self, other: Any, tolerance: ToleranceTier = CPU_FP64) -> bool:
        """
        Element-wise comparison within a tolerance tier.

        Shapes must match exactly; values are compared with
        |a - b| <= atol + rtol * |b|.
        """
        other = as_matrix(other, 'other')
        if self.shape != other.shape:
            return False
        return bool(np.allclose(
            self._data, other._data, rtol=tolerance.rtol, atol=tolerance.atol,
        ))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __add__(self, other: Any) -> Matrix:
        from pymatrix.dense._primitives import add
        return add(self, other)

    def __sub__(self, other: Any) -> Matrix:
        from pymatrix.dense._primitives import subtract
        return subtract(self, other)

    def __matmul__(self, other: Any) -> Matrix:
        from pymatrix.dense._product import multiply
        return multiply(self, other)

    def __mul__(self, scalar: Any) -> Matrix:
        if isinstance(scalar, (Matrix, np.ndarray, list, tuple)):
            return NotImplemented
        from pymatrix.dense._primitives import scalar_multiply
        return scalar_multiply(self, scalar)

    __rmul__ = __mul__

    def __repr__(self) -> str:
        body = np.array2string(self._data, separator=', ', prefix='Matrix(')
        return f"Matrix({body}, shape={self.rows}x{self.cols})"


def as_matrix(value: Matrix | ArrayLike | None, name: str) -> Matrix:
    """Return value as a Matrix, converting array-likes. None is rejected."""
    check_present(value, name)
    if isinstance(value, Matrix):
        return value
    return Matrix.from_array(value, name=name)
