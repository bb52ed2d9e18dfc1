"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except integer -> float64 on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages

Shape checks accept anything with a 2-tuple ``shape`` (Matrix or a 2D
ndarray), so this module does not depend on the Matrix type.
"""

import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import InvalidArgumentError


def check_present(value: Any, name: str) -> None:
    """
    Verify an input was supplied.

    Args:
        value: Input to check
        name: Parameter name for error messages

    Raises:
        InvalidArgumentError: If value is None
    """
    if value is None:
        raise InvalidArgumentError(f"{name}: matrix is absent (got None)")


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like of real numbers. Rejects ragged nested
    sequences, object dtype, and non-real dtypes (strings, booleans,
    complex, datetime).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        InvalidArgumentError: If input cannot be converted to a real array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise InvalidArgumentError(
            f"{name}: cannot convert to array (rows must all have the same length): {e}"
        ) from e

    if result.dtype == object:
        raise InvalidArgumentError(
            f"{name}: converted to object dtype, indicating ragged rows or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise InvalidArgumentError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numbers"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise InvalidArgumentError(
            f"{name}: complex dtype {result.dtype}, expected real numbers"
        )

    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_2d(array: NDArray[np.float64], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        InvalidArgumentError: If array is not 2D
    """
    if array.ndim != 2:
        raise InvalidArgumentError(
            f"{name}: expected 2D array (rows x cols), got {array.ndim}D with shape {array.shape}"
        )


def check_nonempty(matrix: Any, name: str) -> None:
    """
    Verify both dimensions are positive.

    Args:
        matrix: Matrix or 2D array to check
        name: Parameter name for error messages

    Raises:
        InvalidArgumentError: If rows or cols is zero
    """
    rows, cols = matrix.shape
    if rows < 1 or cols < 1:
        raise InvalidArgumentError(
            f"{name}: dimensions must be positive, got {rows}x{cols}"
        )


def check_square(matrix: Any, name: str) -> None:
    """
    Verify matrix has as many rows as columns.

    Args:
        matrix: Matrix or 2D array to check
        name: Parameter name for error messages

    Raises:
        InvalidArgumentError: If rows != cols
    """
    rows, cols = matrix.shape
    if rows != cols:
        raise InvalidArgumentError(
            f"{name}: expected a square matrix, got {rows}x{cols}"
        )


def check_same_shape(a: Any, b: Any, names: tuple[str, str]) -> None:
    """
    Verify two matrices have identical shapes.

    Args:
        a: First matrix
        b: Second matrix
        names: Parameter names for error messages

    Raises:
        InvalidArgumentError: If shapes differ
    """
    if a.shape != b.shape:
        (ra, ca), (rb, cb) = a.shape, b.shape
        raise InvalidArgumentError(
            f"Shape mismatch: {names[0]}={ra}x{ca}, {names[1]}={rb}x{cb}"
        )


def check_scalar(value: Any, name: str) -> float:
    """
    Validate a real scalar and return it as float.

    Args:
        value: Scalar to check
        name: Parameter name for error messages

    Returns:
        value as a Python float

    Raises:
        InvalidArgumentError: If value is not a real number (bool included)
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise InvalidArgumentError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    return float(value)


def check_size(n: Any, name: str) -> int:
    """
    Validate a non-negative integer size.

    Args:
        n: Size to check
        name: Parameter name for error messages

    Returns:
        n as a Python int

    Raises:
        InvalidArgumentError: If n is not an integer or is negative
    """
    if isinstance(n, (bool, np.bool_)) or not isinstance(n, numbers.Integral):
        raise InvalidArgumentError(
            f"{name}: expected an integer size, got {type(n).__name__}"
        )
    if n < 0:
        raise InvalidArgumentError(f"{name}: size must be non-negative, got {n}")
    return int(n)
