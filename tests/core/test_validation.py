"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_present: None rejection
    - check_array: conversion, dtype coercion, ragged/object/complex rejection
    - check_2d: dimensionality
    - check_nonempty / check_square / check_same_shape: shape checks
    - check_scalar / check_size: scalar arguments
"""

import numpy as np
import pytest

from pymatrix.core.exceptions import InvalidArgumentError
from pymatrix.core.validation import (
    check_2d,
    check_array,
    check_nonempty,
    check_present,
    check_same_shape,
    check_scalar,
    check_size,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# check_present
# ═══════════════════════════════════════════════════════════════════════


class TestCheckPresent:

    def test_none_rejected(self):
        with pytest.raises(InvalidArgumentError, match="a: matrix is absent"):
            check_present(None, "a")

    def test_empty_list_is_present(self):
        check_present([], "a")


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects non-real data."""

    def test_float_list(self):
        result = check_array([[1.0, 2.0]], "X")
        assert result.dtype == np.float64

    def test_int_list_converted(self):
        result = check_array([[1, 2], [3, 4]], "X")
        assert result.dtype == np.float64
        assert result[1, 0] == 3.0

    def test_float32_promoted(self):
        result = check_array(np.ones((2, 2), dtype=np.float32), "X")
        assert result.dtype == np.float64

    def test_ragged_rejected(self):
        with pytest.raises(InvalidArgumentError, match="X"):
            check_array([[1.0, 2.0], [3.0]], "X")

    def test_strings_rejected(self):
        with pytest.raises(InvalidArgumentError, match="non-numeric"):
            check_array([["a", "b"]], "X")

    def test_bool_rejected(self):
        with pytest.raises(InvalidArgumentError, match="non-numeric"):
            check_array([[True, False]], "X")

    def test_complex_rejected(self):
        with pytest.raises(InvalidArgumentError, match="complex"):
            check_array([[1 + 2j]], "X")

    def test_object_rejected(self):
        with pytest.raises(InvalidArgumentError, match="object dtype"):
            check_array(np.array([[1.0, None]], dtype=object), "X")


# ═══════════════════════════════════════════════════════════════════════
# Shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheck2d:

    def test_2d_passes(self):
        check_2d(np.zeros((2, 3)), "X")

    @pytest.mark.parametrize("shape", [(3,), (2, 2, 2)])
    def test_other_ndim_rejected(self, shape):
        with pytest.raises(InvalidArgumentError, match="expected 2D"):
            check_2d(np.zeros(shape), "X")

    def test_scalar_rejected(self):
        with pytest.raises(InvalidArgumentError, match="0D"):
            check_2d(np.asarray(1.0), "X")


class TestCheckNonempty:

    def test_positive_passes(self):
        check_nonempty(np.zeros((1, 1)), "X")

    @pytest.mark.parametrize("shape", [(0, 3), (3, 0), (0, 0)])
    def test_zero_dimension_rejected(self, shape):
        with pytest.raises(InvalidArgumentError, match="must be positive"):
            check_nonempty(np.zeros(shape), "X")


class TestCheckSquare:

    def test_square_passes(self):
        check_square(np.zeros((3, 3)), "X")

    def test_rectangular_rejected(self):
        with pytest.raises(InvalidArgumentError, match="2x3"):
            check_square(np.zeros((2, 3)), "X")


class TestCheckSameShape:

    def test_same_passes(self):
        check_same_shape(np.zeros((2, 3)), np.ones((2, 3)), ("a", "b"))

    def test_mismatch_reports_both(self):
        with pytest.raises(InvalidArgumentError, match="a=2x3, b=3x2"):
            check_same_shape(np.zeros((2, 3)), np.zeros((3, 2)), ("a", "b"))


# ═══════════════════════════════════════════════════════════════════════
# Scalars
# ═══════════════════════════════════════════════════════════════════════


class TestCheckScalar:

    @pytest.mark.parametrize("value", [2, 2.5, np.float64(3.0), np.int32(4)])
    def test_real_numbers_accepted(self, value):
        assert check_scalar(value, "s") == float(value)

    @pytest.mark.parametrize("value", ["2", None, 1 + 1j, True, [1.0]])
    def test_non_real_rejected(self, value):
        with pytest.raises(InvalidArgumentError, match="expected a real number"):
            check_scalar(value, "s")


class TestCheckSize:

    def test_zero_accepted(self):
        assert check_size(0, "n") == 0

    def test_numpy_integer_accepted(self):
        assert check_size(np.int64(3), "n") == 3

    def test_negative_rejected(self):
        with pytest.raises(InvalidArgumentError, match="non-negative, got -1"):
            check_size(-1, "n")

    @pytest.mark.parametrize("value", [2.0, "3", True])
    def test_non_integer_rejected(self, value):
        with pytest.raises(InvalidArgumentError, match="expected an integer"):
            check_size(value, "n")
