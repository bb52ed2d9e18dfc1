"""
Tests for determinant() and minor extraction.

SciPy's LU-based det is the independent reference for random input.
"""

import numpy as np
import pytest
from numpy.testing import assert_array_equal
from scipy import linalg as sp_linalg

from pymatrix import InvalidArgumentError, Matrix, determinant, identity
from pymatrix.dense._cofactor import _determinant, _minor


class TestMinor:

    def test_removes_row_and_column(self):
        data = np.arange(16, dtype=float).reshape(4, 4)
        for row in range(4):
            for col in range(4):
                expected = np.delete(np.delete(data, row, axis=0), col, axis=1)
                assert_array_equal(_minor(data, row, col), expected)

    def test_rectangular(self):
        data = np.arange(12, dtype=float).reshape(3, 4)
        result = _minor(data, 1, 2)
        assert result.shape == (2, 3)
        assert_array_equal(result, [[0.0, 1.0, 3.0], [8.0, 9.0, 11.0]])

    def test_input_untouched(self):
        data = np.arange(9, dtype=float).reshape(3, 3)
        before = data.copy()
        _minor(data, 0, 0)
        assert_array_equal(data, before)

    def test_two_by_two_gives_single_element(self):
        data = np.array([[1.0, 2.0], [3.0, 4.0]])
        assert_array_equal(_minor(data, 0, 1), [[3.0]])


class TestDeterminant:

    def test_scenario(self, a2):
        assert determinant(a2) == -2.0

    def test_one_by_one(self):
        assert determinant([[-3.5]]) == -3.5

    def test_two_by_two_closed_form(self):
        assert determinant([[2.0, 3.0], [5.0, 7.0]]) == 2.0 * 7.0 - 3.0 * 5.0

    def test_three_by_three(self):
        m = [[6.0, 1.0, 1.0], [4.0, -2.0, 5.0], [2.0, 8.0, 7.0]]
        assert determinant(m) == -306.0

    @pytest.mark.parametrize("n", range(1, 8))
    def test_identity(self, n):
        assert determinant(identity(n)) == 1.0

    @pytest.mark.parametrize("index", [0, 1, 3])
    def test_zero_row(self, rng, index):
        data = rng.standard_normal((4, 4))
        data[index, :] = 0.0
        assert determinant(data) == 0.0

    @pytest.mark.parametrize("index", [0, 2, 3])
    def test_zero_column(self, rng, index):
        data = rng.standard_normal((4, 4))
        data[:, index] = 0.0
        assert determinant(data) == 0.0

    def test_row_swap_flips_sign(self, rng):
        data = rng.standard_normal((4, 4))
        swapped = data[[1, 0, 2, 3]]
        assert determinant(swapped) == pytest.approx(-determinant(data), rel=1e-10)

    @pytest.mark.parametrize("n", range(1, 7))
    def test_matches_scipy(self, rng, n):
        data = rng.standard_normal((n, n))
        assert determinant(data) == pytest.approx(sp_linalg.det(data), rel=1e-9, abs=1e-12)

    def test_returns_python_float(self, a2):
        assert type(determinant(a2)) is float

    def test_input_unchanged(self, a2):
        before = a2.to_array()
        determinant(a2)
        assert_array_equal(a2.to_array(), before)


class TestDeterminantErrors:

    def test_absent(self):
        with pytest.raises(InvalidArgumentError, match="absent"):
            determinant(None)

    def test_empty(self):
        with pytest.raises(InvalidArgumentError, match="must be positive"):
            determinant(identity(0))

    def test_not_square(self):
        with pytest.raises(InvalidArgumentError, match="square"):
            determinant(Matrix.zeros(2, 3))


class TestInternalDeterminant:

    def test_empty_is_one(self):
        assert _determinant(np.empty((0, 0))) == 1.0


class TestLargeMatrixWarning:

    def test_warns_above_threshold(self, monkeypatch):
        from pymatrix.dense import _cofactor
        monkeypatch.setattr(_cofactor, "COFACTOR_WARNING_SIZE", 2)
        with pytest.warns(RuntimeWarning, match="O\\(m!\\)"):
            determinant(identity(3))

    def test_silent_below_threshold(self, recwarn):
        determinant(identity(4))
        assert len(recwarn) == 0
