"""
Tests for element access.

Every read and write is bounds-checked; out-of-range access faults with
IndexOutOfBoundsError instead of reading or corrupting neighbouring data.
"""

from fractions import Fraction

import numpy as np
import pytest

from pymatrix import Matrix
from pymatrix.core.exceptions import ElementTypeError, IndexOutOfBoundsError, ValidationError


class TestRead:

    def test_getitem(self, mat1):
        assert mat1[0, 0] == 1
        assert mat1[0, 1] == 2
        assert mat1[1, 0] == 3
        assert mat1[1, 1] == 4

    def test_get(self, mat1):
        assert mat1.get(1, 0) == 3

    def test_numpy_integer_indices(self, mat1):
        assert mat1[np.int64(1), np.int64(1)] == 4

    @pytest.mark.parametrize("row, col", [(2, 0), (0, 2), (-1, 0), (0, -1), (100, 100)])
    def test_out_of_bounds(self, mat1, row, col):
        with pytest.raises(IndexOutOfBoundsError):
            mat1[row, col]

    def test_out_of_bounds_is_index_error(self, mat1):
        with pytest.raises(IndexError):
            mat1.get(0, 5)

    def test_column_overflow_does_not_wrap_to_next_row(self):
        """(0, 3) of a 2x3 would be offset 3 == (1, 0) without the check."""
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        with pytest.raises(IndexOutOfBoundsError):
            m[0, 3]

    def test_empty_matrix_rejects_access(self):
        with pytest.raises(IndexOutOfBoundsError):
            Matrix(0, 3)[0, 0]

    def test_single_index_rejected(self, mat1):
        with pytest.raises(ValidationError, match=r"\(row, col\) pair"):
            mat1[0]

    def test_slice_rejected(self, mat1):
        with pytest.raises(ValidationError):
            mat1[0:1, 0]

    def test_three_indices_rejected(self, mat1):
        with pytest.raises(ValidationError):
            mat1[0, 0, 0]


class TestWrite:

    def test_setitem(self):
        m = Matrix(2, 2, 'int')
        m[1, 0] = 7
        assert m[1, 0] == 7
        assert m.to_rows() == [[0, 0], [7, 0]]

    def test_set(self):
        m = Matrix(1, 1, 'fraction')
        m.set(0, 0, Fraction(1, 3))
        assert m.get(0, 0) == Fraction(1, 3)

    def test_conversion_on_write(self):
        m = Matrix(1, 1, 'float64')
        m[0, 0] = 3
        assert isinstance(m[0, 0], np.float64)

    def test_narrowing_write_rejected(self):
        m = Matrix(1, 1, 'int')
        with pytest.raises(ElementTypeError):
            m[0, 0] = 2.5
        assert m[0, 0] == 0

    def test_out_of_bounds_write(self):
        m = Matrix(2, 2, 'int')
        with pytest.raises(IndexOutOfBoundsError):
            m[2, 0] = 1
        assert m.to_rows() == [[0, 0], [0, 0]]


class TestIteration:

    def test_not_iterable(self, mat1):
        with pytest.raises(TypeError):
            iter(mat1)


class TestExport:

    def test_to_rows_is_copy(self, mat1):
        rows = mat1.to_rows()
        rows[0][0] = 100
        assert mat1[0, 0] == 1

    def test_to_array_is_copy(self):
        m = Matrix.from_rows([[1.0, 2.0]])
        arr = m.to_array()
        arr[0, 0] = 100.0
        assert m[0, 0] == 1.0
        assert arr.shape == (1, 2)

    def test_to_rows_degenerate(self):
        assert Matrix(0, 3).to_rows() == []
        assert Matrix(2, 0).to_rows() == [[], []]
