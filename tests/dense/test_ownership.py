"""
Tests for buffer ownership: move, clone, and refused implicit copies.

Validates:
    - take() transfers the buffer in O(1) and leaves the source 0x0
    - move_assign() replaces contents and resets the source; self-move is a no-op
    - clone() yields an independent buffer
    - copy.copy / copy.deepcopy raise CopyNotAllowedError
    - Derived results never alias operand storage
"""

import copy

import numpy as np
import pytest

from pymatrix import Matrix, transpose
from pymatrix.core.exceptions import CopyNotAllowedError, IndexOutOfBoundsError, ValidationError


def _buffer(m):
    return m._data


# ═══════════════════════════════════════════════════════════════════════
# Move
# ═══════════════════════════════════════════════════════════════════════


class TestTake:

    def test_destination_has_contents(self, mat1):
        moved = mat1.take()
        assert moved.shape == (2, 2)
        assert moved.to_rows() == [[1, 2], [3, 4]]

    def test_source_reset(self, mat1):
        mat1.take()
        assert mat1.shape == (0, 0)
        assert mat1.size == 0
        assert _buffer(mat1).shape == (0,)

    def test_source_access_rejected(self, mat1):
        mat1.take()
        with pytest.raises(IndexOutOfBoundsError):
            mat1[0, 0]

    def test_buffer_transferred_not_copied(self, mat1):
        buf = _buffer(mat1)
        moved = mat1.take()
        assert _buffer(moved) is buf

    def test_source_keeps_element_type(self, mat1):
        etype = mat1.element_type
        mat1.take()
        assert mat1.element_type is etype

    def test_source_reusable(self, mat1):
        mat1.take()
        assert (mat1 + Matrix(0, 0, 'int')).shape == (0, 0)


class TestMoveAssign:

    def test_takes_contents(self, mat1, mat2):
        result = mat1.move_assign(mat2)
        assert result is mat1
        assert mat1.to_rows() == [[5, 6], [7, 8]]

    def test_source_reset(self, mat1, mat2):
        mat1.move_assign(mat2)
        assert mat2.shape == (0, 0)
        with pytest.raises(IndexOutOfBoundsError):
            mat2[0, 0]

    def test_adopts_shape_and_element_type(self):
        dst = Matrix(1, 1, 'float64')
        src = Matrix.from_rows([[1, 2, 3]])
        dst.move_assign(src)
        assert dst.shape == (1, 3)
        assert dst.element_type.name == 'int'

    def test_buffer_transferred(self, mat1, mat2):
        buf = _buffer(mat2)
        mat1.move_assign(mat2)
        assert _buffer(mat1) is buf

    def test_self_move_is_noop(self, mat1):
        buf = _buffer(mat1)
        assert mat1.move_assign(mat1) is mat1
        assert mat1.shape == (2, 2)
        assert mat1.to_rows() == [[1, 2], [3, 4]]
        assert _buffer(mat1) is buf

    def test_rejects_non_matrix(self, mat1):
        with pytest.raises(ValidationError):
            mat1.move_assign([[1, 2]])


# ═══════════════════════════════════════════════════════════════════════
# Copy
# ═══════════════════════════════════════════════════════════════════════


class TestCopyRefused:

    def test_copy(self, mat1):
        with pytest.raises(CopyNotAllowedError, match="clone"):
            copy.copy(mat1)

    def test_deepcopy(self, mat1):
        with pytest.raises(CopyNotAllowedError):
            copy.deepcopy(mat1)

    def test_deepcopy_inside_container(self, mat1):
        with pytest.raises(CopyNotAllowedError):
            copy.deepcopy({'m': mat1})


class TestClone:

    def test_equal_contents(self, mat1):
        dup = mat1.clone()
        assert dup == mat1
        assert dup is not mat1

    def test_independent_buffer(self, mat1):
        dup = mat1.clone()
        dup[0, 0] = 100
        assert mat1[0, 0] == 1
        assert not np.shares_memory(_buffer(dup), _buffer(mat1))

    def test_clone_empty(self):
        assert Matrix(0, 5).clone().shape == (0, 5)


# ═══════════════════════════════════════════════════════════════════════
# Derived values never alias operands
# ═══════════════════════════════════════════════════════════════════════


class TestNoAliasing:

    def test_sum(self, mat1, mat2):
        total = mat1 + mat2
        assert not np.shares_memory(_buffer(total), _buffer(mat1))
        assert not np.shares_memory(_buffer(total), _buffer(mat2))

    def test_product(self, mat1, mat2):
        product = mat1 * mat2
        assert not np.shares_memory(_buffer(product), _buffer(mat1))

    @pytest.mark.parametrize("rows, cols", [(1, 4), (4, 1), (3, 3)])
    def test_transpose_float(self, rows, cols):
        m = Matrix(rows, cols, 'float64')
        t = transpose(m)
        assert not np.shares_memory(_buffer(t), _buffer(m))
        t[0, 0] = 1.0
        assert m[0, 0] == 0.0

    def test_operands_unchanged(self, mat1, mat2):
        mat1 + mat2
        mat1 - mat2
        mat1 * mat2
        transpose(mat1)
        assert mat1.to_rows() == [[1, 2], [3, 4]]
        assert mat2.to_rows() == [[5, 6], [7, 8]]
