"""
Matrix: dense, row-major, move-only 2-D value type.

A Matrix exclusively owns a flat numpy buffer of rows*cols elements.
Distinct Matrix values never share storage: every arithmetic result,
transpose and clone gets a freshly allocated buffer.

Python names are references, so "move" is explicit here. take() and
move_assign() hand the buffer to another Matrix in O(1) and leave the
source as a valid empty 0x0 matrix. Implicit copies through the copy
module are refused; clone() is the only way to duplicate a buffer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import CopyNotAllowedError, ElementTypeError, ValidationError
from pymatrix.core.tolerances import select_tolerance
from pymatrix.core.validation import (
    check_2d,
    check_dimension,
    check_index,
    check_inner_dimensions,
    check_numeric_dtype,
    check_rectangular,
    check_same_shape,
    check_square,
)
from pymatrix.dense import _kernels
from pymatrix.dense.elements import (
    DEFAULT_ELEMENT_TYPE,
    ElementType,
    element_type_for_dtype,
    get_element_type,
    infer_element_type,
)


class Matrix:
    """
    Dense rows x cols matrix over an element type.

    Construction:
        Matrix(rows, cols, element_type='float64')   # filled with zero
        Matrix.from_rows([[1, 2], [3, 4]])           # element type inferred
        Matrix.from_array(ndarray)
        Matrix.identity(n, element_type)

    Element (i, j) is read with m[i, j] and written with m[i, j] = v.
    Indices are bounds-checked on every access; negative indices are
    rejected rather than wrapped.

    Arithmetic:
        a + b, a - b    shapes must match       (DimensionMismatchError)
        a * b, a @ b    a.cols must equal b.rows (DimensionMismatchError)
        m.transpose()   always succeeds
        m.trace()       m must be square        (NotSquareError)

    Both operands of a binary operation must share an element type.
    """

    __slots__ = ('_rows', '_cols', '_data', '_etype')

    # Not a sequence; m[i, j] is the only indexing form.
    __iter__ = None

    # ndarray operands must not broadcast over a Matrix.
    __array_ufunc__ = None

    def __init__(
        self,
        rows: int,
        cols: int,
        element_type: Any = DEFAULT_ELEMENT_TYPE,
    ):
        self._rows = check_dimension(rows, 'rows')
        self._cols = check_dimension(cols, 'cols')
        self._etype = get_element_type(element_type)
        self._data = self._etype.allocate(self._rows * self._cols)

    @classmethod
    def _adopt(
        cls,
        rows: int,
        cols: int,
        etype: ElementType,
        data: NDArray[Any],
    ) -> Matrix:
        """Wrap an already-validated buffer without copying it."""
        obj = cls.__new__(cls)
        obj._rows = rows
        obj._cols = cols
        obj._etype = etype
        obj._data = data
        return obj

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Any, element_type: Any = None) -> Matrix:
        """
        Build a Matrix from nested row sequences.

        Parameters
        ----------
        rows : sequence of sequences
            Row data, e.g. [[1, 2], [3, 4]]. [] gives a 0x0 matrix.
        element_type : element type spec, optional
            If None, the narrowest type accepting every value is inferred.
        """
        n_rows, n_cols = check_rectangular(rows, 'rows')
        flat = [value for row in rows for value in row]

        if element_type is None:
            etype = infer_element_type(flat)
        else:
            etype = get_element_type(element_type)

        data = etype.allocate(n_rows * n_cols)
        for offset, value in enumerate(flat):
            data[offset] = etype.convert(value)
        return cls._adopt(n_rows, n_cols, etype, data)

    @classmethod
    def from_array(cls, array: ArrayLike, element_type: Any = None) -> Matrix:
        """
        Build a Matrix from a 2-D array. The data is copied.

        Parameters
        ----------
        array : array-like
            2-D numeric data. Integer dtypes become 'int' elements.
            Object arrays, such as to_array() output for int, fraction
            and decimal matrices, are read value by value.
        element_type : element type spec, optional
            If None, chosen from the array dtype, or inferred from the
            values of an object array. float16 and complex64 are widened
            with a UserWarning.
        """
        arr = np.asarray(array)
        check_2d(arr, 'array')
        n_rows, n_cols = arr.shape

        if arr.dtype == object:
            values = arr.reshape(-1).tolist()
            if element_type is None:
                etype = infer_element_type(values)
            else:
                etype = get_element_type(element_type)
            data = etype.allocate(n_rows * n_cols)
            for offset, value in enumerate(values):
                data[offset] = etype.convert(value)
            return cls._adopt(n_rows, n_cols, etype, data)

        check_numeric_dtype(arr, 'array')
        if element_type is None:
            etype = element_type_for_dtype(arr.dtype, stacklevel=2)
        else:
            etype = get_element_type(element_type)

        if etype.is_native:
            if not np.can_cast(arr.dtype, etype.dtype, casting='same_kind'):
                raise ElementTypeError(
                    f"array: cannot store {arr.dtype} data as '{etype.name}' elements",
                    element_type=etype.name,
                    value=arr.dtype,
                )
            data = arr.astype(etype.dtype, order='C').reshape(-1)
        else:
            data = etype.allocate(n_rows * n_cols)
            for offset, value in enumerate(arr.reshape(-1).tolist()):
                data[offset] = etype.convert(value)
        return cls._adopt(n_rows, n_cols, etype, data)

    @classmethod
    def identity(cls, n: int, element_type: Any = DEFAULT_ELEMENT_TYPE) -> Matrix:
        """n x n matrix with one on the diagonal and zero elsewhere."""
        result = cls(n, n, element_type)
        one = result._etype.one
        for i in range(result._rows):
            result._data[i * result._cols + i] = one
        return result

    @classmethod
    def zeros(cls, rows: int, cols: int, element_type: Any = DEFAULT_ELEMENT_TYPE) -> Matrix:
        """rows x cols matrix filled with the element type's zero."""
        return cls(rows, cols, element_type)

    # ------------------------------------------------------------------
    # Shape queries
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self._rows, self._cols)

    @property
    def size(self) -> int:
        """Total number of elements, rows * cols."""
        return self._rows * self._cols

    @property
    def is_square(self) -> bool:
        return self._rows == self._cols

    @property
    def is_empty(self) -> bool:
        """True if either dimension is zero."""
        return self._rows == 0 or self._cols == 0

    @property
    def element_type(self) -> ElementType:
        return self._etype

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def _offset(self, key: Any) -> int:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise ValidationError(
                f"index: expected a (row, col) pair, got {key!r}"
            )
        row, col = check_index(key[0], key[1], self.shape)
        return row * self._cols + col

    def __getitem__(self, key: Any) -> Any:
        return self._data[self._offset(key)]

    def __setitem__(self, key: Any, value: Any) -> None:
        offset = self._offset(key)
        self._data[offset] = self._etype.convert(value)

    def get(self, row: int, col: int) -> Any:
        """Element (row, col)."""
        return self[row, col]

    def set(self, row: int, col: int, value: Any) -> None:
        """Write element (row, col), converting through the element type."""
        self[row, col] = value

    def to_rows(self) -> list[list[Any]]:
        """Elements as a list of row lists (an independent copy)."""
        return self._data.reshape(self._rows, self._cols).tolist()

    def to_array(self) -> NDArray[Any]:
        """Elements as a new 2-D numpy array (an independent copy)."""
        return self._data.reshape(self._rows, self._cols).copy()

    # ------------------------------------------------------------------
    # Ownership
    # ------------------------------------------------------------------

    def _release(self) -> None:
        self._rows = 0
        self._cols = 0
        self._data = self._etype.allocate(0)

    def take(self) -> Matrix:
        """
        Move this matrix's buffer into a new Matrix.

        O(1): the buffer is handed over, not copied. Afterwards self is a
        valid 0x0 matrix of the same element type.
        """
        moved = Matrix._adopt(self._rows, self._cols, self._etype, self._data)
        self._release()
        return moved

    def move_assign(self, other: Matrix) -> Matrix:
        """
        Replace this matrix's contents with other's buffer, leaving other 0x0.

        Self-assignment is a no-op. Returns self.
        """
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"move_assign: expected Matrix, got {type(other).__name__}"
            )
        if other is self:
            return self
        self._rows = other._rows
        self._cols = other._cols
        self._etype = other._etype
        self._data = other._data
        other._release()
        return self

    def clone(self) -> Matrix:
        """Explicit deep copy with its own buffer."""
        return Matrix._adopt(self._rows, self._cols, self._etype, self._data.copy())

    def __copy__(self):
        raise CopyNotAllowedError(
            "Matrix cannot be copied implicitly; use clone() to duplicate "
            "or take() to transfer ownership"
        )

    def __deepcopy__(self, memo):
        raise CopyNotAllowedError(
            "Matrix cannot be copied implicitly; use clone() to duplicate "
            "or take() to transfer ownership"
        )

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _check_element_type(self, other: Matrix, operation: str) -> None:
        if self._etype != other._etype:
            raise ElementTypeError(
                f"{operation}: element types must agree, "
                f"got '{self._etype.name}' and '{other._etype.name}'",
                element_type=self._etype.name,
                value=other._etype.name,
            )

    def _elementwise(
        self,
        other: Matrix,
        operation: str,
        kernel: Callable[[NDArray[Any], NDArray[Any]], NDArray[Any]],
    ) -> Matrix:
        check_same_shape(self.shape, other.shape, operation)
        self._check_element_type(other, operation)
        data = kernel(self._data, other._data)
        return Matrix._adopt(self._rows, self._cols, self._etype, data)

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, 'addition', _kernels.elementwise_add)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, 'subtraction', _kernels.elementwise_subtract)

    def __mul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_inner_dimensions(self.shape, other.shape, 'multiplication')
        self._check_element_type(other, 'multiplication')
        data = _kernels.matmul(
            self._data, other._data,
            self._rows, self._cols, other._cols,
            self._etype.zero,
        )
        return Matrix._adopt(self._rows, other._cols, self._etype, data)

    __matmul__ = __mul__

    def transpose(self) -> Matrix:
        """New cols x rows matrix with element (j, i) = self(i, j)."""
        data = _kernels.transpose(self._data, self._rows, self._cols)
        return Matrix._adopt(self._cols, self._rows, self._etype, data)

    @property
    def T(self) -> Matrix:
        """Alias for transpose()."""
        return self.transpose()

    def trace(self) -> Any:
        """Sum of the diagonal. Raises NotSquareError unless rows == cols."""
        check_square(self.shape, 'trace')
        return _kernels.trace(self._data, self._rows, self._etype.zero)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape or self._etype != other._etype:
            return False
        return _kernels.array_equal(self._data, other._data)

    __hash__ = None

    def allclose(
        self,
        other: Matrix,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Approximate elementwise equality.

        Tolerances default to the tier of the element type; exact types
        (int, fraction, decimal) compare exactly.
        """
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"allclose: expected Matrix, got {type(other).__name__}"
            )
        check_same_shape(self.shape, other.shape, 'allclose')
        self._check_element_type(other, 'allclose')

        tier = select_tolerance(self._etype)
        rtol = tier.rtol if rtol is None else rtol
        atol = tier.atol if atol is None else atol
        if rtol == 0 and atol == 0:
            return _kernels.array_equal(self._data, other._data)
        return _kernels.allclose(self._data, other._data, rtol, atol)

    def __repr__(self) -> str:
        return (
            f"Matrix(rows={self._rows}, cols={self._cols}, "
            f"element_type={self._etype.name!r})"
        )
