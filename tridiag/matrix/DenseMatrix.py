from typing import Tuple, Optional, Union, List

import numpy as np

from tridiag.matrix.Errors import InvalidDimension, InvalidDataLength
from tridiag.matrix.MatrixLike import MatrixLike, DTYPE, check_index, is_integer, unpack_key, readonly_view, \
    check_real, as_real_array


class DenseMatrix(MatrixLike):
    def __init__(self,
                 rows: int,
                 cols: int,
                 data: Optional[Union[np.ndarray, List[float]]] = None):
        """
        Dense row-major matrix
        :param rows: int, number of rows, >= 1
        :param cols: int, number of columns, >= 1
        :param data: 1D array-like of length rows * cols in row-major order, or None for a matrix of zeros.
            2D data must go through from_array.
            The data is copied, the matrix never aliases the caller's buffer
        """
        for name, size in (('rows', rows), ('cols', cols)):
            if not is_integer(size) or size <= 0:
                raise InvalidDimension(f"{name} must be a positive integer, got {size!r}")

        if data is None:
            self._data = np.zeros(shape=(rows, cols), dtype=DTYPE)
        else:
            flat = as_real_array(data)
            if flat.ndim != 1:
                raise InvalidDataLength(f"data must be 1D row-major, got shape {flat.shape}; use from_array for 2D data")
            if len(flat) != rows * cols:
                raise InvalidDataLength(f"data has {len(flat)} elements, expected {rows} * {cols} = {rows * cols}")
            self._data = flat.reshape(rows, cols)

    @classmethod
    def from_array(cls, a: np.ndarray) -> 'DenseMatrix':
        """
        Construct from a 2D array
        :param a: np.ndarray (or nested lists), 2D
        :return: DenseMatrix, copy of the array
        """
        a = as_real_array(a)
        if a.ndim != 2:
            raise InvalidDimension(f"expected a 2D array, got {a.ndim} dimensions")
        return cls(rows=a.shape[0], cols=a.shape[1], data=a.ravel())

    def dims(self) -> Tuple[int, int]:
        return self._data.shape

    def at(self, i: int, j: int) -> float:
        check_index(i, j, *self._data.shape)
        return float(self._data[i, j])

    def set_at(self, i: int, j: int, v: float):
        check_index(i, j, *self._data.shape)
        self._data[i, j] = check_real(v)

    def __setitem__(self, key, v: float):
        i, j = unpack_key(key)
        self.set_at(i, j, v)

    def to_dense(self) -> np.ndarray:
        return self._data.copy()

    @property
    def data(self) -> np.ndarray:
        """ Read-only view of the underlying (rows, cols) array """
        return readonly_view(self._data)

    def __repr__(self) -> str:
        rows, cols = self.dims()
        return f"DenseMatrix(rows={rows}, cols={cols}, data={self._data.tolist()})"
