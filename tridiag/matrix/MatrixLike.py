import numbers
from abc import ABC, abstractmethod
from typing import Tuple

import numpy as np

from tridiag.matrix.Errors import IndexOutOfRange

# Storage type shared by every matrix in the package
DTYPE = np.float64


def is_integer(value) -> bool:
    """ True for python / numpy integers, bools excluded """
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def check_index(i: int, j: int, rows: int, cols: int):
    """
    Validate a (row, column) pair against the matrix dimensions. Negative indices are rejected, not wrapped.
    :param i: int, row index
    :param j: int, column index
    :param rows: int, number of rows
    :param cols: int, number of columns
    """
    for name, idx, size in (('row', i, rows), ('column', j, cols)):
        if not is_integer(idx):
            raise TypeError(f"{name} index must be an integer, got {type(idx).__name__}")
        if not 0 <= idx < size:
            raise IndexOutOfRange(f"{name} index {idx} out of range [0, {size})")


class MatrixLike(ABC):
    """
    Minimal matrix capability: anything that can report its dimensions and read a single element.
    This is all that is needed to compare two matrices of different storage formats (see Equality.equal), so
    banded and dense types both implement it rather than sharing a deeper hierarchy.
    """

    @abstractmethod
    def dims(self) -> Tuple[int, int]:
        """
        Dimensions of the matrix
        :return: (rows, cols)
        """
        raise NotImplementedError

    @abstractmethod
    def at(self, i: int, j: int) -> float:
        """
        Read the element at row i, column j
        :param i: int, row index in [0, rows)
        :param j: int, column index in [0, cols)
        :return: float, the element
        """
        raise NotImplementedError

    @property
    def shape(self) -> Tuple[int, int]:
        return self.dims()

    def __len__(self) -> int:
        return self.dims()[0]

    def __getitem__(self, key) -> float:
        i, j = unpack_key(key)
        return self.at(i, j)

    def __iter__(self):
        """ Iterate over the rows, each as a dense 1D array """
        return iter(self.to_dense())

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        """ numpy conversion goes through the dense projection, not element-wise indexing """
        out = self.to_dense()
        return out if dtype is None else out.astype(dtype)

    def to_dense(self) -> np.ndarray:
        """
        Project the matrix into a dense (rows, cols) numpy array, element by element.
        Subclasses with direct access to their storage should override this.
        :return: np.ndarray, dense copy of the matrix
        """
        rows, cols = self.dims()
        out = np.zeros(shape=(rows, cols), dtype=DTYPE)
        for i in range(rows):
            for j in range(cols):
                out[i, j] = self.at(i, j)
        return out


def unpack_key(key) -> Tuple[int, int]:
    if not isinstance(key, tuple) or len(key) != 2:
        raise TypeError("matrix elements are indexed with a pair, e.g. m[i, j]")
    return key


def readonly_view(a: np.ndarray) -> np.ndarray:
    """ View on the array that cannot be written through (the owner keeps write access) """
    view = a.view()
    view.flags.writeable = False
    return view


def check_real(v) -> float:
    """ Reject anything that is not a real number (None, strings, complex), rather than coercing it to NaN """
    if not isinstance(v, numbers.Real):
        raise TypeError(f"matrix elements must be real numbers, got {type(v).__name__}")
    return v


def as_real_array(values) -> np.ndarray:
    """
    Copy array-like data into a new DTYPE array. Only boolean, integer and float sources are accepted, so that
    None or strings in the input fail instead of silently turning into NaN.
    :param values: array-like
    :return: np.ndarray of DTYPE, never aliasing values
    """
    arr = np.asarray(values)
    if arr.dtype.kind not in 'biuf':
        raise TypeError(f"matrix data must be real numbers, got array of dtype {arr.dtype}")
    return np.array(arr, dtype=DTYPE)
