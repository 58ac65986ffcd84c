import logging
from typing import Union

import numpy as np

from tridiag.matrix.DenseMatrix import DenseMatrix
from tridiag.matrix.MatrixLike import MatrixLike
from tridiag.matrix.TridiagonalMatrix import TridiagonalMatrix

logger = logging.getLogger(__name__)

MatrixOrArray = Union[MatrixLike, np.ndarray]

# Smallest positive normal float64
MIN_NORMAL = np.finfo(np.float64).tiny


def as_matrix_like(a: MatrixOrArray) -> MatrixLike:
    """
    Adapt the argument to the MatrixLike capability, wrapping 2D numpy arrays in a DenseMatrix
    :param a: MatrixLike or 2D np.ndarray
    :return: MatrixLike
    """
    if isinstance(a, MatrixLike):
        return a
    if isinstance(a, np.ndarray):
        return DenseMatrix.from_array(a)
    raise TypeError(f"expected a MatrixLike or numpy array, got {type(a).__name__}")


def equal(a: MatrixOrArray, b: MatrixOrArray) -> bool:
    """
    Exact structural equality of two matrices, whatever their storage. Matrices are equal when they have the same
    dimensions and a.at(i, j) == b.at(i, j) for every element, with no tolerance (so NaN is never equal).
    Implicit zeros of a banded matrix compare equal to explicit zeros of a dense one.
    :param a: MatrixLike or 2D np.ndarray
    :param b: MatrixLike or 2D np.ndarray
    :return: bool, True if equal
    """
    a, b = as_matrix_like(a), as_matrix_like(b)
    if tuple(a.dims()) != tuple(b.dims()):
        return False

    if isinstance(a, TridiagonalMatrix) and isinstance(b, TridiagonalMatrix):
        logger.debug("comparing tridiagonal matrices by band")
        return bool(np.array_equal(a.lower, b.lower)
                    and np.array_equal(a.diag, b.diag)
                    and np.array_equal(a.upper, b.upper))

    if isinstance(a, DenseMatrix) and isinstance(b, DenseMatrix):
        logger.debug("comparing dense matrices by array")
        return bool(np.array_equal(a.data, b.data))

    rows, cols = a.dims()
    for i in range(rows):
        for j in range(cols):
            if a.at(i, j) != b.at(i, j):
                return False
    return True


def equal_approx(a: MatrixOrArray, b: MatrixOrArray, epsilon: float) -> bool:
    """
    Approximate equality: same dimensions, and every pair of elements equal within epsilon, either absolutely
    or relative to the larger magnitude of the two.
    :param a: MatrixLike or 2D np.ndarray
    :param b: MatrixLike or 2D np.ndarray
    :param epsilon: float, absolute / relative tolerance
    :return: bool, True if approximately equal
    """
    a, b = as_matrix_like(a), as_matrix_like(b)
    if tuple(a.dims()) != tuple(b.dims()):
        return False

    rows, cols = a.dims()
    for i in range(rows):
        for j in range(cols):
            if not _within_abs_or_rel(a.at(i, j), b.at(i, j), epsilon):
                return False
    return True


def _within_abs_or_rel(x: float, y: float, tol: float) -> bool:
    if x == y:
        return True
    delta = abs(x - y)
    if delta <= tol:
        return True
    # Relative comparison is meaningless between subnormals
    if delta <= MIN_NORMAL:
        return delta <= tol * MIN_NORMAL
    return delta / max(abs(x), abs(y)) <= tol
