import logging
from typing import Tuple, Optional, Union, Sequence

import numpy as np
from scipy import sparse

from tridiag.matrix.DenseMatrix import DenseMatrix
from tridiag.matrix.Errors import InvalidDimension, InvalidDiagonalLength, NotOnBand
from tridiag.matrix.MatrixLike import MatrixLike, DTYPE, check_index, is_integer, unpack_key, readonly_view, \
    check_real, as_real_array

logger = logging.getLogger(__name__)

ArrayLike = Union[np.ndarray, Sequence[float]]

# Names of the three stored diagonals, as returned by band_position
BAND_LOWER = 'lower'
BAND_MAIN = 'diag'
BAND_UPPER = 'upper'


def band_position(n: int, i: int, j: int) -> Optional[Tuple[str, int]]:
    """
    Map a matrix position of an n x n tridiagonal matrix onto its band storage.
        (i, i)     -> diag[i]
        (j + 1, j) -> lower[j]   (indexed by column)
        (i, i + 1) -> upper[i]   (indexed by row)
    :param n: int, dimension of the matrix
    :param i: int, row index in [0, n)
    :param j: int, column index in [0, n)
    :return: (band name, offset into that band), or None when (i, j) is off the band (an implicit zero)
    """
    check_index(i, j, n, n)
    if i == j:
        return BAND_MAIN, i
    if i == j + 1:
        return BAND_LOWER, j
    if j == i + 1:
        return BAND_UPPER, i
    return None


def _validated_diagonal(name: str, values: Optional[ArrayLike], length: int) -> np.ndarray:
    if values is None:
        return np.zeros(shape=length, dtype=DTYPE)

    # Always copy, the matrix never shares storage with the caller
    arr = as_real_array(values)
    if arr.ndim != 1 or len(arr) != length:
        raise InvalidDiagonalLength(f"{name} diagonal has shape {arr.shape}, expected length {length}")
    return arr


class TridiagonalMatrix(MatrixLike):
    def __init__(self,
                 n: int,
                 lower: Optional[ArrayLike] = None,
                 diag: Optional[ArrayLike] = None,
                 upper: Optional[ArrayLike] = None):
        """
        Square n x n matrix whose only non-zeros are on the main diagonal and the two adjacent diagonals, stored
        as three arrays in the LAPACK gtsv (dl, d, du) convention:

        d_0  u_0  0   ...  0        0
        l_0  d_1  u_1 ...  0        0
        0    l_1  d_2 ...  0        0
        ............. ...  ...      ...
                      ...  d_{n-2}  u_{n-2}
                      ...  l_{n-2}  d_{n-1}

        :param n: int, dimension of the matrix, must be >= 1
        :param lower: array-like of length n - 1, the sub-diagonal. None for zeros
        :param diag: array-like of length n, the main diagonal. None for zeros
        :param upper: array-like of length n - 1, the super-diagonal. None for zeros

        Supplied arrays are copied. When n == 1 the off-diagonals have length 0, so they may be None or empty.
        """
        if not is_integer(n) or n <= 0:
            raise InvalidDimension(f"dimension must be a positive integer, got {n!r}")
        n = int(n)
        k = n - 1

        # Validate everything before storing anything
        lower_ = _validated_diagonal(BAND_LOWER, lower, k)
        diag_ = _validated_diagonal(BAND_MAIN, diag, n)
        upper_ = _validated_diagonal(BAND_UPPER, upper, k)

        self._n = n
        self._lower = lower_
        self._diag = diag_
        self._upper = upper_

        logger.debug("created %dx%d tridiagonal matrix (zero-filled: lower=%s, diag=%s, upper=%s)",
                     n, n, lower is None, diag is None, upper is None)

    # ================
    # Constructors
    # ================

    @classmethod
    def zeros(cls, n: int) -> 'TridiagonalMatrix':
        """ n x n tridiagonal matrix of zeros """
        return cls(n=n)

    @classmethod
    def from_diagonals(cls,
                       lower: ArrayLike,
                       diag: ArrayLike,
                       upper: ArrayLike) -> 'TridiagonalMatrix':
        """
        Construct from the three diagonals, dimension is taken from the main diagonal
        :param lower: array-like, sub-diagonal of length len(diag) - 1
        :param diag: array-like, main diagonal
        :param upper: array-like, super-diagonal of length len(diag) - 1
        :return: TridiagonalMatrix
        """
        return cls(n=len(diag), lower=lower, diag=diag, upper=upper)

    @classmethod
    def from_dense(cls, a: Union[MatrixLike, np.ndarray]) -> 'TridiagonalMatrix':
        """
        Extract the tridiagonal matrix from a square dense representation. Every entry off the three diagonals
        must be exactly zero, since the band storage has no place for it.
        :param a: MatrixLike or 2D array, square
        :return: TridiagonalMatrix, equal to a
        """
        dense = a.to_dense() if isinstance(a, MatrixLike) else as_real_array(a)
        if dense.ndim != 2 or dense.shape[0] != dense.shape[1]:
            raise InvalidDimension(f"expected a square matrix, got shape {dense.shape}")

        idx = np.arange(dense.shape[0])
        off_band = np.abs(np.subtract.outer(idx, idx)) > 1
        nonzero = np.argwhere(off_band & (dense != 0))
        if len(nonzero):
            i, j = nonzero[0]
            raise NotOnBand(f"entry ({i}, {j}) = {dense[i, j]} lies outside the tridiagonal band")

        logger.debug("extracted tridiagonal matrix from dense %s", dense.shape)
        return cls(n=dense.shape[0],
                   lower=np.diagonal(dense, offset=-1),
                   diag=np.diagonal(dense),
                   upper=np.diagonal(dense, offset=1))

    @classmethod
    def from_banded(cls, ab: np.ndarray) -> 'TridiagonalMatrix':
        """
        Construct from (1, 1) band storage, see to_banded. ab[0, 0] and ab[2, -1] are not part of the matrix and
        are ignored.
        :param ab: array of shape (3, n)
        :return: TridiagonalMatrix
        """
        ab = as_real_array(ab)
        if ab.ndim != 2 or ab.shape[0] != 3:
            raise InvalidDimension(f"banded storage must have shape (3, n), got {ab.shape}")
        return cls(n=ab.shape[1], lower=ab[2, :-1], diag=ab[1], upper=ab[0, 1:])

    def copy(self) -> 'TridiagonalMatrix':
        return TridiagonalMatrix(n=self._n, lower=self._lower, diag=self._diag, upper=self._upper)

    # ================
    # Accessors
    # ================

    @property
    def n(self) -> int:
        return self._n

    @property
    def lower(self) -> np.ndarray:
        """ Sub-diagonal, read-only view (use set_at / set_band to modify) """
        return readonly_view(self._lower)

    @property
    def diag(self) -> np.ndarray:
        """ Main diagonal, read-only view (use set_at / set_band to modify) """
        return readonly_view(self._diag)

    @property
    def upper(self) -> np.ndarray:
        """ Super-diagonal, read-only view (use set_at / set_band to modify) """
        return readonly_view(self._upper)

    def dims(self) -> Tuple[int, int]:
        return self._n, self._n

    def bandwidth(self) -> Tuple[int, int]:
        """
        Lower and upper bandwidth. Always (1, 1), whatever values are stored
        :return: (kl, ku)
        """
        return 1, 1

    def at(self, i: int, j: int) -> float:
        pos = band_position(self._n, i, j)
        if pos is None:
            return 0.
        band, k = pos
        return float(self._band(band)[k])

    def set_at(self, i: int, j: int, v: float):
        """
        Set the element at row i, column j. Only positions on the three diagonals can be set.
        :param i: int, row index in [0, n)
        :param j: int, column index in [0, n)
        :param v: float, the new value
        """
        pos = band_position(self._n, i, j)
        if pos is None:
            raise NotOnBand(f"cannot set ({i}, {j}), it is off the tridiagonal band")
        band, k = pos
        self._band(band)[k] = check_real(v)

    def __setitem__(self, key, v: float):
        i, j = unpack_key(key)
        self.set_at(i, j, v)

    def set_band(self,
                 lower: Optional[ArrayLike] = None,
                 diag: Optional[ArrayLike] = None,
                 upper: Optional[ArrayLike] = None):
        """
        Overwrite whole diagonals in place, None leaves that diagonal as is. Lengths are checked as in __init__,
        and nothing is written unless all of them pass.
        """
        k = self._n - 1
        updates = {}
        for band, values, length in ((BAND_LOWER, lower, k), (BAND_MAIN, diag, self._n), (BAND_UPPER, upper, k)):
            if values is not None:
                updates[band] = _validated_diagonal(band, values, length)

        for band, values in updates.items():
            self._band(band)[:] = values

    def _band(self, band: str) -> np.ndarray:
        if band == BAND_MAIN:
            return self._diag
        if band == BAND_LOWER:
            return self._lower
        return self._upper

    # ================
    # Products and conversions
    # ================

    def __mul__(self, vector: ArrayLike) -> np.ndarray:
        """
        Matrix-vector product in O(n)

        d_0  u_0  0   ...  0    0           |    v_0      = 0               + v_0 d_0   + u_0 v_1
        l_0  d_1  u_1 ...  0    0           |    v_1      = l_0 v_0         + v_1 d_1   + u_1 v_2
        0    l_1  d_2 ...  0    0           |    v_2      = l_1 v_1         + v_2 d_2   + u_2 v_3
        ............. ...  ...  ...         |    ...      ...
                      ...  l_{N-1}  d_N     |    v_N      = l_{N-1} v_{N-1} + d_N v_N   + 0

        :param vector: array-like of length n, or an (n, m) array / MatrixLike whose columns are each multiplied
        :return: np.ndarray, same shape as the input
        """
        x = vector.to_dense() if isinstance(vector, MatrixLike) else as_real_array(vector)
        if x.ndim not in (1, 2) or x.shape[0] != self._n:
            raise ValueError(f"sizes of vector {x.shape} and matrix ({self._n}) do not match")

        # Broadcast the diagonals along the columns of a 2D input
        expand = (slice(None),) + (None,) * (x.ndim - 1)

        # A_i = l_i * v_i
        A = self._lower[expand] * x[:-1]
        # B_i = d_i * v_i
        B = self._diag[expand] * x
        # C_i = u_i * v_{i + 1}
        C = self._upper[expand] * x[1:]

        B[1:] += A
        B[:-1] += C
        return B

    def __matmul__(self, other: Union[MatrixLike, ArrayLike]) -> Union[np.ndarray, DenseMatrix]:
        """
        Matrix product. A MatrixLike operand gives a DenseMatrix, an array operand gives an array (see __mul__)
        """
        if isinstance(other, MatrixLike):
            return DenseMatrix.from_array(self * other.to_dense())
        return self * other

    def transpose(self) -> 'TridiagonalMatrix':
        """ Transposed copy, the sub and super diagonals swap places """
        return TridiagonalMatrix(n=self._n, lower=self._upper, diag=self._diag, upper=self._lower)

    @property
    def T(self) -> 'TridiagonalMatrix':
        return self.transpose()

    def to_dense(self) -> np.ndarray:
        return np.diag(self._diag) + np.diag(self._lower, k=-1) + np.diag(self._upper, k=1)

    def to_dense_matrix(self) -> DenseMatrix:
        return DenseMatrix.from_array(self.to_dense())

    def to_banded(self) -> np.ndarray:
        """
        Band storage with one sub and one super diagonal, as consumed by scipy.linalg.solve_banded((1, 1), ab, b)
        and LAPACK gbsv:

        *    u_0  u_1 ... u_{n-2}
        d_0  d_1  d_2 ... d_{n-1}
        l_0  l_1  ... l_{n-2}  *

        The unused corners (*) are zero.
        :return: np.ndarray of shape (3, n)
        """
        ab = np.zeros(shape=(3, self._n), dtype=DTYPE)
        ab[0, 1:] = self._upper
        ab[1] = self._diag
        ab[2, :-1] = self._lower
        return ab

    def to_sparse(self) -> sparse.csr_matrix:
        """
        Convert to a scipy sparse matrix in CSR format
        :return: sparse.csr_matrix, n x n
        """
        logger.debug("converting %dx%d tridiagonal matrix to csr", self._n, self._n)
        return sparse.diags([self._lower, self._diag, self._upper], offsets=[-1, 0, 1],
                            shape=(self._n, self._n), format='csr')

    def __repr__(self) -> str:
        return (f"TridiagonalMatrix(n={self._n}, lower={self._lower.tolist()}, diag={self._diag.tolist()}, "
                f"upper={self._upper.tolist()})")
