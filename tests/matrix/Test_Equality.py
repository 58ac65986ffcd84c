import unittest
from typing import Tuple

import numpy as np

from tridiag.matrix.DenseMatrix import DenseMatrix
from tridiag.matrix.Equality import equal, equal_approx, as_matrix_like
from tridiag.matrix.MatrixLike import MatrixLike
from tridiag.matrix.TridiagonalMatrix import TridiagonalMatrix


class IdentityMatrix(MatrixLike):
    """ Matrix-like with no storage at all """

    def __init__(self, n: int):
        self._n = n

    def dims(self) -> Tuple[int, int]:
        return self._n, self._n

    def at(self, i: int, j: int) -> float:
        return 1. if i == j else 0.


class Test_Equality(unittest.TestCase):
    def setUp(self):
        self.M = TridiagonalMatrix(n=4,
                                   lower=[1.2, 2.3, 3.4],
                                   diag=[4.5, 5.6, 6.7, 7.8],
                                   upper=[8.9, 9.0, 0.1])
        self.dense = np.array([[4.5, 8.9, 0, 0],
                               [1.2, 5.6, 9.0, 0],
                               [0, 2.3, 6.7, 0.1],
                               [0, 0, 3.4, 7.8]])

    def test__tridiagonal_vs_dense(self):
        self.assertTrue(equal(self.M, DenseMatrix.from_array(self.dense)))
        self.assertTrue(equal(DenseMatrix.from_array(self.dense), self.M))
        self.assertTrue(equal(self.M, self.dense))

        dense = self.dense.copy()
        dense[3, 0] = 1e-300
        self.assertFalse(equal(self.M, dense))

        dense = self.dense.copy()
        dense[1, 1] += 1e-12
        self.assertFalse(equal(self.M, dense))

    def test__different_dims(self):
        self.assertFalse(equal(self.M, np.zeros((3, 3))))
        self.assertFalse(equal(self.M, np.zeros((4, 5))))
        self.assertFalse(equal(TridiagonalMatrix(n=1), TridiagonalMatrix(n=2)))
        self.assertFalse(equal_approx(self.M, np.zeros((3, 3)), 1.))

    def test__tridiagonal_vs_tridiagonal(self):
        other = TridiagonalMatrix.from_dense(self.dense)
        self.assertTrue(equal(self.M, other))
        other[2, 3] = 0.2
        self.assertFalse(equal(self.M, other))

    def test__negative_zero(self):
        a = TridiagonalMatrix(n=2, diag=[-0., 1.])
        self.assertTrue(equal(a, np.array([[0., 0.], [0., 1.]])))
        self.assertTrue(equal(a, TridiagonalMatrix(n=2, diag=[0., 1.])))

    def test__nan_never_equal(self):
        a = TridiagonalMatrix(n=2, diag=[np.nan, 1.])
        self.assertFalse(equal(a, a.copy()))
        self.assertFalse(equal(a, a.to_dense()))

    def test__generic_matrix_like(self):
        eye = IdentityMatrix(3)
        self.assertTrue(equal(eye, TridiagonalMatrix(n=3, diag=np.ones(3))))
        self.assertTrue(equal(eye, np.eye(3)))
        self.assertFalse(equal(eye, TridiagonalMatrix(n=3, diag=np.ones(3), upper=[0., 1.])))
        np.testing.assert_array_equal(eye.to_dense(), np.eye(3))

    def test__equal_approx(self):
        dense = self.dense.copy()
        dense[1, 1] += 1e-12
        self.assertTrue(equal_approx(self.M, dense, 1e-10))
        self.assertFalse(equal_approx(self.M, dense, 1e-14))

        # Relative tolerance for large magnitudes
        a = TridiagonalMatrix(n=1, diag=[1e10])
        self.assertTrue(equal_approx(a, np.array([[1e10 + 1.]]), 1e-9))
        self.assertFalse(equal_approx(a, np.array([[1e10 + 1.]]), 1e-12))

        self.assertFalse(equal_approx(TridiagonalMatrix(n=1, diag=[np.nan]), np.array([[np.nan]]), 1.))

    def test__as_matrix_like(self):
        self.assertIs(as_matrix_like(self.M), self.M)
        self.assertIsInstance(as_matrix_like(self.dense), DenseMatrix)
        with self.assertRaises(TypeError):
            as_matrix_like([[1., 2.], [3., 4.]])


if __name__ == '__main__':
    unittest.main()
