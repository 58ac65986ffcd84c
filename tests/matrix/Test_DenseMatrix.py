import unittest

import numpy as np

from tridiag.matrix.DenseMatrix import DenseMatrix
from tridiag.matrix.Errors import InvalidDimension, InvalidDataLength, IndexOutOfRange


class Test_DenseMatrix(unittest.TestCase):
    def test__row_major(self):
        A = DenseMatrix(2, 3, [1., 2., 3., 4., 5., 6.])
        self.assertEqual(A.dims(), (2, 3))
        self.assertEqual(A.shape, (2, 3))
        self.assertEqual(len(A), 2)
        self.assertEqual(A.at(0, 2), 3.)
        self.assertEqual(A.at(1, 0), 4.)
        self.assertEqual(A[1, 2], 6.)

    def test__zeros(self):
        A = DenseMatrix(3, 3)
        np.testing.assert_array_equal(A.to_dense(), np.zeros((3, 3)))

    def test__invalid(self):
        with self.assertRaises(InvalidDimension):
            DenseMatrix(0, 3)
        with self.assertRaises(InvalidDimension):
            DenseMatrix(3, -1)
        with self.assertRaises(InvalidDataLength):
            DenseMatrix(2, 2, [1., 2., 3.])
        with self.assertRaises(InvalidDimension):
            DenseMatrix.from_array(np.ones(3))

    def test__set_at(self):
        A = DenseMatrix(2, 2)
        A.set_at(0, 1, 2.5)
        A[1, 0] = -1.
        np.testing.assert_array_equal(A.to_dense(), [[0., 2.5], [-1., 0.]])
        with self.assertRaises(IndexOutOfRange):
            A.set_at(2, 0, 1.)
        with self.assertRaises(IndexOutOfRange):
            A.at(0, -1)

    def test__copies_data(self):
        data = np.array([[1., 2.], [3., 4.]])
        A = DenseMatrix.from_array(data)
        data[0, 0] = 10.
        self.assertEqual(A.at(0, 0), 1.)

        out = A.to_dense()
        out[0, 0] = 10.
        self.assertEqual(A.at(0, 0), 1.)

        with self.assertRaises(ValueError):
            A.data[0, 0] = 10.

    def test__data_must_be_flat(self):
        data = np.arange(6.).reshape(3, 2)
        with self.assertRaises(InvalidDataLength):
            DenseMatrix(2, 3, data)

        A = DenseMatrix.from_array(data)
        self.assertEqual(A.dims(), (3, 2))
        self.assertEqual(A.at(2, 0), 4.)
        np.testing.assert_array_equal(A.to_dense(), data)

    def test__rejects_non_numeric(self):
        with self.assertRaises(TypeError):
            DenseMatrix(1, 2, [1., None])
        A = DenseMatrix(1, 1)
        with self.assertRaises(TypeError):
            A.set_at(0, 0, None)
        self.assertEqual(A.at(0, 0), 0.)

    def test__repr(self):
        self.assertEqual(repr(DenseMatrix(1, 2, [1., 2.])), "DenseMatrix(rows=1, cols=2, data=[[1.0, 2.0]])")


if __name__ == '__main__':
    unittest.main()
