import unittest
from tests.matrix.Test_TridiagonalMatrix import Test_TridiagonalMatrix
from tests.matrix.Test_DenseMatrix import Test_DenseMatrix
from tests.matrix.Test_Equality import Test_Equality


def test_suite():
    suite = unittest.TestSuite()
    for test in (Test_TridiagonalMatrix, Test_DenseMatrix, Test_Equality):
        suite.addTest(unittest.TestLoader().loadTestsFromTestCase(test))

    return suite


if __name__ == '__main__':
    unittest.TextTestRunner(verbosity=2).run(test_suite())
