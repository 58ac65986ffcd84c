class MatrixError(Exception):
    """ Base class for all errors raised by the tridiag matrix types. """
    pass


class InvalidDimension(MatrixError, ValueError):
    """ Matrix dimension is not a positive integer (or a square matrix was required) """
    pass


class InvalidDiagonalLength(MatrixError, ValueError):
    """ A supplied diagonal does not have the length its position in the matrix requires """
    pass


class InvalidDataLength(MatrixError, ValueError):
    """ Dense data does not match the declared number of rows and columns """
    pass


class IndexOutOfRange(MatrixError, IndexError):
    """ Row or column index outside of [0, n) """
    pass


class NotOnBand(MatrixError, ValueError):
    """ Attempt to place a value on a cell that the band storage has no room for """
    pass
