"""
Exception hierarchy for PyMatrix.

All exceptions inherit from MatrixError to allow catching any
library-specific error. Every failure is raised from the call that
detected it; there is no shared error state between calls.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class MatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class InvalidArgumentError(MatrixError):
    """
    Input validation failed.
    
    Raised for absent inputs, zero or negative sizes, shape mismatch
    between operands of element-wise operations, non-square input where
    a square matrix is required, and non-numeric scalars.
    """
    pass


class DimensionMismatchError(MatrixError):
    """
    Inner dimensions of a matrix product disagree.
    
    Kept apart from InvalidArgumentError: both operands are well formed,
    they are just not compatible with each other.
    
    Attributes:
        left_shape: Shape (rows, cols) of the left operand
        right_shape: Shape (rows, cols) of the right operand
    """
    
    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class NumericalError(MatrixError):
    """
    Numerical computation failed.
    
    Base class for errors arising from the values of a matrix rather
    than its shape.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.
    
    Raised by inverse() when the determinant is exactly 0.0. No tolerance
    is applied; near-singular matrices are inverted as-is.
    
    Attributes:
        determinant: The determinant that was computed
        size: Order m of the (m x m) matrix
    """
    
    def __init__(
        self,
        message: str,
        determinant: float | None = None,
        size: int | None = None,
    ):
        super().__init__(message)
        self.determinant = determinant
        self.size = size


class OutOfMemoryError(MatrixError):
    """
    Allocation of a result or temporary matrix failed.
    
    Attributes:
        shape: Requested (rows, cols), if known
    """
    
    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape
