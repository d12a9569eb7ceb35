"""Matrix value type, its error taxonomy and text formatting."""

from .errors import (
    MatrixError,
    MatrixInputError,
    NotSquareError,
    ShapeMismatchError,
    SingularMatrixError,
)
from .formatting import format_matrix, format_number
from .matrix import Matrix, dot

__all__ = [
    "Matrix",
    "MatrixError",
    "MatrixInputError",
    "NotSquareError",
    "ShapeMismatchError",
    "SingularMatrixError",
    "dot",
    "format_matrix",
    "format_number",
]
