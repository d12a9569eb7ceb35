"""Core package for the matcalc matrix calculator.

The top-level module re-exports the :class:`~matcalc.core.matrix.Matrix` type
and its errors so callers can write ``from matcalc import Matrix``.
"""

from .core import (
    Matrix,
    MatrixError,
    MatrixInputError,
    NotSquareError,
    ShapeMismatchError,
    SingularMatrixError,
    format_matrix,
    format_number,
)

__all__ = [
    "Matrix",
    "MatrixError",
    "MatrixInputError",
    "NotSquareError",
    "ShapeMismatchError",
    "SingularMatrixError",
    "format_matrix",
    "format_number",
]
