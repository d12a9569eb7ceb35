"""Exceptions raised by matrix operations."""

from __future__ import annotations


class MatrixError(ValueError):
    """Base class for every failure signalled by :mod:`matcalc`."""


class ShapeMismatchError(MatrixError):
    """Operand shapes are incompatible for addition or multiplication."""


class NotSquareError(MatrixError):
    """A square-only operation was invoked on a non-square matrix."""


class SingularMatrixError(MatrixError):
    """The inverse was requested for a matrix whose determinant is zero."""


class MatrixInputError(MatrixError):
    """Text input could not be parsed into a matrix."""


__all__ = [
    "MatrixError",
    "MatrixInputError",
    "NotSquareError",
    "ShapeMismatchError",
    "SingularMatrixError",
]
