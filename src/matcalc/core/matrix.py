"""Dense matrices of floats built on plain Python lists.

Every public operation returns a freshly built :class:`Matrix`; the receiver is
never modified. Only :meth:`Matrix.set_row` and :meth:`Matrix.set_element`
write to an existing instance and are meant for populating a new matrix.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Sequence, Tuple

from .errors import NotSquareError, ShapeMismatchError, SingularMatrixError
from .formatting import format_matrix

CellMapping = Callable[[int, int], Tuple[int, int]]


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the sum of pairwise products of ``a`` and ``b``.

    Products are accumulated left to right with plain float addition.
    """

    total = 0.0
    for x, y in zip(a, b):
        total += x * y
    return total


class Matrix:
    """A ``rows`` x ``cols`` grid of floats stored row-major.

    Parameters
    ----------
    rows, cols:
        Positive dimensions. The new matrix is zero-filled.

    Examples
    --------
    >>> m = Matrix.from_rows([[1, 2], [3, 4]])
    >>> m.determinant()
    -2.0
    >>> print(m + m)
    2 4
    6 8
    """

    __slots__ = ("_rows", "_cols", "_elements")

    def __init__(self, rows: int, cols: int) -> None:
        self._rows = rows
        self._cols = cols
        self._elements: List[List[float]] = [[0.0] * cols for _ in range(rows)]

    @classmethod
    def from_rows(cls, values: Sequence[Sequence[float]]) -> "Matrix":
        """Build a matrix from a non-empty sequence of equal-length rows."""

        matrix = cls(len(values), len(values[0]))
        for index, row in enumerate(values):
            matrix.set_row(index, row)
        return matrix

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._cols

    @property
    def is_square(self) -> bool:
        return self._rows == self._cols

    # ------------------------------------------------------------------
    # element access

    def set_row(self, row: int, values: Iterable[float]) -> None:
        """Replace row ``row`` with a copy of ``values``."""

        self._elements[row] = [float(value) for value in values]

    def set_element(self, row: int, col: int, value: float) -> None:
        self._elements[row][col] = float(value)

    def get_element(self, row: int, col: int) -> float:
        return self._elements[row][col]

    def get_row(self, row: int) -> List[float]:
        return list(self._elements[row])

    def get_column(self, col: int) -> List[float]:
        """Return column ``col`` as a list with one value per row."""

        return [row[col] for row in self._elements]

    def to_list(self) -> List[List[float]]:
        """Return a deep copy of the grid as nested lists."""

        return [list(row) for row in self._elements]

    # ------------------------------------------------------------------
    # arithmetic

    def add(self, other: "Matrix") -> "Matrix":
        """Return the elementwise sum of ``self`` and ``other``.

        Raises
        ------
        ShapeMismatchError
            If the shapes differ.
        """

        if self.shape != other.shape:
            raise ShapeMismatchError(
                f"Cannot add {self._rows}x{self._cols} and "
                f"{other.rows}x{other.cols} matrices"
            )

        result = Matrix(self._rows, self._cols)
        for i, (left, right) in enumerate(zip(self._elements, other._elements)):
            result.set_row(i, [a + b for a, b in zip(left, right)])
        return result

    def scalar_multiply(self, value: float) -> "Matrix":
        """Return a copy with every element multiplied by ``value``."""

        result = Matrix(self._rows, self._cols)
        for i, row in enumerate(self._elements):
            result.set_row(i, [element * value for element in row])
        return result

    def mat_multiply(self, other: "Matrix") -> "Matrix":
        """Return the matrix product ``self x other``.

        Raises
        ------
        ShapeMismatchError
            If ``self.cols`` differs from ``other.rows``.
        """

        if self._cols != other.rows:
            raise ShapeMismatchError(
                f"Cannot multiply {self._rows}x{self._cols} by "
                f"{other.rows}x{other.cols}: cols != other.rows"
            )

        columns = [other.get_column(j) for j in range(other.cols)]
        result = Matrix(self._rows, other.cols)
        for i, row in enumerate(self._elements):
            for j, column in enumerate(columns):
                result.set_element(i, j, dot(row, column))
        return result

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self.mat_multiply(other)
        if isinstance(other, (int, float)):
            return self.scalar_multiply(other)
        return NotImplemented

    # ------------------------------------------------------------------
    # transposes

    def transpose_main_diagonal(self) -> "Matrix":
        return self._transpose(lambda i, j: (j, i))

    def transpose_side_diagonal(self) -> "Matrix":
        return self._transpose(
            lambda i, j: (self._cols - 1 - j, self._rows - 1 - i)
        )

    def transpose_vertical_line(self) -> "Matrix":
        return self._transpose(lambda i, j: (i, self._cols - 1 - j))

    def transpose_horizontal_line(self) -> "Matrix":
        return self._transpose(lambda i, j: (self._rows - 1 - i, j))

    def _transpose(self, mapping: CellMapping) -> "Matrix":
        """Copy every cell (i, j) to ``mapping(i, j)`` in a new matrix."""

        self._require_square("transpose")
        result = Matrix(self._rows, self._cols)
        for i, row in enumerate(self._elements):
            for j, element in enumerate(row):
                result.set_element(*mapping(i, j), element)
        return result

    # ------------------------------------------------------------------
    # determinant and inverse

    def determinant(self) -> float:
        """Return the determinant by cofactor expansion along row 0.

        The expansion recurses on genuinely smaller matrices, so the cost grows
        factorially with the size.

        Raises
        ------
        NotSquareError
            If the matrix is not square.
        """

        self._require_square("determinant")
        a = self._elements
        if self._rows == 1:
            return a[0][0]
        if self._rows == 2:
            return a[0][0] * a[1][1] - a[1][0] * a[0][1]
        total = 0.0
        for j in range(self._cols):
            total += self.minor(0, j) * self.cofactor(0, j)
        return total

    def minor(self, row: int, col: int) -> float:
        """Return the determinant of the submatrix without ``row`` and ``col``.

        The minor of a 1x1 matrix is the empty determinant, ``1.0``.
        """

        self._require_square("minor")
        if self._rows == 1:
            return 1.0

        sub = Matrix(self._rows - 1, self._cols - 1)
        remaining = (r for i, r in enumerate(self._elements) if i != row)
        for index, values in enumerate(remaining):
            sub.set_row(index, values[:col] + values[col + 1 :])
        return sub.determinant()

    def cofactor(self, row: int, col: int) -> float:
        """Return the element at (row, col), negated when ``row + col`` is odd."""

        self._require_square("cofactor")
        value = self._elements[row][col]
        return value if (row + col) % 2 == 0 else -value

    def minors(self) -> "Matrix":
        """Return the same-shape matrix of minors."""

        return self._build_square(self.minor)

    def cofactors(self) -> "Matrix":
        """Return the same-shape matrix of signed elements."""

        return self._build_square(self.cofactor)

    def inverse(self) -> "Matrix":
        """Return the inverse computed as ``adjugate / determinant``.

        Raises
        ------
        NotSquareError
            If the matrix is not square.
        SingularMatrixError
            If the determinant is exactly zero.
        """

        self._require_square("inverse")
        d = self.determinant()
        if d == 0:
            raise SingularMatrixError("Determinant can not be zero")

        return self.minors().cofactors().transpose_main_diagonal() * (1.0 / d)

    def _build_square(self, cell: Callable[[int, int], float]) -> "Matrix":
        self._require_square("cofactor expansion")
        result = Matrix(self._rows, self._cols)
        for i in range(self._rows):
            for j in range(self._cols):
                result.set_element(i, j, cell(i, j))
        return result

    def _require_square(self, operation: str) -> None:
        if not self.is_square:
            raise NotSquareError(
                f"{operation} requires a square matrix, got "
                f"{self._rows}x{self._cols}"
            )

    # ------------------------------------------------------------------
    # dunder helpers

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._elements == other._elements

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return format_matrix(self)

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._elements!r})"


__all__ = ["Matrix", "dot"]
