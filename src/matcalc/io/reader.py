"""Read matrices from line-oriented text.

Input is a dimensions line (``"<rows> <cols>"``) followed by ``rows`` lines of
``cols`` whitespace-separated numbers.
"""

from __future__ import annotations

from typing import List, Optional, TextIO, Tuple

from matcalc.core.errors import MatrixInputError
from matcalc.core.matrix import Matrix


def read_line(stream: TextIO) -> str:
    """Return the next line of ``stream`` without its newline.

    Raises
    ------
    EOFError
        When the stream is exhausted.
    """

    line = stream.readline()
    if line == "":
        raise EOFError("unexpected end of input")
    return line.rstrip("\r\n")


def parse_dimensions(line: str) -> Tuple[int, int]:
    """Parse ``"<rows> <cols>"`` into a pair of positive ints."""

    parts = line.split()
    if len(parts) != 2:
        raise MatrixInputError(f"Expected two dimensions, got {line!r}")
    try:
        rows, cols = int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise MatrixInputError(f"Invalid dimensions: {line!r}") from exc
    if rows < 1 or cols < 1:
        raise MatrixInputError(f"Dimensions must be positive, got {rows}x{cols}")
    return rows, cols


def parse_row(line: str, cols: int) -> List[float]:
    """Parse exactly ``cols`` numbers from ``line``."""

    parts = line.split()
    if len(parts) != cols:
        raise MatrixInputError(f"Expected {cols} values, got {len(parts)}: {line!r}")
    try:
        return [float(part) for part in parts]
    except ValueError as exc:
        raise MatrixInputError(f"Invalid row: {line!r}") from exc


def read_matrix(
    stream: TextIO,
    out: Optional[TextIO] = None,
    prompt: Optional[str] = None,
) -> Matrix:
    """Read a dimensions line and the matching rows from ``stream``.

    Parameters
    ----------
    stream:
        Source of input lines.
    out:
        Stream that receives ``prompt`` before the dimensions are read.
    prompt:
        Text written without a trailing newline, e.g. ``"Enter matrix size: "``.

    Raises
    ------
    MatrixInputError
        If the dimensions or any row are malformed.
    EOFError
        If the stream ends before the matrix is complete.
    """

    if prompt and out is not None:
        out.write(prompt)
        out.flush()

    rows, cols = parse_dimensions(read_line(stream))
    matrix = Matrix(rows, cols)
    for row in range(rows):
        matrix.set_row(row, parse_row(read_line(stream), cols))
    return matrix
