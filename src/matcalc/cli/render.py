"""Pretty-print matrices with ``rich``."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table

from matcalc.core.formatting import format_number
from matcalc.core.matrix import Matrix


def build_matrix_table(matrix: Matrix, title: str | None = None) -> Table:
    """Return a ``rich`` table with one right-aligned column per matrix column."""

    table = Table(title=title, show_header=False, box=box.SQUARE, pad_edge=True)
    for _ in range(matrix.cols):
        table.add_column(justify="right", style="cyan")
    for row in matrix.to_list():
        table.add_row(*(format_number(value) for value in row))
    return table


def render_matrix(
    matrix: Matrix,
    console: Console | None = None,
    title: str | None = None,
) -> None:
    if console is None:
        console = Console()
    console.print(build_matrix_table(matrix, title=title))
