"""Interactive menu loop for the matrix calculator.

The session reads choices and matrices from a text stream and writes prompts
and results to another. Every :class:`~matcalc.core.errors.MatrixError` raised
while handling a choice is reported as ``ERROR`` and the loop continues.
"""

from __future__ import annotations

import sys
from typing import Callable, Dict, Optional, TextIO

from rich.console import Console

from matcalc.cli.render import render_matrix
from matcalc.core.errors import MatrixError, MatrixInputError
from matcalc.core.formatting import format_number
from matcalc.core.matrix import Matrix
from matcalc.io.reader import read_line, read_matrix
from matcalc.logging import get_logger

MAIN_MENU = (
    "1. Add matrices\n"
    "2. Multiply matrix to a constant\n"
    "3. Multiply matrices\n"
    "4. Transpose matrix\n"
    "5. Calculate a determinant\n"
    "6. Inverse matrix\n"
    "0. Exit"
)

TRANSPOSE_MENU = (
    "1. Main diagonal\n"
    "2. Side diagonal\n"
    "3. Vertical line\n"
    "4. Horizontal line"
)

CHOICE_PROMPT = "Your choice: "
SIZE_PROMPT = "Enter matrix size: "
FIRST_SIZE_PROMPT = "Enter size of first matrix: "
SECOND_SIZE_PROMPT = "Enter size of second matrix: "
CONSTANT_PROMPT = "Enter constant: "
ERROR_MESSAGE = "ERROR"

TRANSPOSES: Dict[int, Callable[[Matrix], Matrix]] = {
    1: Matrix.transpose_main_diagonal,
    2: Matrix.transpose_side_diagonal,
    3: Matrix.transpose_vertical_line,
    4: Matrix.transpose_horizontal_line,
}


class Session:
    """Drive the calculator menu over a pair of text streams.

    Parameters
    ----------
    stdin, stdout:
        Input and output streams. Default to :data:`sys.stdin` and
        :data:`sys.stdout`.
    pretty:
        Render matrix results as ``rich`` tables instead of plain rows.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        pretty: bool = False,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.pretty = pretty
        self.console = Console(file=self.stdout, highlight=False)
        self.logger = get_logger(__name__, console=False)
        self._handlers: Dict[int, Callable[[], None]] = {
            1: self._add,
            2: self._scalar_multiply,
            3: self._mat_multiply,
            4: self._transpose,
            5: self._determinant,
            6: self._inverse,
        }

    def run(self) -> None:
        """Show the menu until the user chooses ``0`` or input runs out."""

        self.logger.info("session started")
        while True:
            self._print(MAIN_MENU)
            self._write(CHOICE_PROMPT)
            try:
                choice = self._read_choice()
            except EOFError:
                break
            if choice is None:
                self._print(ERROR_MESSAGE)
                self._print()
                continue
            if choice <= 0:
                break

            try:
                self.handle(choice)
            except EOFError:
                self.logger.warning("input ended during choice %s", choice)
                break
            self._print()
        self.logger.info("session finished")

    def handle(self, choice: int) -> None:
        """Run menu entry ``choice``; unknown entries are ignored."""

        handler = self._handlers.get(choice)
        if handler is None:
            self.logger.debug("ignoring unknown choice %s", choice)
            return

        self.logger.debug("running choice %s", choice)
        try:
            handler()
        except MatrixError as exc:
            self.logger.warning("%s: %s", type(exc).__name__, exc)
            self._print(ERROR_MESSAGE)

    # ------------------------------------------------------------------
    # menu entries

    def _add(self) -> None:
        a = self._read_matrix(FIRST_SIZE_PROMPT)
        b = self._read_matrix(SECOND_SIZE_PROMPT)
        self._show_matrix("The addition result is:", a.add(b))

    def _scalar_multiply(self) -> None:
        m = self._read_matrix(SIZE_PROMPT)
        self._write(CONSTANT_PROMPT)
        line = read_line(self.stdin)
        try:
            constant = float(line.strip())
        except ValueError as exc:
            raise MatrixInputError(f"Invalid constant: {line!r}") from exc
        self._show_matrix("The result is:", m.scalar_multiply(constant))

    def _mat_multiply(self) -> None:
        a = self._read_matrix(FIRST_SIZE_PROMPT)
        b = self._read_matrix(SECOND_SIZE_PROMPT)
        self._show_matrix("The multiplication result is:", a.mat_multiply(b))

    def _transpose(self) -> None:
        self._print()
        self._print(TRANSPOSE_MENU)
        self._write(CHOICE_PROMPT)
        variant = self._read_choice()
        if variant is None:
            raise MatrixInputError("Transpose variant must be an integer")
        m = self._read_matrix(SIZE_PROMPT)
        transpose = TRANSPOSES.get(variant)
        self._show_matrix("The result is:", transpose(m) if transpose else m)

    def _determinant(self) -> None:
        m = self._read_matrix(SIZE_PROMPT)
        value = m.determinant()
        self._print("The result is:")
        self._print(format_number(value))

    def _inverse(self) -> None:
        m = self._read_matrix(SIZE_PROMPT)
        self._show_matrix("The result is:", m.inverse())

    # ------------------------------------------------------------------
    # io helpers

    def _read_choice(self) -> Optional[int]:
        line = read_line(self.stdin)
        try:
            return int(line.strip())
        except ValueError:
            self.logger.debug("invalid choice %r", line)
            return None

    def _read_matrix(self, prompt: str) -> Matrix:
        return read_matrix(self.stdin, self.stdout, prompt)

    def _show_matrix(self, heading: str, matrix: Matrix) -> None:
        self._print(heading)
        if self.pretty:
            render_matrix(matrix, console=self.console)
        else:
            self._print(str(matrix))

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _print(self, text: str = "") -> None:
        self.stdout.write(text + "\n")


def run_session(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    pretty: bool = False,
) -> None:
    Session(stdin=stdin, stdout=stdout, pretty=pretty).run()


__all__ = ["Session", "run_session"]
