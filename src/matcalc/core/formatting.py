"""Text rendering for matrices and scalar results."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_EVEN, Context, Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .matrix import Matrix

_TWO_PLACES = Decimal("0.01")
# wide enough for any finite double at two decimal places
_CONTEXT = Context(prec=400)


def format_number(value: float) -> str:
    """Render ``value`` with at most two decimal places.

    Rounding is half-even on the exact binary value of ``value``. Trailing
    zeros and a dangling decimal point are stripped.

    Examples
    --------
    >>> format_number(3.0)
    '3'
    >>> format_number(3.14159)
    '3.14'
    >>> format_number(3.5)
    '3.5'
    """

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"

    rounded = Decimal(value).quantize(
        _TWO_PLACES, rounding=ROUND_HALF_EVEN, context=_CONTEXT
    )
    text = str(rounded)
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_matrix(matrix: "Matrix") -> str:
    """Return rows of space-separated cells joined by newlines."""

    return "\n".join(
        " ".join(format_number(value) for value in row) for row in matrix.to_list()
    )


__all__ = ["format_matrix", "format_number"]
