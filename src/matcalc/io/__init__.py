"""Parsing of whitespace-separated matrix input."""

from .reader import parse_dimensions, parse_row, read_line, read_matrix

__all__ = ["parse_dimensions", "parse_row", "read_line", "read_matrix"]
