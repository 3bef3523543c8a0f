"""Column sums and the maximum-column-sum norm of an integer matrix."""

from __future__ import annotations

from collections.abc import Sequence


def _validate(matrix: Sequence[Sequence[int]]) -> int:
    if not matrix:
        raise ValueError("matrix must have at least one row")
    width = len(matrix[0])
    if width == 0:
        raise ValueError("matrix must have at least one column")
    if any(len(row) != width for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return width


def column_sums(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the sum of each column, left to right."""
    _validate(matrix)
    return [sum(column) for column in zip(*matrix)]


def matrix_norm(matrix: Sequence[Sequence[int]]) -> int:
    """Return the largest column sum of the matrix."""
    return max(column_sums(matrix))