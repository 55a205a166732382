"""Rotations and flips of matrices, as nested lists or as flat row-major lists."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Any

Matrix = Sequence[Sequence[Any]]


def _width(matrix: Matrix) -> int:
    """Number of columns; raises ValueError if the rows differ in length."""
    if not matrix:
        return 0
    width = len(matrix[0])
    for number, row in enumerate(matrix):
        if len(row) != width:
            raise ValueError(
                f"all rows must have {width} columns, row {number} has {len(row)}"
            )
    return width


def _require_square(matrix: Matrix) -> None:
    width = _width(matrix)
    if width != len(matrix):
        raise ValueError(
            f"matrix must be square, got {len(matrix)} rows of {width} columns"
        )


def _replace_rows(
    matrix: MutableSequence[MutableSequence[Any]], new_rows: list[list[Any]]
) -> None:
    for row, new in zip(matrix, new_rows):
        row[:] = new


def rotate_clockwise(matrix: Matrix) -> list[list[Any]]:
    """A new matrix: ``matrix`` turned 90 degrees clockwise (rows x cols becomes cols x rows)."""
    _width(matrix)
    return [list(row) for row in zip(*reversed(matrix))]


def rotate_anticlockwise(matrix: Matrix) -> list[list[Any]]:
    """A new matrix: ``matrix`` turned 90 degrees anticlockwise."""
    _width(matrix)
    return [list(column) for column in zip(*matrix)][::-1]


def rotate_180(matrix: Matrix) -> list[list[Any]]:
    """A new matrix: ``matrix`` turned half a circle."""
    _width(matrix)
    return [list(row)[::-1] for row in reversed(matrix)]


def flip_horizontal(matrix: Matrix) -> list[list[Any]]:
    """A new matrix with each row reversed (mirrored left to right)."""
    _width(matrix)
    return [list(row)[::-1] for row in matrix]


def flip_vertical(matrix: Matrix) -> list[list[Any]]:
    """A new matrix with the order of the rows reversed (mirrored top to bottom)."""
    _width(matrix)
    return [list(row) for row in reversed(matrix)]


def rotate_in_place(matrix: MutableSequence[MutableSequence[Any]]) -> None:
    """Turn a square matrix 90 degrees clockwise, rewriting its rows."""
    _require_square(matrix)
    _replace_rows(matrix, rotate_clockwise(matrix))


def rotate_anticlockwise_in_place(matrix: MutableSequence[MutableSequence[Any]]) -> None:
    """Turn a square matrix 90 degrees anticlockwise, rewriting its rows."""
    _require_square(matrix)
    _replace_rows(matrix, rotate_anticlockwise(matrix))


def rotate_180_in_place(matrix: MutableSequence[MutableSequence[Any]]) -> None:
    """Turn a matrix half a circle, rewriting its rows."""
    _replace_rows(matrix, rotate_180(matrix))


def flip_horizontal_in_place(matrix: MutableSequence[MutableSequence[Any]]) -> None:
    """Reverse every row of the matrix in place."""
    _width(matrix)
    for row in matrix:
        row.reverse()


def flip_vertical_in_place(matrix: MutableSequence[MutableSequence[Any]]) -> None:
    """Reverse the order of the rows' contents in place, keeping the row objects."""
    _replace_rows(matrix, flip_vertical(matrix))


def _check_flat(values: Sequence[Any], rows: int, cols: int) -> None:
    if rows < 0 or cols < 0:
        raise ValueError(f"dimensions must not be negative, got {rows}x{cols}")
    if len(values) != rows * cols:
        raise ValueError(
            f"expected {rows * cols} values for {rows}x{cols}, got {len(values)}"
        )


def _flat_rows(values: Sequence[Any], rows: int, cols: int) -> list[Sequence[Any]]:
    return [values[start:start + cols] for start in range(0, rows * cols, cols)] if cols else []


def flat_rotate_clockwise(values: Sequence[Any], rows: int, cols: int) -> list[Any]:
    """Row-major ``rows`` x ``cols`` values turned clockwise; the result is ``cols`` x ``rows``."""
    _check_flat(values, rows, cols)
    return [values[r * cols + c] for c in range(cols) for r in reversed(range(rows))]


def flat_rotate_anticlockwise(values: Sequence[Any], rows: int, cols: int) -> list[Any]:
    """Row-major values turned anticlockwise; the result is ``cols`` x ``rows``."""
    _check_flat(values, rows, cols)
    return [values[r * cols + c] for c in reversed(range(cols)) for r in range(rows)]


def flat_rotate_180(values: Sequence[Any], rows: int, cols: int) -> list[Any]:
    """Row-major values turned half a circle; the shape is unchanged."""
    _check_flat(values, rows, cols)
    return list(values)[::-1]


def flat_flip_horizontal(values: Sequence[Any], rows: int, cols: int) -> list[Any]:
    """Row-major values with each row reversed."""
    _check_flat(values, rows, cols)
    return [value for row in _flat_rows(values, rows, cols) for value in reversed(row)]


def flat_flip_vertical(values: Sequence[Any], rows: int, cols: int) -> list[Any]:
    """Row-major values with the order of the rows reversed."""
    _check_flat(values, rows, cols)
    return [value for row in reversed(_flat_rows(values, rows, cols)) for value in row]