import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.matrix import (
    flat_flip_horizontal,
    flat_flip_vertical,
    flat_rotate_180,
    flat_rotate_anticlockwise,
    flat_rotate_clockwise,
    flip_horizontal,
    flip_horizontal_in_place,
    flip_vertical,
    flip_vertical_in_place,
    rotate_180,
    rotate_180_in_place,
    rotate_anticlockwise,
    rotate_anticlockwise_in_place,
    rotate_clockwise,
    rotate_in_place,
)

SQUARE = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
SQUARE_CLOCKWISE = [[7, 4, 1], [8, 5, 2], [9, 6, 3]]


@st.composite
def matrices(draw, square=False):
    rows = draw(st.integers(min_value=1, max_value=5))
    cols = rows if square else draw(st.integers(min_value=1, max_value=5))
    return [
        draw(st.lists(st.integers(), min_size=cols, max_size=cols)) for _ in range(rows)
    ]


def _flatten(matrix):
    return [value for row in matrix for value in row]


def _copy(matrix):
    return [list(row) for row in matrix]


def test_rotate_clockwise_square_example():
    assert rotate_clockwise(SQUARE) == SQUARE_CLOCKWISE


def test_rotate_in_place_square_example():
    matrix = _copy(SQUARE)
    rotate_in_place(matrix)
    assert matrix == SQUARE_CLOCKWISE


def test_flat_rotate_clockwise_square_example():
    assert flat_rotate_clockwise(_flatten(SQUARE), 3, 3) == _flatten(SQUARE_CLOCKWISE)


def test_rotate_does_not_modify_input():
    matrix = _copy(SQUARE)
    rotate_clockwise(matrix)
    rotate_180(matrix)
    flip_horizontal(matrix)
    assert matrix == SQUARE


@given(matrices())
def test_rotate_clockwise_shape(matrix):
    rotated = rotate_clockwise(matrix)
    assert len(rotated) == len(matrix[0])
    assert all(len(row) == len(matrix) for row in rotated)


@given(matrices())
def test_four_clockwise_rotations_are_identity(matrix):
    result = matrix
    for _ in range(4):
        result = rotate_clockwise(result)
    assert result == matrix


@given(matrices())
def test_clockwise_then_anticlockwise_is_identity(matrix):
    assert rotate_anticlockwise(rotate_clockwise(matrix)) == matrix
    assert rotate_clockwise(rotate_anticlockwise(matrix)) == matrix


@given(matrices())
def test_rotate_180_is_two_quarter_turns(matrix):
    assert rotate_180(matrix) == rotate_clockwise(rotate_clockwise(matrix))


@given(matrices())
def test_rotate_180_is_both_flips(matrix):
    assert rotate_180(matrix) == flip_vertical(flip_horizontal(matrix))


@given(matrices())
def test_flips_are_involutions(matrix):
    assert flip_horizontal(flip_horizontal(matrix)) == matrix
    assert flip_vertical(flip_vertical(matrix)) == matrix


@given(matrices())
def test_flip_horizontal_reverses_rows(matrix):
    for original, flipped in zip(matrix, flip_horizontal(matrix)):
        assert flipped == original[::-1]


@given(matrices(square=True))
def test_in_place_rotations_match_copies(matrix):
    clockwise = _copy(matrix)
    rotate_in_place(clockwise)
    assert clockwise == rotate_clockwise(matrix)

    anticlockwise = _copy(matrix)
    rotate_anticlockwise_in_place(anticlockwise)
    assert anticlockwise == rotate_anticlockwise(matrix)


@given(matrices())
def test_in_place_half_turn_and_flips_match_copies(matrix):
    half = _copy(matrix)
    rotate_180_in_place(half)
    assert half == rotate_180(matrix)

    horizontal = _copy(matrix)
    flip_horizontal_in_place(horizontal)
    assert horizontal == flip_horizontal(matrix)

    vertical = _copy(matrix)
    flip_vertical_in_place(vertical)
    assert vertical == flip_vertical(matrix)


def test_in_place_keeps_row_objects():
    matrix = _copy(SQUARE)
    row_ids = [id(row) for row in matrix]
    rotate_in_place(matrix)
    flip_vertical_in_place(matrix)
    assert [id(row) for row in matrix] == row_ids


@given(matrices())
def test_flat_versions_match_nested(matrix):
    rows, cols = len(matrix), len(matrix[0])
    flat = _flatten(matrix)
    assert flat_rotate_clockwise(flat, rows, cols) == _flatten(rotate_clockwise(matrix))
    assert flat_rotate_anticlockwise(flat, rows, cols) == _flatten(
        rotate_anticlockwise(matrix)
    )
    assert flat_rotate_180(flat, rows, cols) == _flatten(rotate_180(matrix))
    assert flat_flip_horizontal(flat, rows, cols) == _flatten(flip_horizontal(matrix))
    assert flat_flip_vertical(flat, rows, cols) == _flatten(flip_vertical(matrix))


@given(matrices())
def test_flat_rotation_round_trip(matrix):
    rows, cols = len(matrix), len(matrix[0])
    flat = _flatten(matrix)
    rotated = flat_rotate_clockwise(flat, rows, cols)
    assert flat_rotate_anticlockwise(rotated, cols, rows) == flat


def test_empty_matrix_rotates_to_empty():
    assert rotate_clockwise([]) == []
    assert flip_vertical([]) == []


def test_ragged_matrix_rejected():
    with pytest.raises(ValueError):
        rotate_clockwise([[1, 2], [3]])
    with pytest.raises(ValueError):
        flip_horizontal_in_place([[1], [2, 3]])


def test_in_place_quarter_turn_needs_square():
    with pytest.raises(ValueError):
        rotate_in_place([[1, 2, 3], [4, 5, 6]])
    with pytest.raises(ValueError):
        rotate_anticlockwise_in_place([[1, 2], [3, 4], [5, 6]])


@pytest.mark.parametrize(
    "func",
    [
        flat_rotate_clockwise,
        flat_rotate_anticlockwise,
        flat_rotate_180,
        flat_flip_horizontal,
        flat_flip_vertical,
    ],
)
def test_flat_wrong_length_rejected(func):
    with pytest.raises(ValueError):
        func([1, 2, 3, 4, 5], 2, 3)


def test_flat_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        flat_rotate_clockwise([], -1, 0)