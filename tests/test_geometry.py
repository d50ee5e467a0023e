from itertools import islice

import pytest

from practicebook.geometry import Matrix, Point, Quadrant


@pytest.mark.parametrize(
    "x,y,expected",
    [
        (3, 4, Quadrant.FIRST),
        (-3, 4, Quadrant.SECOND),
        (-3, -4, Quadrant.THIRD),
        (3, -4, Quadrant.FOURTH),
        (0, 5, Quadrant.AXIS),
        (4, 0, Quadrant.AXIS),
        (0, 0, Quadrant.ORIGIN),
    ],
)
def test_check_quadrant(x, y, expected):
    assert Point(x, y).check_quadrant() is expected


@pytest.mark.parametrize("x,y", [(1, 1), (7, 2), (100, 3)])
def test_mirroring_moves_between_quadrants(x, y):
    assert Point(-x, y).check_quadrant() is Quadrant.SECOND
    assert Point(-x, -y).check_quadrant() is Quadrant.THIRD
    assert Point(x, -y).check_quadrant() is Quadrant.FOURTH


def test_matrix_iterates_row_major():
    matrix = Matrix(2, 3, 10)
    matrix.data[0][1] = 5
    matrix.data[1][2] = 15
    assert list(islice(matrix, 3)) == [10, 5, 10]
    assert list(matrix) == [10, 5, 10, 10, 10, 15]


def test_matrix_length_is_rows_times_columns():
    matrix = Matrix(4, 5, 1)
    assert len(list(matrix)) == matrix.rows * matrix.columns
    assert set(matrix) == {1}


def test_matrix_can_be_iterated_twice():
    matrix = Matrix(2, 2, 7)
    assert list(matrix) == [7, 7, 7, 7]
    assert list(matrix) == [7, 7, 7, 7]


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Matrix(-1, 3, 0)