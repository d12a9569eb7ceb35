"""Tests for the Matrix value type."""

import pytest

from matcalc.core.errors import NotSquareError, ShapeMismatchError, SingularMatrixError
from matcalc.core.matrix import Matrix, dot


def _identity(n):
    return Matrix.from_rows([[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)])


def _assert_close(matrix, expected, tol=1e-9):
    actual = matrix.to_list()
    assert len(actual) == len(expected)
    for row, expected_row in zip(actual, expected):
        assert row == pytest.approx(expected_row, abs=tol)


SQUARE_3 = Matrix.from_rows([[2, -1, 0], [1, 3, 4], [0, 5, -2]])
SQUARE_4 = Matrix.from_rows(
    [[1, 2, 3, 4], [5, 6, 7, 8.5], [2, 0, 1, 3], [4, 1, 0, 2]]
)


def test_new_matrix_is_zero_filled():
    m = Matrix(2, 3)
    assert m.shape == (2, 3)
    assert m.to_list() == [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0]]


def test_element_access():
    m = Matrix(2, 2)
    m.set_row(0, [1, 2])
    m.set_element(1, 0, 7.5)
    assert m.get_element(0, 1) == 2.0
    assert m.get_element(1, 0) == 7.5
    assert m.get_column(0) == [1.0, 7.5]


def test_set_row_copies_values():
    values = [1.0, 2.0]
    m = Matrix(1, 2)
    m.set_row(0, values)
    values[0] = 99.0
    assert m.get_element(0, 0) == 1.0


def test_to_list_does_not_expose_storage():
    m = Matrix.from_rows([[1, 2]])
    m.to_list()[0][0] = 5
    assert m.get_element(0, 0) == 1.0


def test_dot():
    assert dot([1, 2, 3], [4, 5, 6]) == 32


def test_add():
    a = Matrix.from_rows([[1, 2], [3, 4]])
    b = Matrix.from_rows([[5, 6], [7, 8]])
    assert (a + b).to_list() == [[6, 8], [10, 12]]
    assert a.to_list() == [[1, 2], [3, 4]]


def test_add_is_commutative_and_associative():
    a = Matrix.from_rows([[1.5, -2], [0.25, 4]])
    b = Matrix.from_rows([[3, 0.5], [-1, 2]])
    c = Matrix.from_rows([[0, 1], [1, 0]])
    assert a + b == b + a
    assert (a + b) + c == a + (b + c)


def test_add_raises_on_shape_mismatch():
    with pytest.raises(ShapeMismatchError):
        Matrix(2, 2).add(Matrix(3, 3))


def test_scalar_multiply():
    a = Matrix.from_rows([[1, -2], [3, 0.5]])
    assert (a * 2).to_list() == [[2, -4], [6, 1]]
    assert a.scalar_multiply(1.0) == a


def test_mat_multiply():
    a = Matrix.from_rows([[1, 2], [3, 4]])
    b = Matrix.from_rows([[1], [1]])
    result = a * b
    assert result.shape == (2, 1)
    assert result.to_list() == [[3], [7]]


def test_mat_multiply_square():
    a = Matrix.from_rows([[1, 2], [3, 4]])
    b = Matrix.from_rows([[5, 6], [7, 8]])
    assert a.mat_multiply(b).to_list() == [[19, 22], [43, 50]]


def test_mat_multiply_raises_on_shape_mismatch():
    a = Matrix.from_rows([[1, 2], [3, 4]])
    b = Matrix.from_rows([[1], [2], [3]])
    with pytest.raises(ShapeMismatchError):
        a * b


def test_matrix_errors_are_value_errors():
    with pytest.raises(ValueError):
        Matrix(1, 2).determinant()


def test_transposes():
    m = Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    assert m.transpose_main_diagonal().to_list() == [[1, 4, 7], [2, 5, 8], [3, 6, 9]]
    assert m.transpose_side_diagonal().to_list() == [[9, 6, 3], [8, 5, 2], [7, 4, 1]]
    assert m.transpose_vertical_line().to_list() == [[3, 2, 1], [6, 5, 4], [9, 8, 7]]
    assert m.transpose_horizontal_line().to_list() == [[7, 8, 9], [4, 5, 6], [1, 2, 3]]


@pytest.mark.parametrize(
    "name",
    [
        "transpose_main_diagonal",
        "transpose_side_diagonal",
        "transpose_vertical_line",
        "transpose_horizontal_line",
    ],
)
def test_transposes_are_involutions(name):
    twice = getattr(getattr(SQUARE_4, name)(), name)()
    assert twice == SQUARE_4


@pytest.mark.parametrize(
    "name",
    [
        "transpose_main_diagonal",
        "transpose_side_diagonal",
        "transpose_vertical_line",
        "transpose_horizontal_line",
        "determinant",
        "inverse",
        "minors",
        "cofactors",
    ],
)
def test_square_only_operations_reject_rectangular(name):
    with pytest.raises(NotSquareError):
        getattr(Matrix(2, 3), name)()


def test_determinant_base_cases():
    assert Matrix.from_rows([[5]]).determinant() == 5
    assert Matrix.from_rows([[1, 2], [3, 4]]).determinant() == -2


def test_determinant_expansion():
    # 2*(3*-2 - 4*5) - (-1)*(1*-2 - 4*0) + 0
    assert SQUARE_3.determinant() == pytest.approx(-54)


def test_determinant_of_transpose():
    assert SQUARE_4.transpose_main_diagonal().determinant() == pytest.approx(
        SQUARE_4.determinant()
    )


def test_minor_and_cofactor():
    assert SQUARE_3.minor(0, 0) == pytest.approx(-26)
    assert SQUARE_3.minor(1, 2) == pytest.approx(10)
    assert SQUARE_3.cofactor(0, 1) == 1
    assert SQUARE_3.cofactor(1, 1) == 3
    assert SQUARE_3.cofactor(2, 1) == -5


def test_minor_of_single_element_is_one():
    assert Matrix.from_rows([[4]]).minor(0, 0) == 1.0


def test_minors_and_cofactors_matrices():
    m = Matrix.from_rows([[1, 2], [3, 4]])
    assert m.minors().to_list() == [[4, 3], [2, 1]]
    assert m.cofactors().to_list() == [[1, -2], [-3, 4]]


def test_operations_do_not_mutate_receiver():
    before = SQUARE_3.to_list()
    SQUARE_3.inverse()
    SQUARE_3.transpose_side_diagonal()
    SQUARE_3 * 3
    assert SQUARE_3.to_list() == before


def test_inverse_2x2():
    inv = Matrix.from_rows([[4, 7], [2, 6]]).inverse()
    _assert_close(inv, [[0.6, -0.7], [-0.2, 0.4]])


def test_inverse_1x1():
    assert Matrix.from_rows([[4]]).inverse().to_list() == [[0.25]]


@pytest.mark.parametrize("matrix", [SQUARE_3, SQUARE_4])
def test_product_with_inverse_is_identity(matrix):
    product = matrix * matrix.inverse()
    _assert_close(product, _identity(matrix.rows).to_list())


def test_inverse_raises_on_singular():
    with pytest.raises(SingularMatrixError):
        Matrix.from_rows([[1, 2], [2, 4]]).inverse()


def test_str_uses_formatting():
    m = Matrix.from_rows([[3.0, 3.14159], [-0.5, 10]])
    assert str(m) == "3 3.14\n-0.5 10"


def test_equality():
    assert Matrix.from_rows([[1, 2]]) == Matrix.from_rows([[1.0, 2.0]])
    assert Matrix.from_rows([[1, 2]]) != Matrix.from_rows([[1], [2]])
    assert Matrix(1, 1) != [[0.0]]


def test_dot_accumulates_left_to_right():
    # 1e16 + 1.0 rounds back to 1e16, so the later -1e16 cancels to exactly zero
    assert dot([1e16, 1.0, -1e16], [1, 1, 1]) == 0.0


def test_mat_multiply_accumulates_left_to_right():
    a = Matrix.from_rows([[1e16, 1, -1e16]])
    b = Matrix.from_rows([[1], [1], [1]])
    assert (a * b).to_list() == [[0.0]]


def test_determinant_expansion_accumulates_left_to_right():
    # row-0 terms are 1e16, 1.0 and -1e16 in that order
    m = Matrix.from_rows([[1e16, -1, -1e16], [1, 1, 0], [0, 1, 1]])
    assert [m.minor(0, j) * m.cofactor(0, j) for j in range(3)] == [1e16, 1.0, -1e16]
    assert m.determinant() == 0.0


def test_determinant_exact_values():
    assert SQUARE_3.determinant() == -54.0
    assert Matrix.from_rows([[2, 0, 0], [0, 3, 0], [0, 0, 4]]).determinant() == 24.0
