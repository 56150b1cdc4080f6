import pytest

from skyfinder.errors import SingularMatrixError, UserInputError
from skyfinder.linalg import determinant, invert
from skyfinder.matrix import Matrix

SAMPLES = {
    1: [[4.0]],
    2: [[3.0, 1.0], [2.0, 5.0]],
    3: [[2.0, -1.0, 0.5], [1.0, 3.0, 2.0], [0.0, 4.0, -2.0]],
    4: [
        [4.0, 1.0, 0.0, 2.0],
        [1.0, 5.0, 3.0, 0.0],
        [2.0, 0.0, 6.0, 1.0],
        [0.0, 3.0, 1.0, 7.0],
    ],
    5: [
        [0.0, 2.0, 1.0, 0.0, 3.0],
        [1.0, 1.0, 0.0, 2.0, 0.0],
        [3.0, 0.0, 2.0, 1.0, 1.0],
        [0.0, 4.0, 1.0, 1.0, 2.0],
        [2.0, 1.0, 0.0, 3.0, 1.0],
    ],
}


def assert_matrix_close(actual, expected, tol=1e-9):
    assert actual.rows == expected.rows
    assert actual.cols == expected.cols
    for row_a, row_e in zip(actual.to_rows(), expected.to_rows()):
        assert row_a == pytest.approx(row_e, abs=tol)


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5, 6])
def test_determinant_of_identity_is_one(size):
    assert determinant(Matrix.identity(size), 1.0) == pytest.approx(1.0)


def test_determinant_of_1x1_applies_scale_factor():
    assert determinant(Matrix.from_rows([[4.0]]), 2.0) == pytest.approx(8.0)


def test_determinant_of_2x2_worked_example():
    assert determinant(Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]]), 1.0) == pytest.approx(-2.0)


@pytest.mark.parametrize("size", [1, 2, 3])
def test_scale_factor_scales_by_power_of_size(size):
    m = Matrix.from_rows(SAMPLES[size])
    assert determinant(m, 3.0) == pytest.approx(3.0 ** size * determinant(m, 1.0))


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_determinant_invariant_under_transpose(size):
    m = Matrix.from_rows(SAMPLES[size])
    assert determinant(m.transpose(), 1.0) == pytest.approx(determinant(m, 1.0))


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_determinant_is_multiplicative(size):
    a = Matrix.from_rows(SAMPLES[size])
    b = a.transpose()
    assert determinant(a @ b, 1.0) == pytest.approx(
        determinant(a, 1.0) * determinant(b, 1.0)
    )


@pytest.mark.parametrize("size", [3, 4, 5])
def test_row_swap_negates_determinant(size):
    rows = [list(r) for r in SAMPLES[size]]
    swapped = [rows[1], rows[0]] + rows[2:]
    assert determinant(Matrix.from_rows(swapped), 1.0) == pytest.approx(
        -determinant(Matrix.from_rows(rows), 1.0)
    )


def test_determinant_of_upper_triangular_is_diagonal_product():
    m = Matrix.from_rows([
        [2.0, 7.0, 1.0, 9.0],
        [0.0, 3.0, 5.0, 2.0],
        [0.0, 0.0, 4.0, 8.0],
        [0.0, 0.0, 0.0, 5.0],
    ])
    assert determinant(m, 1.0) == pytest.approx(2.0 * 3.0 * 4.0 * 5.0)


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_determinant_of_matrix_with_duplicate_rows_is_zero(size):
    rows = [list(r) for r in SAMPLES[size]]
    rows[-1] = list(rows[0])
    assert determinant(Matrix.from_rows(rows), 1.0) == pytest.approx(0.0, abs=1e-12)


def test_determinant_of_zero_column_large_matrix_is_zero():
    m = Matrix(4, 4)
    m[0, 1] = 1.0
    m[1, 2] = 1.0
    assert determinant(m, 1.0) == 0.0


def test_determinant_rejects_non_square():
    with pytest.raises(UserInputError):
        determinant(Matrix(2, 3), 1.0)


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5])
def test_inverse_times_matrix_is_identity(size):
    m = Matrix.from_rows(SAMPLES[size])
    inv = invert(m)
    assert_matrix_close(m @ inv, Matrix.identity(size))
    assert_matrix_close(inv @ m, Matrix.identity(size))


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5])
def test_double_inverse_round_trip(size):
    m = Matrix.from_rows(SAMPLES[size])
    assert_matrix_close(invert(invert(m)), m)


@pytest.mark.parametrize("size", [1, 2, 3, 4, 6])
def test_inverse_of_identity_is_identity(size):
    assert_matrix_close(invert(Matrix.identity(size)), Matrix.identity(size))


def test_inverse_does_not_modify_input():
    m = Matrix.from_rows(SAMPLES[4])
    original = m.copy()
    invert(m)
    assert m == original


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5])
def test_inverse_determinant_is_reciprocal(size):
    m = Matrix.from_rows(SAMPLES[size])
    assert determinant(invert(m), 1.0) == pytest.approx(1.0 / determinant(m, 1.0))


@pytest.mark.parametrize(
    "rows",
    [
        [[0.0]],
        [[1.0, 2.0], [2.0, 4.0]],
        [[1.0, 2.0, 3.0], [2.0, 4.0, 6.0], [0.0, 1.0, 1.0]],
        [[1.0, 0.0, 0.0, 0.0], [0.0, 1.0, 0.0, 0.0], [0.0, 0.0, 0.0, 0.0], [0.0, 0.0, 0.0, 1.0]],
    ],
)
def test_invert_singular_raises(rows):
    with pytest.raises(SingularMatrixError):
        invert(Matrix.from_rows(rows))


def test_invert_rejects_non_square():
    with pytest.raises(UserInputError):
        invert(Matrix(3, 2))