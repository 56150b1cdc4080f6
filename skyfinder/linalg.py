"""Determinants and inverses of square matrices."""

from __future__ import annotations

from .errors import SingularMatrixError, UserInputError
from .matrix import Matrix


def _require_square(matrix: Matrix, message: str) -> int:
    if matrix.rows != matrix.cols:
        raise UserInputError(message)
    return matrix.rows


def determinant(matrix: Matrix, scale_factor: float = 1.0) -> float:
    """Return the determinant of ``scale_factor * matrix``.

    Sizes up to 3 are computed analytically, which makes use of
    det(f * M) = f**n * det(M). Larger matrices are reduced by Gaussian
    elimination with partial pivoting; for those the scale factor is
    not applied.
    """
    size = _require_square(
        matrix, "Cannot calculate determinant of non-square matrix."
    )

    if size == 1:
        return scale_factor * matrix[0, 0]

    if size == 2:
        return scale_factor * scale_factor * (
            matrix[0, 0] * matrix[1, 1] - matrix[0, 1] * matrix[1, 0]
        )

    if size == 3:
        (a, b, c), (d, e, f), (g, h, i) = matrix.to_rows()
        return scale_factor * scale_factor * scale_factor * (
            a * e * i
            + b * f * g
            + c * d * h
            - c * e * g
            - b * d * i
            - a * f * h
        )

    work = matrix.to_rows()
    det = 1.0
    for i in range(size):
        pivot_row = i
        pivot = work[i][i]
        for row in range(i + 1, size):
            if abs(work[row][i]) > abs(pivot):
                pivot = work[row][i]
                pivot_row = row

        if pivot == 0.0:
            return 0.0

        if pivot_row != i:
            work[i], work[pivot_row] = work[pivot_row], work[i]
            det = -det

        det *= pivot

        pivot_values = work[i]
        for row in work[i + 1:]:
            factor = row[i] / pivot
            for col in range(i + 1, size):
                row[col] -= factor * pivot_values[col]

    return det


def _invert_small(matrix: Matrix, size: int) -> Matrix:
    det = determinant(matrix, 1.0)
    if det == 0.0:
        raise SingularMatrixError("Matrix is not invertible.")

    if size == 1:
        return Matrix.from_rows([[1.0 / det]])

    if size == 2:
        (a, b), (c, d) = matrix.to_rows()
        return Matrix.from_rows([
            [d / det, -b / det],
            [-c / det, a / det],
        ])

    (a, b, c), (d, e, f), (g, h, i) = matrix.to_rows()
    return Matrix.from_rows([
        [(e * i - f * h) / det, (c * h - b * i) / det, (b * f - c * e) / det],
        [(f * g - d * i) / det, (a * i - c * g) / det, (c * d - a * f) / det],
        [(d * h - e * g) / det, (b * g - a * h) / det, (a * e - b * d) / det],
    ])


def invert(matrix: Matrix) -> Matrix:
    """Return the inverse of a square matrix.

    Matrices up to 3 x 3 are inverted analytically, larger ones by
    Gauss-Jordan elimination with partial pivoting. Raises
    SingularMatrixError if the matrix is not invertible.
    """
    size = _require_square(matrix, "Cannot invert non-square matrix.")

    if size <= 3:
        return _invert_small(matrix, size)

    left = matrix.to_rows()
    right = Matrix.identity(size).to_rows()

    for i in range(size):
        pivot_row = i
        pivot_max = abs(left[i][i])
        for row in range(i + 1, size):
            if pivot_max < abs(left[row][i]):
                pivot_max = abs(left[row][i])
                pivot_row = row

        if pivot_max == 0.0:
            raise SingularMatrixError("Matrix is not invertible.")

        if pivot_row != i:
            left[i], left[pivot_row] = left[pivot_row], left[i]
            right[i], right[pivot_row] = right[pivot_row], right[i]

        inverse_pivot = 1.0 / left[i][i]
        left[i] = [value * inverse_pivot for value in left[i]]
        right[i] = [value * inverse_pivot for value in right[i]]

        for row in range(size):
            if row == i:
                continue
            factor = -left[row][i]
            left[row] = [a + factor * b for a, b in zip(left[row], left[i])]
            right[row] = [a + factor * b for a, b in zip(right[row], right[i])]

    return Matrix.from_rows(right)