"""Dense matrices of floating-point values with basic arithmetic."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from .errors import IndexRangeError, UserInputError


class Matrix:
    """A dense ``rows`` x ``cols`` matrix of floats, initialised to zero."""

    __slots__ = ("_rows", "_cols", "_values")

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise UserInputError("Number of matrix rows and cols must be > 0.")
        self._rows = rows
        self._cols = cols
        self._values = [0.0] * (rows * cols)

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """Return a square identity matrix of the given size."""
        if size <= 0:
            raise UserInputError("Matrix size must be > 0.")
        result = cls(size, size)
        for i in range(size):
            result._values[i * size + i] = 1.0
        return result

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> Matrix:
        """Build a matrix from a sequence of equally long rows."""
        data = [[float(value) for value in row] for row in rows]
        if not data or not data[0]:
            raise UserInputError("Number of matrix rows and cols must be > 0.")
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise UserInputError("All matrix rows must have the same length.")
        result = cls(len(data), width)
        result._values = [value for row in data for value in row]
        return result

    def copy(self) -> Matrix:
        """Return an independent copy of this matrix."""
        result = Matrix(self._rows, self._cols)
        result._values = list(self._values)
        return result

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    def to_rows(self) -> list[list[float]]:
        """Return the matrix contents as a list of row lists."""
        return [
            self._values[r * self._cols:(r + 1) * self._cols]
            for r in range(self._rows)
        ]

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexRangeError("Matrix row or col out of range.")
        return row * self._cols + col

    def _key(self, key: tuple[int, int]) -> int:
        try:
            row, col = key
        except (TypeError, ValueError):
            raise TypeError("Matrix indices must be a (row, col) pair.") from None
        return self._index(row, col)

    def __getitem__(self, key: tuple[int, int]) -> float:
        return self._values[self._key(key)]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self._values[self._key(key)] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._cols == other._cols
            and self._values == other._values
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self.to_rows()!r})"

    def add_value(self, row: int, col: int, value: float) -> None:
        """Add ``value`` to the element at (row, col)."""
        self._values[self._index(row, col)] += value

    def mul_value(self, row: int, col: int, value: float) -> None:
        """Multiply the element at (row, col) by ``value``."""
        self._values[self._index(row, col)] *= value

    def scale(self, scalar: float) -> None:
        """Multiply every element by ``scalar`` in place."""
        self._values = [value * scalar for value in self._values]

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._cols != other._rows:
            raise UserInputError(
                "Incompatible row and column numbers in matrix multiplication."
            )
        result = Matrix(self._rows, other._cols)
        left = self.to_rows()
        right_cols = other.transpose().to_rows()
        result._values = [
            sum(a * b for a, b in zip(row, col))
            for row in left
            for col in right_cols
        ]
        return result

    def __iadd__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._rows != other._rows or self._cols != other._cols:
            raise UserInputError(
                "Incompatible row and column numbers in matrix addition."
            )
        self._values = [a + b for a, b in zip(self._values, other._values)]
        return self

    def vmv(self, vector: Matrix) -> float:
        """Return v^T M v for a column vector ``vector``."""
        if self._rows != self._cols:
            raise UserInputError("Matrix is not square.")
        if vector._cols != 1:
            raise UserInputError("Vector has more than one column.")
        if self._rows != vector._rows:
            raise UserInputError(
                f"Vector size ({vector._rows}) does not match matrix "
                f"({self._rows} x {self._cols})."
            )
        v = vector._values
        n = self._rows
        partial = [
            sum(v[row] * self._values[row * n + col] for row in reversed(range(n)))
            for col in range(n)
        ]
        return sum(partial[i] * v[i] for i in reversed(range(n)))

    def transpose(self) -> Matrix:
        """Return the transpose as a new matrix."""
        result = Matrix(self._cols, self._rows)
        result._values = [
            self._values[r * self._cols + c]
            for c in range(self._cols)
            for r in range(self._rows)
        ]
        return result

    def format(self, width: int = 10, decimals: int = 3) -> str:
        """Return the matrix as text, one line per row, fixed-point columns."""
        return "".join(
            "".join(f"{value:{width}.{decimals}f} " for value in row) + "\n"
            for row in self.to_rows()
        )

    def show(self, width: int = 10, decimals: int = 3, file: TextIO | None = None) -> None:
        """Write the formatted matrix to ``file`` (standard output by default)."""
        (file if file is not None else sys.stdout).write(self.format(width, decimals))