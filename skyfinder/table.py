"""Tables of floating-point values read from delimited text files."""

from __future__ import annotations

import logging
import re

from .errors import FileAccessError, IndexRangeError, UserInputError

_log = logging.getLogger(__name__)

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def _to_float(text: str) -> float:
    """Parse the longest leading number of ``text``; 0.0 if there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(0)) if match else 0.0


def _split(text: str, delimiters: str) -> list[str]:
    """Split on any of the delimiter characters, merging consecutive ones."""
    if not delimiters:
        return [text] if text else []
    pattern = "[" + re.escape(delimiters) + "]+"
    return [token for token in re.split(pattern, text) if token]


def _is_data_line(text: str) -> bool:
    return bool(text) and text[0].isascii() and text[0].isalnum()


class Table:
    """A rectangular table of floats addressed by (row, col)."""

    __slots__ = ("_cols", "_rows", "_data")

    def __init__(self, cols: int = 0, rows: int = 0) -> None:
        if cols < 0 or rows < 0:
            raise UserInputError("Table dimensions must not be negative.")
        self._cols = cols
        self._rows = rows
        self._data = [0.0] * (cols * rows)

    @classmethod
    def from_file(cls, filename: str, delimiters: str = " \t") -> Table:
        """Read a table from a text file, skipping blank lines and comments.

        The number of columns is set by the first data line; extra columns in
        later lines are ignored, missing ones raise UserInputError.
        """
        if not filename:
            raise UserInputError("Empty file name provided.")
        try:
            with open(filename, "r") as handle:
                lines = [line.strip() for line in handle]
        except OSError as exc:
            raise FileAccessError(f"Failed to open input file: {filename}.") from exc

        data_lines = [line for line in lines if _is_data_line(line)]
        cols = next(
            (n for n in (len(_split(line, delimiters)) for line in data_lines) if n),
            0,
        )
        if cols == 0:
            _log.warning("No valid data found in file %s. Returning empty table.", filename)
            return cls()

        table = cls(cols, 0)
        for row_number, line in enumerate(data_lines, start=1):
            entries = _split(line, delimiters)
            if len(entries) < cols:
                raise UserInputError(
                    f"Inconsistent number of data columns in file {filename}. "
                    f"{cols} columns expected, but only {len(entries)} columns "
                    f"found in data row {row_number}."
                )
            table._data.extend(_to_float(entry) for entry in entries[:cols])
            table._rows += 1
        return table

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    def _index(self, key: tuple[int, int]) -> int:
        try:
            row, col = key
        except (TypeError, ValueError):
            raise TypeError("Table indices must be a (row, col) pair.") from None
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexRangeError("Requested Table column or row out of range.")
        return row * self._cols + col

    def __getitem__(self, key: tuple[int, int]) -> float:
        return self._data[self._index(key)]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self._data[self._index(key)] = float(value)

    def __repr__(self) -> str:
        return f"Table(cols={self._cols}, rows={self._rows})"