import pytest

from skyfinder.errors import FileAccessError, IndexRangeError, UserInputError
from skyfinder.table import Table


def write(tmp_path, text):
    path = tmp_path / "data.txt"
    path.write_text(text)
    return str(path)


def test_read_simple_table(tmp_path):
    table = Table.from_file(write(tmp_path, "1 2 3\n4.5 5 6\n"), " \t")
    assert (table.rows, table.cols) == (2, 3)
    assert table[0, 0] == 1.0
    assert table[1, 0] == 4.5
    assert table[1, 2] == 6.0


def test_comments_and_blank_lines_skipped(tmp_path):
    text = "# header\n\n7 8\n   \n# more\n9 10\n"
    table = Table.from_file(write(tmp_path, text), " ")
    assert (table.rows, table.cols) == (2, 2)
    assert [table[r, c] for r in range(2) for c in range(2)] == [7.0, 8.0, 9.0, 10.0]


def test_line_not_starting_alnum_is_skipped(tmp_path):
    table = Table.from_file(write(tmp_path, "1 2\n-3 4\n5 6\n"), " ")
    assert table.rows == 2
    assert table[1, 0] == 5.0


def test_mixed_and_repeated_delimiters(tmp_path):
    table = Table.from_file(write(tmp_path, "1,,2\t\t3\n"), ",\t")
    assert table.cols == 3
    assert table[0, 2] == 3.0


def test_extra_columns_ignored(tmp_path):
    table = Table.from_file(write(tmp_path, "1 2\n3 4 5\n"), " ")
    assert (table.rows, table.cols) == (2, 2)
    assert table[1, 1] == 4.0


def test_non_numeric_entry_is_zero(tmp_path):
    table = Table.from_file(write(tmp_path, "1 abc\n"), " ")
    assert table[0, 1] == 0.0
    assert table[0, 0] == 1.0


def test_too_few_columns(tmp_path):
    with pytest.raises(UserInputError):
        Table.from_file(write(tmp_path, "1 2 3\n4 5\n"), " ")


def test_empty_file_gives_empty_table(tmp_path):
    table = Table.from_file(write(tmp_path, "# only comments\n\n"), " ")
    assert (table.rows, table.cols) == (0, 0)


def test_missing_file(tmp_path):
    with pytest.raises(FileAccessError):
        Table.from_file(str(tmp_path / "absent.txt"), " ")


def test_empty_filename():
    with pytest.raises(UserInputError):
        Table.from_file("", " ")


def test_set_and_out_of_range(tmp_path):
    table = Table.from_file(write(tmp_path, "1 2\n"), " ")
    table[0, 1] = 42.0
    assert table[0, 1] == 42.0
    with pytest.raises(IndexRangeError):
        table[1, 0]
    with pytest.raises(IndexRangeError):
        table[0, 2] = 1.0


def test_constructed_table_is_zero():
    table = Table(2, 3)
    assert (table.cols, table.rows) == (2, 3)
    assert table[2, 1] == 0.0