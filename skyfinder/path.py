"""File paths split into a directory part and a file-name part."""

from __future__ import annotations

from .errors import UserInputError


def _until_last(text: str, delimiter: str) -> str:
    """Return the part of ``text`` before the last ``delimiter``, or all of it if absent."""
    position = text.rfind(delimiter)
    if position < 0:
        return text
    return text[:position]


class FilePath:
    """A Unix-style path held as a directory (with trailing slash) and a file name."""

    __slots__ = ("_dir", "_file")

    def __init__(self, path: str = "") -> None:
        self._dir = ""
        self._file = ""
        self.set(path)

    def set(self, path: str) -> None:
        """Set directory and file from a full path; the split is at the last '/'."""
        if not path:
            self._dir = ""
            self._file = ""
            return

        position = path.rfind("/")
        if position < 0:
            self._dir = ""
            self._file = path
        elif position == len(path) - 1:
            self._dir = path
            self._file = ""
        else:
            self._dir = path[:position] + "/"
            self._file = path[position + 1:]

    def set_file(self, file: str) -> None:
        """Replace the file name, keeping the directory."""
        if not file:
            raise UserInputError("Empty file name encountered.")
        self._file = file

    def set_dir(self, directory: str) -> None:
        """Replace the directory, adding a trailing slash if missing."""
        if not directory:
            raise UserInputError("Empty directory name encountered.")
        self._dir = directory if directory.endswith("/") else directory + "/"

    def set_file_from_template(self, basename: str, suffix: str, mimetype: str) -> None:
        """Set the file name to ``basename`` (without extension) + suffix + mimetype."""
        self._file = _until_last(basename, ".") + suffix + mimetype

    def append_dir_from_template(self, basename: str, appendix: str) -> None:
        """Append a sub-directory named ``basename`` (without extension) + appendix."""
        if "/" in basename or "/" in appendix:
            raise UserInputError("Basename and appendix must not contain '/'.")
        self._dir += _until_last(basename, ".") + appendix + "/"

    def append_file(self, appendix: str) -> None:
        """Append a string to the file name."""
        if "/" in appendix:
            raise UserInputError("Appendix must not contain '/'.")
        self._file += appendix

    @property
    def dir(self) -> str:
        """Directory part, including its trailing slash."""
        return self._dir

    @property
    def file(self) -> str:
        """File-name part."""
        return self._file

    @property
    def full(self) -> str:
        """Directory and file name joined."""
        return self._dir + self._file

    def __str__(self) -> str:
        return self.full

    def __repr__(self) -> str:
        return f"FilePath({self.full!r})"

    def is_readable(self) -> bool:
        """Return True if the file at this path can be opened for reading."""
        try:
            with open(self.full, "r"):
                return True
        except OSError:
            return False