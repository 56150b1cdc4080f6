"""Exception hierarchy used throughout the package."""


class SkyFinderError(Exception):
    """Base class of all errors raised by this package."""


class UserInputError(SkyFinderError, ValueError):
    """Raised when an argument supplied by the caller is invalid."""


class IndexRangeError(SkyFinderError, IndexError):
    """Raised when a row, column or element index is out of range."""


class FileAccessError(SkyFinderError, OSError):
    """Raised when a file cannot be opened or read."""


class StackUnderflowError(SkyFinderError):
    """Raised when popping from an empty stack."""


class SingularMatrixError(SkyFinderError, ArithmeticError):
    """Raised when a matrix that must be inverted is singular."""