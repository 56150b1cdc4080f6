"""Building blocks for astronomical source finding: parameters, tables, matrices, statistics, paths and a stack."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "stack",
    "path",
    "matrix",
    "table",
    "linalg",
    "gaussian",
    "parameter",
]