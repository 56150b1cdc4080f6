# skyfinder

Building blocks for finding and describing sources in astronomical data
cubes. The package is pure Python and has no dependencies outside the
standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Module                | Contents                                                                         |
|-----------------------|----------------------------------------------------------------------------------|
| `skyfinder.parameter` | `ParameterSet` and `LoadMode`: default settings, parameter files, typed access   |
| `skyfinder.table`     | `Table`: numeric tables read from delimited text files                           |
| `skyfinder.matrix`    | `Matrix`: dense matrices with products, addition, transpose and v^T M v          |
| `skyfinder.linalg`    | `determinant` and `invert`                                                       |
| `skyfinder.gaussian`  | `covariance`, `prob_dens`, `error_ellipse` and `Ellipse`                         |
| `skyfinder.path`      | `FilePath`: a directory and a file name combined into one path                   |
| `skyfinder.stack`     | `Stack`: a LIFO stack of pixel indices                                           |
| `skyfinder.errors`    | The exception hierarchy, rooted at `SkyFinderError`                              |

## Parameter files

A parameter file holds one setting per line, in the form `key = value # comment`.
Lines that are empty or do not start with a letter or digit (comments with
`#`, for instance) are skipped.

```python
from skyfinder.parameter import ParameterSet, LoadMode

params = ParameterSet(verbose=False)
params.set_defaults()
params.load("my_run.par", LoadMode.UPDATE)

threshold = params.get_float("scfind.threshold")
kernels = params.get_str("scfind.kernelsXY")
```

With `LoadMode.UPDATE`, the file may only change parameters that already
exist. If it names an unknown parameter and `pipeline.pedantic` is true, a
`UserInputError` is raised once the whole file has been read. With
`LoadMode.APPEND` (the default), unknown parameters are added to the set.

All values are stored as strings, in the order they were first set
(`key_at` and `value_at` address them by position). The typed getters
behave as follows for a missing parameter: `get_float` returns NaN,
`get_int` and `get_uint` return 0, `get_bool` returns `False` and
`get_str` returns `None`. `get_bool` is true only for the exact value
`true`.

## Tables

```python
from skyfinder.table import Table

table = Table.from_file("data.txt", " \t")
print(table.rows, table.cols, table[0, 1])
```

The first data line fixes the number of columns. Later lines with more
columns have the extra ones ignored; lines with fewer raise
`UserInputError`. Entries that are not numbers read as 0.0. A file without
any data gives an empty table.

## Matrices and statistics

```python
from skyfinder.matrix import Matrix
from skyfinder.linalg import determinant, invert
from skyfinder.gaussian import covariance, error_ellipse

m = Matrix.from_rows([[4.0, 1.0], [1.0, 3.0]])
det = determinant(m, 1.0)
inv = invert(m)           # raises SingularMatrixError if m has no inverse
product = m @ inv

cov = covariance([[1.0, 2.0], [2.0, 3.9], [3.0, 6.2]])
ellipse = error_ellipse(cov, 0, 1)
print(ellipse.radius_maj, ellipse.radius_min, ellipse.pa)
```

Matrices up to 3 x 3 are inverted and have their determinants taken
analytically; larger ones use elimination with partial pivoting. The
`scale_factor` of `determinant` is applied only for matrices up to 3 x 3.
`covariance` normalises by the number of samples. `Matrix.format` and
`Matrix.show` print a matrix as fixed-point columns.

## Paths and stacks

```python
from skyfinder.path import FilePath
from skyfinder.stack import Stack

path = FilePath("/home/user/data.fits")
path.set_file_from_template("data.fits", "_mask", ".fits")
print(path.full)          # /home/user/data_mask.fits

stack = Stack()
stack.push(42)
value = stack.pop()       # raises StackUnderflowError when empty
```

## What this package does not do

This is a library of building blocks only. It has no command-line
program, does not read or write data cubes, and does not run a
source-finding pipeline or keep a catalogue of detected sources.

## Errors

Every error the package raises derives from `skyfinder.errors.SkyFinderError`.
The more specific errors are `UserInputError`, `IndexRangeError`,
`FileAccessError`, `StackUnderflowError` and `SingularMatrixError`.