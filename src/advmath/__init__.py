"""
advmath
=======

Fixed-size numeric matrices with runtime-enforced shape and element-type
contracts, plus standalone numeric helpers.

Example
-------
>>> from advmath import Matrix, determinant
>>> m = Matrix[int, 2, 2]([[1, 2], [3, 4]])
>>> determinant(m)
-2
"""

import logging as _logging
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

from advmath.core.math import (
    ElementTypeMismatchError,
    Matrix,
    Matrix2x2,
    Matrix3x3,
    Matrix4x4,
    MatrixError,
    MatrixIndexError,
    NumericConstraintError,
    NumericOverflowError,
    ShapeMismatchError,
    ToleranceConfig,
    approximately_equal,
    determinant,
    factorial,
    fibonacci_by_size,
    integer_power,
    is_even,
    is_numeric_type,
    transform_matrix,
    variadic_sum,
)
from advmath.core.domain import MatrixShape

__all__ = [
    "Matrix",
    "Matrix2x2",
    "Matrix3x3",
    "Matrix4x4",
    "MatrixShape",
    "ToleranceConfig",
    "determinant",
    "transform_matrix",
    "is_numeric_type",
    "approximately_equal",
    "factorial",
    "fibonacci_by_size",
    "integer_power",
    "is_even",
    "variadic_sum",
    "MatrixError",
    "NumericConstraintError",
    "ElementTypeMismatchError",
    "ShapeMismatchError",
    "MatrixIndexError",
    "NumericOverflowError",
]

try:
    __version__ = _pkg_version("advmath")
except PackageNotFoundError:
    # running from a checkout
    __version__ = "0.0.0.dev0"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
