"""
Core math modules для advmath

Матрицы фиксированной формы, производные скалярные функции
и независимые численные helpers.
"""

# Numerical Safeguards
from advmath.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_APPROX_DEFAULT,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Config
    ToleranceConfig,
    # Comparisons
    is_close,
    is_valid_float,
    # Validation
    validate_non_negative_int,
    validate_positive_int,
)

# Errors
from advmath.core.math.errors import (
    ElementTypeMismatchError,
    MatrixError,
    MatrixIndexError,
    NumericConstraintError,
    NumericOverflowError,
    ShapeMismatchError,
)

# Numeric Predicate
from advmath.core.math.numeric import (
    has_size,
    is_arithmetic,
    is_numeric_type,
    require_numeric,
    zero_of,
)

# Matrix
from advmath.core.math.matrix import (
    Matrix,
    Matrix2x2,
    Matrix2x2d,
    Matrix2x2f,
    Matrix2x2i,
    Matrix3x3,
    Matrix3x3d,
    Matrix3x3f,
    Matrix3x3i,
    Matrix4x4,
    Matrix4x4d,
    Matrix4x4f,
    Matrix4x4i,
)

# Determinant & Transform
from advmath.core.math.determinant import (
    DETERMINANT_SHAPES,
    determinant,
    transform_matrix,
)

# Constants & Scalar Helpers
from advmath.core.math.constants import (
    E,
    GOLDEN_RATIO,
    PI,
    SQRT_2,
    SQRT_3,
    approximately_equal,
    factorial,
    fibonacci_by_size,
    integer_power,
    is_even,
    round_to_precision,
    variadic_sum,
)

__all__ = [
    # Numerical Safeguards
    "EPS_APPROX_DEFAULT",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "ToleranceConfig",
    "is_close",
    "is_valid_float",
    "validate_non_negative_int",
    "validate_positive_int",
    # Errors
    "MatrixError",
    "NumericConstraintError",
    "ElementTypeMismatchError",
    "ShapeMismatchError",
    "MatrixIndexError",
    "NumericOverflowError",
    # Numeric Predicate
    "has_size",
    "is_arithmetic",
    "is_numeric_type",
    "require_numeric",
    "zero_of",
    # Matrix
    "Matrix",
    "Matrix2x2",
    "Matrix3x3",
    "Matrix4x4",
    "Matrix2x2f",
    "Matrix3x3f",
    "Matrix4x4f",
    "Matrix2x2i",
    "Matrix3x3i",
    "Matrix4x4i",
    "Matrix2x2d",
    "Matrix3x3d",
    "Matrix4x4d",
    # Determinant & Transform
    "DETERMINANT_SHAPES",
    "determinant",
    "transform_matrix",
    # Constants
    "GOLDEN_RATIO",
    "SQRT_2",
    "SQRT_3",
    "PI",
    "E",
    # Scalar Helpers
    "approximately_equal",
    "factorial",
    "fibonacci_by_size",
    "integer_power",
    "is_even",
    "round_to_precision",
    "variadic_sum",
]
