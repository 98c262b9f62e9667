"""
Constants & Scalar Helpers - Константы и независимые скалярные функции

Функции не зависят от Matrix и используются самостоятельно:
- factorial, integer_power, fibonacci_by_size: рекурсивные определения,
  вычисляемые итеративно в точной целочисленной арифметике
- is_even, approximately_equal: предикаты над скалярами
- variadic_sum: накопление одного и более значений одного типа
- round_to_precision: округление до заданного числа знаков

ПЕРЕПОЛНЕНИЕ:
int в Python не ограничен, поэтому factorial по умолчанию точен для любого n.
Аргумент bits эмулирует беззнаковое машинное слово: результат выше
2**bits - 1 вызывает NumericOverflowError вместо молчаливого wrap-around.
"""

import functools
import math
import numbers
from typing import Any, Final, Optional

from advmath.core.math.errors import (
    ElementTypeMismatchError,
    NumericConstraintError,
    NumericOverflowError,
)
from advmath.core.math.numeric import is_arithmetic
from advmath.core.math.numerical_safeguards import (
    EPS_APPROX_DEFAULT,
    is_valid_float,
    validate_non_negative_int,
    validate_positive_int,
)

# =============================================================================
# CONSTANTS
# =============================================================================

GOLDEN_RATIO: Final[float] = 1.618033988749
SQRT_2: Final[float] = 1.414213562373
SQRT_3: Final[float] = 1.732050807569
PI: Final[float] = 3.14159265359
E: Final[float] = 2.71828182846


# =============================================================================
# INTEGER SEQUENCES
# =============================================================================


def factorial(n: int, bits: Optional[int] = None) -> int:
    """
    Факториал: 0! = 1, n! = n * (n-1)!

    Args:
        n: Неотрицательное целое
        bits: Разрядность беззнакового результата (optional, например 64)

    Returns:
        n! как точное int

    Raises:
        TypeError: Если n не целое
        ValueError: Если n < 0
        NumericOverflowError: Если bits задан и n! > 2**bits - 1

    Examples:
        >>> factorial(5)
        120
        >>> factorial(20, bits=64)
        2432902008176640000
    """
    validate_non_negative_int(n, "n")
    if bits is not None:
        validate_positive_int(bits, "bits")
        limit = (1 << bits) - 1

    result = 1
    for k in range(2, n + 1):
        result *= k
        if bits is not None and result > limit:
            raise NumericOverflowError(
                f"{n}! exceeds the {bits}-bit unsigned range (overflow at {k}!)"
            )
    return result


def integer_power(base: Any, exponent: int) -> Any:
    """
    Целая степень: base^0 = 1, base^n = base * base^(n-1)

    Отрицательные показатели не поддерживаются.

    Args:
        base: Арифметическое основание
        exponent: Неотрицательный целый показатель

    Returns:
        base ** exponent в типе основания (для exponent == 0 - единица этого типа)

    Raises:
        TypeError: Если exponent не целое
        ValueError: Если exponent < 0
        NumericConstraintError: Если base не число

    Examples:
        >>> integer_power(2, 10)
        1024
        >>> integer_power(1.5, 0)
        1.0
    """
    if not is_arithmetic(base):
        raise NumericConstraintError(f"base must be a number, got {type(base).__name__}")
    validate_non_negative_int(exponent, "exponent")

    result = type(base)(1)
    for _ in range(exponent):
        result = result * base
    return result


@functools.lru_cache(maxsize=None, typed=True)
def fibonacci_by_size(n: int) -> int:
    """
    Число Фибоначчи: F(0) = 0, F(1) = 1, F(n) = F(n-1) + F(n-2)

    Итеративно (без ограничения глубины рекурсии), с мемоизацией.

    Examples:
        >>> fibonacci_by_size(10)
        55
    """
    validate_non_negative_int(n, "n")

    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


# =============================================================================
# SCALAR PREDICATES
# =============================================================================


def is_even(value: int) -> bool:
    """
    Чётность целого значения.

    Raises:
        TypeError: Если value не целое (float, Fraction, ...)
    """
    if not isinstance(value, numbers.Integral):
        raise TypeError(f"is_even requires an integral value, got {type(value).__name__}")
    return value % 2 == 0


def approximately_equal(a: float, b: float, epsilon: float = EPS_APPROX_DEFAULT) -> bool:
    """
    Двустороннее сравнение: (a - b < epsilon) and (b - a < epsilon)

    Формулировка намеренно не использует abs(): два сравнения разности.
    Для NaN любое сравнение ложно, поэтому результат False.
    Для равных бесконечностей inf - inf = NaN, результат также False.

    Args:
        a: Первое значение
        b: Второе значение
        epsilon: Строгий порог разности (default: 1e-9)

    Returns:
        True если |a - b| < epsilon

    Examples:
        >>> approximately_equal(1.0, 1.0 + 1e-12)
        True
        >>> approximately_equal(1.0, 1.1)
        False
    """
    return (a - b < epsilon) and (b - a < epsilon)


# =============================================================================
# ACCUMULATION & ROUNDING
# =============================================================================


def variadic_sum(first: Any, *rest: Any) -> Any:
    """
    Сумма одного или более арифметических значений одного типа.

    Накопление слева направо; единственный аргумент возвращается без изменений.

    Raises:
        NumericConstraintError: Если значение не арифметическое
        ElementTypeMismatchError: Если типы значений различаются

    Examples:
        >>> variadic_sum(7)
        7
        >>> variadic_sum(1, 2, 3, 4)
        10
    """
    for value in (first, *rest):
        if not is_arithmetic(value):
            raise NumericConstraintError(
                f"variadic_sum accepts arithmetic values only, got {type(value).__name__}"
            )
        if type(value) is not type(first):
            raise ElementTypeMismatchError(
                f"variadic_sum requires values of one type: "
                f"{type(first).__name__} and {type(value).__name__}"
            )

    total = first
    for value in rest:
        total = total + value
    return total


def round_to_precision(value: float, precision: int) -> float:
    """
    Округление до precision знаков после запятой ("half away from zero").

    Args:
        value: Исходное значение
        precision: Количество знаков после запятой (>= 0)

    Returns:
        Округлённое значение

    Raises:
        ValueError: Если precision < 0

    Examples:
        >>> round_to_precision(3.14159, 2)
        3.14
        >>> round_to_precision(2.5, 0)
        3.0
    """
    validate_non_negative_int(precision, "precision")
    if not is_valid_float(value):
        return value

    multiplier = 10.0**precision
    scaled = value * multiplier

    # scaled - floor(scaled) точна, в отличие от scaled + 0.5
    if scaled >= 0:
        rounded = math.floor(scaled)
        if scaled - rounded >= 0.5:
            rounded += 1
    else:
        rounded = math.ceil(scaled)
        if rounded - scaled >= 0.5:
            rounded -= 1
    return rounded / multiplier
