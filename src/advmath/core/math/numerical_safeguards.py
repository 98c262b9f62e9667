"""
Numerical Safeguards - Epsilon-сравнения и валидация

Модуль содержит общие численные примитивы, на которые опираются
матричная алгебра и скалярные helpers:
- Epsilon-параметры для сравнений float
- Сравнения float с учётом машинной точности
- Валидация целочисленных параметров (размеры, показатели степени)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Точное сравнение (==) и сравнение с толерантностью разделены явно
2. NaN никогда не считается "близким" ни к какому значению
3. Все операции детерминированы и воспроизводимы
"""

import cmath
import math
import numbers
from dataclasses import dataclass
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon по умолчанию для approximately_equal (двустороннее сравнение)
EPS_APPROX_DEFAULT: Final[float] = 1e-9

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# TOLERANCE CONFIG
# =============================================================================


@dataclass(frozen=True)
class ToleranceConfig:
    """Конфигурация толерантности для поэлементного сравнения матриц.

    Используется Matrix.is_close для float-матриц, где точное == неприменимо
    (например, проверка ассоциативности умножения). Точное равенство
    матриц (==) от этой конфигурации не зависит.
    """

    rel_tol: float = EPS_FLOAT_COMPARE_REL
    abs_tol: float = EPS_FLOAT_COMPARE_ABS

    def __post_init__(self) -> None:
        if self.rel_tol < 0:
            raise ValueError(f"rel_tol must be non-negative, got {self.rel_tol}")
        if self.abs_tol < 0:
            raise ValueError(f"abs_tol must be non-negative, got {self.abs_tol}")


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли значение конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite
    """
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение чисел с учётом машинной точности.

    Алгоритм (math.isclose):
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Поддерживает complex (сравнение по модулю разности).

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    if isinstance(a, complex) or isinstance(b, complex):
        return cmath.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative_int(value: int, name: str) -> None:
    """
    Валидация, что значение - неотрицательное целое.

    bool отвергается: True/False не являются допустимыми размерами
    или показателями степени.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не целое
        ValueError: Если value < 0
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_positive_int(value: int, name: str) -> None:
    """
    Валидация, что значение - положительное целое.

    Raises:
        TypeError: Если value не целое
        ValueError: Если value <= 0
    """
    validate_non_negative_int(value, name)

    if value == 0:
        raise ValueError(f"{name} must be positive, got {value}")
