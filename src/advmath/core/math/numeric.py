"""
Numeric Predicate - Проверка допустимости типа элемента

Модуль определяет, какие типы могут быть элементами Matrix:
тип обязан поддерживать +, -, *, / с результатом, приводимым обратно к типу.

Проверка выполняется ОДИН раз на тип (кэшируется) в момент связывания
Matrix[T, R, C], а не при каждой операции. Это runtime-замена
compile-time ограничения: ошибка возникает до создания первого значения.

Также содержит:
- is_arithmetic: проверка скаляра (numbers.Number, включая bool)
- zero_of: нулевое значение типа
- has_size: duck-typed детекция метода size()
"""

import functools
import logging
import numbers
from typing import Any

from advmath.core.math.errors import NumericConstraintError

logger = logging.getLogger(__name__)

# Dunder-методы, которые обязан предоставлять тип элемента
REQUIRED_OPERATORS: tuple[str, ...] = ("__add__", "__sub__", "__mul__", "__truediv__")


# =============================================================================
# NUMERIC PREDICATE
# =============================================================================


@functools.lru_cache(maxsize=None)
def is_numeric_type(tp: type) -> bool:
    """
    Numeric predicate: поддерживает ли тип замкнутые +, -, *, /.

    Алгоритм:
    1. Тип обязан объявлять __add__, __sub__, __mul__, __truediv__
    2. Если можно построить единичное значение tp(1), каждая операция
       над двумя единицами должна давать результат, который принимает tp(...)
       (аналог std::convertible_to<T>)

    Результат кэшируется: проверка выполняется один раз на тип.

    Args:
        tp: Проверяемый тип

    Returns:
        True если тип удовлетворяет predicate

    Examples:
        >>> is_numeric_type(float)
        True
        >>> is_numeric_type(str)
        False
    """
    if not isinstance(tp, type):
        return False

    if not all(callable(getattr(tp, name, None)) for name in REQUIRED_OPERATORS):
        return False

    try:
        one = tp(1)
    except (TypeError, ValueError):
        # Единицу построить нельзя: достаточно наличия операторов
        return True

    try:
        for result in (one + one, one - one, one * one, one / one):
            tp(result)
    except (TypeError, ValueError, ArithmeticError):
        return False

    return True


def require_numeric(tp: type) -> type:
    """
    Гарантия, что тип удовлетворяет numeric predicate.

    Args:
        tp: Тип элемента

    Returns:
        tp без изменений (для использования в выражениях)

    Raises:
        NumericConstraintError: Если тип не поддерживает +, -, *, /
    """
    if not is_numeric_type(tp):
        name = getattr(tp, "__name__", repr(tp))
        logger.debug("Rejected matrix element type %s", name)
        raise NumericConstraintError(
            f"{name} does not support closed +, -, *, / and cannot be a matrix element type"
        )
    return tp


def is_arithmetic(value: Any) -> bool:
    """Скаляр встроенной числовой башни (numbers.Number, bool включительно)."""
    return isinstance(value, numbers.Number)


def zero_of(tp: type) -> Any:
    """
    Нулевое значение типа.

    Сначала пробует tp() (int() == 0, float() == 0.0, Fraction() == 0),
    затем tp(0) для типов без конструктора по умолчанию.

    Raises:
        NumericConstraintError: Если ни один способ не сработал
    """
    try:
        return tp()
    except TypeError:
        pass

    try:
        return tp(0)
    except (TypeError, ValueError) as e:
        raise NumericConstraintError(f"Cannot build a zero value for {tp.__name__}: {e}") from e


# =============================================================================
# CAPABILITY DETECTION
# =============================================================================


def has_size(obj: Any) -> bool:
    """
    Детекция возможности: есть ли у объекта (или типа) вызываемый size().

    Examples:
        >>> class Sized:
        ...     def size(self):
        ...         return 0
        >>> has_size(Sized)
        True
        >>> has_size(3)
        False
    """
    return callable(getattr(obj, "size", None))
