"""
Matrix Errors - Иерархия исключений библиотеки

Все ошибки наследуются от MatrixError, а также от соответствующего
встроенного исключения Python (TypeError / ValueError / IndexError /
OverflowError), чтобы вызывающий код мог ловить их привычным способом.

КЛАССИФИКАЦИЯ:
1. NumericConstraintError   - тип элемента не удовлетворяет numeric predicate
2. ElementTypeMismatchError - смешивание типов элементов или lossy-конверсия
3. ShapeMismatchError       - несовместимые формы операндов
4. MatrixIndexError         - индекс вне объявленной формы
5. NumericOverflowError     - результат не помещается в запрошенную разрядность
"""

from typing import Optional


class MatrixError(Exception):
    """Базовое исключение библиотеки advmath."""


class NumericConstraintError(MatrixError, TypeError):
    """
    Тип не поддерживает замкнутые операции +, -, *, /.

    Выбрасывается один раз, в момент связывания типа Matrix[T, R, C],
    а не при каждом вызове операции.
    """


class ElementTypeMismatchError(MatrixError, TypeError):
    """Значение нельзя без потерь привести к типу элемента матрицы."""


class ShapeMismatchError(MatrixError, ValueError):
    """
    Формы операндов несовместимы для операции.

    Attributes:
        operation: Имя операции ("add", "multiply", "determinant", ...)
        left: Форма левого операнда (rows, cols)
        right: Форма правого операнда или None для унарных операций
    """

    def __init__(
        self,
        operation: str,
        left: tuple[int, int],
        right: Optional[tuple[int, int]] = None,
        detail: str = "",
    ):
        self.operation = operation
        self.left = left
        self.right = right

        message = f"{operation}: incompatible shape {left[0]}x{left[1]}"
        if right is not None:
            message += f" with {right[0]}x{right[1]}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class MatrixIndexError(MatrixError, IndexError):
    """Индекс (row, col) вне диапазона [0, R) x [0, C)."""


class NumericOverflowError(MatrixError, OverflowError):
    """Результат превышает запрошенную разрядность (например, 64 бита)."""
