"""
Determinant & Transform - Скалярные производные функции матриц

Функции:
- determinant: определитель для форм 2x2 и 3x3 (общий N x N не поддерживается)
- transform_matrix: поэлементное отображение 2x2 матрицы с возможной
  сменой типа элемента (например, float -> bool)

ФОРМУЛЫ:
    det 2x2 = a*d - b*c
    det 3x3 = a(ei - fh) - b(di - fg) + c(dh - eg)   (разложение по первой строке)

NaN/Inf проходят через обычную арифметику: проверки на вырожденность нет.
"""

from typing import Any, Callable, Final, Optional

from advmath.core.math.errors import ShapeMismatchError
from advmath.core.math.matrix import Matrix

# Формы, для которых определён determinant
DETERMINANT_SHAPES: Final[tuple[tuple[int, int], ...]] = ((2, 2), (3, 3))


def determinant(m: Matrix) -> Any:
    """
    Определитель матрицы 2x2 или 3x3.

    Args:
        m: Матрица формы 2x2 или 3x3

    Returns:
        Определитель в типе элемента матрицы

    Raises:
        ShapeMismatchError: Для любой другой формы

    Examples:
        >>> determinant(Matrix[int, 2, 2]([[1, 2], [3, 4]]))
        -2
        >>> determinant(Matrix[int, 3, 3]([[1, 2, 3], [4, 5, 6], [7, 8, 10]]))
        -3
    """
    shape = m.shape().as_tuple()

    if shape == (2, 2):
        result = m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0]
    elif shape == (3, 3):
        a, b, c = m[0, 0], m[0, 1], m[0, 2]
        d, e, f = m[1, 0], m[1, 1], m[1, 2]
        g, h, i = m[2, 0], m[2, 1], m[2, 2]
        result = a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)
    else:
        raise ShapeMismatchError(
            "determinant",
            shape,
            detail=f"supported shapes: {', '.join(f'{r}x{c}' for r, c in DETERMINANT_SHAPES)}",
        )

    return type(m)._convert_result(result)


def transform_matrix(
    m: Matrix,
    func: Callable[[Any], Any],
    result_type: Optional[type] = None,
) -> Matrix:
    """
    Применение унарной функции к каждой ячейке 2x2 матрицы.

    Тип элемента результата - result_type, либо тип первого значения
    func (в порядке row-major). Тип обязан удовлетворять numeric predicate;
    bool удовлетворяет, поэтому предикаты вида x > 0 допустимы.

    Args:
        m: Матрица формы 2x2 (не изменяется)
        func: Унарная функция над элементом
        result_type: Явный тип элемента результата (optional)

    Returns:
        Новая матрица Matrix[U, 2, 2]

    Raises:
        ShapeMismatchError: Если m не 2x2
        NumericConstraintError: Если тип результата не числовой
        ElementTypeMismatchError: Если значение нельзя привести к типу результата
    """
    shape = m.shape().as_tuple()
    if shape != (2, 2):
        raise ShapeMismatchError("transform", shape, detail="only 2x2 matrices are supported")

    values = [[func(value) for value in row] for row in m]
    element_type = result_type if result_type is not None else type(values[0][0])

    return Matrix[element_type, 2, 2](values)
