"""
Тесты для Determinant & Transform

Проверяет:
1. determinant 2x2: ad - bc
2. determinant 3x3: разложение по первой строке
3. Неподдерживаемые формы -> ShapeMismatchError
4. Пропагацию NaN/Inf
5. transform_matrix: смена типа элемента, неизменность входа
"""

import math
from fractions import Fraction

import pytest

from advmath.core.math.determinant import DETERMINANT_SHAPES, determinant, transform_matrix
from advmath.core.math.errors import (
    ElementTypeMismatchError,
    NumericConstraintError,
    ShapeMismatchError,
)
from advmath.core.math.matrix import Matrix


# =============================================================================
# ТЕСТЫ: determinant
# =============================================================================


class TestDeterminant2x2:
    """Тесты определителя 2x2"""

    def test_identity(self) -> None:
        assert determinant(Matrix[int, 2, 2]([[1, 0], [0, 1]])) == 1

    def test_reference_value(self) -> None:
        """1*4 - 2*3 = -2"""
        assert determinant(Matrix[int, 2, 2]([[1, 2], [3, 4]])) == -2

    def test_float(self) -> None:
        assert determinant(Matrix[float, 2, 2]([[0.5, 2.0], [1.0, 6.0]])) == 1.0

    def test_singular(self) -> None:
        assert determinant(Matrix[int, 2, 2]([[2, 4], [1, 2]])) == 0

    def test_result_type(self) -> None:
        assert type(determinant(Matrix[int, 2, 2]([[1, 2], [3, 4]]))) is int
        assert type(determinant(Matrix[float, 2, 2]([[1, 2], [3, 4]]))) is float

    def test_fraction(self) -> None:
        m = Matrix[Fraction, 2, 2]([[Fraction(1, 2), Fraction(1, 3)], [Fraction(1, 4), 1]])
        assert determinant(m) == Fraction(1, 2) - Fraction(1, 12)


class TestDeterminant3x3:
    """Тесты определителя 3x3"""

    def test_reference_value(self) -> None:
        """[[1,2,3],[4,5,6],[7,8,10]] -> -3"""
        m = Matrix[int, 3, 3]([[1, 2, 3], [4, 5, 6], [7, 8, 10]])
        assert determinant(m) == -3

    def test_identity(self) -> None:
        m = Matrix[float, 3, 3]([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
        assert determinant(m) == 1.0

    def test_cofactor_formula(self) -> None:
        """a(ei - fh) - b(di - fg) + c(dh - eg)"""
        a, b, c, d, e, f, g, h, i = 2, -3, 1, 2, 0, -1, 1, 4, 5
        expected = a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)
        m = Matrix[int, 3, 3]([[a, b, c], [d, e, f], [g, h, i]])
        assert determinant(m) == expected == 49

    def test_linearly_dependent_rows(self) -> None:
        m = Matrix[int, 3, 3]([[1, 2, 3], [2, 4, 6], [7, 8, 9]])
        assert determinant(m) == 0

    def test_truncated_literal(self) -> None:
        """Неполный литерал оставляет третью строку нулевой -> определитель 0"""
        m = Matrix[int, 3, 3]([[1, 2], [3, 4]])
        assert determinant(m) == 0


class TestDeterminantEdgeCases:
    """Граничные случаи"""

    @pytest.mark.parametrize("rows, cols", [(1, 1), (4, 4), (2, 3), (3, 2)])
    def test_unsupported_shapes(self, rows: int, cols: int) -> None:
        with pytest.raises(ShapeMismatchError, match="supported shapes: 2x2, 3x3") as exc:
            determinant(Matrix[int, rows, cols]())
        assert exc.value.operation == "determinant"
        assert exc.value.right is None

    def test_supported_shapes_constant(self) -> None:
        assert DETERMINANT_SHAPES == ((2, 2), (3, 3))

    def test_nan_propagates(self) -> None:
        m = Matrix[float, 2, 2]([[math.nan, 1.0], [2.0, 3.0]])
        assert math.isnan(determinant(m))

    def test_inf_propagates(self) -> None:
        m = Matrix[float, 2, 2]([[math.inf, 0.0], [1.0, 1.0]])
        assert determinant(m) == math.inf

    def test_input_not_mutated(self) -> None:
        m = Matrix[int, 3, 3]([[1, 2, 3], [4, 5, 6], [7, 8, 10]])
        determinant(m)
        assert m.to_list() == [[1, 2, 3], [4, 5, 6], [7, 8, 10]]


# =============================================================================
# ТЕСТЫ: transform_matrix
# =============================================================================


class TestTransformMatrix:
    """Тесты поэлементного отображения 2x2"""

    def test_same_type(self) -> None:
        m = Matrix[int, 2, 2]([[1, 2], [3, 4]])
        result = transform_matrix(m, lambda x: x * x)
        assert type(result) is Matrix[int, 2, 2]
        assert result.to_list() == [[1, 4], [9, 16]]

    def test_float_to_bool(self) -> None:
        """Предикат "положительное" даёт матрицу bool"""
        m = Matrix[float, 2, 2]([[1.5, -2.0], [0.0, 3.25]])
        result = transform_matrix(m, lambda x: x > 0)
        assert type(result) is Matrix[bool, 2, 2]
        assert result.to_list() == [[True, False], [False, True]]

    def test_int_to_float(self) -> None:
        m = Matrix[int, 2, 2]([[1, 2], [3, 4]])
        result = transform_matrix(m, lambda x: x / 2)
        assert type(result) is Matrix[float, 2, 2]
        assert result.to_list() == [[0.5, 1.0], [1.5, 2.0]]

    def test_explicit_result_type(self) -> None:
        m = Matrix[int, 2, 2]([[1, 2], [3, 4]])
        result = transform_matrix(m, lambda x: x, result_type=Fraction)
        assert type(result) is Matrix[Fraction, 2, 2]
        assert result[1, 1] == Fraction(4)

    def test_input_not_mutated(self) -> None:
        m = Matrix[float, 2, 2]([[1.0, 2.0], [3.0, 4.0]])
        transform_matrix(m, lambda x: -x)
        assert m.to_list() == [[1.0, 2.0], [3.0, 4.0]]

    def test_func_applied_row_major(self) -> None:
        m = Matrix[int, 2, 2]([[1, 2], [3, 4]])
        seen = []
        transform_matrix(m, lambda x: seen.append(x) or x)
        assert seen == [1, 2, 3, 4]

    def test_non_numeric_result_rejected(self) -> None:
        m = Matrix[int, 2, 2]([[1, 2], [3, 4]])
        with pytest.raises(NumericConstraintError):
            transform_matrix(m, str)

    def test_inconsistent_result_types(self) -> None:
        """Первое значение задаёт тип; последующие приводятся без потерь"""
        m = Matrix[int, 2, 2]([[2, 3], [4, 6]])
        with pytest.raises(ElementTypeMismatchError):
            transform_matrix(m, lambda x: x // 2 if x == 2 else x / 4)

    @pytest.mark.parametrize("rows, cols", [(3, 3), (2, 3), (1, 1)])
    def test_unsupported_shapes(self, rows: int, cols: int) -> None:
        with pytest.raises(ShapeMismatchError, match="only 2x2"):
            transform_matrix(Matrix[int, rows, cols](), lambda x: x)
