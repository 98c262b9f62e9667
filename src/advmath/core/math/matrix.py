"""
Matrix - Плотная матрица фиксированной формы

Value-тип, параметризованный типом элемента и двумя размерами:

    Matrix[float, 2, 3]([[1, 2, 3], [4, 5, 6]])

Связывание Matrix[T, R, C] создаёт (и кэширует) отдельный класс, поэтому
форма и тип элемента являются частью идентичности типа:

    Matrix[float, 2, 2] is Matrix[float, 2, 2]      # True
    Matrix[float, 2, 2] is Matrix[float, 3, 3]      # False

Numeric predicate проверяется один раз при связывании (NumericConstraintError).
Совместимость форм проверяется в начале каждой операции (ShapeMismatchError):
это runtime-замена compile-time размерностей.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Форма неизменна после создания; хранилище всегда ровно R x C ячеек
2. Алгебраические операции не мутируют операнды, а возвращают новую матрицу
3. Литерал шире/выше объявленной формы усекается без ошибки,
   недостающие ячейки остаются нулевыми
4. Доступ по индексу вне формы -> MatrixIndexError (fail-fast)
5. Равенство точное, поэлементное, без epsilon
"""

import logging
import numbers
import threading
from collections.abc import Iterable, Iterator
from typing import Any, Callable, ClassVar, Optional

from advmath.core.contracts.validators import validate_matrix_payload
from advmath.core.domain.shape import MatrixShape
from advmath.core.math.errors import (
    ElementTypeMismatchError,
    MatrixIndexError,
    NumericConstraintError,
    ShapeMismatchError,
)
from advmath.core.math.numeric import is_arithmetic, require_numeric, zero_of
from advmath.core.math.numerical_safeguards import (
    ToleranceConfig,
    is_close,
    validate_positive_int,
)

logger = logging.getLogger(__name__)

# Кэш связанных типов: (element_type, rows, cols) -> класс
_BOUND_TYPES: dict[tuple[type, int, int], type["Matrix"]] = {}
# Один класс на ключ даже при одновременном связывании из нескольких потоков
_BIND_LOCK = threading.Lock()

# Типы элементов, которые сериализуются в контракт matrix.json
SERIALIZABLE_ELEMENT_TYPES: dict[str, type] = {
    "int": int,
    "float": float,
    "bool": bool,
}


# =============================================================================
# TYPE BINDING
# =============================================================================


def _bind(element_type: type, rows: int, cols: int) -> type["Matrix"]:
    """Создание класса Matrix[T, R, C] (вызывается один раз на ключ)."""
    require_numeric(element_type)
    shape = MatrixShape(rows=rows, cols=cols)

    name = f"Matrix[{element_type.__name__}, {rows}, {cols}]"
    bound = type(
        name,
        (Matrix,),
        {
            "__module__": __name__,
            "__qualname__": name,
            "element_type": element_type,
            "_shape": shape,
        },
    )
    logger.debug("Bound matrix type %s", name)
    return bound


def _rebuild(element_type: type, rows: int, cols: int, data: list[list[Any]]) -> "Matrix":
    """Восстановление матрицы при unpickle (динамические классы не импортируемы по имени)."""
    return Matrix[element_type, rows, cols]._from_rows(data)


# =============================================================================
# MATRIX
# =============================================================================


class Matrix:
    """
    Матрица фиксированной формы R x C с элементами типа T.

    Конструкторы (после связывания M = Matrix[T, R, C]):
        M()            - все ячейки равны нулю типа T
        M(value)       - все ячейки равны value
        M([[...], ...]) - построчное копирование литерала с усечением

    Доступ к ячейкам: m[row, col] (чтение/запись), m.at(row, col) (чтение).
    """

    element_type: ClassVar[Optional[type]] = None
    _shape: ClassVar[Optional[MatrixShape]] = None

    __slots__ = ("_data",)

    # Ячейки изменяемы через m[i, j] = v
    __hash__ = None  # type: ignore[assignment]

    def __class_getitem__(cls, params: tuple[type, int, int]) -> type["Matrix"]:
        if cls._shape is not None:
            raise TypeError(f"{cls.__name__} is already bound")
        if not isinstance(params, tuple) or len(params) != 3:
            raise TypeError("Matrix must be bound as Matrix[element_type, rows, cols]")

        element_type, rows, cols = params
        validate_positive_int(rows, "rows")
        validate_positive_int(cols, "cols")

        key = (element_type, int(rows), int(cols))
        bound = _BOUND_TYPES.get(key)
        if bound is not None:
            return bound

        with _BIND_LOCK:
            bound = _BOUND_TYPES.get(key)
            if bound is None:
                bound = _bind(element_type, key[1], key[2])
                _BOUND_TYPES[key] = bound
        return bound

    def __init__(self, values: Any = None):
        cls = type(self)
        rows, cols = cls._require_bound().as_tuple()

        zero = zero_of(cls.element_type)
        self._data: list[list[Any]] = [[zero] * cols for _ in range(rows)]

        if values is None:
            return

        if is_arithmetic(values) or isinstance(values, cls.element_type):
            fill = cls._coerce(values)
            for row in self._data:
                for j in range(cols):
                    row[j] = fill
        elif isinstance(values, Iterable) and not isinstance(values, (str, bytes)):
            self._copy_literal(values)
        else:
            raise TypeError(
                f"{cls.__name__} expects a scalar or a nested iterable, "
                f"got {type(values).__name__}"
            )

    def _copy_literal(self, values: Iterable[Iterable[Any]]) -> None:
        """Построчное копирование литерала; лишние строки/столбцы отбрасываются."""
        rows, cols = self._shape.as_tuple()
        truncated = False

        for i, row_init in enumerate(values):
            if i >= rows:
                truncated = True
                break
            if not isinstance(row_init, Iterable) or isinstance(row_init, (str, bytes)):
                raise TypeError(f"row {i} of the literal is not iterable")
            for j, value in enumerate(row_init):
                if j >= cols:
                    truncated = True
                    break
                self._data[i][j] = self._coerce(value)

        if truncated:
            logger.debug("Literal truncated to declared shape %dx%d", rows, cols)

    # -------------------------------------------------------------------------
    # Class-level helpers
    # -------------------------------------------------------------------------

    @classmethod
    def _require_bound(cls) -> MatrixShape:
        if cls._shape is None:
            raise TypeError("Matrix must be bound before use: Matrix[element_type, rows, cols]")
        return cls._shape

    @classmethod
    def _from_rows(cls, data: list[list[Any]]) -> "Matrix":
        """Внутренний конструктор: data уже имеет форму R x C и тип T."""
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    @classmethod
    def _coerce(cls, value: Any) -> Any:
        """
        Приведение значения к типу элемента без потерь.

        Значение типа T сохраняется как есть. Иное число приводится через
        T(value) только если результат равен исходному значению
        (int 2 -> float 2.0 допустимо, float 2.5 -> int запрещено).

        Raises:
            ElementTypeMismatchError: Если приведение невозможно или с потерями
        """
        tp = cls.element_type
        if type(value) is tp:
            return value

        if not is_arithmetic(value) and not isinstance(value, tp):
            raise ElementTypeMismatchError(
                f"{value!r} ({type(value).__name__}) is not a number "
                f"and cannot be stored in {cls.__name__}"
            )

        try:
            converted = tp(value)
        except (TypeError, ValueError, ArithmeticError) as e:
            raise ElementTypeMismatchError(
                f"{value!r} cannot be converted to {tp.__name__}: {e}"
            ) from e

        # NaN не равен сам себе: lossless, если NaN остался NaN
        if converted != value and not (converted != converted and value != value):
            raise ElementTypeMismatchError(
                f"{value!r} cannot be converted to {tp.__name__} without loss"
            )
        return converted

    @classmethod
    def _convert_result(cls, value: Any) -> Any:
        """Приведение результата арифметики к T (аналог convertible_to<T>)."""
        tp = cls.element_type
        if type(value) is tp:
            return value
        return tp(value)

    @classmethod
    def rows(cls) -> int:
        return cls._require_bound().rows

    @classmethod
    def cols(cls) -> int:
        return cls._require_bound().cols

    @classmethod
    def shape(cls) -> MatrixShape:
        return cls._require_bound()

    # -------------------------------------------------------------------------
    # Element access
    # -------------------------------------------------------------------------

    def _check_index(self, row: Any, col: Any) -> tuple[int, int]:
        rows, cols = self._shape.as_tuple()
        for name, index in (("row", row), ("col", col)):
            if isinstance(index, bool) or not isinstance(index, numbers.Integral):
                raise TypeError(f"{name} index must be an int, got {type(index).__name__}")
        if not (0 <= row < rows and 0 <= col < cols):
            raise MatrixIndexError(
                f"index ({row}, {col}) out of range for {rows}x{cols} matrix"
            )
        return int(row), int(col)

    @staticmethod
    def _split_key(key: Any) -> tuple[Any, Any]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be a (row, col) pair")
        return key

    def __getitem__(self, key: tuple[int, int]) -> Any:
        row, col = self._check_index(*self._split_key(key))
        return self._data[row][col]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        row, col = self._check_index(*self._split_key(key))
        self._data[row][col] = self._coerce(value)

    def at(self, row: int, col: int) -> Any:
        """Значение ячейки (row, col) с проверкой границ."""
        row, col = self._check_index(row, col)
        return self._data[row][col]

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        for row in self._data:
            yield tuple(row)

    def to_list(self) -> list[list[Any]]:
        """Копия сетки в виде вложенных списков."""
        return [list(row) for row in self._data]

    def copy(self) -> "Matrix":
        return type(self)._from_rows(self.to_list())

    # -------------------------------------------------------------------------
    # Compatibility checks
    # -------------------------------------------------------------------------

    def _check_element_type(self, other: "Matrix", operation: str) -> None:
        if self.element_type is not other.element_type:
            raise ElementTypeMismatchError(
                f"{operation}: element types differ "
                f"({self.element_type.__name__} vs {other.element_type.__name__})"
            )

    def _check_same_shape(self, other: "Matrix", operation: str) -> None:
        self._check_element_type(other, operation)
        if self._shape != other._shape:
            raise ShapeMismatchError(
                operation,
                self._shape.as_tuple(),
                other._shape.as_tuple(),
                "operands must share the same shape",
            )

    def _elementwise(
        self, other: "Matrix", op: Callable[[Any, Any], Any], operation: str
    ) -> "Matrix":
        self._check_same_shape(other, operation)
        cls = type(self)
        data = [
            [cls._convert_result(op(a, b)) for a, b in zip(row, other_row)]
            for row, other_row in zip(self._data, other._data)
        ]
        return cls._from_rows(data)

    # -------------------------------------------------------------------------
    # Algebra
    # -------------------------------------------------------------------------

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, lambda a, b: a + b, "add")

    def __sub__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, lambda a, b: a - b, "subtract")

    def __neg__(self) -> "Matrix":
        cls = type(self)
        return cls._from_rows([[cls._convert_result(-a) for a in row] for row in self._data])

    def __matmul__(self, other: "Matrix") -> "Matrix":
        """
        Контракция R x C на C x K -> R x K.

        result(i, j) = sum_k self(i, k) * other(k, j), аккумулятор
        каждой ячейки стартует с нуля типа T.

        Raises:
            ElementTypeMismatchError: Если типы элементов различаются
            ShapeMismatchError: Если self.cols() != other.rows()
        """
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_element_type(other, "multiply")

        shape = self._shape
        other_shape = other._shape
        if not shape.can_multiply(other_shape):
            raise ShapeMismatchError(
                "multiply",
                shape.as_tuple(),
                other_shape.as_tuple(),
                "left cols must equal right rows",
            )

        result_cls = Matrix[self.element_type, shape.rows, other_shape.cols]
        zero = zero_of(self.element_type)

        data = []
        for i in range(shape.rows):
            lhs_row = self._data[i]
            row = []
            for j in range(other_shape.cols):
                acc = zero
                for k in range(shape.cols):
                    acc = acc + lhs_row[k] * other._data[k][j]
                row.append(result_cls._convert_result(acc))
            data.append(row)

        return result_cls._from_rows(data)

    # Матричное произведение доступно и через *, и через @
    __mul__ = __matmul__

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if type(other) is not type(self):
            return False
        # Явное сравнение: list.__eq__ считает идентичный NaN равным себе
        return all(
            a == b
            for row, other_row in zip(self._data, other._data)
            for a, b in zip(row, other_row)
        )

    def is_close(self, other: "Matrix", config: Optional[ToleranceConfig] = None) -> bool:
        """
        Поэлементное сравнение с толерантностью (rel_tol + abs_tol).

        Используется для float-матриц, где точное == слишком строгое
        (например, (A*B)*C против A*(B*C)).

        Raises:
            ElementTypeMismatchError / ShapeMismatchError: при несовместимых операндах
        """
        self._check_same_shape(other, "is_close")
        config = config or ToleranceConfig()
        return all(
            is_close(a, b, rel_tol=config.rel_tol, abs_tol=config.abs_tol)
            for row, other_row in zip(self._data, other._data)
            for a, b in zip(row, other_row)
        )

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """
        Сериализация в payload контракта matrix.json.

        Raises:
            NumericConstraintError: Если тип элемента не сериализуем
        """
        for name, tp in SERIALIZABLE_ELEMENT_TYPES.items():
            if self.element_type is tp:
                return {
                    "element_type": name,
                    "rows": self.rows(),
                    "cols": self.cols(),
                    "data": self.to_list(),
                }
        raise NumericConstraintError(
            f"{self.element_type.__name__} matrices cannot be serialized; "
            f"supported element types: {sorted(SERIALIZABLE_ELEMENT_TYPES)}"
        )

    @staticmethod
    def from_dict(payload: dict[str, Any]) -> "Matrix":
        """
        Построение матрицы из payload контракта matrix.json.

        В отличие от литерального конструктора, усечение не допускается:
        сетка обязана точно соответствовать объявленной форме.

        Raises:
            jsonschema.ValidationError: Если payload нарушает схему
            ShapeMismatchError: Если размеры data не совпадают с rows/cols
        """
        validate_matrix_payload(payload)

        rows = payload["rows"]
        cols = payload["cols"]
        data = payload["data"]
        actual_cols = {len(row) for row in data}
        if len(data) != rows or actual_cols != {cols}:
            widest = max(actual_cols) if actual_cols else 0
            raise ShapeMismatchError(
                "from_dict",
                (rows, cols),
                (len(data), widest),
                "data does not match declared shape",
            )

        element_type = SERIALIZABLE_ELEMENT_TYPES[payload["element_type"]]
        return Matrix[element_type, rows, cols](data)

    def __reduce__(self) -> tuple[Any, ...]:
        return (_rebuild, (self.element_type, self.rows(), self.cols(), self.to_list()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"


# =============================================================================
# SQUARE ALIASES
# =============================================================================


class _SquareFamily:
    """Семейство квадратных матриц N x N: Matrix2x2[float] -> Matrix[float, 2, 2]."""

    def __init__(self, size: int):
        self.size = size

    def __getitem__(self, element_type: type) -> type[Matrix]:
        return Matrix[element_type, self.size, self.size]

    def __repr__(self) -> str:
        return f"Matrix{self.size}x{self.size}"


Matrix2x2 = _SquareFamily(2)
Matrix3x3 = _SquareFamily(3)
Matrix4x4 = _SquareFamily(4)

Matrix2x2f = Matrix2x2[float]
Matrix3x3f = Matrix3x3[float]
Matrix4x4f = Matrix4x4[float]

Matrix2x2i = Matrix2x2[int]
Matrix3x3i = Matrix3x3[int]
Matrix4x4i = Matrix4x4[int]

# float в Python - двойная точность: d-псевдонимы совпадают с f-псевдонимами
Matrix2x2d = Matrix2x2f
Matrix3x3d = Matrix3x3f
Matrix4x4d = Matrix4x4f
