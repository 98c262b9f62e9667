"""
MatrixShape - Value object формы матрицы

Immutable Pydantic модель пары (rows, cols).
Форма фиксируется при связывании типа Matrix[T, R, C] и не меняется.
"""

from pydantic import BaseModel, Field


class MatrixShape(BaseModel):
    """
    Форма матрицы (rows, cols).

    Immutable модель (frozen=True): форма является частью идентичности
    типа матрицы, поэтому её изменение запрещено.
    """

    rows: int = Field(..., gt=0, description="Количество строк")
    cols: int = Field(..., gt=0, description="Количество столбцов")

    # strict: bool не принимается как размер
    model_config = {"frozen": True, "strict": True}

    @property
    def size(self) -> int:
        """Количество ячеек rows * cols"""
        return self.rows * self.cols

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def as_tuple(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    def can_multiply(self, other: "MatrixShape") -> bool:
        """Допустима ли контракция self x other (cols левого == rows правого)"""
        return self.cols == other.rows

    def product_shape(self, other: "MatrixShape") -> "MatrixShape":
        """
        Форма результата умножения R x C на C x K.

        Raises:
            ValueError: Если cols левого != rows правого
        """
        if not self.can_multiply(other):
            raise ValueError(
                f"cannot contract {self.rows}x{self.cols} with {other.rows}x{other.cols}"
            )
        return MatrixShape(rows=self.rows, cols=other.cols)

    def __str__(self) -> str:
        return f"{self.rows}x{self.cols}"
