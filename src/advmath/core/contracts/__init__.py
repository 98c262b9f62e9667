"""
Contract Validation Module

Модуль для валидации JSON контракта сериализованной матрицы.
"""

from .validators import (
    MatrixPayloadValidator,
    SchemaLoader,
    validate_matrix_payload,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "MatrixPayloadValidator",
    # Functions
    "validate_matrix_payload",
]
