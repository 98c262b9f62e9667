"""
JSON Schema Contract Validators

Валидация сериализованной матрицы (Matrix.to_dict / Matrix.from_dict)
против контракта schema/matrix.json (jsonschema, Draft 2020-12).
"""

import functools
import json
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

# Схемы поставляются внутри пакета
SCHEMA_DIR = Path(__file__).parent / "schema"

MATRIX_SCHEMA = "matrix"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Загрузчик JSON Schema файлов из директории с кэшем по имени."""

    def __init__(self, schema_dir: Optional[Path] = None):
        self.schema_dir = schema_dir or SCHEMA_DIR
        if not self.schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self.schema_dir}")
        self._cache: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени без расширения.

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if name not in self._cache:
            path = self.schema_dir / f"{name}.json"
            if not path.is_file():
                raise FileNotFoundError(f"Schema not found: {path}")

            schema = json.loads(path.read_text(encoding="utf-8"))
            try:
                Draft202012Validator.check_schema(schema)
            except jsonschema.SchemaError as e:
                raise ValueError(f"Invalid JSON Schema in {path.name}: {e}") from e
            self._cache[name] = schema

        return self._cache[name]


# =============================================================================
# MATRIX PAYLOAD VALIDATOR
# =============================================================================


class MatrixPayloadValidator:
    """
    Валидатор payload контракта matrix.json.

    Проверяет структуру (element_type, rows, cols, data) и тип ячеек
    по element_type. Совпадение размеров data с rows/cols схема не
    выражает: это проверяет Matrix.from_dict.
    """

    def __init__(self, loader: Optional[SchemaLoader] = None):
        loader = loader or SchemaLoader()
        self.schema = loader.load_schema(MATRIX_SCHEMA)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, payload: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если payload не соответствует схеме
        """
        self._validator.validate(payload)

    def is_valid(self, payload: Dict[str, Any]) -> bool:
        return self._validator.is_valid(payload)

    def iter_errors(self, payload: Dict[str, Any]) -> Iterator[ValidationError]:
        """Все нарушения схемы, а не только первое."""
        return self._validator.iter_errors(payload)


@functools.lru_cache(maxsize=None)
def _default_validator() -> MatrixPayloadValidator:
    return MatrixPayloadValidator()


def validate_matrix_payload(payload: Dict[str, Any]) -> None:
    """
    Валидация сериализованной матрицы против пакетной схемы.

    Raises:
        ValidationError: Если payload не соответствует схеме
    """
    _default_validator().validate(payload)
