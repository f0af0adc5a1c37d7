"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- complex_value.json (mapping форма Complex: {"real": number, "imaginary": number})
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from complexmath.core.domain.complex import Complex

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в contracts/schema/.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'complex_value')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        try:
            self.validator.validate(data)
        except ValidationError as e:
            logger.debug("%s contract violation: %s", self.schema_name, e.message)
            raise


class ComplexValueValidator(ContractValidator):
    """Валидатор для complex_value контракта."""

    def __init__(self):
        super().__init__("complex_value")

    def to_complex(self, data: Dict[str, Any]) -> Complex:
        """
        Валидация mapping формы и создание Complex.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validate(data)
        return Complex.model_validate(data)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_complex_value(data: Dict[str, Any]) -> None:
    """
    Валидация mapping формы комплексного числа.

    Args:
        data: Данные для валидации, например {"real": 1.0, "imaginary": -0.5}

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ComplexValueValidator().validate(data)


def load_complex_value(data: Dict[str, Any]) -> Complex:
    """Валидация по контракту и конверсия в Complex."""
    return ComplexValueValidator().to_complex(data)
