"""
JSON Schema Contract Validators

Модуль для валидации конфигураций шкал согласно формальным JSON Schema
контрактам. Использует библиотеку jsonschema для проверки соответствия данных
схемам.

Схемы:
- scale.json (определение одной шкалы)
- scale_converter.json (пара шкал external/internal)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self):
        # Определяем корень проекта (4 уровня вверх от этого файла)
        self._schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(
                f"Schema directory not found: {self._schema_dir} "
                "(contracts/schema is read from the repository root; install with pip install -e .)"
            )

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'scale')

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
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

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
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class ScaleValidator(ContractValidator):
    """Валидатор для scale контракта."""

    def __init__(self):
        super().__init__("scale")


class ScaleConverterValidator(ContractValidator):
    """Валидатор для scale_converter контракта."""

    def __init__(self):
        super().__init__("scale_converter")


# Кэшированные экземпляры для convenience функций
_SCALE_VALIDATOR = ScaleValidator()
_SCALE_CONVERTER_VALIDATOR = ScaleConverterValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_scale_config(data: Dict[str, Any]) -> None:
    """
    Валидация конфигурации шкалы.

    Args:
        data: Данные для валидации

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _SCALE_VALIDATOR.validate(data)


def validate_scale_converter_config(data: Dict[str, Any]) -> None:
    """
    Валидация конфигурации пары шкал.

    Проверяется только внешняя форма (external/internal); вложенные шкалы
    валидируются отдельно через validate_scale_config.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _SCALE_CONVERTER_VALIDATOR.validate(data)
