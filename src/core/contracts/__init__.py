"""
Contract Validation Module

Модуль для валидации JSON конфигураций шкал.
"""

from .validators import (
    ContractValidator,
    ScaleConverterValidator,
    ScaleValidator,
    SchemaLoader,
    validate_scale_config,
    validate_scale_converter_config,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ScaleValidator",
    "ScaleConverterValidator",
    # Functions
    "validate_scale_config",
    "validate_scale_converter_config",
]
