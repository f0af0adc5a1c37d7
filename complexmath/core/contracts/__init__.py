"""
Contract Validation Module

Модуль для валидации JSON контрактов complexmath.
"""

from .validators import (
    ComplexValueValidator,
    ContractValidator,
    SchemaLoader,
    load_complex_value,
    validate_complex_value,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ComplexValueValidator",
    # Functions
    "validate_complex_value",
    "load_complex_value",
]
