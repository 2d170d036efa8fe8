"""
Contract Validation Module

Модуль для валидации JSON контрактов arithkit.
"""

from .validators import (
    ArithmeticResultValidator,
    ContractValidator,
    SchemaLoader,
    validate_arithmetic_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ArithmeticResultValidator",
    # Functions
    "validate_arithmetic_result",
]
