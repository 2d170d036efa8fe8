"""
Domain models and value objects.

Contains the result type returned by fallible arithmetic operations.
"""

from arithkit.core.domain.result import (
    CONTRACT_SCHEMA_VERSION,
    FAILURE_PLACEHOLDER,
    ArithmeticDomainViolation,
    ArithmeticErrorKind,
    ArithmeticResult,
    DivisionByZero,
    NegativeOperand,
    Operation,
)

__all__ = [
    # Constants
    "CONTRACT_SCHEMA_VERSION",
    "FAILURE_PLACEHOLDER",
    # Enums
    "Operation",
    "ArithmeticErrorKind",
    # Exceptions
    "ArithmeticDomainViolation",
    "DivisionByZero",
    "NegativeOperand",
    # Models
    "ArithmeticResult",
]
