"""
arithkit: minimal arithmetic library.

Public surface:
- add, subtract, multiply: plain float results
- divide, sqrt: ArithmeticResult (value + error signal)
"""

from arithkit.core.math import (
    add,
    divide,
    is_close,
    is_valid_float,
    multiply,
    sqrt,
    subtract,
)
from arithkit.core.domain import (
    ArithmeticDomainViolation,
    ArithmeticErrorKind,
    ArithmeticResult,
    DivisionByZero,
    NegativeOperand,
    Operation,
)

__all__ = [
    "add",
    "subtract",
    "multiply",
    "divide",
    "sqrt",
    "is_close",
    "is_valid_float",
    "Operation",
    "ArithmeticErrorKind",
    "ArithmeticResult",
    "ArithmeticDomainViolation",
    "DivisionByZero",
    "NegativeOperand",
]

__version__ = "0.1.0"
