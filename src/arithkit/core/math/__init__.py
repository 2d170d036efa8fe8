"""
Core math modules для arithkit

Элементарная арифметика и float-сравнения с учётом машинной точности.
"""

# Numerical Safeguards
from arithkit.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_valid_float,
)

# Arithmetic
from arithkit.core.math.arithmetic import (
    add,
    divide,
    multiply,
    sqrt,
    subtract,
)

__all__ = [
    # Numerical Safeguards: Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards: Checks
    "is_close",
    "is_valid_float",
    # Arithmetic
    "add",
    "subtract",
    "multiply",
    "divide",
    "sqrt",
]
