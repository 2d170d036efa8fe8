"""
Arithmetic: Элементарные операции над float

Четыре базовые операции и квадратный корень. Все функции чистые и
stateless: безопасны для конкурентного вызова без синхронизации.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. add/subtract/multiply не имеют ошибок, NaN/Inf пропагируют по IEEE 754
2. divide: деление на ноль определяется ТОЧНЫМ равенством b == 0 (включая -0.0),
   без epsilon-толерантности
3. sqrt: a < 0 (включая -inf) → ошибка; NaN не отрицателен и проходит как NaN
4. Ошибки возвращаются в ArithmeticResult, исключения не выбрасываются
"""

import logging
import math

from arithkit.core.domain.result import ArithmeticErrorKind, ArithmeticResult, Operation

logger = logging.getLogger(__name__)


def add(a: float, b: float) -> float:
    """Сумма a + b."""
    return a + b


def subtract(a: float, b: float) -> float:
    """Разность a - b."""
    return a - b


def multiply(a: float, b: float) -> float:
    """Произведение a * b."""
    return a * b


def divide(a: float, b: float) -> ArithmeticResult:
    """
    Частное a / b.

    Args:
        a: Делимое
        b: Делитель

    Returns:
        ArithmeticResult с value = a / b, либо с error = DIVISION_BY_ZERO
        и placeholder value = 0.0 если b == 0

    Examples:
        >>> divide(10.0, 5.0).value
        2.0
        >>> divide(120.0, 0.0).error
        <ArithmeticErrorKind.DIVISION_BY_ZERO: 'DivisionByZero'>
    """
    operands = (a, b)

    if b == 0:
        logger.debug("division_by_zero a=%s", a)
        return ArithmeticResult.failure(Operation.DIVIDE, operands, ArithmeticErrorKind.DIVISION_BY_ZERO)

    return ArithmeticResult.success(Operation.DIVIDE, operands, a / b)


def sqrt(a: float) -> ArithmeticResult:
    """
    Неотрицательный квадратный корень.

    Args:
        a: Аргумент

    Returns:
        ArithmeticResult с value = sqrt(a), либо с error = NEGATIVE_OPERAND
        и placeholder value = 0.0 если a < 0
    """
    operands = (a,)

    if a < 0:
        logger.debug("negative_operand a=%s", a)
        return ArithmeticResult.failure(Operation.SQRT, operands, ArithmeticErrorKind.NEGATIVE_OPERAND)

    return ArithmeticResult.success(Operation.SQRT, operands, math.sqrt(a))
