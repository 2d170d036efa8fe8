"""
ArithmeticResult: Результат fallible арифметической операции

Immutable Pydantic модель: значение + сигнал ошибки. Ошибка возвращается
вызывающему как часть результата, а не выбрасывается. При ошибке value
содержит placeholder 0.0, который НЕЛЬЗЯ трактовать как валидный результат.

Для вызывающих, которым удобнее исключения, есть unwrap().
"""

from enum import Enum
from typing import Any, Final, Optional

from pydantic import BaseModel, Field, model_validator

from arithkit.core.math.numerical_safeguards import is_valid_float

# Версия JSON контракта arithmetic_result
CONTRACT_SCHEMA_VERSION: Final[str] = "1"

# Значение value при ошибке
FAILURE_PLACEHOLDER: Final[float] = 0.0


# =============================================================================
# ENUMS
# =============================================================================


class Operation(str, Enum):
    """Арифметическая операция"""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    SQRT = "sqrt"

    @property
    def arity(self) -> int:
        """Количество операндов"""
        return 1 if self is Operation.SQRT else 2


class ArithmeticErrorKind(str, Enum):
    """Вид ошибки: математически неопределённая операция"""

    DIVISION_BY_ZERO = "DivisionByZero"
    NEGATIVE_OPERAND = "NegativeOperand"

    @property
    def message(self) -> str:
        return _ERROR_MESSAGES[self]


_ERROR_MESSAGES: Final[dict[ArithmeticErrorKind, str]] = {
    ArithmeticErrorKind.DIVISION_BY_ZERO: "division by zero not allowed",
    ArithmeticErrorKind.NEGATIVE_OPERAND: "square root of negative number not allowed",
}


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ArithmeticDomainViolation(ValueError):
    """
    Операция не определена для данных входов.

    Выбрасывается только из ArithmeticResult.unwrap(). Сами операции
    исключений не выбрасывают.
    """

    kind: ArithmeticErrorKind

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.kind.message)


class DivisionByZero(ArithmeticDomainViolation):
    """Делитель точно равен нулю."""

    kind = ArithmeticErrorKind.DIVISION_BY_ZERO


class NegativeOperand(ArithmeticDomainViolation):
    """Аргумент квадратного корня отрицательный."""

    kind = ArithmeticErrorKind.NEGATIVE_OPERAND


_EXCEPTIONS: Final[dict[ArithmeticErrorKind, type[ArithmeticDomainViolation]]] = {
    ArithmeticErrorKind.DIVISION_BY_ZERO: DivisionByZero,
    ArithmeticErrorKind.NEGATIVE_OPERAND: NegativeOperand,
}


# =============================================================================
# RESULT MODEL
# =============================================================================


class ArithmeticResult(BaseModel):
    """
    Результат fallible операции (divide, sqrt).

    Immutable модель (frozen=True). Инварианты:
    - error задан → value == 0.0 (placeholder)
    - len(operands) == operation.arity
    """

    operation: Operation = Field(..., description="Выполненная операция")
    operands: tuple[float, ...] = Field(..., description="Операнды в порядке вызова")
    value: float = Field(FAILURE_PLACEHOLDER, description="Результат или placeholder")
    error: Optional[ArithmeticErrorKind] = Field(None, description="Сигнал ошибки")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_consistency(self) -> "ArithmeticResult":
        """Проверка arity и placeholder при ошибке"""
        if len(self.operands) != self.operation.arity:
            raise ValueError(
                f"{self.operation.value} expects {self.operation.arity} operand(s), "
                f"got {len(self.operands)}"
            )
        if self.error is not None and self.value != FAILURE_PLACEHOLDER:
            raise ValueError(
                f"failed result must carry placeholder value {FAILURE_PLACEHOLDER}, "
                f"got {self.value}"
            )
        return self

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def success(cls, operation: Operation, operands: tuple[float, ...], value: float) -> "ArithmeticResult":
        return cls(operation=operation, operands=operands, value=value)

    @classmethod
    def failure(
        cls, operation: Operation, operands: tuple[float, ...], error: ArithmeticErrorKind
    ) -> "ArithmeticResult":
        return cls(operation=operation, operands=operands, value=FAILURE_PLACEHOLDER, error=error)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def ok(self) -> bool:
        """True если операция успешна"""
        return self.error is None

    @property
    def message(self) -> Optional[str]:
        """Сообщение об ошибке или None"""
        if self.error is None:
            return None
        return self.error.message

    def unwrap(self) -> float:
        """
        Значение успешного результата.

        Returns:
            value

        Raises:
            DivisionByZero: если error == DIVISION_BY_ZERO
            NegativeOperand: если error == NEGATIVE_OPERAND
        """
        if self.error is not None:
            raise _EXCEPTIONS[self.error]()
        return self.value

    def value_or(self, default: float) -> float:
        """value при успехе, иначе default"""
        return self.value if self.error is None else default

    def to_contract(self) -> dict[str, Any]:
        """
        Сериализация в dict по контракту arithmetic_result.

        Non-finite value (NaN/Inf) записывается как None: JSON их не поддерживает.

        Returns:
            JSON-совместимый dict
        """
        return {
            "schema_version": CONTRACT_SCHEMA_VERSION,
            "operation": self.operation.value,
            "operands": [op if is_valid_float(op) else None for op in self.operands],
            "value": self.value if is_valid_float(self.value) else None,
            "error": self.error.value if self.error is not None else None,
            "message": self.message,
        }
