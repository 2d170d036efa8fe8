"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Epsilon-константы
2. NaN/Inf проверки
3. Epsilon-сравнения float
"""

import math

import pytest

from arithkit.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_valid_float,
)


class TestConstants:
    """Тесты epsilon-констант"""

    def test_positive(self) -> None:
        assert EPS_FLOAT_COMPARE_REL > 0
        assert EPS_FLOAT_COMPARE_ABS > 0

    def test_values(self) -> None:
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    @pytest.mark.parametrize("value", [0.0, -0.0, 1.0, -1e300, 5e-324])
    def test_finite(self, value: float) -> None:
        assert is_valid_float(value)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite(self, value: float) -> None:
        assert not is_valid_float(value)


class TestIsClose:
    """Тесты для is_close"""

    def test_relative_tolerance(self) -> None:
        """Различие в пределах rel_tol"""
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(1e10, 1e10 + 1.0)
        assert not is_close(1.0, 1.1)

    def test_absolute_tolerance_near_zero(self) -> None:
        """Около нуля работает abs_tol"""
        assert is_close(0.0, 1e-13)
        assert not is_close(0.0, 1e-11)

    def test_classic_rounding(self) -> None:
        """0.1 + 0.2 ≈ 0.3"""
        assert 0.1 + 0.2 != 0.3
        assert is_close(0.1 + 0.2, 0.3)

    def test_custom_tolerance(self) -> None:
        assert is_close(1.0, 1.05, rel_tol=0.1)
        assert not is_close(1.0, 1.05, rel_tol=0.01)

    def test_nan_never_close(self) -> None:
        assert not is_close(math.nan, math.nan)

    def test_infinity(self) -> None:
        assert is_close(math.inf, math.inf)
        assert not is_close(math.inf, -math.inf)
