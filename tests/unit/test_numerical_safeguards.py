"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Epsilon-константы
2. Сравнения float с толерантностью (включая complex и NaN)
3. ToleranceConfig
4. Валидацию целочисленных параметров
"""

import math
from dataclasses import FrozenInstanceError

import pytest

from advmath.core.math.numerical_safeguards import (
    EPS_APPROX_DEFAULT,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    ToleranceConfig,
    is_close,
    is_valid_float,
    validate_non_negative_int,
    validate_positive_int,
)


# =============================================================================
# ТЕСТЫ КОНСТАНТ
# =============================================================================


class TestEpsilonConstants:
    """Тесты epsilon-параметров"""

    def test_values(self) -> None:
        """Значения констант"""
        assert EPS_APPROX_DEFAULT == 1e-9
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12

    def test_all_positive(self) -> None:
        """Все epsilon положительные"""
        assert EPS_APPROX_DEFAULT > 0
        assert EPS_FLOAT_COMPARE_REL > 0
        assert EPS_FLOAT_COMPARE_ABS > 0


# =============================================================================
# ТЕСТЫ СРАВНЕНИЙ
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1e300)

    def test_nan_and_inf(self) -> None:
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


class TestIsClose:
    """Тесты для is_close"""

    def test_close_values(self) -> None:
        """Близкие значения"""
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(0.0, 1e-13)

    def test_distant_values(self) -> None:
        """Далёкие значения"""
        assert not is_close(1.0, 1.1)
        assert not is_close(0.0, 1e-6)

    def test_relative_tolerance_for_large_values(self) -> None:
        """Большие значения сравниваются относительно"""
        assert is_close(1e10, 1e10 + 1.0)

    def test_nan_never_close(self) -> None:
        """NaN не близок ни к чему, включая себя"""
        nan = float("nan")
        assert not is_close(nan, nan)
        assert not is_close(nan, 0.0)

    def test_complex_values(self) -> None:
        """Complex сравнивается по модулю разности"""
        assert is_close(1 + 1j, 1 + 1j + 1e-13j)
        assert not is_close(1 + 1j, 1 - 1j)

    def test_custom_tolerances(self) -> None:
        assert is_close(1.0, 1.05, rel_tol=0.1)
        assert is_close(0.0, 0.01, abs_tol=0.1)


# =============================================================================
# ТЕСТЫ TOLERANCE CONFIG
# =============================================================================


class TestToleranceConfig:
    """Тесты для ToleranceConfig"""

    def test_defaults(self) -> None:
        """Значения по умолчанию берутся из констант"""
        config = ToleranceConfig()
        assert config.rel_tol == EPS_FLOAT_COMPARE_REL
        assert config.abs_tol == EPS_FLOAT_COMPARE_ABS

    def test_immutable(self) -> None:
        """Конфигурация неизменяема"""
        config = ToleranceConfig()
        with pytest.raises(FrozenInstanceError):
            config.rel_tol = 0.5  # type: ignore

    def test_negative_tolerance_rejected(self) -> None:
        with pytest.raises(ValueError, match="rel_tol must be non-negative"):
            ToleranceConfig(rel_tol=-1e-9)
        with pytest.raises(ValueError, match="abs_tol must be non-negative"):
            ToleranceConfig(abs_tol=-1e-9)

    def test_zero_tolerance_allowed(self) -> None:
        config = ToleranceConfig(rel_tol=0.0, abs_tol=0.0)
        assert config.rel_tol == 0.0


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidateNonNegativeInt:
    """Тесты для validate_non_negative_int"""

    def test_valid(self) -> None:
        validate_non_negative_int(0, "n")
        validate_non_negative_int(42, "n")

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="n must be non-negative"):
            validate_non_negative_int(-1, "n")

    def test_non_integer_raises(self) -> None:
        with pytest.raises(TypeError, match="exponent must be an integer"):
            validate_non_negative_int(2.0, "exponent")  # type: ignore

    def test_bool_rejected(self) -> None:
        """bool не является допустимым целым параметром"""
        with pytest.raises(TypeError):
            validate_non_negative_int(True, "n")


class TestValidatePositiveInt:
    """Тесты для validate_positive_int"""

    def test_valid(self) -> None:
        validate_positive_int(1, "rows")

    def test_zero_raises(self) -> None:
        with pytest.raises(ValueError, match="rows must be positive"):
            validate_positive_int(0, "rows")

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError):
            validate_positive_int(-3, "cols")

    def test_nan_is_not_integer(self) -> None:
        with pytest.raises(TypeError):
            validate_positive_int(math.nan, "rows")  # type: ignore
