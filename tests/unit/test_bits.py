"""
Тесты для модуля Bits

Проверяет:
1. Реинтерпретацию float <-> int (беззнаковую и знаковую)
2. Канонизацию NaN
3. Детекцию знака с учётом -0.0
4. Экспоненту и scalb
"""

import math

import pytest

from complexmath.core.math.bits import (
    CANONICAL_NAN_BITS,
    MAX_VALUE,
    MIN_NORMAL,
    bits_to_double,
    canonical_bits,
    count_leading_zeros,
    double_bits,
    get_exponent,
    high_part,
    is_negative,
    is_pos_finite,
    is_pos_infinite,
    scalb,
    signed_bits,
)

# =============================================================================
# РЕИНТЕРПРЕТАЦИЯ
# =============================================================================


class TestBitPatterns:
    """Тесты для double_bits / signed_bits / bits_to_double"""

    def test_known_patterns(self) -> None:
        """Известные битовые шаблоны"""
        assert double_bits(1.0) == 0x3FF0_0000_0000_0000
        assert double_bits(-0.0) == 0x8000_0000_0000_0000
        assert double_bits(math.inf) == 0x7FF0_0000_0000_0000

    def test_signed_view(self) -> None:
        """Знаковое представление как Java long"""
        assert signed_bits(-0.0) == -(2**63)
        assert signed_bits(1.0) == double_bits(1.0)
        assert signed_bits(-1.0) < 0

    def test_round_trip(self) -> None:
        """bits_to_double обратна double_bits"""
        for value in (0.0, -0.0, 1.5, -MAX_VALUE, 5e-324, math.inf):
            assert double_bits(bits_to_double(double_bits(value))) == double_bits(value)

    def test_canonical_nan(self) -> None:
        """Любой NaN канонизируется"""
        assert canonical_bits(math.nan) == CANONICAL_NAN_BITS
        assert canonical_bits(-math.nan) == CANONICAL_NAN_BITS
        assert canonical_bits(bits_to_double(0x7FF0_0000_0000_0001)) == CANONICAL_NAN_BITS

    def test_canonical_keeps_signed_zero(self) -> None:
        """-0.0 и 0.0 различаются"""
        assert canonical_bits(0.0) != canonical_bits(-0.0)


# =============================================================================
# ЗНАК
# =============================================================================


class TestSign:
    """Тесты для is_negative / is_pos_infinite / is_pos_finite"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (-1.0, True),
            (-0.0, True),
            (0.0, False),
            (1.0, False),
            (-math.inf, True),
            (math.nan, False),
        ],
    )
    def test_is_negative(self, value: float, expected: bool) -> None:
        """-0.0 отрицателен, NaN — нет"""
        assert is_negative(value) is expected

    def test_is_pos_infinite(self) -> None:
        assert is_pos_infinite(math.inf)
        assert not is_pos_infinite(-math.inf)
        assert not is_pos_infinite(math.nan)

    def test_is_pos_finite(self) -> None:
        assert is_pos_finite(MAX_VALUE)
        assert not is_pos_finite(math.inf)
        assert not is_pos_finite(math.nan)


# =============================================================================
# ЭКСПОНЕНТА И МАСШТАБ
# =============================================================================


class TestExponent:
    """Тесты для get_exponent / scalb / high_part"""

    def test_get_exponent(self) -> None:
        """Несмещённая экспонента"""
        assert get_exponent(1.0) == 0
        assert get_exponent(3.0) == 1
        assert get_exponent(0.25) == -2
        assert get_exponent(MIN_NORMAL) == -1022
        assert get_exponent(0.0) == -1023
        assert get_exponent(5e-324) == -1023
        assert get_exponent(math.inf) == 1024
        assert get_exponent(math.nan) == 1024

    def test_scalb_exact(self) -> None:
        """scalb точно умножает на 2^n"""
        assert scalb(1.0, 10) == 1024.0
        assert scalb(3.0, -1) == 1.5
        assert scalb(1.0, -1074) == 5e-324

    def test_scalb_saturates(self) -> None:
        """Переполнение → ±inf"""
        assert scalb(1.0, 2000) == math.inf
        assert scalb(-1.0, 2000) == -math.inf
        assert scalb(1.0, -2000) == 0.0

    def test_high_part(self) -> None:
        """Младшие 27 бит мантиссы обнуляются"""
        value = 1.0 + 2.0**-30
        assert high_part(value) == 1.0
        assert high_part(1.5) == 1.5

    def test_count_leading_zeros(self) -> None:
        assert count_leading_zeros(1) == 63
        assert count_leading_zeros(0) == 64
        assert count_leading_zeros(1 << 63) == 0
