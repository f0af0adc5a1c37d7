"""
Тесты для модулей Extended Precision и Hypot

Проверяет:
1. Error-free transformations (split, two-sum, product round-off)
2. x^2 + y^2 - 1 с расширенной точностью
3. hypot без переполнения/антипереполнения и по C99
"""

import math
from fractions import Fraction

import pytest

from complexmath.core.math.bits import MAX_VALUE
from complexmath.core.math.extended_precision import (
    fast_two_sum,
    product_low,
    split_high,
    square_low,
    two_sum,
    x2y2,
    x2y2m1,
)
from complexmath.core.math.hypot import hypot
from complexmath.core.math.precision import ulps_equals

# =============================================================================
# ERROR-FREE TRANSFORMATIONS
# =============================================================================


class TestErrorFreeTransformations:
    """Тесты для split / two-sum / round-off"""

    def test_split_is_exact(self) -> None:
        """high + low == x"""
        for x in (1.0, math.pi, 1e300, 3.0e-200):
            high = split_high(x)
            assert high + (x - high) == x

    def test_square_low_recovers_round_off(self) -> None:
        """(1 + 2^-30)^2: потерянный член 2^-60"""
        x = 1.0 + 2.0**-30
        high = split_high(x)
        low = x - high
        square = x * x
        assert square == 1.0 + 2.0**-29
        assert square_low(low, high, square) == 2.0**-60

    def test_product_low_recovers_round_off(self) -> None:
        """Ошибка произведения a*b"""
        a = 1.0 + 2.0**-30
        a_high = split_high(a)
        a_low = a - a_high
        product = a * a
        assert product_low(a_low, a_low, product, a_high, a_high) == 2.0**-60

    def test_two_sum(self) -> None:
        """Сумма и точная ошибка округления"""
        assert two_sum(1.0, 2.0**-60) == (1.0, 2.0**-60)
        assert two_sum(2.0**-60, 1.0) == (1.0, 2.0**-60)
        assert fast_two_sum(1.0, 2.0**-60) == (1.0, 2.0**-60)

    def test_two_sum_exact_addition(self) -> None:
        """Точно представимая сумма: ошибка 0"""
        assert two_sum(1.5, 2.25) == (3.75, 0.0)


# =============================================================================
# X^2 + Y^2 - 1
# =============================================================================


class TestX2Y2M1:
    """Тесты для x2y2m1 / x2y2"""

    @pytest.mark.parametrize(
        "x, y",
        [
            (0.8, 0.6),
            (0.99, 0.1),
            (0.75, 0.6614378277661477),
        ],
    )
    def test_high_precision_near_unit_circle(self, x: float, y: float) -> None:
        """Результат совпадает с точным рациональным вычислением"""
        expected = float(Fraction(x) ** 2 + Fraction(y) ** 2 - 1)
        assert x2y2m1(x, y) == pytest.approx(expected, rel=1e-12, abs=0.0)

    def test_low_precision_branch(self) -> None:
        """x >= 1: (x-1)(x+1) + y^2"""
        assert x2y2m1(1.5, 0.5) == 1.5
        assert x2y2m1(1.0, 0.0) == 0.0

    def test_x2y2(self) -> None:
        assert x2y2(4.0, 3.0) == 25.0
        assert x2y2(1.0, 0.0) == 1.0


# =============================================================================
# HYPOT
# =============================================================================


class TestHypot:
    """Тесты для hypot"""

    def test_pythagorean(self) -> None:
        assert hypot(3.0, 4.0) == 5.0
        assert hypot(-3.0, 4.0) == 5.0
        assert hypot(3.0, -4.0) == 5.0

    def test_infinity_dominates_nan(self) -> None:
        """hypot(inf, NaN) == hypot(NaN, inf) == +inf"""
        assert hypot(math.inf, math.nan) == math.inf
        assert hypot(math.nan, -math.inf) == math.inf
        assert math.isnan(hypot(math.nan, 1.0))

    def test_no_intermediate_overflow(self) -> None:
        """Большие компоненты масштабируются"""
        assert hypot(MAX_VALUE, 0.0) == MAX_VALUE
        assert math.isfinite(hypot(MAX_VALUE / 2, MAX_VALUE / 2))
        assert hypot(MAX_VALUE, MAX_VALUE) == math.inf

    @pytest.mark.parametrize(
        "x, y",
        [
            (1.0, 1e-10),
            (123.456, 789.012),
            (1e300, 1e300),
            (1e-300, 1e-300),
            (1e-320, 3e-320),
            (0.5, 0.7),
        ],
    )
    def test_accuracy(self, x: float, y: float) -> None:
        """Ошибка не более 1 ulp"""
        assert ulps_equals(hypot(x, y), math.hypot(x, y), 1)

    @pytest.mark.parametrize("x, y", [(1e-320, 3e-318), (2.5, 1e-17), (7.0, 11.0)])
    def test_commutative(self, x: float, y: float) -> None:
        """hypot(x, y) == hypot(y, x) бит-в-бит"""
        assert hypot(x, y) == hypot(y, x)
