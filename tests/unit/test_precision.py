"""
Тесты для модуля Precision

Проверяет:
1. Сравнение по ulps, в том числе через ноль
2. NaN: ulps_equals отвергает, equals_including_nan принимает
3. Сравнение по eps и относительному допуску
4. compare_to / compare_to_ulps
"""

import math

import pytest

from complexmath.core.math.precision import (
    compare_to,
    compare_to_ulps,
    equals_eps,
    equals_including_nan,
    equals_including_nan_eps,
    equals_with_relative_tolerance,
    representable_delta,
    ulps_equals,
)

# =============================================================================
# ULPS
# =============================================================================


class TestUlpsEquals:
    """Тесты для ulps_equals"""

    def test_adjacent_values(self) -> None:
        """Соседние double равны при допуске 1"""
        one_up = math.nextafter(1.0, 2.0)
        two_up = math.nextafter(one_up, 2.0)
        assert ulps_equals(1.0, one_up)
        assert not ulps_equals(1.0, two_up)
        assert ulps_equals(1.0, two_up, 2)

    def test_exact_equality_with_zero_ulps(self) -> None:
        assert ulps_equals(1.5, 1.5, 0)
        assert not ulps_equals(1.5, math.nextafter(1.5, 0.0), 0)

    def test_signed_zeros(self) -> None:
        """+0.0 и -0.0 разделены нулём ulps"""
        assert ulps_equals(0.0, -0.0, 0)
        assert ulps_equals(-0.0, 0.0, 0)

    def test_across_zero(self) -> None:
        """Расстояние через ноль суммируется"""
        tiny = 5e-324
        assert not ulps_equals(tiny, -tiny, 1)
        assert ulps_equals(tiny, -tiny, 2)
        assert ulps_equals(-tiny, tiny, 2)

    def test_opposite_signs_far_apart(self) -> None:
        assert not ulps_equals(1.0, -1.0, 1000)

    @pytest.mark.parametrize("other", [math.nan, 1.0, math.inf])
    def test_nan_never_equal(self, other: float) -> None:
        """NaN не равен ничему, включая NaN"""
        assert not ulps_equals(math.nan, other, 10)
        assert not ulps_equals(other, math.nan, 10)

    def test_infinities(self) -> None:
        assert ulps_equals(math.inf, math.inf)
        assert not ulps_equals(math.inf, -math.inf)


class TestEqualsIncludingNan:
    """Тесты для equals_including_nan"""

    def test_two_nans_equal(self) -> None:
        assert equals_including_nan(math.nan, math.nan)
        assert equals_including_nan(math.nan, -math.nan)

    def test_nan_and_number_not_equal(self) -> None:
        assert not equals_including_nan(math.nan, 1.0)
        assert not equals_including_nan(0.0, math.nan)

    def test_numbers_compare_by_ulps(self) -> None:
        assert equals_including_nan(1.0, math.nextafter(1.0, 2.0))
        assert not equals_including_nan(1.0, 1.1)


# =============================================================================
# EPS / RELATIVE
# =============================================================================


class TestEpsComparison:
    """Тесты для сравнений с eps"""

    def test_equals_eps(self) -> None:
        assert equals_eps(1.0, 1.1, 0.2)
        assert not equals_eps(1.0, 1.5, 0.2)

    def test_equals_including_nan_eps(self) -> None:
        assert equals_including_nan_eps(math.nan, math.nan, 0.0)
        assert equals_including_nan_eps(1.0, 1.05, 0.1)
        assert not equals_including_nan_eps(math.nan, 1.0, 10.0)

    def test_relative_tolerance(self) -> None:
        assert equals_with_relative_tolerance(100.0, 101.0, 0.01)
        assert not equals_with_relative_tolerance(100.0, 102.0, 0.01)
        assert equals_with_relative_tolerance(0.0, -0.0, 0.0)

    def test_compare_to(self) -> None:
        assert compare_to(1.0, 2.0, 0.1) == -1
        assert compare_to(2.0, 1.0, 0.1) == 1
        assert compare_to(1.0, 1.05, 0.1) == 0

    def test_compare_to_ulps(self) -> None:
        assert compare_to_ulps(1.0, 1.0, 0) == 0
        assert compare_to_ulps(1.0, math.nextafter(1.0, 2.0), 1) == 0
        assert compare_to_ulps(1.0, 2.0, 1) == -1
        assert compare_to_ulps(2.0, 1.0, 1) == 1

    def test_representable_delta(self) -> None:
        """Дельта, поглощаемая округлением, обнуляется"""
        assert representable_delta(1.0, 1e-20) == 0.0
        assert representable_delta(1.0, 0.5) == 0.5
