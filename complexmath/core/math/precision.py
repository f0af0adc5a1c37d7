"""
Precision — сравнение float с допуском в ulps и eps

Сравнение по ulps (units in the last place): два значения равны, если между
ними не более max_ulps представимых double. +0.0 и -0.0 разделены нулём ulps.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. ulps_equals(NaN, x) == False для любого x, включая NaN
2. equals_including_nan(NaN, NaN) == True
3. Сравнение симметрично: f(x, y) == f(y, x)
"""

import math
from typing import Final

from complexmath.core.math.bits import SIGN_MASK, signed_bits

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Допуск по умолчанию: соседние double равны
DEFAULT_MAX_ULPS: Final[int] = 1

# Знаковые битовые шаблоны нулей
POSITIVE_ZERO_BITS: Final[int] = signed_bits(0.0)
NEGATIVE_ZERO_BITS: Final[int] = signed_bits(-0.0)


# =============================================================================
# СРАВНЕНИЕ ПО ULPS
# =============================================================================


def ulps_equals(x: float, y: float, max_ulps: int = DEFAULT_MAX_ULPS) -> bool:
    """
    True если x и y отличаются не более чем на max_ulps представимых значений.

    Args:
        x: Первое значение
        y: Второе значение
        max_ulps: Допустимое число ulps между значениями (>= 0)

    Returns:
        False если любое значение NaN

    Examples:
        >>> ulps_equals(1.0, math.nextafter(1.0, 2.0))
        True
        >>> ulps_equals(0.0, -0.0, 0)
        True
    """
    x_bits = signed_bits(x)
    y_bits = signed_bits(y)

    if (x_bits ^ y_bits) & SIGN_MASK == 0:
        # Одинаковый знак: расстояние равно разности шаблонов
        is_equal = abs(x_bits - y_bits) <= max_ulps
    else:
        # Разные знаки: расстояние через ноль
        if x_bits < y_bits:
            delta_plus = y_bits - POSITIVE_ZERO_BITS
            delta_minus = x_bits - NEGATIVE_ZERO_BITS
        else:
            delta_plus = x_bits - POSITIVE_ZERO_BITS
            delta_minus = y_bits - NEGATIVE_ZERO_BITS
        if delta_plus > max_ulps:
            is_equal = False
        else:
            is_equal = delta_minus <= max_ulps - delta_plus

    return is_equal and not math.isnan(x) and not math.isnan(y)


def equals_including_nan(x: float, y: float, max_ulps: int = DEFAULT_MAX_ULPS) -> bool:
    """Как ulps_equals, но два NaN равны; NaN и число не равны."""
    x_is_nan = math.isnan(x)
    y_is_nan = math.isnan(y)
    if x_is_nan or y_is_nan:
        return x_is_nan and y_is_nan
    return ulps_equals(x, y, max_ulps)


# =============================================================================
# СРАВНЕНИЕ ПО EPS
# =============================================================================


def equals_eps(x: float, y: float, eps: float) -> bool:
    """True если x и y равны в пределах 1 ulp или |y - x| <= eps."""
    return ulps_equals(x, y, 1) or abs(y - x) <= eps


def equals_including_nan_eps(x: float, y: float, eps: float) -> bool:
    """Как equals_eps, но два NaN равны."""
    return equals_including_nan(x, y) or abs(y - x) <= eps


def equals_with_relative_tolerance(x: float, y: float, eps: float) -> bool:
    """
    True если относительная разность |x - y| / max(|x|, |y|) не больше eps.

    Значения в пределах 1 ulp равны всегда (в т.ч. два нуля).
    """
    if ulps_equals(x, y, 1):
        return True
    absolute_max = max(abs(x), abs(y))
    relative_difference = abs((x - y) / absolute_max)
    return relative_difference <= eps


# =============================================================================
# УПОРЯДОЧИВАНИЕ
# =============================================================================


def compare_to(x: float, y: float, eps: float) -> int:
    """
    Сравнение с допуском eps.

    Returns:
        0 если значения равны по equals_eps, -1 если x < y, иначе 1
    """
    if equals_eps(x, y, eps):
        return 0
    elif x < y:
        return -1
    return 1


def compare_to_ulps(x: float, y: float, max_ulps: int) -> int:
    """Сравнение с допуском max_ulps: 0, -1 или 1."""
    if ulps_equals(x, y, max_ulps):
        return 0
    elif x < y:
        return -1
    return 1


def representable_delta(x: float, original_delta: float) -> float:
    """
    Ближайшее к original_delta значение delta, для которого x + delta точно
    представимо: (x + delta) - x.
    """
    return x + original_delta - x
