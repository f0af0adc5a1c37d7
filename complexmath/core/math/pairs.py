"""
Pairs — представление комплексного результата парой float

Алгоритмы комплексных функций работают с парой (real, imaginary) и принимают
"конструктор" результата — чистую функцию, отображающую пару алгоритма в
итоговую пару. Это позволяет одной реализации sinh обслуживать sin
(умножение на -i) и одной реализации asin обслуживать asinh.
"""

import math
from typing import Callable, Final

from complexmath.core.math.bits import is_negative

# =============================================================================
# ТИПЫ
# =============================================================================

ComplexPair = tuple[float, float]
PairConstructor = Callable[[float, float], ComplexPair]

# Сентинел (NaN, NaN): возвращается специальными ветками без вызова конструктора
NAN_PAIR: Final[ComplexPair] = (math.nan, math.nan)


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def cartesian(real: float, imaginary: float) -> ComplexPair:
    """Тождественный конструктор: (real, imaginary)."""
    return (real, imaginary)


def multiply_negative_i(real: float, imaginary: float) -> ComplexPair:
    """Умножение на -i: (real + i imaginary) * -i = imaginary - i real."""
    return (imaginary, -real)


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def change_sign(magnitude: float, signed_value: float) -> float:
    """
    Присвоить magnitude знак signed_value.

    В отличие от math.copysign знак NaN игнорируется: NaN считается
    неотрицательным, -0.0 — отрицательным.
    """
    if is_negative(signed_value):
        return -magnitude
    return magnitude


def in_region(x: float, y: float, min_value: float, max_value: float) -> bool:
    """True если обе компоненты строго внутри (min_value, max_value)."""
    return min_value < x < max_value and min_value < y < max_value
