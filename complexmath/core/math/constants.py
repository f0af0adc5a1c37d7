"""
Constants — общие параметры комплексных алгоритмов

Пороги безопасных областей (Hull et al. 1994, Boost), масштабные множители
и математические константы. Значения фиксированы и не конфигурируются в runtime.
"""

import math
from typing import Final

from complexmath.core.math.bits import MAX_VALUE, MIN_NORMAL

# =============================================================================
# МАТЕМАТИЧЕСКИЕ КОНСТАНТЫ
# =============================================================================

PI: Final[float] = math.pi
PI_OVER_2: Final[float] = 0.5 * math.pi
PI_OVER_4: Final[float] = 0.25 * math.pi

# ln(2)
LN_2: Final[float] = math.log(2.0)

# log10(e) / 2
LOG_10E_O_2: Final[float] = math.log10(math.e) / 2

# log10(2)
LOG10_2: Final[float] = math.log10(2.0)

HALF: Final[float] = 0.5
ROOT2: Final[float] = 1.4142135623730951
ONE_OVER_ROOT2: Final[float] = 0.7071067811865476

# 2^-53: (1 + EPSILON) == 1
EPSILON: Final[float] = math.ldexp(1.0, -53)


# =============================================================================
# ОБЛАСТИ БЕЗ ПЕРЕПОЛНЕНИЯ (asin / acos)
# =============================================================================

# Crossover для вещественной части: a > A_CROSSOVER → log вместо log1p
A_CROSSOVER: Final[float] = 10.0

# Crossover для мнимой части: b > B_CROSSOVER → atan вместо asin
B_CROSSOVER: Final[float] = 0.6471

SAFE_MAX: Final[float] = math.sqrt(MAX_VALUE) / 8
SAFE_MIN: Final[float] = math.sqrt(MIN_NORMAL) * 4


# =============================================================================
# ОБЛАСТИ БЕЗ ПЕРЕПОЛНЕНИЯ (atanh, по boost::math::atanh)
# =============================================================================

# x >= SAFE_UPPER: (1 - x) == -x
SAFE_UPPER: Final[float] = math.sqrt(MAX_VALUE) / 2

# x <= SAFE_LOWER: 1 - x^2 == 1
SAFE_LOWER: Final[float] = math.sqrt(MIN_NORMAL) * 2


# =============================================================================
# SQRT / EXP
# =============================================================================

# 2 * (|z| + |x|) не переполняется ниже этого порога
SQRT_SAFE_UPPER: Final[float] = MAX_VALUE / 8

# Наибольший x с конечным e^x (с запасом)
SAFE_EXP: Final[float] = 708.0

# e^SAFE_EXP
EXP_M: Final[float] = math.exp(SAFE_EXP)

TWO_POW_54: Final[float] = math.ldexp(1.0, 54)
TWO_POW_NEG_27: Final[float] = math.ldexp(1.0, -27)
