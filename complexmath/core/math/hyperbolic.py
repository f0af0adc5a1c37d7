"""
Hyperbolic — sinh, cosh, tanh комплексного аргумента

Тригонометрические функции выражаются через гиперболические:
    sin(z) = -i sinh(iz)
    cos(z) = cosh(iz)
    tan(z) = -i tanh(iz)
поэтому вызывающая сторона передаёт (-im, re) и конструктор multiply_negative_i.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. sinh нечётна, cosh чётна, tanh нечётна (ISO C99 G.6.2)
2. Сопряжённое равенство: f(conj(z)) == conj(f(z))
3. При |x| > SAFE_EXP sinh/cosh аппроксимируются e^|x| / 2 с поэтапным
   умножением: результат конечен, если sin/cos(y) достаточно малы
"""

import math

from complexmath.core.math.bits import MAX_VALUE, is_pos_finite, is_pos_infinite
from complexmath.core.math.constants import EXP_M, PI_OVER_2, SAFE_EXP
from complexmath.core.math.numerical_safeguards import (
    safe_cos,
    safe_cosh,
    safe_exp,
    safe_sin,
    safe_sinh,
    safe_tan,
)
from complexmath.core.math.pairs import ComplexPair, PairConstructor, change_sign

# =============================================================================
# SINH / COSH
# =============================================================================


def sinh(real: float, imaginary: float, constructor: PairConstructor) -> ComplexPair:
    """
    Гиперболический синус: sinh(x + iy) = sinh(x) cos(y) + i cosh(x) sin(y).

    Специальные значения C99:
        (+0 + i0)       → (+0 + i0)
        (+0 + i inf)    → (±0 + iNaN)
        (+inf + i0)     → (+inf + i0)
        (+inf + iy)     → +inf cis(y), для положительного конечного y
        (+inf + i inf)  → (±inf + iNaN)
        (NaN + i0)      → (NaN + i0)
    """
    if math.isinf(real) and not math.isfinite(imaginary):
        return constructor(real, math.nan)
    if real == 0.0:
        # sinh(iy) = i sin(y)
        if math.isfinite(imaginary):
            # sinh(±0) * cos(y) = ±0 * cos(y): знак периодичен по y
            return constructor(change_sign(real, math.cos(imaginary)), math.sin(imaginary))
        # Знак вещественной части не специфицирован: сохраняем сопряжённое равенство
        return constructor(real, math.nan)
    if imaginary == 0.0:
        return constructor(safe_sinh(real), imaginary)

    x = abs(real)
    if x > SAFE_EXP:
        return coshsinh(x, real, imaginary, True, constructor)
    return constructor(
        safe_sinh(real) * safe_cos(imaginary),
        safe_cosh(real) * safe_sin(imaginary),
    )


def cosh(real: float, imaginary: float, constructor: PairConstructor) -> ComplexPair:
    """
    Гиперболический косинус: cosh(x + iy) = cosh(x) cos(y) + i sinh(x) sin(y).

    Чётность f(z) = f(-z) сохраняется отображением в положительную полуплоскость.
    """
    if math.isinf(real) and not math.isfinite(imaginary):
        return constructor(abs(real), math.nan)
    if real == 0.0:
        # cosh(iy) = cos(y)
        if math.isfinite(imaginary):
            return constructor(math.cos(imaginary), change_sign(real, math.sin(imaginary)))
        return constructor(math.nan, change_sign(real, imaginary))
    if imaginary == 0.0:
        # sin(±0) * sinh(±x): знак мнимой части по знаку real
        return constructor(safe_cosh(real), change_sign(imaginary, real))

    x = abs(real)
    if x > SAFE_EXP:
        return coshsinh(x, real, imaginary, False, constructor)
    return constructor(
        safe_cosh(real) * safe_cos(imaginary),
        safe_sinh(real) * safe_sin(imaginary),
    )


def coshsinh(
    x: float,
    real: float,
    imaginary: float,
    is_sinh: bool,
    constructor: PairConstructor,
) -> ComplexPair:
    """
    sinh/cosh для |real| > SAFE_EXP: sinh(x) ≈ sign(x) e^|x| / 2, cosh(x) ≈ e^|x| / 2.

    e^|x| / 2 = (e^m / 2) * e^m * e^(x - 2m): умножение по частям даёт конечный
    результат, когда e^x переполняется, а sin/cos(y) очень малы.

    Args:
        x: |real|
        real: Вещественная часть (знак)
        imaginary: Мнимая часть
        is_sinh: True для sinh, False для cosh
        constructor: Конструктор результата
    """
    re = safe_cos(imaginary)
    im = safe_sin(imaginary)
    if is_sinh:
        re = change_sign(re, real)
    else:
        im = change_sign(im, real)

    if x > SAFE_EXP * 3:
        # e^x > e^m * e^m * e^m: переполнение даже от MIN_VALUE.
        # Не умножаем на +inf: sin(y) == 0.0 дал бы 0 * inf = NaN
        re *= MAX_VALUE * MAX_VALUE * MAX_VALUE
        im *= MAX_VALUE * MAX_VALUE * MAX_VALUE
    else:
        re *= EXP_M / 2
        im *= EXP_M / 2
        if x > SAFE_EXP * 2:
            # e^x = e^m * e^m * e^(x - 2m)
            re *= EXP_M
            im *= EXP_M
            xm = x - SAFE_EXP * 2
        else:
            # e^x = e^m * e^(x - m)
            xm = x - SAFE_EXP
        exp_xm = safe_exp(xm)
        re *= exp_xm
        im *= exp_xm
    return constructor(re, im)


# =============================================================================
# TANH
# =============================================================================


def tanh(real: float, imaginary: float, constructor: PairConstructor) -> ComplexPair:
    """
    Гиперболический тангенс через тождество без удвоенных углов:

        tanh(x + iy) = (sinh(x)cosh(x) + i sin(y)cos(y)) / (sinh^2(x) + cos^2(y))

    Специальные значения C99:
        (+0 + i0)       → (+0 + i0)
        (0 + i inf)     → (0 + iNaN)
        (x + i inf)     → (NaN + iNaN), для ненулевого x
        (+inf + iy)     → (1 + i0 sin(2y)), для положительного конечного y
        (+inf + i inf)  → (1 ± i0)
        (NaN + i0)      → (NaN + i0)
    """
    x = abs(real)

    if not is_pos_finite(x) or not math.isfinite(imaginary):
        if is_pos_infinite(x):
            if math.isfinite(imaginary):
                # Знак из sin(2y) = 2 sin(y) cos(y); при малом |y| sign(sin(2y)) = sign(y)
                if abs(imaginary) < PI_OVER_2:
                    sign = imaginary
                else:
                    sign = math.sin(imaginary) * math.cos(imaginary)
                return constructor(math.copysign(1.0, real), math.copysign(0.0, sign))
            # imaginary бесконечна или NaN
            return constructor(math.copysign(1.0, real), math.copysign(0.0, imaginary))
        return constructor(
            real if real == 0.0 else math.nan,
            imaginary if imaginary == 0.0 else math.nan,
        )

    # Конечные компоненты
    if real == 0.0:
        # tanh(iy) = i tan(y)
        return constructor(real, safe_tan(imaginary))
    if imaginary == 0.0:
        return constructor(math.tanh(real), imaginary)

    if x > SAFE_EXP / 2:
        # sinh/cosh(2x) переполняются: real = ±1,
        # imag = 4 sin(y) cos(y) / e^2|x| с делением по частям
        re = math.copysign(1.0, real)
        im = math.sin(imaginary) * math.cos(imaginary)
        if x > SAFE_EXP:
            # 2.0 / e^m / e^m даёт антипереполнение
            im = math.copysign(0.0, im)
        else:
            im = 4 * im / EXP_M / math.exp(2 * x - SAFE_EXP)
        return constructor(re, im)

    sinhx = math.sinh(real)
    coshx = math.cosh(real)
    siny = math.sin(imaginary)
    cosy = math.cos(imaginary)
    divisor = sinhx * sinhx + cosy * cosy
    return constructor(sinhx * coshx / divisor, siny * cosy / divisor)
