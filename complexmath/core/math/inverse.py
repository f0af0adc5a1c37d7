"""
Inverse — asin, acos, atanh комплексного аргумента

Алгоритм Hull, Fairgrieve, Tang (1997) "Implementing the complex arcsine and
arccosine functions using exception handling" с уточнениями из boost::math.

Обратные функции выражаются друг через друга:
    asinh(z) = -i asin(iz)
    atan(z)  = -i atanh(iz)
    acosh(z) = ±i acos(z), знак выбирает конструктор

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вычисления ведутся с |x|, |y|; знаки результата восстанавливаются в конце
2. Внутри безопасной области формулы не переполняются; за её пределами
   используются асимптотические ветки
3. NaN результат без конструктора возвращается как (NaN, NaN)
"""

import math

from complexmath.core.math.bits import MAX_VALUE, is_negative, is_pos_infinite
from complexmath.core.math.constants import (
    A_CROSSOVER,
    B_CROSSOVER,
    EPSILON,
    LN_2,
    PI,
    PI_OVER_2,
    PI_OVER_4,
    SAFE_LOWER,
    SAFE_MAX,
    SAFE_MIN,
    SAFE_UPPER,
)
from complexmath.core.math.extended_precision import x2y2m1
from complexmath.core.math.numerical_safeguards import safe_acos, safe_asin, safe_log, safe_log1p
from complexmath.core.math.pairs import NAN_PAIR, ComplexPair, PairConstructor, change_sign, in_region

# =============================================================================
# ОБЩАЯ ЧАСТЬ HULL ET AL.
# =============================================================================


def _imaginary_part(x: float, a: float, yy: float, r: float, s: float) -> float:
    """log(a + sqrt(a^2 - 1)) с log1p вблизи a = 1."""
    xp1 = x + 1
    xm1 = x - 1
    if a <= A_CROSSOVER:
        if x < 1:
            am1 = 0.5 * (yy / (r + xp1) + yy / (s - xm1))
        else:
            am1 = 0.5 * (yy / (r + xp1) + (s + xm1))
        return safe_log1p(am1 + math.sqrt(am1 * (a + 1)))
    return safe_log(a + math.sqrt(a * a - 1))


# =============================================================================
# ASIN
# =============================================================================


def asin(real: float, imaginary: float, constructor: PairConstructor) -> ComplexPair:
    """
    Арксинус (Hull et al., figure 4).

    Специальные значения (через asinh, C99 G.6.2.2):
        (NaN + i inf)   → (NaN ± i inf)
        (0 + iNaN)      → (0 + iNaN)
        (inf + iNaN)    → (NaN ± i inf)
        (inf + iy)      → (π/2 + i inf), для конечного y
        (inf + i inf)   → (π/4 + i inf)
        (x + i inf)     → (0 + i inf), для конечного x
    """
    x = abs(real)
    y = abs(imaginary)

    if math.isnan(x):
        if is_pos_infinite(y):
            re = x
            im = y
        else:
            return NAN_PAIR
    elif math.isnan(y):
        if x == 0.0:
            re = 0.0
            im = y
        elif is_pos_infinite(x):
            re = y
            im = x
        else:
            return NAN_PAIR
    elif is_pos_infinite(x):
        re = PI_OVER_4 if is_pos_infinite(y) else PI_OVER_2
        im = x
    elif is_pos_infinite(y):
        re = 0.0
        im = y
    else:
        # Вещественное число внутри [-1, 1]
        if y == 0.0 and x <= 1:
            return constructor(safe_asin(real), imaginary)

        xp1 = x + 1
        xm1 = x - 1

        if in_region(x, y, SAFE_MIN, SAFE_MAX):
            yy = y * y
            r = math.sqrt(xp1 * xp1 + yy)
            s = math.sqrt(xm1 * xm1 + yy)
            a = 0.5 * (r + s)
            b = x / a

            if b <= B_CROSSOVER:
                re = safe_asin(b)
            else:
                apx = a + x
                if x <= 1:
                    re = math.atan(x / math.sqrt(0.5 * apx * (yy / (r + xp1) + (s - xm1))))
                else:
                    re = math.atan(
                        x / (y * math.sqrt(0.5 * (apx / (r + xp1) + apx / (s + xm1))))
                    )
            im = _imaginary_part(x, a, yy, r, s)
        else:
            # Hull et al: обработка исключительных областей (figure 4)
            if y <= EPSILON * abs(xm1):
                if x < 1:
                    re = safe_asin(x)
                    im = y / math.sqrt(xp1 * (1 - x))
                else:
                    re = PI_OVER_2
                    if MAX_VALUE / xp1 > xm1:
                        # xp1 * xm1 не переполняется
                        im = safe_log1p(xm1 + math.sqrt(xp1 * xm1))
                    else:
                        im = LN_2 + safe_log(x)
            elif y <= SAFE_MIN:
                # Hull et al: x == 1
                re = PI_OVER_2 - math.sqrt(y)
                im = math.sqrt(y)
            elif EPSILON * y - 1 >= x:
                # Возможно антипереполнение
                re = x / y
                im = LN_2 + safe_log(y)
            elif x > 1:
                re = math.atan(x / y)
                xoy = x / y
                im = LN_2 + safe_log(y) + 0.5 * safe_log1p(xoy * xoy)
            else:
                a = math.sqrt(1 + y * y)
                # Возможно антипереполнение
                re = x / a
                im = 0.5 * safe_log1p(2 * y * (y + a))

    return constructor(change_sign(re, real), change_sign(im, imaginary))


# =============================================================================
# ACOS
# =============================================================================


def acos(real: float, imaginary: float, constructor: PairConstructor) -> ComplexPair:
    """
    Арккосинус (Hull et al., figure 6).

    Специальные значения C99 G.6.1.1:
        (±0 + i0)       → (π/2 - i0)
        (±0 + iNaN)     → (π/2 + iNaN)
        (x + i inf)     → (π/2 - i inf), для конечного x
        (-inf + iy)     → (π - i inf), для положительного конечного y
        (+inf + iy)     → (+0 - i inf), для положительного конечного y
        (-inf + i inf)  → (3π/4 - i inf)
        (+inf + i inf)  → (π/4 - i inf)
        (±inf + iNaN)   → (NaN ± i inf)
        (NaN + i inf)   → (NaN - i inf)
    """
    x = abs(real)
    y = abs(imaginary)

    if is_pos_infinite(x):
        if is_pos_infinite(y):
            re = PI_OVER_4
            im = y
        elif math.isnan(y):
            # Знак мнимой части не специфицирован
            return constructor(imaginary, real)
        else:
            re = 0.0
            im = math.inf
    elif math.isnan(x):
        if is_pos_infinite(y):
            return constructor(x, -imaginary)
        return NAN_PAIR
    elif is_pos_infinite(y):
        re = PI_OVER_2
        im = y
    elif math.isnan(y):
        return constructor(PI_OVER_2 if x == 0.0 else y, y)
    else:
        # Вещественное число внутри [-1, 1]
        if y == 0.0 and x <= 1:
            return constructor(PI_OVER_2 if x == 0.0 else safe_acos(real), -imaginary)

        xp1 = x + 1
        xm1 = x - 1

        if in_region(x, y, SAFE_MIN, SAFE_MAX):
            yy = y * y
            r = math.sqrt(xp1 * xp1 + yy)
            s = math.sqrt(xm1 * xm1 + yy)
            a = 0.5 * (r + s)
            b = x / a

            if b <= B_CROSSOVER:
                re = safe_acos(b)
            else:
                apx = a + x
                if x <= 1:
                    re = math.atan(math.sqrt(0.5 * apx * (yy / (r + xp1) + (s - xm1))) / x)
                else:
                    re = math.atan(
                        y * math.sqrt(0.5 * (apx / (r + xp1) + apx / (s + xm1))) / x
                    )
            im = _imaginary_part(x, a, yy, r, s)
        else:
            # Hull et al: обработка исключительных областей (figure 6)
            if y <= EPSILON * abs(xm1):
                if x < 1:
                    re = safe_acos(x)
                    im = y / math.sqrt(xp1 * (1 - x))
                elif MAX_VALUE / xp1 > xm1:
                    # Отклонение от Hull et al. по boost ticket 7290
                    re = y / math.sqrt(xm1 * xp1)
                    im = safe_log1p(xm1 + math.sqrt(xp1 * xm1))
                else:
                    re = y / x
                    im = LN_2 + safe_log(x)
            elif y <= SAFE_MIN:
                # Hull et al: x == 1
                re = math.sqrt(y)
                im = math.sqrt(y)
            elif EPSILON * y - 1 >= x:
                re = PI_OVER_2
                im = LN_2 + safe_log(y)
            elif x > 1:
                re = math.atan(y / x)
                xoy = x / y
                im = LN_2 + safe_log(y) + 0.5 * safe_log1p(xoy * xoy)
            else:
                re = PI_OVER_2
                a = math.sqrt(1 + y * y)
                im = 0.5 * safe_log1p(2 * y * (y + a))

    return constructor(
        PI - re if is_negative(real) else re,
        im if is_negative(imaginary) else -im,
    )


# =============================================================================
# ATANH
# =============================================================================


def atanh(real: float, imaginary: float, constructor: PairConstructor) -> ComplexPair:
    """
    Гиперболический арктангенс (по boost::math::atanh).

        real(atanh(z)) = log1p(4x / ((1 - x)^2 + y^2)) / 4
        imag(atanh(z)) = atan2(2y, (1 - x)(1 + x) - y^2) / 2

    Специальные значения C99 G.6.2.3:
        (+0 + i0)       → (+0 + i0)
        (+0 + iNaN)     → (+0 + iNaN)
        (+1 + i0)       → (+inf + i0)
        (x + i inf)     → (+0 + iπ/2), для конечного положительного x
        (+inf + iy)     → (+0 + iπ/2), для конечного положительного y
        (+inf + iNaN)   → (+0 + iNaN)
        (NaN + i inf)   → (±0 + iπ/2)
    """
    x = abs(real)
    y = abs(imaginary)

    if math.isnan(x):
        if is_pos_infinite(y):
            # Знак вещественной части не специфицирован
            return constructor(0.0, math.copysign(PI_OVER_2, imaginary))
        return NAN_PAIR
    elif math.isnan(y):
        if is_pos_infinite(x):
            return constructor(math.copysign(0.0, real), math.nan)
        if x == 0.0:
            return constructor(real, math.nan)
        return NAN_PAIR

    # x и y конечны или бесконечны
    if in_region(x, y, SAFE_LOWER, SAFE_UPPER):
        mxp1 = 1 - x
        yy = y * y
        re = safe_log1p(4 * x / (mxp1 * mxp1 + yy))

        # Знаменатель atan2: 1 - x^2 - y^2, точнее при |x| >= |y|
        numerator = 2 * y
        if x < y:
            x, y = y, x
        if x >= 1:
            # 1 - x точно при |x| >= 1
            denominator = (1 - x) * (1 + x) - y * y
        else:
            denominator = -x2y2m1(x, y)
        im = math.atan2(numerator, denominator)
    else:
        if x == 0.0:
            # atanh(iy) = i atan(y)
            if imaginary == 0.0:
                return constructor(real, imaginary)
            return constructor(real, math.atan(imaginary))

        # Вещественная часть без переполнения квадратов
        if x >= SAFE_UPPER:
            # (1 - x) == -x: log1p(4x / (x^2 + y^2))
            if is_pos_infinite(x) or is_pos_infinite(y):
                re = 0.0
            elif y >= SAFE_UPPER:
                re = safe_log1p(4 / y / (x / y + y / x))
            elif y > 1:
                re = safe_log1p(4 / (x + y * y / x))
            else:
                re = safe_log1p(4 / x)
        elif y >= SAFE_UPPER:
            if x > 1:
                mxp1 = 1 - x
                re = safe_log1p(4 * x / y / (mxp1 * mxp1 / y + y))
            else:
                # log1p(v) ≈ v для малого v
                re = 4 * x / y / y
        elif x == 1.0:
            # log(2) / 2 - log(y) / 2, умноженное на 2 (деление на 4 в конце).
            # y == 0: divide-by-zero, результат +inf
            re = 2 * (LN_2 - safe_log(y))
        else:
            mxp1 = 1 - x
            re = safe_log1p(4 * x / (mxp1 * mxp1 + y * y))

        # Мнимая часть: atan2(2y, (1 - x)(1 + x) - y^2)
        if x >= SAFE_UPPER or y >= SAFE_UPPER:
            im = PI
        elif x <= SAFE_LOWER:
            if y <= SAFE_LOWER:
                im = math.atan2(2 * y, 1.0)
            else:
                im = math.atan2(2 * y, 1 - y * y)
        else:
            im = math.atan2(2 * y, (1 - x) * (1 + x))

    re /= 4.0
    im /= 2.0
    return constructor(change_sign(re, real), change_sign(im, imaginary))
