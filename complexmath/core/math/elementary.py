"""
Elementary — exp, log, sqrt и корни n-й степени

Реализации следуют таблицам специальных значений ISO C99 G.6.3 / G.6.4:
каждая специальная строка реализована отдельной guard-веткой, порядок веток
кодирует приоритет перекрывающихся случаев (NaN vs Inf).

log и log10 разделяют один алгоритм, параметризованный вещественной функцией
логарифма, значением log(e)/2 и log(2).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция не бросает исключений для NaN/Inf входов
2. Вблизи единичной окружности log использует log1p(x^2 + y^2 - 1) / 2
3. sqrt и log масштабируют аргументы вместо переполнения |z|
"""

import math
from typing import Callable

from complexmath.core.math.bits import MAX_VALUE, MIN_NORMAL, is_negative, is_pos_infinite
from complexmath.core.math.constants import (
    HALF,
    LN_2,
    LOG10_2,
    LOG_10E_O_2,
    ONE_OVER_ROOT2,
    PI,
    ROOT2,
    SQRT_SAFE_UPPER,
    TWO_POW_54,
    TWO_POW_NEG_27,
)
from complexmath.core.math.extended_precision import x2y2m1
from complexmath.core.math.hypot import hypot
from complexmath.core.math.numerical_safeguards import (
    safe_cos,
    safe_exp,
    safe_log,
    safe_log1p,
    safe_log10,
    safe_pow,
    safe_sin,
)
from complexmath.core.math.pairs import NAN_PAIR, ComplexPair, PairConstructor, cartesian, in_region

# =============================================================================
# EXP
# =============================================================================


def exp(real: float, imaginary: float) -> ComplexPair:
    """
    Комплексная экспонента e^(x + iy) = e^x (cos y + i sin y).

    Специальные значения C99:
        (±0 + i0)        → (1 + i0)
        (x + i inf)      → (NaN + iNaN), для конечного x
        (x + iNaN)       → (NaN + iNaN), для конечного x
        (+inf + i0)      → (+inf + i0)
        (-inf + iy)      → +0 cis(y), для конечного y
        (+inf + iy)      → +inf cis(y), для конечного ненулевого y
        (-inf + i inf)   → (±0 ± i0), знак сохраняет сопряжённое равенство
        (+inf + i inf)   → (±inf + iNaN)
        (-inf + iNaN)    → (±0 ± i0)
        (+inf + iNaN)    → (±inf + iNaN)
        (NaN + i0)       → (NaN + i0)
        (NaN + iy)       → (NaN + iNaN), для ненулевого y
    """
    if math.isinf(real):
        # Масштаб, применяемый к cis(y)
        if real < 0:
            if not math.isfinite(imaginary):
                return (0.0, math.copysign(0.0, imaginary))
            zero_or_inf = 0.0
        else:
            if imaginary == 0.0:
                return (real, imaginary)
            if not math.isfinite(imaginary):
                return (real, math.nan)
            zero_or_inf = real
        return (zero_or_inf * safe_cos(imaginary), zero_or_inf * safe_sin(imaginary))
    elif math.isnan(real):
        return (real, imaginary) if imaginary == 0.0 else NAN_PAIR
    elif not math.isfinite(imaginary):
        return NAN_PAIR

    # real и imaginary конечны
    exp_real = safe_exp(real)
    if imaginary == 0.0:
        return (exp_real, imaginary)
    return (exp_real * math.cos(imaginary), exp_real * math.sin(imaginary))


# =============================================================================
# LOG
# =============================================================================


def log(
    real: float,
    imaginary: float,
    log_function: Callable[[float], float],
    log_of_e_over_2: float,
    log_of_2: float,
    constructor: PairConstructor = cartesian,
) -> ComplexPair:
    """
    Логарифм комплексного числа в базе, заданной log_function.

    Вещественная часть: log(|z|), мнимая: atan2(y, x).

    Args:
        real: Вещественная часть z
        imaginary: Мнимая часть z
        log_function: Вещественный логарифм (safe_log, safe_log10)
        log_of_e_over_2: log_function(e) / 2
        log_of_2: log_function(2)
        constructor: Конструктор результата

    Returns:
        Пара (log|z|, arg z)
    """
    if math.isnan(real) or math.isnan(imaginary):
        if math.isinf(real) or math.isinf(imaginary):
            return constructor(math.inf, math.nan)
        return NAN_PAIR

    x = abs(real)
    y = abs(imaginary)
    if x < y:
        x, y = y, x

    if x == 0.0:
        # divide-by-zero
        return constructor(
            -math.inf,
            math.copysign(PI, imaginary) if is_negative(real) else imaginary,
        )

    arg = math.atan2(imaginary, real)

    if HALF < x < ROOT2:
        # x^2 + y^2 близко к 1
        re = safe_log1p(x2y2m1(x, y)) * log_of_e_over_2
    else:
        # log(a / b) = log(a) - log(b): начальное значение равно логу масштаба
        re = 0.0
        if x > MAX_VALUE / 2:
            if is_pos_infinite(x):
                return constructor(x, arg)
            x /= 2.0
            y /= 2.0
            re = log_of_2
        elif y < MIN_NORMAL:
            if y == 0.0:
                # Только вещественная часть
                return constructor(log_function(x), arg)
            if x < 1.0:
                # Субнормальные числа: масштаб 2^54 (больше разрядности мантиссы).
                # При x >= 1 hypot точен без масштаба, а x * 2^54 может переполниться
                x *= TWO_POW_54
                y *= TWO_POW_54
                re = -54 * log_of_2
        re += log_function(hypot(x, y))

    return constructor(re, arg)


def log_natural(real: float, imaginary: float) -> ComplexPair:
    """Натуральный логарифм: log(z)."""
    return log(real, imaginary, safe_log, HALF, LN_2)


def log_base10(real: float, imaginary: float) -> ComplexPair:
    """Десятичный логарифм: log10(z)."""
    return log(real, imaginary, safe_log10, LOG_10E_O_2, LOG10_2)


# =============================================================================
# SQRT
# =============================================================================


def sqrt(real: float, imaginary: float) -> ComplexPair:
    """
    Главное значение квадратного корня (Hull et al. 1994, с точным |z|).

    Специальные значения C99:
        (±0 + i0)       → (+0 + i0)
        (x + i inf)     → (+inf + i inf), для любого x включая NaN
        (x + iNaN)      → (NaN + iNaN), для конечного x
        (-inf + iy)     → (+0 + i inf), для конечного положительного y
        (+inf + iy)     → (+inf + i0), для конечного положительного y
        (-inf + iNaN)   → (NaN ± i inf)
        (+inf + iNaN)   → (+inf + iNaN)
        (NaN + iy)      → (NaN + iNaN)
    """
    if math.isnan(real) or math.isnan(imaginary):
        if math.isinf(imaginary):
            return (math.inf, imaginary)
        if math.isinf(real):
            if real == -math.inf:
                return (math.nan, math.copysign(math.inf, imaginary))
            return (math.inf, math.nan)
        return NAN_PAIR

    # Вычисления с модулями, знак определяется в конце
    x = abs(real)
    y = abs(imaginary)

    # Переполнение 2 * (|z| + |x|) или субнормальные компоненты
    if in_region(x, y, MIN_NORMAL, SQRT_SAFE_UPPER):
        t = math.sqrt(2 * (hypot(x, y) + x))
    else:
        if is_pos_infinite(y):
            return (math.inf, imaginary)
        elif is_pos_infinite(x):
            if real == -math.inf:
                return (0.0, math.copysign(math.inf, imaginary))
            return (math.inf, math.copysign(0.0, imaginary))
        elif y == 0.0:
            # Только вещественная часть
            sqrt_abs = math.sqrt(x)
            if real < 0:
                return (0.0, math.copysign(sqrt_abs, imaginary))
            return (sqrt_abs, imaginary)
        elif x == 0.0:
            # Только мнимая часть: обе компоненты одинаковой величины.
            # Полярная форма даёт cos(pi/4) != sin(pi/4) на 1 ulp
            sqrt_abs = math.sqrt(y) * ONE_OVER_ROOT2
            return (sqrt_abs, math.copysign(sqrt_abs, imaginary))
        else:
            # Масштаб является чётной степенью двойки: sqrt(b) = sqrt(b / 4) * sqrt(4)
            if max(x, y) > SQRT_SAFE_UPPER:
                sx = x / 16
                sy = y / 16
                rescale = 4.0
            elif max(x, y) < 1.0:
                # Субнормальные: 2^54, обратный масштаб sqrt(2^54) = 2^27
                sx = x * TWO_POW_54
                sy = y * TWO_POW_54
                rescale = TWO_POW_NEG_27
            else:
                # Субнормальный партнёр большой компоненты: ниже SQRT_SAFE_UPPER
                # 2 * (|z| + x) не переполняется
                sx = x
                sy = y
                rescale = 1.0
            t = rescale * math.sqrt(2 * (hypot(sx, sy) + sx))

    if real >= 0:
        return (t / 2, imaginary / t)
    return (y / t, math.copysign(t / 2, imaginary))


# =============================================================================
# КОРНИ N-Й СТЕПЕНИ
# =============================================================================


def nth_root(real: float, imaginary: float, n: int) -> list[ComplexPair]:
    """
    Все n корней n-й степени: |z|^(1/n) cis(arg/n + 2πk/n), k = 0..|n|-1.

    Для отрицательного n возвращаются |n| корней степени 1/n.

    Args:
        real: Вещественная часть z
        imaginary: Мнимая часть z
        n: Степень корня (n != 0, проверяется вызывающей стороной)

    Returns:
        Список |n| пар
    """
    nth_root_of_abs = safe_pow(hypot(real, imaginary), 1.0 / n)
    nth_phi = math.atan2(imaginary, real) / n
    slice_angle = 2 * math.pi / n

    result: list[ComplexPair] = []
    inner_part = nth_phi
    for _ in range(abs(n)):
        result.append(
            (nth_root_of_abs * safe_cos(inner_part), nth_root_of_abs * safe_sin(inner_part))
        )
        inner_part += slice_angle
    return result


def polar(rho: float, theta: float) -> ComplexPair:
    """
    Пара из полярных координат (rho, theta).

    Returns:
        NaN пара для неконечного theta, отрицательного (включая -0.0) или NaN rho
    """
    if not math.isfinite(theta) or is_negative(rho) or math.isnan(rho):
        return NAN_PAIR
    return (rho * math.cos(theta), rho * math.sin(theta))


def cis(x: float) -> ComplexPair:
    """cis(x) = cos(x) + i sin(x); NaN пара для бесконечного x."""
    return (safe_cos(x), safe_sin(x))


__all__ = [
    "cis",
    "exp",
    "log",
    "log_base10",
    "log_natural",
    "nth_root",
    "polar",
    "sqrt",
]
