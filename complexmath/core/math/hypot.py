"""
Hypot — sqrt(x^2 + y^2) без промежуточного переполнения/антипереполнения

Специализированная версия fdlibm hypot:
1. Порядок |a| >= |b| определяется по всем 63 битам модуля (не только по
   старшим 32), поэтому hypot(x, y) == hypot(y, x) даже для субнормальных чисел
2. Масштабирование умножением на 2^±600 вместо записи битов экспоненты;
   Dekker split работает и для субнормальных чисел
3. Масштабирование либо вниз, либо вверх, но не оба сразу
4. Порог пренебрежения меньшим компонентом — разница экспонент 54

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. hypot(inf, NaN) == hypot(NaN, inf) == +inf
2. Результат не зависит от знаков аргументов
3. Ошибка < 1 ulp
"""

import math
from typing import Final

from complexmath.core.math.bits import UNSIGN_MASK, double_bits
from complexmath.core.math.extended_precision import x2y2

# =============================================================================
# ПОРОГИ (старшие 32 бита модуля double)
# =============================================================================

# Разница экспонент 54: b^2 не перекрывается с a^2 двойной длины
EXP_54: Final[int] = 0x0360_0000

# 2^500
EXP_500: Final[int] = 0x5F30_0000

# 2^1024: inf или NaN
EXP_1024: Final[int] = 0x7FF0_0000

# 2^-500
EXP_NEG_500: Final[int] = 0x20B0_0000

TWO_POW_600: Final[float] = math.ldexp(1.0, 600)
TWO_POW_NEG_600: Final[float] = math.ldexp(1.0, -600)


# =============================================================================
# HYPOT
# =============================================================================


def hypot(x: float, y: float) -> float:
    """
    Модуль вектора (x, y): sqrt(x^2 + y^2).

    Args:
        x: Первая компонента (любой float)
        y: Вторая компонента (любой float)

    Returns:
        |(x, y)| с ошибкой < 1 ulp; +inf если любая компонента бесконечна

    Examples:
        >>> hypot(3.0, 4.0)
        5.0
        >>> hypot(float("inf"), float("nan"))
        inf
    """
    xbits = double_bits(x) & UNSIGN_MASK
    ybits = double_bits(y) & UNSIGN_MASK

    # Упорядочивание по модулю: |a| >= |b|
    if ybits > xbits:
        a, b = y, x
        ha = ybits >> 32
        hb = xbits >> 32
    else:
        a, b = x, y
        ha = xbits >> 32
        hb = ybits >> 32

    # a/b > 2^54 (или a равно inf/NaN): b не влияет на результат
    if ha - hb > EXP_54:
        return abs(a)

    rescale = 1.0
    if ha > EXP_500:
        # a > 2^500
        if ha >= EXP_1024:
            # inf или NaN: проверяем бесконечность b для результата IEEE754
            return math.inf if abs(b) == math.inf else abs(a)
        # Было: a in [2^500, 2^1023]. Стало: a in [2^-100, 2^423]
        a *= TWO_POW_NEG_600
        b *= TWO_POW_NEG_600
        rescale = TWO_POW_600
    elif hb < EXP_NEG_500:
        if b == 0.0:
            return abs(a)
        # Было: b in [2^-1074, 2^-501]. Стало: b in [2^-474, 2^99]
        a *= TWO_POW_600
        b *= TWO_POW_600
        rescale = TWO_POW_NEG_600

    return math.sqrt(x2y2(a, b)) * rescale
