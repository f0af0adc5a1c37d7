"""
Arithmetic — комплексное умножение и деление по ISO C99 G.5.1

Умножение: (a + ib)(c + id) = (ac - bd) + i(ad + bc)
Деление:   (a + ib)/(c + id) = ((ac + bd) + i(bc - ad)) / (c^2 + d^2)

Если наивный результат (NaN, NaN), выполняется процедура восстановления:
"маскированные" бесконечности и нули, вычисленные как NaN, заменяются
математически корректным результатом.

Отличия от листинга C99:
- Умножение: бесконечность на ноль не корректируется (остаётся NaN)
- Деление: делитель масштабируется в [1, 2) по точной экспоненте (с учётом
  субнормальных чисел); делимое делится на 4 при угрозе переполнения ac + bd
"""

import math

from complexmath.core.math.bits import (
    EXPONENT_OFFSET,
    MANTISSA_MASK,
    MAX_EXPONENT,
    MIN_EXPONENT,
    UNSIGN_MASK,
    count_leading_zeros,
    double_bits,
    get_exponent,
    scalb,
)
from complexmath.core.math.numerical_safeguards import safe_divide
from complexmath.core.math.pairs import ComplexPair

# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ ВОССТАНОВЛЕНИЯ
# =============================================================================


def box_infinity(component: float) -> float:
    """"Упаковать" бесконечность: ±1 для ±inf, иначе ±0 (знак сохраняется)."""
    return math.copysign(1.0 if math.isinf(component) else 0.0, component)


def is_not_zero(real: float, imaginary: float) -> bool:
    """
    True если комплексное число не равно нулю.

    NaN компоненты считаются ненулевыми: проверка !(re == 0 && im == 0),
    а не (re != 0 || im != 0).
    """
    return not (real == 0.0 and imaginary == 0.0)


def change_nan_to_zero(value: float) -> float:
    """Заменить NaN на 0.0 с сохранением знакового бита."""
    if math.isnan(value):
        return math.copysign(0.0, value)
    return value


def get_scale(a: float, b: float) -> int:
    """
    Экспонента для масштабирования max(|a|, |b|) в диапазон [1, 2).

    Учитывает субнормальные числа по числу ведущих нулей мантиссы.

    Returns:
        Несмещённая экспонента; MAX_EXPONENT + 1 для нуля (масштабирование
        невозможно), а также для inf/NaN
    """
    x = double_bits(a) & UNSIGN_MASK
    y = double_bits(b) & UNSIGN_MASK
    bits = max(x, y)
    exp = (bits >> 52) - EXPONENT_OFFSET

    if exp == MIN_EXPONENT - 1:
        if bits == 0:
            return MAX_EXPONENT + 1
        # Сдвиг старшего бита мантиссы до позиции 53 нормализованного числа
        mantissa = bits & MANTISSA_MASK
        exp -= count_leading_zeros(mantissa << 12)
    return exp


def get_max_exponent(a: float, b: float) -> int:
    """Максимальная несмещённая экспонента двух значений."""
    return max(get_exponent(a), get_exponent(b))


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply(re1: float, im1: float, re2: float, im2: float) -> ComplexPair:
    """
    Произведение (re1 + i im1) * (re2 + i im2).

    NaN возникает если:
    - любая компонента NaN (NaN или бесконечное комплексное число)
    - бесконечность умножается на ноль в частичных произведениях
    - inf - inf при сложении частичных произведений (в т.ч. после переполнения)

    Returns:
        Пара (real, imaginary) с восстановлением бесконечностей по C99 G.5.1
    """
    a, b, c, d = re1, im1, re2, im2
    ac = a * c
    bd = b * d
    ad = a * d
    bc = b * c
    x = ac - bd
    y = ad + bc

    if math.isnan(x) and math.isnan(y):
        # Recover infinities that computed as NaN+iNaN
        recalc = False
        if (math.isinf(a) or math.isinf(b)) and is_not_zero(c, d):
            # Первый множитель бесконечен
            a = box_infinity(a)
            b = box_infinity(b)
            c = change_nan_to_zero(c)
            d = change_nan_to_zero(d)
            recalc = True
        if (math.isinf(c) or math.isinf(d)) and is_not_zero(a, b):
            # Второй множитель бесконечен
            c = box_infinity(c)
            d = box_infinity(d)
            a = change_nan_to_zero(a)
            b = change_nan_to_zero(b)
            recalc = True
        if not recalc and (
            math.isinf(ac) or math.isinf(bd) or math.isinf(ad) or math.isinf(bc)
        ):
            # Переполнение частичных произведений
            a = change_nan_to_zero(a)
            b = change_nan_to_zero(b)
            c = change_nan_to_zero(c)
            d = change_nan_to_zero(d)
            recalc = True
        if recalc:
            x = math.inf * (a * c - b * d)
            y = math.inf * (a * d + b * c)

    return (x, y)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divide(re1: float, im1: float, re2: float, im2: float) -> ComplexPair:
    """
    Частное (re1 + i im1) / (re2 + i im2).

    Returns:
        Пара (real, imaginary); деление на комплексный ноль совпадает с
        делением на вещественный ±0.0
    """
    a, b, c, d = re1, im1, re2, im2
    ilogbw = 0

    # Масштабирование делителя в [1, 2)
    exponent = get_scale(c, d)
    if exponent <= MAX_EXPONENT:
        ilogbw = exponent
        c = scalb(c, -ilogbw)
        d = scalb(d, -ilogbw)
    denom = c * c + d * d

    # (ac + bd) может переполниться при (a, b) > MAX_VALUE / 4
    if get_max_exponent(a, b) > MAX_EXPONENT - 2:
        ilogbw -= 2
        a /= 4.0
        b /= 4.0

    x = scalb(safe_divide(a * c + b * d, denom), -ilogbw)
    y = scalb(safe_divide(b * c - a * d, denom), -ilogbw)

    # Recover infinities and zeros that computed as NaN+iNaN:
    # nonzero/zero, infinite/finite, finite/infinite
    if math.isnan(x) and math.isnan(y):
        if denom == 0.0 and (not math.isnan(a) or not math.isnan(b)):
            # nonzero/zero: как деление на вещественный ноль
            x = math.copysign(math.inf, c) * a
            y = math.copysign(math.inf, c) * b
        elif (math.isinf(a) or math.isinf(b)) and math.isfinite(c) and math.isfinite(d):
            # infinite/finite
            a = box_infinity(a)
            b = box_infinity(b)
            x = math.inf * (a * c + b * d)
            y = math.inf * (b * c - a * d)
        elif (math.isinf(c) or math.isinf(d)) and math.isfinite(a) and math.isfinite(b):
            # finite/infinite
            c = box_infinity(c)
            d = box_infinity(d)
            x = 0.0 * (a * c + b * d)
            y = 0.0 * (b * c - a * d)

    return (x, y)
