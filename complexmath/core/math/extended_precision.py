"""
Extended Precision — error-free transformations (EFT) для double

Алгоритмы Dekker (1971) и Shewchuk (1997) для вычисления результата
операции вместе с его точной ошибкой округления:
- split: разложение double на неперекрывающиеся high/low части (26 + 27 бит)
- square_low / product_low: точная ошибка округления x*x и a*b
- two_sum / fast_two_sum: точная ошибка округления a + b
- x2y2m1: x^2 + y^2 - 1 без катастрофического сокращения вблизи 1
- x2y2: x^2 + y^2 с удвоенной точностью (ядро hypot)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Только round-to-nearest-even арифметика double (CPython float)
2. Порядок операций фиксирован: любая "алгебраическая оптимизация" ломает EFT
3. Функции без ветвлений, кроме явно документированных
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# 2^27 + 1: множитель Dekker split для 53-битной мантиссы
MULTIPLIER: Final[float] = 1.34217729e8


# =============================================================================
# SPLIT MULTIPLICATION
# =============================================================================


def split_high(a: float) -> float:
    """
    Старшая часть Dekker split.

    Значение a раскладывается как a = high + low, где high имеет не более
    26 значащих бит, а low = a - high точно представимо.

    Args:
        a: Значение (должно быть < 2^996 по модулю, иначе c переполнится)

    Returns:
        Старшая часть a
    """
    c = MULTIPLIER * a
    return c - (c - a)


def square_low(low: float, high: float, square: float) -> float:
    """
    Ошибка округления квадрата: x*x - fl(x*x).

    Args:
        low: Младшая часть x
        high: Старшая часть x
        square: fl(x*x)

    Returns:
        Точная ошибка округления square
    """
    lh = low * high
    return low * low - (square - high * high - lh - lh)


def product_low(
    a_low: float,
    b_low: float,
    product: float,
    a_high: float,
    b_high: float,
) -> float:
    """
    Ошибка округления произведения: a*b - fl(a*b).

    Returns:
        a_low * b_low - (((product - a_high * b_high) - a_low * b_high) - a_high * b_low)
    """
    return a_low * b_low - (product - a_high * b_high - a_low * b_high - a_high * b_low)


# =============================================================================
# TWO-SUM
# =============================================================================


def fast_two_sum_low(a: float, b: float, x: float) -> float:
    """
    Ошибка округления x = fl(a + b) при условии |a| >= |b| (Dekker).

    Args:
        a: Больший по модулю слагаемый
        b: Меньший по модулю слагаемый
        x: fl(a + b)
    """
    return b - (x - a)


def two_sum_low(a: float, b: float, x: float) -> float:
    """
    Ошибка округления x = fl(a + b) без условий на порядок (Knuth).

    Args:
        a: Первый слагаемый
        b: Второй слагаемый
        x: fl(a + b)
    """
    b_virtual = x - a
    return a - (x - b_virtual) + (b - b_virtual)


def fast_two_sum(a: float, b: float) -> tuple[float, float]:
    """
    (fl(a + b), ошибка округления) при |a| >= |b|.

    Examples:
        >>> fast_two_sum(1.0, 2.0 ** -60)
        (1.0, 8.673617379884035e-19)
    """
    x = a + b
    return x, fast_two_sum_low(a, b, x)


def two_sum(a: float, b: float) -> tuple[float, float]:
    """(fl(a + b), ошибка округления) для произвольного порядка a, b."""
    x = a + b
    return x, two_sum_low(a, b, x)


# =============================================================================
# x^2 + y^2 - 1
# =============================================================================


def sum_x2y2m1(x2_high: float, x2_low: float, y2_high: float, y2_low: float) -> float:
    """
    Expansion-sum x^2 + y^2 - 1 из точных разложений квадратов.

    Сначала строится промежуточная expansion (x^2 - 1), уводящая результат от 1,
    где представление double разрежено; затем в неё "врастают" части y^2.
    Итоговая сумма компонент отличается от точного значения не более чем на 1 ulp.

    Args:
        x2_high: fl(x*x)
        x2_low: Ошибка округления x*x
        y2_high: fl(y*y)
        y2_low: Ошибка округления y*y

    Returns:
        x^2 + y^2 - 1
    """
    # q: текущая сумма
    q = x2_low - 1
    e1 = fast_two_sum_low(-1.0, x2_low, q)
    e3 = q + x2_high
    e2 = two_sum_low(q, x2_high, e3)

    # Grow expansion of f1 into e
    q = y2_low + e1
    e1 = two_sum_low(y2_low, e1, q)
    p = q + e2
    e2 = two_sum_low(q, e2, p)
    e4 = p + e3
    e3 = two_sum_low(p, e3, e4)

    # Grow expansion of f2 into e (starts at e2)
    q = y2_high + e2
    e2 = two_sum_low(y2_high, e2, q)
    p = q + e3
    e3 = two_sum_low(q, e3, p)
    e5 = p + e4
    e4 = two_sum_low(p, e4, e5)

    # Без дистилляции: сумма частей в пределах 1 ulp
    return e1 + e2 + e3 + e4 + e5


def x2y2m1(x: float, y: float) -> float:
    """
    x^2 + y^2 - 1 с высокой точностью вблизи единичной окружности.

    Определяет точность asin/acos/atanh и log вблизи точек ветвления.

    Args:
        x: Больший аргумент, 1 > x >= y >= 0 (x >= 1 допустим, без EFT)
        y: Меньший аргумент

    Returns:
        x^2 + y^2 - 1
    """
    xx = x * x
    yy = y * y
    # Порог 0.5 ниже порога Hull et al: сохраняет монотонность на переключении
    if x < 1 and xx + yy > 0.5:
        x_high = split_high(x)
        x_low = x - x_high
        y_high = split_high(y)
        y_low = y - y_high
        x2_low = square_low(x_low, x_high, xx)
        y2_low = square_low(y_low, y_high, yy)
        return sum_x2y2m1(xx, x2_low, yy, y2_low)
    return (x - 1) * (x + 1) + yy


# =============================================================================
# x^2 + y^2
# =============================================================================


def x2y2(x: float, y: float) -> float:
    """
    x^2 + y^2 суммированием Dekker произведений двойной длины.

    Args:
        x: Больший по модулю аргумент, предварительно масштабированный в (2^-500, 2^500)
        y: Меньший по модулю аргумент

    Returns:
        x^2 + y^2 (максимальная ошибка ~0.86 ulp после sqrt)
    """
    xx = x * x
    yy = y * y

    # Dekker mul12
    x_high = split_high(x)
    x_low = x - x_high
    xx_low = square_low(x_low, x_high, xx)

    y_high = split_high(y)
    y_low = y - y_high
    yy_low = square_low(y_low, y_high, yy)

    # Dekker add2 без проверки порядка: xx >= yy
    r = xx + yy
    return xx - r + yy + yy_low + xx_low + r
