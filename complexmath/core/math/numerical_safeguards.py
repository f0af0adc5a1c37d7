"""
Numerical Safeguards — IEEE754 total math primitives

Модуль приводит поведение Python float к семантике IEEE754 (и Java/C99):
- Деление на ±0.0 возвращает ±inf или NaN вместо ZeroDivisionError
- Переполнение exp/sinh/cosh/pow возвращает ±inf вместо OverflowError
- Аргументы вне области определения log/sqrt/asin/acos/sin/cos дают NaN
  вместо ValueError

Все комплексные алгоритмы выполняют "опасные" операции только через этот модуль.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Функции тотальны: никогда не бросают исключений для любых float входов
2. NaN/Inf пропагируют по правилам IEEE754 (никакой санитизации)
3. Для "обычных" аргументов результат бит-в-бит совпадает с модулем math
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

INF: Final[float] = math.inf
NAN: Final[float] = math.nan


# =============================================================================
# БЕЗОПАСНОЕ ДЕЛЕНИЕ
# =============================================================================


def safe_divide(numerator: float, denominator: float) -> float:
    """
    Деление по правилам IEEE754.

    Python бросает ZeroDivisionError для x / 0.0; IEEE754 определяет результат:
    - nonzero / ±0  → ±inf (знак = xor знаков операндов)
    - 0 / ±0, NaN / ±0 → NaN

    Args:
        numerator: Числитель
        denominator: Знаменатель (может быть ±0.0, inf, NaN)

    Returns:
        Результат деления по IEEE754

    Examples:
        >>> safe_divide(1.0, 0.0)
        inf
        >>> safe_divide(1.0, -0.0)
        -inf
        >>> safe_divide(0.0, 0.0)
        nan
    """
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return NAN
        return math.copysign(INF, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


# =============================================================================
# ЭКСПОНЕНТА И ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ
# =============================================================================


def safe_exp(x: float) -> float:
    """
    e^x с насыщением до +inf при переполнении.

    Examples:
        >>> safe_exp(0.0)
        1.0
        >>> safe_exp(1000.0)
        inf
    """
    try:
        return math.exp(x)
    except OverflowError:
        return INF


def safe_sinh(x: float) -> float:
    """sinh(x) с насыщением до ±inf при переполнении."""
    try:
        return math.sinh(x)
    except OverflowError:
        return math.copysign(INF, x)


def safe_cosh(x: float) -> float:
    """cosh(x) с насыщением до +inf при переполнении."""
    try:
        return math.cosh(x)
    except OverflowError:
        return INF


def safe_pow(base: float, exponent: float) -> float:
    """
    base^exponent для неотрицательного base.

    Используется только для |z|^(1/n), поэтому знак base не анализируется.

    Args:
        base: Неотрицательное основание (включая +inf и NaN)
        exponent: Показатель

    Returns:
        - 0^negative → +inf
        - переполнение → +inf
        - иначе math.pow
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return INF
    except ValueError:
        if base == 0.0 and exponent < 0:
            return INF
        return NAN


# =============================================================================
# ЛОГАРИФМЫ
# =============================================================================


def safe_log(x: float) -> float:
    """
    Натуральный логарифм по правилам IEEE754.

    Returns:
        - ±0 → -inf
        - x < 0 или NaN → NaN
        - иначе math.log(x)
    """
    if x > 0.0:
        return math.log(x)
    if x == 0.0:
        return -INF
    return NAN


def safe_log10(x: float) -> float:
    """Десятичный логарифм по правилам IEEE754 (аналогично safe_log)."""
    if x > 0.0:
        return math.log10(x)
    if x == 0.0:
        return -INF
    return NAN


def safe_log1p(x: float) -> float:
    """
    log(1 + x) по правилам IEEE754.

    Returns:
        - x == -1 → -inf
        - x < -1 или NaN → NaN
    """
    if x > -1.0:
        return math.log1p(x)
    if x == -1.0:
        return -INF
    return NAN


# =============================================================================
# КОРНИ
# =============================================================================


def safe_sqrt(x: float) -> float:
    """
    Квадратный корень по правилам IEEE754.

    sqrt(-0.0) = -0.0; отрицательный аргумент или NaN → NaN.
    """
    if x >= 0.0:
        return math.sqrt(x)
    return NAN


# =============================================================================
# ТРИГОНОМЕТРИЯ
# =============================================================================


def safe_sin(x: float) -> float:
    """sin(x); для ±inf возвращает NaN (math.sin бросает ValueError)."""
    if math.isinf(x):
        return NAN
    return math.sin(x)


def safe_cos(x: float) -> float:
    """cos(x); для ±inf возвращает NaN."""
    if math.isinf(x):
        return NAN
    return math.cos(x)


def safe_tan(x: float) -> float:
    """tan(x); для ±inf возвращает NaN."""
    if math.isinf(x):
        return NAN
    return math.tan(x)


def safe_asin(x: float) -> float:
    """asin(x); вне [-1, 1] возвращает NaN."""
    if -1.0 <= x <= 1.0:
        return math.asin(x)
    return NAN


def safe_acos(x: float) -> float:
    """acos(x); вне [-1, 1] возвращает NaN."""
    if -1.0 <= x <= 1.0:
        return math.acos(x)
    return NAN
