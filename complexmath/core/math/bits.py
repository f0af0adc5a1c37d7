"""
Bits — IEEE754 bit-level primitives для float64

Модуль предоставляет доступ к битовому представлению double:
- Реинтерпретация float <-> 64-битное целое (беззнаковое и знаковое)
- Детекция знака с учётом -0.0
- Извлечение несмещённой экспоненты
- Точное масштабирование на степень двойки (scalb)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все функции тотальны для любых битовых шаблонов, включая NaN/Inf
2. -0.0 и +0.0 различаются по битам
3. scalb не вносит промежуточного округления
"""

import math
import struct
import sys
from typing import Final

# =============================================================================
# IEEE754 КОНСТАНТЫ
# =============================================================================

# Смещение экспоненты double
EXPONENT_OFFSET: Final[int] = 1023

# Максимальная несмещённая экспонента нормализованного числа
MAX_EXPONENT: Final[int] = 1023

# Минимальная несмещённая экспонента нормализованного числа
MIN_EXPONENT: Final[int] = -1022

# Наименьшее положительное нормализованное число (2^-1022)
MIN_NORMAL: Final[float] = sys.float_info.min

# Наибольшее конечное число
MAX_VALUE: Final[float] = sys.float_info.max

# Маска для сброса знакового бита
UNSIGN_MASK: Final[int] = 0x7FFF_FFFF_FFFF_FFFF

# Маска мантиссы (52 бита)
MANTISSA_MASK: Final[int] = 0x000F_FFFF_FFFF_FFFF

# Маска знакового бита
SIGN_MASK: Final[int] = 0x8000_0000_0000_0000

# Битовый шаблон канонического NaN
CANONICAL_NAN_BITS: Final[int] = 0x7FF8_0000_0000_0000

# Маска для отбрасывания младших 27 бит мантиссы
HIGH_PART_MASK: Final[int] = 0xFFFF_FFFF_F800_0000

_UINT64_MASK: Final[int] = 0xFFFF_FFFF_FFFF_FFFF


# =============================================================================
# РЕИНТЕРПРЕТАЦИЯ
# =============================================================================


def double_bits(value: float) -> int:
    """
    Беззнаковый 64-битный шаблон double (raw, NaN payload сохраняется).

    Examples:
        >>> hex(double_bits(1.0))
        '0x3ff0000000000000'
        >>> hex(double_bits(-0.0))
        '0x8000000000000000'
    """
    return struct.unpack("<Q", struct.pack("<d", value))[0]


def signed_bits(value: float) -> int:
    """
    Знаковый (two's complement) 64-битный шаблон double.

    Соответствует Java Double.doubleToRawLongBits.
    """
    return struct.unpack("<q", struct.pack("<d", value))[0]


def bits_to_double(bits: int) -> float:
    """Обратная реинтерпретация беззнакового 64-битного шаблона в double."""
    return struct.unpack("<d", struct.pack("<Q", bits & _UINT64_MASK))[0]


def canonical_bits(value: float) -> int:
    """
    Битовый шаблон с канонизацией NaN.

    Любой NaN (с любым знаком и payload) отображается в CANONICAL_NAN_BITS.
    Используется для равенства и хеширования комплексных значений.
    """
    if math.isnan(value):
        return CANONICAL_NAN_BITS
    return double_bits(value)


# =============================================================================
# ЗНАК
# =============================================================================

NEGATIVE_ZERO_BITS: Final[int] = double_bits(-0.0)


def is_negative(value: float) -> bool:
    """
    Проверка отрицательности с учётом -0.0.

    Returns:
        True если value < 0 или value == -0.0; False для любого NaN

    Examples:
        >>> is_negative(-0.0)
        True
        >>> is_negative(0.0)
        False
    """
    return value < 0 or double_bits(value) == NEGATIVE_ZERO_BITS


def is_pos_infinite(value: float) -> bool:
    """True только для +inf."""
    return value == math.inf


def is_pos_finite(value: float) -> bool:
    """True для value <= MAX_VALUE (отрицательные включительно, NaN исключён)."""
    return value <= MAX_VALUE


# =============================================================================
# ЭКСПОНЕНТА И МАСШТАБИРОВАНИЕ
# =============================================================================


def get_exponent(value: float) -> int:
    """
    Несмещённая экспонента double (аналог Java Math.getExponent).

    Returns:
        - MIN_EXPONENT - 1 (-1023) для нуля и субнормальных чисел
        - MAX_EXPONENT + 1 (1024) для inf и NaN
        - иначе floor(log2(|value|))
    """
    return ((double_bits(value) >> 52) & 0x7FF) - EXPONENT_OFFSET


def scalb(value: float, scale_factor: int) -> float:
    """
    Точное value * 2^scale_factor.

    Результат округляется только при попадании в субнормальный диапазон.
    При переполнении возвращается ±inf (math.ldexp бросает OverflowError).

    Examples:
        >>> scalb(1.0, 10)
        1024.0
        >>> scalb(1.0, 2000)
        inf
    """
    try:
        return math.ldexp(value, scale_factor)
    except OverflowError:
        return math.copysign(math.inf, value)


def high_part(value: float) -> float:
    """
    Старшая часть double: младшие 27 бит мантиссы обнулены.

    Произведение двух старших частей точно представимо в double.
    """
    return bits_to_double(double_bits(value) & HIGH_PART_MASK)


def count_leading_zeros(bits: int) -> int:
    """Количество ведущих нулей 64-битного беззнакового значения."""
    return 64 - (bits & _UINT64_MASK).bit_length()
