"""
Linear Combination — скалярное произведение с компенсацией ошибок

sum(a[i] * b[i]) с точностью, близкой к вычислению с удвоенной разрядностью:
каждое произведение расщепляется Dekker split (bits.high_part), ошибки
округления произведений и частичных сумм накапливаются отдельно и
добавляются в конце.

Ogita, Rump, Oishi (2005) "Accurate sum and dot product".

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Если компенсированный результат NaN (inf в split или NaN коэффициенты),
   возвращается наивная сумма, IEEE754 определяет результат
2. Последовательности разной длины отвергаются ValueError
"""

import logging
import math
from typing import Sequence

from complexmath.core.math.bits import high_part
from complexmath.core.math.extended_precision import product_low

logger = logging.getLogger(__name__)


def linear_combination(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Компенсированное скалярное произведение sum(a[i] * b[i]).

    Args:
        a: Коэффициенты (непустая последовательность)
        b: Коэффициенты той же длины

    Returns:
        Сумма произведений

    Raises:
        ValueError: Если len(a) != len(b)

    Examples:
        >>> linear_combination([1.0, 2.0], [3.0, 4.0])
        11.0
    """
    if len(a) != len(b):
        logger.debug("linear_combination dimension mismatch: %d != %d", len(a), len(b))
        raise ValueError(f"Dimension mismatch: {len(a)} != {len(b)}")

    length = len(a)
    if length == 0:
        return 0.0
    if length == 1:
        # Скалярное умножение
        return a[0] * b[0]

    prod_high: list[float] = []
    prod_low_sum = 0.0
    for ai, bi in zip(a, b):
        a_high = high_part(ai)
        a_low = ai - a_high
        b_high = high_part(bi)
        b_low = bi - b_high
        product = ai * bi
        prod_high.append(product)
        prod_low_sum += product_low(a_low, b_low, product, a_high, b_high)

    prod_high_cur = prod_high[0]
    prod_high_next = prod_high[1]
    s_high_prev = prod_high_cur + prod_high_next
    s_prime = s_high_prev - prod_high_next
    s_low_sum = (prod_high_next - (s_high_prev - s_prime)) + (prod_high_cur - s_prime)

    for i in range(1, length - 1):
        prod_high_next = prod_high[i + 1]
        s_high_cur = s_high_prev + prod_high_next
        s_prime = s_high_cur - prod_high_next
        s_low_sum += (prod_high_next - (s_high_cur - s_prime)) + (s_high_prev - s_prime)
        s_high_prev = s_high_cur

    result = s_high_prev + (prod_low_sum + s_low_sum)

    if math.isnan(result):
        # inf в split или NaN коэффициенты: наивная сумма
        result = 0.0
        for ai, bi in zip(a, b):
            result += ai * bi

    return result


def linear_combination_pairs(*terms: float) -> float:
    """
    Компенсированная сумма a1*b1 + a2*b2 + ... по плоскому списку пар.

    Args:
        *terms: a1, b1, a2, b2, ... (чётное число значений, минимум 2)

    Raises:
        ValueError: Если число значений нечётно или равно нулю

    Examples:
        >>> linear_combination_pairs(2.0, 3.0, 4.0, 5.0)
        26.0
    """
    if not terms or len(terms) % 2 != 0:
        logger.debug("linear_combination_pairs got %d terms", len(terms))
        raise ValueError(f"Expected an even, non-zero number of terms, got {len(terms)}")
    return linear_combination(terms[0::2], terms[1::2])
