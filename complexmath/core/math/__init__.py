"""
Core math modules для complexmath

Численные алгоритмы комплексных функций над парами float (real, imaginary)
с семантикой IEEE754 / ISO C99 Annex G.
"""

# Numerical Safeguards (IEEE754 total primitives)
from complexmath.core.math.numerical_safeguards import (
    safe_acos,
    safe_asin,
    safe_cos,
    safe_cosh,
    safe_divide,
    safe_exp,
    safe_log,
    safe_log1p,
    safe_log10,
    safe_pow,
    safe_sin,
    safe_sinh,
    safe_sqrt,
    safe_tan,
)

# Bits
from complexmath.core.math.bits import (
    MAX_VALUE,
    MIN_NORMAL,
    canonical_bits,
    double_bits,
    get_exponent,
    is_negative,
    scalb,
    signed_bits,
)

# Hypot / Extended precision
from complexmath.core.math.extended_precision import x2y2, x2y2m1
from complexmath.core.math.hypot import hypot

# Pairs
from complexmath.core.math.pairs import (
    NAN_PAIR,
    ComplexPair,
    PairConstructor,
    cartesian,
    multiply_negative_i,
)

# Precision (ulps comparison)
from complexmath.core.math.precision import (
    DEFAULT_MAX_ULPS,
    compare_to,
    compare_to_ulps,
    equals_eps,
    equals_including_nan,
    equals_including_nan_eps,
    equals_with_relative_tolerance,
    representable_delta,
    ulps_equals,
)

# Linear Combination
from complexmath.core.math.linear_combination import (
    linear_combination,
    linear_combination_pairs,
)

__all__ = [
    # Numerical Safeguards
    "safe_acos",
    "safe_asin",
    "safe_cos",
    "safe_cosh",
    "safe_divide",
    "safe_exp",
    "safe_log",
    "safe_log1p",
    "safe_log10",
    "safe_pow",
    "safe_sin",
    "safe_sinh",
    "safe_sqrt",
    "safe_tan",
    # Bits
    "MAX_VALUE",
    "MIN_NORMAL",
    "canonical_bits",
    "double_bits",
    "get_exponent",
    "is_negative",
    "scalb",
    "signed_bits",
    # Hypot / Extended precision
    "hypot",
    "x2y2",
    "x2y2m1",
    # Pairs
    "NAN_PAIR",
    "ComplexPair",
    "PairConstructor",
    "cartesian",
    "multiply_negative_i",
    # Precision
    "DEFAULT_MAX_ULPS",
    "compare_to",
    "compare_to_ulps",
    "equals_eps",
    "equals_including_nan",
    "equals_including_nan_eps",
    "equals_with_relative_tolerance",
    "representable_delta",
    "ulps_equals",
    # Linear Combination
    "linear_combination",
    "linear_combination_pairs",
]
