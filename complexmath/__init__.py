"""
complexmath
===========

Complex numbers with IEEE754 / ISO C99 Annex G semantics: exhaustive
special-value tables, overflow-safe scaling and extended-precision summation.

Public API
~~~~~~~~~~
- Value object
    - `Complex`, constants `ZERO`, `ONE`, `I`, `NAN`
- Errors
    - `ComplexFormatError`, `ComplexDomainError`
- Comparison helpers
    - `ulps_equals`, `equals_including_nan`
- Compensated dot product
    - `linear_combination`, `linear_combination_pairs`
- Contracts
    - `validate_complex_value`

Everything else lives in sub-modules and is **not** considered part of the
stable interface.
"""

from complexmath.core.contracts import validate_complex_value
from complexmath.core.domain import (
    NAN,
    ONE,
    ZERO,
    Complex,
    ComplexDomainError,
    ComplexFormatError,
    I,
)
from complexmath.core.math import (
    equals_including_nan,
    linear_combination,
    linear_combination_pairs,
    ulps_equals,
)

__all__ = [
    "Complex",
    "ZERO",
    "ONE",
    "I",
    "NAN",
    "ComplexFormatError",
    "ComplexDomainError",
    "ulps_equals",
    "equals_including_nan",
    "linear_combination",
    "linear_combination_pairs",
    "validate_complex_value",
]

__version__ = "0.1.0"

# Library logging: silent unless the application configures handlers
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
