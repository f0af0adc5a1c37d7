"""
Domain models and value objects.

Contains the immutable Complex value object, its named constants and the
domain errors raised by parsing and root extraction.
"""

from complexmath.core.domain.complex import (
    FORMAT_END,
    FORMAT_MIN_LEN,
    FORMAT_SEP,
    FORMAT_START,
    I,
    NAN,
    ONE,
    ZERO,
    Complex,
    ComplexDomainError,
    ComplexFormatError,
)

__all__ = [
    # Value object
    "Complex",
    # Constants
    "ZERO",
    "ONE",
    "I",
    "NAN",
    # Text format
    "FORMAT_START",
    "FORMAT_END",
    "FORMAT_SEP",
    "FORMAT_MIN_LEN",
    # Exceptions
    "ComplexFormatError",
    "ComplexDomainError",
]
