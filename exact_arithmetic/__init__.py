"""
exact-arithmetic — точные рациональные числа без ошибок округления float.
"""

from exact_arithmetic.core.math import (
    DivideByZeroError,
    Rational,
    RationalFormatError,
    format_rational,
    gcd,
    parse_rational,
)

__version__ = "1.0.0"

__all__ = [
    "DivideByZeroError",
    "Rational",
    "RationalFormatError",
    "format_rational",
    "gcd",
    "parse_rational",
]
