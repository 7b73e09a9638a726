"""
Core math modules для exact-arithmetic

Точные рациональные числа и вспомогательные примитивы.
"""

# GCD
from exact_arithmetic.core.math.gcd import gcd

# Numerical Safeguards
from exact_arithmetic.core.math.numerical_safeguards import (
    FLOAT_SCALE_MAX,
    is_valid_float,
    validate_finite,
    validate_positive,
    validate_scale,
)

# Rational
from exact_arithmetic.core.math.rational import (
    FLOAT_SCALING_PRECISION,
    DivideByZeroError,
    Rational,
    RationalFormatError,
    format_rational,
    normalize,
    parse_rational,
)

__all__ = [
    # GCD
    "gcd",
    # Numerical Safeguards — Constants
    "FLOAT_SCALE_MAX",
    # Numerical Safeguards — Validation
    "is_valid_float",
    "validate_finite",
    "validate_positive",
    "validate_scale",
    # Rational — Constants
    "FLOAT_SCALING_PRECISION",
    # Rational — Exceptions
    "DivideByZeroError",
    "RationalFormatError",
    # Rational — Types
    "Rational",
    # Rational — Functions
    "format_rational",
    "normalize",
    "parse_rational",
]
