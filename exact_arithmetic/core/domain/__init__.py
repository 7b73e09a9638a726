"""
Domain models and value objects.

Structured (JSON) representation of exact rational values.
"""

from exact_arithmetic.core.domain.rational_value import RationalValue

__all__ = [
    "RationalValue",
]
