"""
Contract Validation Module

JSON Schema контракты для обмена рациональными числами.
"""

from .validators import (
    LITERAL_SCHEMA_PATTERN,
    SCHEMA_DIR,
    ContractValidator,
    RationalLiteralValidator,
    RationalValidator,
    SchemaLoader,
    rational_literal_schema,
    validate_rational,
    validate_rational_literal,
)

__all__ = [
    # Constants
    "LITERAL_SCHEMA_PATTERN",
    "SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RationalValidator",
    "RationalLiteralValidator",
    # Functions
    "rational_literal_schema",
    "validate_rational",
    "validate_rational_literal",
]
